"""
Tests for the HTTP service.
"""

import unittest
from fastapi.testclient import TestClient

from main import app
from nxcube.config import settings
from nxcube.cube import CubeState
from nxcube.moves import invert_sequence
from nxcube.utils import to_dict


class TestCubeAPI(unittest.TestCase):
    """Test cases for the cube endpoints."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_info(self):
        response = self.client.get("/api/v1/info")
        self.assertEqual(response.status_code, 200)
        self.assertIn("scramble", response.json()["endpoints"])

    def test_solved(self):
        response = self.client.get("/api/v1/cube/solved", params={"size": 4})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), to_dict(CubeState(4)))

    def test_solved_default_size(self):
        response = self.client.get("/api/v1/cube/solved")
        self.assertEqual(response.json()["size"], settings.default_cube_size)

    def test_size_limit(self):
        response = self.client.get("/api/v1/cube/solved", params={"size": settings.max_cube_size + 1})
        self.assertEqual(response.status_code, 422)

    def test_apply_moves_and_undo(self):
        response = self.client.post("/api/v1/cube/moves", json={
            "state": to_dict(CubeState(3)),
            "moves": "F R U R' U' F'",
        })
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertFalse(body["solved"])
        self.assertEqual(body["applied"], ["F", "R", "U", "R'", "U'", "F'"])

        response = self.client.post("/api/v1/cube/moves", json={
            "state": body["state"],
            "moves": ["F", "U", "R", "U'", "R'", "F'"],
        })
        self.assertTrue(response.json()["solved"])
        self.assertEqual(response.json()["state"], to_dict(CubeState(3)))

    def test_invalid_move(self):
        response = self.client.post("/api/v1/cube/moves", json={
            "state": to_dict(CubeState(3)),
            "moves": "R X",
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error_code"], "InvalidMove")

    def test_slice_on_small_cube(self):
        response = self.client.post("/api/v1/cube/moves", json={
            "state": to_dict(CubeState(3)),
            "moves": "r",
        })
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error_code"], "InvalidLayer")

    def test_moves_reject_invalid_state(self):
        state = to_dict(CubeState(3))
        state["faces"]["F"][0][0] = "W"
        response = self.client.post("/api/v1/cube/moves", json={"state": state, "moves": "R"})
        self.assertEqual(response.status_code, 422)
        body = response.json()
        self.assertEqual(body["error_code"], "ValidationError")
        self.assertEqual(body["details"]["color"], "W")

    def test_validate(self):
        response = self.client.post("/api/v1/cube/validate", json=to_dict(CubeState(2)))
        self.assertEqual(response.json(), {"valid": True, "errors": []})

        state = to_dict(CubeState(2))
        state["faces"]["U"][1][1] = "K"
        body = self.client.post("/api/v1/cube/validate", json=state).json()
        self.assertFalse(body["valid"])
        self.assertEqual(body["errors"][0]["face"], "U")
        self.assertEqual(body["errors"][0]["color"], "K")

    def test_scramble(self):
        response = self.client.post("/api/v1/cube/scramble", json={"size": 3, "length": 20, "seed": 11})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(len(body["moves"]), 20)

        again = self.client.post("/api/v1/cube/scramble", json={"size": 3, "length": 20, "seed": 11}).json()
        self.assertEqual(again, body)

        undo = self.client.post("/api/v1/cube/moves", json={
            "state": body["state"],
            "moves": [move.notation for move in invert_sequence(body["moves"])],
        }).json()
        self.assertTrue(undo["solved"])

    def test_scramble_difficulty(self):
        body = self.client.post("/api/v1/cube/scramble", json={"size": 4, "difficulty": "easy"}).json()
        self.assertEqual(len(body["moves"]), 20)

        body = self.client.post("/api/v1/cube/scramble", json={"size": 2}).json()
        self.assertEqual(len(body["moves"]), 10)

    def test_scramble_bad_request(self):
        response = self.client.post("/api/v1/cube/scramble", json={"size": 3, "length": 0})
        self.assertEqual(response.status_code, 422)

    def test_scramble_length_limit(self):
        """Scrambles longer than the configured maximum are refused."""
        response = self.client.post(
            "/api/v1/cube/scramble", json={"size": 3, "length": settings.max_moves + 1}
        )
        self.assertEqual(response.status_code, 422)

        response = self.client.post("/api/v1/cube/scramble", json={"size": 3, "length": settings.max_moves})
        self.assertEqual(response.status_code, 200)

    def test_move_count_limit(self):
        response = self.client.post("/api/v1/cube/moves", json={
            "state": to_dict(CubeState(3)),
            "moves": ["R"] * (settings.max_moves + 1),
        })
        self.assertEqual(response.status_code, 422)

    def test_scramble_difficulty_with_slices(self):
        body = self.client.post("/api/v1/cube/scramble", json={
            "size": 4, "difficulty": "hard", "include_slices": True, "seed": 5,
        }).json()
        self.assertEqual(len(body["moves"]), 60)
        self.assertTrue(any(move.islower() for move in body["moves"]))


if __name__ == '__main__':
    unittest.main()
