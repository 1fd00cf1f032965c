"""
Unit tests for scramble generation.
"""

import random
import unittest
from unittest import mock

from nxcube.cube import CubeState, Face
from nxcube.exceptions import ExhaustedMoveSet, InvalidArgument, InvalidSize
from nxcube.moves import Move
from nxcube.operations import apply_moves
from nxcube.scrambler import (
    DIFFICULTY_LENGTHS,
    Scrambler,
    candidate_moves,
    generate_scramble,
    optimized_length,
)


class TestScrambler(unittest.TestCase):
    """Test cases for the Scrambler."""

    def setUp(self):
        """Set up test fixtures."""
        self.scrambler = Scrambler(seed=1234)

    def assertNoConsecutiveConflicts(self, moves):
        for previous, current in zip(moves, moves[1:]):
            self.assertNotEqual(previous.face, current.face)
            self.assertNotEqual(previous.axis, current.axis)

    def test_generate_length_and_constraints(self):
        moves = self.scrambler.generate(3, 20)
        self.assertEqual(len(moves), 20)
        self.assertNoConsecutiveConflicts(moves)
        self.assertTrue(all(move.layer == 0 for move in moves))

    def test_constraints_hold_for_long_scrambles(self):
        for size in (2, 3, 4, 7):
            self.assertNoConsecutiveConflicts(self.scrambler.generate(size, 300))

    def test_seed_is_reproducible(self):
        self.assertEqual(Scrambler(seed=42).generate(3, 30), Scrambler(seed=42).generate(3, 30))
        self.assertEqual(generate_scramble(4, 15, seed=9), Scrambler(rng=random.Random(9)).generate(4, 15))

    def test_two_by_two_uses_three_faces(self):
        faces = {move.face for move in self.scrambler.generate(2, 200)}
        self.assertTrue(faces <= {Face.FRONT, Face.RIGHT, Face.UP})

    def test_candidate_moves(self):
        self.assertEqual(len(candidate_moves(2)), 9)
        self.assertEqual(len(candidate_moves(3)), 18)
        self.assertEqual(len(candidate_moves(3, include_slices=True)), 18)
        self.assertEqual(len(candidate_moves(4, include_slices=True)), 36)

    def test_include_slices(self):
        moves = self.scrambler.generate(4, 200, include_slices=True)
        self.assertTrue(any(move.is_slice for move in moves))
        self.assertNoConsecutiveConflicts(moves)

    def test_invalid_length(self):
        """Lengths below 1 raise InvalidArgument."""
        for length in (0, -5, 2.5, None):
            with self.assertRaises(InvalidArgument):
                self.scrambler.generate(3, length)

    def test_invalid_size(self):
        with self.assertRaises(InvalidSize):
            self.scrambler.generate(1, 10)

    def test_exhausted_move_set(self):
        with mock.patch("nxcube.scrambler.candidate_moves", return_value=[Move(Face.FRONT)]):
            with self.assertRaises(ExhaustedMoveSet):
                self.scrambler.generate(3, 2)

    def test_difficulty_presets(self):
        self.assertEqual(DIFFICULTY_LENGTHS, {"easy": 10, "medium": 20, "hard": 30, "expert": 50})
        self.assertEqual(len(self.scrambler.generate_for_difficulty(3, "easy")), 10)
        self.assertEqual(len(self.scrambler.generate_for_difficulty(3, "EXPERT")), 50)
        self.assertEqual(len(self.scrambler.generate_for_difficulty(2, "medium")), 20)

    def test_difficulty_scales_with_size(self):
        self.assertEqual(len(self.scrambler.generate_for_difficulty(4, "medium")), 40)
        self.assertEqual(len(self.scrambler.generate_for_difficulty(5, "hard")), 90)
        self.assertEqual(len(self.scrambler.generate_for_difficulty(5, "hard", scale=False)), 30)

    def test_presets_with_slices(self):
        moves = self.scrambler.generate_for_difficulty(4, "expert", include_slices=True)
        self.assertEqual(len(moves), 100)
        self.assertTrue(any(move.is_slice for move in moves))
        self.assertNoConsecutiveConflicts(moves)
        self.assertTrue(any(move.is_slice for move in self.scrambler.generate_optimized(5, include_slices=True)))

    def test_unknown_difficulty(self):
        with self.assertRaises(InvalidArgument):
            self.scrambler.generate_for_difficulty(3, "impossible")

    def test_optimized_length(self):
        self.assertEqual(optimized_length(2), 10)
        self.assertEqual(optimized_length(3), 20)
        self.assertEqual(optimized_length(6), 60)
        self.assertEqual(len(self.scrambler.generate_optimized(4)), 40)

    def test_scramble_applies_moves(self):
        cube = CubeState(3)
        moves = self.scrambler.scramble(cube, 25)
        self.assertEqual(len(moves), 25)
        self.assertEqual(cube, apply_moves(CubeState(3), moves))
        self.assertFalse(cube.is_solved())


if __name__ == '__main__':
    unittest.main()
