"""
Unit tests for state validation.
"""

import unittest
import numpy as np
from nxcube.cube import Color, CubeState, Face, Mode
from nxcube.exceptions import ValidationError
from nxcube.operations import apply_moves
from nxcube.validator import collect_errors, is_valid, validate


class TestValidator(unittest.TestCase):
    """Test cases for the validator."""

    def test_solved_and_scrambled_are_valid(self):
        for size in (2, 3, 4, 5):
            self.assertIsNone(validate(CubeState(size)))
            self.assertTrue(is_valid(apply_moves(CubeState(size), "R U2 F' L D B'")))

    def test_blank_cube_is_invalid(self):
        errors = collect_errors(CubeState(3, Mode.BLANK, Color.WHITE))
        self.assertEqual(len(errors), 6)
        white = errors[0]
        self.assertEqual(white.color, "W")
        self.assertEqual(white.expected_count, 9)
        self.assertEqual(white.actual_count, 54)

    def test_wrong_color_counts(self):
        cube = CubeState(3)
        cube.set_sticker(Face.UP, 0, 0, Color.YELLOW)
        with self.assertRaises(ValidationError) as ctx:
            validate(cube)
        error = ctx.exception
        self.assertEqual((error.color, error.expected_count, error.actual_count), ("W", 9, 8))
        self.assertEqual(error.details["actual_count"], 8)

        errors = collect_errors(cube)
        self.assertEqual([(e.color, e.actual_count) for e in errors], [("W", 8), ("Y", 10)])

    def test_validation_never_repairs(self):
        cube = CubeState(3)
        cube.set_sticker(Face.FRONT, 1, 1, Color.BLUE)
        before = cube.clone()
        self.assertFalse(is_valid(cube))
        self.assertEqual(cube, before)
        self.assertEqual(cube.get_sticker(Face.FRONT, 1, 1), Color.BLUE)

    def test_bad_grid_shape(self):
        cube = CubeState(3)
        cube._faces[Face.LEFT] = np.zeros((2, 3), dtype=np.int8)
        with self.assertRaises(ValidationError) as ctx:
            validate(cube)
        self.assertEqual(ctx.exception.face, "L")
        self.assertEqual(ctx.exception.actual_count, 6)

    def test_missing_face(self):
        cube = CubeState(2)
        del cube._faces[Face.BACK]
        with self.assertRaises(ValidationError) as ctx:
            validate(cube)
        self.assertEqual(ctx.exception.face, "B")

    def test_stray_code_is_reported(self):
        cube = CubeState(3)
        cube._faces[Face.UP][1, 1] = 7
        errors = collect_errors(cube)
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].face, "U")
        self.assertEqual(errors[0].actual_count, 1)


if __name__ == '__main__':
    unittest.main()
