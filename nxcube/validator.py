"""
Structural checks on a cube state.

Problems are reported, never repaired: the caller decides what to do with a
state that fails.
"""

from typing import List

import numpy as np

from .cube import COLORS, FACES, CubeState
from .exceptions import ValidationError


def collect_errors(cube: CubeState) -> List[ValidationError]:
    """
    Check a cube and return every violation found.

    Checks, in order: all six faces present, each grid size x size, every
    cell a known color, and each color appearing exactly size^2 times.
    Color counts are only checked once the grids themselves are sound.
    """
    size = cube.size
    errors: List[ValidationError] = []

    for face in FACES:
        grid = cube._faces.get(face)
        if grid is None:
            errors.append(ValidationError(f"Face {face.value} is missing", face=face.value))
            continue
        grid = np.asarray(grid)
        if grid.shape != (size, size):
            errors.append(ValidationError(
                f"Face {face.value} has shape {grid.shape}, expected ({size}, {size})",
                face=face.value, expected_count=size * size, actual_count=int(grid.size),
            ))
            continue
        unknown = int(np.count_nonzero((grid < 0) | (grid >= len(COLORS))))
        if unknown:
            errors.append(ValidationError(
                f"Face {face.value} holds {unknown} stickers with no valid color",
                face=face.value, expected_count=0, actual_count=unknown,
            ))

    if errors:
        return errors

    expected = size * size
    for color, count in cube.color_counts().items():
        if count != expected:
            errors.append(ValidationError(
                f"Color {color.code} appears {count} times, expected {expected}",
                color=color.code, expected_count=expected, actual_count=count,
            ))
    return errors


def validate(cube: CubeState) -> None:
    """
    Validate a cube state.

    Raises:
        ValidationError: The first violation found
    """
    errors = collect_errors(cube)
    if errors:
        raise errors[0]


def is_valid(cube: CubeState) -> bool:
    return not collect_errors(cube)
