"""
Utility functions: factories and the JSON interchange format.

Interchange schema::

    {"size": N, "faces": {"U": [["W", ...], ...], "D": ..., "L": ..., "R": ..., "F": ..., "B": ...}}
"""

import json
import random
from typing import Any, Dict, List, Optional

from .cube import COLORS, FACES, Color, CubeState, Mode
from .exceptions import InvalidArgument, InvalidSize, ValidationError
from .logging import get_logger
from .validator import validate

logger = get_logger(__name__)


def validate_size(size: int) -> bool:
    """
    Validate that a cube size is acceptable.

    Returns:
        bool: True if size is an integer of at least 2
    """
    return isinstance(size, int) and not isinstance(size, bool) and size >= 2


def create_solved_cube(size: int) -> CubeState:
    return CubeState(size, Mode.SOLVED)


def create_blank_cube(size: int, fill: Optional[Color] = None) -> CubeState:
    """
    Create a cube with every sticker the same color, ready for manual coloring.

    Args:
        size (int): Size of the cube
        fill (Color, optional): Filler color (default: configured blank fill color)
    """
    return CubeState(size, Mode.BLANK, fill)


def random_configuration(size: int, rng: Optional[random.Random] = None) -> CubeState:
    """
    Create a cube with shuffled stickers and exact color counts.

    The result passes validation but is in general not reachable by legal
    moves; use the Scrambler for reachable states.
    """
    if not validate_size(size):
        raise InvalidSize(f"Cube size must be an integer of at least 2, got {size!r}", size=size)
    rng = rng or random.Random()
    stickers = [color for color in COLORS for _ in range(size * size)]
    rng.shuffle(stickers)
    grids = {}
    for index, face in enumerate(FACES):
        chunk = stickers[index * size * size:(index + 1) * size * size]
        grids[face] = [chunk[row * size:(row + 1) * size] for row in range(size)]
    return CubeState.from_faces(size, grids)


def to_dict(cube: CubeState) -> Dict[str, Any]:
    return {
        "size": cube.size,
        "faces": {
            face.value: [[color.code for color in row] for row in cube.face(face)]
            for face in FACES
        },
    }


def to_json(cube: CubeState, indent: Optional[int] = None) -> str:
    return json.dumps(to_dict(cube), indent=indent)


def _parse_faces(size: int, faces: Any) -> Dict[str, List[List[Color]]]:
    if not isinstance(faces, dict):
        raise ValidationError("'faces' must be an object keyed by face letter")

    parsed = {}
    for face in FACES:
        grid = faces.get(face.value)
        if not isinstance(grid, list):
            raise ValidationError(f"Face {face.value} is missing or not a list of rows", face=face.value)
        if len(grid) != size:
            raise ValidationError(
                f"Face {face.value} has {len(grid)} rows, expected {size}",
                face=face.value, expected_count=size, actual_count=len(grid),
            )
        rows = []
        for row in grid:
            if not isinstance(row, list) or len(row) != size:
                raise ValidationError(
                    f"Face {face.value} has a malformed row, expected {size} stickers",
                    face=face.value, expected_count=size,
                    actual_count=len(row) if isinstance(row, list) else None,
                )
            try:
                rows.append([Color.from_code(code) for code in row])
            except ValueError:
                bad = next(code for code in row if code not in [c.code for c in COLORS])
                raise ValidationError(
                    f"Face {face.value} holds unknown color {bad!r}",
                    face=face.value, color=str(bad),
                )
        parsed[face.value] = rows
    return parsed


def from_dict(data: Any) -> CubeState:
    """
    Import a cube from the interchange format.

    The state is fully validated before it is returned; nothing is partially
    applied on failure.

    Raises:
        ValidationError: If the payload is malformed or fails validation
        InvalidSize: If the declared size is below 2
    """
    try:
        if not isinstance(data, dict):
            raise ValidationError("Cube data must be an object with 'size' and 'faces'")
        size = data.get("size")
        if isinstance(size, bool) or not isinstance(size, int):
            raise ValidationError(f"'size' must be an integer, got {size!r}")
        if not validate_size(size):
            raise InvalidSize(f"Cube size must be at least 2, got {size}", size=size)
        cube = CubeState.from_faces(size, _parse_faces(size, data.get("faces")))
        validate(cube)
    except ValidationError as e:
        logger.warning("Rejected cube import", error=e.message, details=e.details)
        raise
    return cube


def from_json(text: str) -> CubeState:
    """
    Raises:
        InvalidArgument: If the text is not JSON
        ValidationError: See `from_dict`
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Invalid JSON: {e}", argument="text")
    return from_dict(data)


def sample_configuration(size: int) -> Dict[str, Any]:
    """
    Demonstration payload: face f, row r, col c gets colors[(f + r + c) % 6].

    Every color lands on exactly size * size stickers across the six faces,
    so the payload validates without being solved.
    """
    return {
        "size": size,
        "faces": {
            face.value: [
                [COLORS[(face_index + row + col) % len(COLORS)].code for col in range(size)]
                for row in range(size)
            ]
            for face_index, face in enumerate(FACES)
        },
    }
