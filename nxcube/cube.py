"""
Core cube state: six N x N sticker grids plus accessors.
"""

from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np

from .exceptions import IndexOutOfRange, InvalidMove, InvalidSize, ValidationError


class Color(Enum):
    """The six sticker colors, keyed by their single-letter code."""
    WHITE = "W"
    YELLOW = "Y"
    GREEN = "G"
    BLUE = "B"
    RED = "R"
    ORANGE = "O"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Color":
        """
        Look up a color by its letter code.

        Raises:
            ValueError: If the code is not one of W, Y, G, B, R, O
        """
        return cls(code)


class Face(str, Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"
    FRONT = "F"
    BACK = "B"


class Axis(Enum):
    """Rotation axes; opposite faces share one."""
    X = "x"  # Front / Back
    Y = "y"  # Right / Left
    Z = "z"  # Up / Down


class Mode(Enum):
    SOLVED = "solved"
    BLANK = "blank"


FACES: List[Face] = [Face.UP, Face.DOWN, Face.LEFT, Face.RIGHT, Face.FRONT, Face.BACK]
COLORS: List[Color] = list(Color)

SOLVED_COLORS: Dict[Face, Color] = {
    Face.UP: Color.WHITE,
    Face.DOWN: Color.YELLOW,
    Face.LEFT: Color.GREEN,
    Face.RIGHT: Color.BLUE,
    Face.FRONT: Color.RED,
    Face.BACK: Color.ORANGE,
}

FACE_AXIS: Dict[Face, Axis] = {
    Face.FRONT: Axis.X,
    Face.BACK: Axis.X,
    Face.RIGHT: Axis.Y,
    Face.LEFT: Axis.Y,
    Face.UP: Axis.Z,
    Face.DOWN: Axis.Z,
}

OPPOSITE: Dict[Face, Face] = {
    Face.UP: Face.DOWN,
    Face.DOWN: Face.UP,
    Face.LEFT: Face.RIGHT,
    Face.RIGHT: Face.LEFT,
    Face.FRONT: Face.BACK,
    Face.BACK: Face.FRONT,
}

# Grids store each color as its index in COLORS
_COLOR_INDEX: Dict[Color, int] = {color: i for i, color in enumerate(COLORS)}
GRID_DTYPE = np.int8


def to_face(face) -> Face:
    """
    Normalize a face identifier.

    Args:
        face: A Face member or its letter ('U', 'D', 'L', 'R', 'F', 'B')

    Raises:
        InvalidMove: If the identifier names no face
    """
    if isinstance(face, Face):
        return face
    try:
        return Face(face)
    except ValueError:
        raise InvalidMove(f"Unknown face identifier {face!r}", move=face)


def color_index(color: Color) -> int:
    if not isinstance(color, Color):
        raise TypeError(f"Sticker color must be a Color member, got {type(color).__name__}")
    return _COLOR_INDEX[color]


class CubeState:
    """
    State of an N x N x N cube as six sticker grids.

    Each face grid is seen from outside the cube, laid out as the standard
    unfolded net: U row 0 borders B, D row 0 borders F, the four side faces
    have row 0 along U, and F/R/B/L column 0 borders L/F/R/B respectively.

    `is_solved` only checks that every face is uniform. A hand-colored state
    can pass it without being reachable by legal moves.

    Attributes:
        size (int): Edge length N of the cube
    """

    def __init__(self, size: int = 3, mode: Mode = Mode.SOLVED, fill: Optional[Color] = None):
        """
        Initialize a cube.

        Args:
            size (int): Edge length, at least 2
            mode (Mode): SOLVED paints each face its canonical color, BLANK
                paints every sticker with `fill`
            fill (Color, optional): Filler for BLANK mode (default: the
                configured blank fill color)

        Raises:
            InvalidSize: If size is not an integer of at least 2
        """
        if isinstance(size, bool) or not isinstance(size, int) or size < 2:
            raise InvalidSize(f"Cube size must be an integer of at least 2, got {size!r}", size=size)

        self.size = size

        if mode == Mode.BLANK:
            if fill is None:
                from .config import settings
                fill = Color.from_code(settings.blank_fill_color)
            filler = color_index(fill)
            self._faces = {face: np.full((size, size), filler, dtype=GRID_DTYPE) for face in FACES}
        else:
            self._faces = {
                face: np.full((size, size), _COLOR_INDEX[SOLVED_COLORS[face]], dtype=GRID_DTYPE)
                for face in FACES
            }

    @classmethod
    def create(cls, size: int, mode: Mode = Mode.SOLVED) -> "CubeState":
        return cls(size, mode)

    @classmethod
    def from_faces(cls, size: int, faces: Mapping[Face, Sequence[Sequence[Color]]]) -> "CubeState":
        """
        Build a state from explicit grids.

        Only the shape of the grids is checked here; color counts are the
        Validator's concern.

        Raises:
            ValidationError: If a face is missing or a grid is not size x size
            TypeError: If a cell is not a Color
        """
        cube = cls(size)
        for face in FACES:
            grid = faces.get(face)
            if grid is None:
                raise ValidationError(f"Face {face.value} is missing", face=face.value)
            if len(grid) != size:
                raise ValidationError(
                    f"Face {face.value} has {len(grid)} rows, expected {size}",
                    face=face.value, expected_count=size, actual_count=len(grid),
                )
            for row in grid:
                if len(row) != size:
                    raise ValidationError(
                        f"Face {face.value} has a row of {len(row)} stickers, expected {size}",
                        face=face.value, expected_count=size, actual_count=len(row),
                    )
            cube._faces[face] = np.array(
                [[color_index(color) for color in row] for row in grid], dtype=GRID_DTYPE
            )
        return cube

    def _check_index(self, row: int, col: int):
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise IndexOutOfRange(f"Sticker index must be an integer, got {value!r}", row=row, col=col)
            if value < 0 or value >= self.size:
                raise IndexOutOfRange(
                    f"Sticker ({row}, {col}) is outside a {self.size}x{self.size} face",
                    row=row, col=col,
                )

    def get_sticker(self, face, row: int, col: int) -> Color:
        """
        Get the color of one sticker.

        Raises:
            IndexOutOfRange: If row or col is outside [0, size)
        """
        face = to_face(face)
        self._check_index(row, col)
        return COLORS[int(self._faces[face][row, col])]

    def set_sticker(self, face, row: int, col: int, color: Color):
        """
        Paint one sticker.

        Raises:
            IndexOutOfRange: If row or col is outside [0, size)
            TypeError: If color is not a Color member
        """
        face = to_face(face)
        self._check_index(row, col)
        self._faces[face][row, col] = color_index(color)

    def face(self, face) -> List[List[Color]]:
        """Copy of one face grid as rows of colors."""
        grid = self._faces[to_face(face)]
        return [[COLORS[int(code)] for code in row] for row in grid]

    def color_counts(self) -> Dict[Color, int]:
        """Number of stickers of each color across the whole cube."""
        codes = np.concatenate([self._faces[face].ravel() for face in FACES])
        counts = np.bincount(codes[(codes >= 0) & (codes < len(COLORS))], minlength=len(COLORS))
        return {color: int(counts[i]) for i, color in enumerate(COLORS)}

    def is_solved(self) -> bool:
        """True when every face is a single color (necessary, not sufficient)."""
        return all(np.all(grid == grid[0, 0]) for grid in self._faces.values())

    def clone(self) -> "CubeState":
        """
        Create a deep copy of the cube.

        Returns:
            A new CubeState whose grids share no memory with this one
        """
        twin = CubeState.__new__(CubeState)
        twin.size = self.size
        twin._faces = {face: grid.copy() for face, grid in self._faces.items()}
        return twin

    def to_text(self) -> str:
        """Render the faces in U D L R F B order, one row of letters per line."""
        blocks = []
        for face in FACES:
            lines = [f"{face.value}:"]
            for row in self._faces[face]:
                lines.append(" ".join(COLORS[int(code)].code for code in row))
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)

    def __repr__(self) -> str:
        return f"CubeState(size={self.size})"

    def __str__(self) -> str:
        return f"CubeState(size={self.size})\n{self.to_text()}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubeState):
            return NotImplemented
        return self.size == other.size and all(
            np.array_equal(self._faces[face], other._faces[face]) for face in FACES
        )
