"""
Move engine: face rotation plus boundary sticker cycling, driven by one
adjacency table for every face and every cube size.
"""

from collections import namedtuple
from enum import Enum
from typing import Dict, Iterable, Tuple, Union

import numpy as np

from .cube import CubeState, Face, to_face
from .exceptions import InvalidLayer, InvalidMove
from .logging import get_logger
from .moves import MoveLike, Turn, parse_sequence, to_move

logger = get_logger(__name__)


class Line(Enum):
    ROW = "row"
    COL = "col"


class Edge(Enum):
    NEAR = "near"  # index = depth
    FAR = "far"    # index = size - 1 - depth


Strip = namedtuple("Strip", ["face", "line", "edge", "reversed"])
Strip.__doc__ = """
One boundary row or column of a neighbor face.

Element k of a strip is the sticker at position k along the line, or at
size - 1 - k when `reversed` is set. Within a cycle, element k of strip i
moves to element k of strip i + 1.
"""

U, D, L, R, F, B = Face.UP, Face.DOWN, Face.LEFT, Face.RIGHT, Face.FRONT, Face.BACK
ROW, COL = Line.ROW, Line.COL
NEAR, FAR = Edge.NEAR, Edge.FAR

_CLOCKWISE: Dict[Face, Tuple[Strip, ...]] = {
    U: (Strip(F, ROW, NEAR, False), Strip(L, ROW, NEAR, False),
        Strip(B, ROW, NEAR, False), Strip(R, ROW, NEAR, False)),
    D: (Strip(F, ROW, FAR, False), Strip(R, ROW, FAR, False),
        Strip(B, ROW, FAR, False), Strip(L, ROW, FAR, False)),
    F: (Strip(U, ROW, FAR, False), Strip(R, COL, NEAR, False),
        Strip(D, ROW, NEAR, True), Strip(L, COL, FAR, True)),
    B: (Strip(U, ROW, NEAR, False), Strip(L, COL, NEAR, True),
        Strip(D, ROW, FAR, True), Strip(R, COL, FAR, False)),
    R: (Strip(F, COL, FAR, False), Strip(U, COL, FAR, False),
        Strip(B, COL, NEAR, True), Strip(D, COL, FAR, False)),
    L: (Strip(U, COL, NEAR, False), Strip(F, COL, NEAR, False),
        Strip(D, COL, NEAR, False), Strip(B, COL, FAR, True)),
}

# Counter-clockwise runs the same cycle backwards
ADJACENCY: Dict[Tuple[Face, Turn], Tuple[Strip, ...]] = {}
for _face, _strips in _CLOCKWISE.items():
    ADJACENCY[(_face, Turn.CW)] = _strips
    ADJACENCY[(_face, Turn.CCW)] = tuple(reversed(_strips))


def strip_indices(strip: Strip, size: int, depth: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Row and column index arrays addressing a strip at the given depth.

    Args:
        strip (Strip): Adjacency table entry
        size (int): Cube size
        depth (int): Layer depth, 0 for the outer layer

    Returns:
        Tuple[np.ndarray, np.ndarray]: (rows, cols), each of length size
    """
    index = depth if strip.edge is Edge.NEAR else size - 1 - depth
    positions = np.arange(size)
    if strip.reversed:
        positions = positions[::-1]
    fixed = np.full(size, index)
    if strip.line is Line.ROW:
        return fixed, positions
    return positions, fixed


def check_layer(size: int, layer: int):
    """
    Raises:
        InvalidLayer: If the layer does not exist as a turnable slice
    """
    if isinstance(layer, bool) or not isinstance(layer, int):
        raise InvalidLayer(f"Layer must be an integer, got {layer!r}", layer=layer, size=size)
    if layer < 0 or layer * 2 >= size:
        raise InvalidLayer(
            f"Layer {layer} does not exist on a cube of size {size}", layer=layer, size=size
        )
    if layer > 0 and size < 4:
        raise InvalidLayer(
            f"Slice moves need a cube of size 4 or more, got {size}", layer=layer, size=size
        )


class MoveEngine:
    """
    Applies moves to a CubeState in place.

    Attributes:
        adjacency (dict): (face, direction) -> four boundary strips in cycle order
    """

    def __init__(self, adjacency: Dict[Tuple[Face, Turn], Tuple[Strip, ...]] = None):
        self.adjacency = adjacency or ADJACENCY

    def apply(self, cube: CubeState, move: MoveLike) -> CubeState:
        """
        Apply one move to a cube in place.

        Args:
            cube (CubeState): The cube to mutate
            move: A Move or a notation token such as "R'" or "u2"

        Returns:
            CubeState: The same cube, for chaining

        Raises:
            InvalidMove: If the move names no face or turn
            InvalidLayer: If the slice does not exist on this cube
        """
        move = to_move(move)
        face = self._check_move(cube, move)

        if move.turn is Turn.HALF:
            self._quarter(cube, face, Turn.CW, move.layer)
            self._quarter(cube, face, Turn.CW, move.layer)
        else:
            self._quarter(cube, face, move.turn, move.layer)
        return cube

    def apply_sequence(self, cube: CubeState, moves: Union[str, Iterable[MoveLike]]) -> CubeState:
        """
        Apply a sequence of moves in place.

        The whole sequence is parsed before the first move is applied, so a
        bad token, face, turn or layer leaves the cube untouched.
        """
        parsed = parse_sequence(moves)
        for move in parsed:
            self._check_move(cube, move)
        for move in parsed:
            self.apply(cube, move)
        logger.debug("Applied move sequence", size=cube.size, count=len(parsed))
        return cube

    @staticmethod
    def _check_move(cube: CubeState, move) -> Face:
        face = to_face(move.face)
        if not isinstance(move.turn, Turn):
            raise InvalidMove(f"Unknown turn {move.turn!r}", move=move)
        check_layer(cube.size, move.layer)
        return face

    def _quarter(self, cube: CubeState, face: Face, turn: Turn, depth: int):
        grids = cube._faces
        if depth == 0:
            # np.rot90 turns counter-clockwise for positive k
            grids[face] = np.rot90(grids[face], -1 if turn is Turn.CW else 1).copy()
        self._cycle(cube, self.adjacency[(face, turn)], depth)

    @staticmethod
    def _cycle(cube: CubeState, strips: Tuple[Strip, ...], depth: int):
        grids = cube._faces
        indices = [strip_indices(strip, cube.size, depth) for strip in strips]
        values = [grids[strip.face][rows, cols] for strip, (rows, cols) in zip(strips, indices)]
        for i, strip_values in enumerate(values):
            target = (i + 1) % len(strips)
            rows, cols = indices[target]
            grids[strips[target].face][rows, cols] = strip_values


engine = MoveEngine()


def apply_move(cube: CubeState, move: MoveLike) -> CubeState:
    """
    Apply one move to a copy of a cube.

    Returns:
        CubeState: A new cube; the input is not modified
    """
    return engine.apply(cube.clone(), move)


def apply_moves(cube: CubeState, moves: Union[str, Iterable[MoveLike]]) -> CubeState:
    """
    Apply a sequence of moves to a copy of a cube.

    Example:
        >>> c = CubeState(3)
        >>> apply_moves(c, "R U R' U'").is_solved()
        False
    """
    return engine.apply_sequence(cube.clone(), moves)
