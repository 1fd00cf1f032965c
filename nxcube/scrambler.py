"""
Random scramble generation.
"""

import random
from typing import Dict, List, Optional

from .config import settings
from .cube import FACE_AXIS, FACES, CubeState, Face
from .exceptions import ExhaustedMoveSet, InvalidArgument, InvalidSize
from .logging import get_logger
from .moves import Move, Turn
from .operations import MoveEngine, engine as default_engine

logger = get_logger(__name__)

DIFFICULTY_LENGTHS: Dict[str, int] = {
    "easy": 10,
    "medium": 20,
    "hard": 30,
    "expert": 50,
}

# A 2x2 has no fixed centers; turning F, R and U alone reaches every state
SMALL_CUBE_FACES: List[Face] = [Face.FRONT, Face.RIGHT, Face.UP]


def _check_size(size: int):
    if isinstance(size, bool) or not isinstance(size, int) or size < 2:
        raise InvalidSize(f"Cube size must be an integer of at least 2, got {size!r}", size=size)


def candidate_moves(size: int, include_slices: bool = False) -> List[Move]:
    """
    Moves a scramble may draw from for a given cube size.

    Args:
        size (int): Cube size
        include_slices (bool): Also offer the layer-1 slices (size 4 and up)

    Returns:
        List[Move]: Every face/turn combination allowed for the size
    """
    _check_size(size)
    faces = SMALL_CUBE_FACES if size == 2 else FACES
    layers = [0, 1] if include_slices and size >= 4 else [0]
    return [Move(face, turn, layer) for layer in layers for face in faces for turn in Turn]


def optimized_length(size: int) -> int:
    """Scramble length scaled to the cube: 10 for 2x2, 20 for 3x3, 10 per layer above."""
    _check_size(size)
    if size == 2:
        return 10
    if size == 3:
        return 20
    return size * 10


class Scrambler:
    """
    Draws move sequences where consecutive moves never share a face or an axis.

    Attributes:
        rng (random.Random): Source of randomness
        engine (MoveEngine): Engine used by `scramble` to apply moves
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None,
                 engine: Optional[MoveEngine] = None):
        if rng is None:
            rng = random.Random(seed if seed is not None else settings.scramble_seed)
        self.rng = rng
        self.engine = engine or default_engine

    def generate(self, size: int, length: int, include_slices: bool = False) -> List[Move]:
        """
        Generate a scramble.

        Args:
            size (int): Cube size
            length (int): Number of moves, at least 1
            include_slices (bool): Allow layer-1 slice moves (size 4 and up)

        Returns:
            List[Move]: `length` moves

        Raises:
            InvalidArgument: If length is below 1
            ExhaustedMoveSet: If no move survives the face/axis filter
        """
        if isinstance(length, bool) or not isinstance(length, int) or length < 1:
            raise InvalidArgument(f"Scramble length must be a positive integer, got {length!r}",
                                  argument="length")
        moves = candidate_moves(size, include_slices)

        scramble: List[Move] = []
        last_face = None
        last_axis = None
        for _ in range(length):
            available = [
                move for move in moves
                if move.face != last_face and FACE_AXIS[move.face] != last_axis
            ]
            if not available:
                raise ExhaustedMoveSet(
                    f"No move left to draw after {len(scramble)} moves on a size {size} cube",
                    details={"size": size, "drawn": len(scramble)},
                )
            move = self.rng.choice(available)
            scramble.append(move)
            last_face = move.face
            last_axis = FACE_AXIS[move.face]

        logger.info("Generated scramble", size=size, length=length, include_slices=include_slices)
        return scramble

    def generate_for_difficulty(self, size: int, difficulty: str, scale: bool = True,
                                include_slices: bool = False) -> List[Move]:
        """
        Generate a scramble from a named preset.

        The preset length is multiplied by max(1, size - 2) when `scale` is set,
        so a 4x4 "medium" scramble is 40 moves. `include_slices` is passed on to
        generate().

        Raises:
            InvalidArgument: If the difficulty is not a known preset
        """
        key = str(difficulty).lower()
        if key not in DIFFICULTY_LENGTHS:
            raise InvalidArgument(
                f"Unknown difficulty {difficulty!r}. Must be one of {', '.join(DIFFICULTY_LENGTHS)}",
                argument="difficulty",
            )
        _check_size(size)
        length = DIFFICULTY_LENGTHS[key]
        if scale:
            length *= max(1, size - 2)
        return self.generate(size, length, include_slices)

    def generate_optimized(self, size: int, include_slices: bool = False) -> List[Move]:
        return self.generate(size, optimized_length(size), include_slices)

    def scramble(self, cube: CubeState, length: Optional[int] = None,
                 include_slices: bool = False) -> List[Move]:
        """
        Generate a scramble and apply it to the cube in place.

        Returns:
            List[Move]: The moves that were applied
        """
        if length is None:
            length = settings.default_scramble_length
        moves = self.generate(cube.size, length, include_slices)
        self.engine.apply_sequence(cube, moves)
        return moves


def generate_scramble(size: int, length: int, seed: Optional[int] = None) -> List[Move]:
    """Convenience wrapper around Scrambler(seed).generate(size, length)."""
    return Scrambler(seed=seed).generate(size, length)
