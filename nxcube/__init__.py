"""
nxcube
State and move engine for N x N x N twisty cubes.
"""

__version__ = "0.1.0"

from .cube import Axis, Color, CubeState, Face, Mode
from .exceptions import (
    CubeError,
    ExhaustedMoveSet,
    IndexOutOfRange,
    InvalidArgument,
    InvalidLayer,
    InvalidMove,
    InvalidSize,
    ValidationError,
)
from .moves import Move, Turn, invert_sequence, parse_move, parse_sequence
from .operations import MoveEngine, apply_move, apply_moves
from .scrambler import Scrambler, generate_scramble
from .utils import from_dict, from_json, to_dict, to_json
from .validator import validate

__all__ = [
    "Axis",
    "Color",
    "CubeState",
    "Face",
    "Mode",
    "Move",
    "Turn",
    "MoveEngine",
    "Scrambler",
    "apply_move",
    "apply_moves",
    "generate_scramble",
    "invert_sequence",
    "parse_move",
    "parse_sequence",
    "validate",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "CubeError",
    "ExhaustedMoveSet",
    "IndexOutOfRange",
    "InvalidArgument",
    "InvalidLayer",
    "InvalidMove",
    "InvalidSize",
    "ValidationError",
]
