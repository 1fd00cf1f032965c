"""
Move value type and the FACE[MODIFIER] notation.

Upper-case letters turn an outer layer, lower-case letters the slice just
inside it. Modifiers: none (quarter clockwise), ' (quarter counter-clockwise),
2 (half turn).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Union

from .cube import FACE_AXIS, Axis, Face
from .exceptions import InvalidMove


class Turn(Enum):
    CW = ""
    CCW = "'"
    HALF = "2"

    @property
    def quarters(self) -> int:
        """Number of clockwise quarter turns this amounts to."""
        return {Turn.CW: 1, Turn.HALF: 2, Turn.CCW: 3}[self]

    def inverse(self) -> "Turn":
        if self is Turn.CW:
            return Turn.CCW
        if self is Turn.CCW:
            return Turn.CW
        return Turn.HALF


@dataclass(frozen=True)
class Move:
    """
    One layer rotation.

    Attributes:
        face (Face): Face the layer is parallel to; turn direction is as seen
            from that face
        turn (Turn): Quarter clockwise, quarter counter-clockwise or half
        layer (int): 0 for the outer layer, 1 for the slice below it, ...
    """
    face: Face
    turn: Turn = Turn.CW
    layer: int = 0

    @property
    def axis(self) -> Axis:
        return FACE_AXIS[self.face]

    @property
    def is_slice(self) -> bool:
        return self.layer > 0

    @property
    def notation(self) -> str:
        """
        Render the move as a token.

        Raises:
            InvalidMove: For layers deeper than 1, which the notation cannot express
        """
        if self.layer == 0:
            letter = self.face.value
        elif self.layer == 1:
            letter = self.face.value.lower()
        else:
            raise InvalidMove(f"Layer {self.layer} has no notation token", move=self)
        return letter + self.turn.value

    def inverse(self) -> "Move":
        return Move(self.face, self.turn.inverse(), self.layer)

    def __str__(self) -> str:
        try:
            return self.notation
        except InvalidMove:
            return f"{self.face.value}@{self.layer}{self.turn.value}"


MoveLike = Union[Move, str]


def parse_move(token: str) -> Move:
    """
    Parse a single notation token such as "R", "u'" or "F2".

    Raises:
        InvalidMove: If the token is not FACE[MODIFIER]
    """
    if not isinstance(token, str):
        raise InvalidMove(f"Move token must be a string, got {type(token).__name__}", move=token)

    token = token.strip()
    if not token or len(token) > 2:
        raise InvalidMove(f"Malformed move {token!r}", move=token)

    letter, suffix = token[0], token[1:]
    try:
        face = Face(letter.upper())
    except ValueError:
        raise InvalidMove(f"Unknown face in move {token!r}", move=token)

    try:
        turn = Turn(suffix)
    except ValueError:
        raise InvalidMove(f"Unknown modifier in move {token!r}", move=token)

    layer = 1 if letter.islower() else 0
    return Move(face, turn, layer)


def to_move(move: MoveLike) -> Move:
    if isinstance(move, Move):
        return move
    return parse_move(move)


def parse_sequence(moves: Union[str, Iterable[MoveLike]]) -> List[Move]:
    """
    Parse a whitespace-separated string or a list of tokens/Move objects.

    Example:
        >>> [m.notation for m in parse_sequence("R U R' U'")]
        ['R', 'U', "R'", "U'"]
    """
    if isinstance(moves, str):
        moves = moves.split()
    return [to_move(move) for move in moves]


def format_sequence(moves: Iterable[MoveLike]) -> str:
    return " ".join(to_move(move).notation for move in moves)


def invert_sequence(moves: Union[str, Iterable[MoveLike]]) -> List[Move]:
    """Sequence that undoes `moves`: reversed order, each move inverted."""
    return [move.inverse() for move in reversed(parse_sequence(moves))]
