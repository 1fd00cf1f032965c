"""
Basic usage examples for nxcube.
"""

from nxcube import CubeState, Face, Color, apply_moves, invert_sequence, parse_sequence
from nxcube.operations import engine
from nxcube.scrambler import Scrambler
from nxcube.utils import from_json, to_json
from nxcube.validator import is_valid


def example_basic_cube():
    """Create a cube and read or write single stickers."""
    print("=== Basic Cube Example ===")

    cube = CubeState(3)
    print(f"Created cube: {cube!r}")
    print(f"Solved: {cube.is_solved()}")

    print(f"\nSticker at F(0,0): {cube.get_sticker(Face.FRONT, 0, 0)}")
    cube.set_sticker(Face.FRONT, 0, 0, Color.YELLOW)
    print(f"After painting it yellow: {cube.get_sticker(Face.FRONT, 0, 0)}")
    print(f"Still valid: {is_valid(cube)}")
    print()


def example_moves():
    """Apply a sequence and undo it."""
    print("=== Move Example ===")

    cube = CubeState(3)
    sequence = parse_sequence("R U R' U'")
    engine.apply_sequence(cube, sequence)
    print(f"After R U R' U':\n{cube}")

    engine.apply_sequence(cube, invert_sequence(sequence))
    print(f"\nAfter undoing it, solved: {cube.is_solved()}")
    print()


def example_slices():
    """Inner layer moves on a 4x4x4."""
    print("=== Slice Example ===")

    cube = apply_moves(CubeState(4), "r U2 r'")
    print(f"After r U2 r':\n{cube.to_text()}")
    print()


def example_scramble():
    """Generate a reproducible scramble."""
    print("=== Scramble Example ===")

    scrambler = Scrambler(seed=2024)
    cube = CubeState(3)
    moves = scrambler.scramble(cube, 20)
    print(f"Scramble: {' '.join(move.notation for move in moves)}")
    print(f"Solved: {cube.is_solved()}, valid: {is_valid(cube)}")
    print()


def example_json():
    """Export a state and read it back."""
    print("=== JSON Example ===")

    cube = apply_moves(CubeState(2), "F R U")
    text = to_json(cube, indent=2)
    print(text)
    print(f"\nRound trip equal: {from_json(text) == cube}")
    print()


if __name__ == "__main__":
    example_basic_cube()
    example_moves()
    example_slices()
    example_scramble()
    example_json()

    print("=== All examples completed! ===")
