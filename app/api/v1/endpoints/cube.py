from fastapi import APIRouter, Query
from typing import Optional

from nxcube.config import settings
from nxcube.cube import CubeState
from nxcube.exceptions import ValidationError
from nxcube.logging import get_logger
from nxcube.moves import parse_sequence
from nxcube.operations import engine
from nxcube.scrambler import Scrambler
from nxcube.utils import from_dict, to_dict
from app.models.schemas import (
    CubeStatePayload,
    MoveRequest,
    MoveResponse,
    ScrambleRequest,
    ScrambleResponse,
    ValidateResponse,
    ValidationIssue,
)
from app.utils.error_handlers import validation_error

logger = get_logger(__name__)
router = APIRouter()


def _check_size(size: int):
    if size > settings.max_cube_size:
        raise validation_error(f"Cube size {size} exceeds the maximum of {settings.max_cube_size}")


def _check_length(count: int):
    if count > settings.max_moves:
        raise validation_error(f"{count} moves exceeds the maximum of {settings.max_moves}")


@router.get("/solved", response_model=CubeStatePayload)
async def solved_cube(size: Optional[int] = Query(default=None, ge=2)):
    """
    Solved cube of the requested size in the interchange format
    """
    size = size or settings.default_cube_size
    _check_size(size)
    return to_dict(CubeState(size))


@router.post("/moves", response_model=MoveResponse)
async def apply_moves(request: MoveRequest):
    """
    Apply a move sequence to the supplied state

    The state is validated first; a bad state or a bad move rejects the whole
    request and nothing is returned but the error.
    """
    _check_size(request.state.size)
    moves = parse_sequence(request.moves)
    _check_length(len(moves))
    cube = from_dict(request.state.model_dump())
    engine.apply_sequence(cube, moves)

    return MoveResponse(
        state=to_dict(cube),
        applied=[move.notation for move in moves],
        solved=cube.is_solved(),
    )


@router.post("/validate", response_model=ValidateResponse)
async def validate_cube(payload: CubeStatePayload):
    """
    Report whether a state passes validation, without changing it
    """
    _check_size(payload.size)
    try:
        from_dict(payload.model_dump())
    except ValidationError as e:
        return ValidateResponse(
            valid=False,
            errors=[ValidationIssue(
                detail=e.message,
                face=e.face,
                color=e.color,
                expected_count=e.expected_count,
                actual_count=e.actual_count,
            )],
        )
    return ValidateResponse(valid=True)


@router.post("/scramble", response_model=ScrambleResponse)
async def scramble_cube(request: ScrambleRequest):
    """
    Generate a scramble and the state it produces from a solved cube

    Length comes from `length`, else from the `difficulty` preset, else from
    the size-scaled default.
    """
    _check_size(request.size)
    scrambler = Scrambler(seed=request.seed)

    if request.length is not None:
        _check_length(request.length)
        moves = scrambler.generate(request.size, request.length, request.include_slices)
    elif request.difficulty is not None:
        moves = scrambler.generate_for_difficulty(
            request.size, request.difficulty, include_slices=request.include_slices
        )
    else:
        moves = scrambler.generate_optimized(request.size, request.include_slices)

    cube = engine.apply_sequence(CubeState(request.size), moves)
    logger.info("Scramble served", size=request.size, length=len(moves))

    return ScrambleResponse(
        moves=[move.notation for move in moves],
        state=to_dict(cube),
    )
