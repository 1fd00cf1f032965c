# Pydantic schemas for API request/response models (DTOs)
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Union
from enum import Enum


# Enums for API
class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


# Base schema for all Pydantic models
class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        use_enum_values = True


# Cube state in the interchange format
class CubeStatePayload(BaseSchema):
    size: int = Field(..., ge=2)
    faces: Dict[str, List[List[str]]]


class MoveRequest(BaseSchema):
    state: CubeStatePayload
    moves: Union[str, List[str]]  # "R U R' U'" or ["R", "U", "R'", "U'"]


class MoveResponse(BaseSchema):
    state: CubeStatePayload
    applied: List[str]
    solved: bool


class ScrambleRequest(BaseSchema):
    size: int = Field(default=3, ge=2)
    length: Optional[int] = Field(default=None, ge=1)
    difficulty: Optional[Difficulty] = None
    seed: Optional[int] = None
    include_slices: bool = False


class ScrambleResponse(BaseSchema):
    moves: List[str]
    state: CubeStatePayload


class ValidationIssue(BaseSchema):
    detail: str
    face: Optional[str] = None
    color: Optional[str] = None
    expected_count: Optional[int] = None
    actual_count: Optional[int] = None


class ValidateResponse(BaseSchema):
    valid: bool
    errors: List[ValidationIssue] = []

