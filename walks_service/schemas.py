"""Pydantic models for request/response validation."""

import uuid
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class WireModel(BaseModel):
    """Base for JSON bodies; fields travel as PascalCase (``RegionId``)."""

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


# Regions


class RegionResponse(WireModel):
    """Region response model."""

    id: uuid.UUID
    name: str
    code: str
    lat: float
    long: float
    image: Optional[str] = None


class RegionCreate(WireModel):
    """Request model for adding a region."""

    name: str = Field(..., max_length=255, description="Region name")
    code: str = Field(..., max_length=20, description="Short region code")
    lat: float = Field(..., allow_inf_nan=False, description="Latitude")
    long: float = Field(..., allow_inf_nan=False, description="Longitude")
    image: Optional[str] = Field(None, max_length=1024, description="Image reference")


class RegionUpdate(RegionCreate):
    """Request model for replacing a region; omitted optional fields are cleared."""


# Walk difficulties


class WalkDifficultyResponse(WireModel):
    """Walk difficulty response model."""

    id: uuid.UUID
    code: str


class WalkDifficultyCreate(WireModel):
    """Request model for adding a walk difficulty."""

    code: str = Field(..., max_length=50, description="Difficulty label, e.g. Easy")


class WalkDifficultyUpdate(WalkDifficultyCreate):
    """Request model for replacing a walk difficulty."""


# Walks


class WalkResponse(WireModel):
    """Walk response model."""

    id: uuid.UUID
    name: str
    length: float
    region_id: uuid.UUID
    walk_difficulty_id: uuid.UUID


class WalkCreate(WireModel):
    """Request model for adding a walk."""

    name: str = Field(..., max_length=255, description="Walk name")
    length: float = Field(..., allow_inf_nan=False, description="Length in kilometres")
    region_id: uuid.UUID = Field(..., description="Region the walk is in")
    walk_difficulty_id: uuid.UUID = Field(..., description="Difficulty rating")


class WalkUpdate(WalkCreate):
    """Request model for replacing a walk."""


# Errors


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = False
    error: str
    message: str
    errors: Optional[Dict[str, List[str]]] = None
