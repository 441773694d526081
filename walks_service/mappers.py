"""
Conversions between domain entities and wire models.

Plain field-by-field copies; one function per direction per entity.
"""

from .domain.entities import Region, Walk, WalkDifficulty
from .schemas import (
    RegionCreate,
    RegionResponse,
    WalkCreate,
    WalkDifficultyCreate,
    WalkDifficultyResponse,
    WalkResponse,
)


def region_to_response(region: Region) -> RegionResponse:
    return RegionResponse(
        id=region.id,
        name=region.name,
        code=region.code,
        lat=region.lat,
        long=region.long,
        image=region.image,
    )


def region_from_request(request: RegionCreate) -> Region:
    """Build an unsaved region from an add or update request."""
    return Region(
        name=request.name,
        code=request.code,
        lat=request.lat,
        long=request.long,
        image=request.image,
    )


def walk_difficulty_to_response(walk_difficulty: WalkDifficulty) -> WalkDifficultyResponse:
    return WalkDifficultyResponse(id=walk_difficulty.id, code=walk_difficulty.code)


def walk_difficulty_from_request(request: WalkDifficultyCreate) -> WalkDifficulty:
    return WalkDifficulty(code=request.code)


def walk_to_response(walk: Walk) -> WalkResponse:
    return WalkResponse(
        id=walk.id,
        name=walk.name,
        length=walk.length,
        region_id=walk.region_id,
        walk_difficulty_id=walk.walk_difficulty_id,
    )


def walk_from_request(request: WalkCreate) -> Walk:
    return Walk(
        name=request.name,
        length=request.length,
        region_id=request.region_id,
        walk_difficulty_id=request.walk_difficulty_id,
    )
