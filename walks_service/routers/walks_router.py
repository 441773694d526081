"""
Walks router.

List, get, add, update and delete walks. Add and update check that the
referenced region and walk difficulty exist before anything is written.
"""

import uuid
from typing import List

import structlog
from fastapi import APIRouter, Depends, Request, Response, status

from ..dependencies import get_walk_repository, get_walk_validator
from ..domain.exceptions import EntityNotFoundException, ValidationException
from ..mappers import walk_from_request, walk_to_response
from ..metrics import track_entity_operation, track_validation_failures
from ..repositories.walk_repository import IWalkRepository
from ..schemas import ErrorResponse, WalkCreate, WalkResponse, WalkUpdate
from ..validators import WalkRequestValidator

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/Walks", tags=["Walks"])

ENTITY = "Walk"


@router.get(
    "",
    response_model=List[WalkResponse],
    summary="List walks",
)
async def get_all_walks(
    walk_repository: IWalkRepository = Depends(get_walk_repository),
) -> List[WalkResponse]:
    """Return every walk."""
    walks = await walk_repository.get_all()

    logger.info("Walks retrieved", count=len(walks))
    track_entity_operation(ENTITY, "list", "success")

    return [walk_to_response(walk) for walk in walks]


@router.get(
    "/{walk_id}",
    response_model=WalkResponse,
    responses={404: {"description": "Walk not found"}},
    summary="Get walk",
)
async def get_walk(
    walk_id: uuid.UUID,
    walk_repository: IWalkRepository = Depends(get_walk_repository),
) -> WalkResponse:
    """Return one walk by id."""
    walk = await walk_repository.get(walk_id)
    if walk is None:
        track_entity_operation(ENTITY, "get", "not_found")
        raise EntityNotFoundException(ENTITY, walk_id)

    track_entity_operation(ENTITY, "get", "success")
    return walk_to_response(walk)


@router.post(
    "",
    response_model=WalkResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Walk created"},
        400: {"description": "Invalid request", "model": ErrorResponse},
    },
    summary="Add walk",
)
async def add_walk(
    walk_request: WalkCreate,
    request: Request,
    response: Response,
    walk_repository: IWalkRepository = Depends(get_walk_repository),
    validator: WalkRequestValidator = Depends(get_walk_validator),
) -> WalkResponse:
    """
    Add a walk.

    RegionId and WalkDifficultyId must reference existing records. The
    response carries a Location header pointing at the new walk.
    """
    result = await validator.validate(walk_request)
    if not result.is_valid:
        track_validation_failures(result.errors)
        track_entity_operation(ENTITY, "create", "invalid")
        raise ValidationException(result.errors)

    walk = await walk_repository.add(walk_from_request(walk_request))

    logger.info(
        "Walk created",
        walk_id=str(walk.id),
        region_id=str(walk.region_id),
        walk_difficulty_id=str(walk.walk_difficulty_id),
    )
    track_entity_operation(ENTITY, "create", "success")

    response.headers["Location"] = str(request.url_for("get_walk", walk_id=str(walk.id)))
    return walk_to_response(walk)


@router.put(
    "/{walk_id}",
    response_model=WalkResponse,
    responses={
        400: {"description": "Invalid request", "model": ErrorResponse},
        404: {"description": "Walk not found"},
    },
    summary="Update walk",
)
async def update_walk(
    walk_id: uuid.UUID,
    walk_request: WalkUpdate,
    walk_repository: IWalkRepository = Depends(get_walk_repository),
    validator: WalkRequestValidator = Depends(get_walk_validator),
) -> WalkResponse:
    """Replace every field of a walk."""
    result = await validator.validate(walk_request)
    if not result.is_valid:
        track_validation_failures(result.errors)
        track_entity_operation(ENTITY, "update", "invalid")
        raise ValidationException(result.errors)

    walk = await walk_repository.update(walk_id, walk_from_request(walk_request))
    if walk is None:
        track_entity_operation(ENTITY, "update", "not_found")
        raise EntityNotFoundException(ENTITY, walk_id)

    logger.info("Walk updated", walk_id=str(walk_id))
    track_entity_operation(ENTITY, "update", "success")

    return walk_to_response(walk)


@router.delete(
    "/{walk_id}",
    response_model=WalkResponse,
    responses={404: {"description": "Walk not found"}},
    summary="Delete walk",
)
async def delete_walk(
    walk_id: uuid.UUID,
    walk_repository: IWalkRepository = Depends(get_walk_repository),
) -> WalkResponse:
    """Delete a walk and return its final representation."""
    walk = await walk_repository.delete(walk_id)
    if walk is None:
        track_entity_operation(ENTITY, "delete", "not_found")
        raise EntityNotFoundException(ENTITY, walk_id)

    logger.info("Walk deleted", walk_id=str(walk_id))
    track_entity_operation(ENTITY, "delete", "success")

    return walk_to_response(walk)
