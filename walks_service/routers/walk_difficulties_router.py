"""
Walk difficulties router.

List, get, add, update and delete difficulty ratings.
"""

import uuid
from typing import List

import structlog
from fastapi import APIRouter, Depends, Request, Response, status

from ..dependencies import (
    get_reference_delete_policy,
    get_walk_difficulty_repository,
    get_walk_repository,
)
from ..domain.exceptions import EntityNotFoundException, ValidationException
from ..mappers import walk_difficulty_from_request, walk_difficulty_to_response
from ..metrics import track_entity_operation
from ..policies import ReferenceDeletePolicy, apply_reference_delete_policy
from ..repositories.walk_repository import IWalkDifficultyRepository, IWalkRepository
from ..schemas import (
    ErrorResponse,
    WalkDifficultyCreate,
    WalkDifficultyResponse,
    WalkDifficultyUpdate,
)
from ..validators import validate_walk_difficulty_request

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/WalkDifficulties", tags=["WalkDifficulties"])

ENTITY = "WalkDifficulty"


@router.get("", response_model=List[WalkDifficultyResponse], summary="List walk difficulties")
async def get_all_walk_difficulties(
    walk_difficulty_repository: IWalkDifficultyRepository = Depends(
        get_walk_difficulty_repository
    ),
) -> List[WalkDifficultyResponse]:
    walk_difficulties = await walk_difficulty_repository.get_all()
    track_entity_operation(ENTITY, "list", "success")
    return [walk_difficulty_to_response(item) for item in walk_difficulties]


@router.get(
    "/{walk_difficulty_id}",
    response_model=WalkDifficultyResponse,
    responses={404: {"description": "Walk difficulty not found"}},
    summary="Get walk difficulty",
)
async def get_walk_difficulty(
    walk_difficulty_id: uuid.UUID,
    walk_difficulty_repository: IWalkDifficultyRepository = Depends(
        get_walk_difficulty_repository
    ),
) -> WalkDifficultyResponse:
    walk_difficulty = await walk_difficulty_repository.get(walk_difficulty_id)
    if walk_difficulty is None:
        track_entity_operation(ENTITY, "get", "not_found")
        raise EntityNotFoundException(ENTITY, walk_difficulty_id)

    track_entity_operation(ENTITY, "get", "success")
    return walk_difficulty_to_response(walk_difficulty)


@router.post(
    "",
    response_model=WalkDifficultyResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Walk difficulty created"},
        400: {"description": "Invalid request", "model": ErrorResponse},
    },
    summary="Add walk difficulty",
)
async def add_walk_difficulty(
    walk_difficulty_request: WalkDifficultyCreate,
    request: Request,
    response: Response,
    walk_difficulty_repository: IWalkDifficultyRepository = Depends(
        get_walk_difficulty_repository
    ),
) -> WalkDifficultyResponse:
    result = validate_walk_difficulty_request(walk_difficulty_request)
    if not result.is_valid:
        track_entity_operation(ENTITY, "create", "invalid")
        raise ValidationException(result.errors)

    walk_difficulty = await walk_difficulty_repository.add(
        walk_difficulty_from_request(walk_difficulty_request)
    )

    logger.info(
        "Walk difficulty created",
        walk_difficulty_id=str(walk_difficulty.id),
        code=walk_difficulty.code,
    )
    track_entity_operation(ENTITY, "create", "success")

    response.headers["Location"] = str(
        request.url_for("get_walk_difficulty", walk_difficulty_id=str(walk_difficulty.id))
    )
    return walk_difficulty_to_response(walk_difficulty)


@router.put(
    "/{walk_difficulty_id}",
    response_model=WalkDifficultyResponse,
    responses={
        400: {"description": "Invalid request", "model": ErrorResponse},
        404: {"description": "Walk difficulty not found"},
    },
    summary="Update walk difficulty",
)
async def update_walk_difficulty(
    walk_difficulty_id: uuid.UUID,
    walk_difficulty_request: WalkDifficultyUpdate,
    walk_difficulty_repository: IWalkDifficultyRepository = Depends(
        get_walk_difficulty_repository
    ),
) -> WalkDifficultyResponse:
    result = validate_walk_difficulty_request(walk_difficulty_request)
    if not result.is_valid:
        track_entity_operation(ENTITY, "update", "invalid")
        raise ValidationException(result.errors)

    walk_difficulty = await walk_difficulty_repository.update(
        walk_difficulty_id, walk_difficulty_from_request(walk_difficulty_request)
    )
    if walk_difficulty is None:
        track_entity_operation(ENTITY, "update", "not_found")
        raise EntityNotFoundException(ENTITY, walk_difficulty_id)

    logger.info("Walk difficulty updated", walk_difficulty_id=str(walk_difficulty_id))
    track_entity_operation(ENTITY, "update", "success")

    return walk_difficulty_to_response(walk_difficulty)


@router.delete(
    "/{walk_difficulty_id}",
    response_model=WalkDifficultyResponse,
    responses={
        404: {"description": "Walk difficulty not found"},
        409: {"description": "Walk difficulty still in use", "model": ErrorResponse},
    },
    summary="Delete walk difficulty",
)
async def delete_walk_difficulty(
    walk_difficulty_id: uuid.UUID,
    walk_difficulty_repository: IWalkDifficultyRepository = Depends(
        get_walk_difficulty_repository
    ),
    walk_repository: IWalkRepository = Depends(get_walk_repository),
    policy: ReferenceDeletePolicy = Depends(get_reference_delete_policy),
) -> WalkDifficultyResponse:
    if policy != ReferenceDeletePolicy.IGNORE:
        if await walk_difficulty_repository.get(walk_difficulty_id) is None:
            track_entity_operation(ENTITY, "delete", "not_found")
            raise EntityNotFoundException(ENTITY, walk_difficulty_id)

        walks = await walk_repository.find_by_walk_difficulty_id(walk_difficulty_id)
        await apply_reference_delete_policy(
            policy, ENTITY, walk_difficulty_id, walks, walk_repository
        )

    walk_difficulty = await walk_difficulty_repository.delete(walk_difficulty_id)
    if walk_difficulty is None:
        track_entity_operation(ENTITY, "delete", "not_found")
        raise EntityNotFoundException(ENTITY, walk_difficulty_id)

    logger.info(
        "Walk difficulty deleted",
        walk_difficulty_id=str(walk_difficulty_id),
        policy=policy.value,
    )
    track_entity_operation(ENTITY, "delete", "success")

    return walk_difficulty_to_response(walk_difficulty)
