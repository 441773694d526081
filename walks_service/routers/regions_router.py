"""
Regions router.

List, get, add, update and delete regions. Deletes follow the configured
reference delete policy for walks located in the region.
"""

import uuid
from typing import List

import structlog
from fastapi import APIRouter, Depends, Request, Response, status

from ..dependencies import (
    get_reference_delete_policy,
    get_region_repository,
    get_walk_repository,
)
from ..domain.exceptions import EntityNotFoundException, ValidationException
from ..mappers import region_from_request, region_to_response
from ..metrics import track_entity_operation
from ..policies import ReferenceDeletePolicy, apply_reference_delete_policy
from ..repositories.walk_repository import IRegionRepository, IWalkRepository
from ..schemas import ErrorResponse, RegionCreate, RegionResponse, RegionUpdate
from ..validators import validate_region_request

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/Regions", tags=["Regions"])

ENTITY = "Region"


@router.get("", response_model=List[RegionResponse], summary="List regions")
async def get_all_regions(
    region_repository: IRegionRepository = Depends(get_region_repository),
) -> List[RegionResponse]:
    regions = await region_repository.get_all()

    logger.info("Regions retrieved", count=len(regions))
    track_entity_operation(ENTITY, "list", "success")

    return [region_to_response(region) for region in regions]


@router.get(
    "/{region_id}",
    response_model=RegionResponse,
    responses={404: {"description": "Region not found"}},
    summary="Get region",
)
async def get_region(
    region_id: uuid.UUID,
    region_repository: IRegionRepository = Depends(get_region_repository),
) -> RegionResponse:
    region = await region_repository.get(region_id)
    if region is None:
        track_entity_operation(ENTITY, "get", "not_found")
        raise EntityNotFoundException(ENTITY, region_id)

    track_entity_operation(ENTITY, "get", "success")
    return region_to_response(region)


@router.post(
    "",
    response_model=RegionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Region created"},
        400: {"description": "Invalid request", "model": ErrorResponse},
    },
    summary="Add region",
)
async def add_region(
    region_request: RegionCreate,
    request: Request,
    response: Response,
    region_repository: IRegionRepository = Depends(get_region_repository),
) -> RegionResponse:
    """Add a region; the Location header points at the new record."""
    result = validate_region_request(region_request)
    if not result.is_valid:
        track_entity_operation(ENTITY, "create", "invalid")
        raise ValidationException(result.errors)

    region = await region_repository.add(region_from_request(region_request))

    logger.info("Region created", region_id=str(region.id), code=region.code)
    track_entity_operation(ENTITY, "create", "success")

    response.headers["Location"] = str(
        request.url_for("get_region", region_id=str(region.id))
    )
    return region_to_response(region)


@router.put(
    "/{region_id}",
    response_model=RegionResponse,
    responses={
        400: {"description": "Invalid request", "model": ErrorResponse},
        404: {"description": "Region not found"},
    },
    summary="Update region",
)
async def update_region(
    region_id: uuid.UUID,
    region_request: RegionUpdate,
    region_repository: IRegionRepository = Depends(get_region_repository),
) -> RegionResponse:
    """Replace every field of a region; an omitted Image is cleared."""
    result = validate_region_request(region_request)
    if not result.is_valid:
        track_entity_operation(ENTITY, "update", "invalid")
        raise ValidationException(result.errors)

    region = await region_repository.update(region_id, region_from_request(region_request))
    if region is None:
        track_entity_operation(ENTITY, "update", "not_found")
        raise EntityNotFoundException(ENTITY, region_id)

    logger.info("Region updated", region_id=str(region_id))
    track_entity_operation(ENTITY, "update", "success")

    return region_to_response(region)


@router.delete(
    "/{region_id}",
    response_model=RegionResponse,
    responses={
        404: {"description": "Region not found"},
        409: {"description": "Region still has walks", "model": ErrorResponse},
    },
    summary="Delete region",
)
async def delete_region(
    region_id: uuid.UUID,
    region_repository: IRegionRepository = Depends(get_region_repository),
    walk_repository: IWalkRepository = Depends(get_walk_repository),
    policy: ReferenceDeletePolicy = Depends(get_reference_delete_policy),
) -> RegionResponse:
    """
    Delete a region and return its final representation.

    Walks in the region are left alone, block the delete or are removed
    with it, depending on the reference delete policy.
    """
    if policy != ReferenceDeletePolicy.IGNORE:
        if await region_repository.get(region_id) is None:
            track_entity_operation(ENTITY, "delete", "not_found")
            raise EntityNotFoundException(ENTITY, region_id)

        walks = await walk_repository.find_by_region_id(region_id)
        await apply_reference_delete_policy(
            policy, ENTITY, region_id, walks, walk_repository
        )

    region = await region_repository.delete(region_id)
    if region is None:
        track_entity_operation(ENTITY, "delete", "not_found")
        raise EntityNotFoundException(ENTITY, region_id)

    logger.info("Region deleted", region_id=str(region_id), policy=policy.value)
    track_entity_operation(ENTITY, "delete", "success")

    return region_to_response(region)
