"""
Request validation for walks, regions and walk difficulties.

Schema-level checks (types, required keys) are handled by the Pydantic
request models. This module covers the checks those models cannot express:
blank strings, the optional walk field rules and, for walks, whether the
referenced region and difficulty exist.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import structlog

from .repositories.walk_repository import IRegionRepository, IWalkDifficultyRepository
from .schemas import RegionCreate, WalkCreate, WalkDifficultyCreate

logger = structlog.get_logger(__name__)

# Error keys are wire field names
REGION_ID_FIELD = "RegionId"
WALK_DIFFICULTY_ID_FIELD = "WalkDifficultyId"
NAME_FIELD = "Name"
LENGTH_FIELD = "Length"
CODE_FIELD = "Code"


@dataclass
class ValidationResult:
    """Field errors accumulated while checking one request."""

    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_region_request(request: RegionCreate) -> ValidationResult:
    """
    Check a region add/update request.

    Args:
        request: Incoming region request

    Returns:
        Result with errors keyed "Name" and/or "Code" for blank values
    """
    result = ValidationResult()

    if _is_blank(request.name):
        result.add_error(NAME_FIELD, f"{NAME_FIELD} is required.")
    if _is_blank(request.code):
        result.add_error(CODE_FIELD, f"{CODE_FIELD} is required.")

    return result


def validate_walk_difficulty_request(request: WalkDifficultyCreate) -> ValidationResult:
    """Check a walk difficulty add/update request; Code must not be blank."""
    result = ValidationResult()

    if _is_blank(request.code):
        result.add_error(CODE_FIELD, f"{CODE_FIELD} is required.")

    return result


class WalkRequestValidator:
    """
    Validates walk add/update requests against the region and difficulty stores.

    Both referenced ids are always looked up so the caller gets every
    offending field in one response. Name and Length rules only run when
    ``enforce_field_rules`` is set.
    """

    def __init__(
        self,
        region_repository: IRegionRepository,
        walk_difficulty_repository: IWalkDifficultyRepository,
        enforce_field_rules: bool = True,
    ):
        """
        Initialize validator.

        Args:
            region_repository: Store used to resolve RegionId
            walk_difficulty_repository: Store used to resolve WalkDifficultyId
            enforce_field_rules: Require non-blank Name and positive Length
        """
        self.region_repository = region_repository
        self.walk_difficulty_repository = walk_difficulty_repository
        self.enforce_field_rules = enforce_field_rules

    async def validate(self, request: WalkCreate) -> ValidationResult:
        """
        Validate a walk add or update request.

        Args:
            request: Incoming walk request

        Returns:
            ValidationResult; ``is_valid`` is True only with no errors
        """
        result = ValidationResult()

        if self.enforce_field_rules:
            if _is_blank(request.name):
                result.add_error(NAME_FIELD, f"{NAME_FIELD} is required.")
            if request.length <= 0:
                result.add_error(LENGTH_FIELD, f"{LENGTH_FIELD} should be greater than zero.")

        region = await self.region_repository.get(request.region_id)
        if region is None:
            result.add_error(REGION_ID_FIELD, f"{REGION_ID_FIELD} is invalid.")

        walk_difficulty = await self.walk_difficulty_repository.get(request.walk_difficulty_id)
        if walk_difficulty is None:
            result.add_error(WALK_DIFFICULTY_ID_FIELD, f"{WALK_DIFFICULTY_ID_FIELD} is invalid.")

        if not result.is_valid:
            logger.info(
                "Walk request rejected",
                fields=sorted(result.errors),
                region_id=str(request.region_id),
                walk_difficulty_id=str(request.walk_difficulty_id),
            )

        return result
