"""
Shared dependencies for the application.

Provides dependency injection functions used across routers. Every
repository is bound to the request's database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from .config import Settings, get_settings
from .database import get_db
from .policies import ReferenceDeletePolicy
from .repositories.sqlalchemy_repository import (
    SqlAlchemyRegionRepository,
    SqlAlchemyWalkDifficultyRepository,
    SqlAlchemyWalkRepository,
)
from .repositories.walk_repository import (
    IRegionRepository,
    IWalkDifficultyRepository,
    IWalkRepository,
)
from .validators import WalkRequestValidator


def get_region_repository(db: Session = Depends(get_db)) -> IRegionRepository:
    return SqlAlchemyRegionRepository(db)


def get_walk_difficulty_repository(
    db: Session = Depends(get_db),
) -> IWalkDifficultyRepository:
    return SqlAlchemyWalkDifficultyRepository(db)


def get_walk_repository(db: Session = Depends(get_db)) -> IWalkRepository:
    return SqlAlchemyWalkRepository(db)


def get_walk_validator(
    region_repository: IRegionRepository = Depends(get_region_repository),
    walk_difficulty_repository: IWalkDifficultyRepository = Depends(
        get_walk_difficulty_repository
    ),
    settings: Settings = Depends(get_settings),
) -> WalkRequestValidator:
    """Build the walk validator with the configured field-rule policy."""
    return WalkRequestValidator(
        region_repository,
        walk_difficulty_repository,
        enforce_field_rules=settings.WALK_FIELD_RULES_ENABLED,
    )


def get_reference_delete_policy(
    settings: Settings = Depends(get_settings),
) -> ReferenceDeletePolicy:
    return ReferenceDeletePolicy(settings.REFERENCE_DELETE_POLICY)
