"""
What happens to walks when a region or difficulty they reference is deleted.

- ignore: delete the record, leave walks pointing at it
- restrict: refuse the delete while any walk references the record
- cascade: delete the referencing walks first
"""

import uuid
from enum import Enum
from typing import List

import structlog

from .domain.entities import Walk
from .domain.exceptions import ReferenceConflictException
from .repositories.walk_repository import IWalkRepository

logger = structlog.get_logger(__name__)


class ReferenceDeletePolicy(str, Enum):
    """Policies for deleting records that walks reference."""

    IGNORE = "ignore"
    RESTRICT = "restrict"
    CASCADE = "cascade"


async def apply_reference_delete_policy(
    policy: ReferenceDeletePolicy,
    entity: str,
    entity_id: uuid.UUID,
    referencing_walks: List[Walk],
    walk_repository: IWalkRepository,
) -> None:
    """
    Enforce the delete policy before a referenced record is removed.

    Args:
        policy: Configured policy
        entity: Entity name for errors and logs ("Region", "WalkDifficulty")
        entity_id: Id of the record about to be deleted
        referencing_walks: Walks that reference the record
        walk_repository: Store used to cascade deletes

    Raises:
        ReferenceConflictException: Policy is restrict and walks reference the record
    """
    if policy == ReferenceDeletePolicy.IGNORE or not referencing_walks:
        return

    if policy == ReferenceDeletePolicy.RESTRICT:
        logger.warning(
            "Delete refused, record still referenced",
            entity=entity,
            entity_id=str(entity_id),
            walk_count=len(referencing_walks),
        )
        raise ReferenceConflictException(entity, entity_id, len(referencing_walks))

    for walk in referencing_walks:
        await walk_repository.delete(walk.id)

    logger.info(
        "Cascaded delete to walks",
        entity=entity,
        entity_id=str(entity_id),
        walk_count=len(referencing_walks),
    )
