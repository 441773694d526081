"""
Repository interfaces (Abstract Base Classes).

Define the contract for region, walk difficulty and walk persistence
independent of the underlying storage mechanism.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from ..domain.entities import Region, Walk, WalkDifficulty

EntityT = TypeVar("EntityT")


class IEntityRepository(ABC, Generic[EntityT]):
    """
    CRUD contract shared by every entity store.

    Each call is applied atomically on its own; no transaction spans
    several calls.
    """

    @abstractmethod
    async def get_all(self) -> List[EntityT]:
        """
        Get all records.

        Returns:
            Every stored record, in store-defined order
        """
        pass

    @abstractmethod
    async def get(self, entity_id: uuid.UUID) -> Optional[EntityT]:
        """
        Get one record by id.

        Args:
            entity_id: Record identifier

        Returns:
            The record if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, entity: EntityT) -> EntityT:
        """
        Insert a new record with a freshly generated id.

        Args:
            entity: Record to persist; any id it carries is ignored

        Returns:
            The stored record including its new id
        """
        pass

    @abstractmethod
    async def update(self, entity_id: uuid.UUID, entity: EntityT) -> Optional[EntityT]:
        """
        Replace every field of an existing record.

        Args:
            entity_id: Identifier of the record to replace
            entity: New field values

        Returns:
            The updated record, or None if no record has that id
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: uuid.UUID) -> Optional[EntityT]:
        """
        Delete a record.

        Args:
            entity_id: Identifier of the record to delete

        Returns:
            The record as it was before deletion, or None if not found
        """
        pass


class IRegionRepository(IEntityRepository[Region]):
    """Region store."""


class IWalkDifficultyRepository(IEntityRepository[WalkDifficulty]):
    """Walk difficulty store."""


class IWalkRepository(IEntityRepository[Walk]):
    """Walk store, with lookups by the records a walk references."""

    @abstractmethod
    async def find_by_region_id(self, region_id: uuid.UUID) -> List[Walk]:
        """Get all walks located in a region."""
        pass

    @abstractmethod
    async def find_by_walk_difficulty_id(
        self, walk_difficulty_id: uuid.UUID
    ) -> List[Walk]:
        """Get all walks rated with a difficulty."""
        pass
