"""
SQLAlchemy implementation of the walks repositories.

Maps ORM records to domain entities and wraps database errors in
RepositoryException after rolling back the session.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..domain.entities import Region, Walk, WalkDifficulty
from ..domain.exceptions import RepositoryException
from ..models import RegionRecord, WalkDifficultyRecord, WalkRecord
from .walk_repository import (
    IRegionRepository,
    IWalkDifficultyRepository,
    IWalkRepository,
)

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class SqlAlchemyRepository(ABC, Generic[EntityT]):
    """
    Shared CRUD plumbing for one ORM record type.

    Subclasses set ``record_class`` and implement the two mapping hooks.
    """

    record_class: Type[Any]

    def __init__(self, db: Session):
        """
        Initialize repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    @property
    def entity_name(self) -> str:
        return self.record_class.__name__.replace("Record", "")

    async def get_all(self) -> List[EntityT]:
        """Get all records."""
        try:
            records = self.db.query(self.record_class).all()
            return [self._map_to_entity(record) for record in records]
        except SQLAlchemyError as e:
            logger.error(f"Error listing {self.entity_name} records: {e}")
            raise RepositoryException("get_all", str(e))

    async def get(self, entity_id: uuid.UUID) -> Optional[EntityT]:
        """Get one record by id."""
        try:
            record = self._find_record(entity_id)
            return self._map_to_entity(record) if record else None
        except SQLAlchemyError as e:
            logger.error(f"Error finding {self.entity_name} {entity_id}: {e}")
            raise RepositoryException("get", str(e))

    async def add(self, entity: EntityT) -> EntityT:
        """Insert a record under a new id."""
        try:
            record = self.record_class(id=uuid.uuid4())
            self._apply_entity(record, entity)
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)

            logger.info(f"Created {self.entity_name} {record.id}")
            return self._map_to_entity(record)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating {self.entity_name}: {e}")
            raise RepositoryException("add", str(e))

    async def update(self, entity_id: uuid.UUID, entity: EntityT) -> Optional[EntityT]:
        """Replace all fields of an existing record."""
        try:
            record = self._find_record(entity_id)
            if record is None:
                return None

            self._apply_entity(record, entity)
            self.db.commit()
            self.db.refresh(record)
            return self._map_to_entity(record)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error updating {self.entity_name} {entity_id}: {e}")
            raise RepositoryException("update", str(e))

    async def delete(self, entity_id: uuid.UUID) -> Optional[EntityT]:
        """Delete a record and return its last state."""
        try:
            record = self._find_record(entity_id)
            if record is None:
                return None

            entity = self._map_to_entity(record)
            self.db.delete(record)
            self.db.commit()

            logger.info(f"Deleted {self.entity_name} {entity_id}")
            return entity
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error deleting {self.entity_name} {entity_id}: {e}")
            raise RepositoryException("delete", str(e))

    def _find_record(self, entity_id: uuid.UUID) -> Optional[Any]:
        return (
            self.db.query(self.record_class)
            .filter(self.record_class.id == entity_id)
            .first()
        )

    @abstractmethod
    def _map_to_entity(self, record: Any) -> EntityT:
        """Map database model to domain entity."""
        pass

    @abstractmethod
    def _apply_entity(self, record: Any, entity: EntityT) -> None:
        """Copy every domain field onto the database model."""
        pass


class SqlAlchemyRegionRepository(SqlAlchemyRepository[Region], IRegionRepository):
    """Region persistence."""

    record_class = RegionRecord

    def _map_to_entity(self, record: RegionRecord) -> Region:
        return Region(
            id=record.id,
            name=record.name,
            code=record.code,
            lat=record.lat,
            long=record.long,
            image=record.image,
        )

    def _apply_entity(self, record: RegionRecord, entity: Region) -> None:
        record.name = entity.name
        record.code = entity.code
        record.lat = entity.lat
        record.long = entity.long
        record.image = entity.image


class SqlAlchemyWalkDifficultyRepository(
    SqlAlchemyRepository[WalkDifficulty], IWalkDifficultyRepository
):
    """Walk difficulty persistence."""

    record_class = WalkDifficultyRecord

    def _map_to_entity(self, record: WalkDifficultyRecord) -> WalkDifficulty:
        return WalkDifficulty(id=record.id, code=record.code)

    def _apply_entity(self, record: WalkDifficultyRecord, entity: WalkDifficulty) -> None:
        record.code = entity.code


class SqlAlchemyWalkRepository(SqlAlchemyRepository[Walk], IWalkRepository):
    """Walk persistence."""

    record_class = WalkRecord

    async def find_by_region_id(self, region_id: uuid.UUID) -> List[Walk]:
        try:
            records = (
                self.db.query(WalkRecord).filter(WalkRecord.region_id == region_id).all()
            )
            return [self._map_to_entity(record) for record in records]
        except SQLAlchemyError as e:
            logger.error(f"Error finding walks for region {region_id}: {e}")
            raise RepositoryException("find_by_region_id", str(e))

    async def find_by_walk_difficulty_id(
        self, walk_difficulty_id: uuid.UUID
    ) -> List[Walk]:
        try:
            records = (
                self.db.query(WalkRecord)
                .filter(WalkRecord.walk_difficulty_id == walk_difficulty_id)
                .all()
            )
            return [self._map_to_entity(record) for record in records]
        except SQLAlchemyError as e:
            logger.error(f"Error finding walks for difficulty {walk_difficulty_id}: {e}")
            raise RepositoryException("find_by_walk_difficulty_id", str(e))

    def _map_to_entity(self, record: WalkRecord) -> Walk:
        return Walk(
            id=record.id,
            name=record.name,
            length=record.length,
            region_id=record.region_id,
            walk_difficulty_id=record.walk_difficulty_id,
        )

    def _apply_entity(self, record: WalkRecord, entity: Walk) -> None:
        record.name = entity.name
        record.length = entity.length
        record.region_id = entity.region_id
        record.walk_difficulty_id = entity.walk_difficulty_id
