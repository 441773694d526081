"""
Database models for walks service.

SQLAlchemy ORM records for regions, walk difficulties and walks. Walks
reference regions and difficulties by id only; there are no foreign key
constraints, the references are checked by the request validator.
"""

import uuid
from typing import Any

from sqlalchemy import Column, DateTime, Float, Index, String, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base: Any = declarative_base()


class RegionRecord(Base):
    """
    Geographic region a walk belongs to.

    Attributes:
        id: Primary key (UUID)
        name: Region name, e.g. "Otago"
        code: Short region code, e.g. "OTA"
        lat: Latitude of the region centre
        long: Longitude of the region centre
        image: Optional image reference
        created_at: Timestamp of record creation
        updated_at: Timestamp of last update
    """

    __tablename__ = "regions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    code = Column(String(20), nullable=False, index=True)
    lat = Column(Float, nullable=False)
    long = Column(Float, nullable=False)
    image = Column(String(1024), nullable=True)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)


class WalkDifficultyRecord(Base):
    """Difficulty rating such as Easy, Medium or Hard."""

    __tablename__ = "walk_difficulties"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    code = Column(String(50), nullable=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)


class WalkRecord(Base):
    """
    Hiking trail.

    Attributes:
        id: Primary key (UUID)
        name: Walk name
        length: Walk length in kilometres
        region_id: Id of the region the walk is in
        walk_difficulty_id: Id of the walk's difficulty rating
    """

    __tablename__ = "walks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    length = Column(Float, nullable=False)
    region_id = Column(Uuid, nullable=False)
    walk_difficulty_id = Column(Uuid, nullable=False)

    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_walks_region_id", "region_id"),
        Index("idx_walks_walk_difficulty_id", "walk_difficulty_id"),
    )
