"""
Domain entities for walks data.

Framework-agnostic records for regions, walk difficulties and walks.
Repositories return these; routers map them to wire models.
"""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class Region:
    """Geographic area that walks are located in."""

    name: str
    code: str
    lat: float
    long: float
    image: Optional[str] = None
    id: Optional[uuid.UUID] = None


@dataclass
class WalkDifficulty:
    """Difficulty rating, e.g. Easy, Medium or Hard."""

    code: str
    id: Optional[uuid.UUID] = None


@dataclass
class Walk:
    """
    Hiking trail.

    region_id and walk_difficulty_id are plain references; whether they
    point at existing records is checked before writes, not by the store.
    """

    name: str
    length: float
    region_id: uuid.UUID
    walk_difficulty_id: uuid.UUID
    id: Optional[uuid.UUID] = None
