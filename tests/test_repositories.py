"""
Tests for the SQLAlchemy repositories.

Runs against the in-memory SQLite session from conftest.
"""

import uuid
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from walks_service.domain.entities import Region, Walk, WalkDifficulty
from walks_service.domain.exceptions import RepositoryException
from walks_service.models import RegionRecord
from walks_service.repositories.sqlalchemy_repository import (
    SqlAlchemyRegionRepository,
    SqlAlchemyRepository,
    SqlAlchemyWalkDifficultyRepository,
    SqlAlchemyWalkRepository,
)


@pytest.fixture
def region_repo(db_session):
    return SqlAlchemyRegionRepository(db_session)


@pytest.fixture
def walk_repo(db_session):
    return SqlAlchemyWalkRepository(db_session)


@pytest.fixture
def otago():
    return Region(name="Otago", code="OTA", lat=-45.0, long=170.5)


class TestRegionRepository:
    """Test region persistence"""

    @pytest.mark.asyncio
    async def test_add_generates_id(self, region_repo, otago):
        supplied_id = uuid.uuid4()
        otago.id = supplied_id

        saved = await region_repo.add(otago)

        assert saved.id is not None
        assert saved.id != supplied_id
        assert saved.name == "Otago"
        assert saved.image is None

    @pytest.mark.asyncio
    async def test_get_round_trip(self, region_repo, otago):
        saved = await region_repo.add(otago)

        found = await region_repo.get(saved.id)

        assert found == saved

    @pytest.mark.asyncio
    async def test_get_unknown_returns_none(self, region_repo):
        assert await region_repo.get(uuid.uuid4()) is None

    @pytest.mark.asyncio
    async def test_get_all(self, region_repo, otago):
        await region_repo.add(otago)
        await region_repo.add(Region(name="Canterbury", code="CAN", lat=-43.5, long=172.6))

        regions = await region_repo.get_all()

        assert {region.code for region in regions} == {"OTA", "CAN"}

    @pytest.mark.asyncio
    async def test_update_replaces_all_fields(self, region_repo):
        saved = await region_repo.add(
            Region(name="Otago", code="OTA", lat=-45.0, long=170.5, image="otago.png")
        )

        updated = await region_repo.update(
            saved.id, Region(name="Otago Region", code="OTG", lat=-45.1, long=170.6)
        )

        assert updated.id == saved.id
        assert updated.name == "Otago Region"
        assert updated.code == "OTG"
        assert updated.image is None

    @pytest.mark.asyncio
    async def test_update_unknown_returns_none(self, region_repo, otago):
        assert await region_repo.update(uuid.uuid4(), otago) is None

    @pytest.mark.asyncio
    async def test_delete_returns_last_state(self, region_repo, otago):
        saved = await region_repo.add(otago)

        deleted = await region_repo.delete(saved.id)

        assert deleted == saved
        assert await region_repo.get(saved.id) is None
        assert await region_repo.delete(saved.id) is None


class TestWalkDifficultyRepository:
    """Test walk difficulty persistence"""

    @pytest.mark.asyncio
    async def test_add_and_get(self, db_session):
        repo = SqlAlchemyWalkDifficultyRepository(db_session)

        saved = await repo.add(WalkDifficulty(code="Medium"))

        assert (await repo.get(saved.id)).code == "Medium"


class TestWalkRepository:
    """Test walk persistence and reference lookups"""

    @pytest.mark.asyncio
    async def test_find_by_references(self, walk_repo):
        region_id, other_region_id = uuid.uuid4(), uuid.uuid4()
        difficulty_id = uuid.uuid4()

        first = await walk_repo.add(Walk("Lake Track", 5.2, region_id, difficulty_id))
        await walk_repo.add(Walk("Ridge Walk", 12.0, other_region_id, difficulty_id))

        in_region = await walk_repo.find_by_region_id(region_id)
        with_difficulty = await walk_repo.find_by_walk_difficulty_id(difficulty_id)

        assert [walk.id for walk in in_region] == [first.id]
        assert len(with_difficulty) == 2

    @pytest.mark.asyncio
    async def test_store_accepts_dangling_references(self, walk_repo):
        saved = await walk_repo.add(Walk("Lake Track", 5.2, uuid.uuid4(), uuid.uuid4()))
        assert (await walk_repo.get(saved.id)) == saved


class TestRepositoryErrors:
    """Test database failures are wrapped"""

    @pytest.mark.asyncio
    async def test_add_failure_rolls_back(self, otago):
        db = MagicMock(spec=Session)
        db.commit.side_effect = OperationalError("INSERT", {}, Exception("db down"))
        repo = SqlAlchemyRegionRepository(db)

        with pytest.raises(RepositoryException) as exc_info:
            await repo.add(otago)

        db.rollback.assert_called_once()
        assert exc_info.value.details["operation"] == "add"

    @pytest.mark.asyncio
    async def test_get_all_failure(self):
        db = MagicMock(spec=Session)
        db.query.side_effect = OperationalError("SELECT", {}, Exception("db down"))
        repo = SqlAlchemyWalkRepository(db)

        with pytest.raises(RepositoryException):
            await repo.get_all()


class TestRepositoryBase:
    """Test the shared base requires the mapping hooks"""

    def test_base_cannot_be_instantiated(self, db_session):
        with pytest.raises(TypeError):
            SqlAlchemyRepository(db_session)

    def test_subclass_without_hooks_cannot_be_instantiated(self, db_session):
        class HalfRepository(SqlAlchemyRepository[Region]):
            record_class = RegionRecord

            def _map_to_entity(self, record):
                return Region(record.name, record.code, record.lat, record.long)

        with pytest.raises(TypeError):
            HalfRepository(db_session)
