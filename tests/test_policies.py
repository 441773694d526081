"""
Unit tests for the reference delete policy
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from walks_service.domain.entities import Walk
from walks_service.domain.exceptions import ReferenceConflictException
from walks_service.policies import ReferenceDeletePolicy, apply_reference_delete_policy


@pytest.fixture
def walks():
    region_id = uuid.uuid4()
    return [
        Walk("Lake Track", 5.2, region_id, uuid.uuid4(), id=uuid.uuid4()),
        Walk("Ridge Walk", 12.0, region_id, uuid.uuid4(), id=uuid.uuid4()),
    ]


class TestReferenceDeletePolicy:
    """Test ignore, restrict and cascade"""

    @pytest.mark.asyncio
    async def test_ignore(self, walks):
        walk_repo = AsyncMock()

        await apply_reference_delete_policy(
            ReferenceDeletePolicy.IGNORE, "Region", uuid.uuid4(), walks, walk_repo
        )

        walk_repo.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_restrict_raises(self, walks):
        with pytest.raises(ReferenceConflictException) as exc_info:
            await apply_reference_delete_policy(
                ReferenceDeletePolicy.RESTRICT, "Region", uuid.uuid4(), walks, AsyncMock()
            )

        assert exc_info.value.details["walk_count"] == 2

    @pytest.mark.asyncio
    async def test_restrict_without_walks(self):
        await apply_reference_delete_policy(
            ReferenceDeletePolicy.RESTRICT, "Region", uuid.uuid4(), [], AsyncMock()
        )

    @pytest.mark.asyncio
    async def test_cascade_deletes_each_walk(self, walks):
        walk_repo = AsyncMock()

        await apply_reference_delete_policy(
            ReferenceDeletePolicy.CASCADE, "Region", uuid.uuid4(), walks, walk_repo
        )

        assert [call.args[0] for call in walk_repo.delete.await_args_list] == [
            walk.id for walk in walks
        ]

    def test_policy_from_setting(self):
        assert ReferenceDeletePolicy("cascade") is ReferenceDeletePolicy.CASCADE
