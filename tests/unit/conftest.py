from unittest import mock
from unittest.mock import AsyncMock

import pytest

from app.members.service import MemberQueryService
from db.clients import member_client


@pytest.fixture
def members():
    """Mock the member client with AsyncMock for async methods."""
    client = mock.create_autospec(member_client.Members, instance=True)
    client.find = AsyncMock(return_value=[])
    return client


@pytest.fixture
def service(members) -> MemberQueryService:
    return MemberQueryService(members)
