from unittest import mock
from unittest.mock import AsyncMock

import pytest

from db.clients import member_client
from db.mongo_connector import MongoConnector


@pytest.fixture
def connector():
    return mock.create_autospec(MongoConnector, instance=True)


@pytest.fixture
def cursor(connector):
    collection = connector.collection.return_value
    cursor = collection.find.return_value.sort.return_value
    cursor.to_list = AsyncMock(return_value=[{"member": {"hid": "H1"}}])
    return cursor


@pytest.mark.asyncio
async def test_find_reads_every_match_in_insertion_order(connector, cursor):
    # Given
    members = member_client.Members(connector=connector, collection_name="members")
    predicate = {"member.isDualEligible": True}

    # When
    documents = await members.find(predicate)

    # Then
    assert documents == [{"member": {"hid": "H1"}}]
    connector.collection.assert_called_with("members")
    collection = connector.collection.return_value
    collection.find.assert_called_once_with(predicate)
    collection.find.return_value.sort.assert_called_once_with([("_id", 1)])
    cursor.to_list.assert_awaited_once_with(None)


@pytest.mark.asyncio
async def test_find_propagates_storage_errors(connector, cursor):
    # Given
    cursor.to_list.side_effect = ConnectionError("no servers available")
    members = member_client.Members(connector=connector, collection_name="members")

    # When/Then
    with pytest.raises(ConnectionError):
        await members.find({})
