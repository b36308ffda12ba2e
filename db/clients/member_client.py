from __future__ import annotations

from typing import List, Mapping, Sequence, Tuple

import pymongo

from db import model
from db.mongo_connector import MongoConnector

# No natural ordering is specified for members, so page over insertion order.
DEFAULT_SORT: Sequence[Tuple[str, int]] = (("_id", pymongo.ASCENDING),)


class Members:
    """A client for querying the member collection."""

    __slots__ = ("connector", "collection_name")

    def __init__(self, *, connector: MongoConnector, collection_name: str):
        self.connector = connector
        self.collection_name = collection_name

    @property
    def collection(self):
        return self.connector.collection(self.collection_name)

    async def find(
        self,
        predicate: Mapping,
        *,
        sort: Sequence[Tuple[str, int]] = DEFAULT_SORT,
    ) -> List[model.MemberDocument]:
        """Fetch every document matching `predicate`, whole and unpaginated."""
        cursor = self.collection.find(predicate).sort(list(sort))
        return await cursor.to_list(None)
