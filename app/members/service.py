from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable, List, Sequence

import structlog

from app.members import benefits, errors
from app.members.constants import DocumentField
from app.members.criteria import Criteria, ParsedQuery, RawQuery, parse_query
from app.members.query_builder import build_query
from db import model
from db.clients import member_client

logger = structlog.getLogger(__name__)


class MemberQueryService:
    """Filtered, paginated member search.

    Filtering happens in two stages: whatever Mongo can evaluate is pushed
    down as the query predicate, then the benefit list is checked in memory
    against each retrieved document. Pagination and the total count are both
    taken from the result of the second stage.
    """

    __slots__ = ("members",)

    def __init__(self, members: member_client.Members):
        self.members = members

    async def get_members(self, raw: RawQuery) -> model.MemberPage:
        """Search members by raw query parameters.

        Args:
            raw: Query parameter names mapped to a string, or a list of
                strings for repeated keys.

        Returns:
            The requested page of projections and the total match count.

        Raises:
            MemberQueryError: If anything fails along the way. Nothing partial
                is ever returned.
        """
        try:
            parsed = parse_query(raw)
            predicate = build_query(parsed.criteria)
            documents = await self.members.find(predicate)
            filtered = filter_by_benefits(documents, parsed.criteria)
            page = self._paginate(filtered, parsed)
        except Exception as e:
            raise errors.MemberQueryError() from e

        logger.info(
            "Searched members",
            predicate=predicate,
            benefit_list=parsed.criteria.benefit_list,
            retrieved=len(documents),
            count=page.count,
            limit=parsed.limit,
            page=parsed.page,
        )
        return page

    def _paginate(
        self, documents: Sequence[model.MemberDocument], parsed: ParsedQuery
    ) -> model.MemberPage:
        window = documents[parsed.skip : parsed.skip + parsed.limit]
        return model.MemberPage(
            data=[self._convert_single_member(doc) for doc in window],
            count=len(documents),
        )

    @staticmethod
    def _convert_single_member(
        document: model.MemberDocument,
    ) -> model.MemberProjection:
        member = None
        if isinstance(document, Mapping):
            member = document.get(DocumentField.MEMBER)
        if not isinstance(member, Mapping):
            return model.MemberProjection()
        return model.MemberProjection(
            hid=member.get("hid"),
            pid=member.get("pid"),
            genKey=member.get("genKey"),
        )


def filter_by_benefits(
    documents: Iterable[model.MemberDocument], criteria: Criteria
) -> List[model.MemberDocument]:
    """Keep the documents whose coverage holds every requested benefit.

    Without a benefit list every document is kept.
    """
    if not criteria.benefit_list:
        return list(documents)
    return [
        doc
        for doc in documents
        if isinstance(doc, Mapping)
        and benefits.matches(
            doc.get(DocumentField.COVERAGE), criteria.benefit_list
        )
    ]
