"""
Parsing of raw member-search query parameters into typed criteria.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from app.members.constants import DEFAULT_LIMIT, DEFAULT_PAGE, TRUE_LITERAL, QueryParam

RawValue = Union[str, Sequence[str]]
RawQuery = Mapping[str, RawValue]


@dataclasses.dataclass(frozen=True)
class Criteria:
    """The recognized member filters. `None` means the filter wasn't requested."""

    is_dual_eligible: Optional[bool] = None
    veteran_status: Optional[bool] = None
    is_cov: Optional[bool] = None
    is_current_cov_with_benefit: Optional[str] = None
    # Never pushed down to the database, see app.members.benefits.
    benefit_list: Optional[Tuple[str, ...]] = None


@dataclasses.dataclass(frozen=True)
class ParsedQuery:
    criteria: Criteria
    limit: int = DEFAULT_LIMIT
    page: int = DEFAULT_PAGE

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def parse_query(raw: RawQuery) -> ParsedQuery:
    """Build typed criteria and pagination from raw query parameters.

    Unrecognized keys are ignored. Nothing here raises on bad input: a
    `limit` or `page` that isn't a positive integer falls back to its default.
    """
    return ParsedQuery(
        criteria=parse_criteria(raw),
        limit=parse_positive_int(raw.get(QueryParam.LIMIT), default=DEFAULT_LIMIT),
        page=parse_positive_int(raw.get(QueryParam.PAGE), default=DEFAULT_PAGE),
    )


def parse_criteria(raw: RawQuery) -> Criteria:
    fields = {}

    # Present-but-not-"true" is an explicit False, so "false" still filters.
    if (value := raw.get(QueryParam.IS_DUAL_ELIGIBLE)) is not None:
        fields["is_dual_eligible"] = _last(value) == TRUE_LITERAL
    if (value := raw.get(QueryParam.VETERAN_STATUS)) is not None:
        fields["veteran_status"] = _last(value) == TRUE_LITERAL
    if (value := raw.get(QueryParam.IS_COV)) is not None:
        fields["is_cov"] = _last(value) == TRUE_LITERAL

    if benefit := _last(raw.get(QueryParam.IS_CURRENT_COV_WITH_BENEFIT)):
        fields["is_current_cov_with_benefit"] = benefit
    if benefits := raw.get(QueryParam.BENEFIT_LIST):
        fields["benefit_list"] = parse_benefit_list(benefits)

    return Criteria(**fields)


def parse_benefit_list(value: RawValue) -> Tuple[str, ...]:
    """Accept either repeated values or a single comma-delimited string."""
    if isinstance(value, str):
        return tuple(value.split(","))
    return tuple(value)


def parse_positive_int(value: Any, *, default: int) -> int:
    value = _last(value)
    if value is None:
        return default
    value = str(value)
    # Plain ASCII digits only; `int` would also take "1_000", "+5" or " 5".
    # Non-ASCII digits are rejected too.
    if not (value.isascii() and value.isdigit()):
        return default
    parsed = int(value)
    return parsed if parsed > 0 else default


def _last(value: Optional[RawValue]) -> Optional[Any]:
    # A key repeated in the query string arrives as a sequence; the last wins.
    if isinstance(value, (list, tuple)):
        return value[-1] if value else None
    return value
