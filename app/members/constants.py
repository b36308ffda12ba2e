from __future__ import annotations

from typing import Final

DEFAULT_LIMIT: Final[int] = 10
DEFAULT_PAGE: Final[int] = 1

CURRENT_PERIOD: Final[str] = "current"
TRUE_LITERAL: Final[str] = "true"


class QueryParam:
    """The query-string keys the member search understands."""

    LIMIT: Final[str] = "limit"
    PAGE: Final[str] = "page"
    IS_DUAL_ELIGIBLE: Final[str] = "isDualEligible"
    VETERAN_STATUS: Final[str] = "veteranStatus"
    IS_COV: Final[str] = "isCov"
    IS_CURRENT_COV_WITH_BENEFIT: Final[str] = "isCurrentCovWithBenefit"
    BENEFIT_LIST: Final[str] = "benefitList"


class DocumentField:
    """Field paths inside a stored member document."""

    MEMBER: Final[str] = "member"
    COVERAGE: Final[str] = "coverage"
    BENEFIT_NAME: Final[str] = "benefitName"
    PERIOD: Final[str] = "period"
    IS_DUAL_ELIGIBLE: Final[str] = "member.isDualEligible"
    IS_VETERAN: Final[str] = "member.isVeteran"
    FIRST_COVERAGE: Final[str] = "coverage.0"
