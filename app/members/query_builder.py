"""
Translation of member criteria into a Mongo filter document.

Only criteria Mongo can evaluate on its own end up here. The benefit list is
applied after retrieval by the service.
"""

from __future__ import annotations

from typing import Any, Dict, List

from app.members.constants import CURRENT_PERIOD, DocumentField
from app.members.criteria import Criteria

Predicate = Dict[str, Any]


def build_query(criteria: Criteria) -> Predicate:
    """Build the pushdown predicate for `criteria`.

    Equality filters become top-level fields. Coverage conditions are
    collected into an `$and` group, which sits next to the top-level fields
    when there are any. No criteria yields `{}`, which matches everything.
    """
    query: Predicate = {}
    and_conditions: List[Predicate] = []

    if criteria.is_dual_eligible is not None:
        query[DocumentField.IS_DUAL_ELIGIBLE] = criteria.is_dual_eligible

    if criteria.veteran_status is not None:
        query[DocumentField.IS_VETERAN] = criteria.veteran_status

    if criteria.is_current_cov_with_benefit:
        and_conditions.append(
            current_coverage_with_benefit(criteria.is_current_cov_with_benefit)
        )

    # `isCov=false` doesn't mean "no coverage"; it just doesn't filter.
    if criteria.is_cov:
        and_conditions.append(has_coverage())

    if and_conditions:
        query["$and"] = and_conditions

    return query


def current_coverage_with_benefit(benefit_name: str) -> Predicate:
    return {
        DocumentField.COVERAGE: {
            "$elemMatch": {
                DocumentField.PERIOD: CURRENT_PERIOD,
                DocumentField.BENEFIT_NAME: benefit_name,
            }
        }
    }


def has_coverage() -> Predicate:
    return {DocumentField.FIRST_COVERAGE: {"$exists": True}}
