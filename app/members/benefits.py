"""
Benefit matching for member coverage lists.

Membership of a benefit list can't be expressed as a single Mongo predicate
over the names we derive here, so this runs in memory after retrieval.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from app.members.constants import DocumentField


def extract_benefit_names(coverage: Optional[Iterable[Any]]) -> List[str]:
    """Collect the `benefitName` of every coverage entry, in order.

    Duplicates are kept. Entries that aren't mappings, or that don't carry a
    benefit name, contribute nothing.
    """
    if not isinstance(coverage, (list, tuple)):
        return []

    names = []
    for entry in coverage:
        if not isinstance(entry, Mapping):
            continue
        if name := entry.get(DocumentField.BENEFIT_NAME):
            names.append(name)
    return names


def matches(coverage: Optional[Iterable[Any]], requested: Iterable[str]) -> bool:
    """Whether *every* requested benefit appears somewhere in the coverage.

    An empty request always matches.
    """
    extracted = extract_benefit_names(coverage)
    return all(benefit in extracted for benefit in requested)
