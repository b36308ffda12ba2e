from __future__ import annotations

from dataclasses import asdict
from typing import Dict, List, Union

from multidict import MultiMapping

from db.model import MemberPage


def query_to_mapping(query: MultiMapping[str]) -> Dict[str, Union[str, List[str]]]:
    """Flatten a query multidict; keys given more than once map to a list."""
    mapping = {}
    for key in query.keys():
        if key in mapping:
            continue
        values = query.getall(key)
        mapping[key] = values[0] if len(values) == 1 else list(values)
    return mapping


def create_member_page_response(page: MemberPage) -> dict:
    return {
        "data": [asdict(projection) for projection in page.data],
        "count": page.count,
    }
