from __future__ import annotations

import dataclasses
from typing import Any, List, Mapping, Optional

__all__ = (
    "MemberDocument",
    "MemberProjection",
    "MemberPage",
)

# Member documents have no enforced schema; they're read as plain mappings.
MemberDocument = Mapping[str, Any]


@dataclasses.dataclass(frozen=True)
class MemberProjection:
    hid: Optional[Any] = None
    pid: Optional[Any] = None
    genKey: Optional[Any] = None


@dataclasses.dataclass
class MemberPage:
    data: List[MemberProjection]
    count: int
