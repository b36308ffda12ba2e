from __future__ import annotations


class MemberSearchError(Exception):
    ...


class MemberQueryError(MemberSearchError, RuntimeError):
    """Raised when a member search could not be completed.

    The original exception is chained as ``__cause__``; callers surface only
    a generic message.
    """

    def __init__(self, *args):
        args = args or ("Member search failed.",)
        super().__init__(*args)
