from __future__ import annotations

import hmac
from typing import Any, Optional

from app.auth.errors import AuthenticationError
from config import settings

BEARER_PREFIX = "Bearer "


class TokenService:
    """Issues and checks the single shared-secret bearer token."""

    __slots__ = ("token_secret", "username", "password")

    def __init__(self, *, token_secret: str, username: str, password: str):
        self.token_secret = token_secret
        self.username = username
        self.password = password

    @classmethod
    def from_config(cls, config: settings.Config) -> TokenService:
        return cls(
            token_secret=config.token_secret,
            username=config.username,
            password=config.password,
        )

    def issue_token(self, username: Any, password: Any) -> str:
        """Exchange the configured credential pair for the token.

        Raises:
            AuthenticationError: For any other username/password.
        """
        if not (
            _safe_equals(username, self.username)
            and _safe_equals(password, self.password)
        ):
            raise AuthenticationError()
        return self.token_secret

    def is_authorized(self, authorization: Optional[str]) -> bool:
        """Check an `Authorization` header value against the token."""
        if not authorization:
            return False
        return _safe_equals(authorization, f"{BEARER_PREFIX}{self.token_secret}")


def _safe_equals(given: Any, expected: str) -> bool:
    if not isinstance(given, str):
        return False
    # Header bytes that aren't UTF-8 arrive as surrogates, as can JSON strings.
    return hmac.compare_digest(_encode(given), _encode(expected))


def _encode(value: str) -> bytes:
    return value.encode("utf-8", "surrogatepass")
