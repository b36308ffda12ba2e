import pytest

from app.auth.errors import AuthenticationError
from app.auth.service import TokenService


@pytest.fixture
def tokens(config) -> TokenService:
    return TokenService.from_config(config)


def test_issue_token(tokens):
    assert tokens.issue_token("admin", "password") == "test-secret"


@pytest.mark.parametrize(
    "username,password",
    [
        ("admin", "wrong"),
        ("root", "password"),
        ("", ""),
        (None, None),
        (["admin"], "password"),
        ("ADMIN", "password"),
    ],
)
def test_issue_token_rejects_other_credentials(tokens, username, password):
    with pytest.raises(AuthenticationError) as exc_info:
        tokens.issue_token(username, password)

    assert str(exc_info.value) == "Invalid credentials"


@pytest.mark.parametrize(
    "authorization,expected",
    [
        ("Bearer test-secret", True),
        ("Bearer wrong", False),
        ("test-secret", False),
        ("bearer test-secret", False),
        ("Bearer  test-secret", False),
        ("", False),
        (None, False),
    ],
)
def test_is_authorized(tokens, authorization, expected):
    assert tokens.is_authorized(authorization) is expected


@pytest.mark.parametrize(
    "authorization",
    [
        # Invalid UTF-8 header bytes, as aiohttp decodes them.
        b"Bearer \xff".decode("utf-8", "surrogateescape"),
        "Bearer \ud800",
        "Bearer test-secret\udcff",
    ],
)
def test_is_authorized_rejects_undecodable_values(tokens, authorization):
    assert tokens.is_authorized(authorization) is False


@pytest.mark.parametrize(
    "username,password",
    [("\ud800", "x"), ("admin", "password\udcff")],
)
def test_issue_token_rejects_undecodable_credentials(tokens, username, password):
    with pytest.raises(AuthenticationError):
        tokens.issue_token(username, password)
