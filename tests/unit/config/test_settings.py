import dataclasses

import pytest

from config import settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "MONGO_URI",
        "MONGO_DB_NAME",
        "MONGO_COLLECTION_NAME",
        "AUTH_TOKEN_SECRET",
        "AUTH_USERNAME",
        "AUTH_PASSWORD",
        "HTTP_HOST",
        "HTTP_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_resolve_defaults():
    config = settings.Config.resolve()

    assert config == settings.Config(
        mongo_uri="mongodb://localhost:27017",
        db_name="members",
        collection_name="members",
        token_secret="mysecrettoken",
        username="admin",
        password="password",
        host="0.0.0.0",
        port=5000,
    )


def test_resolve_reads_environment(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db.internal:27017")
    monkeypatch.setenv("MONGO_COLLECTION_NAME", "people")
    monkeypatch.setenv("AUTH_TOKEN_SECRET", "from-env")
    monkeypatch.setenv("HTTP_PORT", "8080")

    config = settings.Config.resolve()

    assert config.mongo_uri == "mongodb://db.internal:27017"
    assert config.collection_name == "people"
    assert config.token_secret == "from-env"
    assert config.port == 8080


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("AUTH_TOKEN_SECRET", "from-env")
    monkeypatch.setenv("HTTP_PORT", "8080")

    config = settings.Config.resolve(token_secret="from-cli", port="9090")

    assert config.token_secret == "from-cli"
    assert config.port == 9090


def test_empty_overrides_are_ignored():
    config = settings.Config.resolve(mongo_uri=None, db_name="", port=None)

    assert config.mongo_uri == "mongodb://localhost:27017"
    assert config.db_name == "members"
    assert config.port == 5000


def test_config_is_immutable(config):
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.token_secret = "changed"


def test_resolve_rejects_bad_port():
    with pytest.raises(ValueError, match="Invalid port: 'abc'"):
        settings.Config.resolve(port="abc")
