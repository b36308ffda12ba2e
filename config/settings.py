from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Optional

import dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

CUR_DIR = Path(__file__).resolve().parent


class App(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="APP_")

    env: str = "local"
    version: str = "0.0.0"

    @property
    def dev_enabled(self):
        return self.env == "local"


class Log(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = "info"
    json_format: bool = False


class Mongo(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MONGO_")

    uri: str = "mongodb://localhost:27017"
    db_name: str = "members"
    collection_name: str = "members"


class Auth(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AUTH_")

    token_secret: str = "mysecrettoken"
    username: str = "admin"
    password: str = "password"


class HTTP(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HTTP_")

    host: str = "0.0.0.0"
    port: int = 5000


@dataclasses.dataclass(frozen=True)
class Config:
    """The resolved process configuration.

    Built once at startup and handed to whatever needs it. Nothing reads
    settings on its own after that.
    """

    mongo_uri: str
    db_name: str
    collection_name: str
    token_secret: str
    username: str
    password: str
    host: str
    port: int

    @classmethod
    def resolve(
        cls,
        *,
        mongo_uri: Optional[str] = None,
        db_name: Optional[str] = None,
        collection_name: Optional[str] = None,
        token_secret: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int | str] = None,
    ) -> Config:
        """Layer explicit overrides (e.g. command-line options) over the settings.

        An override of `None` or an empty string keeps the settings value.
        """
        mongo, auth, http = Mongo(), Auth(), HTTP()
        return cls(
            mongo_uri=mongo_uri or mongo.uri,
            db_name=db_name or mongo.db_name,
            collection_name=collection_name or mongo.collection_name,
            token_secret=token_secret or auth.token_secret,
            username=auth.username,
            password=auth.password,
            host=host or http.host,
            port=_parse_port(port) if port else http.port,
        )


def _parse_port(port: int | str) -> int:
    try:
        return int(port)
    except ValueError:
        raise ValueError(f"Invalid port: {port!r}") from None


def load_env():
    envfile = CUR_DIR / ".env"
    if envfile.exists():
        dotenv.load_dotenv(envfile)
