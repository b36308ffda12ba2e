import logging

import pytest

from config import settings


@pytest.fixture(scope="session", autouse=True)
def bootstrap():
    from app.common import log

    log.configure(
        service="member-search",
        version="test",
        json=False,
        level="debug",
    )
    for loggername in ("faker", "factory", "pymongo"):
        logging.getLogger(loggername).setLevel(logging.WARNING)
    yield
    # https://github.com/pytest-dev/pytest/issues/5502#issuecomment-647157873
    loggers = [logging.getLogger()] + list(logging.Logger.manager.loggerDict.values())
    for logger in loggers:
        handlers = getattr(logger, "handlers", [])
        for handler in handlers:
            logger.removeHandler(handler)


@pytest.fixture
def config() -> settings.Config:
    return settings.Config(
        mongo_uri="mongodb://localhost:27017",
        db_name="members-test",
        collection_name="members",
        token_secret="test-secret",
        username="admin",
        password="password",
        host="127.0.0.1",
        port=5000,
    )
