import logging

import orjson
import pytest

from app.common import log


def test_json_renderer():
    rendered = log.json_renderer(None, "info", {"event": "hello", "count": 2})

    assert orjson.loads(rendered) == {"event": "hello", "count": 2}


def test_json_renderer_falls_back_to_str():
    class Opaque:
        def __str__(self):
            return "opaque"

    rendered = log.json_renderer(None, "info", {"event": "hello", "value": Opaque()})

    assert orjson.loads(rendered)["value"] == "opaque"


@pytest.mark.parametrize(
    "method_name,severity",
    [("info", "INFO"), ("warn", "WARNING"), ("exception", "ERROR"), ("msg", "MSG")],
)
def test_add_severity(method_name, severity):
    assert log.add_severity(None, method_name, {})["severity"] == severity


@pytest.mark.parametrize(
    "level,expected",
    [("debug", logging.DEBUG), ("INFO", logging.INFO), (logging.ERROR, logging.ERROR)],
)
def test_resolve_level(level, expected):
    assert log.resolve_level(level) == expected


def test_resolve_level_unknown():
    with pytest.raises(ValueError):
        log.resolve_level("chatty")
