"""Tests for the JSON log formatter."""
import json
import logging

from ally.core.config import settings
from ally.core.logger import JsonFormatter


def test_json_formatter_tags_app_and_env():
    record = logging.makeLogRecord(
        {"name": "ally.test", "levelname": "INFO", "msg": "Registered %s", "args": ("github",), "provider": "github"}
    )
    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Registered github"
    assert payload["logger"] == "ally.test"
    assert payload["app"] == settings.APP_NAME
    assert payload["env"] == settings.ENV
    assert payload["extra"] == {"provider": "github"}
