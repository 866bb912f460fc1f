"""Structured logging - JSON fields and idempotent setup."""

import json
import logging

from inkwell.infrastructure.observability import JSONFormatter, setup_logging


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        "inkwell.test", logging.INFO, __file__, 1, "Post created", None, None,
    )
    record.post_id = 7
    out = json.loads(JSONFormatter().format(record))
    assert out["message"] == "Post created"
    assert out["level"] == "INFO"
    assert out["post_id"] == 7
    assert "category_id" not in out


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "text")
    setup_logging("DEBUG", "json")
    named = [h for h in logging.root.handlers if h.get_name() == "inkwell"]
    assert len(named) == 1
    assert isinstance(named[0].formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG
    logging.root.removeHandler(named[0])
    logging.root.setLevel(logging.WARNING)
