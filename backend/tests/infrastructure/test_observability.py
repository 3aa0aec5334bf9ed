"""Structured Logging — JSON formatter output shape."""

import json
import logging

from taskview.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "taskview.test", logging.INFO, __file__, 1, "tasks rejected", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "taskview.test"
    assert log["message"] == "tasks rejected"
    assert "timestamp" in log
    assert "slot" not in log


def test_extra_fields_surface():
    log = json.loads(JSONFormatter().format(_record(slot="TasksFile", issue_count=3)))
    assert log["slot"] == "TasksFile"
    assert log["issue_count"] == 3


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    level = root.level
    try:
        first = setup_logging("DEBUG", "text")
        second = setup_logging("WARNING", "json")
        assert first not in root.handlers
        assert second in root.handlers
        assert isinstance(second.formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(second)
        root.setLevel(level)
