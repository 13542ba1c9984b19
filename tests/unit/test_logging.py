from __future__ import annotations

import json
import logging

from crackbench.utils.logging import _json_formatter, configure_logging

EXPECTED_RUN = 3
EXPECTED_WORKERS = 4


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.run = EXPECTED_RUN
    record.searcher = "concurrent"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["run"] == EXPECTED_RUN
    assert payload["searcher"] == "concurrent"
    assert "pathname" not in payload
    assert "lineno" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"workers": EXPECTED_WORKERS}

    payload = json.loads(_json_formatter(record))

    assert payload["workers"] == EXPECTED_WORKERS


def test_json_formatter_serializes_non_json_values() -> None:
    record = _record()
    record.path = object()

    payload = json.loads(_json_formatter(record))

    assert isinstance(payload["path"], str)


def test_configure_logging_sets_root_level() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(level="WARNING", json_logs=True)
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
