"""Tests for logging setup."""

import io
import json
import logging

from m2prune.core.logging import format_timestamp_ms, setup_logging
from m2prune.core.structlog_logger import StructlogMixin, get_struct_logger


class _Worker(StructlogMixin):
    pass


def test_setup_logging_installs_console_handler():
    setup_logging(log_level=logging.INFO)

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_setup_logging_writes_json_file(tmp_path):
    log_file = tmp_path / "logs" / "m2prune.log"
    setup_logging(log_level=logging.INFO, log_file=str(log_file))

    get_struct_logger("m2prune.test").info("snapshot_cleaned", deleted=3)
    for handler in logging.getLogger().handlers:
        handler.flush()

    record = json.loads(log_file.read_text().splitlines()[-1])
    assert record["event"] == "snapshot_cleaned"
    assert record["deleted"] == 3
    assert record["level"] == "info"


def test_setup_logging_replaces_previous_handlers():
    setup_logging(log_level=logging.WARNING)
    setup_logging(log_level=logging.DEBUG)

    assert len(logging.getLogger().handlers) == 1


def test_format_timestamp_ms_truncates_microseconds():
    event_dict = {"timestamp_raw": "12:00:00.123456"}

    assert format_timestamp_ms(None, "info", event_dict) == {"timestamp": "12:00:00.123"}


def test_mixin_logger_is_bound_to_class_name(tmp_path):
    log_file = tmp_path / "mixin.log"
    setup_logging(log_level=logging.DEBUG, log_file=str(log_file))

    _Worker().logger.warning("worker_event")
    for handler in logging.getLogger().handlers:
        handler.flush()

    record = json.loads(log_file.read_text().splitlines()[-1])
    assert record["service"] == "_Worker"


def test_json_logs_go_to_given_stream():
    stream = io.StringIO()
    setup_logging(log_level=logging.WARNING, json_logs=True, stream=stream)

    get_struct_logger("m2prune.test").warning("listing_failed", path="/repo/x")

    record = json.loads(stream.getvalue().splitlines()[-1])
    assert record["event"] == "listing_failed"
    assert record["path"] == "/repo/x"
    assert record["level"] == "warning"
