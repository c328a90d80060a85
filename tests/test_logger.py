"""Tests for the file-only logger."""

import logging
import uuid

from wpmcp.server.logger import get_logger


def _fresh_name():
    return f"test_{uuid.uuid4().hex[:8]}"


class TestGetLogger:
    def test_namespaced(self):
        name = _fresh_name()
        assert get_logger(name).name == f"wpmcp.{name}"

    def test_never_writes_to_stdout(self):
        logger = get_logger(_fresh_name())
        assert logger.propagate is False
        assert logger.handlers
        for handler in logger.handlers:
            assert isinstance(handler, logging.FileHandler)

    def test_handlers_attached_once(self):
        name = _fresh_name()
        first = get_logger(name)
        count = len(first.handlers)
        assert get_logger(name) is first
        assert len(first.handlers) == count == 2

    def test_error_log_only_takes_errors(self):
        levels = sorted(h.level for h in get_logger(_fresh_name()).handlers)
        assert levels == [logging.DEBUG, logging.ERROR]

    def test_writes_to_configured_files(self, tmp_data_dir):
        logger = get_logger(_fresh_name())
        logger.setLevel(logging.INFO)
        logger.info("hello log")
        logger.error("bad thing")
        for handler in logger.handlers:
            handler.flush()

        assert "hello log" in (tmp_data_dir / "logs" / "wpmcp.log").read_text()
        errors = (tmp_data_dir / "logs" / "wpmcp-errors.log").read_text()
        assert "bad thing" in errors
        assert "hello log" not in errors
        for handler in logger.handlers:
            handler.close()
