"""Unit tests for texttrimmer.utils.logging_config module."""

import logging
from pathlib import Path

from texttrimmer.utils.logging_config import setup_logging


class TestSetupLogging:
    """Test setup_logging function."""

    def test_sets_level(self) -> None:
        setup_logging("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging("LOUD")
        assert logging.getLogger().level == logging.INFO

    def test_writes_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "texttrimmer.log"
        setup_logging("DEBUG", str(log_file))

        logging.getLogger("texttrimmer.test").debug("hello log")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "hello log" in log_file.read_text()
        setup_logging("WARNING")

    def test_package_level_set_separately(self) -> None:
        setup_logging("DEBUG", package_level="WARNING")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("texttrimmer").level == logging.WARNING
        setup_logging("WARNING")

    def test_package_level_follows_log_level(self) -> None:
        setup_logging("ERROR")
        assert logging.getLogger("texttrimmer").level == logging.ERROR
        setup_logging("WARNING")

    def test_package_debug_records_silenced(self, tmp_path: Path) -> None:
        log_file = tmp_path / "texttrimmer.log"
        setup_logging("DEBUG", str(log_file), package_level="INFO")

        logging.getLogger("texttrimmer.trimmer").debug("per-call detail")
        logging.getLogger("other").debug("other detail")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = log_file.read_text()
        assert "per-call detail" not in content
        assert "other detail" in content
        setup_logging("WARNING")

    def test_library_has_null_handler(self) -> None:
        import texttrimmer

        handlers = logging.getLogger(texttrimmer.__name__).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
