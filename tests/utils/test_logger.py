import logging
from datetime import date

from utils.logger import setup_logging, get_logger


class TestLogger:
    """Tests for logging setup."""

    def test_setup_creates_dated_log_file(self, tmp_path):
        """Test that logging writes to coinkeeper-<date>.log."""
        logger = setup_logging(tmp_path / "logs", "DEBUG")
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        log_file = tmp_path / "logs" / f"coinkeeper-{date.today().isoformat()}.log"
        assert log_file.exists()
        assert "hello" in log_file.read_text(encoding="utf-8")

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_setup_twice_does_not_duplicate_handlers(self, tmp_path):
        """Test that repeated setup replaces handlers."""
        setup_logging(tmp_path, "INFO")
        logger = setup_logging(tmp_path, "INFO")

        assert len(logger.handlers) == 2
        assert logger.level == logging.INFO

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    def test_get_logger_is_app_logger(self):
        """Test that modules share the same logger."""
        assert get_logger() is logging.getLogger("coinkeeper")
