"""Tests for logging setup."""

from loguru import logger

from settings.logging import setup_logging


class TestSetupLogging:
    def test_console_only(self, tmp_path):
        setup_logging(level="INFO", to_file=False, log_dir=tmp_path)
        logger.info("console only")
        assert list(tmp_path.iterdir()) == []

    def test_file_sink(self, tmp_path):
        log_dir = tmp_path / "logs"
        try:
            setup_logging(level="INFO", to_file=True, log_dir=log_dir)
            logger.debug("request sent")
        finally:
            setup_logging(level="INFO", to_file=False)

        files = list(log_dir.glob("poll_*.log"))
        assert len(files) == 1
        assert "request sent" in files[0].read_text()
