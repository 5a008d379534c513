"""
Logging Configuration Tests
"""
import logging

from tms.core.config import settings
from tms.core.logging import get_logger, setup_logging


class TestSetupLogging:
    """Test handler installation on the tms logger"""

    def teardown_method(self):
        setup_logging(log_to_file=False)

    def test_console_only(self):
        logger = setup_logging("debug", log_to_file=False)

        assert logger.name == "tms"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handlers(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
        logger = setup_logging("INFO", log_to_file=True)

        levels = sorted(handler.level for handler in logger.handlers)
        assert len(logger.handlers) == 3
        assert levels[-1] == logging.ERROR
        assert (tmp_path / "logs" / settings.LOG_FILE).exists()
        assert (tmp_path / "logs" / settings.ERROR_LOG_FILE).exists()

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(log_to_file=False)
        logger = setup_logging(log_to_file=False)
        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("verbose", log_to_file=False).level == logging.INFO

    def test_get_logger_namespace(self):
        assert get_logger("validation").name == "tms.validation"
