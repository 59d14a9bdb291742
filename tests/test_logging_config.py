"""Tests for logging setup."""

import logging

from netkit.logging_config import setup_logging


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_configures_netkit_logger(self):
        logger = setup_logging("DEBUG", force=True)

        assert logger.name == "netkit"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_does_not_duplicate_handlers(self):
        setup_logging("INFO", force=True)
        logger = setup_logging("INFO")
        assert len(logger.handlers) == 1

    def test_invalid_level_falls_back(self):
        logger = setup_logging("chatty", force=True)
        assert logger.level == logging.WARNING

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "netkit.log"
        logger = setup_logging("DEBUG", log_file=str(log_file), force=True)

        logging.getLogger("netkit.http.client").debug("dispatch recorded")
        for handler in logger.handlers:
            handler.flush()

        assert "dispatch recorded" in log_file.read_text()
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
