"""Unit tests for logging setup."""

import logging
from pathlib import Path

from health_tracker.utils.logging_config import setup_logging
from health_tracker.utils.parameters import LoggingConfig


def test_file_logging_and_quiet_libraries(tmp_path: Path) -> None:
    """Test file output and third-party logger levels."""
    log_file = tmp_path / "logs" / "app.log"
    config = LoggingConfig(
        level="DEBUG",
        file=str(log_file),
        console=False,
        library_level="ERROR",
        library_loggers=["pandas"],
    )

    logger = setup_logging(config, "health_tracker_test_file")
    logger.debug("stored entry")
    for handler in logger.handlers:
        handler.flush()

    if "stored entry" not in log_file.read_text(encoding="utf-8"):
        raise AssertionError("Expected the message in the log file")

    if logging.getLogger("pandas").level != logging.ERROR:
        raise AssertionError("Expected pandas logger at ERROR")

    for handler in logger.handlers:
        handler.close()


def test_no_outputs_disables_propagation() -> None:
    """Test that a fully silenced logger does not fall back to stderr."""
    config = LoggingConfig(console=False, file=None)

    logger = setup_logging(config, "health_tracker_test_silent")

    if logger.propagate:
        raise AssertionError("Expected propagation to be disabled")
    if not all(isinstance(h, logging.NullHandler) for h in logger.handlers):
        raise AssertionError(f"Expected only a NullHandler, got {logger.handlers}")
