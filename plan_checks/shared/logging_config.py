"""Logging configuration and setup.

This module provides thread-safe logging configuration with file rotation
and console output.
"""

import logging
import threading
from logging.handlers import RotatingFileHandler
from pathlib import Path

from plan_checks.shared.constants import LOGGING

__all__ = [
    'LOG_FORMAT',
    'setup_logging',
]


_logging_lock = threading.Lock()

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Chatty libraries kept at WARNING even with --verbose
QUIET_LOGGERS = ('urllib3', 'asyncio')


def setup_logging(log_file: str = "logs/plan_checks.log", max_bytes: int = LOGGING.MAX_BYTES,
                  backup_count: int = LOGGING.BACKUP_COUNT, level: int = logging.INFO) -> None:
    """Setup logging configuration with rotation.

    This function is idempotent and thread-safe - calling it multiple times
    or from multiple threads will not add duplicate handlers.

    Args:
        log_file: Path to log file
        max_bytes: Maximum file size before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
        level: Root logger level (logging.DEBUG for --verbose)
    """
    with _logging_lock:
        root_logger = logging.getLogger()
        log_path = Path(log_file)

        has_file_handler = False
        for handler in root_logger.handlers[:]:  # Copy list to allow modification during iteration
            if isinstance(handler, RotatingFileHandler) and handler.baseFilename == str(log_path.absolute()):
                if handler.maxBytes == max_bytes and handler.backupCount == backup_count:
                    has_file_handler = True
                    break
                # Configuration mismatch - remove old handler to reconfigure
                root_logger.removeHandler(handler)
                handler.close()

        # FileHandler is the base class of every file-based handler, so this
        # only finds real console handlers
        has_console_handler = any(
            isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            for h in root_logger.handlers
        )

        root_logger.setLevel(level)
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

        if has_file_handler and has_console_handler:
            return

        log_path.parent.mkdir(parents=True, exist_ok=True)

        formatter = logging.Formatter(LOG_FORMAT)

        if not has_file_handler:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8',
            )
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        if not has_console_handler:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)
