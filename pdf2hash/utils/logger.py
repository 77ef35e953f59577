"""
Logging utilities for pdf2hash.

Hash lines own stdout, so every handler created here writes to stderr
or to a file.
"""

import logging
import os
import sys
from typing import Optional


class Logger:
    """Custom logger for pdf2hash"""

    # Log levels
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    def __init__(self, name: str = "pdf2hash", log_file: Optional[str] = None,
                 level: int = logging.WARNING, quiet: bool = False):
        """Initialize the logger

        Args:
            name: Logger name
            log_file: Optional file to log to
            level: Logging level
            quiet: Only report errors on the console
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False

        # Clear any existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Failures stay visible even when quiet
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(max(level, logging.ERROR) if quiet else level)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self):
        """Get the logger instance"""
        return self.logger
