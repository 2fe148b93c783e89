"""
Logging configuration for the wall gap adjuster.

Adds a custom TRACE level below DEBUG for per-classifier decisions and
sets up console output with optional timestamped log files.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional


class WallGapLogger:
    """
    Configures logging for the wall gap adjuster.

    Supports:
    - Standard levels (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    - Custom TRACE level for classifier-by-classifier diagnostics
    - Console output, plus a file handler when a log directory is given
    """

    # Define custom TRACE level (between DEBUG and NOTSET)
    TRACE_LEVEL = 5
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    @staticmethod
    def _add_trace_method():
        """Add the TRACE method to the Logger class if not already present."""
        if not hasattr(logging.Logger, 'trace'):
            def trace(self, message, *args, **kwargs):
                """
                Log a message with level TRACE.
                """
                if self.isEnabledFor(WallGapLogger.TRACE_LEVEL):
                    self._log(WallGapLogger.TRACE_LEVEL, message, args, **kwargs)
            logging.Logger.trace = trace

    @staticmethod
    def configure(debug_mode: bool = False, log_dir: Optional[str] = None) -> Optional[str]:
        """
        Configure the root logger for the whole application.

        Args:
            debug_mode: If True, sets DEBUG level for all loggers
            log_dir: Directory for a timestamped log file. No file is
                written when this is None.

        Returns:
            Path to the created log file, or None when logging to console only
        """
        WallGapLogger._add_trace_method()

        level = logging.DEBUG if debug_mode else logging.INFO

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Clear any existing handlers
        if root_logger.handlers:
            root_logger.handlers.clear()

        log_file = None
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"wall_gap_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s: %(message)s'))
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

        return log_file

    @staticmethod
    def get_logger(name: str, level: Optional[int] = None):
        """
        Get a logger for a specific module.

        Args:
            name: Logger name, typically __name__
            level: Optional specific level for this logger

        Returns:
            A configured logger with a ``trace`` method
        """
        WallGapLogger._add_trace_method()
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)
        return logger


def get_logger(name: str, level: Optional[int] = None):
    """
    Convenience wrapper around WallGapLogger.get_logger.
    """
    return WallGapLogger.get_logger(name, level)
