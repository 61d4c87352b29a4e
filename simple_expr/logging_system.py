"""
Logging System for simple_expr

This module provides a centralized logger with verbosity levels. The
simplifier reports each rewrite rule it fires through it, and the validator
reports when it has to leave the int64 batch path.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels"""
    SILENT = 0      # No output
    MINIMAL = 1     # Default
    DETAILED = 2    # Per-operation summaries
    VERBOSE = 3     # Every rewrite rule that fires


class ExpressionLogger:
    """
    Centralized logger wrapping the ``simple_expr`` stdlib logger
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        # Create logger
        self.logger = logging.getLogger('simple_expr')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()  # Remove any existing handlers

        self.formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
        self.console_handler: Optional[logging.Handler] = None

        if self.log_level != LogLevel.SILENT:
            self.ensure_console_handler()

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"simple_expr_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(self.formatter)
            self.logger.addHandler(file_handler)

    def ensure_console_handler(self):
        """Attach the console handler if it is not attached yet"""
        if self.console_handler is None:
            self.console_handler = logging.StreamHandler(sys.stderr)
            self.console_handler.setFormatter(self.formatter)
            self.logger.addHandler(self.console_handler)

    def set_level(self, level: LogLevel):
        self.log_level = level
        if level != LogLevel.SILENT:
            self.ensure_console_handler()

    def should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self.should_log(required_level):
            self.logger.info(message)

    def rule(self, rule_name: str, before: str, after: str):
        """A rewrite rule fired"""
        if self.should_log(LogLevel.VERBOSE):
            self.logger.debug(f"RULE {rule_name}: {before} => {after}")


# Global logger instance
_global_logger: Optional[ExpressionLogger] = None


def get_logger() -> ExpressionLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger(log_level=level)
    else:
        _global_logger.set_level(level)


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ExpressionLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = ExpressionLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_rule(rule_name: str, before: str, after: str):
    """Log a fired rewrite rule"""
    get_logger().rule(rule_name, before, after)
