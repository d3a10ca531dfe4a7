# utils/logger.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Logging utility for the CNF derivation with configurable levels

"""Process-wide logger for the derivation engine.

Library code (parser, passes, analyzer) only logs at DEBUG, so importing and
calling it is silent by default. The command-line consumer raises the level
with configure_logging() and prints the derivation itself through the
stage_* helpers, which log at INFO.
"""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO


class LogLevel(Enum):
    """Verbosity levels understood by configure_logging."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class CNFLogger:
    """Wrapper around a stdlib logger with derivation-specific helpers.

    Records below WARNING go to the output stream; warnings and errors go to
    the error stream, so stdout only ever carries the derivation report or
    the JSON document.

    Attributes:
        logger: Underlying logging.Logger, detached from the root logger
    """

    def __init__(
        self,
        name: str = "clausal",
        level: LogLevel = LogLevel.INFO,
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
    ):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # A second instance with the same name must not double the output
        self.logger.handlers.clear()

        output = logging.StreamHandler(stream or sys.stdout)
        output.addFilter(lambda record: record.levelno < logging.WARNING)

        errors = logging.StreamHandler(error_stream or sys.stderr)
        errors.addFilter(lambda record: record.levelno >= logging.WARNING)

        for handler in (output, errors):
            handler.setLevel(level.value)
            handler.setFormatter(CNFFormatter())
            self.logger.addHandler(handler)

        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Apply level to the logger and every handler attached to it."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    # Pipeline progress (DEBUG)
    def derivation_start(self, formula_text: str):
        self.debug(f"=== CNF derivation of {formula_text} ===")

    def stage_completed(self, index: int, title: str, formula: str, steps: int):
        self.debug(f"  [{index}] {title}: {formula} ({steps} step(s))")

    def rewrite_applied(self, rule: str, before: str, after: str):
        self.debug(f"    {rule}: {before} => {after}")

    def parse_failed(self, formula_text: str, reason: str):
        self.debug(f"Could not parse '{formula_text}': {reason}")

    def horn_verdict(self, clause_count: int, is_horn: bool):
        verdict = "Horn" if is_horn else "not Horn"
        self.debug(f"  {clause_count} clause(s), {verdict}")

    # Derivation report (INFO)
    def stage_header(self, index: int, title: str):
        self.info(f"\n{index}. {title}")

    def stage_step(self, message: str):
        self.info(f"   - {message}")

    def stage_result(self, formula: str):
        self.info(f"   => {formula}")


class CNFFormatter(logging.Formatter):
    """Bare messages for INFO, level tags for everything else."""

    def format(self, record):
        if record.levelno == logging.INFO:
            return record.getMessage()
        return f"[{record.levelname}] {record.getMessage()}"


_global_logger: Optional[CNFLogger] = None


def get_logger(name: str = "clausal") -> CNFLogger:
    """Return the shared logger, creating it on first use."""
    global _global_logger
    if _global_logger is None:
        _global_logger = CNFLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Pick the log level from command line flags.

    Args:
        verbose: Show INFO output (the derivation report)
        debug: Show pass internals too; wins over verbose
    """
    if debug:
        level = LogLevel.DEBUG
    elif verbose:
        level = LogLevel.INFO
    else:
        level = LogLevel.WARNING
    set_log_level(level)
