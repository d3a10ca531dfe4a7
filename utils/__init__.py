# utils/__init__.py
# This file is part of Clausal - A First-Order CNF Derivation Engine
#
# Utility module exports

from .logger import (
    LogLevel,
    CNFLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "CNFLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
