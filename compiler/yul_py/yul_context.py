"""
Printer context for cross-cutting options.

This module defines the PrinterContext dataclass which holds options that
affect every stage of the toolchain driver (logging verbosity and format).
Inputs of a print pass (dialect, source index table) are passed to the
printer explicitly and do not live here.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass
from enum import IntEnum


class LogLevel(IntEnum):
    """Hierarchical logging levels for the Yul tools."""
    SILENT = 0      # No logging
    ERROR = 3       # Error messages only
    WARNING = 6     # Warning messages (default)
    INFO = 10       # General progress messages (-v)
    DEBUG = 30      # Detailed diagnostic information (-vvv)


@dataclass
class PrinterContext:
    """
    Holds cross-cutting options shared by the importer, printer and CLI.

    Attributes:
        log_rich_format:        If True, emit logs in rich format: includes log level and timestamps.
        log_level:              Current logging level.
    """
    log_rich_format: bool = False
    log_level: LogLevel = LogLevel.WARNING

    @staticmethod
    def default() -> 'PrinterContext':
        """Create a PrinterContext with default settings."""
        return PrinterContext(log_level=LogLevel.WARNING)
