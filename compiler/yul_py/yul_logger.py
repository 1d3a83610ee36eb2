"""
Logging utilities for the Yul tools.

This module provides logging functions that respect the PrinterContext
settings (log level and rich format).
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import sys
import time
from typing import Optional

from yul_context import LogLevel, PrinterContext


def log(context: Optional[PrinterContext], log_level: LogLevel, message: str) -> None:
    """
    Log a message if the context's level admits it. Without a context nothing is logged.

    Args:
        context:    The printer context containing the logging level, or None.
        log_level:  The level of the message to log.
        message:    The message to log.
    """
    if context is None:
        return
    prefix = ""
    if context.log_rich_format:
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        prefix = {
            LogLevel.ERROR: f"{timestamp} [ERROR] ",
            LogLevel.WARNING: f"{timestamp} [WARNING] ",
            LogLevel.INFO: f"{timestamp} [INFO] ",
            LogLevel.DEBUG: f"{timestamp} [DEBUG] ",
        }.get(log_level, "")
    if context.log_level >= log_level:
        print(f"{prefix}{message}", file=sys.stderr)


def log_error(context: Optional[PrinterContext], message: str) -> None:
    """Log an error-level message if logging level is ERROR or higher."""
    log(context, LogLevel.ERROR, message)


def log_warning(context: Optional[PrinterContext], message: str) -> None:
    """Log a warning-level message if logging level is WARNING or higher."""
    log(context, LogLevel.WARNING, message)


def log_info(context: Optional[PrinterContext], message: str) -> None:
    """Log an info-level message if logging level is INFO or higher."""
    log(context, LogLevel.INFO, message)


def log_debug(context: Optional[PrinterContext], message: str) -> None:
    """Log a debug-level message if logging level is DEBUG or higher."""
    log(context, LogLevel.DEBUG, message)


def log_stage(context: Optional[PrinterContext], stage: str, subject: Optional[str] = None) -> None:
    """
    Log the start of a processing stage.

    Args:
        context: The printer context containing logging settings.
        stage:   The name of the stage (e.g., "Importing", "Printing").
        subject: Optional name of the file or tree being processed.
    """
    if subject:
        log(context, LogLevel.INFO, f"{stage} '{subject}'")
    else:
        log(context, LogLevel.INFO, f"{stage}...")
