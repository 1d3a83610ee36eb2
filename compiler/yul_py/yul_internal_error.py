#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

# yul_internal_error.py
from __future__ import annotations

from typing import NoReturn, Optional

from yul_ast import Node, SourceLocation


class InternalCompilerError(RuntimeError):
    """
    ICE = toolchain bug / violated invariant of the tree handed to us.
    Not for user mistakes (malformed input documents raise JsonImportError).
    """

    def __init__(self, message: str, location: SourceLocation | None = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def format(self) -> str:
        message = self.message
        if "[ICE-" not in message:
            message = f"[ICE-9999] {message}"
        if self.location and self.location.source_name:
            loc = self.location
            return f"{loc.source_name}:{loc.start}:{loc.end}: internal compiler error: {message}"
        return f"internal compiler error: {message}"


def ice(message: str, node: Optional[Node] = None) -> NoReturn:
    """Raise an internal compiler error, attaching the node's location if it has one."""
    debug_data = getattr(node, "debug_data", None) if node is not None else None
    location = debug_data.location if debug_data is not None else None
    raise InternalCompilerError(message, location)


def ice_assert(condition: object, message: str, node: Optional[Node] = None) -> None:
    if not condition:
        ice(message, node)
