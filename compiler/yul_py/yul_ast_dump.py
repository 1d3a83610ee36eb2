#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, List

from yul_ast import Block, DebugData, Node


def _format_location(debug_data: DebugData | None) -> str:
    if debug_data is None:
        return ""
    loc = debug_data.location
    return f" @{loc.source_name}:{loc.start}-{loc.end}"


def _format_scalar(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return repr(value)


def format_node(node: Any, indent: int = 0) -> List[str]:
    """
    Generic, reflection-based structural dump of a Yul tree.

    - Shows the node class name.
    - Prints scalar fields inline (empty strings and None are skipped).
    - Recursively prints child nodes / lists of nodes on new indented lines.
    - Appends the source range like `@a.yul:10-25` when the node has debug data.
    """
    ind = "  " * indent

    if isinstance(node, list):
        lines: List[str] = []
        for elem in node:
            lines.extend(format_node(elem, indent))
        return lines

    if isinstance(node, Node) and is_dataclass(node):
        data_fields = [f for f in fields(node) if f.name != "debug_data"]
        simple_parts = []
        child_fields = []

        for f in data_fields:
            value = getattr(node, f.name)
            if isinstance(value, (Node, list)):
                child_fields.append((f.name, value))
            else:
                simple_parts.append((f.name, value))

        # Header: ClassName(field1=..., field2=...) @source:start-end
        header = node.__class__.__name__
        shown = [(name, value) for name, value in simple_parts if value not in (None, "")]
        if shown:
            inner = ", ".join(f"{name}={_format_scalar(value)}" for name, value in shown)
            header = f"{header}({inner})"
        header += _format_location(node.debug_data)

        lines = [ind + header]

        for name, value in child_fields:
            if value is None:
                continue
            if isinstance(value, list):
                if not value:
                    continue
                lines.append(ind + "  " + f"{name}:")
                for elem in value:
                    lines.extend(format_node(elem, indent + 2))
            else:
                lines.append(ind + "  " + f"{name}:")
                lines.extend(format_node(value, indent + 2))

        return lines

    # Fallback for unexpected values
    return [ind + repr(node)]


def format_tree(block: Block) -> str:
    """
    Convenience: dump a whole tree as a string.
    """
    return "\n".join(format_node(block, indent=0))
