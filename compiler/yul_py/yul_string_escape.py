#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

"""
String escape helper used when printing string literals.

Literal values are kept unescaped in the tree. The printer re-escapes them
byte by byte (over the UTF-8 encoding) so that the output only contains
printable ASCII inside the quotes.
"""


_SIMPLE_ESCAPES = {
    0x5C: "\\\\",  # backslash
    0x22: '\\"',   # quote
    0x0A: "\\n",
    0x0D: "\\r",
    0x09: "\\t",
}


def escape_and_quote_string(value: str) -> str:
    """
    Escape a string literal value and wrap it in double quotes.
    """
    parts: list[str] = []
    for b in value.encode("utf-8"):
        escaped = _SIMPLE_ESCAPES.get(b)
        if escaped is not None:
            parts.append(escaped)
        elif 0x20 <= b <= 0x7E:
            parts.append(chr(b))
        else:
            parts.append(f"\\x{b:02x}")
    return '"' + "".join(parts) + '"'
