#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

_DEC_CHARS = "0123456789"
_HEX_CHARS = "0123456789abcdefABCDEF"


def is_valid_decimal(text: str) -> bool:
    """Plain decimal numeral; a leading zero is only allowed for `0` itself."""
    if not text or any(c not in _DEC_CHARS for c in text):
        return False
    return text == "0" or text[0] != "0"


def is_valid_hex(text: str) -> bool:
    """`0x` followed by at least one hex digit."""
    if len(text) < 3 or not text.startswith("0x"):
        return False
    return all(c in _HEX_CHARS for c in text[2:])
