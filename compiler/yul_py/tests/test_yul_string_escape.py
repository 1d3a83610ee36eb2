#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from yul_string_escape import escape_and_quote_string


def test_ascii_passthrough():
    assert escape_and_quote_string("abcXYZ09 _") == '"abcXYZ09 _"'


def test_empty_string():
    assert escape_and_quote_string("") == '""'


def test_escapes_controls_and_quotes():
    assert escape_and_quote_string('a\n\t\\"b') == r'"a\n\t\\\"b"'


def test_other_controls_use_hex_escapes():
    assert escape_and_quote_string("\b\f\r\v") == r'"\x08\x0c\r\x0b"'


def test_non_printable_bytes_to_hex():
    assert escape_and_quote_string("\x00\x1f\x7f") == r'"\x00\x1f\x7f"'


def test_non_ascii_is_escaped_per_utf8_byte():
    assert escape_and_quote_string("€") == r'"\xe2\x82\xac"'
