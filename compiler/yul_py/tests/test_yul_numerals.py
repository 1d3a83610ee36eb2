#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

import pytest

from yul_numerals import is_valid_decimal, is_valid_hex


@pytest.mark.parametrize("text", ["0", "1", "42", "115792089237316195423570985008687907853269984665640564039457584007913129639935"])
def test_valid_decimals(text):
    assert is_valid_decimal(text)


@pytest.mark.parametrize("text", ["", "00", "012", "1a", "-1", "+1", "1_000", "0x10", "١"])
def test_invalid_decimals(text):
    assert not is_valid_decimal(text)


@pytest.mark.parametrize("text", ["0x0", "0x00", "0xdeadBEEF", "0x0123456789abcdef"])
def test_valid_hex(text):
    assert is_valid_hex(text)


@pytest.mark.parametrize("text", ["", "0x", "0X10", "x10", "10", "0xg", "0x 1"])
def test_invalid_hex(text):
    assert not is_valid_hex(text)
