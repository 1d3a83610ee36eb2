#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from yul_ast import DebugData, FunctionCall, Identifier, Literal, LiteralKind, SourceLocation
from yul_dialect import EVM_TYPED_DIALECT
from yul_printer import YulPrinter


def loc(start: int, end: int, source: str = "a.yul") -> DebugData:
    return DebugData(SourceLocation(source, start, end))


def num(value: str, type: str = "", debug_data: DebugData | None = None) -> Literal:
    return Literal(LiteralKind.NUMBER, value, type, debug_data=debug_data)


def boolean(value: str, type: str = "", debug_data: DebugData | None = None) -> Literal:
    return Literal(LiteralKind.BOOLEAN, value, type, debug_data=debug_data)


def ident(name: str, debug_data: DebugData | None = None) -> Identifier:
    return Identifier(name, debug_data=debug_data)


def call(name: str, *args, debug_data: DebugData | None = None) -> FunctionCall:
    return FunctionCall(Identifier(name), list(args), debug_data=debug_data)


@pytest.fixture
def printer() -> YulPrinter:
    """Printer without dialect and without source comments."""
    return YulPrinter()


@pytest.fixture
def typed_printer() -> YulPrinter:
    return YulPrinter(dialect=EVM_TYPED_DIALECT)


@pytest.fixture
def src_printer() -> YulPrinter:
    """Printer emitting @src comments for `a.yul` (index 0) and `b.yul` (index 1)."""
    return YulPrinter(name_to_source_index={"a.yul": 0, "b.yul": 1})


@pytest.fixture
def write_json_file(tmp_path: Path):
    def _write(name: str, document) -> Path:
        file_path = tmp_path / name
        file_path.write_text(json.dumps(document), encoding="utf-8")
        return file_path

    return _write
