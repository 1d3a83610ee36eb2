#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


# ==========================
# Source locations
# ==========================


@dataclass(frozen=True)
class SourceLocation:
    source_name: Optional[str]
    start: int
    end: int


@dataclass(frozen=True)
class DebugData:
    location: SourceLocation


@dataclass
class Node:
    debug_data: Optional[DebugData] = field(default=None, repr=False, compare=False, kw_only=True)


# ==========================
# AST definitions
# ==========================


class Expr(Node):
    pass


class Stmt(Node):
    pass


class LiteralKind(Enum):
    NUMBER = auto()
    BOOLEAN = auto()
    STRING = auto()


# --- expressions ---

@dataclass
class Literal(Expr):
    kind: LiteralKind
    value: str  # raw text; escaping happens at print time for strings
    type: str = ""


@dataclass
class Identifier(Expr):
    name: str


@dataclass
class FunctionCall(Expr):
    function_name: Identifier
    arguments: List[Expr]


# --- helpers ---

@dataclass
class TypedName(Node):
    name: str
    type: str = ""


@dataclass
class Case(Node):
    value: Optional[Literal]  # None for `default`
    body: "Block"


# --- statements ---

@dataclass
class Block(Stmt):
    statements: List[Stmt]


@dataclass
class ExpressionStatement(Stmt):
    expression: Expr


@dataclass
class Assignment(Stmt):
    variable_names: List[Identifier]
    value: Optional[Expr]


@dataclass
class VariableDeclaration(Stmt):
    variables: List[TypedName]
    value: Optional[Expr] = None


@dataclass
class FunctionDefinition(Stmt):
    name: str
    parameters: List[TypedName]
    return_variables: List[TypedName]
    body: Block


@dataclass
class If(Stmt):
    condition: Optional[Expr]
    body: Block


@dataclass
class Switch(Stmt):
    expression: Optional[Expr]
    cases: List[Case]


@dataclass
class ForLoop(Stmt):
    pre: Block
    condition: Optional[Expr]
    post: Block
    body: Block


@dataclass
class Break(Stmt):
    pass


@dataclass
class Continue(Stmt):
    pass


@dataclass
class Leave(Stmt):
    pass
