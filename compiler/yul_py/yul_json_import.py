#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

"""
Import a Yul AST from its JSON form.

The accepted node shapes are the ones solc exports for inline assembly and
Yul (`"nodeType": "YulBlock"`, `"YulFunctionCall"`, ...). Source ranges come
as `"src": "<start>:<length>:<sourceIndex>"` and are turned into debug data
using the document's source list.

A document is either a bare `YulBlock` object or a wrapper:

    {"sourceList": ["a.yul", ...], "ast": {"nodeType": "YulBlock", ...}}
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from yul_ast import (
    Assignment, Block, Break, Case, Continue, DebugData, Expr, ExpressionStatement, ForLoop, FunctionCall,
    FunctionDefinition, Identifier, If, Leave, Literal, LiteralKind, SourceLocation, Stmt, Switch, TypedName,
    VariableDeclaration,
)

_LITERAL_KINDS = {
    "number": LiteralKind.NUMBER,
    "bool": LiteralKind.BOOLEAN,
    "string": LiteralKind.STRING,
}


@dataclass
class JsonImportError(Exception):
    message: str
    filename: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def format(self) -> str:
        if self.filename:
            return f"{self.filename}: error: {self.message}"
        return f"error: {self.message}"


class YulJsonImporter:
    """
    Builds AST nodes from decoded JSON objects.

    One importer per document: it owns the source list used to resolve `src` indices.
    """

    def __init__(self, source_list: Optional[List[str]] = None, filename: Optional[str] = None):
        self.source_list: List[str] = list(source_list or [])
        self.filename = filename
        self._stmt_builders: Dict[str, Callable[[Dict[str, Any]], Stmt]] = {
            "YulBlock": self.import_block,
            "YulExpressionStatement": self._import_expression_statement,
            "YulAssignment": self._import_assignment,
            "YulVariableDeclaration": self._import_variable_declaration,
            "YulFunctionDefinition": self._import_function_definition,
            "YulIf": self._import_if,
            "YulSwitch": self._import_switch,
            "YulForLoop": self._import_for_loop,
            "YulBreak": lambda obj: Break(debug_data=self._debug_data(obj)),
            "YulContinue": lambda obj: Continue(debug_data=self._debug_data(obj)),
            "YulLeave": lambda obj: Leave(debug_data=self._debug_data(obj)),
        }

    def error(self, message: str) -> JsonImportError:
        return JsonImportError(message, self.filename)

    # -------------------------------------------------------------------------
    # Field access
    # -------------------------------------------------------------------------

    def _member(self, obj: Dict[str, Any], key: str, expected: Optional[type] = None) -> Any:
        if key not in obj:
            raise self.error(f"[IMP-0030] {obj.get('nodeType', 'node')} is missing field '{key}'")
        return self._check_type(obj, key, obj[key], expected)

    def _optional(self, obj: Dict[str, Any], key: str, expected: type, default: Any) -> Any:
        value = obj.get(key)
        if value is None:
            return default
        return self._check_type(obj, key, value, expected)

    def _check_type(self, obj: Dict[str, Any], key: str, value: Any, expected: Optional[type]) -> Any:
        if expected is not None and not isinstance(value, expected):
            raise self.error(
                f"[IMP-0080] field '{key}' of {obj.get('nodeType', 'node')} has wrong type: "
                f"expected {expected.__name__}, got {type(value).__name__}"
            )
        return value

    def _expect_node(self, obj: Any, *node_types: str) -> Dict[str, Any]:
        if not isinstance(obj, dict):
            raise self.error(f"[IMP-0010] expected a JSON object, got {type(obj).__name__}")
        node_type = obj.get("nodeType")
        if node_types and node_type not in node_types:
            expected = " or ".join(node_types)
            raise self.error(f"[IMP-0060] expected {expected}, got '{node_type}'")
        return obj

    def _debug_data(self, obj: Dict[str, Any]) -> Optional[DebugData]:
        src = obj.get("src")
        if src is None:
            return None
        parts = src.split(":") if isinstance(src, str) else []
        if len(parts) != 3:
            raise self.error(f"[IMP-0040] malformed source range '{src}'")
        try:
            start, length, index = (int(p) for p in parts)
        except ValueError:
            raise self.error(f"[IMP-0040] malformed source range '{src}'") from None
        if index < 0 or index >= len(self.source_list) or start < 0 or length < 0:
            return None
        return DebugData(SourceLocation(self.source_list[index], start, start + length))

    # -------------------------------------------------------------------------
    # Statements
    # -------------------------------------------------------------------------

    def import_block(self, obj: Any) -> Block:
        obj = self._expect_node(obj, "YulBlock")
        statements = [self.import_statement(s) for s in self._member(obj, "statements", list)]
        return Block(statements, debug_data=self._debug_data(obj))

    def import_statement(self, obj: Any) -> Stmt:
        obj = self._expect_node(obj)
        builder = self._stmt_builders.get(obj.get("nodeType"))
        if builder is None:
            raise self.error(f"[IMP-0020] unknown statement node type '{obj.get('nodeType')}'")
        return builder(obj)

    def _import_expression_statement(self, obj: Dict[str, Any]) -> Stmt:
        expression = self.import_expression(self._member(obj, "expression"))
        return ExpressionStatement(expression, debug_data=self._debug_data(obj))

    def _import_assignment(self, obj: Dict[str, Any]) -> Stmt:
        names = [self._import_identifier(self._expect_node(n, "YulIdentifier")) for n in self._member(obj, "variableNames", list)]
        value = self.import_expression(self._member(obj, "value"))
        return Assignment(names, value, debug_data=self._debug_data(obj))

    def _import_variable_declaration(self, obj: Dict[str, Any]) -> Stmt:
        variables = [self._import_typed_name(v) for v in self._member(obj, "variables", list)]
        value = obj.get("value")
        return VariableDeclaration(
            variables,
            self.import_expression(value) if value is not None else None,
            debug_data=self._debug_data(obj),
        )

    def _import_function_definition(self, obj: Dict[str, Any]) -> Stmt:
        # solc omits empty parameter / return lists
        return FunctionDefinition(
            self._member(obj, "name", str),
            [self._import_typed_name(p) for p in self._optional(obj, "parameters", list, [])],
            [self._import_typed_name(r) for r in self._optional(obj, "returnVariables", list, [])],
            self.import_block(self._member(obj, "body")),
            debug_data=self._debug_data(obj),
        )

    def _import_if(self, obj: Dict[str, Any]) -> Stmt:
        return If(
            self.import_expression(self._member(obj, "condition")),
            self.import_block(self._member(obj, "body")),
            debug_data=self._debug_data(obj),
        )

    def _import_switch(self, obj: Dict[str, Any]) -> Stmt:
        cases = []
        for case_obj in self._member(obj, "cases", list):
            case_obj = self._expect_node(case_obj, "YulCase")
            value = self._member(case_obj, "value")
            cases.append(Case(
                None if value == "default" else self._import_literal(self._expect_node(value, "YulLiteral")),
                self.import_block(self._member(case_obj, "body")),
                debug_data=self._debug_data(case_obj),
            ))
        return Switch(
            self.import_expression(self._member(obj, "expression")),
            cases,
            debug_data=self._debug_data(obj),
        )

    def _import_for_loop(self, obj: Dict[str, Any]) -> Stmt:
        return ForLoop(
            self.import_block(self._member(obj, "pre")),
            self.import_expression(self._member(obj, "condition")),
            self.import_block(self._member(obj, "post")),
            self.import_block(self._member(obj, "body")),
            debug_data=self._debug_data(obj),
        )

    # -------------------------------------------------------------------------
    # Expressions
    # -------------------------------------------------------------------------

    def import_expression(self, obj: Any) -> Expr:
        obj = self._expect_node(obj)
        node_type = obj.get("nodeType")
        if node_type == "YulLiteral":
            return self._import_literal(obj)
        if node_type == "YulIdentifier":
            return self._import_identifier(obj)
        if node_type == "YulFunctionCall":
            return FunctionCall(
                self._import_identifier(self._expect_node(self._member(obj, "functionName"), "YulIdentifier")),
                [self.import_expression(arg) for arg in self._member(obj, "arguments", list)],
                debug_data=self._debug_data(obj),
            )
        raise self.error(f"[IMP-0020] unknown expression node type '{node_type}'")

    def _import_identifier(self, obj: Dict[str, Any]) -> Identifier:
        return Identifier(self._member(obj, "name", str), debug_data=self._debug_data(obj))

    def _import_typed_name(self, obj: Any) -> TypedName:
        obj = self._expect_node(obj, "YulTypedName")
        return TypedName(self._member(obj, "name", str), self._optional(obj, "type", str, ""), debug_data=self._debug_data(obj))

    def _import_literal(self, obj: Dict[str, Any]) -> Literal:
        kind_name = self._member(obj, "kind", str)
        kind = _LITERAL_KINDS.get(kind_name)
        if kind is None:
            raise self.error(f"[IMP-0050] unknown literal kind '{kind_name}'")
        if "value" in obj:
            value = self._member(obj, "value", str)
        elif "hexValue" in obj and kind is LiteralKind.STRING:
            try:
                value = bytes.fromhex(obj["hexValue"]).decode("utf-8")
            except (ValueError, TypeError):
                raise self.error(f"[IMP-0070] malformed hexValue '{obj['hexValue']}'") from None
        else:
            raise self.error("[IMP-0030] YulLiteral is missing field 'value'")
        return Literal(kind, value, self._optional(obj, "type", str, ""), debug_data=self._debug_data(obj))


def _document_source_list(document: Dict[str, Any], filename: Optional[str]) -> List[str]:
    source_list = document.get("sourceList", [])
    if not isinstance(source_list, list) or not all(isinstance(name, str) for name in source_list):
        raise JsonImportError("[IMP-0080] sourceList must be a list of strings", filename)
    return list(source_list)


def load_ast(document: Any, source_list: Optional[List[str]] = None, filename: Optional[str] = None) -> Block:
    """
    Build the root block of a decoded JSON document.

    An explicit `source_list` overrides the one found in a wrapper document.
    """
    if isinstance(document, dict) and "ast" in document:
        if source_list is None:
            source_list = _document_source_list(document, filename)
        document = document["ast"]
    return YulJsonImporter(source_list, filename).import_block(document)


def load_ast_file(path: Path) -> Tuple[Block, List[str]]:
    """
    Read and import a JSON AST file. Returns the root block and its source list.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise JsonImportError(f"[IMP-0010] file is not valid UTF-8: {e}", str(path)) from None
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise JsonImportError(f"[IMP-0010] invalid JSON: {e}", str(path)) from None
    source_list: List[str] = []
    if isinstance(document, dict) and "ast" in document:
        source_list = _document_source_list(document, str(path))
    return load_ast(document, source_list, filename=str(path)), source_list
