"""
Yul Printer

Converts a Yul AST back into its canonical textual form. The output is meant
to be parsed again by the Yul parser, so every construct is printed in its
exact surface syntax. Redundant type names are elided and trivial blocks are
collapsed onto one line.

If a source index table is given, nodes that carry debug data are preceded by
`@src` comments pointing back at the original source range. Consecutive nodes
sharing one range only get a single comment.
"""

#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from yul_ast import (
    Assignment, Block, Break, Continue, DebugData, ExpressionStatement, ForLoop, FunctionCall,
    FunctionDefinition, Identifier, If, Leave, Literal, LiteralKind, Node, SourceLocation, Switch, TypedName,
    VariableDeclaration,
)
from yul_context import PrinterContext
from yul_dialect import Dialect
from yul_internal_error import ice, ice_assert
from yul_logger import log_debug, log_stage
from yul_numerals import is_valid_decimal, is_valid_hex
from yul_string_escape import escape_and_quote_string

# Layout constants. Changing any of these changes the canonical output.
BLOCK_ONE_LINE_LIMIT = 30
FOR_HEADER_ONE_LINE_LIMIT = 60
INDENT = "    "


class YulPrinter:
    """
    Tree walker producing one string per node.

    State of a pass:
    - _inside_expression: how many expression scopes enclose the current node
    - _last_location:     location of the last emitted `@src` comment
    """

    def __init__(
            self,
            dialect: Optional[Dialect] = None,
            name_to_source_index: Optional[Dict[str, int]] = None,
            context: Optional[PrinterContext] = None,
    ):
        self.dialect = dialect
        self.name_to_source_index: Dict[str, int] = dict(name_to_source_index or {})
        self.context = context
        self._inside_expression = 0
        self._last_location: Optional[SourceLocation] = None

    def reset(self) -> None:
        """Forget the state of a previous pass."""
        self._inside_expression = 0
        self._last_location = None

    @property
    def inside_expression(self) -> int:
        return self._inside_expression

    @contextmanager
    def expression_context(self) -> Iterator[None]:
        """Mark everything printed inside the `with` body as nested in an expression."""
        self._inside_expression += 1
        try:
            yield
        finally:
            self._inside_expression -= 1

    # ============================================================================
    # Dispatch
    # ============================================================================

    def format(self, node: Node) -> str:
        if isinstance(node, Literal):
            return self.format_literal(node)
        elif isinstance(node, Identifier):
            return self.format_identifier(node)
        elif isinstance(node, FunctionCall):
            return self.format_function_call(node)
        elif isinstance(node, ExpressionStatement):
            return self.format_expression_statement(node)
        elif isinstance(node, Assignment):
            return self.format_assignment(node)
        elif isinstance(node, VariableDeclaration):
            return self.format_variable_declaration(node)
        elif isinstance(node, FunctionDefinition):
            return self.format_function_definition(node)
        elif isinstance(node, If):
            return self.format_if(node)
        elif isinstance(node, Switch):
            return self.format_switch(node)
        elif isinstance(node, ForLoop):
            return self.format_for_loop(node)
        elif isinstance(node, Break):
            return self.format_source_location_comment(node.debug_data, True) + "break"
        elif isinstance(node, Continue):
            return self.format_source_location_comment(node.debug_data, True) + "continue"
        elif isinstance(node, Leave):
            return self.format_source_location_comment(node.debug_data, True) + "leave"
        elif isinstance(node, Block):
            return self.format_block(node)
        else:
            ice(f"[ICE-2099] unsupported node type for printing: {type(node).__name__}", node)

    # ============================================================================
    # Expressions
    # ============================================================================

    def format_literal(self, literal: Literal) -> str:
        location_comment = self.format_source_location_comment(literal.debug_data, not self._inside_expression)

        if literal.kind is LiteralKind.NUMBER:
            ice_assert(
                is_valid_decimal(literal.value) or is_valid_hex(literal.value),
                f"[ICE-2010] invalid number literal '{literal.value}'", literal,
            )
            return location_comment + literal.value + self.append_type_name(literal.type)
        elif literal.kind is LiteralKind.BOOLEAN:
            ice_assert(literal.value in ("true", "false"), f"[ICE-2011] invalid bool literal '{literal.value}'", literal)
            return location_comment + literal.value + self.append_type_name(literal.type, is_bool_literal=True)
        elif literal.kind is LiteralKind.STRING:
            return location_comment + escape_and_quote_string(literal.value) + self.append_type_name(literal.type)
        ice(f"[ICE-2012] unknown literal kind: {literal.kind!r}", literal)

    def format_identifier(self, identifier: Identifier) -> str:
        ice_assert(identifier.name, "[ICE-2020] invalid identifier", identifier)
        return self.format_source_location_comment(identifier.debug_data, not self._inside_expression) + identifier.name

    def format_function_call(self, call: FunctionCall) -> str:
        location_comment = self.format_source_location_comment(call.debug_data, not self._inside_expression)
        function_name = self.format_identifier(call.function_name)
        arguments = ", ".join(self.format(arg) for arg in call.arguments)
        return f"{location_comment}{function_name}({arguments})"

    # ============================================================================
    # Statements
    # ============================================================================

    def format_expression_statement(self, stmt: ExpressionStatement) -> str:
        location_comment = self.format_source_location_comment(stmt.debug_data, True)
        with self.expression_context():
            return location_comment + self.format(stmt.expression)

    def format_assignment(self, stmt: Assignment) -> str:
        ice_assert(len(stmt.variable_names) >= 1, "[ICE-2030] assignment without target variables", stmt)
        ice_assert(stmt.value is not None, "[ICE-2031] assignment without value", stmt)
        # Targets are printed before the statement's own comment is decided.
        variables = ", ".join(self.format_identifier(name) for name in stmt.variable_names)

        location_comment = self.format_source_location_comment(stmt.debug_data, True)
        with self.expression_context():
            return location_comment + variables + " := " + self.format(stmt.value)

    def format_variable_declaration(self, stmt: VariableDeclaration) -> str:
        out = self.format_source_location_comment(stmt.debug_data, True) + "let "
        with self.expression_context():
            out += ", ".join(self.format_typed_name(var) for var in stmt.variables)
            if stmt.value is not None:
                out += " := " + self.format(stmt.value)
        return out

    def format_function_definition(self, stmt: FunctionDefinition) -> str:
        ice_assert(stmt.name, "[ICE-2040] invalid function name", stmt)

        out = self.format_source_location_comment(stmt.debug_data, True) + "function " + stmt.name + "("
        with self.expression_context():
            out += ", ".join(self.format_typed_name(param) for param in stmt.parameters)
            out += ")"
            if stmt.return_variables:
                out += " -> " + ", ".join(self.format_typed_name(ret) for ret in stmt.return_variables)

        return out + "\n" + self.format_block(stmt.body)

    def format_if(self, stmt: If) -> str:
        ice_assert(stmt.condition is not None, "[ICE-2050] invalid if condition", stmt)

        location_comment = self.format_source_location_comment(stmt.debug_data, True)
        with self.expression_context():
            header = location_comment + "if " + self.format(stmt.condition)

        body = self.format_block(stmt.body)
        delim = "\n" if "\n" in body else " "
        return header + delim + body

    def format_switch(self, stmt: Switch) -> str:
        ice_assert(stmt.expression is not None, "[ICE-2060] invalid switch expression", stmt)

        with self.expression_context():
            out = self.format_source_location_comment(stmt.debug_data, True)
            out += "switch " + self.format(stmt.expression)

        for case in stmt.cases:
            if case.value is None:
                out += "\ndefault "
            else:
                with self.expression_context():
                    out += "\ncase " + self.format_literal(case.value) + " "
            out += self.format_block(case.body)
        return out

    def format_for_loop(self, stmt: ForLoop) -> str:
        ice_assert(stmt.condition is not None, "[ICE-2070] invalid for loop condition", stmt)
        location_comment = self.format_source_location_comment(stmt.debug_data, True)

        with self.expression_context():
            pre = self.format_block(stmt.pre)
            condition = self.format(stmt.condition)
            post = self.format_block(stmt.post)

        delim = "\n"
        if (
            len(pre) + len(condition) + len(post) < FOR_HEADER_ONE_LINE_LIMIT
            and "\n" not in pre
            and "\n" not in post
        ):
            delim = " "
        header = "for " + pre + delim + condition + delim + post + "\n"
        return location_comment + header + self.format_block(stmt.body)

    def format_block(self, block: Block) -> str:
        location_comment = self.format_source_location_comment(block.debug_data, True)
        depth = self._inside_expression

        if not block.statements:
            return location_comment + "{ }"

        body = "\n".join(self.format(stmt) for stmt in block.statements)
        ice_assert(
            self._inside_expression == depth,
            f"[ICE-2090] expression nesting not restored after block ({depth} -> {self._inside_expression})",
            block,
        )
        if len(body) < BLOCK_ONE_LINE_LIMIT and "\n" not in body:
            return location_comment + "{ " + body + " }"
        body = body.replace("\n", "\n" + INDENT)
        return location_comment + "{\n" + INDENT + body + "\n}"

    # ============================================================================
    # Names, types and source comments
    # ============================================================================

    def format_typed_name(self, var: TypedName) -> str:
        ice_assert(var.name, "[ICE-2080] invalid variable name", var)
        return self.format_source_location_comment(var.debug_data, False) + var.name + self.append_type_name(var.type)

    def append_type_name(self, type_name: str, is_bool_literal: bool = False) -> str:
        """
        Return `:<type>` or "" when the parser would infer the same type anyway.

        Boolean literals keep their type unless it is the default type and the
        dialect does not distinguish a bool type from it.
        """
        if self.dialect is not None and type_name:
            default_type = self.dialect.default_type
            bool_type = self.dialect.bool_type
            if not is_bool_literal and type_name == default_type:
                type_name = ""
            elif is_bool_literal and type_name == default_type and bool_type in ("", default_type):
                type_name = ""
        if not type_name:
            return ""
        return ":" + type_name

    def format_source_location_comment(self, debug_data: Optional[DebugData], statement: bool) -> str:
        if (
            debug_data is None
            or self._last_location == debug_data.location
            or not self.name_to_source_index
        ):
            return ""

        location = debug_data.location
        source_index = self.name_to_source_index.get(location.source_name)
        if source_index is None:
            log_debug(self.context, f"no source index for '{location.source_name}'; @src comment omitted")
            return ""

        self._last_location = location

        src = f"{source_index}:{location.start}:{location.end}"
        if statement:
            return f"/// @src {src}\n"
        return f"/** @src {src} */ "


def format_program(
        block: Block,
        dialect: Optional[Dialect] = None,
        name_to_source_index: Optional[Dict[str, int]] = None,
        context: Optional[PrinterContext] = None,
) -> str:
    """
    Convenience: print a whole program (root block) with a fresh printer.
    """
    log_stage(context, "Printing", f"block with {len(block.statements)} statement(s)")
    printer = YulPrinter(dialect=dialect, name_to_source_index=name_to_source_index, context=context)
    return printer.format_block(block)

