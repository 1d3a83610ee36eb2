#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2026 gwz

from conftest import call, ident, loc, num
from yul_ast import Block, Break, ExpressionStatement, If, TypedName, VariableDeclaration
from yul_context import LogLevel, PrinterContext
from yul_printer import YulPrinter, format_program


def _program():
    return Block([
        VariableDeclaration([TypedName("x", debug_data=loc(4, 5))], num("1", debug_data=loc(9, 10)), debug_data=loc(0, 10)),
        ExpressionStatement(call("f", ident("x", debug_data=loc(13, 14)), debug_data=loc(11, 15)), debug_data=loc(11, 15)),
    ], debug_data=loc(0, 20))


def test_statement_comment_precedes_statement(src_printer):
    stmt = ExpressionStatement(call("f"), debug_data=loc(1, 5))

    assert src_printer.format(stmt) == "/// @src 0:1:5\nf()"


def test_expression_comment_is_inline(src_printer):
    stmt = ExpressionStatement(call("f", num("1", debug_data=loc(2, 3))))

    assert src_printer.format(stmt) == "f(/** @src 0:2:3 */ 1)"


def test_same_node_type_uses_form_of_its_position(src_printer):
    assert src_printer.format(num("1", debug_data=loc(1, 2))) == "/// @src 0:1:2\n1"
    with src_printer.expression_context():
        assert src_printer.format(num("2", debug_data=loc(3, 4))) == "/** @src 0:3:4 */ 2"


def test_source_index_comes_from_table(src_printer):
    stmt = ExpressionStatement(call("f"), debug_data=loc(7, 9, source="b.yul"))

    assert src_printer.format(stmt) == "/// @src 1:7:9\nf()"


def test_repeated_location_is_printed_once(src_printer):
    stmt = ExpressionStatement(call("add", num("1", debug_data=loc(2, 3)), num("2", debug_data=loc(2, 3))))

    assert src_printer.format(stmt) == "add(/** @src 0:2:3 */ 1, 2)"


def test_different_locations_each_get_a_comment(src_printer):
    stmt = ExpressionStatement(call("add", num("1", debug_data=loc(2, 3)), num("2", debug_data=loc(5, 6))))

    assert src_printer.format(stmt) == "add(/** @src 0:2:3 */ 1, /** @src 0:5:6 */ 2)"


def test_statement_sharing_location_with_its_call_gets_one_comment(src_printer):
    stmt = ExpressionStatement(call("f", debug_data=loc(1, 5)), debug_data=loc(1, 5))

    assert src_printer.format(stmt) == "/// @src 0:1:5\nf()"


def test_if_body_sharing_condition_location_is_not_repeated(src_printer):
    stmt = If(ident("c", debug_data=loc(3, 4)), Block([Break(debug_data=loc(3, 4))]), debug_data=loc(0, 10))

    assert src_printer.format(stmt) == "/// @src 0:0:10\nif /** @src 0:3:4 */ c { break }"


def test_typed_names_use_inline_comments(src_printer):
    stmt = VariableDeclaration([TypedName("x", debug_data=loc(4, 5))], num("1"), debug_data=loc(0, 10))

    assert src_printer.format(stmt) == "/// @src 0:0:10\nlet /** @src 0:4:5 */ x := 1"


def test_block_comment_precedes_braces(src_printer):
    block = Block([Break()], debug_data=loc(0, 20))

    assert src_printer.format(block) == "/// @src 0:0:20\n{ break }"


def test_comment_in_block_forces_multi_line(src_printer):
    block = Block([ExpressionStatement(call("f"), debug_data=loc(1, 5))])

    assert src_printer.format(block) == "{\n    /// @src 0:1:5\n    f()\n}"


def test_full_program_with_comments():
    printed = format_program(_program(), name_to_source_index={"a.yul": 0})

    assert printed == (
        "/// @src 0:0:20\n"
        "{\n"
        "    /// @src 0:0:10\n"
        "    let /** @src 0:4:5 */ x := /** @src 0:9:10 */ 1\n"
        "    /// @src 0:11:15\n"
        "    f(/** @src 0:13:14 */ x)\n"
        "}"
    )


def test_empty_table_disables_comments():
    printed = format_program(_program(), name_to_source_index={})

    assert "@src" not in printed
    assert printed == "{\n    let x := 1\n    f(x)\n}"


def test_unknown_source_is_skipped_without_error(src_printer):
    stmt = ExpressionStatement(call("f", num("1", debug_data=loc(2, 3, source="other.yul")), num("2", debug_data=loc(2, 3))))

    # the unknown location does not count as emitted, so the known one still gets its comment
    assert src_printer.format(stmt) == "f(1, /** @src 0:2:3 */ 2)"


def test_unknown_source_is_logged_at_debug_level(capsys):
    context = PrinterContext(log_level=LogLevel.DEBUG)
    printer = YulPrinter(name_to_source_index={"a.yul": 0}, context=context)

    printer.format(ExpressionStatement(call("f"), debug_data=loc(1, 2, source="other.yul")))

    assert "no source index for 'other.yul'" in capsys.readouterr().err


def test_printing_twice_is_deterministic():
    table = {"a.yul": 0}

    assert format_program(_program(), name_to_source_index=table) == format_program(_program(), name_to_source_index=table)


def test_reset_allows_reusing_a_printer():
    printer = YulPrinter(name_to_source_index={"a.yul": 0})
    block = Block([ExpressionStatement(call("f"), debug_data=loc(1, 5))])
    first = printer.format(block)

    # the location is still remembered from the previous pass
    assert printer.format(block) == "{ f() }"

    printer.reset()

    assert printer.format(block) == first == "{\n    /// @src 0:1:5\n    f()\n}"
