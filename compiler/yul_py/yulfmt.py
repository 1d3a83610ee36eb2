#  SPDX-License-Identifier: MIT OR Apache-2.0
#  Copyright (c) 2025-2026 gwz

import argparse
from pathlib import Path
from typing import Dict, List

from yul_ast_dump import format_tree
from yul_context import LogLevel, PrinterContext
from yul_dialect import DIALECTS, get_dialect
from yul_internal_error import InternalCompilerError
from yul_json_import import JsonImportError, load_ast_file
from yul_logger import log_error, log_info, log_stage
from yul_printer import format_program


def build_printer_context(args: argparse.Namespace) -> PrinterContext:
    """Build a PrinterContext from command-line arguments."""
    log_rich_format = getattr(args, 'log', False)

    # Convert verbosity count to LogLevel
    verbosity = getattr(args, 'verbosity', 0)
    if verbosity >= 3:
        log_level = LogLevel.DEBUG
    elif verbosity >= 1:
        log_level = LogLevel.INFO
    else:
        log_level = LogLevel.ERROR

    return PrinterContext(
        log_rich_format=log_rich_format,
        log_level=log_level,
    )


def build_source_index(source_list: List[str], enabled: bool = True) -> Dict[str, int]:
    """Map each source name to its position in the source list (first occurrence wins)."""
    if not enabled:
        return {}
    index: Dict[str, int] = {}
    for i, name in enumerate(source_list):
        index.setdefault(name, i)
    return index


def cmd_format(args: argparse.Namespace) -> int:
    """Print a JSON Yul AST as Yul source."""
    context = build_printer_context(args)
    input_path = Path(args.input)

    log_stage(context, "Importing", str(input_path))
    try:
        block, source_list = load_ast_file(input_path)
    except OSError as e:
        log_error(context, f"error: [YFMT-0010] cannot read {input_path}: {e}")
        return 1
    except JsonImportError as e:
        log_error(context, e.format())
        return 1

    if args.dump_ast:
        text = format_tree(block)
    else:
        source_index = build_source_index(source_list, enabled=not args.no_source_comments)
        log_info(context, f"Source list: {', '.join(source_list) or '<none>'}")
        try:
            text = format_program(
                block,
                dialect=get_dialect(args.dialect),
                name_to_source_index=source_index,
                context=context,
            )
        except InternalCompilerError as e:
            log_error(context, e.format())
            return 1

    if args.output:
        Path(args.output).write_text(text + "\n", encoding="utf-8")
        log_info(context, f"Wrote {args.output}")
    else:
        print(text)

    return 0


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="yulfmt", description="Print a JSON Yul AST as canonical Yul source")

    parser.add_argument("-v", "--verbose",
                        action='count',
                        default=0,
                        dest='verbosity',
                        help="Increase verbosity: -v=INFO, -vvv=DEBUG")
    parser.add_argument("-l", "--log",
                        action='store_true',
                        default=False,
                        help="Enable rich log formatting (timestamps, levels)")
    parser.add_argument(
        "--dialect",
        choices=sorted(DIALECTS) + ["none"],
        default="evm",
        help="Dialect whose default type names are elided (default: evm)",
    )
    parser.add_argument(
        "--no-source-comments",
        action="store_true",
        help="Do not emit @src comments",
    )
    parser.add_argument(
        "--dump-ast",
        action="store_true",
        help="Dump the imported tree structure instead of printing Yul",
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("input", help="JSON AST file (a YulBlock or {\"sourceList\": [...], \"ast\": {...}})")
    parser.set_defaults(func=cmd_format)

    args = parser.parse_args(argv)

    rc = args.func(args)
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
