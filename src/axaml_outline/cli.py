"""Command line tool printing the outline of an AXAML file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import TypeAdapter

from axaml_outline.detection import accept_all, is_axaml_document
from axaml_outline.outline import describe_element, render_tree
from axaml_outline.provider import OutlineProvider
from axaml_outline.schemas import FlatSymbol, OutlineSymbol, Position, TextDocument
from axaml_outline.utils.logging_config import configure_logging, resolve_log_level

_OUTLINE_ADAPTER = TypeAdapter(list[OutlineSymbol])
_FLAT_ADAPTER = TypeAdapter(list[FlatSymbol])


def parse_position(value: str) -> Position:
    """Parse a 1-based ``LINE:COL`` argument into a zero-based position."""
    line, sep, column = value.partition(":")
    try:
        line_no = int(line)
        column_no = int(column) if sep else 1
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected LINE:COL, got {value!r}") from exc
    if line_no < 1 or column_no < 1:
        raise argparse.ArgumentTypeError(f"LINE and COL are 1-based, got {value!r}")
    return Position(line_no - 1, column_no - 1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="axaml-outline",
        description="Print the UI element outline of an Avalonia XAML file.",
    )
    parser.add_argument("file", help="Path to the .axaml file")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--flat", action="store_true", help="Print the flat depth-first symbol list")
    mode.add_argument(
        "--at",
        type=parse_position,
        metavar="LINE:COL",
        help="Describe the innermost element at a 1-based position",
    )
    parser.add_argument("--line-numbers", action="store_true", help="Show start line numbers in details")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    parser.add_argument("--strict", action="store_true", help="Fail on mismatched closing tags")
    parser.add_argument(
        "--detect",
        action="store_true",
        help="Only parse files that look like AXAML (extension or Avalonia namespace)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    parser.add_argument("--debug", action="store_true", help="Log scanner details")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(resolve_log_level(args.verbose, args.debug))

    path = Path(args.file)
    if not path.is_file():
        print(f"File not found: {path}", file=sys.stderr)
        return 1
    try:
        text = path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as exc:
        print(f"Cannot read {path}: {exc}", file=sys.stderr)
        return 1

    errors: list[str] = []
    provider = OutlineProvider(
        document_filter=is_axaml_document if args.detect else accept_all,
        show_line_numbers=args.line_numbers,
        use_cache=False,
        strict=args.strict,
        notify=errors.append,
    )
    document = TextDocument(uri=str(path), text=text)

    try:
        if args.at is not None:
            node = provider.element_at(document, args.at)
            if args.json:
                print(node.model_dump_json(indent=2) if node else "null")
            elif node is None:
                print(f"No element at line {args.at.line + 1}, column {args.at.column + 1}")
            else:
                print(describe_element(node))
        elif args.flat:
            symbols = provider.list_symbols(document)
            if args.json:
                print(_FLAT_ADAPTER.dump_json(symbols, indent=2).decode())
            else:
                for symbol in symbols:
                    print(f"{'  ' * symbol.depth}{symbol.label}  <{symbol.tag_name}>  line {symbol.line}")
        else:
            outline = provider.provide_outline(document)
            if args.json:
                print(_OUTLINE_ADAPTER.dump_json(outline, indent=2).decode())
            elif outline:
                print(render_tree(outline))
    # Pydantic reports trees past its nesting limit as a ValueError subclass.
    except (ValueError, RecursionError) as exc:
        errors.append(f"Error serializing result: {exc}")

    for message in errors:
        print(message, file=sys.stderr)
    return 1 if errors else 0


if __name__ == "__main__":
    sys.exit(main())
