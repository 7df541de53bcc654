#!/usr/bin/env python3
"""Command-line interface for hast-to-parse5."""

from __future__ import annotations

import argparse
import json
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, NoReturn

from . import to_parse5
from .errors import UnsupportedNodeError
from .serialize import to_json, to_test_format


def _get_version() -> str:
    try:
        return version("hast-to-parse5")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hast-to-parse5",
        description="Convert a hast tree (JSON) to a parse5 tree and print it.",
        epilog=(
            "Examples:\n"
            "  hast-to-parse5 tree.json\n"
            "  cat tree.json | hast-to-parse5 - --indent 2\n"
            "  hast-to-parse5 icon.json --space svg --fragment --format tree\n"
            "\n"
            "If you don't have the 'hast-to-parse5' command available, use:\n"
            "  python -m hast_to_parse5 ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="hast JSON file to convert, or '-' to read from stdin",
    )
    parser.add_argument(
        "--space",
        choices=["html", "svg"],
        default="html",
        help="Schema the tree starts in (default: html)",
    )
    parser.add_argument(
        "--fragment",
        action="store_true",
        help="Convert the root as a #document-fragment instead of a #document",
    )
    parser.add_argument(
        "--format",
        choices=["json", "tree"],
        default="json",
        help="Output format: parse5 JSON or an html5lib-style tree dump (default: json)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON-only: indentation width (default: compact)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"hast-to-parse5 {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.path:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    return args


def _read_tree(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)

    return json.loads(Path(path).read_text())


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])

    try:
        tree = _read_tree(args.path)
    except json.JSONDecodeError as e:
        print(f"Invalid JSON: {e}", file=sys.stderr)
        raise SystemExit(2) from e

    try:
        result = to_parse5(tree, args.space, fragment=args.fragment)
    except UnsupportedNodeError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    if args.format == "tree":
        sys.stdout.write(to_test_format(result))
    else:
        sys.stdout.write(to_json(result, indent=args.indent))
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
