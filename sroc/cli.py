"""CLI for checking and printing sroc configuration files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from sroc.document import Document
from sroc.errors import ParseError, SrocIOError
from sroc.formatter import dumps
from sroc.parser import load


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sroc",
        description="Parse an sroc configuration file and report the first error, if any.",
    )
    parser.add_argument("input", help="Path to the configuration file.")
    parser.add_argument(
        "-f",
        "--format",
        choices=("summary", "json", "sroc"),
        default="summary",
        help="What to print after a successful parse (default: summary).",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the input file (default: utf-8).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log parser progress to stderr.",
    )
    return parser.parse_args(argv)


def summarize(path: str, document: Document) -> str:
    lines = [f"{path}: {len(document.items)} root item(s), {len(document.sections)} section(s)"]
    for section in document.sections:
        lines.append(f"  [{section.name}] {len(section.items)} item(s)")
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config = {"enable_logger": args.verbose, "log_level": logging.DEBUG}
    try:
        document = load(args.input, encoding=args.encoding, config=config)
    except ParseError as exc:
        sys.stderr.write(f"{args.input}:{exc.line}:{exc.column}: {exc.kind}: {exc.detail}\n")
        return 1
    except SrocIOError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1

    if args.format == "json":
        sys.stdout.write(json.dumps(document.to_dict(), indent=2) + "\n")
    elif args.format == "sroc":
        sys.stdout.write(dumps(document))
    else:
        sys.stdout.write(summarize(args.input, document))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
