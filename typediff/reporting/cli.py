"""typediff command-line interface."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from typediff.typenames.parser import ParseError, TypeNameParser
from typediff.typenames.reconstructor import fully_shorten
from typediff.typenames.signature import TypeSignature
from typediff.utils.config import parse_overrides

from . import reporter
from .types import ReporterConfig

EXIT_ERROR = 1
EXIT_PARSE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typediff",
        description="Shorten fully-qualified type names to their distinguishing suffixes",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=reporter.DEFAULT_CONFIG_PATH if reporter.DEFAULT_CONFIG_PATH.exists() else None,
        help="Optional path to a reporting configuration YAML file.",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        metavar="KEY=VALUE",
        help="Override configuration values using dot notation (e.g. message.fallback_to_raw=False).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    compare = subparsers.add_parser("compare", help="Shorten an expected/actual pair")
    compare.add_argument("expected", help="Fully-qualified expected type name")
    compare.add_argument("actual", help="Fully-qualified actual type name")
    compare.add_argument("--json", action="store_true", help="Emit the report as JSON")

    parse = subparsers.add_parser("parse", help="Show the parsed structure of a type name")
    parse.add_argument("name", help="Fully-qualified type name")
    parse.add_argument("--json", action="store_true", help="Emit the signature as JSON")

    shorten = subparsers.add_parser("shorten", help="Reduce a type name to bare names")
    shorten.add_argument("name", help="Fully-qualified type name")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        config = reporter.load_configuration(
            args.config, overrides=parse_overrides(args.overrides)
        )
        reporter.apply_telemetry(config)
        if args.command == "compare":
            return _cmd_compare(args, config)
        if args.command == "parse":
            return _cmd_parse(args, config)
        if args.command == "shorten":
            return _cmd_shorten(args, config)
    except ParseError as exc:
        print(f"[typediff] parse error: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except (OSError, ValueError) as exc:
        print(f"[typediff] error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    parser.print_help()
    return EXIT_ERROR


# ---------------------------------------------------------------------------
# Command implementations


def _cmd_compare(args: argparse.Namespace, config: ReporterConfig) -> int:
    report = reporter.describe_type_mismatch(args.expected, args.actual, config=config)
    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(report.render())
    return 0


def _cmd_parse(args: argparse.Namespace, config: ReporterConfig) -> int:
    signature = TypeNameParser(max_depth=config.parser.max_depth).parse(args.name)
    if args.json:
        print(json.dumps(signature.to_dict(), indent=2))
    else:
        print("\n".join(_outline(signature)))
    return 0


def _cmd_shorten(args: argparse.Namespace, config: ReporterConfig) -> int:
    signature = TypeNameParser(max_depth=config.parser.max_depth).parse(args.name)
    print(fully_shorten(signature))
    return 0


def _outline(signature: TypeSignature, indent: int = 0) -> list[str]:
    pad = "  " * indent
    line = f"{pad}{'.'.join(signature.qualified_segments)}{signature.array_suffix}"
    lines = [line]
    for argument in signature.type_arguments:
        lines.extend(_outline(argument, indent + 1))
    return lines


if __name__ == "__main__":  # pragma: no cover - manual invocation
    sys.exit(main())
