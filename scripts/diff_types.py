#!/usr/bin/env python3
"""Print the shortened expected/actual pair for two type names."""

from __future__ import annotations

import argparse
from pathlib import Path

from typediff.reporting import cli


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Shorten an expected/actual type-name pair")
    parser.add_argument("expected", help="Fully-qualified expected type name")
    parser.add_argument("actual", help="Fully-qualified actual type name")
    parser.add_argument("--config", type=Path, help="Optional reporting configuration file")
    parser.add_argument(
        "--set", dest="overrides", action="append", help="Configuration overrides (key=value)"
    )
    parser.add_argument("--json", action="store_true", help="Emit the report as JSON to stdout")

    args = parser.parse_args(argv)

    cli_args: list[str] = []
    if args.config:
        cli_args.extend(["--config", str(args.config)])
    for override in args.overrides or ():
        cli_args.extend(["--set", override])

    cli_args.extend(["compare", args.expected, args.actual])
    if args.json:
        cli_args.append("--json")

    return cli.main(cli_args)


if __name__ == "__main__":  # pragma: no cover - script entry point
    raise SystemExit(main())
