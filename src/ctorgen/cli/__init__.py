"""Command-line interface for ctorgen.

Usage:
    ctorgen generate <file|-> [--in-place | --output PATH] [--dry-run] [--class NAME]
    ctorgen inspect <file|-> [--json] [--class NAME]
    ctorgen config
    generate-constructor <file|->      (same as `ctorgen generate`)

Style flags (--indent, --newline, --member-level, --config) apply to
every command and override the config file and environment.
"""

from __future__ import annotations

import argparse
import sys

from ctorgen import __version__
from ctorgen.cli.generate import cmd_generate
from ctorgen.cli.inspect_cmd import cmd_inspect
from ctorgen.cli.style import cmd_config
from ctorgen.config import NEWLINES


def _add_style_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", default=None,
        help="Style config YAML (default: $CTORGEN_CONFIG or ./.ctorgen.yaml)",
    )
    parser.add_argument(
        "--indent", default=None,
        help="Indent unit: 'tab', a number of spaces, or literal whitespace",
    )
    parser.add_argument(
        "--newline", default=None, choices=list(NEWLINES),
        help="Line ending of generated code (auto follows the input)",
    )
    parser.add_argument(
        "--member-level", type=int, default=None,
        help="Indent depth of the constructor signature (default 2)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ctorgen",
        description="Generate C# constructors from public auto-properties",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    # generate
    gen = sub.add_parser("generate", help="Insert a constructor into a class file")
    gen.add_argument("file", help="C# source file, or - for stdin")
    gen.add_argument(
        "--class", dest="class_name", default=None,
        help="Target class (default: first public class)",
    )
    dest = gen.add_mutually_exclusive_group()
    dest.add_argument(
        "--in-place", action="store_true",
        help="Rewrite the input file",
    )
    dest.add_argument(
        "--output", "-o", default=None,
        help="Write the result here instead of stdout",
    )
    gen.add_argument(
        "--dry-run", action="store_true",
        help="Print only the generated constructor",
    )
    _add_style_flags(gen)

    # inspect
    ins = sub.add_parser("inspect", help="Show the class and properties found")
    ins.add_argument("file", help="C# source file, or - for stdin")
    ins.add_argument(
        "--class", dest="class_name", default=None,
        help="Target class (default: first public class)",
    )
    ins.add_argument(
        "--json", action="store_true",
        help="Output machine-readable JSON",
    )

    # config
    cfg = sub.add_parser("config", help="Show the effective formatting style")
    _add_style_flags(cfg)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    dispatch = {
        "generate": cmd_generate,
        "inspect": cmd_inspect,
        "config": cmd_config,
    }
    return dispatch[args.command](args)


def generate_constructor_main() -> int:
    """Entry point for the single-command `generate-constructor` script."""
    return main(["generate", *sys.argv[1:]])


if __name__ == "__main__":
    sys.exit(main())
