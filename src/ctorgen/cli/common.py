"""Helpers shared by CLI command modules."""

from __future__ import annotations

import argparse
import sys

from ctorgen.config import FormatStyle, load_style
from ctorgen.document import TextDocument


def read_document(source: str) -> TextDocument:
    """Read a document from a path, or from stdin when `source` is "-"."""
    if source == "-":
        return TextDocument.from_stdin()
    return TextDocument.from_path(source)


def resolve_style(args: argparse.Namespace) -> FormatStyle:
    """Effective style: config file and environment, then CLI flags."""
    overrides = {
        "indent": getattr(args, "indent", None),
        "newline": getattr(args, "newline", None),
        "member_level": getattr(args, "member_level", None),
    }
    return load_style(getattr(args, "config", None), overrides=overrides)


def error(message: str) -> int:
    print(f"ERROR: {message}", file=sys.stderr)
    return 1
