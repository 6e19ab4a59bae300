"""Constructor generation CLI command."""

from __future__ import annotations

import argparse
import sys


def cmd_generate(args: argparse.Namespace) -> int:
    from ctorgen.cli.common import error, read_document, resolve_style
    from ctorgen.errors import CtorgenError
    from ctorgen.pipeline import add_constructor, preview_constructor

    if args.in_place and args.file == "-":
        return error("--in-place needs a file path, not stdin")

    try:
        style = resolve_style(args)
        document = read_document(args.file)
        if args.dry_run:
            result = preview_constructor(document.text, style, class_name=args.class_name)
            sys.stdout.write(result.snippet)
            print(f"\n[DRY RUN] {result.summary()}", file=sys.stderr)
            return 0
        result = add_constructor(document, style, class_name=args.class_name)
    except (CtorgenError, OSError, UnicodeDecodeError) as e:
        return error(str(e))

    try:
        if args.in_place:
            document.save()
            print(f"{result.summary()} -> {document.path}", file=sys.stderr)
        elif args.output:
            target = document.save(args.output)
            print(f"{result.summary()} -> {target}", file=sys.stderr)
        else:
            sys.stdout.write(result.text)
    except OSError as e:
        return error(f"Cannot write output: {e}")
    return 0
