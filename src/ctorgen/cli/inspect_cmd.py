"""Inspection CLI command: show what generation would use."""

from __future__ import annotations

import argparse
import json


def cmd_inspect(args: argparse.Namespace) -> int:
    from ctorgen.cli.common import error, read_document
    from ctorgen.csharp import class_body, extract_properties, locate_class
    from ctorgen.errors import NoClassDeclarationFound

    try:
        document = read_document(args.file)
    except (OSError, UnicodeDecodeError) as e:
        return error(str(e))

    properties = extract_properties(document.text)
    try:
        location = locate_class(document.text, class_name=args.class_name)
    except NoClassDeclarationFound as e:
        location = None
        missing = str(e)
    else:
        if args.class_name:
            properties = extract_properties(class_body(document.text, args.class_name))

    if args.json:
        print(json.dumps({
            "class": location.class_name if location else None,
            "insert_offset": location.insert_offset if location else None,
            "properties": [
                {"type": p.type, "name": p.name, "parameter": p.parameter_name}
                for p in properties
            ],
        }, indent=2))
    else:
        if location:
            print(f"  Class:   {location.class_name}")
            print(f"  Offset:  {location.insert_offset}")
        else:
            print(f"  Class:   (none) {missing}")
        print(f"  Properties: {len(properties)}")
        for p in properties:
            print(f"    {p.type:<20}{p.name:<20}-> {p.parameter_name}")

    return 0 if location else 1
