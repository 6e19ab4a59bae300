"""Show the effective formatting style."""

from __future__ import annotations

import argparse
import json


def cmd_config(args: argparse.Namespace) -> int:
    from ctorgen.cli.common import error, resolve_style
    from ctorgen.errors import ConfigError

    try:
        style = resolve_style(args)
    except (ConfigError, OSError) as e:
        return error(str(e))

    print(json.dumps(style.describe(), indent=2))
    return 0
