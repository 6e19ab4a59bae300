"""Configuration path resolution.

Environment variables:
    CTORGEN_CONFIG: style config file (default: ./.ctorgen.yaml when present)
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_CONFIG_NAME = ".ctorgen.yaml"


def config_path(cwd: Path | None = None) -> Path | None:
    """Return the config file to load, or None when there is none."""
    env = os.environ.get("CTORGEN_CONFIG")
    if env:
        return Path(env).expanduser()
    candidate = (cwd or Path.cwd()) / DEFAULT_CONFIG_NAME
    return candidate if candidate.is_file() else None
