"""Formatting style for generated constructors.

Resolution order, later sources win:
    defaults -> YAML config file -> environment -> explicit overrides

Config file keys:
    indent: "\\t" | "    " | 4        (int means that many spaces)
    newline: crlf | lf | auto         (auto follows the input document)
    member_level: 2                   (depth of the constructor signature)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from ctorgen.errors import ConfigError

NEWLINES: dict[str, str | None] = {
    "crlf": "\r\n",
    "lf": "\n",
    "auto": None,
}


@dataclass(frozen=True)
class FormatStyle:
    """Indentation and line-ending convention for rendered code.

    `newline` is None when it should follow the target document.
    """

    indent: str = "\t"
    newline: str | None = "\r\n"
    member_level: int = 2

    @property
    def outer(self) -> str:
        return self.indent * self.member_level

    @property
    def inner(self) -> str:
        return self.indent * (self.member_level + 1)

    def resolved(self, document_newline: str) -> FormatStyle:
        """Fill in an `auto` newline from the document being edited."""
        if self.newline is not None:
            return self
        return replace(self, newline=document_newline)

    def describe(self) -> dict[str, Any]:
        names = {v: k for k, v in NEWLINES.items()}
        return {
            "indent": self.indent,
            "newline": names.get(self.newline, repr(self.newline)),
            "member_level": self.member_level,
        }


DEFAULT_STYLE = FormatStyle()


def parse_indent(value: Any) -> str:
    """Turn a config/CLI indent value into the literal indent unit."""
    if isinstance(value, bool):
        raise ConfigError(f"Invalid indent: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ConfigError(f"Indent width must be >= 0, got {value}")
        return " " * value
    if isinstance(value, str):
        if value.isdigit():
            return " " * int(value)
        if value in ("tab", "\\t"):
            return "\t"
        if value.strip(" \t"):
            raise ConfigError(f"Indent must be whitespace, got {value!r}")
        return value
    raise ConfigError(f"Invalid indent: {value!r}")


def parse_newline(value: Any) -> str | None:
    key = str(value).strip().lower()
    if key not in NEWLINES:
        raise ConfigError(
            f"Invalid newline '{value}'. Valid: {', '.join(NEWLINES)}"
        )
    return NEWLINES[key]


def parse_level(value: Any) -> int:
    try:
        level = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"member_level must be an integer, got {value!r}") from None
    if level < 0:
        raise ConfigError(f"member_level must be >= 0, got {level}")
    return level


def read_config(path: Path | str) -> dict:
    """Read a YAML style config file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the YAML is malformed or not a mapping.
    """
    config_file = Path(path)
    with open(config_file) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed config at {config_file}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config at {config_file} is not a YAML mapping")
    return data


def apply_settings(style: FormatStyle, settings: dict) -> FormatStyle:
    """Return `style` with any recognised keys from `settings` applied."""
    changes: dict[str, Any] = {}
    if settings.get("indent") is not None:
        changes["indent"] = parse_indent(settings["indent"])
    if settings.get("newline") is not None:
        changes["newline"] = parse_newline(settings["newline"])
    if settings.get("member_level") is not None:
        changes["member_level"] = parse_level(settings["member_level"])
    return replace(style, **changes) if changes else style


def load_style(
    path: Path | str | None = None,
    overrides: dict | None = None,
    environ: dict[str, str] | None = None,
) -> FormatStyle:
    """Build the effective FormatStyle.

    Args:
        path: Config file. Defaults to $CTORGEN_CONFIG or ./.ctorgen.yaml.
        overrides: Highest-priority settings, e.g. from CLI flags.
        environ: Environment mapping. Defaults to os.environ.

    Returns:
        Resolved FormatStyle.
    """
    from ctorgen.paths import config_path

    env = os.environ if environ is None else environ
    style = DEFAULT_STYLE

    config_file = Path(path) if path else config_path()
    if config_file is not None:
        style = apply_settings(style, read_config(config_file))

    style = apply_settings(style, {
        "indent": env.get("CTORGEN_INDENT"),
        "newline": env.get("CTORGEN_NEWLINE"),
    })

    if overrides:
        style = apply_settings(style, overrides)
    return style
