"""Exception types raised by ctorgen."""

from __future__ import annotations


class CtorgenError(Exception):
    """Base class for all ctorgen errors."""


class NoClassDeclarationFound(CtorgenError, LookupError):
    """No `public class <Name> {` declaration could be located."""

    def __init__(self, class_name: str | None = None):
        self.class_name = class_name
        if class_name:
            msg = f"No public class declaration named '{class_name}' found"
        else:
            msg = "No public class declaration found"
        super().__init__(msg)


class ConfigError(CtorgenError, ValueError):
    """Style configuration is malformed."""
