"""Extract public auto-properties from C# class text."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Type token: generics, arrays, nullables and dotted names, no whitespace.
PROPERTY_PATTERN = re.compile(
    r"^[ \t]*public[ \t]+"
    r"(?P<type>[\w.<>\[\]?,]+)[ \t]+"
    r"(?P<name>\w+)\s*"
    r"\{\s*get\b",
    re.MULTILINE,
)


@dataclass(frozen=True)
class PropertyDescriptor:
    """One `public <type> <name> { get ...` declaration."""

    type: str
    name: str

    @property
    def parameter_name(self) -> str:
        """Name with only the first character lower-cased."""
        return self.name[:1].lower() + self.name[1:]


def extract_properties(text: str) -> list[PropertyDescriptor]:
    """Return every public auto-property in `text`, in source order.

    Duplicates are kept. Lines that don't match the property shape
    (fields, non-public or expression-bodied members) are skipped.
    """
    return [
        PropertyDescriptor(type=m.group("type"), name=m.group("name"))
        for m in PROPERTY_PATTERN.finditer(text)
    ]
