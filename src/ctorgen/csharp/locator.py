"""Locate the class declaration and the constructor insertion point."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ctorgen.errors import NoClassDeclarationFound

CLASS_MODIFIERS = ("abstract", "sealed", "static", "partial")

# The opening brace may follow on the same line or on a later one.
CLASS_PATTERN = re.compile(
    r"^[ \t]*public[ \t]+"
    r"(?:(?:" + "|".join(CLASS_MODIFIERS) + r")[ \t]+)*"
    r"class[ \t]+(?P<name>\w+)"
    r"(?:\s*:\s*[^{;]+?)?"
    r"\s*\{",
    re.MULTILINE,
)


@dataclass(frozen=True)
class ClassLocation:
    """Class name plus the offset just past its opening-brace line.

    The offset indexes the `\\n`-normalized text.
    """

    class_name: str
    insert_offset: int


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n")


def _find_declaration(normalized: str, class_name: str | None) -> re.Match:
    for match in CLASS_PATTERN.finditer(normalized):
        if class_name and match.group("name") != class_name:
            continue
        return match
    raise NoClassDeclarationFound(class_name)


def locate_class(text: str, class_name: str | None = None) -> ClassLocation:
    """Find the first public class declaration in `text`.

    Args:
        text: Full source text, any line-ending convention.
        class_name: Only accept a class with this name.

    Returns:
        ClassLocation whose offset is the start of the line following
        the opening brace when the brace ends its line, otherwise the
        position right after the brace.

    Raises:
        NoClassDeclarationFound: If no declaration matches.
    """
    normalized = normalize_newlines(text)
    match = _find_declaration(normalized, class_name)

    line_end = normalized.find("\n", match.end())
    rest = normalized[match.end():] if line_end == -1 else normalized[match.end():line_end]
    if rest.strip():
        offset = match.end()
    elif line_end == -1:
        offset = len(normalized)
    else:
        offset = line_end + 1
    return ClassLocation(class_name=match.group("name"), insert_offset=offset)


def class_body(text: str, class_name: str | None = None) -> str:
    """Return the normalized text between a class's braces.

    Braces are counted naively: braces inside strings or comments are
    not skipped. An unbalanced body runs to the end of the text.

    Raises:
        NoClassDeclarationFound: If no declaration matches.
    """
    normalized = normalize_newlines(text)
    match = _find_declaration(normalized, class_name)

    depth = 1
    start = match.end()
    for pos in range(start, len(normalized)):
        char = normalized[pos]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return normalized[start:pos]
    return normalized[start:]
