"""Render constructor source from properties and a class name."""

from __future__ import annotations

from collections.abc import Sequence

from ctorgen.config import DEFAULT_STYLE, FormatStyle
from ctorgen.csharp.properties import PropertyDescriptor
from ctorgen.synth.templates import (
    ASSIGNMENT_LINE,
    BODY_CLOSE,
    EMPTY_CONSTRUCTOR,
    LAST_PARAMETER_LINE,
    PARAMETER_LINE,
    SIGNATURE_OPEN,
)


def generate_constructor(
    properties: Sequence[PropertyDescriptor],
    class_name: str,
    style: FormatStyle | None = None,
) -> str:
    """Generate a constructor assigning every property from a parameter.

    Parameters and assignments follow the order of `properties`. An
    empty sequence yields a no-argument constructor with an empty body.

    Args:
        properties: Extracted properties, in source order.
        class_name: Name of the enclosing class.
        style: Indent and newline convention. An `auto` newline falls
            back to CRLF here; resolve it against the document first.

    Returns:
        Constructor source, starting and ending with a line ending.
    """
    style = (style or DEFAULT_STYLE).resolved("\r\n")
    layout = {"nl": style.newline, "outer": style.outer, "inner": style.inner}

    if not properties:
        return EMPTY_CONSTRUCTOR.format(class_name=class_name, **layout)

    *leading, last = properties
    parts = [SIGNATURE_OPEN.format(class_name=class_name, **layout)]
    for prop in leading:
        parts.append(PARAMETER_LINE.format(
            type=prop.type, parameter=prop.parameter_name, **layout,
        ))
    parts.append(LAST_PARAMETER_LINE.format(
        type=last.type, parameter=last.parameter_name, **layout,
    ))
    for prop in properties:
        parts.append(ASSIGNMENT_LINE.format(
            name=prop.name, parameter=prop.parameter_name, **layout,
        ))
    parts.append(BODY_CLOSE.format(**layout))
    return "".join(parts)
