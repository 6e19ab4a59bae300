"""Text templates for generated constructors.

Templates use str.format() with named placeholders:
    nl: line ending
    outer: indent of the signature and braces
    inner: indent of parameters and body statements
"""

from __future__ import annotations

# ── No properties ─────────────────────────────────────────────────

EMPTY_CONSTRUCTOR = "{nl}{outer}public {class_name}(){nl}{inner}{{{nl}{inner}}}{nl}"

# ── With properties ───────────────────────────────────────────────

SIGNATURE_OPEN = "{nl}{outer}public {class_name}({nl}"

PARAMETER_LINE = "{inner}{type} {parameter},{nl}"

LAST_PARAMETER_LINE = "{inner}{type} {parameter}){nl}{outer}{{{nl}"

ASSIGNMENT_LINE = "{inner}{name} = {parameter};{nl}"

BODY_CLOSE = "{outer}}}{nl}"
