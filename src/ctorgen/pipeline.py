"""Extract -> locate -> synthesize -> insert, once per call."""

from __future__ import annotations

from dataclasses import dataclass

from ctorgen.config import DEFAULT_STYLE, FormatStyle
from ctorgen.csharp.locator import class_body, locate_class
from ctorgen.csharp.properties import PropertyDescriptor, extract_properties
from ctorgen.document import TextDocument, detect_newline
from ctorgen.synth.generator import generate_constructor


@dataclass
class GenerationResult:
    class_name: str
    properties: list[PropertyDescriptor]
    offset: int
    snippet: str
    text: str

    def summary(self) -> str:
        params = ", ".join(f"{p.type} {p.parameter_name}" for p in self.properties)
        return (
            f"{self.class_name}({params}) at offset {self.offset} "
            f"({len(self.properties)} properties)"
        )


def preview_constructor(
    text: str,
    style: FormatStyle | None = None,
    class_name: str | None = None,
) -> GenerationResult:
    """Run every stage except the insertion.

    `result.text` is the unchanged input. With `class_name`, only that
    class's body is scanned for properties; otherwise the whole text is.

    Raises:
        NoClassDeclarationFound: If no matching class is declared.
    """
    style = (style or DEFAULT_STYLE).resolved(detect_newline(text))
    location = locate_class(text, class_name=class_name)
    scope = class_body(text, class_name) if class_name else text
    properties = extract_properties(scope)
    snippet = generate_constructor(properties, location.class_name, style)
    return GenerationResult(
        class_name=location.class_name,
        properties=properties,
        offset=location.insert_offset,
        snippet=snippet,
        text=text,
    )


def add_constructor(
    document: TextDocument,
    style: FormatStyle | None = None,
    class_name: str | None = None,
) -> GenerationResult:
    """Generate a constructor and insert it into `document`.

    The document is only mutated after every other stage succeeded.

    Raises:
        NoClassDeclarationFound: If no matching class is declared.
    """
    result = preview_constructor(document.text, style=style, class_name=class_name)
    document.insert(result.offset, result.snippet)
    result.text = document.text
    return result
