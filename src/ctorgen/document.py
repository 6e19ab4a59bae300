"""Plain-text document acting as the constructor's source and sink.

Offsets passed to `insert` count a CRLF pair as a single character, the
same coordinates `locate_class` reports against normalized text. They
are mapped back onto the raw text so the document's own line endings
survive untouched.
"""

from __future__ import annotations

import sys
from pathlib import Path


def detect_newline(text: str) -> str:
    """Return "\\r\\n" if `text` uses any CRLF line ending, else "\\n"."""
    return "\r\n" if "\r\n" in text else "\n"


def splice(text: str, offset: int, snippet: str) -> str:
    """Insert `snippet` into `text` at a raw character offset."""
    if not 0 <= offset <= len(text):
        raise ValueError(f"Offset {offset} outside text of length {len(text)}")
    return text[:offset] + snippet + text[offset:]


def raw_offset(text: str, normalized_offset: int) -> int:
    """Map an offset in CRLF-normalized text onto `text`."""
    normalized_length = len(text) - text.count("\r\n")
    if not 0 <= normalized_offset <= normalized_length:
        raise ValueError(
            f"Offset {normalized_offset} outside text of length {normalized_length}"
        )
    pos = 0
    remaining = normalized_offset
    while remaining > 0:
        pos += 2 if text.startswith("\r\n", pos) else 1
        remaining -= 1
    return pos


class TextDocument:
    """In-memory text with offset-addressed insertion."""

    def __init__(self, text: str, path: Path | None = None):
        self.text = text
        self.path = path

    @classmethod
    def from_path(cls, path: Path | str) -> TextDocument:
        doc_path = Path(path)
        # newline="" keeps CRLF endings as-is
        with open(doc_path, encoding="utf-8", newline="") as f:
            return cls(f.read(), path=doc_path)

    @classmethod
    def from_stdin(cls) -> TextDocument:
        # bytes keep CRLF endings as-is
        return cls(sys.stdin.buffer.read().decode("utf-8"))

    @property
    def newline(self) -> str:
        return detect_newline(self.text)

    def insert(self, offset: int, snippet: str) -> None:
        """Insert `snippet` at a normalized offset, leaving the rest unchanged."""
        self.text = splice(self.text, raw_offset(self.text, offset), snippet)

    def save(self, path: Path | str | None = None) -> Path:
        target = Path(path) if path else self.path
        if target is None:
            raise ValueError("Document has no path; pass one to save()")
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(self.text)
        return target
