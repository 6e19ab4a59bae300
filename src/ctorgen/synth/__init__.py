"""Constructor source synthesis.

Templates live in `templates`; `generator` fills them from extracted
properties and a FormatStyle.
"""

from ctorgen.synth.generator import generate_constructor

__all__ = ["generate_constructor"]
