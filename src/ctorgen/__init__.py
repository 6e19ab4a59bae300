"""Constructor generator for C# classes.

Reads class source text, extracts public auto-properties, and splices a
constructor that assigns every property from a parameter just after the
class's opening brace.

Pipeline:
    text -> extract_properties -> locate_class -> generate_constructor -> insert
"""

__version__ = "0.1.0"
