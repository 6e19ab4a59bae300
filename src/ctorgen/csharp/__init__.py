"""Line-oriented C# source scanning.

Regular-expression based: no syntax tree is built. Only the shapes
below are recognised, everything else is skipped silently.

    public <Type> <Name> { get ...          -> property
    public [modifiers] class <Name> [: Bases] {   -> class declaration
"""

from ctorgen.csharp.locator import ClassLocation, class_body, locate_class
from ctorgen.csharp.properties import PropertyDescriptor, extract_properties

__all__ = [
    "ClassLocation",
    "PropertyDescriptor",
    "class_body",
    "extract_properties",
    "locate_class",
]
