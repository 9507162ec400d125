"""
Shapes that can be placed in a Drawing.

All shapes share the box model of :class:`Shape`; subclasses only change
their implicit size and the SVG element they emit.
"""

from .circle import Circle
from .line import Line, Orientation
from .rectangle import Rectangle
from .shape import Shape
from .text import Text

__all__ = [
    "Shape",
    "Circle",
    "Rectangle",
    "Line",
    "Orientation",
    "Text",
]
