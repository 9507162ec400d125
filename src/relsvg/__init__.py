"""
relsvg - relative layout drawings rendered to SVG.

Shapes are placed next to each other in unit-based implicit coordinates,
then a Drawing scales the whole layout into a pixel canvas while keeping
its aspect ratio.

Usage:
    from relsvg import Circle, Drawing, Line, Rectangle, Text

    a = Circle()
    b = Rectangle(2)
    b.set_right_of(a, gap=0.5)
    label = Text("a to b")
    label.set_below(b)

    drawing = Drawing()
    for shape in (a, b, label):
        drawing.add(shape)
    drawing.set_explicit_dimensions(400, 200)
    drawing.write_to_file("diagram.svg")
"""

__version__ = "0.1.0"

from .drawing import Drawing
from .errors import (
    AdjacencyError,
    DivisionByZeroError,
    LayoutConfigError,
    LayoutInvariantError,
    LayoutNotSetError,
    NumberFormatError,
    RelsvgError,
    ShapeOwnershipError,
)
from .geometry import Adjacency, Direction, Point
from .layout_schema import LayoutConfig
from .markers import Arrowhead, ArrowheadType
from .number import DEFAULT_PRECISION, Number, Precision
from .shapes import Circle, Line, Orientation, Rectangle, Shape, Text

__all__ = [
    # Core
    "Drawing",
    "Shape",
    "Circle",
    "Rectangle",
    "Line",
    "Orientation",
    "Text",
    "Arrowhead",
    "ArrowheadType",
    # Values
    "Number",
    "Precision",
    "DEFAULT_PRECISION",
    "Point",
    "Direction",
    "Adjacency",
    # Layout files
    "LayoutConfig",
    # Errors
    "RelsvgError",
    "AdjacencyError",
    "LayoutNotSetError",
    "LayoutInvariantError",
    "DivisionByZeroError",
    "NumberFormatError",
    "ShapeOwnershipError",
    "LayoutConfigError",
]
