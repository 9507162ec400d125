"""
Line shape.

A line is laid out by its bounding box like every other shape. Its two
endpoints are stored as fractions of that box, so the line follows the box
when adjacency moves it or a Drawing rescales it.
"""

from __future__ import annotations

from enum import Enum

from ..constants import DEFAULT_LINE_STROKE
from ..geometry import Point
from ..markers import Arrowhead
from ..number import ONE, TWO, ZERO, Number, NumberLike
from ..svg import svg_attribute
from .shape import Shape


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# Endpoint fractions (x from the left edge, y from the bottom edge) for lines
# built without points
_HALF = ONE.divide(TWO)
_ORIENTATION_ENDPOINTS = {
    Orientation.HORIZONTAL: ((ZERO, _HALF), (ONE, _HALF)),
    Orientation.VERTICAL: ((_HALF, ZERO), (_HALF, ONE)),
}


class Line(Shape):
    """
    A straight line, optionally ending in an arrowhead.

    ``Line(start, end)`` spans the bounding box of two implicit points and
    is drawn from ``start`` to ``end``. ``Line()`` occupies a unit box and is
    drawn along its midline (horizontal) or center line (vertical).

    Attributes:
        thickness: Optional stroke width in pixels
        arrowhead: Marker at the end point, if any
    """

    def __init__(
        self,
        start: Point | None = None,
        end: Point | None = None,
        orientation: Orientation | str = Orientation.HORIZONTAL,
        thickness: NumberLike | None = None,
        fill: str | None = None,
        stroke: str | None = DEFAULT_LINE_STROKE,
    ):
        if (start is None) != (end is None):
            raise ValueError("A line needs both a start and an end point, or neither")
        if isinstance(orientation, str):
            orientation = Orientation(orientation.lower())
        self.orientation = orientation

        if start is None:
            super().__init__(fill=fill, stroke=stroke)
            self._start_fraction, self._end_fraction = _ORIENTATION_ENDPOINTS[orientation]
        else:
            width = abs(end.x - start.x)
            height = abs(end.y - start.y)
            super().__init__(width, height, fill=fill, stroke=stroke)
            self.implicit_x = (start.x + end.x).divide(TWO)
            self.implicit_y = (start.y + end.y).divide(TWO)
            # The start sits on the left/bottom edge unless it lies past the end
            start_fx, end_fx = (ZERO, ONE) if start.x <= end.x else (ONE, ZERO)
            start_fy, end_fy = (ZERO, ONE) if start.y <= end.y else (ONE, ZERO)
            self._start_fraction = (start_fx, start_fy)
            self._end_fraction = (end_fx, end_fy)

        self.thickness = None if thickness is None else Number.value_of(thickness)
        self.arrowhead: Arrowhead | None = None

    def add_arrowhead(self, arrowhead: Arrowhead | None = None) -> None:
        """Put an arrowhead at the end point (a default triangle if none is given)."""
        self.arrowhead = arrowhead if arrowhead is not None else Arrowhead()

    # =========================================================================
    # ENDPOINTS
    # =========================================================================

    def _implicit_point(self, fraction: tuple[Number, Number]) -> Point:
        fx, fy = fraction
        return Point(self.implicit_x_minimum + self.implicit_width * fx,
                     self.implicit_y_minimum + self.implicit_height * fy)

    def _explicit_point(self, fraction: tuple[Number, Number]) -> Point:
        # Explicit y grows downward, so the bottom edge is the larger value
        fx, fy = fraction
        return Point(self.explicit_left + self.explicit_width * fx,
                     self.explicit_bottom - self.explicit_height * fy)

    @property
    def implicit_start(self) -> Point:
        return self._implicit_point(self._start_fraction)

    @property
    def implicit_end(self) -> Point:
        return self._implicit_point(self._end_fraction)

    @property
    def explicit_start(self) -> Point:
        """Pixel start point. Raises LayoutNotSetError before the Drawing is fitted."""
        return self._explicit_point(self._start_fraction)

    @property
    def explicit_end(self) -> Point:
        return self._explicit_point(self._end_fraction)

    # =========================================================================
    # SVG
    # =========================================================================

    def get_svg(self) -> str:
        self._require_explicit_size()
        start = self.explicit_start
        end = self.explicit_end

        attrs = [
            svg_attribute("x1", self.svg_number(start.x)),
            svg_attribute("y1", self.svg_number(start.y)),
            svg_attribute("x2", self.svg_number(end.x)),
            svg_attribute("y2", self.svg_number(end.y)),
        ]
        if self.fill is not None:
            attrs.append(svg_attribute("fill", self.fill))
        attrs.append(svg_attribute("stroke", self.stroke or DEFAULT_LINE_STROKE))
        if self.thickness is not None:
            attrs.append(svg_attribute("stroke-width", self.svg_number(self.thickness)))
        if self.arrowhead is not None:
            attrs.append(svg_attribute("marker-end", self.arrowhead.url))

        return f"<line {' '.join(attrs)} />"

    def markers(self) -> list[Arrowhead]:
        return [self.arrowhead] if self.arrowhead is not None else []
