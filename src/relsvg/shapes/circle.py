"""
Circle shape.

A circle's bounding box is a square of side 2 * radius, so adjacency and
fitting treat it exactly like any other box.
"""

from __future__ import annotations

from ..constants import DEFAULT_CIRCLE_RADIUS
from ..number import TWO, Number, NumberLike
from .shape import Shape


class Circle(Shape):
    """
    A circle, drawn centered in its bounding box.

    Example:
        >>> c1, c2 = Circle(), Circle()
        >>> c2.set_right_of(c1)
        >>> c2.implicit_x
        Number('1')
    """

    def __init__(
        self,
        radius: NumberLike = DEFAULT_CIRCLE_RADIUS,
        fill: str | None = None,
        stroke: str | None = None,
    ):
        radius = Number.value_of(radius)
        if radius <= 0:
            raise ValueError(f"Circle radius must be positive, got {radius}")
        diameter = radius * TWO
        super().__init__(diameter, diameter, fill=fill, stroke=stroke)

    @property
    def implicit_radius(self) -> Number:
        return self.implicit_half_width

    @property
    def explicit_radius(self) -> Number | None:
        """Pixel radius, or None before the owning Drawing is fitted."""
        if self.explicit_width is None:
            return None
        return self.explicit_width.divide(TWO)

    def get_svg(self) -> str:
        self._require_explicit_size()
        return (
            f'<circle r="{self.svg_number(self.explicit_radius)}"'
            f' cx="{self.svg_number(self.explicit_x)}"'
            f' cy="{self.svg_number(self.explicit_y)}"'
            f"{self.style_attributes()} />"
        )
