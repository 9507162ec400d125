"""Text shape: a string centered in a unit box."""

from __future__ import annotations

from ..svg import svg_attribute, svg_text
from .shape import Shape


class Text(Shape):
    """
    A text label.

    The box is one implicit unit square regardless of the string; the text is
    anchored at the box center. SVG renders the stroke before the fill.
    """

    def __init__(self, text: str = "", fill: str | None = None, stroke: str | None = None):
        super().__init__(fill=fill, stroke=stroke)
        self.text = text

    def __repr__(self) -> str:
        return f"Text({self.text!r}, center=({self.implicit_x}, {self.implicit_y}))"

    def get_svg(self) -> str:
        self._require_explicit_size()
        if not self.text:
            return ""
        attrs = [
            svg_attribute("x", self.svg_number(self.explicit_x)),
            svg_attribute("y", self.svg_number(self.explicit_y)),
            'dominant-baseline="middle"',
            'text-anchor="middle"',
        ]
        if self.stroke is not None:
            attrs.append(svg_attribute("stroke", self.stroke))
        if self.fill is not None:
            attrs.append(svg_attribute("fill", self.fill))
        return f"<text {' '.join(attrs)}>{svg_text(self.text)}</text>"
