"""
Arrowhead markers for line ends.

Each arrowhead renders as an SVG ``<marker>`` definition referenced from a
line's ``marker-end``. The id is the canonical type name, suffixed with the
fill color when that is not the default, so a document needs one definition
per id.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

from .constants import DEFAULT_ARROWHEAD_FILL
from .number import Number
from .svg import svg_attribute


class ArrowheadType(Enum):
    """
    Arrowhead styles.

    Synonyms are enum aliases, so ``ArrowheadType.NORMAL is ArrowheadType.TRIANGLE``.
    """

    TRIANGLE = "TRIANGLE"
    DEFAULT = "TRIANGLE"
    NORMAL = "TRIANGLE"
    BOX = "BOX"
    SQUARE = "BOX"
    DIAMOND = "DIAMOND"
    TURNED_SQUARE = "DIAMOND"
    DOT = "DOT"
    DISK = "DOT"

    @classmethod
    def from_name(cls, name: str) -> "ArrowheadType":
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(
                f"Unknown arrowhead type: {name}. Valid types: {list(cls.__members__)}"
            ) from None


def _fmt(value: float) -> str:
    return Number(value).to_svg()


@dataclass
class Arrowhead:
    """
    A marker drawn at the end of a line.

    Attributes:
        type: Arrowhead style
        fill: Marker fill color
    """

    type: ArrowheadType = ArrowheadType.TRIANGLE
    fill: str = DEFAULT_ARROWHEAD_FILL

    def __post_init__(self):
        if isinstance(self.type, str):
            self.type = ArrowheadType.from_name(self.type)

    @property
    def marker_id(self) -> str:
        if self.fill == DEFAULT_ARROWHEAD_FILL:
            return self.type.value
        return f"{self.type.value}_{re.sub(r'[^A-Za-z0-9_-]', '_', self.fill)}"

    def _marker(self, width: float, height: float) -> str:
        return (
            f'<marker id="{self.marker_id}" orient="auto"'
            f' viewBox="0 0 {_fmt(width)} {_fmt(height)}"'
            f' markerWidth="{_fmt(width)}" markerHeight="{_fmt(height)}"'
            f' refX="{_fmt(width / 2)}" refY="{_fmt(height / 2)}">'
        )

    def _body(self) -> str:
        fill = svg_attribute("fill", self.fill)

        if self.type is ArrowheadType.TRIANGLE:
            # Every marker encloses an area of 16, like the 4x4 box
            base = (4096.0 / 15.0) ** 0.25
            length = 32.0 / base
            return (self._marker(length, base)
                    + f'<path d="M0,0 L0,{_fmt(base)} L{_fmt(length)},{_fmt(base / 2)} z" {fill} />')

        if self.type is ArrowheadType.BOX:
            return self._marker(4, 4) + f'<path d="M0,0 L0,4 L4,4 L4,0 z" {fill} />'

        if self.type is ArrowheadType.DIAMOND:
            diagonal = 4 * math.sqrt(2)
            half = _fmt(diagonal / 2)
            full = _fmt(diagonal)
            return (self._marker(diagonal, diagonal)
                    + f'<path d="M{half},0 L{full},{half} L{half},{full} L0,{half} z" {fill} />')

        # DOT
        radius = 4 / math.sqrt(math.pi)
        r = _fmt(radius)
        return (self._marker(2 * radius, 2 * radius)
                + f'<circle cx="{r}" cy="{r}" r="{r}" {fill} />')

    def svg_marker(self) -> str:
        """The ``<marker>`` element alone, for a shared ``<defs>`` block."""
        return f"{self._body()}</marker>"

    def svg_def(self) -> str:
        """The ``<defs>`` block defining this marker."""
        return f"<defs>{self.svg_marker()}</defs>"

    @property
    def url(self) -> str:
        """Value for a ``marker-end`` attribute."""
        return f"url(#{self.marker_id})"
