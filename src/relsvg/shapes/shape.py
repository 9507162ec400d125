"""
Base Shape class.

A Shape is a box in the abstract: a center position and a size. Before a
Drawing is fitted only the implicit (unit based, y-up) geometry exists;
fitting assigns the explicit (pixel, y-down) geometry.

Adjacency is resolved when it is declared. ``b.set_right_of(a)`` moves
``b`` next to wherever ``a`` is at that moment; moving or resizing ``a``
afterwards does not move ``b`` again.
"""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING

from ..constants import DEFAULT_IMPLICIT_SIZE
from ..errors import AdjacencyError, LayoutNotSetError
from ..geometry import Adjacency, Direction, Point
from ..number import TWO, ZERO, Number, NumberLike
from ..svg import svg_attribute

if TYPE_CHECKING:
    from ..drawing import Drawing
    from ..markers import Arrowhead

logger = logging.getLogger(__name__)

CANNOT_BE_ADJACENT_TO_ITSELF = "A shape cannot be adjacent to itself"


class Shape:
    """
    A positioned, sized box that can be placed next to one other shape.

    Attributes:
        fill: Optional SVG fill color
        stroke: Optional SVG stroke color
    """

    def __init__(
        self,
        implicit_width: NumberLike = DEFAULT_IMPLICIT_SIZE,
        implicit_height: NumberLike = DEFAULT_IMPLICIT_SIZE,
        fill: str | None = None,
        stroke: str | None = None,
    ):
        self._implicit_width = Number.value_of(implicit_width)
        self._implicit_height = Number.value_of(implicit_height)
        if self._implicit_width < 0 or self._implicit_height < 0:
            raise ValueError("Implicit width and height cannot be negative")
        self._implicit_x = ZERO
        self._implicit_y = ZERO

        # Unset until the owning Drawing is fitted
        self._explicit_width: Number | None = None
        self._explicit_height: Number | None = None
        self._explicit_x = ZERO
        self._explicit_y = ZERO

        self._adjacency: Adjacency | None = None
        self._drawing: weakref.ref | None = None

        self.fill = fill
        self.stroke = stroke

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(center=({self._implicit_x}, {self._implicit_y}), "
                f"size={self._implicit_width}x{self._implicit_height})")

    # =========================================================================
    # IMPLICIT GEOMETRY
    # =========================================================================

    @property
    def implicit_width(self) -> Number:
        return self._implicit_width

    @property
    def implicit_height(self) -> Number:
        return self._implicit_height

    @property
    def implicit_x(self) -> Number:
        """Implicit x of the center."""
        return self._implicit_x

    @implicit_x.setter
    def implicit_x(self, value: NumberLike) -> None:
        self._implicit_x = Number.value_of(value)

    @property
    def implicit_y(self) -> Number:
        """Implicit y of the center (y grows upward)."""
        return self._implicit_y

    @implicit_y.setter
    def implicit_y(self, value: NumberLike) -> None:
        self._implicit_y = Number.value_of(value)

    @property
    def implicit_half_width(self) -> Number:
        return self._implicit_width.divide(TWO)

    @property
    def implicit_half_height(self) -> Number:
        return self._implicit_height.divide(TWO)

    @property
    def implicit_x_minimum(self) -> Number:
        """Leftmost implicit x."""
        return self._implicit_x - self.implicit_half_width

    @property
    def implicit_x_maximum(self) -> Number:
        """Rightmost implicit x."""
        return self._implicit_x + self.implicit_half_width

    @property
    def implicit_y_minimum(self) -> Number:
        """Bottommost implicit y."""
        return self._implicit_y - self.implicit_half_height

    @property
    def implicit_y_maximum(self) -> Number:
        """Topmost implicit y."""
        return self._implicit_y + self.implicit_half_height

    # Ports are the edge midpoints, used to attach lines
    @property
    def center(self) -> Point:
        return Point(self._implicit_x, self._implicit_y)

    @property
    def left_port(self) -> Point:
        return Point(self.implicit_x_minimum, self._implicit_y)

    @property
    def right_port(self) -> Point:
        return Point(self.implicit_x_maximum, self._implicit_y)

    @property
    def top_port(self) -> Point:
        return Point(self._implicit_x, self.implicit_y_maximum)

    @property
    def bottom_port(self) -> Point:
        return Point(self._implicit_x, self.implicit_y_minimum)

    def port(self, name: str) -> Point:
        """Look up a port by name: left, right, top, bottom or center."""
        ports = {
            "left": "left_port",
            "right": "right_port",
            "top": "top_port",
            "bottom": "bottom_port",
            "center": "center",
        }
        if name not in ports:
            raise ValueError(f"Unknown port: {name}. Valid ports: {list(ports)}")
        return getattr(self, ports[name])

    # =========================================================================
    # ADJACENCY
    # =========================================================================

    @property
    def adjacency(self) -> Adjacency | None:
        """The relation declared by this shape, if any."""
        return self._adjacency

    def set_right_of(self, other: Shape, gap: NumberLike = 0) -> None:
        """
        Place this shape immediately to the right of ``other``.

        Only the x coordinate changes. The position is computed from
        ``other``'s current extents and is not updated if ``other`` moves later.

        Args:
            other: The neighbor to the left of this shape
            gap: Implicit distance between the two shapes

        Raises:
            AdjacencyError: If ``other`` is this shape
        """
        gap = self._link(Direction.RIGHT_OF, other, gap)
        self._implicit_x = other.implicit_x_maximum + gap + self.implicit_half_width

    def set_left_of(self, other: Shape, gap: NumberLike = 0) -> None:
        """Place this shape immediately to the left of ``other``."""
        gap = self._link(Direction.LEFT_OF, other, gap)
        self._implicit_x = other.implicit_x_minimum - gap - self.implicit_half_width

    def set_above(self, other: Shape, gap: NumberLike = 0) -> None:
        """Place this shape immediately above ``other``."""
        gap = self._link(Direction.ABOVE, other, gap)
        self._implicit_y = other.implicit_y_maximum + gap + self.implicit_half_height

    def set_below(self, other: Shape, gap: NumberLike = 0) -> None:
        """Place this shape immediately below ``other``."""
        gap = self._link(Direction.BELOW, other, gap)
        self._implicit_y = other.implicit_y_minimum - gap - self.implicit_half_height

    def set_adjacent(self, direction: Direction, other: Shape, gap: NumberLike = 0) -> None:
        """Dispatch to the setter for ``direction``."""
        setters = {
            Direction.RIGHT_OF: self.set_right_of,
            Direction.LEFT_OF: self.set_left_of,
            Direction.ABOVE: self.set_above,
            Direction.BELOW: self.set_below,
        }
        setters[direction](other, gap)

    def _link(self, direction: Direction, other: Shape, gap: NumberLike) -> Number:
        if other is self:
            raise AdjacencyError(CANNOT_BE_ADJACENT_TO_ITSELF)
        gap = Number.value_of(gap)
        if gap < 0:
            raise ValueError(f"Gap cannot be negative, got {gap}")
        self._adjacency = Adjacency.to(direction, other)
        logger.debug("%r is now %s %r", self, direction.name.lower(), other)
        return gap

    def _neighbor_in(self, direction: Direction) -> Shape | None:
        if self._adjacency is None or self._adjacency.direction is not direction:
            return None
        return self._adjacency.target

    def get_right_of(self) -> Shape | None:
        """The shape this one was placed to the right of, if that is the current relation."""
        return self._neighbor_in(Direction.RIGHT_OF)

    def get_left_of(self) -> Shape | None:
        return self._neighbor_in(Direction.LEFT_OF)

    def get_above(self) -> Shape | None:
        return self._neighbor_in(Direction.ABOVE)

    def get_below(self) -> Shape | None:
        return self._neighbor_in(Direction.BELOW)

    # =========================================================================
    # EXPLICIT GEOMETRY
    # =========================================================================

    @property
    def drawing(self) -> Drawing | None:
        """The Drawing this shape was added to, if any."""
        return self._drawing() if self._drawing is not None else None

    def _attach(self, drawing: Drawing) -> None:
        self._drawing = weakref.ref(drawing)

    def _detach(self) -> None:
        self._drawing = None

    @property
    def explicit_width(self) -> Number | None:
        """Pixel width, or None before the owning Drawing is fitted."""
        return self._explicit_width

    @property
    def explicit_height(self) -> Number | None:
        """Pixel height, or None before the owning Drawing is fitted."""
        return self._explicit_height

    @property
    def explicit_x(self) -> Number:
        """Pixel x of the center."""
        return self._explicit_x

    @property
    def explicit_y(self) -> Number:
        """Pixel y of the center (y grows downward)."""
        return self._explicit_y

    def set_explicit_width(self, width: NumberLike | None) -> None:
        self._explicit_width = None if width is None else Number.value_of(width)

    def set_explicit_height(self, height: NumberLike | None) -> None:
        self._explicit_height = None if height is None else Number.value_of(height)

    def set_explicit_x(self, x: NumberLike) -> None:
        self._explicit_x = Number.value_of(x)

    def set_explicit_y(self, y: NumberLike) -> None:
        self._explicit_y = Number.value_of(y)

    def has_explicit_size(self) -> bool:
        return self._explicit_width is not None and self._explicit_height is not None

    def _require_explicit_size(self) -> None:
        if not self.has_explicit_size():
            raise LayoutNotSetError(
                f"{self.__class__.__name__} has no explicit dimensions yet. "
                "Set the explicit dimensions of its Drawing first."
            )

    @property
    def explicit_half_width(self) -> Number:
        self._require_explicit_size()
        return self._explicit_width.divide(TWO)

    @property
    def explicit_half_height(self) -> Number:
        self._require_explicit_size()
        return self._explicit_height.divide(TWO)

    @property
    def explicit_left(self) -> Number:
        return self._explicit_x - self.explicit_half_width

    @property
    def explicit_right(self) -> Number:
        return self._explicit_x + self.explicit_half_width

    @property
    def explicit_top(self) -> Number:
        """Smallest pixel y covered by this shape."""
        return self._explicit_y - self.explicit_half_height

    @property
    def explicit_bottom(self) -> Number:
        """Largest pixel y covered by this shape."""
        return self._explicit_y + self.explicit_half_height

    # =========================================================================
    # SVG
    # =========================================================================

    def svg_number(self, value: NumberLike) -> str:
        """Format ``value`` for an SVG attribute using the owning Drawing's precision."""
        drawing = self.drawing
        return Number.value_of(value).to_svg(drawing.precision if drawing is not None else None)

    def style_attributes(self) -> str:
        """Fill and stroke attributes, each only when set, with a leading space."""
        parts = []
        if self.fill is not None:
            parts.append(svg_attribute("fill", self.fill))
        if self.stroke is not None:
            parts.append(svg_attribute("stroke", self.stroke))
        return "".join(f" {p}" for p in parts)

    def get_svg(self) -> str:
        """
        SVG fragment for this shape.

        A plain Shape only reserves space and draws nothing; subclasses emit
        their element.

        Raises:
            LayoutNotSetError: If the owning Drawing has not been fitted
        """
        self._require_explicit_size()
        return ""

    def markers(self) -> list[Arrowhead]:
        """Marker definitions this shape's SVG refers to."""
        return []
