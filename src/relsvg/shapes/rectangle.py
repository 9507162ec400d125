"""Rectangle shape."""

from __future__ import annotations

from ..constants import DEFAULT_IMPLICIT_SIZE
from ..number import Number, NumberLike
from .shape import Shape


class Rectangle(Shape):
    """
    A rectangle filling its bounding box.

    ``Rectangle(aspect_ratio)`` is one implicit unit tall and
    ``aspect_ratio`` units wide. Use :meth:`of_size` for any other size.
    """

    def __init__(
        self,
        aspect_ratio: NumberLike = DEFAULT_IMPLICIT_SIZE,
        fill: str | None = None,
        stroke: str | None = None,
    ):
        aspect_ratio = Number.value_of(aspect_ratio)
        if aspect_ratio <= 0:
            raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")
        super().__init__(aspect_ratio, DEFAULT_IMPLICIT_SIZE, fill=fill, stroke=stroke)

    @classmethod
    def of_size(
        cls,
        width: NumberLike,
        height: NumberLike,
        fill: str | None = None,
        stroke: str | None = None,
    ) -> "Rectangle":
        """Create a rectangle with an arbitrary implicit width and height."""
        width = Number.value_of(width)
        height = Number.value_of(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Rectangle size must be positive, got {width}x{height}")
        rect = cls(fill=fill, stroke=stroke)
        rect._implicit_width = width
        rect._implicit_height = height
        return rect

    @property
    def aspect_ratio(self) -> Number:
        return self.implicit_width.divide(self.implicit_height)

    def get_svg(self) -> str:
        self._require_explicit_size()
        # SVG positions rectangles by their top-left corner
        return (
            f'<rect width="{self.svg_number(self.explicit_width)}"'
            f' height="{self.svg_number(self.explicit_height)}"'
            f' x="{self.svg_number(self.explicit_left)}"'
            f' y="{self.svg_number(self.explicit_top)}"'
            f"{self.style_attributes()} />"
        )
