"""
Drawing: a collection of shapes fitted into a pixel canvas.

Fitting maps the implicit layout (unit based, y-up) onto explicit SVG
coordinates (pixels, y-down):

1. The implicit bounding box of all shapes is measured.
2. The largest box with the same aspect ratio that fits the canvas is the
   content box. If the content is relatively wider than the canvas the
   width is the binding constraint, otherwise the height is.
3. Every shape is scaled by content size / implicit size on each axis,
   flipped vertically, and shifted so the content box is centered in the
   canvas.

Example:
    >>> from relsvg import Circle, Drawing
    >>> c1, c2 = Circle(), Circle()
    >>> c2.set_right_of(c1)
    >>> drawing = Drawing()
    >>> drawing.add(c1)
    >>> drawing.add(c2)
    >>> drawing.set_explicit_dimensions(100, 100)
    >>> c2.get_svg()
    '<circle r="25" cx="75" cy="50" />'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from .errors import LayoutInvariantError, LayoutNotSetError, ShapeOwnershipError
from .number import DEFAULT_PRECISION, TWO, ZERO, Number, NumberLike, Precision
from .shapes.shape import Shape
from .svg import svg_document

logger = logging.getLogger(__name__)


class Drawing:
    """
    An ordered set of shapes plus the canvas they are fitted into.

    Shapes render in the order they were added. The canvas width and height
    are None until set; setting them again recomputes every shape from
    scratch, so repeated fits with the same values give identical output.

    Attributes:
        precision: Rounding policy for layout arithmetic and SVG output
    """

    def __init__(self, precision: Precision | None = None):
        self.precision = precision if precision is not None else DEFAULT_PRECISION

        # dict keeps insertion order and gives set semantics
        self._contents: dict[Shape, None] = {}

        self._explicit_width: Number | None = None
        self._explicit_height: Number | None = None
        self._content_width: Number | None = None
        self._content_height: Number | None = None
        self._width_constrained: bool | None = None

    def __repr__(self) -> str:
        return (f"Drawing(shapes={len(self)}, "
                f"explicit={self._explicit_width}x{self._explicit_height})")

    # =========================================================================
    # CONTENTS
    # =========================================================================

    def add(self, shape: Shape) -> None:
        """
        Add a shape to this drawing.

        Adding the same shape twice has no effect. If the drawing has already
        been fitted, the layout is recomputed to include the new shape. When
        that refit fails the shape is not added and the previous layout stays.

        Raises:
            ShapeOwnershipError: If the shape already belongs to another drawing
            LayoutInvariantError: If the contents can no longer be fitted
        """
        owner = shape.drawing
        if owner is not None and owner is not self:
            raise ShapeOwnershipError(f"{shape!r} already belongs to another drawing")
        if shape in self._contents:
            return

        saved = (self._explicit_width, self._explicit_height, self._content_width,
                 self._content_height, self._width_constrained)
        self._contents[shape] = None
        shape._attach(self)
        try:
            self._refit()
        except LayoutInvariantError:
            del self._contents[shape]
            shape._detach()
            (self._explicit_width, self._explicit_height, self._content_width,
             self._content_height, self._width_constrained) = saved
            if self._content_width is not None and self._contents:
                self._apply(self._content_width, self._content_height)
            raise
        logger.debug("Added %r (%d shapes)", shape, len(self._contents))

    def _refit(self) -> None:
        """Repeat the last fit with the stored canvas, if there is one."""
        if self._explicit_width is not None and self._explicit_height is not None:
            self.set_explicit_dimensions(self._explicit_width, self._explicit_height)
        elif self._explicit_width is not None:
            self.set_explicit_width(self._explicit_width)
        elif self._explicit_height is not None:
            self.set_explicit_height(self._explicit_height)

    def __len__(self) -> int:
        return len(self._contents)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._contents)

    def __contains__(self, shape: object) -> bool:
        return shape in self._contents

    @property
    def length(self) -> int:
        """Number of shapes in the drawing."""
        return len(self._contents)

    # =========================================================================
    # IMPLICIT BOUNDING BOX
    # =========================================================================

    @property
    def implicit_x_minimum(self) -> Number:
        return min((s.implicit_x_minimum for s in self._contents), default=ZERO)

    @property
    def implicit_x_maximum(self) -> Number:
        return max((s.implicit_x_maximum for s in self._contents), default=ZERO)

    @property
    def implicit_y_minimum(self) -> Number:
        return min((s.implicit_y_minimum for s in self._contents), default=ZERO)

    @property
    def implicit_y_maximum(self) -> Number:
        return max((s.implicit_y_maximum for s in self._contents), default=ZERO)

    @property
    def implicit_width(self) -> Number:
        return self.implicit_x_maximum - self.implicit_x_minimum

    @property
    def implicit_height(self) -> Number:
        return self.implicit_y_maximum - self.implicit_y_minimum

    # =========================================================================
    # EXPLICIT DIMENSIONS
    # =========================================================================

    @property
    def explicit_width(self) -> Number | None:
        """Canvas width in pixels."""
        return self._explicit_width

    @property
    def explicit_height(self) -> Number | None:
        """Canvas height in pixels."""
        return self._explicit_height

    @property
    def explicit_content_width(self) -> Number | None:
        """Width of the fitted content box, or None before fitting."""
        return self._content_width

    @property
    def explicit_content_height(self) -> Number | None:
        """Height of the fitted content box, or None before fitting."""
        return self._content_height

    @property
    def explicit_to_implicit_ratio(self) -> Number | None:
        """Pixels per implicit unit, or None before fitting."""
        if self._content_width is None:
            return None
        implicit_width = self.implicit_width
        if not implicit_width.is_zero():
            return self._content_width.divide(implicit_width, self.precision)
        return self._content_height.divide(self.implicit_height, self.precision)

    def is_width_constrained(self) -> bool | None:
        """True if the canvas width bounds the content, None before fitting."""
        return self._width_constrained

    @staticmethod
    def _dimension(value: NumberLike, name: str) -> Number:
        value = Number.value_of(value)
        if value < 0:
            raise ValueError(f"Explicit {name} cannot be negative, got {value}")
        return value

    def set_explicit_dimensions(self, width: NumberLike, height: NumberLike) -> None:
        """
        Fit the contents into a ``width`` x ``height`` canvas.

        The canvas keeps the requested size. The content box is the largest
        box with the contents' aspect ratio that fits inside it, centered.
        An exact aspect-ratio tie counts as height constrained.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels

        Raises:
            LayoutInvariantError: If the contents have zero implicit width or height
        """
        width = self._dimension(width, "width")
        height = self._dimension(height, "height")
        if not self._contents:
            self._explicit_width = width
            self._explicit_height = height
            logger.debug("Empty drawing: stored %sx%s", width, height)
            return

        implicit_width = self.implicit_width
        implicit_height = self.implicit_height
        if implicit_width.is_zero() or implicit_height.is_zero():
            raise LayoutInvariantError(
                f"Cannot fit contents of implicit size {implicit_width}x{implicit_height} "
                "into both a width and a height"
            )
        self._explicit_width = width
        self._explicit_height = height

        # implicit_width / implicit_height > width / height, without dividing by height
        p = self.precision
        width_constrained = implicit_width.multiply(height, p) > width.multiply(implicit_height, p)
        if width_constrained:
            content_width = width
            content_height = width.multiply(implicit_height, p).divide(implicit_width, p)
        else:
            content_height = height
            content_width = height.multiply(implicit_width, p).divide(implicit_height, p)

        self._width_constrained = width_constrained
        logger.debug(
            "Fit %sx%s into %sx%s (%s constrained): content %sx%s",
            implicit_width, implicit_height, width, height,
            "width" if width_constrained else "height",
            content_width.to_svg(p), content_height.to_svg(p),
        )
        self._apply(content_width, content_height)

    def set_explicit_width(self, width: NumberLike) -> None:
        """
        Set the canvas width and rescale every shape.

        If the height is unset it becomes the content height at the same scale.

        Raises:
            LayoutInvariantError: If the contents have zero implicit width
        """
        width = self._dimension(width, "width")
        if not self._contents:
            self._explicit_width = width
            return
        if self._explicit_height is not None:
            self.set_explicit_dimensions(width, self._explicit_height)
            return

        implicit_width = self.implicit_width
        if implicit_width.is_zero():
            raise LayoutInvariantError("Cannot scale contents with zero implicit width")
        self._explicit_width = width
        ratio = width.divide(implicit_width, self.precision)
        self._explicit_height = self.implicit_height.multiply(ratio, self.precision)
        self._width_constrained = True
        self._apply(width, self._explicit_height)

    def set_explicit_height(self, height: NumberLike) -> None:
        """
        Set the canvas height and rescale every shape.

        If the width is unset it becomes the content width at the same scale.

        Raises:
            LayoutInvariantError: If the contents have zero implicit height
        """
        height = self._dimension(height, "height")
        if not self._contents:
            self._explicit_height = height
            return
        if self._explicit_width is not None:
            self.set_explicit_dimensions(self._explicit_width, height)
            return

        implicit_height = self.implicit_height
        if implicit_height.is_zero():
            raise LayoutInvariantError("Cannot scale contents with zero implicit height")
        self._explicit_height = height
        ratio = height.divide(implicit_height, self.precision)
        self._explicit_width = self.implicit_width.multiply(ratio, self.precision)
        self._width_constrained = False
        self._apply(self._explicit_width, height)

    # =========================================================================
    # PROPAGATION
    # =========================================================================

    def _ratio(self, content: Number, implicit: Number) -> Number:
        if implicit.is_zero():
            return ZERO
        return content.divide(implicit, self.precision)

    def _apply(self, content_width: Number, content_height: Number) -> None:
        """Push explicit size and position to every shape."""
        p = self.precision
        self._content_width = content_width
        self._content_height = content_height

        x_minimum = self.implicit_x_minimum
        y_maximum = self.implicit_y_maximum
        ratio_x = self._ratio(content_width, self.implicit_width)
        ratio_y = self._ratio(content_height, self.implicit_height)
        whitespace_x = (self._explicit_width - content_width).divide(TWO, p)
        whitespace_y = (self._explicit_height - content_height).divide(TWO, p)

        for shape in self._contents:
            shape.set_explicit_width(shape.implicit_width.multiply(ratio_x, p))
            shape.set_explicit_x(
                (shape.implicit_x - x_minimum).multiply(ratio_x, p) + whitespace_x
            )

            shape.set_explicit_height(shape.implicit_height.multiply(ratio_y, p))
            # Implicit y grows upward, SVG y grows downward
            explicit_y = (y_maximum - shape.implicit_y).multiply(ratio_y, p) + whitespace_y
            if explicit_y.compare_to_fuzzy(ZERO, p) < 0:
                raise LayoutInvariantError(
                    f"{shape!r} would be placed above the canvas (y={explicit_y})"
                )
            shape.set_explicit_y(explicit_y)

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def get_svg(self, width: NumberLike | None = None, height: NumberLike | None = None) -> str:
        """
        Render the drawing as an SVG document.

        Arrowhead markers are defined once in a leading ``<defs>`` block,
        however many lines use them.

        Args:
            width: Canvas width; fits the drawing first when given
            height: Canvas height; fits the drawing first when given

        Raises:
            LayoutNotSetError: If no canvas size has been set or given
        """
        if width is not None and height is not None:
            self.set_explicit_dimensions(width, height)
        elif width is not None:
            self.set_explicit_width(width)
        elif height is not None:
            self.set_explicit_height(height)

        if self._explicit_width is None or self._explicit_height is None:
            raise LayoutNotSetError(
                "Cannot get SVG without setting explicit dimensions. "
                "Call set_explicit_dimensions() first."
            )

        markers = {}
        for shape in self._contents:
            for marker in shape.markers():
                markers.setdefault(marker.marker_id, marker)
        defs = ""
        if markers:
            defs = "<defs>" + "".join(m.svg_marker() for m in markers.values()) + "</defs>"

        body = defs + "".join(shape.get_svg() for shape in self._contents)
        return svg_document(
            self._explicit_width.to_svg(self.precision),
            self._explicit_height.to_svg(self.precision),
            body,
        )

    def write_to_file(self, path: str | Path) -> None:
        """Write :meth:`get_svg` output to ``path`` as UTF-8."""
        svg = self.get_svg()
        with open(path, "w", encoding="utf-8") as f:
            f.write(svg)
        logger.info("Wrote SVG: %s", path)
