"""
YAML schema for declarative drawings.

A layout file lists shapes in order; each may name one earlier shape it
sits next to. Shapes are built and positioned top to bottom, so a shape is
placed relative to wherever its neighbor was at that point in the file.

Example layout::

    version: "1.0"
    canvas:
      width: 200
      height: 100
    shapes:
      - id: left
        kind: circle
        fill: steelblue
      - id: right
        kind: rectangle
        aspect_ratio: 2
        right_of: left
        gap: 0.5
      - id: arrow
        kind: line
        start: {shape: left, port: right}
        end: {shape: right, port: left}
        arrowhead: triangle
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .constants import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from .drawing import Drawing
from .errors import LayoutConfigError, NumberFormatError
from .geometry import Direction, Point
from .markers import Arrowhead, ArrowheadType
from .number import Number
from .shapes import Circle, Line, Orientation, Rectangle, Shape, Text

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"
SHAPE_KINDS = ("shape", "circle", "rectangle", "text", "line")
PORT_NAMES = ("left", "right", "top", "bottom", "center")
ADJACENCY_KEYS = ("right_of", "left_of", "above", "below")

Scalar = int | float | str


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        Number.value_of(value)
    except NumberFormatError:
        return False
    return True


@dataclass
class CanvasConfig:
    """
    Canvas size in pixels.

    Attributes:
        width: Canvas width
        height: Canvas height
    """

    width: Scalar = DEFAULT_CANVAS_WIDTH
    height: Scalar = DEFAULT_CANVAS_HEIGHT


@dataclass
class PortRef:
    """
    A point on an earlier shape, used as a line endpoint.

    Attributes:
        shape: Id of the referenced shape
        port: One of left, right, top, bottom, center
    """

    shape: str
    port: str = "center"


@dataclass
class ShapeConfig:
    """
    One shape in a layout.

    Attributes:
        id: Unique identifier, referenced by later shapes
        kind: shape, circle, rectangle, text or line
        right_of / left_of / above / below: Id of the neighbor (at most one)
        gap: Implicit distance to the neighbor
        fill: SVG fill color
        stroke: SVG stroke color
        radius: Circle radius
        aspect_ratio: Rectangle width / height
        width: Rectangle width (with height, instead of aspect_ratio)
        height: Rectangle height
        text: Text content
        start: Line start, a PortRef or an [x, y] point
        end: Line end, a PortRef or an [x, y] point
        orientation: horizontal or vertical, for lines without endpoints
        thickness: Line stroke width
        arrowhead: Arrowhead type name for lines
    """

    id: str
    kind: str
    right_of: str | None = None
    left_of: str | None = None
    above: str | None = None
    below: str | None = None
    gap: Scalar = 0
    fill: str | None = None
    stroke: str | None = None
    radius: Scalar | None = None
    aspect_ratio: Scalar | None = None
    width: Scalar | None = None
    height: Scalar | None = None
    text: str | None = None
    start: PortRef | tuple[Scalar, Scalar] | None = None
    end: PortRef | tuple[Scalar, Scalar] | None = None
    orientation: str | None = None
    thickness: Scalar | None = None
    arrowhead: str | None = None

    def __post_init__(self):
        # Handle endpoints as dicts or lists from YAML
        if isinstance(self.start, dict):
            self.start = PortRef(**self.start)
        elif isinstance(self.start, list):
            self.start = tuple(self.start)
        if isinstance(self.end, dict):
            self.end = PortRef(**self.end)
        elif isinstance(self.end, list):
            self.end = tuple(self.end)

    @property
    def adjacency(self) -> list[tuple[Direction, str]]:
        """Declared (direction, neighbor id) pairs; valid layouts have at most one."""
        return [
            (Direction.from_name(key), getattr(self, key))
            for key in ADJACENCY_KEYS
            if getattr(self, key) is not None
        ]


@dataclass
class LayoutConfig:
    """
    Root of a layout file.

    Attributes:
        version: Schema version (currently "1.0")
        canvas: Canvas size
        shapes: Shapes in build order
    """

    version: str = SCHEMA_VERSION
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    shapes: list[ShapeConfig] = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.canvas, dict):
            self.canvas = CanvasConfig(**self.canvas)
        shapes = []
        for index, s in enumerate(self.shapes):
            if isinstance(s, dict):
                s = ShapeConfig(**s)
            elif not isinstance(s, ShapeConfig):
                raise LayoutConfigError(f"shapes[{index}] must be a mapping, got {s!r}")
            shapes.append(s)
        self.shapes = shapes

    # =========================================================================
    # LOADING AND SAVING
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Any) -> "LayoutConfig":
        """Build a layout from already-parsed YAML data."""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise LayoutConfigError("A layout must be a mapping at the top level")
        if not isinstance(data.get("shapes", []), list):
            raise LayoutConfigError("'shapes' must be a list")
        try:
            return cls(**data)
        except TypeError as e:
            # Unknown or missing keys surface as constructor TypeErrors
            raise LayoutConfigError(f"Invalid layout: {e}") from e

    @classmethod
    def from_string(cls, text: str) -> "LayoutConfig":
        """Parse a layout from YAML text."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise LayoutConfigError(f"Invalid YAML: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "LayoutConfig":
        """Load a layout from a YAML file."""
        with open(yaml_path, encoding="utf-8") as f:
            text = f.read()
        logger.debug("Loading layout from %s", yaml_path)
        return cls.from_string(text)

    def to_yaml(self, yaml_path: str | Path) -> None:
        """Save the layout to a YAML file."""
        data = self._to_dict()
        with open(yaml_path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def _to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary suitable for YAML serialization."""
        return {
            "version": self.version,
            "canvas": {"width": self.canvas.width, "height": self.canvas.height},
            "shapes": [self._shape_to_dict(s) for s in self.shapes],
        }

    def _shape_to_dict(self, shape: ShapeConfig) -> dict[str, Any]:
        """Convert a ShapeConfig to a dictionary, omitting unset fields."""
        result: dict[str, Any] = {"id": shape.id, "kind": shape.kind}
        for key in ADJACENCY_KEYS:
            if getattr(shape, key) is not None:
                result[key] = getattr(shape, key)
        if shape.gap != 0:
            result["gap"] = shape.gap
        for key in ("fill", "stroke", "radius", "aspect_ratio", "width", "height",
                    "text", "orientation", "thickness", "arrowhead"):
            value = getattr(shape, key)
            if value is not None:
                result[key] = value
        for key in ("start", "end"):
            value = getattr(shape, key)
            if isinstance(value, PortRef):
                result[key] = {"shape": value.shape, "port": value.port}
            elif value is not None:
                result[key] = list(value)
        return result

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def validate(self) -> list[str]:
        """
        Check the layout for problems.

        Returns:
            Human readable problems; an empty list means the layout is valid
        """
        problems = []

        if str(self.version) != SCHEMA_VERSION:
            problems.append(f"Unsupported version {self.version!r} (expected {SCHEMA_VERSION!r})")
        for name in ("width", "height"):
            value = getattr(self.canvas, name)
            if not _is_number(value) or Number.value_of(value) < 0:
                problems.append(f"canvas {name} must be a non-negative number, got {value!r}")

        seen: set[str] = set()
        for index, shape in enumerate(self.shapes):
            label = f"shapes[{index}] ({shape.id!r})"
            problems.extend(f"{label}: {p}" for p in self._validate_shape(shape, seen))
            if not isinstance(shape.id, str):
                continue
            if shape.id in seen:
                problems.append(f"{label}: duplicate id")
            seen.add(shape.id)

        return problems

    def _validate_shape(self, shape: ShapeConfig, earlier: set[str]) -> list[str]:
        problems = []

        if not isinstance(shape.id, str) or not shape.id:
            problems.append("id must be a non-empty string")
        if shape.kind not in SHAPE_KINDS:
            problems.append(f"unknown kind {shape.kind!r}, valid kinds: {list(SHAPE_KINDS)}")

        adjacency = shape.adjacency
        if len(adjacency) > 1:
            problems.append(
                f"declares {len(adjacency)} neighbors, a shape can only be next to one"
            )
        for _, neighbor in adjacency:
            if not isinstance(neighbor, str):
                problems.append(f"neighbor must be a shape id, got {neighbor!r}")
            elif neighbor == shape.id:
                problems.append("cannot be adjacent to itself")
            elif neighbor not in earlier:
                problems.append(f"neighbor {neighbor!r} must be defined earlier in the file")
        if not _is_number(shape.gap) or Number.value_of(shape.gap) < 0:
            problems.append(f"gap must be a non-negative number, got {shape.gap!r}")

        for key in ("radius", "aspect_ratio", "width", "height", "thickness"):
            value = getattr(shape, key)
            if value is None:
                continue
            if not _is_number(value) or Number.value_of(value) <= 0:
                problems.append(f"{key} must be a positive number, got {value!r}")

        if shape.kind == "rectangle":
            if (shape.width is None) != (shape.height is None):
                problems.append("rectangle needs both width and height, or neither")
            if shape.width is not None and shape.aspect_ratio is not None:
                problems.append("rectangle takes aspect_ratio or width/height, not both")

        if shape.kind == "line":
            problems.extend(self._validate_line(shape, earlier))
        elif any(getattr(shape, key) is not None
                 for key in ("start", "end", "orientation", "arrowhead")):
            problems.append("start, end, orientation and arrowhead only apply to lines")

        return problems

    def _validate_line(self, shape: ShapeConfig, earlier: set[str]) -> list[str]:
        problems = []
        if (shape.start is None) != (shape.end is None):
            problems.append("line needs both start and end, or neither")
        for key in ("start", "end"):
            value = getattr(shape, key)
            if isinstance(value, PortRef):
                if not isinstance(value.shape, str) or value.shape not in earlier:
                    problems.append(f"{key} refers to {value.shape!r}, which must be defined earlier")
                if value.port not in PORT_NAMES:
                    problems.append(f"{key} port {value.port!r} is not one of {list(PORT_NAMES)}")
            elif value is not None:
                if not isinstance(value, tuple) or len(value) != 2 or not all(_is_number(v) for v in value):
                    problems.append(f"{key} must be a port reference or an [x, y] point")
        if shape.orientation is not None and str(shape.orientation).lower() not in ("horizontal", "vertical"):
            problems.append(f"orientation must be horizontal or vertical, got {shape.orientation!r}")
        if shape.arrowhead is not None and str(shape.arrowhead).upper().replace("-", "_") not in ArrowheadType.__members__:
            problems.append(
                f"unknown arrowhead {shape.arrowhead!r}, valid types: {list(ArrowheadType.__members__)}"
            )
        return problems

    # =========================================================================
    # BUILDING
    # =========================================================================

    def build(self) -> Drawing:
        """
        Create the shapes, apply adjacency in file order, and fit the canvas.

        Raises:
            LayoutConfigError: If :meth:`validate` reports any problem
        """
        problems = self.validate()
        if problems:
            raise LayoutConfigError("Invalid layout:\n  " + "\n  ".join(problems))

        drawing = Drawing()
        built: dict[str, Shape] = {}
        for config in self.shapes:
            shape = self._build_shape(config, built)
            for direction, neighbor in config.adjacency:
                shape.set_adjacent(direction, built[neighbor], config.gap)
            built[config.id] = shape
            drawing.add(shape)

        logger.debug("Built %d shapes", len(drawing))
        if drawing.length:
            drawing.set_explicit_dimensions(self.canvas.width, self.canvas.height)
        return drawing

    def _build_shape(self, config: ShapeConfig, built: dict[str, Shape]) -> Shape:
        style = {"fill": config.fill, "stroke": config.stroke}

        if config.kind == "circle":
            if config.radius is not None:
                return Circle(config.radius, **style)
            return Circle(**style)

        if config.kind == "rectangle":
            if config.width is not None:
                return Rectangle.of_size(config.width, config.height, **style)
            if config.aspect_ratio is not None:
                return Rectangle(config.aspect_ratio, **style)
            return Rectangle(**style)

        if config.kind == "text":
            return Text(config.text or "", **style)

        if config.kind == "line":
            if config.stroke is None:
                del style["stroke"]
            start = self._resolve_point(config.start, built)
            end = self._resolve_point(config.end, built)
            line = Line(
                start,
                end,
                orientation=Orientation(config.orientation.lower()) if config.orientation else Orientation.HORIZONTAL,
                thickness=config.thickness,
                **style,
            )
            if config.arrowhead is not None:
                line.add_arrowhead(Arrowhead(ArrowheadType.from_name(config.arrowhead)))
            return line

        return Shape(**style)

    @staticmethod
    def _resolve_point(value: PortRef | tuple | None, built: dict[str, Shape]) -> Point | None:
        if value is None:
            return None
        if isinstance(value, PortRef):
            return built[value.shape].port(value.port)
        return Point(value[0], value[1])
