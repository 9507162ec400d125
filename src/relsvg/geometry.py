"""
Small geometric value types shared by shapes and drawings.

Implicit coordinates are unit based, origin centered and y-up. Explicit
coordinates are SVG pixels: non-negative and y-down.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .number import Number

if TYPE_CHECKING:
    from .shapes.shape import Shape


class Direction(Enum):
    """
    Where a shape sits relative to its neighbor.

    Each member keeps the angle tag (degrees, 0 = up, 90 = right) the
    direction is encoded with in saved layouts.
    """

    ABOVE = 0
    LEFT_OF = 90
    BELOW = 180
    RIGHT_OF = 270

    @property
    def angle(self) -> int:
        return self.value

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT_OF, Direction.RIGHT_OF)

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Look up a direction by name, accepting ``right_of`` or ``right-of`` spellings."""
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(
                f"Unknown direction: {name}. Valid names: {[d.name.lower() for d in cls]}"
            ) from None


@dataclass(frozen=True)
class Point:
    """A position in implicit coordinates."""

    x: Number
    y: Number

    def __post_init__(self) -> None:
        # Accept ints, floats and strings from callers and YAML
        object.__setattr__(self, "x", Number.value_of(self.x))
        object.__setattr__(self, "y", Number.value_of(self.y))

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


@dataclass(frozen=True)
class Adjacency:
    """
    A directed relation from one shape to a single neighbor.

    The neighbor is held through a weak reference: a shape never keeps its
    neighbor alive, ownership belongs to the drawing that contains both.

    Attributes:
        direction: Where the declaring shape sits relative to the neighbor
    """

    direction: Direction
    _target: weakref.ref = field(repr=False, compare=False)

    @classmethod
    def to(cls, direction: Direction, target: "Shape") -> "Adjacency":
        return cls(direction=direction, _target=weakref.ref(target))

    @property
    def target(self) -> "Shape | None":
        """The neighbor, or None if it no longer exists."""
        return self._target()
