"""
Exception types raised by relsvg.

Every error is a usage or contract violation rather than a transient
condition, so nothing here is meant to be retried. Each class also derives
from the closest built-in exception so callers can catch either.
"""


class RelsvgError(Exception):
    """Base class for all relsvg errors."""


class AdjacencyError(RelsvgError, ValueError):
    """A shape was made adjacent to itself."""


class LayoutNotSetError(RelsvgError, RuntimeError):
    """Explicit geometry was requested before the drawing was fitted."""


class LayoutInvariantError(RelsvgError, ArithmeticError):
    """The fit computation hit an impossible state (zero-size content, negative position)."""


class DivisionByZeroError(RelsvgError, ZeroDivisionError):
    """A Number was divided by zero."""


class NumberFormatError(RelsvgError, ValueError):
    """A value could not be converted to a Number."""


class ShapeOwnershipError(RelsvgError, ValueError):
    """A shape was added to a second drawing."""


class LayoutConfigError(RelsvgError, ValueError):
    """A YAML layout file is malformed or inconsistent."""
