"""
Tests for shape geometry and adjacency.

Tests cover:
- Default implicit geometry
- Adjacency setters and queries
- Implicit extents and ports
- Explicit accessors before layout
"""

import gc

import pytest

from relsvg import Circle, Direction, Point, Rectangle, Shape, Text
from relsvg.errors import AdjacencyError, LayoutNotSetError


# =============================================================================
# GEOMETRY VALUE TYPES
# =============================================================================


class TestDirection:
    """Test the Direction enum."""

    @pytest.mark.parametrize(
        "direction,angle",
        [
            (Direction.ABOVE, 0),
            (Direction.LEFT_OF, 90),
            (Direction.BELOW, 180),
            (Direction.RIGHT_OF, 270),
        ],
    )
    def test_angle_tags(self, direction, angle):
        assert direction.angle == angle

    @pytest.mark.parametrize("name", ["right_of", "right-of", "RIGHT_OF", " right-of "])
    def test_from_name(self, name):
        assert Direction.from_name(name) is Direction.RIGHT_OF

    def test_from_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown direction"):
            Direction.from_name("behind")

    def test_is_horizontal(self):
        assert Direction.LEFT_OF.is_horizontal
        assert not Direction.ABOVE.is_horizontal


class TestPoint:
    """Test the Point dataclass."""

    def test_coerces_coordinates(self):
        p = Point(1, "0.5")
        assert p.x == 1
        assert p.y == 0.5

    def test_equality_by_value(self):
        assert Point(1, 2) == Point("1.0", 2.0)


# =============================================================================
# DEFAULTS
# =============================================================================


class TestShapeDefaults:
    """Test default shape state."""

    def test_default_implicit_geometry(self):
        shape = Shape()
        assert shape.implicit_width == 1
        assert shape.implicit_height == 1
        assert shape.implicit_x == 0
        assert shape.implicit_y == 0

    def test_explicit_size_unset(self):
        shape = Shape()
        assert shape.explicit_width is None
        assert shape.explicit_height is None
        assert not shape.has_explicit_size()

    def test_unpositioned(self):
        shape = Shape()
        assert shape.adjacency is None
        assert shape.drawing is None

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            Shape(implicit_width=-1)

    def test_circle_size(self):
        circle = Circle(2)
        assert circle.implicit_width == 4
        assert circle.implicit_height == 4
        assert circle.implicit_radius == 2
        assert circle.explicit_radius is None

    @pytest.mark.parametrize("radius", [0, -1])
    def test_circle_radius_must_be_positive(self, radius):
        with pytest.raises(ValueError):
            Circle(radius)

    def test_rectangle_aspect_ratio(self):
        rect = Rectangle(2)
        assert rect.implicit_width == 2
        assert rect.implicit_height == 1
        assert rect.aspect_ratio == 2

    def test_rectangle_of_size(self):
        rect = Rectangle.of_size(3, 2)
        assert rect.implicit_width == 3
        assert rect.implicit_height == 2
        assert rect.aspect_ratio == 1.5

    def test_text_is_unit_box(self):
        text = Text("a long label")
        assert text.implicit_width == 1
        assert text.implicit_height == 1


# =============================================================================
# ADJACENCY
# =============================================================================


class TestAdjacency:
    """Test set_right_of() and friends."""

    def test_right_of(self):
        c1, c2 = Circle(), Circle()
        c2.set_right_of(c1)
        assert c2.implicit_x == 1
        assert c2.implicit_y == 0

    def test_left_of(self):
        c1, c2 = Circle(), Circle()
        c2.set_left_of(c1)
        assert c2.implicit_x == -1

    def test_above_is_positive_y(self):
        c1, c2 = Circle(), Circle()
        c2.set_above(c1)
        assert c2.implicit_y == 1
        assert c2.implicit_x == 0

    def test_below(self):
        c1, c2 = Circle(), Circle()
        c2.set_below(c1)
        assert c2.implicit_y == -1

    def test_uses_both_half_sizes(self):
        rect = Rectangle(2)
        circle = Circle()
        circle.set_right_of(rect)
        assert circle.implicit_x == 1.5

    def test_gap(self):
        c1, c2 = Circle(), Circle()
        c2.set_right_of(c1, gap="0.5")
        assert c2.implicit_x == 1.5

    def test_negative_gap_rejected(self):
        c1, c2 = Circle(), Circle()
        with pytest.raises(ValueError, match="Gap cannot be negative"):
            c2.set_right_of(c1, gap=-1)

    def test_cross_axis_is_unchanged(self):
        c1, c2 = Circle(), Circle()
        c1.implicit_y = 3
        c2.set_right_of(c1)
        assert c2.implicit_y == 0

    def test_mixed_directions_keep_cross_axis(self):
        a, b, c = Circle(), Circle(), Circle()
        b.set_right_of(a)
        c.set_above(b)
        assert c.implicit_x == 0
        assert c.implicit_y == 1

    def test_chain(self):
        c1, c2, c3 = Circle(), Circle(), Circle()
        c2.set_right_of(c1)
        c3.set_right_of(c2)
        assert c3.implicit_x == 2

    def test_resolved_at_assignment(self):
        """Moving the neighbor later does not move the shape again."""
        c1, c2 = Circle(), Circle()
        c2.set_right_of(c1)
        c1.implicit_x = 10
        assert c2.implicit_x == 1

    @pytest.mark.parametrize("setter", ["set_right_of", "set_left_of", "set_above", "set_below"])
    def test_self_adjacency_rejected(self, setter):
        circle = Circle()
        with pytest.raises(AdjacencyError, match="cannot be adjacent to itself"):
            getattr(circle, setter)(circle)

    def test_self_adjacency_rejected_after_layout(self):
        c1, c2 = Circle(), Circle()
        c2.set_right_of(c1)
        with pytest.raises(AdjacencyError):
            c2.set_above(c2)

    def test_self_adjacency_is_value_error(self):
        shape = Shape()
        with pytest.raises(ValueError):
            shape.set_below(shape)

    def test_set_adjacent_dispatch(self):
        c1, c2 = Circle(), Circle()
        c2.set_adjacent(Direction.BELOW, c1)
        assert c2.get_below() is c1
        assert c2.implicit_y == -1


class TestAdjacencyQueries:
    """Test get_right_of() and friends."""

    def test_query_matches_direction(self):
        c1, c2 = Circle(), Circle()
        c2.set_right_of(c1)
        assert c2.get_right_of() is c1
        assert c2.get_left_of() is None
        assert c2.get_above() is None
        assert c2.get_below() is None

    def test_relation_is_one_sided(self):
        c1, c2 = Circle(), Circle()
        c2.set_right_of(c1)
        assert c1.get_left_of() is None
        assert c1.adjacency is None

    def test_latest_relation_wins(self):
        c1, c2, c3 = Circle(), Circle(), Circle()
        c3.set_right_of(c1)
        c3.set_above(c2)
        assert c3.get_right_of() is None
        assert c3.get_above() is c2
        assert c3.adjacency.direction is Direction.ABOVE

    def test_adjacency_does_not_keep_neighbor_alive(self):
        c1, c2 = Circle(), Circle()
        c2.set_right_of(c1)
        del c1
        gc.collect()
        assert c2.adjacency.target is None
        assert c2.get_right_of() is None


# =============================================================================
# EXTENTS AND PORTS
# =============================================================================


class TestExtentsAndPorts:
    """Test implicit extents and edge ports."""

    def test_extents(self):
        rect = Rectangle.of_size(4, 2)
        rect.implicit_x = 1
        rect.implicit_y = 1
        assert rect.implicit_x_minimum == -1
        assert rect.implicit_x_maximum == 3
        assert rect.implicit_y_minimum == 0
        assert rect.implicit_y_maximum == 2

    def test_ports(self):
        circle = Circle()
        assert circle.center == Point(0, 0)
        assert circle.left_port == Point("-0.5", 0)
        assert circle.right_port == Point("0.5", 0)
        assert circle.top_port == Point(0, "0.5")
        assert circle.bottom_port == Point(0, "-0.5")

    def test_port_by_name(self):
        circle = Circle()
        assert circle.port("right") == circle.right_port

    def test_unknown_port(self):
        with pytest.raises(ValueError, match="Unknown port"):
            Circle().port("northwest")


# =============================================================================
# EXPLICIT GEOMETRY BEFORE LAYOUT
# =============================================================================


class TestExplicitBeforeLayout:
    """Explicit edges and SVG require a fitted drawing."""

    @pytest.mark.parametrize(
        "attribute",
        ["explicit_left", "explicit_right", "explicit_top", "explicit_bottom", "explicit_half_width"],
    )
    def test_edges_raise(self, attribute):
        with pytest.raises(LayoutNotSetError):
            getattr(Circle(), attribute)

    @pytest.mark.parametrize("shape_type", [Shape, Circle, Rectangle, Text])
    def test_get_svg_raises(self, shape_type):
        with pytest.raises(LayoutNotSetError):
            shape_type().get_svg()

    def test_layout_not_set_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            Shape().get_svg()

    def test_explicit_setters(self):
        shape = Shape()
        shape.set_explicit_width(10)
        shape.set_explicit_height(20)
        shape.set_explicit_x(5)
        shape.set_explicit_y(10)
        assert shape.explicit_left == 0
        assert shape.explicit_right == 10
        assert shape.explicit_top == 0
        assert shape.explicit_bottom == 20
