"""
Tests for SVG emitted by each shape type and by arrowhead markers.

Each shape is placed alone (or with neighbors) in a small drawing so the
explicit geometry is easy to check by hand.
"""

import pytest

from relsvg import (
    Arrowhead,
    ArrowheadType,
    Circle,
    Drawing,
    Line,
    Orientation,
    Point,
    Rectangle,
    Text,
)


def fit(*shapes, width=100, height=100) -> Drawing:
    """Add shapes to a drawing and fit it."""
    drawing = Drawing()
    for shape in shapes:
        drawing.add(shape)
    drawing.set_explicit_dimensions(width, height)
    return drawing


# =============================================================================
# CIRCLE
# =============================================================================


class TestCircleSvg:
    """Test <circle> output."""

    def test_plain(self):
        circle = Circle()
        fit(circle)
        assert circle.get_svg() == '<circle r="50" cx="50" cy="50" />'
        assert circle.explicit_radius == 50

    def test_fill_and_stroke(self):
        circle = Circle(fill="red", stroke="black")
        fit(circle)
        assert circle.get_svg() == '<circle r="50" cx="50" cy="50" fill="red" stroke="black" />'

    def test_attribute_values_are_escaped(self):
        circle = Circle(fill='url("#g")')
        fit(circle)
        assert 'fill="url(&quot;#g&quot;)"' in circle.get_svg()


# =============================================================================
# RECTANGLE
# =============================================================================


class TestRectangleSvg:
    """Test <rect> output, positioned by its top-left corner."""

    def test_two_squares(self):
        r1, r2 = Rectangle(), Rectangle()
        r2.set_right_of(r1)
        fit(r1, r2)
        assert r1.get_svg() == '<rect width="50" height="50" x="0" y="25" />'
        assert r2.get_svg() == '<rect width="50" height="50" x="50" y="25" />'

    def test_wide_rectangle(self):
        rect = Rectangle(2, fill="#eee")
        fit(rect)
        assert rect.get_svg() == '<rect width="100" height="50" x="0" y="25" fill="#eee" />'

    def test_of_size_requires_positive_size(self):
        with pytest.raises(ValueError):
            Rectangle.of_size(0, 1)


# =============================================================================
# TEXT
# =============================================================================


class TestTextSvg:
    """Test <text> output."""

    def test_centered(self):
        text = Text("hello")
        fit(text)
        assert text.get_svg() == (
            '<text x="50" y="50" dominant-baseline="middle" text-anchor="middle">hello</text>'
        )

    def test_stroke_before_fill(self):
        text = Text("hi", fill="blue", stroke="white")
        fit(text)
        assert 'text-anchor="middle" stroke="white" fill="blue">hi</text>' in text.get_svg()

    def test_escapes_markup(self):
        text = Text("a < b & c")
        fit(text)
        assert ">a &lt; b &amp; c</text>" in text.get_svg()

    def test_empty_text_renders_nothing(self):
        text = Text()
        fit(text)
        assert text.get_svg() == ""

    def test_label_below_circle(self):
        circle = Circle()
        label = Text("c")
        label.set_below(circle)
        fit(circle, label, width=50, height=100)
        assert circle.get_svg() == '<circle r="25" cx="25" cy="25" />'
        assert label.get_svg().startswith('<text x="25" y="75"')


# =============================================================================
# LINE
# =============================================================================


class TestLineGeometry:
    """Test the implicit box of lines."""

    def test_box_from_points(self):
        line = Line(Point(1, 3), Point(4, 1))
        assert line.implicit_width == 3
        assert line.implicit_height == 2
        assert line.implicit_x == 2.5
        assert line.implicit_y == 2

    def test_implicit_endpoints_preserved(self):
        line = Line(Point(1, 3), Point(4, 1))
        assert line.implicit_start == Point(1, 3)
        assert line.implicit_end == Point(4, 1)

    def test_endpoints_follow_adjacency(self):
        anchor = Circle()
        line = Line(Point(0, 0), Point(2, 0))
        line.set_right_of(anchor)
        assert line.implicit_start == Point("0.5", 0)
        assert line.implicit_end == Point("2.5", 0)

    def test_orientation_line_is_unit_box(self):
        line = Line(orientation=Orientation.VERTICAL)
        assert line.implicit_width == 1
        assert line.implicit_height == 1

    def test_orientation_from_string(self):
        assert Line(orientation="vertical").orientation is Orientation.VERTICAL

    def test_needs_both_points(self):
        with pytest.raises(ValueError):
            Line(Point(0, 0))


class TestLineSvg:
    """Test <line> output."""

    def test_horizontal_default(self):
        line = Line()
        fit(line)
        assert line.get_svg() == '<line x1="0" y1="50" x2="100" y2="50" stroke="black" />'

    def test_vertical_runs_bottom_to_top(self):
        line = Line(orientation=Orientation.VERTICAL)
        fit(line)
        assert line.get_svg() == '<line x1="50" y1="100" x2="50" y2="0" stroke="black" />'

    def test_point_order_is_kept(self):
        line = Line(Point(1, 1), Point(0, 0))
        fit(line)
        assert line.get_svg() == '<line x1="100" y1="0" x2="0" y2="100" stroke="black" />'
        assert line.explicit_start == Point(100, 0)
        assert line.explicit_end == Point(0, 100)

    def test_rising_line(self):
        line = Line(Point(0, 0), Point(1, 1))
        fit(line)
        assert line.get_svg() == '<line x1="0" y1="100" x2="100" y2="0" stroke="black" />'

    def test_connects_two_circles(self):
        a, b = Circle(), Circle()
        b.set_right_of(a, gap=1)
        line = Line(a.right_port, b.left_port)
        fit(a, b, line, width=300, height=100)
        assert line.get_svg() == '<line x1="100" y1="50" x2="200" y2="50" stroke="black" />'

    def test_stroke_and_thickness(self):
        line = Line(stroke="red", thickness="2.5")
        fit(line)
        assert line.get_svg() == (
            '<line x1="0" y1="50" x2="100" y2="50" stroke="red" stroke-width="2.5" />'
        )

    def test_arrowhead(self):
        line = Line()
        line.add_arrowhead()
        fit(line)
        assert line.markers() == [line.arrowhead]
        assert line.get_svg() == (
            '<line x1="0" y1="50" x2="100" y2="50" stroke="black" marker-end="url(#TRIANGLE)" />'
        )


# =============================================================================
# ARROWHEADS
# =============================================================================


class TestArrowhead:
    """Test arrowhead types and marker definitions."""

    @pytest.mark.parametrize(
        "alias,canonical",
        [
            (ArrowheadType.DEFAULT, ArrowheadType.TRIANGLE),
            (ArrowheadType.NORMAL, ArrowheadType.TRIANGLE),
            (ArrowheadType.SQUARE, ArrowheadType.BOX),
            (ArrowheadType.TURNED_SQUARE, ArrowheadType.DIAMOND),
            (ArrowheadType.DISK, ArrowheadType.DOT),
        ],
    )
    def test_aliases(self, alias, canonical):
        assert alias is canonical

    def test_from_name(self):
        assert Arrowhead("turned-square").type is ArrowheadType.DIAMOND

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown arrowhead type"):
            ArrowheadType.from_name("crow")

    def test_box_marker(self):
        assert Arrowhead(ArrowheadType.BOX).svg_def() == (
            '<defs><marker id="BOX" orient="auto" viewBox="0 0 4 4" markerWidth="4" '
            'markerHeight="4" refX="2" refY="2"><path d="M0,0 L0,4 L4,4 L4,0 z" fill="black" />'
            "</marker></defs>"
        )

    @pytest.mark.parametrize(
        "arrowhead_type,element",
        [
            (ArrowheadType.TRIANGLE, "<path"),
            (ArrowheadType.DIAMOND, "<path"),
            (ArrowheadType.DOT, "<circle"),
        ],
    )
    def test_marker_bodies(self, arrowhead_type, element):
        svg = Arrowhead(arrowhead_type, fill="red").svg_def()
        assert svg.startswith(f'<defs><marker id="{arrowhead_type.value}_red"')
        assert element in svg
        assert 'fill="red"' in svg
        assert svg.endswith("</marker></defs>")

    def test_url(self):
        assert Arrowhead(ArrowheadType.DOT).url == "url(#DOT)"

    def test_fill_is_part_of_marker_id(self):
        assert Arrowhead(fill="black").marker_id == "TRIANGLE"
        assert Arrowhead(fill="#f00").marker_id == "TRIANGLE__f00"
        assert Arrowhead(fill="#f00").url == "url(#TRIANGLE__f00)"

    def test_svg_marker_has_no_defs_wrapper(self):
        marker = Arrowhead(ArrowheadType.BOX).svg_marker()
        assert marker.startswith('<marker id="BOX"')
        assert marker.endswith("</marker>")
