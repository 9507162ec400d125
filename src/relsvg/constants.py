"""
relsvg constants.

Numeric precision defaults, SVG boilerplate, and styling defaults.
"""

# =============================================================================
# NUMERIC PRECISION
# =============================================================================

# Significant digits kept by derived values (division, multiplication)
OPERATIONS_PRECISION = 64

# Fractional digits both operands are rounded to before a fuzzy comparison
COMPARISON_PLACES = 32

# Fractional digits written to SVG attributes (SVG user units never need more)
SVG_DECIMAL_PLACES = 6


# =============================================================================
# SVG OUTPUT
# =============================================================================

XML_DECLARATION = '<?xml version="1.0" standalone="no"?>'
SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Lines are visible by default
DEFAULT_LINE_STROKE = "black"
DEFAULT_ARROWHEAD_FILL = "black"


# =============================================================================
# IMPLICIT GEOMETRY
# =============================================================================

# A default shape occupies one implicit unit in each direction
DEFAULT_IMPLICIT_SIZE = 1
DEFAULT_CIRCLE_RADIUS = "0.5"


# =============================================================================
# COMMAND LINE
# =============================================================================

DEFAULT_CANVAS_WIDTH = 400
DEFAULT_CANVAS_HEIGHT = 400
