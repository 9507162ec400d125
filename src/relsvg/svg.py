"""
SVG text helpers.

Output is assembled from f-strings rather than an XML tree so that the
attribute order, and therefore the document text, is stable.
"""

from __future__ import annotations

import html

from .constants import SVG_NAMESPACE, XML_DECLARATION


def svg_attribute(name: str, value: object) -> str:
    """Render ``name="value"`` with the value escaped for a double-quoted attribute."""
    return f'{name}="{html.escape(str(value))}"'


def svg_text(text: str) -> str:
    """Escape character data for an element body."""
    return html.escape(text, quote=False)


def svg_document(width: str, height: str, body: str) -> str:
    """Wrap ``body`` in the XML declaration and the root ``<svg>`` element."""
    return (
        f'{XML_DECLARATION}<svg xmlns="{SVG_NAMESPACE}"'
        f' {svg_attribute("width", width)} {svg_attribute("height", height)}>'
        f"{body}</svg>"
    )
