"""
SVG Markup - Data Models
========================
This package contains the color, point, figure and document models.
"""

from svg_markup.models.color import ColorError, Color, Rgb, as_color
from svg_markup.models.point import Point, as_point
from svg_markup.models.shape import (
    FigureAttributes, Figure, Circle, Polyline, Text, format_number
    )
from svg_markup.models.document import (
    Document, XML_DECLARATION, SVG_OPEN_TAG, SVG_CLOSE_TAG
    )

__all__ = [
    'ColorError', 'Color', 'Rgb', 'as_color',
    'Point', 'as_point',
    'FigureAttributes', 'Figure', 'Circle', 'Polyline', 'Text',
    'format_number',
    'Document', 'XML_DECLARATION', 'SVG_OPEN_TAG', 'SVG_CLOSE_TAG'
]
