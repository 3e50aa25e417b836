"""
SVG Markup Package
==================
This package builds SVG documents from circles, polylines and text labels
and renders them as markup text.
"""

__version__ = "0.1.0"

from svg_markup.models import (
    Color, Rgb, Point, FigureAttributes, Figure,
    Circle, Polyline, Text, Document
)

__all__ = [
    'Color',
    'Rgb',
    'Point',
    'FigureAttributes',
    'Figure',
    'Circle',
    'Polyline',
    'Text',
    'Document',
]
