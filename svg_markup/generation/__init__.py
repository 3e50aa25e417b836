"""
SVG Markup - Generation Package
===============================
This package writes documents to SVG and PNG files.
"""

from svg_markup.generation.svg_generator import SVGGenerator

__all__ = ['SVGGenerator']
