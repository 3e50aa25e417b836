"""
Core rendering components for SVG markup output.
"""

from svg_markup.core.renderer import RenderError, SVGRenderer

__all__ = [
    "RenderError",
    "SVGRenderer",
]
