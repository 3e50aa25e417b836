"""
SVG rasterization utilities to convert rendered markup to PNG images.
"""
import logging
from pathlib import Path
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when markup cannot be rasterized."""
    pass


class SVGRenderer:
    """
    Renders SVG code to PNG bytes with cairosvg.
    """

    def __init__(self, default_size: Tuple[int, int] = (300, 300)):
        """
        Initialize the SVG renderer.

        Args:
            default_size: Default size (width, height) for rendered images
        """
        self.default_size = tuple(default_size)
        self._cairosvg = None

    def _get_cairosvg(self):
        """Import cairosvg on first use."""
        if self._cairosvg is None:
            try:
                import cairosvg
            except ImportError as e:
                raise RenderError(
                    "PNG output requires cairosvg; install with `pip install svg_markup[png]`"
                ) from e
            self._cairosvg = cairosvg
        return self._cairosvg

    def render_png(self, svg_code: str, size: Optional[Tuple[int, int]] = None) -> bytes:
        """
        Convert SVG code to PNG data.

        Args:
            svg_code: SVG code as a string
            size: Optional (width, height) tuple for rendered image

        Returns:
            PNG image bytes

        Raises:
            RenderError: If cairosvg is missing or rejects the markup
        """
        cairosvg = self._get_cairosvg()
        width, height = size or self.default_size
        try:
            return cairosvg.svg2png(
                bytestring=svg_code.encode('utf-8'),
                output_width=width,
                output_height=height
            )
        except Exception as e:
            logger.debug(f"Problematic SVG code: {svg_code[:100]}...")
            raise RenderError(f"Error rendering SVG: {e}") from e

    def render_png_file(
        self,
        svg_code: str,
        output_path: Union[str, Path],
        size: Optional[Tuple[int, int]] = None
    ) -> Path:
        """
        Render SVG code and save the PNG image.

        Args:
            svg_code: SVG code as a string
            output_path: Path to save the rendered image
            size: Optional (width, height) tuple for rendered image

        Returns:
            Path of the written image
        """
        png_data = self.render_png(svg_code, size)

        output_path = Path(output_path)
        output_path.parent.mkdir(exist_ok=True, parents=True)
        output_path.write_bytes(png_data)
        return output_path
