"""
SVG Generator Module
=================
This module writes rendered documents to files.
"""

import os
import logging
from typing import Optional, Tuple

from svg_markup.core.renderer import SVGRenderer
from svg_markup.models.document import Document

logger = logging.getLogger(__name__)


def _ensure_parent_dir(filepath: str) -> None:
    parent = os.path.dirname(filepath)
    if parent:
        os.makedirs(parent, exist_ok=True)


class SVGGenerator:
    """Class for saving documents as SVG and PNG files."""

    def __init__(self, output_dir: str = "output", renderer: Optional[SVGRenderer] = None):
        """
        Initialize the generator.

        Args:
            output_dir: Directory used by ``save_svg`` and ``save_png``,
                created on first save
            renderer: Rasterizer used for PNG output
        """
        self.output_dir = output_dir
        self.renderer = renderer or SVGRenderer()

    def generate_svg(self, document: Document) -> str:
        """
        Generate SVG code from a document.

        Args:
            document: Document containing the figures

        Returns:
            String containing the SVG code
        """
        logger.debug(f"Generating SVG for {document!r}")
        return document.to_svg_string()

    def write_svg(self, document: Document, filepath: str) -> str:
        """
        Render a document into the given file.

        Args:
            document: Document containing the figures
            filepath: Destination path, parent directories are created

        Returns:
            The destination path
        """
        _ensure_parent_dir(filepath)

        # Stream straight into the file
        with open(filepath, "w", encoding="utf-8") as f:
            document.render(f)

        logger.info(f"SVG saved to {filepath}")

        return filepath

    def write_png(
        self,
        document: Document,
        filepath: str,
        size: Optional[Tuple[int, int]] = None
    ) -> str:
        """
        Rasterize a document into the given file.

        Args:
            document: Document containing the figures
            filepath: Destination path, parent directories are created
            size: Optional (width, height) of the image

        Returns:
            The destination path
        """
        self.renderer.render_png_file(self.generate_svg(document), filepath, size)

        logger.info(f"PNG saved to {filepath}")

        return filepath

    def save_svg(self, document: Document, name: str) -> str:
        """
        Render a document and save it to ``{output_dir}/{name}.svg``.

        Args:
            document: Document containing the figures
            name: File name without extension

        Returns:
            Path to the saved SVG file
        """
        return self.write_svg(document, os.path.join(self.output_dir, f"{name}.svg"))

    def save_png(
        self,
        document: Document,
        name: str,
        size: Optional[Tuple[int, int]] = None
    ) -> str:
        """
        Rasterize a document and save it to ``{output_dir}/{name}.png``.

        Args:
            document: Document containing the figures
            name: File name without extension
            size: Optional (width, height) of the image

        Returns:
            Path to the saved PNG file
        """
        return self.write_png(document, os.path.join(self.output_dir, f"{name}.png"), size)
