"""
Document model for SVG markup generation.
An append-only, ordered collection of figures wrapped in the SVG envelope.
"""

import copy
import io
from typing import Iterable, Iterator, List, TextIO

from svg_markup.models.shape import Figure
from svg_markup.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Markup envelope, reproduced byte for byte
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
SVG_VERSION = "1.1"
SVG_OPEN_TAG = f'<svg xmlns="{SVG_NAMESPACE}" version="{SVG_VERSION}">'
SVG_CLOSE_TAG = "</svg>"


class Document:
    """
    Ordered collection of figures rendered as one SVG document.

    The document owns its figures: ``add`` stores a deep copy, so later
    changes to the caller's figure do not leak into the output. Figures
    cannot be removed or replaced once added.
    """

    def __init__(self, figures: Iterable[Figure] = ()):
        """
        Initialize a document.

        Args:
            figures: Optional initial figures, added in order
        """
        self._figures: List[Figure] = []
        self.add_figures(figures)

    def add(self, figure: Figure) -> 'Document':
        """
        Take ownership of a figure and append it.

        Args:
            figure: Circle, Polyline, Text or any other Figure

        Returns:
            Self for method chaining

        Raises:
            TypeError: If the value is not a Figure
        """
        if not isinstance(figure, Figure):
            raise TypeError(f"Expected a Figure, got {type(figure).__name__}")

        self._figures.append(copy.deepcopy(figure))
        logger.debug(f"Added {type(figure).__name__} ({len(self._figures)} figures)")
        return self

    def add_figures(self, figures: Iterable[Figure]) -> 'Document':
        """Add several figures in iteration order."""
        for figure in figures:
            self.add(figure)
        return self

    def get_figures(self) -> List[Figure]:
        """
        Get all figures in insertion order.

        Returns:
            Deep copies of the owned figures
        """
        return copy.deepcopy(self._figures)

    def render(self, stream: TextIO) -> None:
        """
        Write the complete document to a text stream.

        Writes the XML declaration and the opening ``svg`` tag, every figure
        in insertion order, then the closing tag. Nothing separates the
        pieces. Errors raised by the stream propagate unchanged.

        Args:
            stream: Writable text stream
        """
        logger.debug(f"Rendering document with {len(self._figures)} figures")
        stream.write(XML_DECLARATION)
        stream.write(SVG_OPEN_TAG)
        for figure in self._figures:
            figure.render(stream)
        stream.write(SVG_CLOSE_TAG)

    def to_svg_string(self) -> str:
        """Render the document into a string."""
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def __len__(self) -> int:
        return len(self._figures)

    def __iter__(self) -> Iterator[Figure]:
        return iter(self.get_figures())

    def __repr__(self) -> str:
        return f"Document({len(self._figures)} figures)"
