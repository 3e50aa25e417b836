"""
Figure models for SVG markup generation.
Provides the shared styling attributes, the chainable configuration API,
and the circle, polyline and text elements that serialize themselves
into a text stream.
"""

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, TextIO, Tuple

from typing_extensions import Self

from svg_markup.models.color import Color, ColorValue, as_color
from svg_markup.models.point import Point, PointLike, as_point

# Type definitions
Attribute = Tuple[str, str]

# Constants
DEFAULT_STROKE_WIDTH = 1.0
DEFAULT_FONT_SIZE = 1
NUMBER_FORMAT = "g"  # Six significant digits, trailing zeros dropped


def format_number(value: float) -> str:
    """Format a floating point coordinate or length."""
    return format(float(value), NUMBER_FORMAT)


def write_attributes(stream: TextIO, attributes: Iterable[Attribute]) -> None:
    """Write ``name="value" `` pairs. Values are written unescaped."""
    for name, value in attributes:
        stream.write(f'{name}="{value}" ')


@dataclass
class FigureAttributes:
    """Styling state carried by every figure."""
    fill_color: Color = field(default_factory=Color)
    stroke_color: Color = field(default_factory=Color)
    stroke_width: float = DEFAULT_STROKE_WIDTH
    stroke_line_cap: Optional[str] = None
    stroke_line_join: Optional[str] = None

    def paint_items(self) -> List[Attribute]:
        return [("fill", str(self.fill_color)), ("stroke", str(self.stroke_color))]

    def stroke_width_items(self) -> List[Attribute]:
        return [("stroke-width", format_number(self.stroke_width))]

    def line_style_items(self) -> List[Attribute]:
        """Line cap and join, each only when set."""
        items = []
        if self.stroke_line_cap is not None:
            items.append(("stroke-linecap", self.stroke_line_cap))
        if self.stroke_line_join is not None:
            items.append(("stroke-linejoin", self.stroke_line_join))
        return items


class Figure(ABC):
    """
    Base class for renderable figures.

    Every setter mutates the figure in place and returns it, so calls can
    be chained::

        Circle().set_fill_color("white").set_radius(6).set_center((50, 50))

    Setters do not validate their input. The color setters raise
    ColorError for a value that cannot form a Color; every other setter
    always succeeds.
    """

    def __init__(self):
        self.attributes = FigureAttributes()

    def set_fill_color(self, color: ColorValue) -> Self:
        """
        Set the fill color.

        Args:
            color: Color, keyword string, RGB triple or None

        Returns:
            This figure
        """
        self.attributes.fill_color = as_color(color)
        return self

    def set_stroke_color(self, color: ColorValue) -> Self:
        """
        Set the stroke color.

        Args:
            color: Color, keyword string, RGB triple or None

        Returns:
            This figure
        """
        self.attributes.stroke_color = as_color(color)
        return self

    def set_stroke_width(self, width: float) -> Self:
        """Set the stroke width. Zero and negative widths pass through."""
        self.attributes.stroke_width = width
        return self

    def set_stroke_line_cap(self, line_cap: str) -> Self:
        """Set ``stroke-linecap`` (butt, round, square)."""
        self.attributes.stroke_line_cap = line_cap
        return self

    def set_stroke_line_join(self, line_join: str) -> Self:
        """Set ``stroke-linejoin`` (miter, round, bevel)."""
        self.attributes.stroke_line_join = line_join
        return self

    @abstractmethod
    def render(self, stream: TextIO) -> None:
        """
        Write this figure as a single SVG element.

        Args:
            stream: Text stream to write to
        """
        pass

    def to_svg_string(self) -> str:
        """Render this figure into a string."""
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def _state(self) -> tuple:
        return (self.attributes,)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state() == other._state()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_svg_string()!r})"


class Circle(Figure):
    """Circle given by its center and radius."""

    def __init__(self):
        super().__init__()
        self.center = Point()
        self.radius = 0.0

    def set_center(self, center: PointLike) -> Self:
        self.center = as_point(center)
        return self

    def set_radius(self, radius: float) -> Self:
        self.radius = radius
        return self

    def render(self, stream: TextIO) -> None:
        stream.write("<circle ")
        write_attributes(stream, [
            ("cx", format_number(self.center.x)),
            ("cy", format_number(self.center.y)),
            ("r", format_number(self.radius)),
        ])
        write_attributes(stream, self.attributes.paint_items())
        write_attributes(stream, self.attributes.stroke_width_items())
        write_attributes(stream, self.attributes.line_style_items())
        stream.write("/>")

    def _state(self) -> tuple:
        return (self.attributes, self.center, self.radius)


class Polyline(Figure):
    """Open path through an ordered list of points."""

    def __init__(self):
        super().__init__()
        self._points: List[Point] = []

    @property
    def points(self) -> Tuple[Point, ...]:
        """Vertices in insertion order."""
        return tuple(self._points)

    def add_point(self, point: PointLike) -> Self:
        """Append a vertex. Duplicates are kept."""
        self._points.append(as_point(point))
        return self

    def render(self, stream: TextIO) -> None:
        # Every vertex is followed by a space, the last one included
        points = "".join(
            f"{format_number(p.x)},{format_number(p.y)} " for p in self._points
        )
        stream.write("<polyline ")
        write_attributes(stream, [("points", points)])
        write_attributes(stream, self.attributes.paint_items())
        write_attributes(stream, self.attributes.stroke_width_items())
        write_attributes(stream, self.attributes.line_style_items())
        stream.write("/>")

    def _state(self) -> tuple:
        return (self.attributes, self._points)


class Text(Figure):
    """
    Text label anchored at a point and shifted by an offset.

    The content is written between the opening and closing tags as is,
    without escaping.
    """

    # Attribute name used for the font family
    FONT_FAMILY_ATTRIBUTE = "font-family"

    def __init__(self):
        super().__init__()
        self.point = Point()
        self.offset = Point()
        self.font_size = DEFAULT_FONT_SIZE
        self.font_family: Optional[str] = None
        self.data = ""

    def set_point(self, point: PointLike) -> Self:
        self.point = as_point(point)
        return self

    def set_offset(self, offset: PointLike) -> Self:
        self.offset = as_point(offset)
        return self

    def set_font_size(self, size: int) -> Self:
        self.font_size = size
        return self

    def set_font_family(self, family: str) -> Self:
        self.font_family = family
        return self

    def set_data(self, data: str) -> Self:
        self.data = data
        return self

    def render(self, stream: TextIO) -> None:
        stream.write("<text ")
        write_attributes(stream, [
            ("x", format_number(self.point.x)),
            ("y", format_number(self.point.y)),
            ("dx", format_number(self.offset.x)),
            ("dy", format_number(self.offset.y)),
        ])
        write_attributes(stream, self.attributes.paint_items())
        write_attributes(stream, [("font-size", str(int(self.font_size)))])
        write_attributes(stream, self.attributes.stroke_width_items())
        if self.font_family is not None:
            write_attributes(stream, [(self.FONT_FAMILY_ATTRIBUTE, self.font_family)])
        write_attributes(stream, self.attributes.line_style_items())
        stream.write(f">{self.data}</text>")

    def _state(self) -> tuple:
        return (self.attributes, self.point, self.offset, self.font_size,
                self.font_family, self.data)
