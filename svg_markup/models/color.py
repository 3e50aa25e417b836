"""
Color model for SVG markup generation.
Represents an optional paint value: absent, a keyword, or an RGB triple.
"""

from typing import NamedTuple, Optional, Tuple, Union

from svg_markup.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

# Constants
NONE_TOKEN = "none"

# Type definitions
ColorValue = Union["Color", "Rgb", Tuple[int, int, int], str, None]


class ColorError(Exception):
    """Custom exception for color-related errors."""
    pass


class Rgb(NamedTuple):
    """Explicit RGB triple. Channels are printed as plain integers."""
    red: int = 0
    green: int = 0
    blue: int = 0

    def __str__(self) -> str:
        return f"rgb({int(self.red)},{int(self.green)},{int(self.blue)})"


class Color:
    """
    Immutable paint value for fill and stroke attributes.

    Exactly one state holds at a time:
    - absent, serialized as ``none``
    - a keyword such as ``"white"``, serialized verbatim
    - an :class:`Rgb` triple, serialized as ``rgb(R,G,B)``

    Keywords are neither validated nor escaped.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Union[str, Rgb, Tuple[int, int, int], None] = None):
        """
        Initialize a color.

        Args:
            value: Keyword string, RGB triple, or None for no color

        Raises:
            ColorError: If the value is neither a string nor a 3-tuple of
                integer-convertible channels
        """
        if value is None or isinstance(value, str):
            self._value = value
        elif isinstance(value, tuple) and len(value) == 3:
            try:
                self._value = Rgb(*(int(channel) for channel in value))
            except (TypeError, ValueError) as e:
                raise ColorError(f"RGB channels must be integers, got {value!r}") from e
        else:
            raise ColorError(f"Unsupported color value: {value!r}")

    @classmethod
    def none(cls) -> 'Color':
        """Create an absent color."""
        return cls()

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> 'Color':
        """Create a color from individual RGB channels."""
        return cls(Rgb(red, green, blue))

    @property
    def is_none(self) -> bool:
        """True when no color is set."""
        return self._value is None

    @property
    def keyword(self) -> Optional[str]:
        """Keyword value, or None when the color is absent or RGB."""
        return self._value if isinstance(self._value, str) else None

    @property
    def rgb(self) -> Optional[Rgb]:
        """RGB value, or None when the color is absent or a keyword."""
        return self._value if isinstance(self._value, Rgb) else None

    def __setattr__(self, name, value):
        if hasattr(self, '_value'):
            raise AttributeError("Color is immutable")
        object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Color, self._value))

    def __copy__(self) -> 'Color':
        return self

    def __deepcopy__(self, memo) -> 'Color':
        return self

    def __str__(self) -> str:
        if self._value is None:
            return NONE_TOKEN
        return str(self._value)

    def __repr__(self) -> str:
        return f"Color({self._value!r})"


def as_color(value: ColorValue) -> Color:
    """
    Coerce a loosely typed color input into a Color.

    Args:
        value: Color, keyword string, RGB triple or None

    Returns:
        Color instance (the same object when a Color is passed)

    Raises:
        ColorError: If the value cannot represent a color
    """
    if isinstance(value, Color):
        return value
    try:
        return Color(value)
    except ColorError:
        logger.warning(f"Rejected color value: {value!r}")
        raise
