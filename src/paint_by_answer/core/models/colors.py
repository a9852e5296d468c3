"""
Module: core.models.colors

Purpose:
    Palette colours used to bind answer tokens to paint colours.
    Provides the fixed school palette, a pure "next unused colour" lookup,
    and the black/white contrast rule used for labels on filled cells.

Key Functions:
    - next_available(): First palette colour not already in use
    - contrast_color(): Black or white label colour for a background

Key Classes:
    - Color: Named colour with `#RRGGBB` value (immutable)

Dependencies:
    - PIL.ImageColor: Hex colour parsing

Used By:
    - core.models.questions: Question colours
    - editor.bindings: token -> colour map
    - builder.output: swatch and cell fills
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from PIL import ImageColor

BLACK_HEX = "#000000"
WHITE_HEX = "#FFFFFF"

# Perceived-brightness cut-off on a 0-255 scale
LUMINANCE_THRESHOLD = 128


@dataclass(frozen=True)
class Color:
    """
    Named palette colour (immutable).

    Attributes:
        name: Human readable name shown in the palette
        value: Hex value in `#RRGGBB` form

    Example:
        >>> Color("Red", "#FF0000").rgb
        (255, 0, 0)
    """

    name: str
    value: str

    def __post_init__(self) -> None:
        """Validate hex value on construction."""
        if not isinstance(self.value, str) or len(self.value) != 7 or not self.value.startswith("#"):
            raise ValueError(f"Color value must be #RRGGBB: {self.value!r}")
        # Raises ValueError for non-hex digits
        ImageColor.getrgb(self.value)

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Colour as an (r, g, b) tuple of 0-255 ints."""
        r, g, b = ImageColor.getrgb(self.value)[:3]
        return r, g, b

    @property
    def rgb_float(self) -> tuple[float, float, float]:
        """Colour as an (r, g, b) tuple of 0-1 floats (ReportLab convention)."""
        r, g, b = self.rgb
        return r / 255.0, g / 255.0, b / 255.0

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict) -> "Color":
        return cls(name=str(data["name"]), value=str(data["value"]))


SCHOOL_PALETTE: tuple[Color, ...] = (
    Color("White", "#FFFFFF"),
    Color("Light Pink", "#F4C2C2"),
    Color("Salmon", "#FA8072"),
    Color("Magenta", "#FF00FF"),
    Color("Red", "#FF0000"),
    Color("Wine", "#722F37"),
    Color("Orange", "#FFA500"),
    Color("Yellow", "#FFFF00"),
    Color("Lime Yellow", "#E3FF00"),
    Color("Light Green", "#90EE90"),
    Color("Green", "#008000"),
    Color("Dark Green", "#006400"),
    Color("Cyan", "#00FFFF"),
    Color("Sky Blue", "#87CEEB"),
    Color("Blue", "#0000FF"),
    Color("Navy", "#000080"),
    Color("Violet", "#8A2BE2"),
    Color("Purple", "#800080"),
    Color("Copper", "#B87333"),
    Color("Chestnut", "#A52A2A"),
    Color("Brown", "#704214"),
    Color("Grey", "#808080"),
    Color("Silver", "#C0C0C0"),
    Color("Black", "#000000"),
)


def next_available(
    palette: Sequence[Color],
    used: Iterable[str],
) -> Optional[Color]:
    """
    Return the first palette colour whose value is not in `used`.

    Args:
        palette: Ordered candidate colours
        used: Colour values (`#RRGGBB`) already bound to answers

    Returns:
        First unused colour, or None when the palette is exhausted
    """
    used_values = {value.upper() for value in used}
    for color in palette:
        if color.value.upper() not in used_values:
            return color
    return None


def contrast_color(background: Optional[Color | str]) -> str:
    """
    Pick black or white text for a background colour.

    Invalid or missing colours fall back to black.
    """
    value = background.value if isinstance(background, Color) else background
    if not value or len(value) < 7:
        return BLACK_HEX
    try:
        r, g, b = ImageColor.getrgb(value[:7])[:3]
    except ValueError:
        return BLACK_HEX
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return BLACK_HEX if luminance > LUMINANCE_THRESHOLD else WHITE_HEX
