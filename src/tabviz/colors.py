"""Series color assignment and named palettes.

Colors are plain ``#rrggbb`` strings. Assignment cycles through a palette
with wraparound and is a pure function of the palette and the number of
series, so the same inputs always produce the same colors.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from tabviz.errors import InvalidArgumentError


class ColorScheme(str, Enum):
    """Predefined color schemes."""

    CLASSIC = "classic"
    DEFAULT = "default"
    CATEGORICAL = "categorical"
    PASTEL = "pastel"
    VIBRANT = "vibrant"


# Cyan, green, yellow, orange.
CLASSIC_PALETTE: tuple[str, ...] = ("#00ffff", "#00ff00", "#ffff00", "#ffc800")


COLOR_PALETTES: dict[ColorScheme, tuple[str, ...]] = {
    ColorScheme.CLASSIC: CLASSIC_PALETTE,
    ColorScheme.DEFAULT: (
        "#4e79a7", "#f28e2c", "#e15759", "#76b7b2", "#59a14f",
        "#edc949", "#af7aa1", "#ff9da7", "#9c755f", "#bab0ab",
    ),
    ColorScheme.CATEGORICAL: (
        "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
        "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
    ),
    ColorScheme.PASTEL: (
        "#aec7e8", "#ffbb78", "#98df8a", "#ff9896", "#c5b0d5",
        "#c49c94", "#f7b6d2", "#c7c7c7", "#dbdb8d", "#9edae5",
    ),
    ColorScheme.VIBRANT: (
        "#e41a1c", "#377eb8", "#4daf4a", "#984ea3", "#ff7f00",
        "#ffff33", "#a65628", "#f781bf", "#999999",
    ),
}


def next_color(palette: Sequence[str], index: int) -> tuple[str, int]:
    """Return the color at ``index`` and the index of the following color."""
    if not palette:
        raise InvalidArgumentError("palette must contain at least one color")
    index %= len(palette)
    return palette[index], (index + 1) % len(palette)


def assign_colors(n: int, palette: Sequence[str]) -> tuple[str, ...]:
    """Assign one color to each of ``n`` series, cycling through ``palette``.

    >>> assign_colors(5, ["red", "green"])
    ('red', 'green', 'red', 'green', 'red')
    """
    if n < 0:
        raise InvalidArgumentError(f"Cannot assign colors to {n} series")
    colors: list[str] = []
    index = 0
    for _ in range(n):
        color, index = next_color(palette, index)
        colors.append(color)
    return tuple(colors)


def resolve_palette(value: str | Sequence[str]) -> tuple[str, ...]:
    """Turn a scheme name or an explicit color list into a palette tuple."""
    if isinstance(value, str):
        try:
            scheme = ColorScheme(value.strip().lower())
        except ValueError:
            known = ", ".join(s.value for s in ColorScheme)
            raise InvalidArgumentError(
                f"Unknown palette {value!r}. Known palettes: {known}"
            ) from None
        return COLOR_PALETTES[scheme]

    palette = tuple(str(color) for color in value)
    if not palette:
        raise InvalidArgumentError("palette must contain at least one color")
    return palette


__all__ = [
    "ColorScheme",
    "CLASSIC_PALETTE",
    "COLOR_PALETTES",
    "next_color",
    "assign_colors",
    "resolve_palette",
]
