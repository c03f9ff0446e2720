"""Nice round-number axis ticks.

Every tick is ``k * 10**p`` for a single step exponent ``p``; the ticks cover
``[0, max_value]`` and the last one (the grid maximum) is used to normalize
bar lengths and point positions.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from tabviz.errors import InvalidDomainError

# Exponent shifts: clustered bars resolve to one digit of the leading
# magnitude, stacked bars get one extra digit.
CLUSTERED_SHIFT = 0
STACKED_SHIFT = -1


@dataclass(frozen=True)
class AxisScale:
    """Ascending tick values of one axis."""

    ticks: tuple[float, ...]
    step: float
    exponent: int

    @property
    def grid_maximum(self) -> float:
        return self.ticks[-1]

    def descending(self) -> tuple[float, ...]:
        """Ticks in top-to-bottom order for a vertical axis."""
        return tuple(reversed(self.ticks))

    def __len__(self) -> int:
        return len(self.ticks)


def build_scale(max_value: float, exponent_shift: float = CLUSTERED_SHIFT) -> AxisScale:
    """Build tick values covering ``[0, max_value]``.

    Args:
        max_value: Largest magnitude that must fit on the axis. Must be
            positive and finite.
        exponent_shift: Added to the step exponent; ``-1`` gives ten times
            finer ticks.

    Returns:
        The scale; ``build_scale(100)`` has ticks ``0, 10, ..., 100``.

    Raises:
        InvalidDomainError: If ``max_value`` is not a positive finite number.
    """
    if not math.isfinite(max_value) or max_value <= 0:
        raise InvalidDomainError(max_value)

    exponent = math.ceil(math.log10(max_value)) - 1 + int(exponent_shift)
    step = 10.0 ** exponent
    decimals = max(0, -exponent)
    count = math.ceil(round(max_value / step, 9))

    ticks = tuple(round(k * step, decimals) for k in range(count + 1))
    return AxisScale(ticks=ticks, step=step, exponent=exponent)


def format_tick(value: float) -> str:
    """Format a tick value as compact label text (``10``, ``0.5``, ``-2.25``)."""
    value = round(value, 10)
    if value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return f"{value:.10f}".rstrip("0").rstrip(".")


__all__ = ["AxisScale", "build_scale", "format_tick", "CLUSTERED_SHIFT", "STACKED_SHIFT"]
