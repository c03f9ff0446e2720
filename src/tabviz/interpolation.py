"""Even spacing of points across an interval.

Used for tick and gridline positions, for splitting the grid into
per-category slots, and for centering category labels between gridlines.
"""

from __future__ import annotations

from tabviz.errors import InvalidArgumentError


def interpolation_delta(start: float, end: float, steps: int) -> float:
    """Distance between consecutive points of ``interpolate(start, end, steps)``."""
    if steps < 2:
        raise InvalidArgumentError(f"Interpolation needs at least 2 steps, got {steps}")
    return (end - start) / (steps - 1)


def interpolate(start: float, end: float, steps: int) -> list[float]:
    """Return ``steps`` evenly spaced values from ``start`` to ``end`` inclusive."""
    delta = interpolation_delta(start, end, steps)
    points = [start + i * delta for i in range(steps - 1)]
    points.append(end)
    return points


def interpolate_midpoints(start: float, end: float, steps: int) -> list[float]:
    """Return the centers of ``steps`` equal sub-intervals of ``[start, end]``."""
    if steps < 1:
        raise InvalidArgumentError(f"Midpoint interpolation needs at least 1 step, got {steps}")
    width = (end - start) / steps
    return [start + (i + 0.5) * width for i in range(steps)]


__all__ = ["interpolate", "interpolate_midpoints", "interpolation_delta"]
