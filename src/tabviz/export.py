"""Writing rendered charts to disk.

SVG is written as-is. PNG output goes through cairosvg, which is an
optional dependency (``pip install tabviz[png]``).
"""

from __future__ import annotations

import logging
from pathlib import Path

from tabviz.errors import ExportError
from tabviz.layout import MARGIN
from tabviz.types import Size

logger = logging.getLogger(__name__)


def write_svg(svg: str, path: str | Path) -> Path:
    """Write an SVG document to ``path``."""
    path = Path(path)
    try:
        path.write_text(svg, encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Cannot write {path}: {e}") from e
    logger.info("SVG written to %s", path)
    return path


def rasterize(svg: str, path: str | Path, size: Size) -> Path:
    """Render an SVG document to a PNG file.

    The PNG is ``MARGIN`` pixels larger than the canvas in each direction.

    Raises:
        ExportError: If cairosvg is not installed or rendering fails.
    """
    try:
        from cairosvg import svg2png
    except ImportError:
        raise ExportError(
            "PNG output requires cairosvg. Install with: pip install tabviz[png]",
            hint="Or write SVG output instead.",
        ) from None

    path = Path(path)
    width = int(size.width + MARGIN)
    height = int(size.height + MARGIN)
    try:
        svg2png(
            bytestring=svg.encode("utf-8"),
            write_to=str(path),
            output_width=width,
            output_height=height,
        )
    except OSError as e:
        raise ExportError(f"Cannot write {path}: {e}") from e
    logger.info("PNG written to %s (%dx%d)", path, width, height)
    return path


__all__ = ["write_svg", "rasterize"]
