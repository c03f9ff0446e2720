"""Style configuration loading.

A ``ChartStyle`` can be assembled from several sources, merged in priority
order (lowest first):

    FileConfigSource (YAML or JSON style file)       priority 50
         |
    EnvConfigSource  (TABVIZ_* environment variables) priority 100
         |
    explicit overrides (CLI options, API keyword arguments)
         |
         v
    style_from_mapping -> validated ChartStyle

Usage:
    >>> from tabviz.config import load_style
    >>> style = load_style("style.yaml", overrides={"display_legend": False})

A style file looks like::

    size: [1024, 768]
    palette: pastel
    bar_width_rate: 0.6
    title_font:
      size: 28
      bold: true
"""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping

import yaml

from tabviz.colors import resolve_palette
from tabviz.errors import InvalidArgumentError
from tabviz.types import ChartStyle, FontSpec, MultipleValuesDisplay, Orientation, Size

logger = logging.getLogger(__name__)

ENV_PREFIX = "TABVIZ"

STYLE_KEYS = frozenset(
    {
        "size",
        "orientation",
        "multiple_values_display",
        "bar_width_rate",
        "bars_count",
        "point_radius",
        "display_legend",
        "palette",
        "title_font",
        "label_font",
        "grid_color",
        "stroke_color",
        "text_color",
    }
)


# =============================================================================
# Exceptions
# =============================================================================


class ConfigError(InvalidArgumentError):
    """Raised when a style source cannot be read or holds invalid values."""

    hint = "Check the style file and TABVIZ_* environment variables."


# =============================================================================
# Configuration Sources
# =============================================================================


class ConfigSource(ABC):
    """Abstract base class for style configuration sources.

    Sources are merged in priority order; higher priorities override lower.
    """

    def __init__(self, priority: int = 0) -> None:
        self._priority = priority

    @property
    def priority(self) -> int:
        return self._priority

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """Load style keys from the source."""
        pass


class EnvConfigSource(ConfigSource):
    """Environment variable source.

    Example:
        TABVIZ_BAR_WIDTH_RATE=0.5
        TABVIZ_SIZE=[1024, 768]

        Will produce:
        {"bar_width_rate": 0.5, "size": [1024, 768]}

    Variables that do not name a style option (``TABVIZ_HOME``) are skipped.
    """

    def __init__(
        self,
        prefix: str = ENV_PREFIX,
        priority: int = 100,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(priority)
        self._prefix = f"{prefix}_"
        self._environ = environ

    def load(self) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        result: dict[str, Any] = {}
        for key, value in environ.items():
            if not key.startswith(self._prefix):
                continue
            name = key[len(self._prefix):].lower()
            if name not in STYLE_KEYS and name not in _ALIASES:
                logger.debug("Ignoring %s: not a style option", key)
                continue
            result[name] = self._parse_value(value)
        return result

    def _parse_value(self, value: str) -> Any:
        """Parse string value to appropriate type."""
        # Boolean
        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False

        # Number
        try:
            if "." in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        # JSON array/object
        if value.startswith(("[", "{")):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        return value


class FileConfigSource(ConfigSource):
    """Style file source; YAML or JSON, detected from the extension."""

    def __init__(self, path: str | Path, *, required: bool = True, priority: int = 50) -> None:
        super().__init__(priority)
        self._path = Path(path)
        self._required = required

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        if not self._path.exists():
            if self._required:
                raise ConfigError(f"Style file not found: {self._path}")
            return {}

        suffix = self._path.suffix.lower()
        try:
            content = self._path.read_text(encoding="utf-8")
            if suffix in (".yaml", ".yml"):
                data = yaml.safe_load(content) or {}
            elif suffix == ".json":
                data = json.loads(content)
            else:
                raise ConfigError(
                    f"Unsupported style file format: {suffix}",
                    hint="Use a .yaml, .yml or .json file.",
                )
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to load style file {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Style file {self._path} must contain a mapping at the top level")
        logger.debug("Loaded %d style keys from %s", len(data), self._path)
        return data


# =============================================================================
# Mapping -> ChartStyle
# =============================================================================

# Accepted spellings for ChartStyle fields.
_ALIASES = {
    "display": "multiple_values_display",
    "legend": "display_legend",
    "bars": "bars_count",
    "colors": "palette",
}


def _parse_size(value: Any) -> Size:
    if isinstance(value, Size):
        return value
    if isinstance(value, str):
        parts = value.lower().replace(",", "x").split("x")
    elif isinstance(value, Mapping):
        parts = [value.get("width"), value.get("height")]
    else:
        parts = list(value)
    if len(parts) != 2:
        raise ConfigError(f"size must be WIDTH x HEIGHT, got {value!r}")
    try:
        return Size(int(parts[0]), int(parts[1]))
    except (TypeError, ValueError):
        raise ConfigError(f"size must be two integers, got {value!r}") from None


def _parse_font(value: Any, base: FontSpec) -> FontSpec:
    if isinstance(value, FontSpec):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return FontSpec(size=float(value), family=base.family, bold=base.bold)
    if not isinstance(value, Mapping):
        raise ConfigError(f"font must be a size or a mapping, got {value!r}")
    unknown = set(value) - {"size", "family", "bold"}
    if unknown:
        raise ConfigError(f"Unknown font keys: {', '.join(sorted(unknown))}")
    return FontSpec(
        size=float(value.get("size", base.size)),
        family=str(value.get("family", base.family)),
        bold=bool(value.get("bold", base.bold)),
    )


def _parse_enum(enum_cls: Any, value: Any, key: str) -> Any:
    try:
        return enum_cls(str(value).lower() if not isinstance(value, enum_cls) else value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ConfigError(f"{key} must be one of: {choices}; got {value!r}") from None


def style_from_mapping(data: Mapping[str, Any], base: ChartStyle | None = None) -> ChartStyle:
    """Apply style keys to ``base`` (default style when omitted).

    Raises:
        ConfigError: On unknown keys or values that do not validate.
    """
    base = base or ChartStyle()
    changes: dict[str, Any] = {}

    for raw_key, value in data.items():
        key = _ALIASES.get(raw_key, raw_key)
        if value is None:
            continue
        if key == "size":
            changes[key] = _parse_size(value)
        elif key == "orientation":
            changes[key] = _parse_enum(Orientation, value, key)
        elif key == "multiple_values_display":
            changes[key] = _parse_enum(MultipleValuesDisplay, value, key)
        elif key == "palette":
            try:
                changes[key] = resolve_palette(value)
            except InvalidArgumentError as e:
                raise ConfigError(e.message) from None
        elif key in ("title_font", "label_font"):
            changes[key] = _parse_font(value, getattr(base, key))
        elif key in ("bar_width_rate", "point_radius"):
            changes[key] = _coerce(float, value, key)
        elif key == "bars_count":
            changes[key] = _coerce(int, value, key)
        elif key == "display_legend":
            if not isinstance(value, bool):
                raise ConfigError(f"display_legend must be true or false, got {value!r}")
            changes[key] = value
        elif key in ("grid_color", "stroke_color", "text_color"):
            changes[key] = str(value)
        else:
            raise ConfigError(f"Unknown style option: {raw_key!r}")

    try:
        return base.with_options(**changes)
    except InvalidArgumentError as e:
        raise ConfigError(e.message) from None


def _coerce(kind: type, value: Any, key: str) -> Any:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be a number, got {value!r}")
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key} must be a number, got {value!r}") from None


def load_style(
    path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    *,
    use_env: bool = True,
    base: ChartStyle | None = None,
) -> ChartStyle:
    """Merge the style file, environment and explicit overrides into a style.

    Args:
        path: Optional YAML/JSON style file.
        overrides: Keys that win over every other source.
        use_env: Read ``TABVIZ_*`` environment variables.
        base: Style the merged keys are applied to.

    Returns:
        Validated ``ChartStyle``.
    """
    sources: list[ConfigSource] = []
    if path is not None:
        sources.append(FileConfigSource(path))
    if use_env:
        sources.append(EnvConfigSource())

    merged: dict[str, Any] = {}
    for source in sorted(sources, key=lambda s: s.priority):
        merged.update(source.load())
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})

    return style_from_mapping(merged, base)


__all__ = [
    "ENV_PREFIX",
    "STYLE_KEYS",
    "ConfigError",
    "ConfigSource",
    "EnvConfigSource",
    "FileConfigSource",
    "style_from_mapping",
    "load_style",
]
