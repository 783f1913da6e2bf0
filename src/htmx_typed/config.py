"""
Rendering configuration for htmx-typed.

Options are read from the ``[tool.htmx-typed]`` table of a pyproject-style
TOML file and may be overridden by environment variables:

    [tool.htmx-typed]
    data_prefix = true      # render data-hx-* instead of hx-*

Environment:
    HTMX_TYPED_DATA_PREFIX  true/false (also 1/0, yes/no, on/off)

Usage:
    from htmx_typed.config import load_config

    config = load_config(Path("pyproject.toml"))
    render_attributes(get("/items"), config=config)
"""

from __future__ import annotations

import logging
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from htmx_typed.errors import ConfigError

logger = logging.getLogger(__name__)

TOOL_TABLE = "htmx-typed"
DATA_PREFIX_ENV_VAR = "HTMX_TYPED_DATA_PREFIX"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class HxConfig(BaseModel):
    """Attribute rendering options."""

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    data_prefix: bool = Field(
        default=False,
        description="Render attribute names as data-hx-* (HTML-validator friendly)",
    )

    def attribute_name(self, name: str) -> str:
        """Apply the configured prefix to an ``hx-*`` attribute name."""
        if self.data_prefix and name.startswith("hx-"):
            return f"data-{name}"
        return name


DEFAULT_CONFIG = HxConfig()


def _read_tool_table(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError("Config file not found", source=str(path)) from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}", source=str(path)) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Config file is not valid UTF-8: {e}", source=str(path)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", source=str(path)) from e

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        raise ConfigError("[tool] must be a table", source=str(path))
    table = tool.get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TOOL_TABLE}] must be a table", source=str(path))
    return table


def _parse_bool_env(name: str, environ: Mapping[str, str]) -> bool | None:
    raw = environ.get(name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value == "":
        return None
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(
        "Unknown %s value '%s'. Valid values: true, false. Ignoring.",
        name,
        raw,
    )
    return None


def load_config(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> HxConfig:
    """Resolve configuration from an optional TOML file, then the environment.

    Args:
        path: pyproject-style file holding a ``[tool.htmx-typed]`` table.
        environ: Environment mapping (defaults to ``os.environ``).

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or holds
            unknown or mistyped options.
    """
    options: dict[str, object] = {}
    if path is not None:
        options.update(_read_tool_table(path))
        logger.debug("Loaded %d option(s) from %s", len(options), path)

    data_prefix = _parse_bool_env(DATA_PREFIX_ENV_VAR, os.environ if environ is None else environ)
    if data_prefix is not None:
        options["data_prefix"] = data_prefix
        logger.debug("%s overrides data_prefix=%s", DATA_PREFIX_ENV_VAR, data_prefix)

    try:
        return HxConfig(**options)
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid options: {e}", source=str(path) if path else None) from e
