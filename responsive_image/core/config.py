"""Render configuration.

Values that used to be compiled-in globals (the ``ixlib`` library tag, the
picture child key prefix, the placeholder image) live on ``RenderConfig`` and
are handed to the attribute builder at construction time.

Configuration can be loaded from the ``[render]`` table of a TOML file:

    [render]
    library_param = "python-0.1.0"
    key_prefix = "responsive-image"
"""

from __future__ import annotations

import os
from typing import Any, cast

# TOML loading for Python 3.11+ and older
try:
    import tomllib  # type: ignore[import-not-found, unused-ignore]
except ImportError:
    import tomli as tomllib  # type: ignore[import-not-found, no-redef, unused-ignore]

from pydantic import BaseModel, Field

from responsive_image._version import __version__
from responsive_image.core.urls import EMPTY_IMAGE_SRC

CONFIG_ENV_VAR = "RESPONSIVE_IMAGE_CONFIG"
CONFIG_FILENAME = "responsive_image.toml"


class RenderConfig(BaseModel):
    """Construction-time settings for the attribute builder.

    Attributes:
        library_param: Value of the ``ixlib`` query parameter
        key_prefix: Prefix for synthetic keys assigned to picture children
        placeholder_src: URL used while the URL gate is closed
    """

    model_config = {"frozen": True, "extra": "forbid"}

    library_param: str = Field(default=f"python-{__version__}", min_length=1)
    key_prefix: str = Field(default="responsive-image", min_length=1)
    placeholder_src: str = Field(default=EMPTY_IMAGE_SRC, min_length=1)


def _resolve_config_path(config_path: str | None) -> str | None:
    """Resolve configuration path from env, explicit path, or defaults."""
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return env_config
    if config_path:
        return config_path
    # Look for responsive_image.toml in current directory or home
    candidates = [
        CONFIG_FILENAME,
        os.path.expanduser(f"~/{CONFIG_FILENAME}"),
    ]
    for candidate in candidates:
        if os.path.exists(candidate):
            return candidate
    return None


def load_config(config_path: str | None = None) -> RenderConfig:
    """Load render configuration.

    Args:
        config_path: Path to responsive_image.toml (auto-detected if None)

    Returns:
        RenderConfig built from the file's [render] table, or defaults when
        no file is configured or found

    Raises:
        FileNotFoundError: If an explicitly configured file does not exist
        ValueError: If the [render] table is malformed
    """
    resolved_path = _resolve_config_path(config_path)
    if resolved_path is None:
        return RenderConfig()
    if not os.path.exists(resolved_path):
        raise FileNotFoundError(
            f"Config file not found at {resolved_path}. "
            f"Set {CONFIG_ENV_VAR} or create {CONFIG_FILENAME}"
        )
    with open(resolved_path, "rb") as f:
        config = cast(dict[str, Any], tomllib.load(f))

    section = config.get("render", {})
    if not isinstance(section, dict):
        raise ValueError(f"[render] in {resolved_path} must be a table")
    return RenderConfig(**section)
