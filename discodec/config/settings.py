"""Settings loader for the DIS codec.

Configuration is read from the ``[discodec]`` table of a TOML file. The
file is taken from the explicit path argument, then from the
``DISCODEC_CONFIG`` environment variable; without either, defaults apply.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from ..const import CONFIG_ENV_VAR, CONFIG_TABLE
from .model import CodecConfig
from .schema import CodecConfigSchema

logger = logging.getLogger(__name__)


def _load_raw_config(path: str | os.PathLike[str] | None = None) -> tuple[dict[str, Any], str]:
    """Return the raw configuration table and a description of its source."""
    candidate = path if path is not None else os.environ.get(CONFIG_ENV_VAR)
    if not candidate:
        return {}, "defaults"

    config_path = Path(candidate).expanduser()
    if not config_path.is_file():
        logger.warning("Config file %s not found; using defaults", config_path)
        return {}, "defaults"

    with config_path.open("rb") as handle:
        document = tomllib.load(handle)

    table = document.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ValueError(f"[{CONFIG_TABLE}] in {config_path} must be a table")
    return table, str(config_path)


def load_codec_config(path: str | os.PathLike[str] | None = None) -> CodecConfig:
    """Load and validate configuration.

    Raises :class:`marshmallow.ValidationError` for out-of-range values.
    """
    raw, source = _load_raw_config(path)
    config = CodecConfigSchema().load(raw)
    logger.debug("Loaded codec configuration from %s", source)
    return config
