"""Configuration file loading: read → decode → validate."""

from __future__ import annotations

import logging
from pathlib import Path

from oidcdp.config.errors import ConfigLoadError
from oidcdp.config.models import Config
from oidcdp.config.raw import decode
from oidcdp.config.validation import validate

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "oidc-discovery-provider.toml"
CONFIG_ENV_VAR = "OIDCDP_CONFIG"


def parse_config(text: str) -> Config:
    """Decode and validate a configuration document held in memory."""
    return validate(decode(text))


def load_config(path: Path) -> Config:
    """Load, decode and validate the configuration file at *path*.

    Raises:
        ConfigLoadError: If the file cannot be read.
        ConfigDecodeError: If the document is malformed.
        ConfigValidationError: If a semantic rule is violated.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(f"unable to load configuration: {exc}") from exc

    config = parse_config(text)
    logger.debug(
        "Loaded configuration from %s (exposure=%s, source=%s)",
        path,
        config.exposure,
        config.source,
    )
    return config
