"""Configuration error hierarchy.

Every failure in the load → decode → validate pipeline is a ConfigError.
Messages are stable, operator-facing text.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base class for all configuration failures."""


class ConfigLoadError(ConfigError):
    """The configuration file could not be read."""


class ConfigDecodeError(ConfigError):
    """The document is malformed or does not match the schema."""


class ConfigValidationError(ConfigError):
    """A semantic rule was violated."""
