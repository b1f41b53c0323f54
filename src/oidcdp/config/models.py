"""Validated configuration models with code-baked defaults.

Produced once by :func:`oidcdp.config.validation.validate` and frozen
afterwards. The ``raw_*`` fields record whether the operator supplied a
value at all, independent of what that value was.
"""

from __future__ import annotations

from datetime import timedelta
from enum import StrEnum

from pydantic import BaseModel, field_serializer, model_validator

from oidcdp.config.duration import format_duration

DEFAULT_LOG_LEVEL = "info"
DEFAULT_LOG_FORMAT = "text"
DEFAULT_CACHE_DIR = "./.acme-cache"
DEFAULT_POLL_INTERVAL = timedelta(seconds=10)


class ExposureMode(StrEnum):
    """How the provider is exposed to relying parties."""

    ACME = "acme"
    INSECURE = "insecure"
    LISTEN_SOCKET = "listen_socket"


class SourceMode(StrEnum):
    """Where the provider sources its trust bundle from."""

    SERVER_API = "server_api"
    WORKLOAD_API = "workload_api"


class ACMEConfig(BaseModel):
    """[acme] section."""

    model_config = {"frozen": True}

    cache_dir: str = DEFAULT_CACHE_DIR
    email: str
    directory_url: str = ""
    tos_accepted: bool
    raw_cache_dir: str | None = None


class _PollingSource(BaseModel):
    model_config = {"frozen": True}

    poll_interval: timedelta = DEFAULT_POLL_INTERVAL
    raw_poll_interval: str | None = None

    @field_serializer("poll_interval")
    def serialize_poll_interval(self, value: timedelta) -> str:
        return format_duration(value)


class ServerAPIConfig(_PollingSource):
    """[server_api] section."""

    address: str


class WorkloadAPIConfig(_PollingSource):
    """[workload_api] section."""

    socket_path: str
    trust_domain: str


class Config(BaseModel):
    """Root configuration handed to the listener and bundle source.

    Exactly one exposure mode and exactly one source section are set;
    construction fails otherwise.
    """

    model_config = {"frozen": True}

    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = DEFAULT_LOG_FORMAT
    domains: tuple[str, ...]
    insecure_addr: str = ""
    listen_socket_path: str = ""
    acme: ACMEConfig | None = None
    server_api: ServerAPIConfig | None = None
    workload_api: WorkloadAPIConfig | None = None
    set_key_use: bool = False

    @model_validator(mode="after")
    def check_modes(self) -> Config:
        if not self.domains:
            raise ValueError("at least one domain must be configured")
        exposures = [
            self.acme is not None,
            bool(self.insecure_addr),
            bool(self.listen_socket_path),
        ]
        if sum(exposures) != 1:
            raise ValueError("exactly one exposure mode must be configured")
        if (self.server_api is None) == (self.workload_api is None):
            raise ValueError("exactly one source section must be configured")
        return self

    @property
    def exposure(self) -> ExposureMode:
        """The configured exposure mode."""
        if self.acme is not None:
            return ExposureMode.ACME
        if self.insecure_addr:
            return ExposureMode.INSECURE
        return ExposureMode.LISTEN_SOCKET

    @property
    def source(self) -> SourceMode:
        """The configured trust bundle source."""
        if self.server_api is not None:
            return SourceMode.SERVER_API
        return SourceMode.WORKLOAD_API
