"""Semantic validation and defaulting of a decoded configuration.

Rules run in a fixed order and stop at the first violation, so a document
that breaks several rules always reports the same one.
"""

from __future__ import annotations

from datetime import timedelta
from urllib.parse import urlparse

from oidcdp.config.duration import DurationError, parse_duration
from oidcdp.config.errors import ConfigValidationError
from oidcdp.config.models import (
    DEFAULT_CACHE_DIR,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_POLL_INTERVAL,
    ACMEConfig,
    Config,
    ServerAPIConfig,
    WorkloadAPIConfig,
)
from oidcdp.config.raw import (
    RawACMEConfig,
    RawConfig,
    RawServerAPIConfig,
    RawWorkloadAPIConfig,
)

LOG_FORMATS = ("text", "json")


def _poll_interval(raw: str | None, section: str) -> timedelta:
    if raw is None:
        return DEFAULT_POLL_INTERVAL
    try:
        interval = parse_duration(raw)
    except DurationError as exc:
        msg = f"invalid poll_interval in the {section} configuration section: {exc}"
        raise ConfigValidationError(msg) from exc
    if interval <= timedelta(0):
        msg = f"poll_interval must be positive in the {section} configuration section"
        raise ConfigValidationError(msg)
    return interval


def _is_unix_address(address: str) -> bool:
    try:
        return urlparse(address).scheme == "unix"
    except ValueError:
        return False


def _validate_exposure(raw: RawConfig) -> None:
    if raw.acme is not None and raw.insecure_addr:
        raise ConfigValidationError("insecure_addr and the acme section are mutually exclusive")
    if raw.acme is not None and raw.listen_socket_path:
        raise ConfigValidationError(
            "listen_socket_path and the acme section are mutually exclusive"
        )
    if raw.insecure_addr and raw.listen_socket_path:
        raise ConfigValidationError("insecure_addr and listen_socket_path are mutually exclusive")
    if raw.acme is None and not raw.insecure_addr and not raw.listen_socket_path:
        raise ConfigValidationError("either acme or listen_socket_path must be configured")


def _validate_acme(raw: RawACMEConfig) -> ACMEConfig:
    if not raw.tos_accepted:
        raise ConfigValidationError(
            "tos_accepted must be set to true in the acme configuration section"
        )
    if not raw.email:
        raise ConfigValidationError("email must be configured in the acme configuration section")
    return ACMEConfig(
        cache_dir=DEFAULT_CACHE_DIR if raw.cache_dir is None else raw.cache_dir,
        email=raw.email,
        directory_url=raw.directory_url,
        tos_accepted=raw.tos_accepted,
        raw_cache_dir=raw.cache_dir,
    )


def _validate_server_api(raw: RawServerAPIConfig) -> ServerAPIConfig:
    if not raw.address:
        raise ConfigValidationError(
            "address must be configured in the server_api configuration section"
        )
    if not _is_unix_address(raw.address):
        raise ConfigValidationError(
            "address must use the unix name system in the server_api configuration section"
        )
    return ServerAPIConfig(
        address=raw.address,
        poll_interval=_poll_interval(raw.poll_interval, "server_api"),
        raw_poll_interval=raw.poll_interval,
    )


def _validate_workload_api(raw: RawWorkloadAPIConfig) -> WorkloadAPIConfig:
    if not raw.socket_path:
        raise ConfigValidationError(
            "socket_path must be configured in the workload_api configuration section"
        )
    poll_interval = _poll_interval(raw.poll_interval, "workload_api")
    if not raw.trust_domain:
        raise ConfigValidationError(
            "trust_domain must be configured in the workload_api configuration section"
        )
    return WorkloadAPIConfig(
        socket_path=raw.socket_path,
        poll_interval=poll_interval,
        raw_poll_interval=raw.poll_interval,
        trust_domain=raw.trust_domain,
    )


def validate(raw: RawConfig) -> Config:
    """Apply semantic rules and defaults to *raw*.

    Raises:
        ConfigValidationError: For the first rule that *raw* violates.
    """
    if not raw.domains:
        raise ConfigValidationError("at least one domain must be configured")

    _validate_exposure(raw)
    acme = _validate_acme(raw.acme) if raw.acme is not None else None

    if raw.server_api is not None and raw.workload_api is not None:
        raise ConfigValidationError(
            "the server_api and workload_api sections are mutually exclusive"
        )
    if raw.server_api is None and raw.workload_api is None:
        raise ConfigValidationError(
            "either the server_api or workload_api section must be configured"
        )
    server_api = _validate_server_api(raw.server_api) if raw.server_api is not None else None
    workload_api = (
        _validate_workload_api(raw.workload_api) if raw.workload_api is not None else None
    )

    log_format = DEFAULT_LOG_FORMAT if raw.log_format is None else raw.log_format
    if log_format not in LOG_FORMATS:
        raise ConfigValidationError('log_format must be either "text" or "json"')

    return Config(
        log_level=raw.log_level or DEFAULT_LOG_LEVEL,
        log_format=log_format,
        domains=tuple(raw.domains),
        insecure_addr=raw.insecure_addr,
        listen_socket_path=raw.listen_socket_path,
        acme=acme,
        server_api=server_api,
        workload_api=workload_api,
        set_key_use=raw.set_key_use,
    )
