"""Raw configuration models and the TOML decoder.

The raw layer mirrors the document one-to-one. Attributes whose default
must not overwrite an explicit value (``cache_dir``, ``poll_interval``)
are ``None`` when absent, so ``cache_dir = ""`` survives decoding as an
empty string. Unknown keys and wrong scalar types are rejected here.
"""

from __future__ import annotations

import tomllib

from pydantic import BaseModel, StrictBool, StrictStr, ValidationError

from oidcdp.config.errors import ConfigDecodeError

_RAW_MODEL_CONFIG = {"frozen": True, "extra": "forbid"}


class RawACMEConfig(BaseModel):
    """[acme] table."""

    model_config = _RAW_MODEL_CONFIG

    email: StrictStr = ""
    tos_accepted: StrictBool = False
    directory_url: StrictStr = ""
    cache_dir: StrictStr | None = None


class RawServerAPIConfig(BaseModel):
    """[server_api] table."""

    model_config = _RAW_MODEL_CONFIG

    address: StrictStr = ""
    poll_interval: StrictStr | None = None


class RawWorkloadAPIConfig(BaseModel):
    """[workload_api] table."""

    model_config = _RAW_MODEL_CONFIG

    socket_path: StrictStr = ""
    poll_interval: StrictStr | None = None
    trust_domain: StrictStr = ""


class RawConfig(BaseModel):
    """Top-level document, every section independently optional."""

    model_config = _RAW_MODEL_CONFIG

    log_level: StrictStr | None = None
    log_format: StrictStr | None = None
    domains: list[StrictStr] = []
    insecure_addr: StrictStr = ""
    listen_socket_path: StrictStr = ""
    set_key_use: StrictBool = False

    acme: RawACMEConfig | None = None
    server_api: RawServerAPIConfig | None = None
    workload_api: RawWorkloadAPIConfig | None = None


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<document>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def decode(text: str) -> RawConfig:
    """Parse *text* into a :class:`RawConfig`.

    Raises:
        ConfigDecodeError: On TOML syntax errors, unknown keys or
            mistyped values.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigDecodeError(f"unable to decode configuration: {exc}") from exc

    try:
        return RawConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigDecodeError(f"unable to decode configuration: {_describe(exc)}") from exc
