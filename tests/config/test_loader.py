"""Tests for configuration file loading."""

from pathlib import Path

import pytest

from oidcdp.config.errors import ConfigDecodeError, ConfigLoadError, ConfigValidationError
from oidcdp.config.loader import load_config, parse_config
from oidcdp.config.models import DEFAULT_CACHE_DIR, DEFAULT_POLL_INTERVAL, SourceMode


class TestLoadConfig:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="unable to load configuration:"):
            load_config(tmp_path / "missing.toml")

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="unable to load configuration:"):
            load_config(tmp_path)

    def test_loads_valid_file(self, config_file: Path) -> None:
        config = load_config(config_file)
        assert config.domains == ("domain.test",)
        assert config.acme is not None
        assert config.acme.cache_dir == DEFAULT_CACHE_DIR
        assert config.server_api is not None
        assert config.server_api.poll_interval == DEFAULT_POLL_INTERVAL
        assert config.source is SourceMode.SERVER_API

    def test_matches_parse_config(self, config_file: Path) -> None:
        assert load_config(config_file) == parse_config(config_file.read_text(encoding="utf-8"))

    def test_decode_error_propagates(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("BAD", encoding="utf-8")
        with pytest.raises(ConfigDecodeError, match="unable to decode configuration"):
            load_config(path)

    def test_validation_error_propagates(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.toml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="at least one domain must be configured"):
            load_config(path)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.toml"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(ConfigLoadError, match="unable to load configuration:"):
            load_config(path)
