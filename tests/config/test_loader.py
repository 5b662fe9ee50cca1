"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- load_config() precedence: defaults < preload.yaml < env vars < kwargs
- Error mapping to ConfigError
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from preloadgen.config.loader import _load_yaml, load_config
from preloadgen.config.models import LoggingConfig, PreloadConfig
from preloadgen.core.errors import ConfigError, ErrorCode


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "preload.yaml"
        yaml_file.write_text("preload:\n  debug: true\n")

        assert _load_yaml(yaml_file) == {"preload": {"debug": True}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("preload:\n  include_globs:\n    - [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- web/**\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_defaults_when_no_file(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)

        assert config.logging.level == "INFO"
        assert config.preload == PreloadConfig()

    def test_loads_project_config(self, tmp_path: Path) -> None:
        (tmp_path / "preload.yaml").write_text(
            "preload:\n"
            "  exclude_globs:\n"
            "    - web/icons/**\n"
            "  debug: true\n"
            "logging:\n"
            "  level: DEBUG\n"
        )

        config = load_config(tmp_path)

        assert config.preload.exclude_globs == ("web/icons/**",)
        assert config.preload.debug is True
        assert config.preload.include_globs == ("web/**", "lib/**")
        assert config.logging.level == "DEBUG"

    def test_env_vars_override_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "preload.yaml").write_text("logging:\n  level: INFO\n")

        with patch.dict(os.environ, {"PRELOADGEN__LOGGING__LEVEL": "WARNING"}):
            config = load_config(tmp_path)

        assert config.logging.level == "WARNING"

    def test_env_var_sets_debug(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"PRELOADGEN__PRELOAD__DEBUG": "true"}):
            config = load_config(tmp_path)

        assert config.preload.debug is True

    def test_kwargs_override_all(self, tmp_path: Path) -> None:
        (tmp_path / "preload.yaml").write_text("logging:\n  level: DEBUG\n")

        with patch.dict(os.environ, {"PRELOADGEN__LOGGING__LEVEL": "WARNING"}):
            config = load_config(tmp_path, logging=LoggingConfig(level="ERROR"))

        assert config.logging.level == "ERROR"

    def test_explicit_config_file(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.yaml"
        custom.write_text("preload:\n  include_globs: [web/**]\n")

        config = load_config(tmp_path, config_file=custom)

        assert config.preload.include_globs == ("web/**",)

    def test_missing_explicit_config_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path, config_file=tmp_path / "nope.yaml")
        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        (tmp_path / "preload.yaml").write_text("preload:\n  exclude_globs: ['']\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.details["field"].startswith("preload")
