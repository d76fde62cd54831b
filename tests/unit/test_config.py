"""Tests for configuration management."""

import pytest
from pathlib import Path
from unittest.mock import patch
import yaml

from selector_mcp.config import (
    SelectorMCPConfig,
    BuilderConfig,
    LoggingConfig,
    ServerConfig,
    load_config,
    save_config,
    get_default_config_path,
    _get_env_overrides,
    _deep_update,
)


class TestConfigClasses:
    """Test configuration model classes."""

    def test_builder_config_defaults(self):
        """Test BuilderConfig default values."""
        config = BuilderConfig()

        assert config.max_parts == 64
        assert config.max_selectors == 16

    def test_builder_config_bounds(self):
        """Test BuilderConfig rejects limits that make the tools unusable."""
        with pytest.raises(ValueError):
            BuilderConfig(max_parts=0)

        with pytest.raises(ValueError):
            BuilderConfig(max_selectors=1)

    def test_logging_config_defaults(self):
        """Test LoggingConfig default values."""
        config = LoggingConfig()

        assert config.level == "INFO"
        assert config.format == "json"
        assert config.file is None

    def test_server_config_defaults(self):
        assert ServerConfig().name == "SelectorMCP"

    def test_selector_mcp_config_defaults(self):
        """Test SelectorMCPConfig default values."""
        config = SelectorMCPConfig()

        assert isinstance(config.builder, BuilderConfig)
        assert isinstance(config.logging, LoggingConfig)
        assert isinstance(config.server, ServerConfig)


class TestConfigLoading:
    """Test configuration loading functionality."""

    def test_load_config_default(self):
        """Test loading configuration with defaults."""
        with patch("selector_mcp.config.get_default_config_path") as mock_path:
            mock_path.return_value = Path("/nonexistent/config.yaml")

            config = load_config()

            assert isinstance(config, SelectorMCPConfig)
            assert config.builder.max_parts == 64
            assert config.logging.level == "INFO"

    def test_load_config_from_file(self, sample_config_file: Path):
        """Test loading configuration from YAML file."""
        config = load_config(str(sample_config_file))

        assert config.builder.max_parts == 12
        assert config.logging.level == "WARNING"
        assert config.logging.format == "text"
        assert config.server.name == "TestSelectors"
        # Other values should be defaults
        assert config.builder.max_selectors == 16

    def test_load_config_empty_file(self, temp_dir: Path):
        config_file = temp_dir / "empty.yaml"
        config_file.write_text("")

        config = load_config(str(config_file))

        assert config == SelectorMCPConfig()

    def test_load_config_invalid_yaml(self, temp_dir: Path):
        """Test loading invalid YAML file."""
        config_file = temp_dir / "invalid.yaml"
        config_file.write_text("invalid: yaml: content:")

        with pytest.raises(ValueError) as exc_info:
            load_config(str(config_file))

        assert "Failed to load config" in str(exc_info.value)

    def test_load_config_invalid_values(self, temp_dir: Path):
        """Test loading configuration with invalid values."""
        config_file = temp_dir / "bad_config.yaml"
        with open(config_file, "w") as f:
            yaml.dump({"builder": {"max_parts": "not_a_number"}}, f)

        with pytest.raises(ValueError) as exc_info:
            load_config(str(config_file))

        assert "Invalid configuration" in str(exc_info.value)

    def test_load_config_with_env_overrides(self, sample_config_file: Path, monkeypatch):
        """Test environment variables win over the file."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SELECTOR_MAX_PARTS", "3")

        config = load_config(str(sample_config_file))

        assert config.logging.level == "DEBUG"
        assert config.builder.max_parts == 3
        assert config.server.name == "TestSelectors"

    def test_default_config_path_prefers_cwd(self, temp_dir: Path, monkeypatch):
        monkeypatch.chdir(temp_dir)
        (temp_dir / "selector-mcp.yml").write_text("{}")

        assert get_default_config_path() == temp_dir / "selector-mcp.yml"

    def test_default_config_path_fallback(self, temp_dir: Path, monkeypatch):
        monkeypatch.chdir(temp_dir)

        assert get_default_config_path() == temp_dir / "config" / "selector-mcp.yaml"


class TestEnvOverrides:
    """Test environment variable overrides."""

    def test_no_overrides(self):
        assert _get_env_overrides() == {}

    def test_logging_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        monkeypatch.setenv("LOG_FILE", "/tmp/selectors.log")
        monkeypatch.setenv("LOG_FORMAT", "text")

        overrides = _get_env_overrides()

        assert overrides["logging"] == {
            "level": "ERROR",
            "file": "/tmp/selectors.log",
            "format": "text",
        }

    def test_builder_overrides(self, monkeypatch):
        monkeypatch.setenv("SELECTOR_MAX_PARTS", "10")
        monkeypatch.setenv("SELECTOR_MAX_SELECTORS", "5")

        assert _get_env_overrides()["builder"] == {"max_parts": 10, "max_selectors": 5}

    def test_invalid_integer_ignored(self, monkeypatch):
        """Test non-numeric limits are ignored."""
        monkeypatch.setenv("SELECTOR_MAX_PARTS", "many")

        assert "builder" not in _get_env_overrides()


class TestDeepUpdate:
    """Test dictionary deep update helper."""

    def test_deep_update_nested(self):
        base = {"logging": {"level": "INFO", "format": "json"}, "server": {"name": "a"}}

        _deep_update(base, {"logging": {"level": "DEBUG"}})

        assert base == {"logging": {"level": "DEBUG", "format": "json"}, "server": {"name": "a"}}

    def test_deep_update_replaces_non_dict(self):
        base = {"builder": 1}

        _deep_update(base, {"builder": {"max_parts": 2}})

        assert base == {"builder": {"max_parts": 2}}


class TestConfigSaving:
    """Test configuration saving."""

    def test_save_and_reload(self, temp_dir: Path):
        config = SelectorMCPConfig(builder=BuilderConfig(max_parts=5))
        config_path = temp_dir / "nested" / "selector-mcp.yaml"

        save_config(config, str(config_path))

        assert config_path.exists()
        with open(config_path) as f:
            saved = yaml.safe_load(f)
        assert saved["builder"]["max_parts"] == 5
        assert load_config(str(config_path)) == config
