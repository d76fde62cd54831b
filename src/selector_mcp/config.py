"""Configuration management for SelectorMCP."""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field


class BuilderConfig(BaseModel):
    """Limits applied to selectors built through the MCP tools."""

    max_parts: int = Field(default=64, ge=1)
    max_selectors: int = Field(default=16, ge=2)


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = "INFO"
    format: str = "json"
    file: Optional[str] = None


class ServerConfig(BaseModel):
    """Configuration for the MCP server itself."""

    name: str = "SelectorMCP"


class SelectorMCPConfig(BaseModel):
    """Main configuration class for SelectorMCP."""

    builder: BuilderConfig = Field(default_factory=BuilderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Check for config in current directory first
    current_dir = Path.cwd()
    config_files = [
        current_dir / "selector-mcp.yaml",
        current_dir / "selector-mcp.yml",
        current_dir / "config" / "selector-mcp.yaml",
    ]

    for config_file in config_files:
        if config_file.exists():
            return config_file

    # Return default path in config directory
    return current_dir / "config" / "selector-mcp.yaml"


def load_config(config_path: Optional[str] = None) -> SelectorMCPConfig:
    """Load configuration from file or environment variables."""
    path: Path
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    config_dict: Dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, "r") as f:
                file_config = yaml.safe_load(f)
                if file_config:
                    config_dict.update(file_config)
        except Exception as e:
            raise ValueError(f"Failed to load config from {path}: {e}")

    # Environment wins over the file
    env_overrides = _get_env_overrides()
    _deep_update(config_dict, env_overrides)

    try:
        return SelectorMCPConfig(**config_dict)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}")


def _get_env_overrides() -> Dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: Dict[str, Any] = {}

    # Logging configuration
    if os.getenv("LOG_LEVEL"):
        overrides.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

    if os.getenv("LOG_FILE"):
        overrides.setdefault("logging", {})["file"] = os.getenv("LOG_FILE")

    if os.getenv("LOG_FORMAT"):
        overrides.setdefault("logging", {})["format"] = os.getenv("LOG_FORMAT")

    # Builder limits
    if os.getenv("SELECTOR_MAX_PARTS"):
        try:
            overrides.setdefault("builder", {})["max_parts"] = int(
                os.getenv("SELECTOR_MAX_PARTS", "")
            )
        except ValueError:
            pass

    if os.getenv("SELECTOR_MAX_SELECTORS"):
        try:
            overrides.setdefault("builder", {})["max_selectors"] = int(
                os.getenv("SELECTOR_MAX_SELECTORS", "")
            )
        except ValueError:
            pass

    return overrides


def _deep_update(base_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> None:
    """Deep update a dictionary with another dictionary."""
    for key, value in update_dict.items():
        if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
            _deep_update(base_dict[key], value)
        else:
            base_dict[key] = value


def save_config(config: SelectorMCPConfig, config_path: Optional[str] = None) -> None:
    """Save configuration to file."""
    path: Path
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump()

    with open(path, "w") as f:
        yaml.dump(config_dict, f, default_flow_style=False, indent=2)
