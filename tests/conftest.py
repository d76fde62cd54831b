"""Pytest configuration and fixtures for SelectorMCP tests."""

import pytest
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Generator
from unittest.mock import MagicMock

from selector_mcp.builder import SelectorBuilder
from selector_mcp.config import SelectorMCPConfig, BuilderConfig, LoggingConfig
from selector_mcp.tools.builder_tools import register_builder_tools

ENV_VARS = [
    "LOG_LEVEL",
    "LOG_FILE",
    "LOG_FORMAT",
    "SELECTOR_MAX_PARTS",
    "SELECTOR_MAX_SELECTORS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment overrides from leaking into configuration tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def builder() -> SelectorBuilder:
    """A fresh selector builder."""
    return SelectorBuilder()


@pytest.fixture
def test_config() -> SelectorMCPConfig:
    """Test configuration."""
    return SelectorMCPConfig(
        builder=BuilderConfig(max_parts=8, max_selectors=4),
        logging=LoggingConfig(level="DEBUG", format="text", file=None),
    )


@pytest.fixture
def registered_tools(test_config: SelectorMCPConfig) -> Dict[str, Callable[..., Any]]:
    """Register builder tools on a mock MCP instance and capture them by name."""
    mock_mcp = MagicMock()
    tools: Dict[str, Callable[..., Any]] = {}

    def tool_decorator():
        def decorator(func):
            tools[func.__name__] = func
            return func

        return decorator

    mock_mcp.tool = tool_decorator
    register_builder_tools(mock_mcp, test_config)
    return tools


@pytest.fixture
def sample_config_file(temp_dir: Path) -> Path:
    """A YAML configuration file on disk."""
    config_file = temp_dir / "selector-mcp.yaml"
    config_file.write_text(
        """
builder:
  max_parts: 12
logging:
  level: WARNING
  format: text
server:
  name: TestSelectors
"""
    )
    return config_file
