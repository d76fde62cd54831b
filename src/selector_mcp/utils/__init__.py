"""Utility modules for SelectorMCP."""

from .errors import (
    SelectorMCPError,
    SelectorBuildError,
    OrderViolation,
    DuplicateNotAllowed,
    UnknownPart,
    ConfigurationError,
    DeserializationError,
    ToolExecutionError,
)
from .logging_config import setup_logging, get_logger

__all__ = [
    "SelectorMCPError",
    "SelectorBuildError",
    "OrderViolation",
    "DuplicateNotAllowed",
    "UnknownPart",
    "ConfigurationError",
    "DeserializationError",
    "ToolExecutionError",
    "setup_logging",
    "get_logger",
]
