"""Custom error classes for SelectorMCP."""

from typing import Optional, Dict, Any, List


ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)


class SelectorMCPError(Exception):
    """Base exception class for SelectorMCP."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SelectorBuildError(SelectorMCPError):
    """Exception raised when a selector chain is misused."""

    def __init__(
        self,
        message: str,
        selector: Optional[str] = None,
        part: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.selector = selector
        self.part = part


class OrderViolation(SelectorBuildError):
    """A selector part was appended after a part that must follow it."""

    def __init__(
        self,
        selector: Optional[str] = None,
        part: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(ORDER_MESSAGE, selector, part, details)


class DuplicateNotAllowed(SelectorBuildError):
    """A second element, id or pseudo-element was appended to one selector."""

    def __init__(
        self,
        selector: Optional[str] = None,
        part: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(DUPLICATE_MESSAGE, selector, part, details)


class UnknownPart(SelectorBuildError):
    """A selector part kind that the builder does not know."""

    pass


class ConfigurationError(SelectorMCPError):
    """Exception raised when configuration is invalid."""

    pass


class DeserializationError(SelectorMCPError):
    """Exception raised when an object cannot be restored from JSON."""

    pass


class ToolExecutionError(SelectorMCPError):
    """Exception raised when MCP tool execution fails."""

    def __init__(self, tool_name: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.tool_name = tool_name


def format_build_errors(errors: List[SelectorBuildError]) -> str:
    """Format a list of selector build errors into a readable string."""
    if not errors:
        return "No errors"

    formatted_errors = []
    for error in errors:
        parts = []

        if error.part:
            parts.append(f"Part: {error.part}")

        if error.selector:
            parts.append(f"Selector: {error.selector}")

        location = ", ".join(parts)
        if location:
            formatted_errors.append(f"{location}: {error.message}")
        else:
            formatted_errors.append(error.message)

    return "\n".join(formatted_errors)
