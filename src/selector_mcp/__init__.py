"""SelectorMCP - fluent CSS selector builder with a Model Context Protocol server."""

__version__ = "0.1.0"

from .builder import SelectorBuilder, SelectorFragment, css_selector_builder
from .server import create_server

__all__ = [
    "SelectorBuilder",
    "SelectorFragment",
    "css_selector_builder",
    "create_server",
    "__version__",
]
