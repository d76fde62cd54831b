"""Main MCP server implementation using FastMCP."""

import asyncio
import sys
from typing import Optional, Any

from fastmcp import FastMCP

from selector_mcp import __version__
from selector_mcp.config import load_config, SelectorMCPConfig
from selector_mcp.utils.logging_config import setup_logging, get_logger
from selector_mcp.utils.errors import ConfigurationError
from selector_mcp.tools.builder_tools import register_builder_tools


class SelectorMCPServer:
    """Main SelectorMCP server class."""

    def __init__(self, config: SelectorMCPConfig):
        self.config = config
        self.logger = get_logger("server")

        self.mcp: Any = FastMCP(
            name=config.server.name,
            version=__version__,
        )

        self._register_tools()

        self.logger.info("SelectorMCP server initialized")

    def _register_tools(self) -> None:
        """Register all MCP tools."""
        try:
            register_builder_tools(self.mcp, self.config)
            self.logger.info("Registered builder tools")

        except Exception as e:
            self.logger.error(f"Failed to register tools: {e}")
            raise ConfigurationError(f"Tool registration failed: {e}")

    async def start(self) -> None:
        """Start the MCP server."""
        try:
            self.logger.info("Starting SelectorMCP server...")
            await self.mcp.run_async()
        except Exception as e:
            self.logger.error(f"Server failed to start: {e}")
            raise

    def run(self) -> None:
        """Run the server (blocking)."""
        try:
            asyncio.run(self.start())
        except KeyboardInterrupt:
            self.logger.info("Server stopped by user")
        except Exception as e:
            self.logger.error(f"Server error: {e}")
            sys.exit(1)


def create_server(config_path: Optional[str] = None) -> SelectorMCPServer:
    """
    Create and configure the MCP server.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Configured SelectorMCPServer instance
    """
    try:
        config = load_config(config_path)

        setup_logging(config.logging)

        return SelectorMCPServer(config)

    except Exception as e:
        print(f"Failed to create server: {e}", file=sys.stderr)
        sys.exit(1)


def main() -> None:
    """Main entry point for the server."""
    import argparse

    parser = argparse.ArgumentParser(description="SelectorMCP server")
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level (overrides the config file)",
    )
    parser.add_argument("--version", action="version", version=__version__)

    args = parser.parse_args()

    if args.log_level:
        import os

        os.environ["LOG_LEVEL"] = args.log_level

    server = create_server(args.config)
    server.run()


if __name__ == "__main__":
    main()
