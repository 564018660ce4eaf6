"""
Calculator MCP Server
=====================
Exposes the calculator tool set (add, subtract, multiply, divide, is_prime)
over the stdio transport.

HOW IT WORKS:
1. configure_logging() points every log record at stderr. The stdio
   transport owns stdout: it carries JSON-RPC messages and nothing else,
   so a single stray print would corrupt the protocol stream.
2. build_server() creates a FastMCP instance from an explicit ServerConfig
   and registers the tools from the registration table (registry.py).
3. run_calculator_server() parses the command line, wires the two steps
   above together and starts the stdio transport.

RUN DIRECTLY (for testing with MCP Inspector):
    python -m mcp_calculator

Or through the installed console script:
    mcp-calculator --log-level DEBUG
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional, Sequence, Tuple

from mcp.server.fastmcp import FastMCP

from mcp_calculator.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVER_NAME,
    ENV_LOG_LEVEL,
    ENV_SERVER_NAME,
    LOG_LEVELS,
    ConfigError,
    ServerConfig,
)
from mcp_calculator.servers.calculator.registry import describe_tools, register_tools

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "Calculator tools. Use add, subtract, multiply and divide for arithmetic "
    "on numbers, and is_prime to test whether an integer is prime."
)


def configure_logging(config: ServerConfig) -> None:
    """Send all logging to stderr, replacing any handlers already installed."""
    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level,
        format=config.log_format,
        force=True,
    )


def add_calculator_tools(mcp: FastMCP) -> List[str]:
    """Register the calculator tools on an existing FastMCP server."""
    return register_tools(mcp)


def build_server(config: Optional[ServerConfig] = None) -> FastMCP:
    """Assemble a FastMCP server with the calculator tools registered."""
    config = config or ServerConfig.from_env()
    mcp = FastMCP(
        config.server_name,
        instructions=SERVER_INSTRUCTIONS,
        log_level=config.log_level,
    )
    add_calculator_tools(mcp)
    return mcp


def _parse_args(
    argv: Optional[Sequence[str]] = None,
) -> Tuple[argparse.Namespace, Optional[ServerConfig]]:
    """Parse the command line. The config is None when only listing tools."""
    parser = argparse.ArgumentParser(
        prog="mcp-calculator",
        description="Calculator tools served over MCP (stdio transport).",
    )
    parser.add_argument(
        "--server-name",
        default=os.environ.get(ENV_SERVER_NAME, DEFAULT_SERVER_NAME),
        help="Server name reported to MCP clients",
    )
    parser.add_argument(
        "--log-level",
        # env default is checked below; argparse skips choices for defaults
        default=os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for diagnostics written to stderr",
    )
    parser.add_argument(
        "--list-tools",
        action="store_true",
        help="Print the tool table as JSON and exit without serving",
    )
    args = parser.parse_args(argv)

    if args.list_tools:
        return args, None
    try:
        config = ServerConfig(server_name=args.server_name, log_level=args.log_level)
    except ConfigError as e:
        parser.error(str(e))
    return args, config


def run_calculator_server(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments, build the server and serve over stdio until the client disconnects."""
    args, config = _parse_args(argv)

    if args.list_tools:
        # Not serving, so stdout is free for output
        print(json.dumps(describe_tools(), indent=2))
        return

    configure_logging(config)

    mcp = build_server(config)
    logger.info("Starting MCP server '%s' on stdio", config.server_name)
    mcp.run(transport="stdio")
    logger.info("MCP server '%s' stopped", config.server_name)


def main() -> None:
    run_calculator_server()


if __name__ == "__main__":
    main()
