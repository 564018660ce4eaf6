"""
Application configuration module.

Centralizes all configuration values and constants.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Project paths
PROJECT_ROOT = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load environment variables from .env file
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

# Server configuration
DEFAULT_SERVER_NAME = "Calculator"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Client configuration
TOOL_CALL_TIMEOUT = 30.0  # seconds
SERVER_MODULE = "mcp_calculator"

# Environment variable names
ENV_SERVER_NAME = "MCP_CALCULATOR_SERVER_NAME"
ENV_LOG_LEVEL = "MCP_CALCULATOR_LOG_LEVEL"


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""


def normalize_log_level(level: str) -> str:
    """Upper-case a log level name and check it is one FastMCP accepts."""
    normalized = (level or "").strip().upper()
    if normalized not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level '{level}'. Expected one of: {', '.join(LOG_LEVELS)}"
        )
    return normalized


@dataclass(frozen=True)
class ServerConfig:
    """
    Everything the calculator server needs to be assembled.

    Passed explicitly to build_server() so the wiring is visible at the
    call site.
    """

    server_name: str = DEFAULT_SERVER_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = LOG_FORMAT

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ to store the normalized value
        object.__setattr__(self, "log_level", normalize_log_level(self.log_level))
        if not self.server_name or not self.server_name.strip():
            raise ConfigError("Server name must not be empty")

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "ServerConfig":
        """Build a config from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        return cls(
            server_name=env.get(ENV_SERVER_NAME, DEFAULT_SERVER_NAME),
            log_level=env.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        )
