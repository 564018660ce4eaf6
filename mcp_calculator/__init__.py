"""
Calculator tools served over the Model Context Protocol (stdio transport).
"""
from .config import ServerConfig, ConfigError
from .servers.calculator.server import (
    add_calculator_tools,
    build_server,
    configure_logging,
    run_calculator_server,
)
from .servers.calculator.tools import DivideByZeroError

__all__ = [
    'ServerConfig',
    'ConfigError',
    'DivideByZeroError',
    'add_calculator_tools',
    'build_server',
    'configure_logging',
    'run_calculator_server',
]
