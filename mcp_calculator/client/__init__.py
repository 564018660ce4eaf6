"""
MCP client for driving the calculator server over stdio.
"""
from .calculator_client import CalculatorClient, ToolCallError

__all__ = ['CalculatorClient', 'ToolCallError']
