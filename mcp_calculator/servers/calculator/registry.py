"""
Calculator tool registration table.

Every tool the server exposes is listed here once, with its stable name,
ordered parameters, description and handler. register_tools() hands the
table to a FastMCP instance; nothing is registered by decorator.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Tuple

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from mcp_calculator.servers.calculator import tools
from mcp_calculator.servers.calculator.calculator_descriptions import (
    ADD_DESCRIPTION,
    SUBTRACT_DESCRIPTION,
    MULTIPLY_DESCRIPTION,
    DIVIDE_DESCRIPTION,
    IS_PRIME_DESCRIPTION,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolParameter:
    name: str
    type: str  # JSON Schema type name
    description: str = ""


@dataclass(frozen=True)
class ToolSpec:
    name: str
    title: str
    description: str
    parameters: Tuple[ToolParameter, ...]
    handler: Callable[..., Any]


_A = ToolParameter("a", "number", "First operand")
_B = ToolParameter("b", "number", "Second operand")

CALCULATOR_TOOLS: Tuple[ToolSpec, ...] = (
    ToolSpec("add", "Add Numbers", ADD_DESCRIPTION, (_A, _B), tools.add),
    ToolSpec("subtract", "Subtract Numbers", SUBTRACT_DESCRIPTION, (_A, _B), tools.subtract),
    ToolSpec("multiply", "Multiply Numbers", MULTIPLY_DESCRIPTION, (_A, _B), tools.multiply),
    ToolSpec(
        "divide",
        "Divide Numbers",
        DIVIDE_DESCRIPTION,
        (ToolParameter("a", "number", "Dividend"), ToolParameter("b", "number", "Divisor")),
        tools.divide,
    ),
    ToolSpec(
        "is_prime",
        "Prime Check",
        IS_PRIME_DESCRIPTION,
        (ToolParameter("n", "integer", "Integer to test"),),
        tools.is_prime,
    ),
)

# Pure functions: same input, same output, nothing outside touched
_TOOL_ANNOTATIONS = dict(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=False,
)


def get_tool(name: str) -> ToolSpec:
    """Look up a registration entry by tool name. Raises KeyError if unknown."""
    for spec in CALCULATOR_TOOLS:
        if spec.name == name:
            return spec
    raise KeyError(name)


def register_tools(
    mcp: FastMCP, tool_specs: Sequence[ToolSpec] = CALCULATOR_TOOLS
) -> List[str]:
    """Register each entry of the table on the given FastMCP server."""
    registered = []
    for spec in tool_specs:
        mcp.add_tool(
            spec.handler,
            name=spec.name,
            title=spec.title,
            description=spec.description,
            annotations=ToolAnnotations(title=spec.title, **_TOOL_ANNOTATIONS),
        )
        registered.append(spec.name)
        logger.debug("Registered tool: %s", spec.name)

    logger.info("Registered %d calculator tool(s)", len(registered))
    return registered


def describe_tools(tool_specs: Sequence[ToolSpec] = CALCULATOR_TOOLS) -> List[Dict[str, Any]]:
    """JSON-serializable summary of the table (used by --list-tools)."""
    return [
        {
            "name": spec.name,
            "title": spec.title,
            "description": spec.description.strip(),
            "parameters": [
                {"name": p.name, "type": p.type, "description": p.description}
                for p in spec.parameters
            ],
        }
        for spec in tool_specs
    ]
