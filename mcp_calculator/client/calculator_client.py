"""
Calculator MCP client.

Launches the calculator server as a child process (stdio transport),
discovers its tools and routes tool calls to it.

Usage:
    async with CalculatorClient() as client:
        print(await client.call_tool("add", {"a": 2.5, "b": 3.5}))
"""

import asyncio
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client

from mcp_calculator.config import PROJECT_ROOT, SERVER_MODULE, TOOL_CALL_TIMEOUT

logger = logging.getLogger(__name__)


class ToolCallError(RuntimeError):
    """The server answered a tool call with an error result."""

    def __init__(self, tool_name: str, message: str):
        super().__init__(message)
        self.tool_name = tool_name


class CalculatorClient:
    """
    Manages one stdio connection to the calculator server.

    1. Launches the server as a child process
    2. Performs the MCP handshake and discovers the tools
    3. Routes tool calls and returns their text output
    """

    def __init__(self, timeout: float = TOOL_CALL_TIMEOUT):
        self.timeout = timeout
        self._tools: Dict[str, Any] = {}  # tool_name -> mcp Tool
        self._session: Optional[ClientSession] = None
        self._stdio_ctx = None
        self._session_ctx = None

    async def __aenter__(self) -> "CalculatorClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.cleanup()

    @property
    def connected(self) -> bool:
        return self._session is not None

    async def connect(
        self,
        command: str = sys.executable,
        args: Optional[List[str]] = None,
        env: Optional[Dict[str, str]] = None,
    ):
        """Launch the server subprocess and connect to it."""
        if args is None:
            args = ["-m", SERVER_MODULE]

        # Ensure PROJECT_ROOT is in PYTHONPATH so the child process can
        # import mcp_calculator without the package being installed
        if env is None:
            env = {**os.environ}
        project_root_str = str(PROJECT_ROOT)
        existing_pypath = env.get("PYTHONPATH", "")
        if existing_pypath:
            if project_root_str not in existing_pypath.split(os.pathsep):
                env["PYTHONPATH"] = project_root_str + os.pathsep + existing_pypath
        else:
            env["PYTHONPATH"] = project_root_str

        server_params = StdioServerParameters(command=command, args=args, env=env)

        stdio_ctx = stdio_client(server_params)
        read, write = await stdio_ctx.__aenter__()
        self._stdio_ctx = stdio_ctx

        try:
            session_ctx = ClientSession(read, write)
            session = await session_ctx.__aenter__()
            self._session_ctx = session_ctx

            await session.initialize()
            tools_result = await session.list_tools()
        except BaseException:
            logger.error("Failed to connect to calculator server")
            await self.cleanup()
            raise

        self._session = session
        for tool in tools_result.tools:
            self._tools[tool.name] = tool
            logger.debug("Discovered tool: %s", tool.name)

        logger.info("Connected to calculator server: %d tool(s)", len(self._tools))

    def list_tools(self) -> List[str]:
        """Names of the tools discovered on connect."""
        return list(self._tools)

    def get_tool_schema(self, tool_name: str) -> Dict[str, Any]:
        """Input JSON schema of a discovered tool."""
        tool = self._tools[tool_name]
        return tool.inputSchema or {"type": "object", "properties": {}}

    async def call_tool(self, tool_name: str, arguments: Dict[str, Any]) -> str:
        """Call a tool and return its text output."""
        if self._session is None:
            raise RuntimeError("Client is not connected")
        if tool_name not in self._tools:
            return f"Error: Unknown tool '{tool_name}'"

        try:
            result = await asyncio.wait_for(
                self._session.call_tool(tool_name, arguments=arguments),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            return f"Error: Tool '{tool_name}' timed out after {self.timeout:g}s"

        output_parts = []
        for block in result.content:
            if hasattr(block, "text"):
                output_parts.append(block.text)
            else:
                output_parts.append(str(block))
        output = "\n".join(output_parts)

        if result.isError:
            logger.warning("Tool '%s' failed: %s", tool_name, output)
            raise ToolCallError(tool_name, output)

        return output if output_parts else "Tool returned no output."

    async def cleanup(self):
        """Close the session and stop the server process."""
        if self._stdio_ctx is None:
            return
        session_ctx, stdio_ctx = self._session_ctx, self._stdio_ctx
        self._session = None
        self._session_ctx = None
        self._stdio_ctx = None
        self._tools.clear()

        try:
            if session_ctx is not None:
                await session_ctx.__aexit__(None, None, None)
        finally:
            await stdio_ctx.__aexit__(None, None, None)
            logger.info("Disconnected from calculator server")
