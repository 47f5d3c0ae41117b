"""Expose registry tools through FastMCP.

Each ToolSpec becomes a DispatchedTool whose JSON schema is the spec's request
model and whose run() forwards to ToolRegistry.dispatch. Failures are raised as
fastmcp ToolError, which FastMCP reports to the client as a result with
isError set.
"""

import logging
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import PrivateAttr

from ..exceptions import MCPServerError
from .registry import ToolRegistry, ToolSpec

logger = logging.getLogger(__name__)


class DispatchedTool(Tool):
    """FastMCP tool delegating every call to a ToolRegistry."""

    _registry: ToolRegistry = PrivateAttr()

    @classmethod
    def from_spec(cls, spec: ToolSpec, registry: ToolRegistry) -> "DispatchedTool":
        tool = cls(
            name=spec.name,
            title=spec.title,
            description=spec.description,
            parameters=spec.input_schema(),
        )
        tool._registry = registry
        return tool

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        try:
            response = await self._registry.dispatch(self.name, arguments)
        except MCPServerError as e:
            raise ToolError(str(e)) from e

        if response.is_error:
            raise ToolError(response.text)

        return ToolResult(content=[TextContent(type="text", text=response.text)])


def register_tools(server: FastMCP, registry: ToolRegistry) -> list[str]:
    """Add every registry tool to the FastMCP server.

    Returns:
        Names of the registered tools
    """
    for spec in registry:
        server.add_tool(DispatchedTool.from_spec(spec, registry))
    logger.info(f"Registered {len(registry)} tools with FastMCP")
    return registry.names()
