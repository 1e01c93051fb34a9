"""Tools exposed to the agent host."""

from velocity_mcp.tools.base import BaseTool, ToolResult
from velocity_mcp.tools.registry import ToolRegistry

__all__ = [
    "BaseTool",
    "ToolResult",
    "ToolRegistry",
]
