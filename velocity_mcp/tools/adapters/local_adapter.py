"""In-process tool execution adapter."""

import logging

import httpx

from velocity_mcp.domain.errors import VelocityError
from velocity_mcp.tools.base import BaseTool, ToolResult

logger = logging.getLogger(__name__)


class LocalToolAdapter:
    """
    Run tools directly in-process.

    This is the boundary where nothing may escape: argument errors and
    request failures the tool did not already render come back as a
    failed ToolResult.
    """

    async def execute(self, tool: BaseTool, **kwargs) -> ToolResult:
        valid, error = tool.validate_inputs(**kwargs)
        if not valid:
            message = f"Invalid arguments for {tool.name}: {error}"
            return ToolResult(
                success=False,
                data=None,
                text=message,
                error=message,
                metadata={"error_kind": "arguments"},
            )

        try:
            return await tool.execute(**kwargs)
        except (VelocityError, httpx.HTTPError) as e:
            logger.warning("Tool %s failed: %s", tool.name, e)
            return ToolResult(
                success=False,
                data=None,
                text=f"Error running {tool.name}: {e}",
                error=str(e),
                metadata={"error_kind": getattr(e, "kind", "transport")},
            )
