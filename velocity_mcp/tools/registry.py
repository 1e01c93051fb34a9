"""Tool registry for MCP execution.

Central registry manages all tools with unified interface for:
- Execution (argument validation, error containment)
- Tool discovery for the MCP server
"""

from typing import Dict

from velocity_mcp.tools.adapters.local_adapter import LocalToolAdapter
from velocity_mcp.tools.base import BaseTool, ToolResult


class ToolRegistry:
    """
    Central registry for all tools.

    The MCP server calls registry.execute() without knowing which tool or
    service handles the call.

    Architecture:
        ┌─────────────────────────────────────┐
        │          MCP server                 │
        │  await registry.execute("tool", …)  │
        └────────────────┬────────────────────┘
                         │
        ┌────────────────▼────────────────────┐
        │        ToolRegistry                 │
        │   - Tool storage (_tools dict)      │
        └────────────────┬────────────────────┘
                         │
        ┌────────────────▼────────────────────┐
        │       LocalToolAdapter              │
        │  validate → execute → contain errors│
        └────────────────┬────────────────────┘
                         │
              GraphQLExecutor / GateProvisioner

    Attributes:
        _tools: Dict mapping tool names to tool instances
        _adapter: Execution adapter

    Example Usage:
        registry = ToolRegistry()
        for tool in build_tools(executor, settings):
            registry.register(tool)

        result = await registry.execute("get_teams_by_tenant", tenantId="t1")
        print(result.text)

    Implementation Notes:
        - Tools registered once at startup, shared by concurrent calls
        - execute() never raises; every outcome is a ToolResult
    """

    def __init__(self, adapter: LocalToolAdapter | None = None):
        self._tools: Dict[str, BaseTool] = {}
        self._adapter = adapter or LocalToolAdapter()

    def register(self, tool: BaseTool) -> None:
        """
        Register a tool for use.

        Raises:
            ValueError: If tool with same name already registered
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> BaseTool:
        """
        Get tool instance.

        Raises:
            KeyError: If tool not found
        """
        if name not in self._tools:
            raise KeyError(f"Tool '{name}' not found in registry")
        return self._tools[name]

    async def execute(self, tool_name: str, **kwargs) -> ToolResult:
        """
        Execute tool through adapter.

        Args:
            tool_name: Name of tool to execute
            **kwargs: Tool-specific parameters matching input_schema

        Returns:
            ToolResult with success, data, text, error, metadata

        Implementation Notes:
            - Returns error ToolResult if tool not found (doesn't raise)
        """
        tool = self._tools.get(tool_name)
        if not tool:
            message = f"Tool {tool_name} not found in registry"
            return ToolResult(success=False, data=None, text=message, error=message)

        return await self._adapter.execute(tool, **kwargs)

    def list_tools(self) -> list[str]:
        return list(self._tools.keys())

    def get_mcp_definitions(self) -> list[dict]:
        """
        Generate MCP tool definitions for all tools.

        Example:
            [
                {
                    "name": "get_teams_by_tenant",
                    "description": "Get all teams for a tenant",
                    "inputSchema": {"type": "object", "properties": {...}}
                },
                ...
            ]
        """
        return [
            tool.to_mcp_definition()
            for tool in self._tools.values()
        ]

