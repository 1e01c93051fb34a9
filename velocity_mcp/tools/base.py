"""Base tool interface and result type.

All tools inherit from BaseTool and return ToolResult.
Tools share nothing mutable; each call is one independent round trip.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError


class ToolResult(BaseModel):
    """
    Standardized tool output format.

    All tools must return this format; the MCP server only ever sends
    `text` back to the agent host.

    Fields:
        success: Whether tool execution succeeded
            True = success, False = error occurred

        data: Result payload from the service (structure varies by tool)
            Examples:
            - get_teams_by_tenant: [{"_id": "t1", "name": "Core", ...}]
            - add_pipeline_gate: {"_id": "g1", "stageId": "s1", ...}

        text: Human-readable response, embedding a JSON rendering of data
            Example: 'Teams retrieved: [\\n  {\\n    "_id": "t1" ...'

        error: Error message if failed
            None if success=True
            Example: "HTTP 401: Unauthorized"

        metadata: Additional context about execution
            Example: {"error_kind": "transport", "status_code": 401}

    Example:
        ToolResult(
            success=True,
            data=[{"_id": "t1", "name": "Core"}],
            text='Teams retrieved: [...]',
        )

        ToolResult(
            success=False,
            data=None,
            text="Error retrieving teams: HTTP 401: Unauthorized",
            error="HTTP 401: Unauthorized",
            metadata={"error_kind": "transport", "status_code": 401},
        )
    """
    success: bool
    data: Any
    text: str = ""
    error: str | None = None
    metadata: dict = Field(default_factory=dict)


class BaseTool(ABC):
    """
    Base interface for all tools.

    Tools receive validated arguments and return ToolResult. They never
    raise past execute(): request failures are rendered as error text.

    Attributes:
        args_model: Pydantic model describing the tool's arguments. It
            provides the MCP input schema and structural validation.

    Implementation Pattern:
        class MyArgs(CamelModel):
            team_id: str

        class MyTool(BaseTool):
            args_model = MyArgs

            @property
            def name(self) -> str:
                return "my_tool"

            @property
            def description(self) -> str:
                return "Does something useful"

            async def execute(self, **kwargs) -> ToolResult:
                args = self.parse_inputs(**kwargs)
                return ToolResult(success=True, data=..., text=...)

    MCP Exposure:
        - name, description, input_schema used for MCP tool definitions
        - execute() called by the adapter
        - ToolResult.text sent back as the MCP response
    """

    args_model: type[BaseModel]

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Tool name for registration.

        Returns:
            Unique tool identifier
            Example: "get_pipelines_by_tenant", "add_pipeline_gate"
        """
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description shown to the agent host."""
        pass

    def input_schema(self) -> dict:
        """
        JSON schema for tool inputs (MCP compatible).

        Generated from args_model using the wire (camelCase) names.
        """
        schema = self.args_model.model_json_schema(by_alias=True)
        schema.pop("title", None)
        return schema

    @abstractmethod
    async def execute(self, **kwargs) -> ToolResult:
        """
        Execute tool with given inputs.

        Args:
            **kwargs: Tool-specific parameters matching input_schema

        Returns:
            ToolResult with success, data, text and optional error

        Raises:
            Should NOT raise for request failures - return ToolResult
            with error instead
        """
        pass

    def parse_inputs(self, **kwargs) -> BaseModel:
        """Validate raw arguments into an args_model instance."""
        return self.args_model.model_validate(kwargs)

    def validate_inputs(self, **kwargs) -> tuple[bool, str | None]:
        """
        Validate inputs against args_model.

        Returns:
            (valid, error_message) tuple

        Implementation Notes:
            - Called before execute() by adapters
            - Structural checks only; business rules (e.g. gate approvers)
              are enforced by the services
        """
        try:
            self.parse_inputs(**kwargs)
        except PydanticValidationError as e:
            return (False, _summarize(e))
        return (True, None)

    def to_mcp_definition(self) -> dict:
        """
        Convert tool to MCP definition format.

        Example:
            {
                "name": "get_teams_by_tenant",
                "description": "Get all teams for a tenant",
                "inputSchema": {...}
            }
        """
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema()
        }


def _summarize(error: PydanticValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "arguments"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
