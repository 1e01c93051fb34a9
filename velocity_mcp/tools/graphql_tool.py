"""Base class for tools that map to a single GraphQL operation."""

import json
from typing import Any

import httpx
from graphql import DocumentNode

from velocity_mcp.config.settings import Settings
from velocity_mcp.domain.errors import GraphQLError, TransportError, VelocityError
from velocity_mcp.services.graphql_client import GraphQLExecutor
from velocity_mcp.tools.base import BaseTool, ToolResult


class GraphQLOperationTool(BaseTool):
    """
    One tool, one GraphQL operation.

    Input: Validated tool arguments
    Output: The operation's result field, rendered as text

    Subclasses declare the document and labels and shape the variables;
    the request, error handling and rendering live here.

    Class Attributes:
        tool_name: MCP tool name
        tool_description: MCP tool description
        document: Parsed operation (gql)
        result_field: Field of `data` holding the result
        success_label: Text prefix on success, e.g. "Teams retrieved"
        error_label: Verb phrase on failure, e.g. "retrieving teams"

    Example:
        class GetTeamsTool(GraphQLOperationTool):
            tool_name = "get_teams_by_tenant"
            tool_description = "Get all teams for a tenant"
            args_model = GetTeamsArgs
            document = GET_TEAMS
            result_field = "teamsByTenantId"
            success_label = "Teams retrieved"
            error_label = "retrieving teams"

            def build_variables(self, args):
                return {"tenantId": self.tenant(args.tenant_id)}
    """

    tool_name: str
    tool_description: str
    document: DocumentNode
    result_field: str
    success_label: str
    error_label: str

    def __init__(self, executor: GraphQLExecutor, settings: Settings):
        self.executor = executor
        self.settings = settings

    @property
    def name(self) -> str:
        return self.tool_name

    @property
    def description(self) -> str:
        return self.tool_description

    def tenant(self, provided: str | None = None) -> str:
        """Tenant from the call, or the configured default."""
        return provided or self.settings.tenant_id

    def build_variables(self, args) -> dict[str, Any]:
        return {}

    def build_request(self, args) -> tuple[DocumentNode | str, dict[str, Any]]:
        """Document and variables to send; override for built documents."""
        return self.document, self.build_variables(args)

    def render(self, payload: Any) -> str:
        return f"{self.success_label}: {to_json(payload)}"

    async def execute(self, **kwargs) -> ToolResult:
        args = self.parse_inputs(**kwargs)
        document, variables = self.build_request(args)

        try:
            data = await self.executor.execute(document, variables)
        except (VelocityError, httpx.HTTPError) as e:
            return error_result(self.error_label, e)

        payload = data.get(self.result_field)
        return ToolResult(
            success=True,
            data=payload,
            text=self.render(payload),
            metadata={"operation": self.result_field},
        )


def error_result(action: str, error: Exception) -> ToolResult:
    """Failed ToolResult whose text reads "Error <action>: <message>"."""
    metadata: dict[str, Any] = {"error_kind": getattr(error, "kind", "transport")}
    if isinstance(error, TransportError):
        metadata["status_code"] = error.status_code
    elif isinstance(error, GraphQLError):
        metadata["errors"] = error.errors

    return ToolResult(
        success=False,
        data=None,
        text=f"Error {action}: {error}",
        error=str(error),
        metadata=metadata,
    )


def to_json(value: Any) -> str:
    return json.dumps(value, indent=2, default=str)


def without_none(mapping: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None, so the service applies its defaults."""
    return {key: value for key, value in mapping.items() if value is not None}


def pagination(skip: int | None, limit: int | None) -> dict[str, int] | None:
    """Pagination input, or None when neither bound was given."""
    if skip is None and limit is None:
        return None
    return without_none({"skip": skip, "limit": limit})
