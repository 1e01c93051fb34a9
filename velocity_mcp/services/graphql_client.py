"""GraphQL request execution against the Velocity service."""

import logging
import re
from typing import Any

import httpx
from graphql import DocumentNode, get_operation_ast, print_ast

from velocity_mcp.config.settings import Settings
from velocity_mcp.domain.auth import build_auth_headers
from velocity_mcp.domain.errors import GraphQLError, ResponseShapeError, TransportError

logger = logging.getLogger(__name__)

_OPERATION_NAME = re.compile(r"\b(?:query|mutation)\s+([_A-Za-z][_0-9A-Za-z]*)")


class GraphQLExecutor:
    """
    Stateless GraphQL executor.

    Input: GraphQL document + variables
    Output: The response's `data` mapping

    Every tool call goes through execute(). It sends exactly one POST and
    knows nothing about the operation it carries.

    Attributes:
        settings: Frozen application settings (endpoint, credential)
        auth_mode: Credential kind, resolved once at construction
        client: Shared httpx.AsyncClient

    Example Usage:
        async with GraphQLExecutor(settings) as executor:
            data = await executor.execute(
                "query Teams($tenantId: ID!) { teamsByTenantId(tenantId: $tenantId) { _id } }",
                {"tenantId": "t1"},
            )
            teams = data["teamsByTenantId"]

    Implementation Notes:
        - No retries and no timeout beyond httpx's default
        - Failures are raised as TransportError or GraphQLError; callers at
          the tool boundary turn them into text
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None):
        self.settings = settings
        self.auth_mode = settings.credential_mode
        self.client = client or httpx.AsyncClient()
        self._owns_client = client is None

    @property
    def headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "*/*",
            "User-Agent": self.settings.user_agent,
        }
        headers.update(build_auth_headers(self.settings.access_token, self.auth_mode))
        return headers

    async def execute(
        self,
        document: str | DocumentNode,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Execute a GraphQL operation.

        Args:
            document: Query or mutation, as text or a parsed gql document
            variables: Variables mapping (JSON-compatible values)

        Returns:
            The response's `data` mapping, {} when the service sent none

        Raises:
            TransportError: Non-2xx status, or a body that is not a GraphQL
                JSON object
            GraphQLError: The body's `errors` list is non-empty
            ResponseShapeError: `data` is present but not an object
        """
        query = document if isinstance(document, str) else print_ast(document)
        variables = variables or {}

        logger.debug(
            "Executing %s (%s) with variables %s",
            operation_name(document),
            self.auth_mode.value,
            sorted(variables),
        )

        response = await self.client.post(
            self.settings.graphql_url,
            headers=self.headers,
            json={"query": query, "variables": variables},
        )

        if not response.is_success:
            raise TransportError(response.status_code, response.text)

        try:
            body = response.json()
        except ValueError:
            raise TransportError(response.status_code, response.text)

        if not isinstance(body, dict):
            raise TransportError(response.status_code, response.text)

        errors = body.get("errors")
        if errors:
            logger.debug("GraphQL errors: %s", errors)
            raise GraphQLError(errors)

        data = body.get("data") or {}
        if not isinstance(data, dict):
            raise ResponseShapeError(f"Expected an object for data, got {type(data).__name__}")
        return data

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "GraphQLExecutor":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def operation_name(document: str | DocumentNode) -> str:
    """Name of the (first) operation in a document, for logging."""
    if isinstance(document, DocumentNode):
        operation = get_operation_ast(document)
        if operation is not None and operation.name is not None:
            return operation.name.value
        return "anonymous"

    match = _OPERATION_NAME.search(document)
    return match.group(1) if match else "anonymous"
