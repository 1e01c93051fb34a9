"""Connectivity and identity tools."""

from gql import gql

from velocity_mcp.tools.base import ToolResult
from velocity_mcp.tools.catalog.common import NoArgs
from velocity_mcp.tools.graphql_tool import GraphQLOperationTool

TEST_CONNECTION = gql("""
    query TestConnection {
        __schema {
            types { name }
        }
    }
""")

MY_ACCESS_KEY_METADATA = gql("""
    query MyAccessKeyMetaData {
        myAccessKeyMetaData {
            userId
            email
            id
            name
            created
            lastUsed
        }
    }
""")


class ConnectionCheckTool(GraphQLOperationTool):
    """Introspects the schema to check the endpoint and credential."""

    tool_name = "test_graphql_connection"
    tool_description = "Test GraphQL connection with a simple query"
    args_model = NoArgs
    document = TEST_CONNECTION
    result_field = "__schema"
    success_label = "GraphQL connection test successful"
    error_label = "testing GraphQL connection"

    def render(self, payload) -> str:
        types = payload.get("types") if isinstance(payload, dict) else None
        types = types if isinstance(types, list) else []
        return f"{self.success_label}: Found {len(types)} schema types"

    async def execute(self, **kwargs) -> ToolResult:
        result = await super().execute(**kwargs)
        if not result.success:
            result.text = f"GraphQL connection test failed: {result.error}"
        return result


class MyAccessKeyMetadataTool(GraphQLOperationTool):
    tool_name = "get_my_access_key_metadata"
    tool_description = (
        "Get metadata about the current access key, including user info if available."
    )
    args_model = NoArgs
    document = MY_ACCESS_KEY_METADATA
    result_field = "myAccessKeyMetaData"
    success_label = "Access key metadata"
    error_label = "retrieving access key metadata"
