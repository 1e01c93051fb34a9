"""Service layer: request execution, gate provisioning, query building."""

from velocity_mcp.services.gate_provisioner import GateProvisioner
from velocity_mcp.services.graphql_client import GraphQLExecutor
from velocity_mcp.services.query_builder import QueryBuilder

__all__ = ["GateProvisioner", "GraphQLExecutor", "QueryBuilder"]
