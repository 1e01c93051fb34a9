"""Domain objects: credentials, gates and the error taxonomy."""

from velocity_mcp.domain.auth import AuthMode, classify_credential
from velocity_mcp.domain.errors import (
    ConfigurationError,
    GraphQLError,
    TransportError,
    ValidationError,
    VelocityError,
)
from velocity_mcp.domain.gates import Approver, GateSpec

__all__ = [
    "AuthMode",
    "classify_credential",
    "ConfigurationError",
    "GraphQLError",
    "TransportError",
    "ValidationError",
    "VelocityError",
    "Approver",
    "GateSpec",
]
