"""Error taxonomy shared by the executor, the gate provisioner and the tools.

Every request-time failure is a VelocityError subclass so the tool adapter
can convert it to text at one place. ConfigurationError is the only one
allowed to stop the process.
"""

import json
from typing import Any


class VelocityError(Exception):
    """Base class for all errors raised by this package."""

    kind: str = "error"


class ValidationError(VelocityError):
    """A gate precondition failed before any request was sent."""

    kind = "validation"


class TransportError(VelocityError):
    """
    The HTTP response was not successful.

    Fields:
        status_code: HTTP status returned by the service
        body: Raw response body text
    """

    kind = "transport"

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}: {body}")


class GraphQLError(VelocityError):
    """
    The service answered but reported GraphQL errors.

    `errors` is the list from the response body, unchanged.
    """

    kind = "graphql"

    def __init__(self, errors: list[Any]):
        self.errors = errors
        super().__init__(f"GraphQL errors: {_render(errors)}")


class ResponseShapeError(VelocityError):
    """A successful response lacked a field the caller depends on."""

    kind = "response"


class ConfigurationError(VelocityError):
    """Required startup configuration is missing or invalid."""

    kind = "configuration"


def _render(errors: list[Any]) -> str:
    try:
        return json.dumps(errors)
    except (TypeError, ValueError):
        return repr(errors)
