"""GraphQL document builder for operations with optional arguments."""

import re
from dataclasses import dataclass, field
from typing import Any, Literal

from gql import gql
from graphql import DocumentNode, GraphQLError as GraphQLSyntaxError

_NAME = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")
_TYPE = re.compile(r"^[\[\]_0-9A-Za-z!]+$")


@dataclass
class QueryBuilder:
    """
    Builds a one-field operation from optional named arguments.

    Input: Operation shape + (name, type, value) arguments
    Output: Parsed document + variables mapping

    Every argument is bound as a variable; values never appear in the
    document text. Arguments whose value is None are left out of both the
    variable declarations and the field call, so the service applies its
    own defaults.

    Example:
        document, variables = (
            QueryBuilder(
                "query", "GetReleaseEvents", "releaseEventsSearch", "nodes { _id name }"
            )
            .argument("first", "Int", 10)
            .argument("status", "ReleaseStatus", None)
            .build()
        )
        # query GetReleaseEvents($first: Int) {
        #   releaseEventsSearch(first: $first) { nodes { _id name } }
        # }
        # variables == {"first": 10}
    """

    operation_type: Literal["query", "mutation"]
    operation_name: str
    field_name: str
    selection: str
    arguments: list[tuple[str, str, Any]] = field(default_factory=list)

    def __post_init__(self):
        if self.operation_type not in ("query", "mutation"):
            raise ValueError(f"Unknown operation type: {self.operation_type}")
        _check_name(self.operation_name)
        _check_name(self.field_name)

    def argument(self, name: str, graphql_type: str, value: Any) -> "QueryBuilder":
        """Add an argument; returns self for chaining."""
        _check_name(name)
        if not _TYPE.match(graphql_type):
            raise ValueError(f"Invalid GraphQL type: {graphql_type!r}")
        if any(existing == name for existing, _, _ in self.arguments):
            raise ValueError(f"Argument '{name}' already added")
        self.arguments.append((name, graphql_type, value))
        return self

    def build(self) -> tuple[DocumentNode, dict[str, Any]]:
        """
        Render the document and its variables.

        Returns:
            (document, variables) tuple

        Raises:
            ValueError: If the rendered text is not a valid document
        """
        present = [(n, t, v) for n, t, v in self.arguments if v is not None]

        declarations = ", ".join(f"${n}: {t}" for n, t, _ in present)
        call_args = ", ".join(f"{n}: ${n}" for n, _, _ in present)

        header = f"{self.operation_type} {self.operation_name}"
        if declarations:
            header += f"({declarations})"
        call = self.field_name
        if call_args:
            call += f"({call_args})"

        text = f"{header} {{\n  {call} {{\n    {self.selection}\n  }}\n}}"

        try:
            document = gql(text)
        except GraphQLSyntaxError as e:
            raise ValueError(f"Built an invalid document: {e}") from e

        return document, {n: v for n, _, v in present}


def _check_name(name: str) -> None:
    if not _NAME.match(name):
        raise ValueError(f"Invalid GraphQL name: {name!r}")
