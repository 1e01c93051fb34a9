import pytest
from graphql import print_ast

from velocity_mcp.services.query_builder import QueryBuilder


def builder() -> QueryBuilder:
    return QueryBuilder("query", "GetReleaseEvents", "releaseEventsSearch", "nodes { _id }")


def test_omitted_arguments_are_elided_everywhere():
    document, variables = (
        builder()
        .argument("first", "Int", 5)
        .argument("status", "ReleaseStatus", None)
        .argument("state", "ReleaseState", "DEFAULT")
        .build()
    )
    text = print_ast(document)

    assert variables == {"first": 5, "state": "DEFAULT"}
    assert "$first: Int" in text
    assert "$state: ReleaseState" in text
    assert "status" not in text
    assert "releaseEventsSearch(first: $first, state: $state)" in text


def test_no_arguments():
    document, variables = builder().argument("first", "Int", None).build()
    text = print_ast(document)

    assert variables == {}
    assert "GetReleaseEvents {" in text
    assert "releaseEventsSearch {" in text


def test_values_are_never_inlined():
    hostile = '") { __schema { types { name } } } #'
    document, variables = builder().argument("name", "String", hostile).build()

    assert variables == {"name": hostile}
    assert "__schema" not in print_ast(document)


def test_falsy_values_are_kept():
    _, variables = (
        builder()
        .argument("first", "Int", 0)
        .argument("archived", "Boolean", False)
        .argument("tags", "[ID]", [])
        .build()
    )

    assert variables == {"first": 0, "archived": False, "tags": []}


@pytest.mark.parametrize("name", ["", "1st", "a-b", "x: Int) { y", "$first"])
def test_invalid_argument_names(name):
    with pytest.raises(ValueError):
        builder().argument(name, "Int", 1)


@pytest.mark.parametrize("graphql_type", ["", "Int = 1", "Int) { x }", "String @skip"])
def test_invalid_types(graphql_type):
    with pytest.raises(ValueError):
        builder().argument("first", graphql_type, 1)


def test_duplicate_argument():
    with pytest.raises(ValueError, match="already added"):
        builder().argument("first", "Int", 1).argument("first", "Int", 2)


def test_invalid_operation():
    with pytest.raises(ValueError):
        QueryBuilder("subscription", "X", "y", "z")
    with pytest.raises(ValueError):
        QueryBuilder("query", "Get Things", "y", "z")


def test_malformed_selection_is_rejected():
    with pytest.raises(ValueError, match="invalid document"):
        QueryBuilder("query", "Broken", "things", "nodes {").build()
