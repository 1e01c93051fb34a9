"""Release management tools."""

from typing import Literal

from gql import gql

from velocity_mcp.domain.models import CamelModel
from velocity_mcp.services.query_builder import QueryBuilder
from velocity_mcp.tools.graphql_tool import GraphQLOperationTool, without_none

RELEASE_EVENT_SELECTION = """nodes {
      _id
      name
      description
      start
      end
      status
      state
      team { id name }
      tags { _id name }
      planStats {
        planCount
        appCount
        teamCount
        taskCount
        completedTaskCount
      }
    }
    pageInfo {
      endCursor { key id }
    }"""

ADD_RELEASE_EVENT = gql("""
    mutation AddReleaseEvent(
        $name: String!
        $team: teamInput!
        $start: Date!
        $end: Date!
        $description: String
        $tags: [ID]
        $isEvent: Boolean
        $summary: String
    ) {
        addReleaseEvent(
            name: $name
            team: $team
            start: $start
            end: $end
            description: $description
            tags: $tags
            isEvent: $isEvent
            summary: $summary
        ) {
            _id
            name
            description
            start
            end
            status
            team { id name }
        }
    }
""")


class DateRange(CamelModel):
    start: str
    end: str


class GetReleaseEventsArgs(CamelModel):
    first: int | None = None
    date_range: DateRange | None = None
    status: Literal["DONE", "IN_PROGRESS", "SCHEDULED", "FAILED"] | None = None
    state: Literal["ARCHIVED", "DEFAULT"] | None = None


class CreateReleaseEventArgs(CamelModel):
    name: str
    team_id: str
    team_name: str
    start: str
    end: str
    description: str | None = None
    tags: list[str] | None = None
    is_event: bool | None = None
    summary: str | None = None


class GetReleaseEventsTool(GraphQLOperationTool):
    """
    Searches release events.

    The document is built per call: filters the caller leaves out are not
    declared at all, rather than sent as null.
    """

    tool_name = "get_release_events"
    tool_description = "Get release events with optional filtering and pagination"
    args_model = GetReleaseEventsArgs
    result_field = "releaseEventsSearch"
    success_label = "Release events retrieved"
    error_label = "retrieving release events"

    def build_request(self, args: GetReleaseEventsArgs):
        builder = (
            QueryBuilder("query", "GetReleaseEvents", "releaseEventsSearch", RELEASE_EVENT_SELECTION)
            .argument("first", "Int", args.first)
            .argument(
                "dateRange",
                "dateRangeInput",
                args.date_range.to_payload() if args.date_range else None,
            )
            .argument("status", "ReleaseStatus", args.status)
            .argument("state", "ReleaseState", args.state)
        )
        return builder.build()


class CreateReleaseEventTool(GraphQLOperationTool):
    tool_name = "create_release_event"
    tool_description = "Create a new release event"
    args_model = CreateReleaseEventArgs
    document = ADD_RELEASE_EVENT
    result_field = "addReleaseEvent"
    success_label = "Release event created"
    error_label = "creating release event"

    def build_variables(self, args: CreateReleaseEventArgs) -> dict:
        return without_none({
            "name": args.name,
            "team": {
                "id": args.team_id,
                "name": args.team_name,
                "tenantId": self.settings.tenant_id,
            },
            "start": args.start,
            "end": args.end,
            "description": args.description,
            "tags": args.tags,
            "isEvent": args.is_event,
            "summary": args.summary,
        })
