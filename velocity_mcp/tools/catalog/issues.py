"""Issue tools."""

from gql import gql
from pydantic import Field

from velocity_mcp.domain.models import CamelModel
from velocity_mcp.tools.graphql_tool import GraphQLOperationTool, without_none

DEFAULT_ISSUE_LIMIT = 100

# Uploaded issues are not classified by the caller
UPLOAD_NORMALIZED_TYPE = "OTHER"

GET_ISSUES = gql("""
    query GetIssues($filter: IssuesFilter) {
        issues(filter: $filter) {
            _id
            type
            trackerId
            tenantId
            issue {
                _id
                id
                name
                description
                status
                url
                creator
                owner
                created
                lastUpdate
                type
                normalizedType
                priority
                storyPoints
                labels
                sprints { id name active startTime endTime }
                releases { id name releaseDate released }
                project { id key name }
            }
        }
    }
""")

UPLOAD_ISSUE_DATA = gql("""
    mutation UploadIssueData($data: IssueDataIn!) {
        uploadIssueData(data: $data) {
            result
            issueIds
        }
    }
""")


class GetIssuesArgs(CamelModel):
    tenant_id: str | None = None
    internal_ids: list[str] | None = None
    skip: int | None = None
    limit: int | None = None


class IssueIn(CamelModel):
    """One issue from an external tracker; `_id` is the tracker's id."""

    external_id: str = Field(alias="_id")
    id: str
    name: str
    description: str | None = None
    status: str
    url: str
    creator: str
    owner: str | None = None
    created: str
    last_update: str
    type: str
    priority: str | None = None
    story_points: float | None = None
    labels: list[str] | None = None


class UploadIssueDataArgs(CamelModel):
    source: str
    tracker_id: str
    base_url: str | None = None
    issues: list[IssueIn]


class GetIssuesTool(GraphQLOperationTool):
    tool_name = "get_issues"
    tool_description = "Get issues with filtering options"
    args_model = GetIssuesArgs
    document = GET_ISSUES
    result_field = "issues"
    success_label = "Issues retrieved"
    error_label = "retrieving issues"

    def build_variables(self, args: GetIssuesArgs) -> dict:
        return {
            "filter": without_none({
                "tenantId": self.tenant(args.tenant_id),
                "internalIds": args.internal_ids,
                "skip": args.skip or 0,
                "limit": args.limit or DEFAULT_ISSUE_LIMIT,
            })
        }


class UploadIssueDataTool(GraphQLOperationTool):
    tool_name = "upload_issue_data"
    tool_description = "Upload issue data to Velocity"
    args_model = UploadIssueDataArgs
    document = UPLOAD_ISSUE_DATA
    result_field = "uploadIssueData"
    success_label = "Issue data uploaded"
    error_label = "uploading issue data"

    def build_variables(self, args: UploadIssueDataArgs) -> dict:
        issues = [
            {**issue.to_payload(), "normalizedType": UPLOAD_NORMALIZED_TYPE}
            for issue in args.issues
        ]
        return {
            "data": without_none({
                "source": args.source,
                "trackerId": args.tracker_id,
                "tenantId": self.settings.tenant_id,
                "baseUrl": args.base_url,
                "issues": issues,
            })
        }
