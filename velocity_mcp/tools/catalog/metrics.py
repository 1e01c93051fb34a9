"""Deployment and build metrics tools."""

from typing import Literal

from gql import gql

from velocity_mcp.domain.models import CamelModel
from velocity_mcp.tools.graphql_tool import (
    GraphQLOperationTool,
    pagination,
    without_none,
)

RelativeTime = Literal["HOUR24", "DAY7", "DAY30", "DAY90", "MONTH6", "YEAR1", "ALL", "CUSTOM"]

GET_DEPLOYMENTS = gql("""
    query GetDeployments($query: DeploymentQuery) {
        deployments(query: $query) {
            items {
                _id
                id_external
                name
                description
                tags
                teams { name _id }
                version_name
                application { id name external_id }
                type
                result
                start_time
                end_time
                duration_mins
                environment_name
                by_user
                url
                deploymentType
            }
            count
        }
    }
""")

GET_BUILDS = gql("""
    query GetBuilds($query: BuildTableQuery) {
        builds(query: $query) {
            items {
                _id
                id
                name
                status
                url
                startTime
                endTime
                requestor
                revision
                number
                labels
                source
                branch
                application { id externalId name }
                parameters { name value source }
            }
            count
        }
    }
""")


class MetricsFilterArgs(CamelModel):
    team_ids: list[str] | None = None
    app_ids: list[str] | None = None
    relative_time: RelativeTime | None = None
    custom_start_date: str | None = None
    custom_end_date: str | None = None
    skip: int | None = None
    limit: int | None = None


class GetDeploymentMetricsArgs(MetricsFilterArgs):
    query_string: str | None = None


class GetBuildDataArgs(MetricsFilterArgs):
    source: list[str] | None = None
    status: list[str] | None = None


class GetDeploymentMetricsTool(GraphQLOperationTool):
    tool_name = "get_deployment_metrics"
    tool_description = "Get deployment metrics with filtering and pagination"
    args_model = GetDeploymentMetricsArgs
    document = GET_DEPLOYMENTS
    result_field = "deployments"
    success_label = "Deployment metrics retrieved"
    error_label = "retrieving deployment metrics"

    def build_variables(self, args: GetDeploymentMetricsArgs) -> dict:
        return {
            "query": without_none({
                "tenantId": self.settings.tenant_id,
                "teamIds": args.team_ids,
                "appIds": args.app_ids,
                "relativeTime": args.relative_time,
                "customStartDate": args.custom_start_date,
                "customEndDate": args.custom_end_date,
                "queryString": args.query_string,
                "pagination": pagination(args.skip, args.limit),
            })
        }


class GetBuildDataTool(GraphQLOperationTool):
    tool_name = "get_build_data"
    tool_description = "Get build data with filtering and pagination"
    args_model = GetBuildDataArgs
    document = GET_BUILDS
    result_field = "builds"
    success_label = "Build data retrieved"
    error_label = "retrieving build data"

    def build_variables(self, args: GetBuildDataArgs) -> dict:
        filters = without_none({
            "tenantId": self.settings.tenant_id,
            "teamIds": args.team_ids,
            "appIds": args.app_ids,
            "relativeTime": args.relative_time,
            "customStartDate": args.custom_start_date,
            "customEndDate": args.custom_end_date,
            "source": args.source,
            "status": args.status,
        })
        return {
            "query": without_none({
                "filters": filters,
                "pagination": pagination(args.skip, args.limit),
            })
        }
