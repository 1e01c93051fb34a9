"""Team, application and integration tools."""

from gql import gql

from velocity_mcp.domain.models import CamelModel
from velocity_mcp.tools.catalog.common import TenantArgs
from velocity_mcp.tools.graphql_tool import GraphQLOperationTool, without_none

GET_TEAMS_BY_TENANT = gql("""
    query GetTeamsByTenant($tenantId: ID!, $roleIds: [String]) {
        teamsByTenantId(tenantId: $tenantId, roleIds: $roleIds) {
            _id
            tenantId
            name
        }
    }
""")

ADD_NEW_TEAM = gql("""
    mutation AddNewTeam($name: String!, $tenantId: ID!) {
        addNewTeam(name: $name, tenantId: $tenantId) {
            _id
            name
            tenantId
            origin
        }
    }
""")

GET_APPLICATIONS_BY_CRITERIA = gql("""
    query GetApplicationsByCriteria($data: AppCriteriaIn!) {
        applicationsByCriteria(data: $data) {
            totalCount
            apps {
                _id
                external_id
                tenant_id
                integration_id
                name
                alphaNumericName
                active
                createdAdHoc
                type
                version
                level
            }
        }
    }
""")

GET_INTEGRATIONS_BY_TENANT = gql("""
    query GetIntegrationsByTenant($tenantId: ID!) {
        integrationsByTenantId(tenantId: $tenantId) {
            _id
            type
            tenant_id
            name
            loggingLevel
            displayName
            showHidden
            last_run_successful
            last_run_completion_time
            last_successful_execution_time
            disabled
            status
            upgradeAvailable
            image
            properties
            startTime
            pluginId
            plugin {
                _id
                pluginId
                displayName
                description
                image
                version
            }
        }
    }
""")


class GetTeamsArgs(TenantArgs):
    role_ids: list[str] | None = None


class CreateTeamArgs(TenantArgs):
    name: str


class GetApplicationsArgs(CamelModel):
    parents_only: bool | None = None
    types: list[str] | None = None
    integration_id: str | None = None
    name: str | None = None
    fuzzy_name: bool | None = None
    tags: list[str] | None = None
    limit: int | None = None
    offset: int | None = None


class GetTeamsTool(GraphQLOperationTool):
    tool_name = "get_teams_by_tenant"
    tool_description = "Get all teams for a tenant"
    args_model = GetTeamsArgs
    document = GET_TEAMS_BY_TENANT
    result_field = "teamsByTenantId"
    success_label = "Teams retrieved"
    error_label = "retrieving teams"

    def build_variables(self, args: GetTeamsArgs) -> dict:
        return without_none({
            "tenantId": self.tenant(args.tenant_id),
            "roleIds": args.role_ids,
        })


class CreateTeamTool(GraphQLOperationTool):
    tool_name = "create_team"
    tool_description = "Create a new team"
    args_model = CreateTeamArgs
    document = ADD_NEW_TEAM
    result_field = "addNewTeam"
    success_label = "Team created"
    error_label = "creating team"

    def build_variables(self, args: CreateTeamArgs) -> dict:
        return {"name": args.name, "tenantId": self.tenant(args.tenant_id)}


class GetApplicationsTool(GraphQLOperationTool):
    tool_name = "get_applications_by_criteria"
    tool_description = "Get applications based on search criteria"
    args_model = GetApplicationsArgs
    document = GET_APPLICATIONS_BY_CRITERIA
    result_field = "applicationsByCriteria"
    success_label = "Applications retrieved"
    error_label = "retrieving applications"

    def build_variables(self, args: GetApplicationsArgs) -> dict:
        return {
            "data": without_none({
                "tenantId": self.settings.tenant_id,
                "parentsOnly": args.parents_only,
                "types": args.types,
                "integrationId": args.integration_id,
                "name": args.name,
                "fuzzyName": args.fuzzy_name,
                "tags": args.tags,
                "limit": args.limit,
                "offset": args.offset,
            })
        }


class GetIntegrationsTool(GraphQLOperationTool):
    tool_name = "get_integrations_by_tenant"
    tool_description = "Get all integrations for a tenant"
    args_model = TenantArgs
    document = GET_INTEGRATIONS_BY_TENANT
    result_field = "integrationsByTenantId"
    success_label = "Integrations retrieved"
    error_label = "retrieving integrations"

    def build_variables(self, args: TenantArgs) -> dict:
        return {"tenantId": self.tenant(args.tenant_id)}
