"""Pipeline and stage management tools."""

from gql import gql

from velocity_mcp.domain.models import CamelModel
from velocity_mcp.tools.catalog.common import OpenInput, TenantArgs
from velocity_mcp.tools.graphql_tool import GraphQLOperationTool

GET_PIPELINES_BY_TENANT = gql("""
    query GetPipelinesByTenant($tenantId: ID!) {
        pipelinesByTenantId(tenantId: $tenantId) {
            _id
            name
            description
            tenant_id
            synchronize
            team { id name }
            stages { _id name type description }
            applications { _id name type description }
            stats { leadTime }
            created
        }
    }
""")

COMPOSE_NEW_PIPELINE = gql("""
    mutation ComposeNewPipeline(
        $pipelineId: ID
        $pipelineName: String!
        $pipelineDesc: String!
        $organizationId: ID!
        $team: TeamInput!
        $defaultEnvironments: Boolean
    ) {
        composeNewPipeline(
            pipelineId: $pipelineId
            pipelineName: $pipelineName
            pipelineDesc: $pipelineDesc
            organizationId: $organizationId
            team: $team
            defaultEnvironments: $defaultEnvironments
        ) {
            _id
            name
            description
            team { id name }
        }
    }
""")

ADD_APPLICATION_STAGES = gql("""
    mutation AddApplicationStages(
        $pipelineId: ID!
        $stageId: String!
        $environments: [EnvInput]!
    ) {
        addApplicationStages(
            pipelineId: $pipelineId
            stageId: $stageId
            environments: $environments
        ) {
            _id
            name
            description
        }
    }
""")

ADD_STAGE = gql("""
    mutation AddStage($pipelineId: ID!, $stage: StageInput!) {
        addStage(pipelineId: $pipelineId, stage: $stage) {
            _id
            name
            description
        }
    }
""")

UPDATE_STAGE = gql("""
    mutation UpdateStage($pipelineId: ID!, $stageId: String!, $updates: UpdateStageInput!) {
        updateStage(pipelineId: $pipelineId, stageId: $stageId, updates: $updates) {
            _id
            name
            description
        }
    }
""")

DELETE_STAGE = gql("""
    mutation DeleteStage($pipelineId: ID!, $stageId: String!) {
        deleteStage(pipelineId: $pipelineId, stageId: $stageId) {
            success
            message
        }
    }
""")


class EnvironmentInput(OpenInput):
    name: str
    description: str | None = None


class StageInput(OpenInput):
    name: str
    description: str | None = None


class StageUpdates(OpenInput):
    name: str | None = None
    description: str | None = None


class CreatePipelineArgs(CamelModel):
    pipeline_name: str
    pipeline_desc: str | None = None
    team_id: str
    team_name: str
    default_environments: bool | None = None


class AddApplicationStagesArgs(CamelModel):
    pipeline_id: str
    stage_id: str
    environments: list[EnvironmentInput]


class AddStageArgs(CamelModel):
    pipeline_id: str
    stage: StageInput


class UpdateStageArgs(CamelModel):
    pipeline_id: str
    stage_id: str
    updates: StageUpdates


class DeleteStageArgs(CamelModel):
    pipeline_id: str
    stage_id: str


class GetPipelinesTool(GraphQLOperationTool):
    tool_name = "get_pipelines_by_tenant"
    tool_description = "Get all pipelines for a tenant"
    args_model = TenantArgs
    document = GET_PIPELINES_BY_TENANT
    result_field = "pipelinesByTenantId"
    success_label = "Pipelines retrieved"
    error_label = "retrieving pipelines"

    def build_variables(self, args: TenantArgs) -> dict:
        return {"tenantId": self.tenant(args.tenant_id)}


class CreatePipelineTool(GraphQLOperationTool):
    tool_name = "create_pipeline"
    tool_description = "Create a new pipeline"
    args_model = CreatePipelineArgs
    document = COMPOSE_NEW_PIPELINE
    result_field = "composeNewPipeline"
    success_label = "Pipeline created"
    error_label = "creating pipeline"

    def build_variables(self, args: CreatePipelineArgs) -> dict:
        # pipelineDesc is non-null in the schema; a new pipeline has no id yet
        return {
            "pipelineId": None,
            "pipelineName": args.pipeline_name,
            "pipelineDesc": args.pipeline_desc or "",
            "organizationId": self.settings.tenant_id,
            "team": {"id": args.team_id, "name": args.team_name},
            "defaultEnvironments": args.default_environments,
        }


class AddApplicationStagesTool(GraphQLOperationTool):
    tool_name = "add_application_stages"
    tool_description = (
        "Add application stages to a pipeline using the addApplicationStages mutation."
    )
    args_model = AddApplicationStagesArgs
    document = ADD_APPLICATION_STAGES
    result_field = "addApplicationStages"
    success_label = "Application stages added"
    error_label = "adding application stages"

    def build_variables(self, args: AddApplicationStagesArgs) -> dict:
        return {
            "pipelineId": args.pipeline_id,
            "stageId": args.stage_id,
            "environments": [env.to_payload() for env in args.environments],
        }


class AddStageTool(GraphQLOperationTool):
    tool_name = "add_stage"
    tool_description = "Add a stage to a pipeline using the addStage mutation."
    args_model = AddStageArgs
    document = ADD_STAGE
    result_field = "addStage"
    success_label = "Stage added"
    error_label = "adding stage"

    def build_variables(self, args: AddStageArgs) -> dict:
        return {"pipelineId": args.pipeline_id, "stage": args.stage.to_payload()}


class UpdateStageTool(GraphQLOperationTool):
    tool_name = "update_stage"
    tool_description = "Update a stage in a pipeline using the updateStage mutation."
    args_model = UpdateStageArgs
    document = UPDATE_STAGE
    result_field = "updateStage"
    success_label = "Stage updated"
    error_label = "updating stage"

    def build_variables(self, args: UpdateStageArgs) -> dict:
        return {
            "pipelineId": args.pipeline_id,
            "stageId": args.stage_id,
            "updates": args.updates.to_payload(),
        }


class DeleteStageTool(GraphQLOperationTool):
    tool_name = "delete_stage"
    tool_description = "Delete a stage from a pipeline using the deleteStage mutation."
    args_model = DeleteStageArgs
    document = DELETE_STAGE
    result_field = "deleteStage"
    success_label = "Stage deleted"
    error_label = "deleting stage"

    def build_variables(self, args: DeleteStageArgs) -> dict:
        return {"pipelineId": args.pipeline_id, "stageId": args.stage_id}
