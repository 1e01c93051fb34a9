"""Value stream (workflow) tools."""

from gql import gql

from velocity_mcp.domain.models import CamelModel
from velocity_mcp.tools.catalog.common import OpenInput, TenantArgs
from velocity_mcp.tools.graphql_tool import (
    GraphQLOperationTool,
    pagination,
    without_none,
)

GET_WORKFLOWS_FOR_TENANT = gql("""
    query GetWorkflowsForTenant($tenantId: ID!) {
        workflowsForTenant(tenantId: $tenantId) {
            _id
            pipelineId
            name
            description
            query
            phases {
                name
                description
                stages {
                    name
                    description
                    query
                    wipLimit
                    showAlerts
                    showSpeed
                }
            }
            integrations
            integrationsCount
            leadTime { start end median firstQuartile thirdQuartile }
            cycleTime { start end median firstQuartile thirdQuartile }
            team { id name }
            created
            lastUpdate
        }
    }
""")

GET_PARTICLES_BY_STAGE = gql("""
    query GetParticlesByStage(
        $workflowId: ID!
        $stageName: String!
        $particleIds: [ID]
        $pagination: InsightsPaginationInput
    ) {
        particlesByStage(
            workflowId: $workflowId
            stageName: $stageName
            particleIds: $particleIds
            pagination: $pagination
        ) {
            issue {
                _id
                id
                name
                status
                priority
                type
                owner
                creator
                created
                lastUpdate
                url
                description
                storyPoints
                labels
            }
            commit { _id id name url creator created }
            build { _id name status url startTime endTime }
            deploy { _id name status url startTime endTime environmentId }
            particleId
        }
    }
""")

UPDATE_WORKFLOW = gql("""
    mutation UpdateWorkflow($workflowId: ID!, $updates: WorkflowQuery!) {
        updateWorkflow(workflowId: $workflowId, updates: $updates) {
            _id
            name
            description
        }
    }
""")


class GetParticlesByStageArgs(CamelModel):
    workflow_id: str
    stage_name: str
    particle_ids: list[str] | None = None
    skip: int | None = None
    limit: int | None = None


class WorkflowUpdates(OpenInput):
    name: str | None = None
    description: str | None = None


class UpdateWorkflowArgs(CamelModel):
    workflow_id: str
    updates: WorkflowUpdates


class GetWorkflowsTool(GraphQLOperationTool):
    tool_name = "get_workflows_for_tenant"
    tool_description = "Get all workflows (value streams) for a tenant"
    args_model = TenantArgs
    document = GET_WORKFLOWS_FOR_TENANT
    result_field = "workflowsForTenant"
    success_label = "Workflows retrieved"
    error_label = "retrieving workflows"

    def build_variables(self, args: TenantArgs) -> dict:
        return {"tenantId": self.tenant(args.tenant_id)}


class GetParticlesByStageTool(GraphQLOperationTool):
    tool_name = "get_particles_by_stage"
    tool_description = "Get particles (work items) in a specific stage of a workflow"
    args_model = GetParticlesByStageArgs
    document = GET_PARTICLES_BY_STAGE
    result_field = "particlesByStage"
    success_label = "Particles retrieved"
    error_label = "retrieving particles"

    def build_variables(self, args: GetParticlesByStageArgs) -> dict:
        return without_none({
            "workflowId": args.workflow_id,
            "stageName": args.stage_name,
            "particleIds": args.particle_ids,
            "pagination": pagination(args.skip, args.limit),
        })


class UpdateWorkflowTool(GraphQLOperationTool):
    tool_name = "update_workflow"
    tool_description = "Update a workflow (VSM) using the updateWorkflow mutation."
    args_model = UpdateWorkflowArgs
    document = UPDATE_WORKFLOW
    result_field = "updateWorkflow"
    success_label = "Workflow updated"
    error_label = "updating workflow"

    def build_variables(self, args: UpdateWorkflowArgs) -> dict:
        return {"workflowId": args.workflow_id, "updates": args.updates.to_payload()}
