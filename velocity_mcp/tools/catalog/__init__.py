"""The Velocity tool catalog."""

from velocity_mcp.config.settings import Settings
from velocity_mcp.services.gate_provisioner import GateProvisioner
from velocity_mcp.services.graphql_client import GraphQLExecutor
from velocity_mcp.tools.base import BaseTool
from velocity_mcp.tools.catalog.gates import AddPipelineGateTool
from velocity_mcp.tools.catalog.issues import GetIssuesTool, UploadIssueDataTool
from velocity_mcp.tools.catalog.metrics import GetBuildDataTool, GetDeploymentMetricsTool
from velocity_mcp.tools.catalog.pipelines import (
    AddApplicationStagesTool,
    AddStageTool,
    CreatePipelineTool,
    DeleteStageTool,
    GetPipelinesTool,
    UpdateStageTool,
)
from velocity_mcp.tools.catalog.releases import CreateReleaseEventTool, GetReleaseEventsTool
from velocity_mcp.tools.catalog.system import ConnectionCheckTool, MyAccessKeyMetadataTool
from velocity_mcp.tools.catalog.teams import (
    CreateTeamTool,
    GetApplicationsTool,
    GetIntegrationsTool,
    GetTeamsTool,
)
from velocity_mcp.tools.catalog.workflows import (
    GetParticlesByStageTool,
    GetWorkflowsTool,
    UpdateWorkflowTool,
)

OPERATION_TOOLS = [
    GetReleaseEventsTool,
    CreateReleaseEventTool,
    GetPipelinesTool,
    CreatePipelineTool,
    GetWorkflowsTool,
    GetParticlesByStageTool,
    GetIssuesTool,
    UploadIssueDataTool,
    GetDeploymentMetricsTool,
    GetBuildDataTool,
    GetTeamsTool,
    CreateTeamTool,
    GetApplicationsTool,
    GetIntegrationsTool,
    ConnectionCheckTool,
    MyAccessKeyMetadataTool,
    AddApplicationStagesTool,
    AddStageTool,
    UpdateStageTool,
    DeleteStageTool,
    UpdateWorkflowTool,
]


def build_tools(executor: GraphQLExecutor, settings: Settings) -> list[BaseTool]:
    """Instantiate every catalog tool around one shared executor."""
    tools: list[BaseTool] = [cls(executor, settings) for cls in OPERATION_TOOLS]
    tools.append(AddPipelineGateTool(GateProvisioner(executor)))
    return tools
