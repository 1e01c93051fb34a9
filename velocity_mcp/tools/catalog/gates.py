"""Pipeline gate tool."""

import httpx
from pydantic import Field

from velocity_mcp.domain.errors import VelocityError
from velocity_mcp.domain.gates import GateSpec, GateType
from velocity_mcp.services.gate_provisioner import GateProvisioner
from velocity_mcp.tools.base import BaseTool, ToolResult
from velocity_mcp.tools.graphql_tool import error_result, to_json


class AddPipelineGateArgs(GateSpec):
    gate_type: GateType
    gate_name: str = Field(min_length=1)


class AddPipelineGateTool(BaseTool):
    """
    Adds a manual, metric, compliance or status gate to a pipeline stage.

    Unlike the other tools this takes two requests (create the rule, then
    attach it); the sequencing lives in GateProvisioner.
    """

    args_model = AddPipelineGateArgs

    def __init__(self, provisioner: GateProvisioner):
        self.provisioner = provisioner

    @property
    def name(self) -> str:
        return "add_pipeline_gate"

    @property
    def description(self) -> str:
        return (
            "Add a gate (manual, metric, compliance, or status) to a pipeline stage. "
            "This tool will create the specified rule and attach it as a gate to the "
            "given stage in the pipeline."
        )

    async def execute(self, **kwargs) -> ToolResult:
        spec = self.parse_inputs(**kwargs)

        try:
            gate = await self.provisioner.provision(spec)
        except (VelocityError, httpx.HTTPError) as e:
            return error_result("adding gate", e)

        return ToolResult(
            success=True,
            data=gate,
            text=f"Gate added to pipeline stage: {to_json(gate)}",
            metadata={"gate_type": spec.gate_type},
        )
