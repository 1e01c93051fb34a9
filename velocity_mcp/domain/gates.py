"""Pipeline gate domain objects.

A gate is a policy check attached to a pipeline stage. It is provisioned in
two steps: a rule of the gate's type is created, then the rule is attached to
the stage. These models carry one provisioning request from the tool call to
the provisioner; nothing here is persisted.
"""

from typing import Literal

from pydantic import Field

from velocity_mcp.domain.models import CamelModel

GateType = Literal["manual", "metric", "compliance", "status"]
ApproverType = Literal["user", "group"]


class Approver(CamelModel):
    """
    Manual gate approver.

    Fields:
        id: Service identifier of the user or group (wire name `_id`)
        name: Display name
        type: "user" or "group"; only users are sent to the service
    """

    id: str = Field(alias="_id")
    name: str
    type: ApproverType = "user"


class MetricDefinition(CamelModel):
    id: str
    name: str


class DqlCondition(CamelModel):
    """Query condition evaluated by metric and compliance rules."""

    type: str
    field: str
    value: float


class TimeRange(CamelModel):
    type: str | None = None
    value: float | None = None


class MetricRule(CamelModel):
    metric_definition: MetricDefinition | None = None
    dql: DqlCondition | None = None
    description: str
    data_set: str | None = None
    time_range: TimeRange | None = None


class ComplianceRule(CamelModel):
    description: str
    resource: str | None = None
    dql: DqlCondition | None = None


class StatusRule(CamelModel):
    status: str | None = None
    description: str


class GateSpec(CamelModel):
    """
    One gate provisioning request.

    Fields:
        pipeline_id: Pipeline owning the stage
        stage_id: Stage the gate is attached to
        gate_type: "manual", "metric", "compliance" or "status"
        gate_name: Name given to the created rule
        manual_approvers: Approvers (manual gates)
        metric_rule: Rule details (metric gates)
        compliance_rule: Rule details (compliance gates)
        status_rule: Rule details (status gates)
        manual_gate_notification: Passed through to the attach step as is

    Example:
        GateSpec(
            pipeline_id="p1",
            stage_id="s1",
            gate_type="manual",
            gate_name="Release sign-off",
            manual_approvers=[Approver(_id="u1", name="Ana", type="user")],
        )

    Implementation Notes:
        - gate_type is a plain string here so unsupported values reach the
          provisioner, which rejects them with a ValidationError
        - Type-specific requirements are checked by the provisioner, not by
          this model
    """

    pipeline_id: str
    stage_id: str
    gate_type: str
    gate_name: str
    manual_approvers: list[Approver] | None = None
    metric_rule: MetricRule | None = None
    compliance_rule: ComplianceRule | None = None
    status_rule: StatusRule | None = None
    manual_gate_notification: bool = True
