"""Pipeline gate provisioning.

Adding a gate takes two dependent mutations: the gate-type-specific rule is
created first, then its id is attached to the pipeline stage. The service has
no transaction spanning both, and a failed attach leaves the created rule in
place; nothing here deletes it.
"""

import logging
from dataclasses import dataclass
from typing import Any

from gql import gql
from graphql import DocumentNode

from velocity_mcp.domain.errors import ResponseShapeError, ValidationError
from velocity_mcp.domain.gates import GateSpec
from velocity_mcp.services.graphql_client import GraphQLExecutor

logger = logging.getLogger(__name__)


ADD_MANUAL_RULE = gql("""
    mutation AddManualVersionSignOffRule($input: ManualVersionSignOffIn!) {
        addManualVersionSignOffRule(input: $input) {
            _id
            name
            pipelineId
            approvers { _id name type }
        }
    }
""")

ADD_METRIC_RULE = gql("""
    mutation AddAutomatedMetricRule($input: AutomatedMetricCriterionIn!) {
        addAutomatedMetricRule(input: $input) { _id name pipelineId }
    }
""")

ADD_COMPLIANCE_RULE = gql("""
    mutation AddComplianceRule($input: ComplianceRuleIn!) {
        addComplianceRule(input: $input) { _id name pipelineId }
    }
""")

ADD_STATUS_RULE = gql("""
    mutation AddStatusRule($input: StatusRuleIn!) {
        addStatusRule(input: $input) { _id name pipelineId }
    }
""")

UPSERT_PIPELINE_GATE = gql("""
    mutation UpsertPipelineGate(
        $pipelineId: ID!
        $stageId: ID!
        $ruleIds: [ID!]!
        $manualGateNotification: Boolean!
    ) {
        upsertPipelineGate(
            pipelineId: $pipelineId
            stageId: $stageId
            ruleIds: $ruleIds
            manualGateNotification: $manualGateNotification
        ) {
            _id
            pipelineId
            stageId
            rules {
                ruleType {
                    ... on ManualVersionSignOff { _id name }
                    ... on AutomatedMetricCriterion { _id name }
                    ... on ComplianceRule { _id name }
                    ... on StatusRule { _id name }
                }
            }
            manualGateNotification
        }
    }
""")


@dataclass(frozen=True)
class RuleRequest:
    """
    Validated create-rule mutation, ready to send.

    Fields:
        document: Gate-type-specific mutation
        field: Response field holding the created rule
        input: Value of the mutation's $input variable
    """

    document: DocumentNode
    field: str
    input: dict[str, Any]


class GateProvisioner:
    """
    Creates a rule and attaches it to a pipeline stage as a gate.

    Flow:
        validate → create_rule → attach_gate

        - validate fails: ValidationError, no request sent
        - create_rule fails: error propagates, attach_gate is not attempted
        - attach_gate fails: error propagates, the rule stays unattached

    Example Usage:
        provisioner = GateProvisioner(executor)
        gate = await provisioner.provision(spec)
        # gate is the upsertPipelineGate payload, unmodified
    """

    def __init__(self, executor: GraphQLExecutor):
        self.executor = executor

    async def provision(self, spec: GateSpec) -> dict[str, Any] | None:
        """
        Provision one gate.

        Args:
            spec: Gate provisioning request

        Returns:
            Attached gate as returned by upsertPipelineGate

        Raises:
            ValidationError: Missing or unusable rule fields, unknown type
            TransportError, GraphQLError: From either request
            ResponseShapeError: The create step returned no rule id
        """
        request = self.validate(spec)
        rule_id = await self.create_rule(request)
        logger.info(
            "Created %s rule %s for pipeline %s", spec.gate_type, rule_id, spec.pipeline_id
        )

        try:
            return await self.attach_gate(spec, rule_id)
        except Exception:
            logger.warning(
                "Attaching rule %s to stage %s failed; the rule is left unattached",
                rule_id,
                spec.stage_id,
            )
            raise

    def validate(self, spec: GateSpec) -> RuleRequest:
        """Check type-specific requirements and shape the create-rule input."""
        if spec.gate_type == "manual":
            return self._manual_rule(spec)
        elif spec.gate_type == "metric":
            return self._metric_rule(spec)
        elif spec.gate_type == "compliance":
            return self._compliance_rule(spec)
        elif spec.gate_type == "status":
            return self._status_rule(spec)
        raise ValidationError(f"Unsupported gate type: {spec.gate_type}")

    async def create_rule(self, request: RuleRequest) -> str:
        """Send the create-rule mutation and return the new rule's id."""
        data = await self.executor.execute(request.document, {"input": request.input})
        rule = data.get(request.field)
        rule_id = rule.get("_id") if isinstance(rule, dict) else None
        if not isinstance(rule_id, str) or not rule_id:
            raise ResponseShapeError(f"{request.field} returned no rule id")
        return rule_id

    async def attach_gate(self, spec: GateSpec, rule_id: str) -> dict[str, Any] | None:
        """Attach one rule to the spec's stage."""
        data = await self.executor.execute(
            UPSERT_PIPELINE_GATE,
            {
                "pipelineId": spec.pipeline_id,
                "stageId": spec.stage_id,
                "ruleIds": [rule_id],
                "manualGateNotification": spec.manual_gate_notification,
            },
        )
        return data.get("upsertPipelineGate")

    def _manual_rule(self, spec: GateSpec) -> RuleRequest:
        if not spec.gate_name.strip():
            raise ValidationError(
                "gateName (rule name) is required for manual gate and must be a non-empty string"
            )
        if not spec.manual_approvers:
            raise ValidationError(
                "manualApprovers (at least one user) is required for manual gate"
            )

        # Groups are accepted as input but the service only takes users
        users = [a for a in spec.manual_approvers if a.type == "user"]
        if not users:
            raise ValidationError(
                "At least one manual approver of type 'user' is required for manual gate"
            )

        return RuleRequest(
            document=ADD_MANUAL_RULE,
            field="addManualVersionSignOffRule",
            input={
                "name": spec.gate_name,
                "pipelineId": spec.pipeline_id,
                "approvers": [a.to_payload() for a in users],
            },
        )

    def _metric_rule(self, spec: GateSpec) -> RuleRequest:
        rule = spec.metric_rule
        if rule is None or rule.metric_definition is None or rule.dql is None:
            raise ValidationError(
                "metricRule.metricDefinition and metricRule.dql are required for metric gate"
            )

        return RuleRequest(
            document=ADD_METRIC_RULE,
            field="addAutomatedMetricRule",
            input={
                "pipelineId": spec.pipeline_id,
                "name": spec.gate_name,
                **rule.to_payload(),
            },
        )

    def _compliance_rule(self, spec: GateSpec) -> RuleRequest:
        rule = spec.compliance_rule
        if rule is None or not rule.resource or rule.dql is None:
            raise ValidationError(
                "complianceRule.resource and complianceRule.dql are required for compliance gate"
            )

        return RuleRequest(
            document=ADD_COMPLIANCE_RULE,
            field="addComplianceRule",
            input={
                "pipelineId": spec.pipeline_id,
                "name": spec.gate_name,
                **rule.to_payload(),
            },
        )

    def _status_rule(self, spec: GateSpec) -> RuleRequest:
        rule = spec.status_rule
        if rule is None or not rule.status:
            raise ValidationError("statusRule.status is required for status gate")

        return RuleRequest(
            document=ADD_STATUS_RULE,
            field="addStatusRule",
            input={
                "pipelineId": spec.pipeline_id,
                "name": spec.gate_name,
                **rule.to_payload(),
            },
        )
