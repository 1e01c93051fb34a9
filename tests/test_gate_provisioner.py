import pytest

from velocity_mcp.domain.errors import (
    GraphQLError,
    ResponseShapeError,
    TransportError,
    ValidationError,
)
from velocity_mcp.domain.gates import GateSpec
from velocity_mcp.services.gate_provisioner import GateProvisioner

ATTACHED_GATE = {
    "_id": "gate-1",
    "pipelineId": "p1",
    "stageId": "s1",
    "rules": [{"ruleType": {"_id": "r1", "name": "Sign-off"}}],
    "manualGateNotification": False,
}

STATUS_RULE = {"status": "PASSED", "description": "Tests green"}


def manual_spec(approvers, **overrides) -> GateSpec:
    fields = {
        "pipelineId": "p1",
        "stageId": "s1",
        "gateType": "manual",
        "gateName": "Sign-off",
        "manualApprovers": approvers,
        "manualGateNotification": False,
    }
    fields.update(overrides)
    return GateSpec.model_validate(fields)


@pytest.fixture
def provisioner(executor):
    return GateProvisioner(executor)


async def test_manual_gate_end_to_end(provisioner, velocity):
    velocity.reply_data(addManualVersionSignOffRule={"_id": "r1", "name": "Sign-off"})
    velocity.reply_data(upsertPipelineGate=ATTACHED_GATE)

    gate = await provisioner.provision(
        manual_spec([{"_id": "u1", "name": "Ana", "type": "user"}])
    )

    assert gate == ATTACHED_GATE
    create, attach = velocity.bodies
    assert "addManualVersionSignOffRule" in create["query"]
    assert "upsertPipelineGate" in attach["query"]
    assert attach["variables"] == {
        "pipelineId": "p1",
        "stageId": "s1",
        "ruleIds": ["r1"],
        "manualGateNotification": False,
    }


async def test_group_approvers_are_not_sent(provisioner, velocity):
    velocity.reply_data(addManualVersionSignOffRule={"_id": "r1"})
    velocity.reply_data(upsertPipelineGate=ATTACHED_GATE)

    await provisioner.provision(
        manual_spec(
            [
                {"_id": "u1", "name": "Ana", "type": "user"},
                {"_id": "g1", "name": "Release Managers", "type": "group"},
            ]
        )
    )

    create_input = velocity.bodies[0]["variables"]["input"]
    assert create_input == {
        "name": "Sign-off",
        "pipelineId": "p1",
        "approvers": [{"_id": "u1", "name": "Ana", "type": "user"}],
    }
    assert b"g1" not in velocity.requests[0].content
    assert b"Release Managers" not in velocity.requests[0].content


async def test_approver_type_defaults_to_user(provisioner, velocity):
    velocity.reply_data(addManualVersionSignOffRule={"_id": "r1"})
    velocity.reply_data(upsertPipelineGate=ATTACHED_GATE)

    await provisioner.provision(manual_spec([{"_id": "u1", "name": "Ana"}]))

    approvers = velocity.bodies[0]["variables"]["input"]["approvers"]
    assert approvers == [{"_id": "u1", "name": "Ana", "type": "user"}]


async def test_group_only_approvers_fail_before_any_request(provisioner, velocity):
    spec = manual_spec([{"_id": "g1", "name": "Release Managers", "type": "group"}])

    with pytest.raises(ValidationError, match="of type 'user'"):
        await provisioner.provision(spec)

    assert velocity.requests == []


@pytest.mark.parametrize(
    "spec_fields, message",
    [
        ({"gateName": "   "}, "gateName"),
        ({"manualApprovers": []}, "manualApprovers"),
        ({"manualApprovers": None}, "manualApprovers"),
        ({"gateType": "metric", "metricRule": {"description": "no refs"}}, "metricRule"),
        (
            {
                "gateType": "metric",
                "metricRule": {
                    "metricDefinition": {"id": "m1", "name": "MTTR"},
                    "description": "no dql",
                },
            },
            "metricRule",
        ),
        ({"gateType": "compliance"}, "complianceRule"),
        (
            {
                "gateType": "compliance",
                "complianceRule": {
                    "description": "no resource",
                    "dql": {"type": "lt", "field": "cves", "value": 1},
                },
            },
            "complianceRule",
        ),
        ({"gateType": "status", "statusRule": {"description": "x"}}, "statusRule"),
        ({"gateType": "approval"}, "Unsupported gate type"),
    ],
)
async def test_validation_failures_send_nothing(provisioner, velocity, spec_fields, message):
    spec = manual_spec([{"_id": "u1", "name": "Ana"}], **spec_fields)

    with pytest.raises(ValidationError, match=message):
        await provisioner.provision(spec)

    assert velocity.requests == []


async def test_create_failure_skips_attach(provisioner, velocity):
    errors = [{"message": "pipeline not found"}]
    velocity.reply(json_body={"data": None, "errors": errors})

    with pytest.raises(GraphQLError) as exc:
        await provisioner.provision(manual_spec([{"_id": "u1", "name": "Ana"}]))

    assert exc.value.errors == errors
    assert len(velocity.requests) == 1
    assert all("upsertPipelineGate" not in body["query"] for body in velocity.bodies)


async def test_attach_failure_leaves_rule_in_place(provisioner, velocity):
    velocity.reply_data(addStatusRule={"_id": "r9"})
    velocity.reply(503, text="unavailable")

    spec = manual_spec(
        None,
        gateType="status",
        statusRule={"status": "PASSED", "description": "Tests green"},
    )
    with pytest.raises(TransportError) as exc:
        await provisioner.provision(spec)

    assert exc.value.status_code == 503
    # create + attach only; no compensating delete
    assert len(velocity.requests) == 2


async def test_missing_rule_id(provisioner, velocity):
    velocity.reply_data(addStatusRule=None)

    spec = manual_spec(None, gateType="status", statusRule=STATUS_RULE)
    with pytest.raises(ResponseShapeError):
        await provisioner.provision(spec)

    assert len(velocity.requests) == 1


@pytest.mark.parametrize("rule", ["r1", ["r1"], {"_id": 7}, {"name": "no id"}])
async def test_malformed_rule_is_a_shape_error(provisioner, velocity, rule):
    velocity.reply_data(addStatusRule=rule)

    spec = manual_spec(None, gateType="status", statusRule=STATUS_RULE)
    with pytest.raises(ResponseShapeError, match="addStatusRule"):
        await provisioner.provision(spec)

    assert len(velocity.requests) == 1


async def test_metric_rule_payload(provisioner, velocity):
    velocity.reply_data(addAutomatedMetricRule={"_id": "r2"})
    velocity.reply_data(upsertPipelineGate=ATTACHED_GATE)

    spec = manual_spec(
        None,
        gateType="metric",
        gateName="MTTR gate",
        manualGateNotification=True,
        metricRule={
            "metricDefinition": {"id": "m1", "name": "MTTR"},
            "dql": {"type": "lt", "field": "value", "value": 4},
            "description": "MTTR under 4h",
            "timeRange": {"type": "DAY", "value": 7},
        },
    )
    await provisioner.provision(spec)

    create, attach = velocity.bodies
    assert "addAutomatedMetricRule" in create["query"]
    assert create["variables"]["input"] == {
        "pipelineId": "p1",
        "name": "MTTR gate",
        "metricDefinition": {"id": "m1", "name": "MTTR"},
        "dql": {"type": "lt", "field": "value", "value": 4},
        "description": "MTTR under 4h",
        "timeRange": {"type": "DAY", "value": 7},
    }
    assert attach["variables"]["ruleIds"] == ["r2"]
    assert attach["variables"]["manualGateNotification"] is True


async def test_compliance_rule_payload(provisioner, velocity):
    velocity.reply_data(addComplianceRule={"_id": "r3"})
    velocity.reply_data(upsertPipelineGate=ATTACHED_GATE)

    spec = manual_spec(
        None,
        gateType="compliance",
        complianceRule={
            "description": "No critical CVEs",
            "resource": "sonarqube",
            "dql": {"type": "eq", "field": "critical", "value": 0},
        },
    )
    await provisioner.provision(spec)

    assert velocity.bodies[0]["variables"]["input"] == {
        "pipelineId": "p1",
        "name": "Sign-off",
        "description": "No critical CVEs",
        "resource": "sonarqube",
        "dql": {"type": "eq", "field": "critical", "value": 0},
    }
    assert velocity.bodies[1]["variables"]["ruleIds"] == ["r3"]


async def test_create_rule_is_not_idempotent(provisioner, velocity):
    """Identical create requests yield distinct rules; nothing deduplicates."""
    velocity.reply_data(addStatusRule={"_id": "r1"})
    velocity.reply_data(addStatusRule={"_id": "r2"})

    spec = manual_spec(None, gateType="status", statusRule=STATUS_RULE)
    request = provisioner.validate(spec)
    first = await provisioner.create_rule(request)
    second = await provisioner.create_rule(request)

    assert first != second
    assert velocity.bodies[0] == velocity.bodies[1]
