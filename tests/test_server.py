from mcp import types

from velocity_mcp.mcp_server.server import build_registry, create_mcp_server


async def test_list_tools_exposes_the_catalog(executor, settings):
    server = create_mcp_server(build_registry(executor, settings))
    handler = server.request_handlers[types.ListToolsRequest]

    result = await handler(types.ListToolsRequest(method="tools/list"))

    tools = {tool.name: tool for tool in result.root.tools}
    assert len(tools) == 22
    assert tools["get_teams_by_tenant"].description == "Get all teams for a tenant"
    assert "tenantId" in tools["get_teams_by_tenant"].inputSchema["properties"]


async def test_call_tool_answers_with_one_text_block(executor, settings, velocity):
    velocity.reply_data(addNewTeam={"_id": "team-9", "name": "Core"})
    server = create_mcp_server(build_registry(executor, settings))
    handler = server.request_handlers[types.CallToolRequest]

    result = await handler(
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="create_team", arguments={"name": "Core"}),
        )
    )

    content = result.root.content
    assert len(content) == 1
    assert content[0].type == "text"
    assert content[0].text.startswith("Team created: {")
    assert velocity.bodies[0]["variables"] == {"name": "Core", "tenantId": "tenant-1"}


async def test_failed_call_is_still_text(executor, settings, velocity):
    velocity.reply(403, text="Forbidden")
    server = create_mcp_server(build_registry(executor, settings))
    handler = server.request_handlers[types.CallToolRequest]

    result = await handler(
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="get_teams_by_tenant", arguments={}),
        )
    )

    assert result.root.content[0].text == "Error retrieving teams: HTTP 403: Forbidden"
