import asyncio

import mcp.types as types
from mcp.server.lowlevel import Server

from orchestrator.search_orchestrator import INVALID_ARGUMENTS_TEXT, SearchOrchestrator
from search.contracts import SearchResult, SearchResultSet
from server.app import SearchToolServer, create_server


def _server(provider) -> SearchToolServer:
    return SearchToolServer(SearchOrchestrator(provider), name="tavily-search-server", version="0.1.0")


def test_lists_single_search_tool(make_provider):
    tools = _server(make_provider()).list_tools()
    assert [tool.name for tool in tools] == ["search"]

    schema = tools[0].inputSchema
    assert schema["required"] == ["query"]
    assert schema["properties"]["query"]["type"] == "string"
    assert schema["properties"]["type"]["enum"] == ["code", "docs", "debug", "learn"]
    assert schema["properties"]["type"]["default"] == "code"


def test_lists_one_example_resource(make_provider):
    resources = _server(make_provider()).list_resources()
    assert len(resources) == 1
    assert str(resources[0].uri).startswith("websearch://")
    assert resources[0].mimeType == "application/json"


def test_unknown_tool_returns_text(make_provider):
    provider = make_provider()
    content = asyncio.run(_server(provider).call_tool("fetch", {"query": "x"}))
    assert len(content) == 1
    assert content[0].type == "text"
    assert content[0].text == "Error: Unknown tool 'fetch'. Only 'search' is supported."
    assert provider.calls == []


def test_search_call_wraps_report_in_single_text_item(make_provider):
    provider = make_provider(
        result=SearchResultSet(
            answer=None,
            results=[SearchResult(url="https://ex.com", title="Ex", content="How to fix it")],
        )
    )
    content = asyncio.run(_server(provider).call_tool("search", {"query": "error", "type": "debug"}))
    assert len(content) == 1
    assert content[0].type == "text"
    assert content[0].text.startswith("Debugging Solutions:")
    assert "Fix:\nHow to fix it" in content[0].text


def test_invalid_arguments_return_text(make_provider):
    provider = make_provider()
    content = asyncio.run(_server(provider).call_tool("search", {}))
    assert content[0].text == INVALID_ARGUMENTS_TEXT
    assert provider.calls == []


def test_provider_failure_is_not_a_protocol_fault(make_provider):
    provider = make_provider(error=RuntimeError("Rate limit reached"))
    content = asyncio.run(_server(provider).call_tool("search", {"query": "q"}))
    assert content[0].text == "Rate limit exceeded. Please wait a moment before trying again."


def test_build_server_registers_mcp_server(make_provider):
    server = _server(make_provider()).build_server()
    assert isinstance(server, Server)
    assert server.name == "tavily-search-server"


def test_create_server_uses_config_identity(mock_env, monkeypatch, make_provider):
    monkeypatch.setenv("MCP_SERVER_NAME", "docs-search")
    tool_server = create_server(make_provider())
    assert tool_server.name == "docs-search"
    assert tool_server.version == "0.1.0"


def _dispatch(server: Server, request):
    return asyncio.run(server.request_handlers[type(request)](request)).root


def _call(name: str, arguments: dict) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


def test_sdk_list_handlers_advertise_tool_and_resource(make_provider):
    server = _server(make_provider()).build_server()

    tools = _dispatch(server, types.ListToolsRequest(method="tools/list")).tools
    assert [tool.name for tool in tools] == ["search"]

    resources = _dispatch(server, types.ListResourcesRequest(method="resources/list")).resources
    assert len(resources) == 1


def test_sdk_call_handler_returns_text_for_every_outcome(make_provider):
    provider = make_provider(error=RuntimeError("Invalid api_key provided"))
    server = _server(provider).build_server()

    cases = [
        (_call("search", {}), INVALID_ARGUMENTS_TEXT),
        (_call("fetch", {"query": "x"}), "Error: Unknown tool 'fetch'. Only 'search' is supported."),
        (
            _call("search", {"query": "x"}),
            "Authentication error occurred. Please check the API key configuration.",
        ),
    ]
    for request, expected in cases:
        result = _dispatch(server, request)
        assert result.isError is False
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == expected

    assert [query for query, _ in provider.calls] == ["x"]
