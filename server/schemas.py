"""MCP tool and resource descriptors advertised by the search server."""

import mcp.types as types

from search.contracts import SearchCategory

SEARCH_TOOL_NAME = "search"

SEARCH_INPUT_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "query": {
            "type": "string",
            "description": "Search query - be specific about programming language, framework, or error message",
        },
        "type": {
            "type": "string",
            "description": "Type of technical search needed",
            "enum": [category.value for category in SearchCategory],
            "default": SearchCategory.CODE.value,
        },
    },
    "required": ["query"],
}

SEARCH_TOOL = types.Tool(
    name=SEARCH_TOOL_NAME,
    description=(
        "AI-powered technical search optimized for coding assistance. Use this to find code "
        "examples, documentation, debug solutions, and learning resources."
    ),
    inputSchema=SEARCH_INPUT_SCHEMA,
)

# Illustrative only; the server does not serve resource reads
EXAMPLE_RESOURCE = types.Resource(
    uri="websearch://search?query=react%20hooks%20useEffect%20example&type=code",
    name="Code search example for React hooks",
    mimeType="application/json",
    description="Find code examples and implementation patterns using Tavily API",
)


def text_content(text: str) -> list[types.TextContent]:
    """Wrap report text in the single-item content list every tool call returns."""
    return [types.TextContent(type="text", text=text)]
