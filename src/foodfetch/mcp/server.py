"""MCP server exposing recipe lookups."""

import asyncio

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from ..config import get_settings
from ..errors import FoodfetchError
from ..models.display import InfoLevel
from ..services.corpus import load_corpus
from ..services.mealdb import MealDBService
from ..services.reports import render_reports
from ..services.search import SearchResolver

INFOS_SCHEMA = {
    "type": "array",
    "items": {"type": "string", "enum": ["links", "instructions"]},
    "description": "Extra sections to include (default: links and instructions)",
}


def info_level(names: list[str] | None) -> InfoLevel:
    """Map tool arguments to an info level. Images are never drawn here."""
    if names is None:
        return InfoLevel.LINKS | InfoLevel.INSTRUCTIONS
    return InfoLevel.from_names(n for n in names if n.lower() != "all")


async def lookup(
    resolver: SearchResolver,
    service: MealDBService,
    keyword: str | None,
    infos: list[str] | None,
) -> str:
    """Resolve a keyword (or a random meal) into uncolored report text."""
    outcome = await resolver.resolve(keyword)
    reports = await render_reports(
        outcome.records, info_level(infos), service, color=False
    )
    text = "\n\n".join(reports)
    if outcome.advisory:
        text = f"{outcome.advisory}\n\n{text}"
    return text


def create_mcp_server() -> Server:
    """Create and configure the MCP server."""
    server = Server("foodfetch")
    settings = get_settings()

    mealdb = MealDBService(base_url=settings.api_base_url, timeout=settings.timeout)
    resolver = SearchResolver(catalog=mealdb, corpus=load_corpus(settings.corpus_path))

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return [
            Tool(
                name="search_recipe",
                description="Find a recipe on TheMealDB by keyword. Falls back to the closest known meal name when nothing matches exactly.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "keyword": {
                            "type": "string",
                            "description": "Meal name or part of it (e.g. 'carbonara')",
                        },
                        "infos": INFOS_SCHEMA,
                    },
                    "required": ["keyword"],
                },
            ),
            Tool(
                name="random_recipe",
                description="Fetch a random recipe from TheMealDB",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "infos": INFOS_SCHEMA,
                    },
                },
            ),
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> list[TextContent]:
        try:
            if name == "search_recipe":
                text = await lookup(
                    resolver, mealdb, arguments["keyword"], arguments.get("infos")
                )
                return [TextContent(type="text", text=text)]

            elif name == "random_recipe":
                text = await lookup(resolver, mealdb, None, arguments.get("infos"))
                return [TextContent(type="text", text=text)]

            else:
                return [TextContent(type="text", text=f"Unknown tool: {name}")]

        except FoodfetchError as e:
            return [TextContent(type="text", text=f"Error: {str(e)}")]

    return server


async def main():
    """Run the MCP server."""
    server = create_mcp_server()
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
