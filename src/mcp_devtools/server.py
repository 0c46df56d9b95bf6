"""MCP devtools server over stdio.

Each MCP tool is a thin typed wrapper that hands its arguments to
registry.invoke(); errors come back to the client as ToolError.
"""

from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from mcp_devtools import registry
from mcp_devtools.config import configure_logging

mcp = FastMCP(
    "mcp-devtools 🛠️",
    instructions="A collection of useful developer tools including color conversion and network information.",
)


def _description(name: str) -> str:
    return registry.get(name).description


async def _dispatch(name: str, **arguments: Any) -> dict[str, Any]:
    response = await registry.invoke(name, arguments)
    if response.error is not None:
        raise ToolError(f"{response.error.kind}: {response.error.message}")
    return response.output


@mcp.tool(name="color_convert", description=_description("color_convert"))
async def color_convert(color: str) -> dict[str, Any]:
    return await _dispatch("color_convert", color=color)


@mcp.tool(name="get_ip_address", description=_description("get_ip_address"))
async def get_ip_address() -> dict[str, Any]:
    return await _dispatch("get_ip_address")


@mcp.tool(name="get_current_time", description=_description("get_current_time"))
async def get_current_time() -> dict[str, Any]:
    return await _dispatch("get_current_time")


@mcp.tool(name="execute_command", description=_description("execute_command"))
async def execute_command(command: str, workdir: str | None = None) -> dict[str, Any]:
    return await _dispatch("execute_command", command=command, workdir=workdir)


@mcp.tool(name="get_environment", description=_description("get_environment"))
async def get_environment() -> dict[str, Any]:
    return await _dispatch("get_environment")


@mcp.tool(name="get_working_directory", description=_description("get_working_directory"))
async def get_working_directory() -> dict[str, Any]:
    return await _dispatch("get_working_directory")


@mcp.tool(name="list_old_downloads", description=_description("list_old_downloads"))
async def list_old_downloads(directory: str | None = None) -> dict[str, Any]:
    return await _dispatch("list_old_downloads", directory=directory)


@mcp.tool(name="npm_dependencies_analyze", description=_description("npm_dependencies_analyze"))
async def npm_dependencies_analyze(package_name: str, version: str | None = None) -> dict[str, Any]:
    return await _dispatch("npm_dependencies_analyze", package_name=package_name, version=version)


def main() -> None:
    """Run the devtools MCP server over stdio"""
    configure_logging()
    mcp.run()


if __name__ == "__main__":
    main()
