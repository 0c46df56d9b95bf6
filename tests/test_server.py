"""Tests for the MCP server glue."""

import asyncio

import pytest
from fastmcp.exceptions import ToolError
from mcp_devtools import server


def test_dispatch_returns_output():
    out = asyncio.run(server._dispatch("color_convert", color="red"))
    assert out["hex"] == "#ff0000"
    assert out["rgb"] == "rgb(255, 0, 0)"


def test_dispatch_error_becomes_tool_error():
    with pytest.raises(ToolError, match="unparseable_color: failed to parse color 'nope'"):
        asyncio.run(server._dispatch("color_convert", color="nope"))


def test_dispatch_validation_error():
    with pytest.raises(ToolError, match="^validation_error"):
        asyncio.run(server._dispatch("npm_dependencies_analyze", package_name=""))


def test_descriptions_come_from_registry():
    assert server._description("get_current_time") == "Get the current server time"
