"""Tests for tool discovery, argument validation and dispatch."""

import asyncio

import pydantic
import pytest
from mcp_devtools import registry
from mcp_devtools.registry import ToolResponse

EXPECTED_TOOLS = {
    "color_convert",
    "get_ip_address",
    "get_current_time",
    "execute_command",
    "get_environment",
    "get_working_directory",
    "list_old_downloads",
    "npm_dependencies_analyze",
}


def invoke(name, arguments=None) -> ToolResponse:
    return asyncio.run(registry.invoke(name, arguments))


class TestDiscover:
    def test_all_tools_registered(self):
        assert set(registry.all_tools()) == EXPECTED_TOOLS

    def test_every_tool_has_handler_and_description(self):
        for name, tool in registry.all_tools().items():
            assert tool._handler is not None, name
            assert tool.description, name

    def test_unknown_tool(self):
        response = invoke("does_not_exist", {})
        assert response.output is None
        assert response.error.kind == "not_found"
        assert "does_not_exist" in response.error.message


class TestValidation:
    @pytest.fixture
    def spy(self, monkeypatch):
        calls = []
        tool = registry.get("color_convert")
        monkeypatch.setattr(tool, "_handler", lambda params: calls.append(params))
        return calls

    def test_missing_field(self, spy):
        response = invoke("color_convert", {})
        assert response.error.kind == "validation_error"
        assert "color" in response.error.message
        assert response.error.tool == "color_convert"
        assert spy == []

    def test_unexpected_field(self, spy):
        response = invoke("color_convert", {"color": "red", "colour": "blue"})
        assert response.error.kind == "validation_error"
        assert "colour" in response.error.message
        assert spy == []

    def test_wrong_type(self, spy):
        response = invoke("color_convert", {"color": 255})
        assert response.error.kind == "validation_error"
        assert spy == []

    def test_no_arguments_tool_rejects_extras(self):
        response = invoke("get_current_time", {"zone": "UTC"})
        assert response.error.kind == "validation_error"

    def test_none_arguments_treated_as_empty(self):
        response = invoke("get_current_time", None)
        assert response.ok


class TestInvoke:
    def test_color_output(self):
        response = invoke("color_convert", {"color": "#ff5733"})
        assert response.ok
        assert response.error is None
        assert response.output["rgb"] == "rgb(255, 87, 51)"
        assert response.output["original"] == "#ff5733"
        assert set(response.output) == {
            "hex", "rgb", "hsl", "hsv", "cmyk", "lab", "xyz", "linear_rgb",
            "luminance", "is_light", "is_dark", "original",
        }

    def test_unparseable_color(self):
        response = invoke("color_convert", {"color": "not-a-color"})
        assert response.output is None
        assert response.error.kind == "unparseable_color"
        assert response.error.tool == "color_convert"
        assert response.error.detail == {"input": "not-a-color"}
        assert "not-a-color" in response.error.message


class TestToolResponse:
    def test_requires_output_or_error(self):
        with pytest.raises(pydantic.ValidationError):
            ToolResponse(tool="x")

    def test_rejects_both(self):
        with pytest.raises(pydantic.ValidationError):
            ToolResponse(tool="x", output={}, error={"kind": "k", "message": "m"})
