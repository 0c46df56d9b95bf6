"""Snapshot of the server process environment variables."""

import os

from pydantic import BaseModel, Field

from mcp_devtools.registry import Tool


class EnvironmentOutput(BaseModel):
    variables: dict[str, str] = Field(description="Environment variables by name")
    text: str = Field(description="NAME=value lines, sorted by name")


tool = Tool(name="get_environment", description="Get the environment variables of the server process")


@tool.handler
def run(params) -> EnvironmentOutput:
    variables = dict(sorted(os.environ.items()))
    return EnvironmentOutput(
        variables=variables,
        text="\n".join(f"{k}={v}" for k, v in variables.items()),
    )
