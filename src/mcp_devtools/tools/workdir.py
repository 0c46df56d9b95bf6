"""Current working directory of the server process."""

import os

from pydantic import BaseModel, Field

from mcp_devtools.errors import ExternalResourceError
from mcp_devtools.registry import Tool


class WorkingDirectoryOutput(BaseModel):
    path: str = Field(description="Absolute path of the working directory")


tool = Tool(name="get_working_directory", description="Get the current working directory of the server")


@tool.handler
def run(params) -> WorkingDirectoryOutput:
    try:
        path = os.getcwd()
    except OSError as e:
        # the directory was removed out from under the process
        raise ExternalResourceError(f"failed to get working directory: {e}") from e
    return WorkingDirectoryOutput(path=path)
