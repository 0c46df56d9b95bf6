"""Execute a shell command and capture its output.

The command runs through the platform shell (`sh -c` on POSIX, `cmd /C` on
Windows), so quoting, pipes and redirects behave as they would in a terminal.
A non-zero exit status is part of the result, not an error. Hitting
MCP_DEVTOOLS_EXEC_TIMEOUT or cancelling the call kills the shell together
with every process it started.
"""

import asyncio
import contextlib
import logging
import sys

import psutil
from pydantic import BaseModel, Field

from mcp_devtools.config import Settings
from mcp_devtools.errors import ExternalResourceError
from mcp_devtools.registry import Tool, ToolInput

logger = logging.getLogger(__name__)


class ExecInput(ToolInput):
    command: str = Field(min_length=1, description="Shell command to execute")
    workdir: str | None = Field(default=None, description="Working directory for the command")


class ExecOutput(BaseModel):
    stdout: str
    stderr: str
    exit_code: int
    output: str = Field(description="Combined STDOUT/STDERR report")


tool = Tool(
    name="execute_command",
    description="Execute a shell command and return its stdout, stderr and exit status",
    input_model=ExecInput,
)


def shell_argv(command: str) -> list[str]:
    if sys.platform == "win32":
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


def format_report(stdout: str, stderr: str, exit_code: int) -> str:
    report = f"STDOUT:\n{stdout}\n\nSTDERR:\n{stderr}\n"
    if exit_code != 0:
        report += f"\nError: exit status {exit_code}"
    return report


def _kill(proc: asyncio.subprocess.Process) -> None:
    """Kill the shell and every process it spawned."""
    if proc.returncode is not None:
        return
    try:
        children = psutil.Process(proc.pid).children(recursive=True)
    except psutil.Error:
        children = []
    with contextlib.suppress(ProcessLookupError):
        proc.kill()
    for child in children:
        with contextlib.suppress(psutil.Error):
            child.kill()


@tool.handler
async def run(params: ExecInput) -> ExecOutput:
    timeout = Settings.from_env().exec_timeout or None
    logger.debug("exec %r in %s", params.command, params.workdir or ".")
    try:
        proc = await asyncio.create_subprocess_exec(
            *shell_argv(params.command),
            cwd=params.workdir or None,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise ExternalResourceError(
            f"failed to start command {params.command!r}: {e}",
            detail={"command": params.command, "workdir": params.workdir},
        ) from e

    try:
        out, err = await asyncio.wait_for(proc.communicate(), timeout)
    except asyncio.TimeoutError:
        _kill(proc)
        await proc.wait()
        raise ExternalResourceError(
            f"command {params.command!r} timed out after {timeout}s",
            detail={"command": params.command, "timeout": timeout},
        ) from None
    except asyncio.CancelledError:
        _kill(proc)
        await proc.wait()
        raise

    stdout = out.decode(errors="replace")
    stderr = err.decode(errors="replace")
    exit_code = proc.returncode if proc.returncode is not None else -1
    return ExecOutput(
        stdout=stdout,
        stderr=stderr,
        exit_code=exit_code,
        output=format_report(stdout, stderr, exit_code),
    )
