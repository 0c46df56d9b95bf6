"""List files in the Downloads directory that have not been modified in a long time.

The cutoff is MCP_DEVTOOLS_STALE_MONTHS calendar months (default 3) before
now. Months are subtracted on the calendar and day overflow rolls forward, so
three months before May 31 is March 3 (or March 2 in a leap year).
"""

import asyncio
import logging
import os
import platform
from datetime import datetime, timedelta
from pathlib import Path

from pydantic import BaseModel, Field

from mcp_devtools.config import Settings
from mcp_devtools.errors import ExternalResourceError
from mcp_devtools.registry import Tool, ToolInput

logger = logging.getLogger(__name__)


class DownloadsInput(ToolInput):
    directory: str | None = Field(default=None, description="Directory to scan (default: ~/Downloads)")


class OldFile(BaseModel):
    name: str = Field(description="Name of the old file")
    last_modify: datetime = Field(description="Last modify time of the file")
    size: int = Field(description="Size of the file in bytes")


class OldDownloadsOutput(BaseModel):
    system: str = Field(description="Operating system of the server")
    directory: str = Field(description="Directory that was scanned")
    files: list[OldFile] = Field(description="Files older than the cutoff")


tool = Tool(
    name="list_old_downloads",
    description="List files in the Downloads directory that haven't been modified in a long time",
    input_model=DownloadsInput,
)


def months_before(moment: datetime, months: int) -> datetime:
    index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(index, 12)
    first = moment.replace(year=year, month=month + 1, day=1)
    return first + timedelta(days=moment.day - 1)


def scan(directory: Path, cutoff: datetime) -> list[OldFile]:
    try:
        entries = sorted(os.scandir(directory), key=lambda e: e.name)
    except OSError as e:
        raise ExternalResourceError(
            f"failed to read directory {str(directory)!r}: {e}",
            detail={"directory": str(directory)},
        ) from e

    old = []
    for entry in entries:
        try:
            st = entry.stat(follow_symlinks=False)
        except OSError as e:
            logger.debug("skipping %s: %s", entry.name, e)
            continue
        modified = datetime.fromtimestamp(st.st_mtime).astimezone()
        if modified < cutoff:
            old.append(OldFile(name=entry.name, last_modify=modified, size=st.st_size))
    return old


@tool.handler
async def run(params: DownloadsInput) -> OldDownloadsOutput:
    settings = Settings.from_env()
    directory = Path(params.directory).expanduser() if params.directory else settings.downloads_dir
    cutoff = months_before(datetime.now().astimezone(), settings.stale_months)
    files = await asyncio.to_thread(scan, directory, cutoff)
    return OldDownloadsOutput(system=platform.system().lower(), directory=str(directory), files=files)
