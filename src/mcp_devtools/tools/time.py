"""Current server time in RFC 1123 format."""

from datetime import datetime

from pydantic import BaseModel, Field

from mcp_devtools.registry import Tool

RFC1123 = "%a, %d %b %Y %H:%M:%S %Z"


class CurrentTimeOutput(BaseModel):
    time: str = Field(description="Current server time in RFC1123 format")


tool = Tool(name="get_current_time", description="Get the current server time")


def format_rfc1123(moment: datetime) -> str:
    """Format an aware datetime; %Z falls back to the numeric offset when the zone has no name."""
    if not moment.tzname():
        return moment.strftime("%a, %d %b %Y %H:%M:%S %z")
    return moment.strftime(RFC1123)


@tool.handler
def run(params) -> CurrentTimeOutput:
    now = datetime.now().astimezone()
    return CurrentTimeOutput(time=f"Current server time is: {format_rfc1123(now)}")
