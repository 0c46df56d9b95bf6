"""HTTP transport for the devtools dispatcher.

POST /tools/{name} with a JSON object of arguments; the body of every answer
is a ToolResponse with exactly one of `output` / `error` set.
"""

from datetime import datetime, timezone
from typing import Any

from fastapi import Body, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from mcp_devtools import registry
from mcp_devtools.config import Settings, configure_logging

app = FastAPI(title="mcp-devtools", description="Developer utility tools behind a uniform dispatch endpoint")

ERROR_STATUS = {
    "validation_error": 400,
    "not_found": 404,
    "unparseable_color": 422,
    "empty_result": 404,
    "external_resource_error": 502,
    "cancelled": 499,
}


class ToolInfo(BaseModel):
    name: str
    description: str
    input_schema: dict[str, Any]


@app.get("/tools", response_model=list[ToolInfo])
async def list_tools():
    """List registered tools with their argument schemas"""
    return [
        ToolInfo(name=t.name, description=t.description, input_schema=t.input_model.model_json_schema())
        for t in sorted(registry.all_tools().values(), key=lambda t: t.name)
    ]


@app.post("/tools/{name}", response_model=registry.ToolResponse)
async def call_tool(name: str, arguments: dict[str, Any] | None = Body(default=None)):
    """Invoke a tool by name"""
    response = await registry.invoke(name, arguments or {})
    status = 200 if response.error is None else ERROR_STATUS.get(response.error.kind, 500)
    return JSONResponse(status_code=status, content=response.model_dump(mode="json"))


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


def main() -> None:
    """Run the devtools HTTP server"""
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
