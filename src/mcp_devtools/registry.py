"""Tool registration and dispatch.

Every module in mcp_devtools/tools/ that defines a module-level `tool`
object of type Tool is auto-registered by discover(). invoke() is the single
dispatch path used by both transports: it validates arguments against the
tool's input model before the handler runs, and returns a ToolResponse with
exactly one of `output` / `error` set.

Usage in a tool module:

    tool = Tool(name='color_convert', description='...', input_model=ColorInput)

    @tool.handler
    def run(params: ColorInput) -> ColorOutput:
        ...
"""

import asyncio
import importlib
import inspect
import logging
import pkgutil
from collections.abc import Callable, Mapping
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, model_validator

from mcp_devtools.errors import DevToolsError, NotFoundError, OperationCancelled, ValidationError

logger = logging.getLogger(__name__)


class ToolInput(BaseModel):
    """Base for tool argument models; unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class NoInput(ToolInput):
    pass


class ErrorInfo(BaseModel):
    kind: str
    message: str
    tool: str | None = None
    detail: dict[str, Any] = {}


class ToolResponse(BaseModel):
    tool: str
    output: dict[str, Any] | None = None
    error: ErrorInfo | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "ToolResponse":
        if (self.output is None) == (self.error is None):
            raise ValueError("exactly one of output or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


class Tool:
    """A self-registering tool: name, description, input model and handler."""

    def __init__(self, name: str, description: str = "", input_model: type[ToolInput] = NoInput):
        self.name = name
        self.description = description
        self.input_model = input_model
        self._handler: Callable | None = None

    def handler(self, fn: Callable) -> Callable:
        """Decorator to register the handler function."""
        self._handler = fn
        return fn

    def validate(self, arguments: Mapping[str, Any]) -> ToolInput:
        try:
            return self.input_model.model_validate(dict(arguments))
        except pydantic.ValidationError as e:
            problems = e.errors(include_url=False, include_context=False, include_input=False)
            summary = "; ".join(f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}" for err in problems)
            raise ValidationError(
                f"invalid arguments for {self.name}: {summary}",
                tool=self.name,
                detail={"errors": problems},
            ) from None

    async def call(self, params: ToolInput) -> BaseModel:
        if self._handler is None:
            raise RuntimeError(f"Tool {self.name} has no handler")
        result = self._handler(params)
        if inspect.isawaitable(result):
            result = await result
        return result


_registry: dict[str, Tool] = {}


def discover() -> dict[str, Tool]:
    """Import all tool modules and return the registry."""
    if _registry:
        return _registry

    import mcp_devtools.tools as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith("_"):
            continue
        module = importlib.import_module(f"mcp_devtools.tools.{modname}")
        tool = getattr(module, "tool", None)
        if isinstance(tool, Tool):
            _registry[tool.name] = tool

    return _registry


def get(name: str) -> Tool:
    """Get a tool by name."""
    reg = discover()
    if name not in reg:
        raise NotFoundError(f"Unknown tool: {name}. Available: {', '.join(sorted(reg))}", tool=name)
    return reg[name]


def all_tools() -> dict[str, Tool]:
    """Return all registered tools."""
    return discover()


async def invoke(name: str, arguments: Mapping[str, Any] | None = None) -> ToolResponse:
    """Validate arguments, run the named tool and wrap its result or error."""
    logger.debug("invoke %s args=%s", name, sorted((arguments or {}).keys()))
    try:
        tool = get(name)
        params = tool.validate(arguments or {})
        output = await tool.call(params)
    except DevToolsError as e:
        if e.tool is None:
            e.tool = name
        logger.info("%s failed: [%s] %s", name, e.kind, e.message)
        return ToolResponse(tool=name, error=ErrorInfo(**e.to_dict()))
    except asyncio.CancelledError:
        # the cancellation is answered with a response, so the request is consumed
        asyncio.current_task().uncancel()
        logger.warning("%s cancelled", name)
        err = OperationCancelled(f"{name} was cancelled", tool=name)
        return ToolResponse(tool=name, error=ErrorInfo(**err.to_dict()))
    return ToolResponse(tool=name, output=output.model_dump(mode="json"))
