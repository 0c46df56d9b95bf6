"""Error taxonomy shared by every tool and both transports."""

from typing import Any


class DevToolsError(Exception):
    """Base class for errors that end a single tool invocation."""

    kind = "error"

    def __init__(self, message: str, *, tool: str | None = None, detail: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.tool = tool
        self.detail = detail or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "tool": self.tool,
            "detail": self.detail,
        }


class ValidationError(DevToolsError):
    """Missing, malformed or unexpected input field."""

    kind = "validation_error"


class UnparseableColor(DevToolsError):
    """No recognized color syntax matched the input text."""

    kind = "unparseable_color"

    def __init__(self, text: str, *, tool: str | None = None):
        super().__init__(f"failed to parse color '{text}'", tool=tool, detail={"input": text})
        self.text = text


class ExternalResourceError(DevToolsError):
    """An OS, filesystem or network call failed."""

    kind = "external_resource_error"


class NotFoundError(DevToolsError):
    """The requested thing does not exist (package, version, tool)."""

    kind = "not_found"


class EmptyResultError(DevToolsError):
    """The operation completed but found nothing to report."""

    kind = "empty_result"


class OperationCancelled(DevToolsError):
    """The caller cancelled the invocation while an external call was in flight."""

    kind = "cancelled"
