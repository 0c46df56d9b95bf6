"""Look up an npm package and its direct dependencies.

Fetches the package document from the npm registry (MCP_DEVTOOLS_NPM_REGISTRY,
default https://registry.npmjs.org) and resolves either the requested version
or the `latest` dist-tag. Scoped names such as @types/node are supported.
"""

import asyncio
import logging
from typing import Any
from urllib.parse import quote

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mcp_devtools.config import Settings
from mcp_devtools.errors import ExternalResourceError, NotFoundError
from mcp_devtools.registry import Tool, ToolInput

logger = logging.getLogger(__name__)

# Single session for connection reuse
_session = requests.Session()
_session.headers.update({"Accept": "application/json"})


class NpmPackageInput(ToolInput):
    model_config = ConfigDict(str_strip_whitespace=True)

    package_name: str = Field(min_length=1, description="npm package name, e.g. 'express' or '@types/node'")
    version: str | None = Field(default=None, description="Exact version to inspect (default: latest)")


class NpmPackageOutput(BaseModel):
    name: str
    version: str = Field(description="Resolved version")
    latest_version: str
    description: str
    dependencies: dict[str, str] = Field(description="Direct dependencies and their version ranges")
    dependency_count: int


tool = Tool(
    name="npm_dependencies_analyze",
    description="Analyze an npm package: resolved version, latest version, description and direct dependencies",
    input_model=NpmPackageInput,
)


def package_url(registry: str, name: str) -> str:
    # the registry expects the scope slash escaped: @types%2Fnode
    return f"{registry.rstrip('/')}/{quote(name, safe='@')}"


def fetch_packument(name: str, settings: Settings) -> dict[str, Any]:
    url = package_url(settings.npm_registry, name)
    try:
        resp = _session.get(url, timeout=settings.http_timeout)
    except requests.RequestException as e:
        raise ExternalResourceError(f"failed to fetch package {name!r}: {e}", detail={"url": url}) from e

    if resp.status_code == 404:
        raise NotFoundError(f"package {name!r} not found", detail={"package": name})
    if resp.status_code != 200:
        logger.warning("[npm] status=%s url=%s", resp.status_code, url)
        raise ExternalResourceError(
            f"registry returned HTTP {resp.status_code} for package {name!r}",
            detail={"url": url, "status": resp.status_code},
        )
    try:
        doc = resp.json()
    except ValueError as e:
        raise ExternalResourceError(f"registry returned invalid JSON for package {name!r}", detail={"url": url}) from e
    if not isinstance(doc, dict):
        raise _unexpected(name)
    return doc


def _unexpected(name: str) -> ExternalResourceError:
    return ExternalResourceError(
        f"registry returned an unexpected document for package {name!r}",
        detail={"package": name},
    )


def summarize(doc: dict[str, Any], name: str, version: str | None) -> NpmPackageOutput:
    versions = doc.get("versions") or {}
    tags = doc.get("dist-tags") or {}
    if not isinstance(versions, dict) or not isinstance(tags, dict):
        raise _unexpected(name)
    latest = tags.get("latest", "")
    if not isinstance(latest, str):
        raise _unexpected(name)
    resolved = version or latest
    manifest = versions.get(resolved)
    if manifest is None:
        raise NotFoundError(
            f"version {resolved!r} of package {name!r} not found",
            detail={"package": name, "version": resolved},
        )
    if not isinstance(manifest, dict) or not isinstance(manifest.get("dependencies") or {}, dict):
        raise _unexpected(name)
    dependencies = dict(manifest.get("dependencies") or {})
    return NpmPackageOutput(
        name=doc.get("name", name),
        version=resolved,
        latest_version=latest,
        description=manifest.get("description") or doc.get("description") or "",
        dependencies=dependencies,
        dependency_count=len(dependencies),
    )


@tool.handler
async def run(params: NpmPackageInput) -> NpmPackageOutput:
    settings = Settings.from_env()
    doc = await asyncio.to_thread(fetch_packument, params.package_name, settings)
    try:
        return summarize(doc, params.package_name, params.version)
    except ValidationError as e:
        raise _unexpected(params.package_name) from e
