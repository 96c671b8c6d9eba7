"""Schema sources: local files and HTTP endpoints.

- `file` sources are read from disk and parsed as JSON or YAML.
- `api` sources are requested with httpx using the configured method/headers.
- `declarations` sources already contain TypeScript declarations and skip the
  type-generation engine.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import httpx
import structlog
import yaml

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.project_config import HttpMethod, SchemaFormat, SchemaSource, SourceType

logger = structlog.get_logger(__name__)


class SchemaSourceError(Exception):
    """A schema could not be read, fetched or parsed."""


def source_name(source: SchemaSource) -> str:
    """Document name for a source: the file stem of its path or URL path."""

    raw_path = urlparse(source.path).path if source.type is SourceType.API else source.path
    name = Path(raw_path).name
    for suffix in (".d.ts", ".ts"):
        if name.endswith(suffix):
            return name[: -len(suffix)] or "schema"
    return Path(name).stem or "schema"


def parse_schema_text(text: str, fmt: SchemaFormat) -> dict[str, Any]:
    try:
        data = json.loads(text) if fmt is SchemaFormat.JSON else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SchemaSourceError(f"Invalid {fmt.value} schema: {exc}") from exc
    if not isinstance(data, dict):
        raise SchemaSourceError(f"Schema must be an object, got {type(data).__name__}")
    return data


async def fetch_schema(
    source: SchemaSource,
    *,
    fmt: SchemaFormat = SchemaFormat.JSON,
    client: httpx.AsyncClient | None = None,
    settings: AppSettings | None = None,
) -> dict[str, Any]:
    """Load the schema described by `source`."""

    if source.type is SourceType.FILE:
        try:
            text = await asyncio.to_thread(Path(source.path).read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SchemaSourceError(f"Cannot read {source.path}: {exc}") from exc
        return parse_schema_text(text, fmt)

    if source.type is SourceType.API:
        return await _fetch_api_schema(source, fmt=fmt, client=client, settings=settings)

    raise SchemaSourceError(f"Source type '{source.type.value}' does not provide a schema")


async def _fetch_api_schema(
    source: SchemaSource,
    *,
    fmt: SchemaFormat,
    client: httpx.AsyncClient | None,
    settings: AppSettings | None,
) -> dict[str, Any]:
    method = (source.method or HttpMethod.GET).value
    owns_client = client is None
    client = client or build_async_client(settings)
    try:
        logger.debug("schema_request", method=method, url=source.path)
        response = await client.request(method, source.path, headers=source.headers)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise SchemaSourceError(f"Request to {source.path} failed: {exc}") from exc
    finally:
        if owns_client:
            await client.aclose()
    return parse_schema_text(response.text, fmt)


def read_declarations(source: SchemaSource) -> str:
    """Read a `declarations` source verbatim."""

    try:
        return Path(source.path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaSourceError(f"Cannot read {source.path}: {exc}") from exc
