"""Attach repository resources to a FastMCP server.

Registers every resource produced by create_file_resources under its own
name and URI. Reads are delegated to the resource's handler.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, List, Optional, Set

from mcp.server.fastmcp import FastMCP
from pydantic import AnyUrl, TypeAdapter

from clients.github import GitHubClient
from core.interfaces import MCPResource
from core.models import RepositoryConfig
from resources.files import create_file_resources

logger = logging.getLogger(__name__)

_URI_ADAPTER = TypeAdapter(AnyUrl)


def resource_key(uri: str) -> str:
    """Return the normalized URI FastMCP lists and looks the resource up by.

    Spaces and non-ASCII characters are percent-encoded, so distinct paths
    such as "a b.txt" and "a%20b.txt" share one key.
    """
    return str(_URI_ADAPTER.validate_python(uri))


def _make_reader(resource: MCPResource) -> Callable[[], Awaitable[str]]:
    # Bind each reader to its own resource; FastMCP calls it with no arguments
    async def read() -> str:
        records = await resource.handler(resource.uri)
        return records[0].text

    read.__name__ = f"read_{resource.name}"
    return read


def register_resource(mcp: FastMCP, resource: MCPResource) -> None:
    mcp.resource(
        resource.uri,
        name=resource.name,
        title=resource.title,
        description=resource.description,
        mime_type=resource.mime_type,
        meta={"size": resource.size} if resource.size is not None else None,
    )(_make_reader(resource))


async def register_resources(
    mcp: FastMCP,
    access_token: Optional[str],
    config: RepositoryConfig,
    *,
    client: Optional[GitHubClient] = None,
) -> List[MCPResource]:
    """
    Register all repository file resources with the MCP server.

    Enumeration completes before the first registration. An unreachable or
    misconfigured repository registers nothing.
    """
    resources: List[MCPResource] = list(
        await create_file_resources(access_token, config, client=client)
    )

    registered: List[MCPResource] = []
    seen: Set[str] = set()
    for resource in resources:
        try:
            key = resource_key(resource.uri)
            if key in seen:
                logger.warning("Skipping resource %s: URI %s is already registered", resource.name, key)
                continue
            register_resource(mcp, resource)
        except ValueError as e:
            # FastMCP rejects URIs it cannot parse or that look like templates
            logger.warning("Skipping resource %s: %s", resource.uri, e)
            continue
        seen.add(key)
        registered.append(resource)

    logger.info("Registered %d resources", len(registered))
    return registered
