"""Server bootstrap for the GitHub resources MCP service.

Creates the FastMCP instance, configures logging, registers one resource
per file of the configured repository and starts the MCP server (stdio
transport).
"""

import asyncio
import logging
import sys

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient
from config import GITHUB_API_URL, GITHUB_TIMEOUT, GITHUB_TOKEN, HTTP_VERIFY, LOG_LEVEL
from core.models import RepositoryConfig
from resources.registry import register_resources

mcp = FastMCP("github-resources-mcp")


def configure_logging(level: str = LOG_LEVEL) -> None:
    # stdout carries the stdio transport, so diagnostics go to stderr
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


async def register_all(server: FastMCP = mcp) -> None:
    github_client = GitHubClient(
        token=GITHUB_TOKEN,
        base_url=GITHUB_API_URL,
        timeout=GITHUB_TIMEOUT,
        verify=HTTP_VERIFY,
    )
    await register_resources(
        server,
        GITHUB_TOKEN,
        RepositoryConfig.from_env(),
        client=github_client,
    )


def main() -> None:
    configure_logging()
    asyncio.run(register_all())
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
