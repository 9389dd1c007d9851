"""File resources backed by a GitHub repository tree.

create_file_resources lists the configured repository once and returns one
FileResource per blob. Metadata is computed eagerly; file bodies are only
fetched when a FileResource's handler is awaited.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from clients.github import GitHubClient
from clients.github.inputs import resolve_coordinate
from config import GITHUB_API_URL, GITHUB_TIMEOUT, HTTP_VERIFY
from core.errors import ContentFetchError, GitHubResourcesError, TreeListingError
from core.mime import guess_mime_type
from core.models import ContentRecord, RepositoryConfig, TreeEntry

logger = logging.getLogger(__name__)

URI_PREFIX = "github://file/"


class FileResource:
    """One repository file exposed as an MCP resource.

    All metadata is fixed at construction from the tree entry. The client
    (and therefore the access token) is held by reference for later reads.
    """

    __slots__ = ("_client", "_owner", "_repo", "_branch", "_entry", "_mime_type")

    def __init__(
        self,
        *,
        client: GitHubClient,
        owner: str,
        repo: str,
        entry: TreeEntry,
        branch: Optional[str] = None,
    ) -> None:
        self._client = client
        self._owner = owner
        self._repo = repo
        self._branch = branch
        self._entry = entry
        self._mime_type = guess_mime_type(entry.name)

    @property
    def name(self) -> str:
        return self._entry.path

    @property
    def uri(self) -> str:
        return f"{URI_PREFIX}{self._entry.path}"

    @property
    def title(self) -> str:
        return self._entry.name

    @property
    def description(self) -> str:
        return f"File: {self._entry.path} ({self._entry.size} bytes)"

    @property
    def mime_type(self) -> str:
        return self._mime_type

    @property
    def size(self) -> int:
        return self._entry.size

    @property
    def path(self) -> str:
        return self._entry.path

    async def handler(self, uri: str) -> List[ContentRecord]:
        """Fetch and decode the file body.

        `uri` is echoed back as-is in the record. Every call hits GitHub.
        Raises ContentFetchError naming the path when the path is not a single
        file or the request fails.
        """
        try:
            text = await self._client.read_file_text(
                owner=self._owner,
                repo=self._repo,
                path=self._entry.path,
                ref=self._branch,
            )
        except (GitHubResourcesError, ValueError) as e:
            raise ContentFetchError(f"Failed to read file {self._entry.path}: {e}") from e

        return [
            ContentRecord(
                uri=str(uri),
                text=text,
                mime_type=self.mime_type,
                title=self.title,
                description=self.description,
                size=self.size,
            )
        ]

    def __repr__(self) -> str:
        return f"FileResource(uri={self.uri!r}, size={self.size})"


async def list_files(
    client: GitHubClient,
    *,
    owner: str,
    repo: str,
    branch: Optional[str] = None,
) -> List[TreeEntry]:
    """List blob entries of the repository; any failure becomes TreeListingError."""
    try:
        return await client.list_tree_entries(owner=owner, repo=repo, branch=branch)
    except GitHubResourcesError as e:
        raise TreeListingError(f"Error fetching files from tree of {owner}/{repo}: {e}") from e


async def create_file_resources(
    access_token: Optional[str],
    config: RepositoryConfig,
    *,
    client: Optional[GitHubClient] = None,
) -> List[FileResource]:
    """Build one FileResource per file of the configured repository.

    Never raises: a missing or malformed repository name, an empty tree and
    any GitHub failure are logged and yield an empty list.
    """
    try:
        coordinate = resolve_coordinate(config.repository, config.branch)
    except GitHubResourcesError as e:
        logger.error("%s", e)
        return []

    owner, repo = coordinate.owner, coordinate.name
    logger.info("Fetching files from repository: %s", coordinate.full_name)

    try:
        gh = client or GitHubClient(
            token=access_token,
            base_url=GITHUB_API_URL,
            timeout=GITHUB_TIMEOUT,
            verify=HTTP_VERIFY,
        )
        entries = await list_files(gh, owner=owner, repo=repo, branch=coordinate.branch)
    except Exception as e:
        logger.error("Failed to create file resources: %s", e)
        return []

    if not entries:
        logger.warning("No files found in repository %s", coordinate.full_name)
        return []

    logger.info("Found %d files in repository %s", len(entries), coordinate.full_name)
    return [
        FileResource(client=gh, owner=owner, repo=repo, entry=entry, branch=coordinate.branch)
        for entry in entries
    ]
