"""GitHub client module: list repository trees and read file contents.

This module provides a small async client focused on the two operations
the resources need: listing every blob of a repository (Git Trees API,
resolved through the branch ref and its commit) and reading a single
file (Contents API). Every call opens a short-lived httpx.AsyncClient;
nothing is cached and failed requests are not retried.
"""

from __future__ import annotations

import base64
import logging
from typing import Any, List, Mapping, Optional
from urllib.parse import quote

import httpx

from core.errors import ExternalServiceError, NotFoundError, ValidationError
from core.models import TreeEntry

from .inputs import normalize_branch, normalize_path
from .refs import resolve_tree_sha

logger = logging.getLogger(__name__)


class GitHubClient:
    """Async GitHub client bound to one access token.

    Purpose:
      - list_tree_entries(owner, repo, branch=None) -> List[TreeEntry]
      - read_file_text(owner, repo, path, ref=None) -> str

    The token is held by reference only; it is sent as a bearer token and
    never logged.
    """

    BASE_URL = "https://api.github.com"
    JSON_ACCEPT = "application/vnd.github+json"
    USER_AGENT = "github-resources-mcp"

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 20.0,
        verify: bool = True,
    ) -> None:
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = float(timeout)
        self._verify = bool(verify)
        self._headers = self._build_headers(token)

    async def list_tree_entries(
        self,
        *,
        owner: str,
        repo: str,
        branch: Optional[str] = None,
    ) -> List[TreeEntry]:
        """List every blob in the repository tree, in the order GitHub reports them."""
        async with self._create_client() as client:
            tree_sha = await resolve_tree_sha(
                self._request,
                client,
                owner=owner,
                repo=repo,
                branch=normalize_branch(branch),
            )
            # Git Trees API expects recursive=1 to list nested entries in one call
            resp = await self._request(
                client,
                f"/repos/{owner}/{repo}/git/trees/{tree_sha}",
                params={"recursive": "1"},
            )
            if resp.status_code == 404:
                raise NotFoundError(f"Tree not found: {tree_sha}")

            self._raise_for_status(resp, context="list_tree_entries(tree)")
            payload = self._json(resp, context="list_tree_entries(tree)")
            if payload.get("truncated"):
                logger.warning("Tree listing for %s/%s was truncated by GitHub", owner, repo)

            return [
                TreeEntry(
                    path=item["path"],
                    name=item["path"].split("/")[-1],
                    size=int(item.get("size") or 0),
                )
                for item in payload.get("tree") or []
                if item.get("type") == "blob" and isinstance(item.get("path"), str) and item["path"]
            ]

    async def read_file_text(
        self,
        *,
        owner: str,
        repo: str,
        path: str,
        ref: Optional[str] = None,
    ) -> str:
        """Read one file via the Contents API and decode its base64 body as UTF-8."""
        path_clean = normalize_path(path)
        params = {"ref": ref} if ref else None

        async with self._create_client() as client:
            resp = await self._request(client, f"/repos/{owner}/{repo}/contents/{quote(path_clean)}", params=params)

            if resp.status_code == 404:
                raise NotFoundError(f"File not found: {path_clean}")

            self._raise_for_status(resp, context="read_file_text(contents)")
            try:
                data = resp.json()
            except ValueError as e:
                raise ExternalServiceError(f"Invalid JSON from GitHub (read_file_text): {e}") from e

        # A JSON array means the path is a directory listing
        if not isinstance(data, Mapping) or data.get("type") != "file":
            raise ValidationError(f"Path {path_clean} is not a file")

        # Files over 1 MB come back with encoding "none" and an empty body
        encoding = data.get("encoding")
        if encoding != "base64":
            raise ExternalServiceError(
                f"File {path_clean} has no inline content (encoding={encoding!r})"
            )

        return decode_content(data.get("content") or "")

    # --- HTTP helpers ---

    def _build_headers(self, token: Optional[str]) -> dict[str, str]:
        headers = {
            "Accept": self.JSON_ACCEPT,
            "User-Agent": self.USER_AGENT,
        }
        token_clean = (token or "").strip()
        if token_clean:
            headers["Authorization"] = f"Bearer {token_clean}"
        else:
            logger.warning("GitHub client initialized without token (rate limited)")
        return headers

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout,
            verify=self._verify,
        )

    def _external(self, context: str, err: BaseException) -> ExternalServiceError:
        return ExternalServiceError(f"GitHub request failed ({context}): {err}")

    def _raise_for_status(self, resp: httpx.Response, *, context: str) -> None:
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._external(context, e) from e

    def _json(self, resp: httpx.Response, *, context: str) -> Mapping[str, Any]:
        try:
            data = resp.json()
        except ValueError as e:
            raise self._external(context, e) from e
        if not isinstance(data, Mapping):
            raise ExternalServiceError(f"Unexpected GitHub response ({context})")
        return data

    async def _request(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """Single GET; transport failures become ExternalServiceError."""
        logger.debug("GET %s", url)
        try:
            resp = await client.get(url, params=dict(params or {}))
        except httpx.HTTPError as e:
            raise self._external(f"GET {url}", e) from e
        logger.debug("GET %s -> %d", url, resp.status_code)
        return resp


def decode_content(encoded: str) -> str:
    """Decode a Contents API body (base64, possibly line-wrapped) to text."""
    raw = base64.b64decode(encoded or "")
    return raw.decode("utf-8", errors="replace")
