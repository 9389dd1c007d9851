from __future__ import annotations

from typing import Any, Awaitable, Callable, Mapping, Optional
from urllib.parse import quote

import httpx

from core.errors import ExternalServiceError, NotFoundError

RequestFn = Callable[..., Awaitable[httpx.Response]]


def _json_or_raise(resp: httpx.Response, *, not_found: str, context: str) -> Mapping[str, Any]:
    if resp.status_code == 404:
        raise NotFoundError(not_found)
    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise ExternalServiceError(f"GitHub request failed ({context}): {e}") from e
    try:
        data = resp.json()
    except ValueError as e:
        raise ExternalServiceError(f"Invalid JSON from GitHub ({context})") from e
    if not isinstance(data, Mapping):
        raise ExternalServiceError(f"Unexpected GitHub response ({context})")
    return data


async def fetch_default_branch(
    request: RequestFn,
    client: httpx.AsyncClient,
    *,
    owner: str,
    repo: str,
) -> str:
    resp = await request(client, f"/repos/{owner}/{repo}")
    data = _json_or_raise(resp, not_found=f"Repository not found: {owner}/{repo}", context="repository")
    default_branch = str(data.get("default_branch") or "").strip()
    if not default_branch:
        raise ExternalServiceError(f"Repository {owner}/{repo} reports no default branch")
    return default_branch


async def fetch_branch_commit_sha(
    request: RequestFn,
    client: httpx.AsyncClient,
    *,
    owner: str,
    repo: str,
    branch: str,
) -> str:
    # Git refs API: heads/<branch> points at the branch's latest commit
    resp = await request(client, f"/repos/{owner}/{repo}/git/ref/heads/{quote(branch)}")
    data = _json_or_raise(resp, not_found=f"Branch not found: {branch}", context="ref")
    try:
        return str(data["object"]["sha"])
    except (KeyError, TypeError) as e:
        raise ExternalServiceError(f"Malformed ref response for branch {branch}") from e


async def fetch_commit_tree_sha(
    request: RequestFn,
    client: httpx.AsyncClient,
    *,
    owner: str,
    repo: str,
    commit_sha: str,
) -> str:
    resp = await request(client, f"/repos/{owner}/{repo}/git/commits/{commit_sha}")
    data = _json_or_raise(resp, not_found=f"Commit not found: {commit_sha}", context="commit")
    try:
        return str(data["tree"]["sha"])
    except (KeyError, TypeError) as e:
        raise ExternalServiceError(f"Malformed commit response for {commit_sha}") from e


async def resolve_tree_sha(
    request: RequestFn,
    client: httpx.AsyncClient,
    *,
    owner: str,
    repo: str,
    branch: Optional[str] = None,
) -> str:
    """Resolve branch -> commit -> root tree SHA.

    When `branch` is None the repository's default branch is looked up first.
    """
    target = branch or await fetch_default_branch(request, client, owner=owner, repo=repo)
    commit_sha = await fetch_branch_commit_sha(request, client, owner=owner, repo=repo, branch=target)
    return await fetch_commit_tree_sha(request, client, owner=owner, repo=repo, commit_sha=commit_sha)
