from __future__ import annotations

import re
from typing import Optional, Tuple

from core.errors import ValidationError
from core.models import RepoCoordinate


_REPO_NAME_RE = re.compile(r"^([^/\s]+)/([^/\s]+)$")


def parse_repo_name(repository: Optional[str]) -> Tuple[str, str]:
    # Accept exactly "owner/name": one separator, no whitespace inside
    raw = (repository or "").strip()
    if not raw:
        raise ValidationError("Repository name is not set")
    m = _REPO_NAME_RE.match(raw)
    if not m:
        raise ValidationError(f"Invalid repository name format: {raw}. Expected format: owner/repo")
    return m.group(1), m.group(2)


def normalize_branch(branch: Optional[str]) -> Optional[str]:
    # None and blank both mean "use the default branch"
    branch_clean = (branch or "").strip()
    return branch_clean or None


def normalize_path(path: str) -> str:
    # Tree paths are used verbatim apart from a leading "/"
    path_clean = (path or "").lstrip("/")
    if not path_clean.strip():
        raise ValidationError("path must be non-empty")
    return path_clean


def resolve_coordinate(repository: Optional[str], branch: Optional[str] = None) -> RepoCoordinate:
    owner, name = parse_repo_name(repository)
    return RepoCoordinate(owner=owner, name=name, branch=normalize_branch(branch))
