"""Immutable dataclasses shared by the GitHub client and the resources.

Includes the repository coordinate parsed from configuration, the
configuration carrier itself, tree entries and content records.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RepoCoordinate:
    """Owner/name pair plus an optional branch override."""

    owner: str
    name: str
    branch: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class RepositoryConfig:
    """Configuration for one registration cycle.

    Field groups:
    - repository: raw "owner/name" string, None when not configured
    - branch: optional branch; the repository default branch is used when None
    """

    repository: Optional[str] = None
    branch: Optional[str] = None

    @classmethod
    def from_env(cls) -> "RepositoryConfig":
        repository = (os.environ.get("SOURCE_REPOSITORY_NAME") or "").strip()
        branch = (os.environ.get("BRANCH_NAME") or "").strip()
        return cls(repository=repository or None, branch=branch or None)


@dataclass(frozen=True)
class TreeEntry:
    path: str
    name: str
    size: int = 0


@dataclass(frozen=True)
class ContentRecord:
    """Payload returned when a resource's content is read."""

    uri: str
    text: str
    mime_type: str
    title: Optional[str] = None
    description: Optional[str] = None
    size: Optional[int] = None
