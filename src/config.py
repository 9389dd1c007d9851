"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
GITHUB_TOKEN, GITHUB_API_URL, GITHUB_TIMEOUT, HTTP_VERIFY, LOG_LEVEL).

The repository to expose is read separately by
``core.models.RepositoryConfig.from_env`` (SOURCE_REPOSITORY_NAME and
BRANCH_NAME).
"""

from __future__ import annotations

import os


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Credentials
GITHUB_TOKEN = (os.environ.get("GITHUB_TOKEN") or "").strip()

# Network / HTTP
GITHUB_API_URL = _env_str("GITHUB_API_URL", "https://api.github.com").rstrip("/")
GITHUB_TIMEOUT = _env_float("GITHUB_TIMEOUT", 20.0)
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)

# Diagnostics
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO").upper()
