from __future__ import annotations


class GitHubResourcesError(Exception):
    """Base error for the GitHub resources server."""


class ValidationError(GitHubResourcesError):
    """Raised when user input or configuration is invalid."""


class ExternalServiceError(GitHubResourcesError):
    """Raised when the GitHub API fails or cannot be reached."""


class NotFoundError(ExternalServiceError):
    """Raised when a repository, ref, tree or file is not found."""


class TreeListingError(ExternalServiceError):
    """Raised when the repository tree cannot be listed."""


class ContentFetchError(GitHubResourcesError):
    """Raised when a single file resource cannot be read."""
