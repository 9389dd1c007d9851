"""GitHub REST API access used by the file resources."""

from .client import GitHubClient, decode_content

__all__ = ["GitHubClient", "decode_content"]
