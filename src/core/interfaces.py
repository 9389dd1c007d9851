"""Core protocol and interface definitions.

Defines the MCPResource protocol implemented by every resource kind
(currently only files) so the registry stays kind-agnostic.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from core.models import ContentRecord


class MCPResource(Protocol):
    """Contract for any resource exposed to the MCP server."""

    @property
    def name(self) -> str:
        ...

    @property
    def uri(self) -> str:
        ...

    @property
    def title(self) -> Optional[str]:
        ...

    @property
    def description(self) -> Optional[str]:
        ...

    @property
    def mime_type(self) -> Optional[str]:
        ...

    @property
    def size(self) -> Optional[int]:
        ...

    async def handler(self, uri: str) -> List[ContentRecord]:
        ...
