"""Interface the path operations consume from a coordination-service client.

Adapters over a real network client must translate that client's errors
into :class:`~znodefs.NodeExistsError`, :class:`~znodefs.NoNodeError` and
:class:`~znodefs.NotEmptyError`; any other exception is propagated to the
caller untouched.
"""

from __future__ import annotations

import enum
from typing import Any, Protocol, runtime_checkable

from ._acl import ACL


class CreateMode(enum.Enum):
    PERSISTENT = "persistent"
    PERSISTENT_SEQUENTIAL = "persistent_sequential"
    EPHEMERAL = "ephemeral"
    EPHEMERAL_SEQUENTIAL = "ephemeral_sequential"

    @property
    def is_ephemeral(self) -> bool:
        return self in (CreateMode.EPHEMERAL, CreateMode.EPHEMERAL_SEQUENTIAL)

    @property
    def is_sequential(self) -> bool:
        return self in (
            CreateMode.PERSISTENT_SEQUENTIAL,
            CreateMode.EPHEMERAL_SEQUENTIAL,
        )


@runtime_checkable
class CoordinationClient(Protocol):
    def exists(self, path: str) -> Any | None:
        """Return a truthy stat for *path*, or ``None`` if it is absent."""
        ...

    def create(
        self,
        path: str,
        data: bytes,
        acl: list[ACL],
        mode: CreateMode,
    ) -> str:
        """Create a node and return its actual path.

        Raises ``NodeExistsError`` when the node is already present.
        """
        ...

    def get_children(self, path: str) -> list[str]:
        """Return child names in arrival order; ``NoNodeError`` if absent."""
        ...

    def delete(self, path: str, version: int = -1) -> None:
        """Delete *path*; version ``-1`` matches any version.

        Raises ``NotEmptyError`` or ``NoNodeError``.
        """
        ...
