"""Async wrapper around ZNodeFS.

All calls are delegated to :func:`asyncio.to_thread`, so a blocking
client never stalls the event-loop thread.
"""

from __future__ import annotations

import asyncio

from ._acl import ACLProvider
from ._client import CoordinationClient, CreateMode
from ._fs import ZNodeFS
from ._path import make_path


class AsyncZNodeFS:
    """Thin async facade over :class:`ZNodeFS`."""

    def __init__(
        self,
        client: CoordinationClient,
        acl_provider: ACLProvider | None = None,
    ) -> None:
        self._sync = ZNodeFS(client, acl_provider)

    make_path = staticmethod(make_path)

    async def mkdirs(self, path: str, make_last_node: bool = True) -> list[str]:
        return await asyncio.to_thread(self._sync.mkdirs, path, make_last_node)

    async def ensure_parents(self, path: str) -> list[str]:
        return await asyncio.to_thread(self._sync.ensure_parents, path)

    async def delete(self, path: str, delete_self: bool = True) -> list[str]:
        return await asyncio.to_thread(self._sync.delete, path, delete_self)

    async def sorted_children(self, path: str) -> list[str]:
        return await asyncio.to_thread(self._sync.sorted_children, path)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(self._sync.exists, path)

    async def create(
        self,
        path: str,
        data: bytes = b"",
        mode: CreateMode = CreateMode.PERSISTENT,
        make_parents: bool = False,
    ) -> str:
        return await asyncio.to_thread(
            self._sync.create, path, data, mode, make_parents
        )
