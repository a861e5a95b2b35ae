from __future__ import annotations

import structlog

from ._acl import ACLProvider, resolve_acl
from ._client import CoordinationClient, CreateMode
from ._ops import delete_children, get_sorted_children, mkdirs
from ._path import make_path, validate_path

logger = structlog.get_logger(__name__)


class ZNodeFS:
    """Filesystem-style helpers bound to one client and one ACL policy.

    Every call goes straight to the client; nothing is cached between
    calls, so the view is only as fresh as the last round trip.
    """

    def __init__(
        self,
        client: CoordinationClient,
        acl_provider: ACLProvider | None = None,
    ) -> None:
        self._client = client
        self._acl_provider = acl_provider

    @property
    def client(self) -> CoordinationClient:
        return self._client

    @property
    def acl_provider(self) -> ACLProvider | None:
        return self._acl_provider

    make_path = staticmethod(make_path)

    def mkdirs(self, path: str, make_last_node: bool = True) -> list[str]:
        return mkdirs(self._client, path, make_last_node, self._acl_provider)

    def ensure_parents(self, path: str) -> list[str]:
        """Create every ancestor of *path* but not *path* itself."""
        return mkdirs(self._client, path, False, self._acl_provider)

    def delete(self, path: str, delete_self: bool = True) -> list[str]:
        return delete_children(self._client, path, delete_self)

    def sorted_children(self, path: str) -> list[str]:
        return get_sorted_children(self._client, path)

    def exists(self, path: str) -> bool:
        validate_path(path)
        return self._client.exists(path) is not None

    def create(
        self,
        path: str,
        data: bytes = b"",
        mode: CreateMode = CreateMode.PERSISTENT,
        make_parents: bool = False,
    ) -> str:
        """Create the node at *path* and return the path actually created.

        The returned path differs from *path* for sequential modes.  Unlike
        :meth:`mkdirs`, an existing node is an error here
        (``NodeExistsError``).
        """
        validate_path(path)
        if make_parents:
            self.ensure_parents(path)
        acl = resolve_acl(self._acl_provider, path)
        actual = self._client.create(path, data, acl, mode)
        logger.debug("znode_created", path=actual, mode=mode.value)
        return actual
