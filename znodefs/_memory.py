from __future__ import annotations

import posixpath
import threading
import time

from ._acl import ACL
from ._client import CreateMode
from ._exceptions import (
    BadVersionError,
    InvalidACLError,
    InvalidPathError,
    NoChildrenForEphemeralsError,
    NodeExistsError,
    NodeLimitExceededError,
    NoNodeError,
    NotEmptyError,
)
from ._path import PATH_SEPARATOR, split_path, validate_path
from ._typing import ZNodeStat

# ---------------------------------------------------------------------------
#  Node Index Layer
# ---------------------------------------------------------------------------


class ZNode:
    __slots__ = (
        "node_id",
        "data",
        "acl",
        "mode",
        "children",
        "version",
        "cversion",
        "created_at",
        "modified_at",
    )

    def __init__(
        self, node_id: int, data: bytes, acl: list[ACL], mode: CreateMode
    ) -> None:
        self.node_id: int = node_id
        self.data: bytes = data
        self.acl: list[ACL] = acl
        self.mode: CreateMode = mode
        # insertion ordered, mirrors arrival order on the real service
        self.children: dict[str, int] = {}
        self.version: int = 0
        self.cversion: int = 0
        now = time.time()
        self.created_at: float = now
        self.modified_at: float = now

    def to_stat(self) -> ZNodeStat:
        return ZNodeStat(
            version=self.version,
            cversion=self.cversion,
            num_children=len(self.children),
            data_length=len(self.data),
            ephemeral=self.mode.is_ephemeral,
            created_at=self.created_at,
            modified_at=self.modified_at,
        )


# ---------------------------------------------------------------------------
#  InMemoryCoordinationService
# ---------------------------------------------------------------------------


class InMemoryCoordinationService:
    """A single-process stand-in for a coordination-service client.

    Implements :class:`~znodefs.CoordinationClient` with the service's
    error semantics.  Sessions do not exist here, so ephemeral nodes live
    until they are deleted explicitly.
    """

    def __init__(self, max_nodes: int | None = None) -> None:
        if max_nodes is not None and max_nodes < 1:
            raise ValueError(f"max_nodes must be >= 1, got {max_nodes}.")
        self._global_lock = threading.RLock()
        self._max_nodes: int | None = max_nodes
        self._nodes: dict[int, ZNode] = {}
        self._next_node_id: int = 0
        # Root node, never counted against max_nodes
        self._root = ZNode(self._take_id(), b"", [], CreateMode.PERSISTENT)
        self._nodes[self._root.node_id] = self._root

    # -- node allocation helpers --

    def _take_id(self) -> int:
        nid = self._next_node_id
        self._next_node_id += 1
        return nid

    def _alloc_node(
        self, path: str, data: bytes, acl: list[ACL], mode: CreateMode
    ) -> ZNode:
        current = len(self._nodes) - 1
        if self._max_nodes is not None and current >= self._max_nodes:
            raise NodeLimitExceededError(path, current, self._max_nodes)
        node = ZNode(self._take_id(), data, acl, mode)
        self._nodes[node.node_id] = node
        return node

    # -- path helpers --

    def _resolve_path(self, path: str) -> ZNode | None:
        if path == PATH_SEPARATOR:
            return self._root
        current = self._root
        for part in split_path(path):
            child_id = current.children.get(part)
            if child_id is None:
                return None
            current = self._nodes[child_id]
        return current

    def _resolve_parent_and_name(self, path: str) -> tuple[ZNode, str] | None:
        parent_path = posixpath.dirname(path) or PATH_SEPARATOR
        name = posixpath.basename(path)
        parent_node = self._resolve_path(parent_path)
        if parent_node is None:
            return None
        return parent_node, name

    def _require(self, path: str) -> ZNode:
        node = self._resolve_path(path)
        if node is None:
            raise NoNodeError(path)
        return node

    # -- client API --

    def exists(self, path: str) -> ZNodeStat | None:
        validate_path(path)
        with self._global_lock:
            node = self._resolve_path(path)
            return node.to_stat() if node is not None else None

    def create(
        self,
        path: str,
        data: bytes = b"",
        acl: list[ACL] | None = None,
        mode: CreateMode = CreateMode.PERSISTENT,
    ) -> str:
        validate_path(path)
        if path == PATH_SEPARATOR:
            raise NodeExistsError(path)
        if not acl:
            raise InvalidACLError(path)
        with self._global_lock:
            pinfo = self._resolve_parent_and_name(path)
            if pinfo is None:
                raise NoNodeError(posixpath.dirname(path) or PATH_SEPARATOR)
            parent, name = pinfo
            if parent.mode.is_ephemeral:
                raise NoChildrenForEphemeralsError(path)
            if mode.is_sequential:
                name = f"{name}{parent.cversion:010d}"
                path = posixpath.join(posixpath.dirname(path), name)
            if name in parent.children:
                raise NodeExistsError(path)
            node = self._alloc_node(path, bytes(data), list(acl), mode)
            parent.children[name] = node.node_id
            parent.cversion += 1
            parent.modified_at = time.time()
            return path

    def get_children(self, path: str) -> list[str]:
        validate_path(path)
        with self._global_lock:
            return list(self._require(path).children.keys())

    def delete(self, path: str, version: int = -1) -> None:
        validate_path(path)
        if path == PATH_SEPARATOR:
            raise InvalidPathError(path, "the root node cannot be deleted")
        with self._global_lock:
            pinfo = self._resolve_parent_and_name(path)
            if pinfo is None or pinfo[1] not in pinfo[0].children:
                raise NoNodeError(path)
            parent, name = pinfo
            node = self._nodes[parent.children[name]]
            if version != -1 and version != node.version:
                raise BadVersionError(path, version, node.version)
            if node.children:
                raise NotEmptyError(path)
            del parent.children[name]
            del self._nodes[node.node_id]
            parent.cversion += 1
            parent.modified_at = time.time()

    def get_data(self, path: str) -> tuple[bytes, ZNodeStat]:
        validate_path(path)
        with self._global_lock:
            node = self._require(path)
            return node.data, node.to_stat()

    def set_data(self, path: str, data: bytes, version: int = -1) -> ZNodeStat:
        validate_path(path)
        with self._global_lock:
            node = self._require(path)
            if version != -1 and version != node.version:
                raise BadVersionError(path, version, node.version)
            node.data = bytes(data)
            node.version += 1
            node.modified_at = time.time()
            return node.to_stat()

    def get_acls(self, path: str) -> list[ACL]:
        validate_path(path)
        with self._global_lock:
            return list(self._require(path).acl)

    def stat(self, path: str) -> ZNodeStat:
        validate_path(path)
        with self._global_lock:
            return self._require(path).to_stat()

    def node_count(self) -> int:
        """Number of nodes, the root excluded."""
        with self._global_lock:
            return len(self._nodes) - 1

    def walk(self, path: str = PATH_SEPARATOR) -> list[str]:
        """Return *path* and every node below it, parents before children."""
        validate_path(path)
        with self._global_lock:
            node = self._require(path)
            result: list[str] = []
            self._collect_paths(node, path, result)
            return result

    def _collect_paths(self, node: ZNode, current_path: str, result: list[str]) -> None:
        result.append(current_path)
        for name, child_id in node.children.items():
            child_path = current_path.rstrip(PATH_SEPARATOR) + PATH_SEPARATOR + name
            self._collect_paths(self._nodes[child_id], child_path, result)
