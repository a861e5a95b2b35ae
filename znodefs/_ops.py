"""Recursive create, recursive delete and sorted listing over node paths.

The coordination service offers only single-node primitives, and other
clients may mutate the same subtree at any moment.  The functions here
absorb exactly three outcomes of such interleaving as success:

* ``NodeExistsError`` while creating an ancestor in :func:`mkdirs`
* ``NotEmptyError`` while deleting in :func:`delete_children` (re-drained)
* ``NoNodeError`` while deleting in :func:`delete_children`

Every other error reaches the caller unchanged.  Nothing is locked and
nothing is retried on transport failure.
"""

from __future__ import annotations

import structlog

from ._acl import ACL, ACLProvider, resolve_acl
from ._client import CoordinationClient, CreateMode
from ._exceptions import InvalidPathError, NodeExistsError, NoNodeError, NotEmptyError
from ._path import PATH_SEPARATOR, iter_prefixes, make_path, validate_path
from ._typing import CreateOutcome, DeleteOutcome

logger = structlog.get_logger(__name__)


def try_create(
    client: CoordinationClient,
    path: str,
    data: bytes,
    acl: list[ACL],
    mode: CreateMode = CreateMode.PERSISTENT,
) -> CreateOutcome:
    try:
        client.create(path, data, acl, mode)
    except NodeExistsError:
        return CreateOutcome.ALREADY_EXISTS
    return CreateOutcome.CREATED


def try_delete(
    client: CoordinationClient, path: str, version: int = -1
) -> DeleteOutcome:
    try:
        client.delete(path, version)
    except NotEmptyError:
        return DeleteOutcome.NOT_EMPTY
    except NoNodeError:
        return DeleteOutcome.NO_NODE
    return DeleteOutcome.DELETED


def mkdirs(
    client: CoordinationClient,
    path: str,
    make_last_node: bool = True,
    acl_provider: ACLProvider | None = None,
) -> list[str]:
    """Make sure every node along *path* exists.

    Unlike a filesystem there is no distinction between directories and
    files, so each ancestor is a real node holding an empty payload.
    With ``make_last_node=False`` only the ancestors are created and the
    caller is expected to create the final node itself (for instance as
    an ephemeral or sequential node).

    Returns the paths created by this call, shortest first.  Nodes that
    already existed, or that another client created first, are left as
    they are.
    """
    validate_path(path)
    created: list[str] = []
    for sub_path in iter_prefixes(path, include_last=make_last_node):
        if client.exists(sub_path) is not None:
            continue
        acl = resolve_acl(acl_provider, sub_path)
        outcome = try_create(client, sub_path, b"", acl, CreateMode.PERSISTENT)
        if outcome is CreateOutcome.CREATED:
            logger.debug("znode_created", path=sub_path)
            created.append(sub_path)
        else:
            # someone else created it since we checked
            logger.debug("znode_create_raced", path=sub_path)
    return created


def get_sorted_children(client: CoordinationClient, path: str) -> list[str]:
    """Return the children of *path* in code point order.

    Sequence suffixes generated by the service are zero padded, so this is
    also creation order for sequential children.
    """
    validate_path(path)
    return sorted(client.get_children(path))


def delete_children(
    client: CoordinationClient, path: str, delete_self: bool
) -> list[str]:
    """Delete every descendant of *path*, and *path* itself if *delete_self*.

    Depth first: a node is only deleted once its children are gone.  If a
    delete fails because a child appeared in the meantime, the node is
    drained again and the delete retried, without bound.  Nodes that
    disappear underneath us count as deleted.

    Returns the paths deleted by this call, in deletion order.
    """
    validate_path(path)
    if delete_self and path == PATH_SEPARATOR:
        raise InvalidPathError(path, "the root node cannot be deleted")

    deleted: list[str] = []
    top_listed = False
    # (node path, delete the node itself, children already pushed)
    stack: list[tuple[str, bool, bool]] = [(path, delete_self, False)]
    while stack:
        node, remove, drained = stack.pop()

        if not drained:
            try:
                children = client.get_children(node)
            except NoNodeError:
                if node == path and not top_listed:
                    raise
                continue
            if node == path:
                top_listed = True
            stack.append((node, remove, True))
            for child in reversed(children):
                stack.append((make_path(node, child), True, False))
            continue

        if not remove:
            continue
        outcome = try_delete(client, node, -1)
        if outcome is DeleteOutcome.DELETED:
            logger.debug("znode_deleted", path=node)
            deleted.append(node)
        elif outcome is DeleteOutcome.NOT_EMPTY:
            # a child was created since we listed, drain again
            logger.info("znode_delete_not_empty_retry", path=node)
            stack.append((node, True, False))
        else:
            logger.debug("znode_delete_raced", path=node)
    return deleted
