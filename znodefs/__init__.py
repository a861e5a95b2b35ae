from typing import TYPE_CHECKING

from ._acl import (
    ACL,
    CREATOR_ALL_ACL,
    OPEN_ACL_UNSAFE,
    READ_ACL_UNSAFE,
    ACLProvider,
    DefaultACLProvider,
    FixedACLProvider,
    Perms,
    resolve_acl,
)
from ._client import CoordinationClient, CreateMode
from ._exceptions import (
    BadVersionError,
    InvalidACLError,
    InvalidPathError,
    NoChildrenForEphemeralsError,
    NodeExistsError,
    NodeLimitExceededError,
    NoNodeError,
    NotEmptyError,
    ZNodeError,
)
from ._fs import ZNodeFS
from ._logging import configure_logging
from ._memory import InMemoryCoordinationService
from ._ops import delete_children, get_sorted_children, mkdirs, try_create, try_delete
from ._path import (
    PATH_SEPARATOR,
    get_node_from_path,
    get_path_and_node,
    iter_prefixes,
    make_path,
    split_path,
    validate_path,
)
from ._typing import CreateOutcome, DeleteOutcome, ZNodeStat

if TYPE_CHECKING:
    from ._async import AsyncZNodeFS


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "AsyncZNodeFS":
        from ._async import AsyncZNodeFS

        globals()["AsyncZNodeFS"] = AsyncZNodeFS
        return AsyncZNodeFS
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ACL",
    "ACLProvider",
    "AsyncZNodeFS",
    "BadVersionError",
    "CREATOR_ALL_ACL",
    "CoordinationClient",
    "CreateMode",
    "CreateOutcome",
    "DefaultACLProvider",
    "DeleteOutcome",
    "FixedACLProvider",
    "InMemoryCoordinationService",
    "InvalidACLError",
    "InvalidPathError",
    "NoChildrenForEphemeralsError",
    "NoNodeError",
    "NodeExistsError",
    "NodeLimitExceededError",
    "NotEmptyError",
    "OPEN_ACL_UNSAFE",
    "PATH_SEPARATOR",
    "Perms",
    "READ_ACL_UNSAFE",
    "ZNodeError",
    "ZNodeFS",
    "ZNodeStat",
    "configure_logging",
    "delete_children",
    "get_node_from_path",
    "get_path_and_node",
    "get_sorted_children",
    "iter_prefixes",
    "make_path",
    "mkdirs",
    "resolve_acl",
    "split_path",
    "try_create",
    "try_delete",
    "validate_path",
]
__version__ = "0.1.0"
