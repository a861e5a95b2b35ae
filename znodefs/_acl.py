from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class Perms(enum.IntFlag):
    READ = 1 << 0
    WRITE = 1 << 1
    CREATE = 1 << 2
    DELETE = 1 << 3
    ADMIN = 1 << 4
    ALL = READ | WRITE | CREATE | DELETE | ADMIN


@dataclass(frozen=True)
class ACL:
    """A single permission entry attached to a node at creation time."""

    perms: Perms
    scheme: str
    id: str


ANYONE_ID_UNSAFE = ("world", "anyone")
AUTH_IDS = ("auth", "")

# Completely open, any client can do anything with the node.
OPEN_ACL_UNSAFE: list[ACL] = [ACL(Perms.ALL, *ANYONE_ID_UNSAFE)]
# Full permissions for the authenticated creator only.
CREATOR_ALL_ACL: list[ACL] = [ACL(Perms.ALL, *AUTH_IDS)]
READ_ACL_UNSAFE: list[ACL] = [ACL(Perms.READ, *ANYONE_ID_UNSAFE)]


@runtime_checkable
class ACLProvider(Protocol):
    """Chooses the ACL for nodes created on the caller's behalf."""

    def get_default_acl(self) -> list[ACL] | None:
        """Return the ACL list to use when no path-specific list applies."""
        ...

    def get_acl_for_path(self, path: str | None) -> list[ACL] | None:
        """Return the ACL list for *path*, or ``None`` to use the default.

        *path* may be ``None`` for root-level queries.
        """
        ...


class DefaultACLProvider:
    """Hands out :data:`OPEN_ACL_UNSAFE` for every path."""

    def get_default_acl(self) -> list[ACL]:
        return list(OPEN_ACL_UNSAFE)

    def get_acl_for_path(self, path: str | None) -> list[ACL]:
        return list(OPEN_ACL_UNSAFE)


class FixedACLProvider:
    """Uses one ACL list everywhere, with optional per-prefix overrides.

    An override applies to the prefix node itself and to everything below
    it; the longest matching prefix wins.
    """

    def __init__(
        self,
        default_acl: list[ACL],
        overrides: dict[str, list[ACL]] | None = None,
    ) -> None:
        if not default_acl:
            raise ValueError("default_acl must not be empty.")
        self._default = list(default_acl)
        self._overrides = dict(overrides or {})

    def get_default_acl(self) -> list[ACL]:
        return list(self._default)

    def get_acl_for_path(self, path: str | None) -> list[ACL] | None:
        if path is None:
            return None
        best: str | None = None
        for prefix in self._overrides:
            if path == prefix or path.startswith(prefix.rstrip("/") + "/"):
                if best is None or len(prefix) > len(best):
                    best = prefix
        if best is None:
            return None
        return list(self._overrides[best])


def resolve_acl(acl_provider: ACLProvider | None, path: str | None) -> list[ACL]:
    """Pick the ACL for a node about to be created at *path*.

    Path-specific list, then the provider's default when that is
    ``None``, then the open list.  A list returned by the provider is used
    as is, even when empty; the service decides whether it is acceptable.
    """
    acl: list[ACL] | None = None
    if acl_provider is not None:
        acl = acl_provider.get_acl_for_path(path)
        if acl is None:
            acl = acl_provider.get_default_acl()
    if acl is None:
        acl = list(OPEN_ACL_UNSAFE)
    return acl
