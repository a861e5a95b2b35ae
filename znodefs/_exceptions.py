class InvalidPathError(ValueError):
    """Raised when a path is rejected before any service call is made."""
    def __init__(self, path: str | None, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path {path!r}: {reason}")


class ZNodeError(OSError):
    """Base class for node-level service errors. Subclass of OSError."""
    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{message}: '{path}'")


class NodeExistsError(ZNodeError, FileExistsError):
    def __init__(self, path: str) -> None:
        super().__init__(path, "Node exists")


class NoNodeError(ZNodeError, FileNotFoundError):
    def __init__(self, path: str) -> None:
        super().__init__(path, "No such node")


class NotEmptyError(ZNodeError):
    def __init__(self, path: str) -> None:
        super().__init__(path, "Node has children")


class BadVersionError(ZNodeError):
    def __init__(self, path: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            path, f"Version mismatch (expected {expected}, actual {actual})"
        )


class NoChildrenForEphemeralsError(ZNodeError):
    def __init__(self, path: str) -> None:
        super().__init__(path, "Ephemeral nodes may not have children")


class InvalidACLError(ZNodeError, ValueError):
    def __init__(self, path: str) -> None:
        super().__init__(path, "Invalid or empty ACL")


class NodeLimitExceededError(ZNodeError):
    """Raised when the in-memory service node limit is reached."""
    def __init__(self, path: str, current: int, limit: int) -> None:
        self.current = current
        self.limit = limit
        super().__init__(
            path, f"Node limit exceeded: current {current} nodes, limit is {limit}"
        )
