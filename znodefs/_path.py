from collections.abc import Iterator

from ._exceptions import InvalidPathError

PATH_SEPARATOR = "/"


def _is_forbidden_char(c: str) -> bool:
    return (
        c == "\u0000"
        or "\u0001" <= c <= "\u001f"
        or "\u007f" <= c <= "\u009f"
        or "\ud800" < c < "\uf8ff"
        or "\ufff0" < c < "\uffff"
    )


def validate_path(path: str | None) -> str:
    """Return *path* unchanged if it is a well-formed node path.

    Raises :class:`InvalidPathError` otherwise.  No normalization is
    attempted: a path with a trailing separator, an empty segment or a
    relative segment is rejected rather than repaired.
    """
    if path is None:
        raise InvalidPathError(path, "path cannot be None")
    if not path:
        raise InvalidPathError(path, "path length must be > 0")
    if not path.startswith(PATH_SEPARATOR):
        raise InvalidPathError(path, "path must start with / character")
    if path == PATH_SEPARATOR:
        return path
    if path.endswith(PATH_SEPARATOR):
        raise InvalidPathError(path, "path must not end with / character")

    for i, segment in enumerate(path[1:].split(PATH_SEPARATOR), start=1):
        if not segment:
            raise InvalidPathError(path, f"empty node name specified @{i}")
        if segment in (".", ".."):
            raise InvalidPathError(path, f"relative paths not allowed @{i}")
    for i, c in enumerate(path):
        if _is_forbidden_char(c):
            raise InvalidPathError(path, f"invalid character @{i}")
    return path


def make_path(parent: str | None, child: str | None, *more: str | None) -> str:
    """Join *parent* and one or more children into a single node path.

    Fragments may carry stray leading, trailing or doubled separators;
    the result always has exactly one leading separator and none
    trailing or doubled.  Joining nothing with nothing yields the root.
    """
    path = _join(parent, child)
    for extra in more:
        path = _join(path, extra)
    return path


def _join(parent: str | None, child: str | None) -> str:
    segments = split_path(parent) if parent else []
    if child:
        segments.extend(split_path(child))
    return PATH_SEPARATOR + PATH_SEPARATOR.join(segments)


def split_path(path: str) -> list[str]:
    """Return the non-empty segments of *path* (``"/a/b"`` -> ``["a", "b"]``)."""
    return [p for p in path.split(PATH_SEPARATOR) if p]


def get_path_and_node(path: str) -> tuple[str, str]:
    """Split *path* into its parent path and final node name."""
    validate_path(path)
    i = path.rfind(PATH_SEPARATOR)
    if i + 1 >= len(path):
        return PATH_SEPARATOR, ""
    node = path[i + 1:]
    parent = path[:i] if i > 0 else PATH_SEPARATOR
    return parent, node


def get_node_from_path(path: str) -> str:
    return get_path_and_node(path)[1]


def iter_prefixes(path: str, include_last: bool = True) -> Iterator[str]:
    """Yield each ancestor prefix of *path*, shortest first.

    The root is never yielded.  With ``include_last=False`` the full path
    itself is skipped, leaving only the ancestor chain.
    """
    if path == PATH_SEPARATOR:
        return
    pos = 1  # skip the leading separator, the root always exists
    while True:
        pos = path.find(PATH_SEPARATOR, pos + 1)
        if pos == -1:
            if not include_last:
                return
            pos = len(path)
        yield path[:pos]
        if pos >= len(path):
            return
