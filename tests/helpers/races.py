"""Service doubles that let another "client" act between two calls."""

from znodefs import OPEN_ACL_UNSAFE, CreateMode, InMemoryCoordinationService


class RecordingService(InMemoryCoordinationService):
    """Records every client call as ``(method, path)``."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.calls = []

    def exists(self, path):
        self.calls.append(("exists", path))
        return super().exists(path)

    def create(self, path, data=b"", acl=None, mode=CreateMode.PERSISTENT):
        self.calls.append(("create", path))
        return super().create(path, data, acl, mode)

    def get_children(self, path):
        self.calls.append(("get_children", path))
        return super().get_children(path)

    def delete(self, path, version=-1):
        self.calls.append(("delete", path))
        return super().delete(path, version)

    def paths_for(self, method):
        return [p for m, p in self.calls if m == method]


class CreateRaceService(InMemoryCoordinationService):
    """Another client creates *target* right after our existence check."""

    def __init__(self, target, foreign_data=b"foreign", **kwargs):
        super().__init__(**kwargs)
        self.target = target
        self.foreign_data = foreign_data
        self.raced = False

    def exists(self, path):
        stat = super().exists(path)
        if path == self.target and stat is None and not self.raced:
            self.raced = True
            super().create(path, self.foreign_data, OPEN_ACL_UNSAFE)
        return stat


class DeleteRaceService(InMemoryCoordinationService):
    """Another client adds a child to *target* just before we delete it.

    The intrusion repeats ``times`` times, so the deleter has to re-drain
    the node that many times before the delete goes through.
    """

    def __init__(self, target, times=1, **kwargs):
        super().__init__(**kwargs)
        self.target = target
        self.remaining = times
        self.intrusions = []

    def delete(self, path, version=-1):
        if path == self.target and self.remaining > 0:
            self.remaining -= 1
            child = f"{path}/late-{len(self.intrusions)}"
            super().create(child, b"", OPEN_ACL_UNSAFE)
            super().create(child + "/grandchild", b"", OPEN_ACL_UNSAFE)
            self.intrusions.append(child)
        return super().delete(path, version)


class VanishingService(InMemoryCoordinationService):
    """Another client deletes *target* just before we do."""

    def __init__(self, target, **kwargs):
        super().__init__(**kwargs)
        self.target = target

    def delete(self, path, version=-1):
        if path == self.target and super().exists(path) is not None:
            super().delete(path, version)
        return super().delete(path, version)


class FailingService(InMemoryCoordinationService):
    """Raises *error* from every call touching *target*."""

    def __init__(self, target, error, **kwargs):
        super().__init__(**kwargs)
        self.target = target
        self.error = error

    def _check(self, path):
        if path == self.target:
            raise self.error

    def exists(self, path):
        self._check(path)
        return super().exists(path)

    def create(self, path, data=b"", acl=None, mode=CreateMode.PERSISTENT):
        self._check(path)
        return super().create(path, data, acl, mode)

    def get_children(self, path):
        self._check(path)
        return super().get_children(path)

    def delete(self, path, version=-1):
        self._check(path)
        return super().delete(path, version)
