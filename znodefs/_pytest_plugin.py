"""pytest fixture plugin.

Usage::

    # conftest.py
    pytest_plugins = ["znodefs._pytest_plugin"]

This makes the ``zk`` and ``znfs`` fixtures automatically available::

    def test_something(znfs):
        znfs.mkdirs("/app/locks")
        assert znfs.exists("/app/locks")
"""

import pytest

from ._fs import ZNodeFS
from ._memory import InMemoryCoordinationService


@pytest.fixture
def zk() -> InMemoryCoordinationService:
    """An empty :class:`InMemoryCoordinationService` (function scope)."""
    return InMemoryCoordinationService()


@pytest.fixture
def znfs(zk: InMemoryCoordinationService) -> ZNodeFS:
    """A :class:`ZNodeFS` over the ``zk`` fixture, with no ACL provider."""
    return ZNodeFS(zk)
