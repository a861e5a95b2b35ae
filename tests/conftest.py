import pytest
from znodefs import InMemoryCoordinationService, ZNodeFS
from znodefs._pytest_plugin import zk, znfs  # noqa: F401


@pytest.fixture
def limited_zk() -> InMemoryCoordinationService:
    """ノード数上限付きのサービス（max_nodes=8）。"""
    return InMemoryCoordinationService(max_nodes=8)


@pytest.fixture
def limited_znfs(limited_zk) -> ZNodeFS:
    return ZNodeFS(limited_zk)
