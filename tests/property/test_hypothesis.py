"""Property-based tests using Hypothesis."""
import pytest

try:
    from hypothesis import given, settings
    import hypothesis.strategies as st
    HAS_HYPOTHESIS = True
except ImportError:
    HAS_HYPOTHESIS = False

from znodefs import (
    InMemoryCoordinationService,
    delete_children,
    get_sorted_children,
    make_path,
    mkdirs,
    validate_path,
)

pytestmark = pytest.mark.skipif(not HAS_HYPOTHESIS, reason="hypothesis not installed")

if HAS_HYPOTHESIS:
    segment = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-_", min_size=1, max_size=8)
    well_formed = st.lists(segment, min_size=1, max_size=5).map(lambda s: "/" + "/".join(s))
    fragment = st.text(alphabet="/abc", max_size=12)
else:  # pragma: no cover
    segment = well_formed = fragment = None


@given(a=well_formed, b=well_formed, c=well_formed)
@settings(max_examples=100)
def test_make_path_associative(a, b, c):
    assert make_path(make_path(a, b), c) == make_path(a, make_path(b, c))


@given(parent=fragment, child=fragment, extra=fragment)
@settings(max_examples=200)
def test_make_path_always_well_formed(parent, child, extra):
    result = make_path(parent, child, extra)
    assert validate_path(result) == result
    assert "//" not in result


@given(parent=well_formed, child=segment)
@settings(max_examples=100)
def test_make_path_of_well_formed_is_valid(parent, child):
    assert validate_path(make_path(parent, child)) == make_path(parent, child)


@given(path=well_formed, make_last=st.booleans())
@settings(max_examples=50)
def test_mkdirs_idempotent(path, make_last):
    zk = InMemoryCoordinationService()
    first = mkdirs(zk, path, make_last)
    snapshot = zk.walk("/")
    assert mkdirs(zk, path, make_last) == []
    assert zk.walk("/") == snapshot
    expected = len(path.split("/")) - 1 - (0 if make_last else 1)
    assert len(first) == expected


@given(paths=st.lists(well_formed, min_size=1, max_size=8))
@settings(max_examples=50)
def test_delete_removes_exactly_the_subtree(paths):
    zk = InMemoryCoordinationService()
    mkdirs(zk, "/keep")
    for p in paths:
        mkdirs(zk, "/t" + p)
    inside = [p for p in zk.walk("/t")]
    deleted = delete_children(zk, "/t", True)
    assert sorted(deleted) == sorted(inside)
    assert zk.walk("/") == ["/", "/keep"]


@given(seqs=st.lists(st.integers(min_value=0, max_value=9_999_999_999), unique=True, max_size=20))
@settings(max_examples=50)
def test_sorted_children_numeric_order(seqs):
    zk = InMemoryCoordinationService()
    mkdirs(zk, "/q")
    for n in seqs:
        mkdirs(zk, f"/q/lock-{n:010d}")
    names = get_sorted_children(zk, "/q")
    assert [int(name[len("lock-"):]) for name in names] == sorted(seqs)
