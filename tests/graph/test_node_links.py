"""Tests for link creation, lookup and removal on node handles."""

import pytest

from metricgraph import InvalidHandleError, LinkHandle, create


@pytest.fixture
def pair():
    store = create()
    return store, store.add("A"), store.add("B")


def test_connect_then_get_link(pair):
    _store, a, b = pair
    link = a.connect_to(b, 7)
    found = a.get_link_to(b)
    assert isinstance(found, LinkHandle)
    assert found == link
    assert found.metric == 7
    assert found.destination == b
    assert found.source == a


def test_get_link_to_absent_is_none(pair):
    _store, a, b = pair
    assert a.get_link_to(b) is None
    # Direction matters
    b.connect_to(a, 1)
    assert a.get_link_to(b) is None


def test_duplicate_links_kept_in_order(pair):
    store, a, b = pair
    first = a.connect_to(b, 5)
    second = a.connect_to(b, 2)
    assert first != second
    assert a.links() == [first, second]
    assert a.get_link_to(b) == first
    assert store.link_count() == 2


def test_unconnect_removes_all_links_to_destination(pair):
    store, a, b = pair
    a.connect_to(b, 1)
    loop = a.connect_to(a, 4)
    a.connect_to(b, 2)
    assert a.unconnect_to(b) is True
    assert a.get_link_to(b) is None
    assert a.links() == [loop]
    assert store.link_count() == 1


def test_unconnect_without_links_returns_false(pair):
    _store, a, b = pair
    assert a.unconnect_to(b) is False


def test_unconnect_only_affects_caller(pair):
    _store, a, b = pair
    a.connect_to(b, 1)
    reverse = b.connect_to(a, 1)
    assert a.unconnect_to(b)
    assert b.get_link_to(a) == reverse


def test_unconnected_link_handle_dies(pair):
    _store, a, b = pair
    link = a.connect_to(b, 1)
    a.unconnect_to(b)
    assert not link.is_alive()
    with pytest.raises(InvalidHandleError):
        _ = link.destination


def test_negative_and_zero_metrics_allowed(pair):
    _store, a, b = pair
    assert a.connect_to(b, -1).metric == -1
    assert b.connect_to(a, 0).metric == 0


@pytest.mark.parametrize("metric", [1.5, "1", None, True])
def test_non_integer_metric_rejected(pair, metric):
    store, a, b = pair
    with pytest.raises(TypeError):
        a.connect_to(b, metric)
    assert store.link_count() == 0


def test_connect_to_foreign_node_rejected(pair):
    store, a, _b = pair
    foreign = create().add("X")
    with pytest.raises(InvalidHandleError, match="different graph store"):
        a.connect_to(foreign, 1)
    assert store.link_count() == 0


def test_connect_to_removed_node_rejected(pair):
    store, a, b = pair
    store.remove(b)
    with pytest.raises(InvalidHandleError, match="removed"):
        a.connect_to(b, 1)


def test_lookup_against_foreign_or_removed_target_matches_nothing(pair):
    store, a, b = pair
    a.connect_to(b, 1)
    foreign = create().add("B")
    assert a.get_link_to(foreign) is None
    assert a.unconnect_to(foreign) is False

    store.remove(b)
    assert a.get_link_to(b) is None
    assert a.unconnect_to(b) is False


def test_invalid_handle_error_is_value_error(pair):
    store, a, b = pair
    store.remove(b)
    with pytest.raises(ValueError):
        a.connect_to(b, 1)
