import pytest

from metricgraph.types.base import SearchStrategy


def test_search_strategy_from_string_case_insensitive():
    assert SearchStrategy.from_string("auto") == SearchStrategy.AUTO
    assert SearchStrategy.from_string("Recursive") == SearchStrategy.RECURSIVE
    assert SearchStrategy.from_string("ITERATIVE") == SearchStrategy.ITERATIVE


def test_search_strategy_from_string_invalid():
    with pytest.raises(ValueError, match="Valid values are: AUTO, RECURSIVE, ITERATIVE"):
        SearchStrategy.from_string("dijkstra")
