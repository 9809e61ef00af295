from dataclasses import dataclass
from typing import Optional

from dsbasics.traversal import format_values, in_order, post_order, pre_order


@dataclass
class _Node:
    data: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _sample():
    return _Node(1, _Node(2, _Node(4), _Node(5)), _Node(3))


def test_pre_order_sample():
    assert format_values(pre_order(_sample())) == "1 2 4 5 3 "


def test_in_order_sample():
    assert format_values(in_order(_sample())) == "4 2 5 1 3 "


def test_post_order_sample():
    assert format_values(post_order(_sample())) == "4 5 2 3 1 "


def test_empty_tree_yields_nothing():
    assert list(pre_order(None)) == []
    assert list(in_order(None)) == []
    assert list(post_order(None)) == []


def test_single_node():
    node = _Node(7)
    assert list(pre_order(node)) == [7]
    assert list(in_order(node)) == [7]
    assert list(post_order(node)) == [7]


def test_orders_visit_same_values():
    tree = _sample()
    values = sorted(pre_order(tree))
    assert sorted(in_order(tree)) == values
    assert sorted(post_order(tree)) == values


def test_pre_and_post_order_roots():
    tree = _sample()
    assert list(pre_order(tree))[0] == tree.data
    assert list(post_order(tree))[-1] == tree.data


def test_format_values_trailing_space():
    assert format_values([10, 20]) == "10 20 "
    assert format_values([]) == ""