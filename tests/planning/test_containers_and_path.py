# tests/planning/test_containers_and_path.py
import sys
import os

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from jps_lab.types import Node, INVALID_NODE
from jps_lab.planning.containers import OpenSet, ClosedSet
from jps_lab.planning.path import (PathReconstructionError, reconstruct_path,
                                   interpolate_segment, densify, path_length)


def test_node_identity_ignores_parent_and_cost():
    a = Node(3, 1, 13, pid=7, cost=2.0)
    b = Node(3, 1, 13, pid=-1, cost=9.5)

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    assert a != Node(4, 1, 14)


def test_sentinel_node():
    assert INVALID_NODE.id == -1
    assert not INVALID_NODE.is_valid
    assert Node(0, 0, 0).is_valid


def test_open_set_orders_by_cost():
    open_set = OpenSet()
    for node_id, cost in [(1, 3.0), (2, 1.0), (3, 2.0)]:
        open_set.push(Node(node_id, 0, node_id, cost=cost))

    assert len(open_set) == 3
    assert [open_set.pop().id for _ in range(3)] == [2, 3, 1]
    assert not open_set


def test_open_set_ties_are_fifo_and_duplicates_allowed():
    open_set = OpenSet()
    open_set.push(Node(5, 0, 5, cost=1.0))
    open_set.push(Node(2, 0, 2, cost=1.0))
    open_set.push(Node(5, 0, 5, pid=9, cost=1.0))

    popped = [open_set.pop() for _ in range(3)]
    assert [n.id for n in popped] == [5, 2, 5]
    assert [n.pid for n in popped] == [-1, -1, 9]


def test_closed_set_keeps_first_entry():
    closed = ClosedSet()
    closed.add(Node(1, 0, 1, pid=-1))
    closed.add(Node(1, 0, 1, pid=42))

    assert len(closed) == 1
    assert Node(1, 0, 1) in closed
    assert closed.get(1).pid == -1
    assert closed.get(2) is None


def test_reconstruct_path_follows_parents():
    closed = ClosedSet()
    start = Node(0, 0, 0, pid=-1)
    mid = Node(2, 2, 12, pid=0)
    goal = Node(2, 4, 22, pid=12)
    for n in (start, mid, goal):
        closed.add(n)

    path = reconstruct_path(closed, Node(2, 4, 22))
    assert [n.cell for n in path] == [(0, 0), (2, 2), (2, 4)]


def test_reconstruct_path_missing_parent_is_an_error():
    closed = ClosedSet()
    closed.add(Node(2, 4, 22, pid=12))

    with pytest.raises(PathReconstructionError):
        reconstruct_path(closed, Node(2, 4, 22))


def test_reconstruct_path_detects_cycle():
    closed = ClosedSet()
    closed.add(Node(0, 0, 0, pid=1))
    closed.add(Node(1, 0, 1, pid=0))

    with pytest.raises(PathReconstructionError):
        reconstruct_path(closed, Node(1, 0, 1))


def test_interpolate_segment():
    assert interpolate_segment((0, 0), (3, 3)) == [(0, 0), (1, 1), (2, 2), (3, 3)]
    assert interpolate_segment((4, 2), (4, 0)) == [(4, 2), (4, 1), (4, 0)]
    assert interpolate_segment((1, 1), (1, 1)) == [(1, 1)]

    with pytest.raises(ValueError):
        interpolate_segment((0, 0), (2, 1))


def test_densify_and_length():
    cells = densify([(0, 0), (2, 2), (2, 4)])
    assert cells == [(0, 0), (1, 1), (2, 2), (2, 3), (2, 4)]
    assert densify([]) == []
    assert path_length(cells) == pytest.approx(2 * 2 ** 0.5 + 2)
    assert path_length([(0, 0)]) == 0.0
