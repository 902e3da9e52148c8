import pytest

from priority_queue import MinPriorityQueue


def test_pops_in_ascending_key_order():
    pq = MinPriorityQueue()
    for item in [(3.0, 1), (1.0, 2), (2.0, 3), (0.5, 4)]:
        pq.push(item)

    assert len(pq) == 4
    assert [pq.pop() for _ in range(4)] == [(0.5, 4), (1.0, 2), (2.0, 3), (3.0, 1)]
    assert not pq


def test_custom_key_orders_unorderable_items():
    """Items are ordered by key only, so they need not support comparison."""
    pq = MinPriorityQueue(key=lambda item: item["weight"])
    pq.push({"weight": 2, "name": "b"})
    pq.push({"weight": 1, "name": "a"})

    assert pq.pop()["name"] == "a"
    assert pq.pop()["name"] == "b"


def test_equal_keys_keep_insertion_order_and_allow_duplicates():
    pq = MinPriorityQueue()
    pq.push((1.0, 5))
    pq.push((1.0, 3))
    pq.push((1.0, 5))

    assert [pq.pop() for _ in range(3)] == [(1.0, 5), (1.0, 3), (1.0, 5)]


def test_pop_from_empty_raises():
    pq = MinPriorityQueue()
    with pytest.raises(IndexError):
        pq.pop()
