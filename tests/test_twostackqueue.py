import pytest

from exercisekit.twostackqueue import QueueEmptyError, TwoStackQueue


def test_source_sequence_fifo():
    queue = TwoStackQueue()
    for item in (7, 6, 2, 3):
        queue.enqueue(item)
    assert [queue.dequeue() for _ in range(3)] == [7, 6, 2]
    assert len(queue) == 1


def test_empty_dequeue_raises():
    with pytest.raises(QueueEmptyError):
        TwoStackQueue().dequeue()


def test_empty_error_is_index_error():
    queue = TwoStackQueue()
    queue.enqueue("a")
    queue.dequeue()
    with pytest.raises(IndexError):
        queue.dequeue()


def test_interleaved_operations_keep_order():
    queue = TwoStackQueue()
    taken = []
    queue.enqueue(1)
    queue.enqueue(2)
    taken.append(queue.dequeue())
    queue.enqueue(3)
    queue.enqueue(4)
    taken.append(queue.dequeue())
    taken.append(queue.dequeue())
    queue.enqueue(5)
    while len(queue):
        taken.append(queue.dequeue())
    assert taken == [1, 2, 3, 4, 5]


def test_len_tracks_items():
    queue = TwoStackQueue()
    assert len(queue) == 0
    for item in range(10):
        queue.enqueue(item)
    assert len(queue) == 10
    queue.dequeue()
    assert len(queue) == 9


def test_many_items_round_trip():
    queue = TwoStackQueue()
    items = list(range(500))
    for item in items:
        queue.enqueue(item)
    assert [queue.dequeue() for _ in items] == items