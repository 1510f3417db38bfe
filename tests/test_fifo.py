import pytest

from galgo.fifo import Queue


def test_queue():
    q = Queue()
    for value in (4, 3, 2, 1):
        q.push(value)

    assert q.pop() == 4
    assert q.pop() == 3
    assert q.peek() == 2
    assert q.pop() == 2
    assert q.pop() == 1
    with pytest.raises(IndexError):
        q.pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Queue().peek()


def test_reuse_after_emptied():
    q = Queue()
    q.push(1)
    q.pop()
    assert q.is_empty()
    q.push(2)
    q.push(3)
    assert len(q) == 2
    assert q.pop() == 2
    assert q.pop() == 3
    assert q.is_empty()