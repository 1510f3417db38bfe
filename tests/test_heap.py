import pytest

from galgo.heap import (
    Heap,
    MaxHeap,
    MinHeap,
    left_child,
    max_heapify,
    max_up,
    min_heapify,
    min_up,
    parent,
    right_child,
)

VALUES = [5, 1, 9, 3, 7, 2, 8, 6, 4]


def drain(heap):
    return [heap.pop() for _ in range(len(heap))]


def is_heap(arr, before_or_equal):
    return all(before_or_equal(arr[parent(i)], arr[i]) for i in range(1, len(arr)))


@pytest.mark.parametrize("i", range(20))
def test_child_parent_relation(i):
    assert parent(left_child(i)) == i
    assert parent(right_child(i)) == i
    assert right_child(i) == left_child(i) + 1


def test_max_heap_pops_descending():
    assert drain(MaxHeap(VALUES)) == sorted(VALUES, reverse=True)


def test_min_heap_pops_ascending():
    assert drain(MinHeap(VALUES)) == sorted(VALUES)


def test_heap_does_not_mutate_input():
    values = list(VALUES)
    drain(MaxHeap(values))
    assert values == VALUES


def test_push_then_pop():
    heap = MinHeap()
    for v in VALUES:
        heap.push(v)
    assert len(heap) == len(VALUES)
    assert heap.peek() == min(VALUES)
    assert drain(heap) == sorted(VALUES)
    assert heap.is_empty()


def test_empty_heap_raises():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_max_heap_set_decrease_root():
    heap = MaxHeap(VALUES)
    new = min(VALUES) - 1
    heap.set(0, new)
    expected = sorted(VALUES)[:-1] + [new]
    assert drain(heap) == sorted(expected, reverse=True)


def test_max_heap_set_increase_moves_up():
    heap = MaxHeap(VALUES)
    new = max(VALUES) + 1
    heap.set(len(heap) - 1, new)
    assert heap.peek() == new
    assert len(heap) == len(VALUES)


def test_min_heap_set_increase_root():
    heap = MinHeap(VALUES)
    new = max(VALUES) + 1
    heap.set(0, new)
    expected = sorted(VALUES)[1:] + [new]
    assert drain(heap) == sorted(expected)


def test_set_past_end_is_ignored():
    heap = MinHeap(VALUES)
    heap.set(len(VALUES), -100)
    assert drain(heap) == sorted(VALUES)


def test_set_negative_index_raises():
    with pytest.raises(IndexError):
        MinHeap(VALUES).set(-1, 0)


def test_base_heap_is_abstract():
    with pytest.raises(TypeError):
        Heap()


def test_max_heapify_invariant():
    arr = list(VALUES)
    max_heapify(arr)
    assert sorted(arr) == sorted(VALUES)
    assert is_heap(arr, lambda a, b: a >= b)


def test_min_heapify_invariant():
    arr = list(VALUES)
    min_heapify(arr)
    assert sorted(arr) == sorted(VALUES)
    assert is_heap(arr, lambda a, b: a <= b)


def test_max_up_restores_order():
    arr = list(VALUES)
    max_heapify(arr)
    arr.append(max(VALUES) + 1)
    max_up(arr, len(arr) - 1, 0)
    assert arr[0] == max(VALUES) + 1
    assert is_heap(arr, lambda a, b: a >= b)


def test_min_up_restores_order():
    arr = list(VALUES)
    min_heapify(arr)
    arr.append(min(VALUES) - 1)
    min_up(arr, len(arr) - 1, 0)
    assert arr[0] == min(VALUES) - 1
    assert is_heap(arr, lambda a, b: a <= b)