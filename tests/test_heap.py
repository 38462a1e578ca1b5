import pytest

from dsakit.heap import Heap, HeapEmpty, HeapOverflow, MaxHeap, MinHeap

VALUES = [12, 11, 13, 5, 6, 7, 3, 20, 1]


def _is_heap(items, above):
    return all(
        not above(items[child], items[(child - 1) // 2])
        for child in range(1, len(items))
    )


def _min_ok(heap):
    return _is_heap(list(heap), lambda a, b: a < b)


def _max_ok(heap):
    return _is_heap(list(heap), lambda a, b: a > b)


def _fill(heap, values=VALUES):
    for value in values:
        heap.insert(value)
    return heap


def test_index_arithmetic():
    assert Heap.parent(3) == 1
    assert Heap.left(3) == 7
    assert Heap.right(3) == 8
    assert Heap.parent(0) == 0
    with pytest.raises(ValueError):
        Heap.left(-1)


def test_min_heap_insert_keeps_order_and_root():
    heap = _fill(MinHeap(len(VALUES)))
    assert _min_ok(heap)
    assert heap.peek() == min(VALUES)
    assert len(heap) == len(VALUES)
    assert sorted(heap) == sorted(VALUES)


def test_max_heap_insert_keeps_order_and_root():
    heap = _fill(MaxHeap(len(VALUES)))
    assert _max_ok(heap)
    assert heap.peek() == max(VALUES)


def test_insert_returns_heap_for_chaining():
    heap = MinHeap(3)
    assert heap.insert(2).insert(1).insert(3) is heap
    assert heap.peek() == 1


def test_overflow():
    heap = _fill(MaxHeap(2), [1, 2])
    with pytest.raises(HeapOverflow):
        heap.insert(3)
    assert len(heap) == 2


def test_zero_capacity_overflows():
    with pytest.raises(HeapOverflow):
        MinHeap(0).insert(1)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        MinHeap(-1)


def test_extract_min_yields_ascending():
    heap = _fill(MinHeap(len(VALUES)))
    out = [heap.extract_min() for _ in range(len(VALUES))]
    assert out == sorted(VALUES)
    assert len(heap) == 0


def test_extract_max_yields_descending():
    heap = _fill(MaxHeap(len(VALUES)))
    out = [heap.extract_max() for _ in range(len(VALUES))]
    assert out == sorted(VALUES, reverse=True)


def test_extract_and_peek_empty_raise():
    heap = MaxHeap(4)
    with pytest.raises(HeapEmpty):
        heap.extract()
    with pytest.raises(HeapEmpty):
        heap.peek()


def test_search():
    heap = _fill(MinHeap(len(VALUES)))
    index = heap.search(13)
    assert list(heap)[index] == 13
    assert heap.search(99) is None


def test_decrease_key_moves_to_root():
    heap = _fill(MinHeap(len(VALUES)))
    heap.decrease_key(len(heap) - 1, -5)
    assert heap.peek() == -5
    assert _min_ok(heap)


def test_decrease_key_rejects_larger_value():
    heap = _fill(MinHeap(len(VALUES)))
    with pytest.raises(ValueError):
        heap.decrease_key(0, 100)
    with pytest.raises(IndexError):
        heap.decrease_key(len(heap), 0)


def test_increase_key_moves_to_root():
    heap = _fill(MaxHeap(len(VALUES)))
    heap.increase_key(len(heap) - 1, 100)
    assert heap.peek() == 100
    assert _max_ok(heap)


def test_increase_key_rejects_smaller_value():
    heap = _fill(MaxHeap(len(VALUES)))
    with pytest.raises(ValueError):
        heap.increase_key(0, -100)


def test_delete_at_out_of_range():
    with pytest.raises(IndexError):
        _fill(MinHeap(len(VALUES))).delete_at(len(VALUES))


@pytest.mark.parametrize("cls,check", [(MinHeap, _min_ok), (MaxHeap, _max_ok)])
def test_delete_value(cls, check):
    heap = _fill(cls(len(VALUES)))
    for value in VALUES:
        assert heap.delete_value(value) is True
        assert heap.search(value) is None
        assert check(heap)
    assert len(heap) == 0


def test_delete_value_absent():
    heap = _fill(MaxHeap(len(VALUES)))
    assert heap.delete_value(99) is False
    assert len(heap) == len(VALUES)


def test_build_keeps_valid_heap():
    heap = _fill(MaxHeap(len(VALUES)))
    before = list(heap)
    heap.build()
    assert list(heap) == before
    assert _max_ok(heap)


def test_heapify_restores_after_root_increase_in_min_heap():
    heap = _fill(MinHeap(len(VALUES)))
    heap._items[0] = 1000
    heap.heapify(0)
    assert _min_ok(heap)
    assert 1000 in list(heap)


def test_capacity_property():
    assert MaxHeap(7).capacity == 7