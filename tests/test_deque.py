import pytest

from dsakit.deque import Deque


def test_empty_deque():
    deque = Deque()
    assert deque.is_empty()
    assert len(deque) == 0


def test_enqueue_dequeue_sequence():
    deque = Deque()
    deque.enqueue_front(1)
    assert len(deque) == 1
    assert deque.front() == 1
    assert deque.back() == 1
    deque.enqueue_back(2)
    assert len(deque) == 2
    assert deque.front() == 1
    assert deque.back() == 2
    assert deque.dequeue_front() == 1
    assert len(deque) == 1
    assert deque.front() == 2
    assert deque.back() == 2
    assert deque.dequeue_back() == 2
    assert len(deque) == 0
    assert deque.is_empty()


def test_copy_is_independent():
    deque = Deque()
    for value in (1, 2, 3):
        deque.enqueue_back(value)
    assert len(deque) == 3
    d1 = deque.copy()
    assert len(d1) == 3
    assert d1.front() == 1
    assert d1.back() == 3
    deque.dequeue_front()
    assert list(d1) == [1, 2, 3]
    assert list(deque) == [2, 3]


def test_iteration_order():
    deque = Deque()
    deque.enqueue_back(2)
    deque.enqueue_front(1)
    deque.enqueue_back(3)
    assert list(deque) == [1, 2, 3]


def test_stack_behaviour_at_one_end():
    deque = Deque()
    for value in range(5):
        deque.enqueue_front(value)
    assert [deque.dequeue_front() for _ in range(5)] == [4, 3, 2, 1, 0]


def test_queue_behaviour():
    deque = Deque(range(5))
    assert [deque.dequeue_front() for _ in range(5)] == list(range(5))


def test_clear():
    deque = Deque([1, 2, 3])
    deque.clear()
    assert deque.is_empty()
    assert list(deque) == []
    deque.enqueue_back(7)
    assert deque.front() == deque.back() == 7


@pytest.mark.parametrize(
    "operation", ["dequeue_front", "dequeue_back", "front", "back"]
)
def test_empty_operations_raise(operation):
    with pytest.raises(IndexError):
        getattr(Deque(), operation)()