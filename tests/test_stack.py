import pytest

from dsakit.stack import Stack, StackOverflowError, StackUnderflowError


def test_push_then_pop_source_example():
    stack = Stack(10)
    stack.push(5)
    assert stack.pop() == 5
    assert stack.is_empty()


def test_last_in_first_out():
    values = [2135, 543, 53, 25, 15]
    stack = Stack(10)
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]


def test_len_tracks_pushes_and_pops():
    stack = Stack(4)
    stack.push(1)
    stack.push(2)
    assert len(stack) == 2
    stack.pop()
    assert len(stack) == 1


def test_new_stack_is_empty_not_full():
    stack = Stack(80)
    assert stack.is_empty()
    assert not stack.is_full()
    assert len(stack) == 0


def test_full_stack_overflows():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(3)
    assert len(stack) == 2


def test_empty_stack_underflows():
    stack = Stack(3)
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()


def test_peek_does_not_remove():
    stack = Stack(3)
    stack.push("a")
    stack.push("b")
    assert stack.peek() == "b"
    assert len(stack) == 2
    assert stack.pop() == "b"


def test_error_types_fit_builtin_hierarchy():
    stack = Stack(1)
    with pytest.raises(IndexError):
        stack.pop()
    stack.push(1)
    with pytest.raises(OverflowError):
        stack.push(2)


@pytest.mark.parametrize("capacity", [0, -5])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        Stack(capacity)