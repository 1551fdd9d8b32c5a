import pytest

from dsakit.stacks import (
    ArrayStack,
    LinkedStack,
    StackEmptyError,
    StackFullError,
    is_balanced,
    reverse_with_stack,
)


def test_push_pop_is_last_in_first_out():
    for stack in (ArrayStack(10), LinkedStack()):
        for value in (1, 2, 3):
            stack.push(value)
        assert len(stack) == 3
        assert stack.peek() == 3
        assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
        assert stack.is_empty()


def test_empty_stack_raises():
    for stack in (ArrayStack(10), LinkedStack()):
        with pytest.raises(StackEmptyError):
            stack.pop()
        with pytest.raises(StackEmptyError):
            stack.peek()


def test_peek_does_not_remove():
    for stack in (ArrayStack(10), LinkedStack()):
        stack.push("x")
        assert stack.peek() == "x"
        assert stack.peek() == "x"
        assert len(stack) == 1


def test_array_stack_overflow():
    stack = ArrayStack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(3)
    assert stack.pop() == 2
    assert not stack.is_full()


def test_array_stack_default_capacity_matches_menu_program():
    stack = ArrayStack()
    for value in range(10):
        stack.push(value)
    with pytest.raises(StackFullError):
        stack.push(10)


def test_linked_stack_unbounded():
    stack = LinkedStack()
    for value in range(1000):
        stack.push(value)
    assert len(stack) == 1000
    assert stack.pop() == 999


@pytest.mark.parametrize(
    "expression",
    ["", "(a + b)", "{[()]}", "a * (b + [c - {d}])", "()[]{}"],
)
def test_balanced_expressions(expression):
    assert is_balanced(expression)


@pytest.mark.parametrize(
    "expression",
    ["(", ")", "(]", "([)]", "{[}", "(a + b))", "((a)"],
)
def test_unbalanced_expressions(expression):
    assert not is_balanced(expression)


def test_reverse_with_stack_round_trip():
    values = [5, 9, 2, 7]
    reversed_values = reverse_with_stack(values)
    assert reversed_values == [7, 2, 9, 5]
    assert reverse_with_stack(reversed_values) == values


def test_reverse_with_stack_accepts_iterables():
    assert reverse_with_stack(iter("abc")) == ["c", "b", "a"]
    assert reverse_with_stack([]) == []