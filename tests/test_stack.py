import pytest

from structkit.stack import Stack, is_valid_parentheses


def test_pop_order_is_reverse_of_push():
    values = [10, 30, 50, 70]
    stack = Stack()
    for value in values:
        stack.push(value)
    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
    assert popped == list(reversed(values))


def test_constructor_values_pushed_in_order():
    values = [1, 2, 3]
    stack = Stack(values)
    assert stack.peek() == values[-1]
    assert len(stack) == len(values)


def test_iteration_runs_top_to_bottom():
    values = [4, 5, 6]
    stack = Stack(values)
    assert list(stack) == list(reversed(values))
    assert len(stack) == len(values)


def test_peek_does_not_remove():
    stack = Stack([9])
    assert stack.peek() == 9
    assert stack.peek() == 9
    assert len(stack) == 1


def test_is_empty_transitions():
    stack = Stack()
    assert stack.is_empty()
    stack.push(1)
    assert not stack.is_empty()
    stack.pop()
    assert stack.is_empty()


def test_empty_stack_errors():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


@pytest.mark.parametrize("text", ["", "()", "()[]{}", "{[()]}", "(([]){})"])
def test_valid_brackets(text):
    assert is_valid_parentheses(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "{{}", "())", "(a)"])
def test_invalid_brackets(text):
    assert is_valid_parentheses(text) is False