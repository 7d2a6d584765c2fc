import pytest

from structkit.stacks import (
    Stack,
    has_duplicate_parentheses,
    is_valid_parentheses,
    max_histogram_area,
    nearest_smaller_left,
    nearest_smaller_right,
    next_greater,
    push_bottom,
    reverse_stack,
    reverse_string,
    stock_span,
    stock_span_naive,
)

HEIGHT_SETS = [
    [2, 1, 5, 6, 2, 3],
    [1, 1, 1],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [3, 0, 3, 2, 2, 7],
    [4],
]


def test_stack_is_lifo():
    s = Stack()
    for v in (1, 2, 3):
        s.push(v)
    assert len(s) == 3
    assert s.peek() == 3
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
    assert s.is_empty() is True


def test_stack_iterates_bottom_to_top():
    assert list(Stack([1, 2, 3])) == [1, 2, 3]


def test_stack_empty_errors():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.peek()


def test_push_bottom():
    s = Stack([1, 2, 3])
    push_bottom(s, 5)
    assert s.items == [5, 1, 2, 3]
    assert s.peek() == 3


def test_push_bottom_on_empty():
    s = Stack()
    push_bottom(s, 7)
    assert s.items == [7]


def test_reverse_stack():
    s = Stack([1, 2, 3])
    reverse_stack(s)
    assert s.items == [3, 2, 1]
    assert s.pop() == 1


def test_reverse_stack_twice_is_identity():
    s = Stack([4, 8, 15, 16, 23, 42])
    reverse_stack(s)
    reverse_stack(s)
    assert s.items == [4, 8, 15, 16, 23, 42]


@pytest.mark.parametrize("text", ["", "a", "hello", "stack"])
def test_reverse_string(text):
    assert reverse_string(text) == text[::-1]
    assert reverse_string(reverse_string(text)) == text


def test_duplicate_parentheses_source_examples():
    assert has_duplicate_parentheses("((a+b))") is True
    assert has_duplicate_parentheses("((a+b)+(x+z))") is False


def test_duplicate_parentheses_simple():
    assert has_duplicate_parentheses("(a)") is False
    assert has_duplicate_parentheses("(a+(b))") is False
    assert has_duplicate_parentheses("(a+())") is True


@pytest.mark.parametrize("expression", [")", "a+b)"])
def test_duplicate_parentheses_unbalanced(expression):
    with pytest.raises(ValueError):
        has_duplicate_parentheses(expression)


def test_valid_parentheses_source_examples():
    assert is_valid_parentheses("({[{}]})[]({})") is True
    assert is_valid_parentheses("})") is False


@pytest.mark.parametrize(
    "expression, expected",
    [("", True), ("(", False), ("([)]", False), ("[]{}()", True), ("(a)", False)],
)
def test_valid_parentheses_cases(expression, expected):
    assert is_valid_parentheses(expression) is expected


def test_next_greater_example():
    assert next_greater([6, 8, 0, 1, 3]) == [8, -1, 1, 3, -1]


@pytest.mark.parametrize("values", [[1, 2, 3], [3, 2, 1], [2, 2, 5, 1, 4], [7]])
def test_next_greater_invariant(values):
    result = next_greater(values)
    assert len(result) == len(values)
    for i, g in enumerate(result):
        later = values[i + 1:]
        if g == -1:
            assert all(v <= values[i] for v in later)
        else:
            assert g > values[i]
            j = later.index(g)
            assert all(v <= values[i] for v in later[:j])


def test_next_greater_empty():
    assert next_greater([]) == []


@pytest.mark.parametrize(
    "prices",
    [[100, 80, 60, 70, 60, 85, 100], [1, 2, 3, 4], [4, 3, 2, 1], [5, 5, 5], [3, 1, 4, 1, 5, 9, 2, 6]],
)
def test_stock_span_naive_agrees(prices):
    assert stock_span_naive(prices) == stock_span(prices)


def test_stock_span_bounds():
    prices = [10, 4, 5, 90, 120, 80]
    spans = stock_span(prices)
    assert spans[0] == 1
    assert all(1 <= s <= i + 1 for i, s in enumerate(spans))


@pytest.mark.parametrize("heights", HEIGHT_SETS)
def test_nearest_smaller_left_invariant(heights):
    left = nearest_smaller_left(heights)
    for i, j in enumerate(left):
        assert -1 <= j < i
        if j >= 0:
            assert heights[j] < heights[i]
        assert all(heights[k] >= heights[i] for k in range(j + 1, i))


@pytest.mark.parametrize("heights", HEIGHT_SETS)
def test_nearest_smaller_right_invariant(heights):
    n = len(heights)
    right = nearest_smaller_right(heights)
    for i, j in enumerate(right):
        assert i < j <= n
        if j < n:
            assert heights[j] < heights[i]
        assert all(heights[k] >= heights[i] for k in range(i + 1, j))


def test_max_histogram_area_example():
    assert max_histogram_area([2, 1, 5, 6, 2, 3]) == 10


@pytest.mark.parametrize("heights", HEIGHT_SETS)
def test_max_histogram_area_bounds(heights):
    area = max_histogram_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)


def test_max_histogram_area_uniform_and_empty():
    assert max_histogram_area([3, 3, 3, 3]) == 3 * 4
    assert max_histogram_area([7]) == 7
    assert max_histogram_area([]) == 0