# structkit

A small library of classic data structures and backtracking algorithms,
written in plain Python with no dependencies beyond the standard library.

## Installation

From a checkout of the project:

```
pip install .
```

## What is inside

### `structkit.backtracking`

- `permutations(text)` and `subsets(text)`: generators yielding every ordering
  and every subsequence of a string.
- `grid_paths(rows, cols)` yields the right/down paths from the top-left to the
  bottom-right cell as strings of `R` and `D`; `count_grid_paths(rows, cols)`
  counts them.
- `n_queens(n)` yields every solution board (lists of rows holding `"q"` and
  `"."`); `count_n_queens(n)` counts them. `is_queen_safe(board, row, col)` and
  `format_board(board)` are exposed as well.
- `solve_sudoku(grid)` returns a solved copy of a 9×9 grid where `0` marks an
  empty cell, and raises `ValueError` if the grid is malformed or has no
  solution. `is_sudoku_safe(grid, row, col, digit)` and `format_sudoku(grid)`
  are exposed as well.
- `fill_and_undo(n)` returns the array as seen at the bottom of a recursion and
  the array after every step was undone on the way back up.

```python
from structkit.backtracking import permutations, count_n_queens

list(permutations("abc"))  # ['abc', 'acb', 'bac', 'bca', 'cab', 'cba']
count_n_queens(4)          # 2
```

### `structkit.stacks`

- `Stack`: a list-backed stack with `push`, `pop`, `peek`, `is_empty`, `len()`
  and bottom-to-top iteration. `pop` and `peek` on an empty stack raise
  `IndexError`.
- `push_bottom(stack, value)`, `reverse_stack(stack)` (both in place) and
  `reverse_string(text)`.
- `is_valid_parentheses(expression)` and `has_duplicate_parentheses(expression)`
  (the latter raises `ValueError` on an unmatched `)`).
- `next_greater(values)`, `stock_span(prices)`, `stock_span_naive(prices)`.
- `nearest_smaller_left`, `nearest_smaller_right`, `max_histogram_area(heights)`.

```python
from structkit.stacks import stock_span, max_histogram_area

stock_span([100, 80, 60, 70, 60, 85, 100])  # [1, 1, 1, 2, 1, 5, 7]
max_histogram_area([2, 1, 5, 6, 2, 3])       # 10
```

### `structkit.linkedlists`

- `SinglyLinkedList(values=())`: push and pop at either end, `index_of` and
  `index_of_recursive` (returning `-1` when absent), in-place `reverse`, and
  `remove_nth_from_end(position)`. Popping from an empty list or an out-of-range
  position raises `IndexError`.
- `DoublyLinkedList`: push and pop at the front, with forward and `reversed()`
  iteration.
- Helpers that work on bare chains of `Node` objects: `build_chain`,
  `chain_values` (raises `ValueError` on a looping chain), `has_cycle`,
  `remove_cycle`, `split_at_middle`, `merge_sorted`, `merge_sort`,
  `reverse_chain`.

```python
from structkit.linkedlists import build_chain, merge_sort, chain_values

chain_values(merge_sort(build_chain([6, 4, 2, 2, 3, 5])))  # [2, 2, 3, 4, 5, 6]
```

### `structkit.queues`

- `CircularQueue(capacity)`: a fixed-size ring buffer; `enqueue` on a full queue
  raises `OverflowError`.
- `LinkedQueue`, `DequeQueue`, and `TwoStackQueue`, a queue built from two stacks.
- `TwoQueueStack`, a stack built from two queues, and `DequeStack`.
- Removing from or looking at an empty container raises `IndexError`.
- `first_non_repeating(text)` gives, after each character, the first character
  seen only once so far (or `None`); `interleave_halves(values)` and
  `reverse_queue(values)` return lists.

```python
from structkit.queues import interleave_halves

interleave_halves(range(1, 11))  # [1, 6, 2, 7, 3, 8, 4, 9, 5, 10]
```

## What it does not do

structkit is a library only: it has no command-line program, and none of the
algorithms print their results. Render boards and grids yourself with
`format_board` and `format_sudoku`, or with `str()` on the linked lists.

## Running the tests

```
pip install ".[test]"
pytest
```