"""Backtracking searches: grid paths, N-queens, permutations, subsets and sudoku."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import chain

QUEEN = "q"
EMPTY = "."
SUDOKU_SIZE = 9
BOX_SIZE = 3

Board = list[list[str]]
Grid = list[list[int]]


def fill_and_undo(n: int) -> tuple[list[int], list[int]]:
    """Fill an array of ``n`` zeros with 1..n on the way down and subtract 2 on the way back.

    Returns the array as seen at the deepest point and the array after every
    step has been undone.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    values = [0] * n
    at_leaf: list[int] = []

    def descend(i: int) -> None:
        if i == n:
            at_leaf.extend(values)
            return
        values[i] = i + 1
        descend(i + 1)
        values[i] -= 2

    descend(0)
    return at_leaf, values


def grid_paths(rows: int, cols: int) -> Iterator[str]:
    """Yield every path from the top-left to the bottom-right cell as moves 'R' and 'D'."""
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must be non-negative")

    def walk(r: int, c: int, path: str) -> Iterator[str]:
        if r == rows - 1 and c == cols - 1:
            yield path
            return
        if r >= rows or c >= cols:
            return
        yield from walk(r, c + 1, path + "R")
        yield from walk(r + 1, c, path + "D")

    return walk(0, 0, "")


def count_grid_paths(rows: int, cols: int) -> int:
    """Number of right/down paths through a ``rows`` x ``cols`` grid."""
    return sum(1 for _ in grid_paths(rows, cols))


def is_queen_safe(board: Sequence[Sequence[str]], row: int, col: int) -> bool:
    """Whether a queen can stand at (row, col) given queens already on earlier rows."""
    n = len(board)
    if QUEEN in board[row]:
        return False
    if any(line[col] == QUEEN for line in board):
        return False
    upper_left = zip(range(row, -1, -1), range(col, -1, -1))
    upper_right = zip(range(row, -1, -1), range(col, n))
    return not any(board[r][c] == QUEEN for r, c in chain(upper_left, upper_right))


def n_queens(n: int) -> Iterator[Board]:
    """Yield every placement of ``n`` non-attacking queens on an ``n`` x ``n`` board."""
    if n < 0:
        raise ValueError("board size must be non-negative")
    board: Board = [[EMPTY] * n for _ in range(n)]

    def place(row: int) -> Iterator[Board]:
        if row == n:
            yield [line.copy() for line in board]
            return
        for col in range(n):
            if is_queen_safe(board, row, col):
                board[row][col] = QUEEN
                yield from place(row + 1)
                board[row][col] = EMPTY

    return place(0)


def count_n_queens(n: int) -> int:
    """Number of solutions to the ``n``-queens problem."""
    return sum(1 for _ in n_queens(n))


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render a chess board one row per line, cells separated by spaces."""
    return "\n".join(" ".join(line) for line in board)


def permutations(text: str) -> Iterator[str]:
    """Yield every ordering of the characters of ``text``, picking leftmost first."""

    def permute(rest: str, prefix: str) -> Iterator[str]:
        if not rest:
            yield prefix
            return
        for i, ch in enumerate(rest):
            yield from permute(rest[:i] + rest[i + 1:], prefix + ch)

    return permute(text, "")


def subsets(text: str) -> Iterator[str]:
    """Yield every subsequence of ``text``, taking each character before leaving it out."""

    def choose(rest: str, prefix: str) -> Iterator[str]:
        if not rest:
            yield prefix
            return
        yield from choose(rest[1:], prefix + rest[0])
        yield from choose(rest[1:], prefix)

    return choose(text, "")


def is_sudoku_safe(grid: Sequence[Sequence[int]], row: int, col: int, digit: int) -> bool:
    """Whether ``digit`` is absent from the row, column and 3x3 box of (row, col)."""
    if digit in grid[row]:
        return False
    if any(line[col] == digit for line in grid):
        return False
    row_start = row // BOX_SIZE * BOX_SIZE
    col_start = col // BOX_SIZE * BOX_SIZE
    return all(
        digit not in grid[r][col_start:col_start + BOX_SIZE]
        for r in range(row_start, row_start + BOX_SIZE)
    )


def _validated_copy(grid: Sequence[Sequence[int]]) -> Grid:
    if len(grid) != SUDOKU_SIZE:
        raise ValueError("sudoku grid must have 9 rows")
    board: Grid = []
    for line in grid:
        cells = list(line)
        if len(cells) != SUDOKU_SIZE:
            raise ValueError("every sudoku row must have 9 cells")
        if any(not isinstance(v, int) or not 0 <= v <= 9 for v in cells):
            raise ValueError("sudoku cells must be integers from 0 to 9")
        board.append(cells)
    return board


def _fill(board: Grid, cell: int) -> bool:
    if cell == SUDOKU_SIZE * SUDOKU_SIZE:
        return True
    row, col = divmod(cell, SUDOKU_SIZE)
    if board[row][col]:
        return _fill(board, cell + 1)
    for digit in range(1, 10):
        if is_sudoku_safe(board, row, col, digit):
            board[row][col] = digit
            if _fill(board, cell + 1):
                return True
            board[row][col] = 0
    return False


def solve_sudoku(grid: Sequence[Sequence[int]]) -> Grid:
    """Return a solved copy of a 9x9 sudoku where 0 marks an empty cell.

    Raises ValueError if the grid is malformed or has no solution.
    """
    board = _validated_copy(grid)
    if not _fill(board, 0):
        raise ValueError("sudoku has no solution")
    return board


def format_sudoku(grid: Sequence[Sequence[int]]) -> str:
    """Render a sudoku grid one row per line, digits separated by spaces."""
    return "\n".join(" ".join(str(v) for v in line) for line in grid)