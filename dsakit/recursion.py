"""Classic recursive problems: factorial, Fibonacci, GCD, Hanoi and N queens."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def factorial(n: int) -> int:
    """Return n! for a non-negative integer *n*."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> int:
    """Return the *n*-th Fibonacci number, counting fibonacci(1) == fibonacci(2) == 1."""
    if n < 1:
        raise ValueError("fibonacci is defined from n = 1")
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of *a* and *b* by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def hanoi_moves(
    n: int, source: str = "A", dest: str = "B", spare: str = "C"
) -> Iterator[tuple[str, str]]:
    """Yield the (from, to) moves that carry *n* disks from *source* to *dest*."""
    if n < 1:
        raise ValueError("at least one disk is needed")
    if n == 1:
        yield (source, dest)
        return
    yield from hanoi_moves(n - 1, source, spare, dest)
    yield (source, dest)
    yield from hanoi_moves(n - 1, spare, dest, source)


def is_safe(board: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """Tell whether a queen at (*row*, *col*) is clear of queens in the rows above."""
    size = len(board)
    if any(board[r][col] for r in range(row)):
        return False
    for r, c in zip(range(row, -1, -1), range(col, -1, -1)):
        if board[r][c]:
            return False
    for r, c in zip(range(row, -1, -1), range(col, size)):
        if board[r][c]:
            return False
    return True


def all_n_queens(n: int = 8) -> Iterator[list[list[int]]]:
    """Yield every placement of *n* queens as an n-by-n board of 0s and 1s."""
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]

    def place(row: int) -> Iterator[list[list[int]]]:
        if row == n:
            yield [list(line) for line in board]
            return
        for col in range(n):
            if is_safe(board, row, col):
                board[row][col] = 1
                yield from place(row + 1)
                board[row][col] = 0

    yield from place(0)


def solve_n_queens(n: int = 8) -> list[list[int]] | None:
    """Return the first placement of *n* queens found, or None if there is none."""
    return next(all_n_queens(n), None)