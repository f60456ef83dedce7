"""Backtracking searches: combination sums, N-queens, subsequences and permutations."""

from __future__ import annotations

from collections.abc import Sequence


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Distinct combinations of ``candidates``, each used at most once, summing to ``target``."""
    ordered = sorted(candidates)
    found: list[list[int]] = []
    chosen: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            found.append(list(chosen))
            return
        if remaining < 0:
            return
        for i in range(start, len(ordered)):
            if i > start and ordered[i] == ordered[i - 1]:
                continue
            chosen.append(ordered[i])
            search(i + 1, remaining - ordered[i])
            chosen.pop()

    search(0, target)
    return found


def n_queens(n: int) -> list[list[int]]:
    """Every placement of ``n`` non-attacking queens, as flat row-major 0/1 boards."""
    if n < 0:
        raise ValueError("board size must be non-negative")
    boards: list[list[int]] = []
    columns: list[int] = []

    def safe(row: int, col: int) -> bool:
        return all(
            placed != col and abs(placed - col) != row - r
            for r, placed in enumerate(columns)
        )

    def place(row: int) -> None:
        if row == n:
            board = [0] * (n * n)
            for r, col in enumerate(columns):
                board[r * n + col] = 1
            boards.append(board)
            return
        for col in range(n):
            if safe(row, col):
                columns.append(col)
                place(row + 1)
                columns.pop()

    place(0)
    return boards


def subsequences(text: str) -> list[str]:
    """Every subsequence of ``text``, taking each character before leaving it out.

    The empty subsequence comes last.
    """
    result: list[str] = []

    def build(index: int, prefix: str) -> None:
        if index == len(text):
            result.append(prefix)
            return
        build(index + 1, prefix + text[index])
        build(index + 1, prefix)

    build(0, "")
    return result


def permutations(text: str) -> list[str]:
    """Every arrangement of ``text``, produced by swapping each character into place."""
    chars = list(text)
    result: list[str] = []

    def arrange(i: int) -> None:
        if i >= len(chars) - 1:
            result.append("".join(chars))
            return
        for k in range(i, len(chars)):
            chars[i], chars[k] = chars[k], chars[i]
            arrange(i + 1)
            chars[i], chars[k] = chars[k], chars[i]

    arrange(0)
    return result