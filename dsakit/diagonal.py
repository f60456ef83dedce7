"""A square matrix that stores only its diagonal."""

from __future__ import annotations


class DiagonalMatrix:
    """An ``n`` by ``n`` diagonal matrix indexed from 1 as ``matrix[i, j]``.

    Off-diagonal cells read as 0; assignments to them are ignored.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self.n = n
        self._diagonal = [0] * n

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        i, j = key
        if not (1 <= i <= self.n and 1 <= j <= self.n):
            raise IndexError(f"position ({i}, {j}) is outside 1..{self.n}")
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> int:
        i, j = self._check(key)
        return self._diagonal[i - 1] if i == j else 0

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        i, j = self._check(key)
        if i == j:
            self._diagonal[i - 1] = value

    def rows(self) -> list[list[int]]:
        """The full matrix as a list of rows."""
        return [
            [value if col == row else 0 for col in range(self.n)]
            for row, value in enumerate(self._diagonal)
        ]