"""Tridiagonal linear systems.

A tridiagonal matrix of order ``N`` stores its sub-diagonal ``a``, main
diagonal ``b`` and super-diagonal ``c`` as three length-``N`` arrays
(``a[0]`` and ``c[N-1]`` are unused). Systems are solved with the Thomas
algorithm in O(N).

The solver performs no pivoting. It is stable for diagonally dominant
matrices; a zero pivot produces inf/NaN, or raises ``ZeroDivisionError``
when debug mode is enabled.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..diagnostics import assert_nonzero_pivot, is_debug_enabled
from ..errors import LengthMismatchError


class TriDiagonalMatrix:
    """Square tridiagonal matrix with an O(N) solver.

    Args:
        n: Matrix order.

    Example:
        >>> m = TriDiagonalMatrix(3)
        >>> m.b[:] = 2.0
        >>> m.a[1:] = m.c[:-1] = -1.0
        >>> m.solve([1.0, 0.0, 1.0])
        array([1., 1., 1.])
    """

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"Matrix order must be non-negative, got {n}")
        self.a = np.zeros(n, dtype=float)
        self.b = np.zeros(n, dtype=float)
        self.c = np.zeros(n, dtype=float)

    @property
    def n(self) -> int:
        """Matrix order."""
        return len(self.b)

    def _check_index(self, index: Tuple[int, int]) -> Tuple[int, int]:
        row, col = index
        if not (0 <= row < self.n and 0 <= col < self.n):
            raise IndexError(f"Index ({row}, {col}) out of range for order {self.n}")
        return row, col

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = self._check_index(index)
        if col == row - 1:
            return float(self.a[row])
        if col == row:
            return float(self.b[row])
        if col == row + 1:
            return float(self.c[row])
        return 0.0

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        row, col = self._check_index(index)
        if col == row - 1:
            self.a[row] = value
        elif col == row:
            self.b[row] = value
        elif col == row + 1:
            self.c[row] = value
        else:
            raise ValueError(
                f"Only the three central diagonals can be set, got ({row}, {col})"
            )

    def to_dense(self) -> np.ndarray:
        """Return the matrix as a dense ``(n, n)`` array."""
        n = self.n
        dense = np.diag(self.b)
        if n > 1:
            dense += np.diag(self.a[1:], k=-1) + np.diag(self.c[:-1], k=1)
        return dense

    def dot(self, x) -> np.ndarray:
        """Matrix-vector product ``M @ x``."""
        x = np.asarray(x, dtype=float)
        if len(x) != self.n:
            raise LengthMismatchError(self.n, len(x), "vector")
        y = self.b * x
        y[1:] += self.a[1:] * x[:-1]
        y[:-1] += self.c[:-1] * x[1:]
        return y

    __matmul__ = dot

    def solve(self, d) -> np.ndarray:
        """Solve ``M x = d`` with the Thomas algorithm.

        The matrix is left unchanged.

        Args:
            d: Right-hand side of length ``n``.

        Returns:
            Solution vector ``x``.

        Raises:
            LengthMismatchError: If ``len(d) != n``.
            ZeroDivisionError: On a zero pivot, in debug mode only.
        """
        d = np.asarray(d, dtype=float)
        n = self.n
        if len(d) != n:
            raise LengthMismatchError(n, len(d), "right-hand side")
        if n == 0:
            return np.zeros(0, dtype=float)

        debug = is_debug_enabled()
        a, b, c = self.a, self.b, self.c
        c_prime = np.zeros(n, dtype=float)
        d_prime = np.zeros(n, dtype=float)

        with np.errstate(divide="ignore", invalid="ignore"):
            if debug:
                assert_nonzero_pivot(b[0], 0)
            c_prime[0] = c[0] / b[0]
            d_prime[0] = d[0] / b[0]

            for i in range(1, n):
                pivot = b[i] - c_prime[i - 1] * a[i]
                if debug:
                    assert_nonzero_pivot(pivot, i)
                c_prime[i] = c[i] / pivot
                d_prime[i] = (d[i] - d_prime[i - 1] * a[i]) / pivot

        x = np.zeros(n, dtype=float)
        x[-1] = d_prime[-1]
        for i in range(n - 2, -1, -1):
            x[i] = d_prime[i] - c_prime[i] * x[i + 1]
        return x

    def __repr__(self) -> str:
        return f"TriDiagonalMatrix(n={self.n})"
