"""Natural cubic spline interpolation for tabulated material data."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence


class CubicSpline:
    """A natural cubic spline through points ``(x_i, y_i)``.

    The knots must be strictly increasing. Evaluation outside the knot range
    extrapolates with the boundary polynomial.
    """

    def __init__(self, xs: Sequence[float], ys: Sequence[float]) -> None:
        xs = tuple(float(x) for x in xs)
        ys = tuple(float(y) for y in ys)
        if len(xs) != len(ys):
            raise ValueError("xs and ys must have equal length")
        if len(xs) < 2:
            raise ValueError("Need at least 2 data points")
        for index, (prev, cur) in enumerate(zip(xs, xs[1:]), start=1):
            if not cur > prev:
                raise ValueError(f"xs must be strictly increasing at index {index}")

        # Forward sweep of the tridiagonal system (natural boundary: y'' = 0).
        second = [0.0]
        u = [0.0]
        for (x0, x1, x2), (y0, y1, y2) in zip(
            zip(xs, xs[1:], xs[2:]), zip(ys, ys[1:], ys[2:])
        ):
            sig = (x1 - x0) / (x2 - x0)
            p = sig * second[-1] + 2.0
            second.append((sig - 1.0) / p)
            slope_change = (y2 - y1) / (x2 - x1) - (y1 - y0) / (x1 - x0)
            u.append((6.0 * slope_change / (x2 - x0) - sig * u[-1]) / p)
        second.append(0.0)

        # Back substitution.
        for i in range(len(xs) - 2, 0, -1):
            second[i] = second[i] * second[i + 1] + u[i]

        self._xs = xs
        self._ys = ys
        self._y2s = tuple(second)

    def evaluate(self, x: float) -> float:
        """Value of the spline at ``x``."""
        xs = self._xs
        lo = min(max(bisect_right(xs, x) - 1, 0), len(xs) - 2)
        hi = lo + 1

        h = xs[hi] - xs[lo]
        a = (xs[hi] - x) / h
        b = (x - xs[lo]) / h
        return (
            a * self._ys[lo]
            + b * self._ys[hi]
            + ((a**3 - a) * self._y2s[lo] + (b**3 - b) * self._y2s[hi]) * h * h / 6.0
        )

    def __call__(self, x: float) -> float:
        return self.evaluate(x)