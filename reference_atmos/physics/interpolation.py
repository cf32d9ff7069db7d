"""Piecewise-linear interpolation with linear extrapolation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class PiecewiseLinear:
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        x = np.asarray(self.x, dtype=float)
        y = np.asarray(self.y, dtype=float)
        if x.ndim != 1 or x.shape != y.shape:
            raise ValueError("breakpoints and values must be 1-D arrays of equal length")
        if x.size < 2:
            raise ValueError("at least two breakpoints are required")
        if np.any(np.diff(x) <= 0.0):
            raise ValueError("breakpoints must be strictly increasing")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @property
    def slope_low(self) -> float:
        return float((self.y[1] - self.y[0]) / (self.x[1] - self.x[0]))

    @property
    def slope_high(self) -> float:
        return float((self.y[-1] - self.y[-2]) / (self.x[-1] - self.x[-2]))

    def evaluate(self, x: float | np.ndarray) -> float | np.ndarray:
        """Interpolate inside the breakpoints, extend the end segments outside them."""
        xq = np.asarray(x, dtype=float)
        # np.interp returns the tabulated value exactly at a breakpoint
        out = np.interp(xq, self.x, self.y)
        out = np.where(xq < self.x[0], self.y[0] + self.slope_low * (xq - self.x[0]), out)
        out = np.where(xq > self.x[-1], self.y[-1] + self.slope_high * (xq - self.x[-1]), out)
        if out.ndim == 0:
            return float(out)
        return out
