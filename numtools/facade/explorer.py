# numtools/facade/explorer.py
"""High-level *facade* for comparing the log-space interpolation methods.

**LogInterpolationExplorer** wraps one sample set and takes care of:
1. Building the ``loglog``/``xlog``/``ylog`` interpolants on demand.
2. Evaluating them on a common grid (``geomspace`` for positive samples,
   ``linspace`` otherwise) and collecting the result in a DataFrame.
3. (optional) Plotting the table through *visualization.plots*.

Client code creates one object and calls ``tabulate`` or ``plot``; the
interpolant construction happens under the hood.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

import numpy as np
import pandas as pd

from ..constants import DEFAULT_NUM, METHODS
from ..core.loginterp import LogInterpolant, loginterpolator
from ..core.sequences import geomspace, linspace
from ..core.stable_sqrt import sqrtm1
from ..domain.samples import Samples
from ..transforms import get as get_transform
from ..visualization import plots


class LogInterpolationExplorer:
    """Single entry point for side-by-side evaluation of all methods."""

    # ------------------------------------------------------------------
    # Constructor
    # ------------------------------------------------------------------

    def __init__(
        self,
        x: Sequence[Any],
        y: Sequence[Any],
        extrapolation_bc=None,
    ) -> None:
        self.samples = Samples(x, y)
        self.extrapolation_bc = extrapolation_bc
        self._cache: Dict[str, LogInterpolant] = {}

    # ------------------------------------------------------------------
    # Interpolants
    # ------------------------------------------------------------------

    def interpolant(self, method: str) -> LogInterpolant:
        """Return (and memoize) the interpolant for *method*."""
        if method not in self._cache:
            self._cache[method] = loginterpolator(
                self.samples.x, self.samples.y, method, self.extrapolation_bc
            )
        return self._cache[method]

    def evaluate(self, method: str, x):
        return self.interpolant(method)(x)

    def _bounds(self) -> tuple[float, float]:
        lo, hi = self.samples.bounds
        return float(lo), float(hi)

    def grid(self, num: int = DEFAULT_NUM) -> np.ndarray:
        """Query grid spanning the samples."""
        lo, hi = self._bounds()
        if lo > 0:
            grid = geomspace(lo, hi, num)
        else:
            grid = linspace(lo, hi, num)
        # the running product/sum may overshoot the last sample by an ulp
        return np.clip(grid, lo, hi)

    def tabulate(self, num: int = DEFAULT_NUM) -> pd.DataFrame:
        """Evaluate every method on :meth:`grid` and return one column each.

        Methods that need positive ``x`` are left at ``0`` when the samples
        reach zero or below, since no log-x interpolant exists for them.
        """
        xs = self.grid(num)
        positive = self._bounds()[0] > 0
        table = {"x": xs}
        for method in METHODS:
            if get_transform(method).positive_x and not positive:
                table[method] = np.zeros_like(xs, dtype=float)
            else:
                table[method] = self.evaluate(method, xs)
        return pd.DataFrame(table)

    # ------------------------------------------------------------------
    # Quick plot wrappers
    # ------------------------------------------------------------------

    def plot(self, num: int = DEFAULT_NUM) -> None:
        """Samples and all interpolants on one chart."""
        plots.plot_interpolants(self.tabulate(num), self.samples)


def sqrtm1_table(x: Sequence[float]) -> pd.DataFrame:
    """Naive ``sqrt(1+x)-1`` next to :func:`sqrtm1` for every *x*."""
    x = np.asarray(x, dtype=float)
    naive = np.sqrt(1 + x) - 1
    stable = sqrtm1(x)
    with np.errstate(divide="ignore", invalid="ignore"):
        rel_err = np.abs(naive - stable) / np.abs(stable)
    return pd.DataFrame({"x": x, "naive": naive, "sqrtm1": stable, "rel_err": rel_err})
