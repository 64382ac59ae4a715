# numtools/visualization/plots.py
"""Mini wrappers over matplotlib for the explorer tables.

The functions draw *interactive* charts (``plt.show()``) and do not return
Figure/Axes objects, to keep the API as small as possible.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..constants import METHODS
from ..domain.samples import Samples

# ---------------------------------------------------------------------------
# 1) Interpolants against their samples
# ---------------------------------------------------------------------------

def plot_interpolants(table: pd.DataFrame, samples: Samples) -> None:
    """All methods from an explorer table + the sample points."""
    x = np.asarray(samples.x, dtype=float)
    y = np.asarray(samples.y, dtype=float)

    for method in METHODS:
        if method in table:
            plt.plot(table["x"], table[method], label=method)
    plt.plot(x, y, "o", color="black", label="samples")

    if x[0] > 0:
        plt.xscale("log")
    if np.all(y > 0):
        plt.yscale("log")

    plt.title("Piecewise-linear interpolation in log space")
    plt.xlabel("x")
    plt.ylabel("y")
    plt.grid(True, which="both")
    plt.legend()
    plt.show()

# ---------------------------------------------------------------------------
# 2) Naive vs stable sqrt(1 + x) - 1
# ---------------------------------------------------------------------------

def plot_sqrtm1(table: pd.DataFrame) -> None:
    """Relative error of the naive formula, from ``sqrtm1_table``."""
    positive = table[table["x"] > 0]
    plt.loglog(positive["x"], positive["rel_err"], marker=".")
    plt.title("sqrt(1 + x) - 1: naive formula vs sqrtm1")
    plt.xlabel("x")
    plt.ylabel("relative error of the naive formula")
    plt.grid(True, which="both")
    plt.show()
