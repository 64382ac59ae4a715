# numtools/transforms/ylog.py
"""Interpolation linear in ``(x, log y)``: exponentials become straight lines."""

from __future__ import annotations

import numpy as np

from . import AbstractTransform, exp_or_zero, log_clamped


class YLogTransform(AbstractTransform):
    name = "ylog"
    positive_x = False  # x is used as is, any sign

    @property
    def default_extrapolation(self) -> float:
        return -np.inf

    def forward_x(self, x: np.ndarray) -> np.ndarray:
        return x

    def forward_y(self, y: np.ndarray) -> np.ndarray:
        return log_clamped(y)

    def inverse_y(self, v: np.ndarray) -> np.ndarray:
        return exp_or_zero(v)
