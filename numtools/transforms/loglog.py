# numtools/transforms/loglog.py
"""Interpolation linear in ``(log x, log y)``: power laws become straight lines.

Negative ordinates are clamped to ``0`` (``log 0 = -inf``) rather than
rejected; anything that comes back as NaN from the ``-inf`` samples is
reported as ``0``.
"""

from __future__ import annotations

import numpy as np

from . import AbstractTransform, exp_or_zero, log_clamped


class LogLogTransform(AbstractTransform):
    name = "loglog"
    positive_x = True

    @property
    def default_extrapolation(self) -> float:
        return -np.inf  # exp(-inf) == 0 outside the samples

    def forward_x(self, x: np.ndarray) -> np.ndarray:
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.log(x)

    def forward_y(self, y: np.ndarray) -> np.ndarray:
        return log_clamped(y)

    def inverse_y(self, v: np.ndarray) -> np.ndarray:
        return exp_or_zero(v)
