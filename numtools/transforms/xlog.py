# numtools/transforms/xlog.py
"""Interpolation linear in ``(log x, y)``.

Only the abscissa is log-transformed, so ordinates keep their sign and the
default extrapolation level is a plain ``0``.
"""

from __future__ import annotations

import numpy as np

from . import AbstractTransform


class XLogTransform(AbstractTransform):
    name = "xlog"
    positive_x = True

    @property
    def default_extrapolation(self) -> float:
        return 0.0

    def forward_x(self, x: np.ndarray) -> np.ndarray:
        with np.errstate(divide="ignore", invalid="ignore"):
            return np.log(x)

    def forward_y(self, y: np.ndarray) -> np.ndarray:
        return np.asarray(y, dtype=float)

    def inverse_y(self, v: np.ndarray) -> np.ndarray:
        return v
