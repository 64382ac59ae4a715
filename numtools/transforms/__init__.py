# numtools/transforms/__init__.py
"""Coordinate transforms of the log-space interpolants and their factory.

*The module brings together:*
1. **AbstractTransform** – the abstract base class describing how samples
   and queries are mapped into the space where the interpolation is
   linear, and how backend results are mapped back.
2. The factory function **get(name)** returning a transform by its method
   name (``"loglog"``, ``"xlog"``, ``"ylog"``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from ..errors import InvalidArgument

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def log_clamped(y: np.ndarray) -> np.ndarray:
    """``log(max(y, 0))`` with ``log(0) = -inf`` and no numpy warning."""
    with np.errstate(divide="ignore"):
        return np.log(np.maximum(y, 0.0))


def exp_or_zero(v: np.ndarray) -> np.ndarray:
    """``exp(v)`` with NaN replaced by ``0``."""
    out = np.exp(v)
    return np.where(np.isnan(out), 0.0, out)


# ---------------------------------------------------------------------------
# Abstract base class
# ---------------------------------------------------------------------------


class AbstractTransform(ABC):
    """Mapping between caller coordinates and interpolation coordinates.

    ``positive_x`` tells the interpolant whether queries must be strictly
    positive; non-positive queries are then answered with ``0`` without
    reaching the backend.
    """

    name: str = ""
    positive_x: bool = False

    @property
    @abstractmethod
    def default_extrapolation(self) -> float:
        """Backend extrapolation level used when the caller gives none."""

    @abstractmethod
    def forward_x(self, x: np.ndarray) -> np.ndarray:
        """Map sample abscissae (and queries) to interpolation space."""

    @abstractmethod
    def forward_y(self, y: np.ndarray) -> np.ndarray:
        """Map sample ordinates to interpolation space."""

    @abstractmethod
    def inverse_y(self, v: np.ndarray) -> np.ndarray:
        """Map backend results back to caller ordinates."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# ---------------------------------------------------------------------------
# Factory by method name
# ---------------------------------------------------------------------------


def get(name: str = "loglog") -> AbstractTransform:
    """Return the transform for interpolation method *name*.

    Raises
    ------
    InvalidArgument
        If *name* is not one of ``"loglog"``, ``"xlog"``, ``"ylog"``.
    """
    if name == "loglog":
        from .loglog import LogLogTransform

        return LogLogTransform()
    if name == "xlog":
        from .xlog import XLogTransform

        return XLogTransform()
    if name == "ylog":
        from .ylog import YLogTransform

        return YLogTransform()

    raise InvalidArgument(f"Unknown method: {name}")
