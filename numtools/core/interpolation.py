# numtools/core/interpolation.py
"""One-dimensional piecewise-linear interpolation over sorted samples.

``LinearInterpolation`` is the backend every log-space interpolant is built
on. It is a thin layer over :func:`numpy.interp` that adds an explicit
extrapolation policy:

* a number     – constant value outside ``[xp[0], xp[-1]]``;
* ``THROW``    – :class:`~numtools.errors.RangeError` outside the range;
* ``FLAT``     – the boundary sample is held;
* ``LINE``     – the boundary segment is extended.

``numpy.interp`` accepts ``-inf`` samples and interpolates towards them
without raising, which is what ``log(0)`` produces in log space.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, Sequence, Union

import numpy as np

from ..errors import InvalidArgument, RangeError


class Extrapolation(Enum):
    """Non-numeric extrapolation policies."""

    THROW = "throw"
    FLAT = "flat"
    LINE = "line"


ExtrapolationBC = Union[float, Extrapolation]


def as_extrapolation(bc) -> ExtrapolationBC:
    """Normalize *bc*: policy names become :class:`Extrapolation` members."""
    if isinstance(bc, Extrapolation):
        return bc
    if isinstance(bc, str):
        try:
            return Extrapolation(bc.lower())
        except ValueError:
            raise InvalidArgument(f"Unknown extrapolation policy: {bc}") from None
    return float(bc)


class Interpolator(Protocol):
    """A minimal interface for 1-D interpolation, so we can inject mocks.
    Any object satisfying ``__call__(x) -> float | ndarray`` qualifies.
    """

    def __call__(self, x: float | np.ndarray) -> float | np.ndarray:
        ...


class InterpolatorFactory(Protocol):
    """Builds an :class:`Interpolator` from samples and a policy."""

    def __call__(
        self, xp: Sequence[float], fp: Sequence[float], extrapolation_bc: ExtrapolationBC
    ) -> Interpolator:
        ...


class LinearInterpolation:
    """Piecewise-linear interpolant through ``(xp, fp)``.

    Parameters
    ----------
    xp : sequence of float
        Strictly increasing abscissae (at least two).
    fp : sequence of float
        Ordinates, same length as ``xp``. ``±inf`` is allowed.
    extrapolation_bc : float or Extrapolation
        What to return outside ``[xp[0], xp[-1]]``.
    """

    def __init__(
        self,
        xp: Sequence[float],
        fp: Sequence[float],
        extrapolation_bc: ExtrapolationBC = Extrapolation.THROW,
    ) -> None:
        xp = np.array(xp, dtype=float)
        fp = np.array(fp, dtype=float)
        if xp.ndim != 1 or xp.shape != fp.shape:
            raise InvalidArgument(
                f"xp and fp must be 1-D of equal length, got {xp.shape} and {fp.shape}"
            )
        if xp.size < 2:
            raise InvalidArgument("at least two samples are required")
        if not np.all(np.diff(xp) > 0):
            raise InvalidArgument("xp must be strictly increasing")

        xp.setflags(write=False)
        fp.setflags(write=False)
        self._xp = xp
        self._fp = fp
        self._bc = as_extrapolation(extrapolation_bc)

    @property
    def extrapolation_bc(self) -> ExtrapolationBC:
        return self._bc

    @property
    def domain(self) -> tuple[float, float]:
        return float(self._xp[0]), float(self._xp[-1])

    def _line(self, x: np.ndarray, i: int, j: int) -> np.ndarray:
        xp, fp = self._xp, self._fp
        slope = (fp[j] - fp[i]) / (xp[j] - xp[i])
        return fp[i] + slope * (x - xp[i])

    def __call__(self, x: float | np.ndarray) -> float | np.ndarray:
        xq = np.asarray(x, dtype=float)
        lo, hi = self.domain
        below = xq < lo
        above = xq > hi

        if self._bc is Extrapolation.THROW:
            if np.any(below) or np.any(above):
                raise RangeError(f"query {x} outside interpolation range [{lo}, {hi}]")
            out = np.interp(xq, self._xp, self._fp)
        elif self._bc is Extrapolation.FLAT:
            out = np.interp(xq, self._xp, self._fp)
        elif self._bc is Extrapolation.LINE:
            out = np.interp(xq, self._xp, self._fp)
            with np.errstate(invalid="ignore"):
                out = np.where(below, self._line(xq, 0, 1), out)
                out = np.where(above, self._line(xq, -2, -1), out)
        else:
            out = np.interp(xq, self._xp, self._fp, left=self._bc, right=self._bc)

        if out.ndim == 0:
            return float(out)
        return out

    def __repr__(self) -> str:
        return (
            f"LinearInterpolation(n={self._xp.size}, domain={self.domain}, "
            f"extrapolation_bc={self._bc!r})"
        )

