# numtools/core/loginterp.py
"""Piecewise-linear interpolation in log-log, log-x or log-y coordinates.

The samples are mapped into the coordinate space of the chosen method
(see :mod:`numtools.transforms`), a linear interpolant is built there and
every query travels the same way: forward transform, backend evaluation,
inverse transform.

Policy shared by all methods:

* queries of ``loglog``/``xlog`` at ``x <= 0`` are not an error; a warning
  is logged and ``0`` is returned;
* a numeric ``extrapolation_bc`` is divided by the output unit scale and
  handed to the backend in its coordinate space;
* ``Extrapolation.THROW`` makes out-of-range queries raise ``RangeError``.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import numpy as np

from ..constants import DEFAULT_METHOD
from ..domain.numeric import magnitudes, unit_scale, with_scale
from ..domain.samples import Samples
from ..transforms import AbstractTransform, get as get_transform
from .interpolation import (
    Extrapolation,
    ExtrapolationBC,
    InterpolatorFactory,
    LinearInterpolation,
    as_extrapolation,
)

logger = logging.getLogger(__name__)


class LogInterpolant:
    """Callable returned by :func:`loginterpolator`.

    Holds only read-only state, so one instance may be shared between
    threads.
    """

    def __init__(
        self,
        transform: AbstractTransform,
        samples: Samples,
        extrapolation_bc: ExtrapolationBC,
        backend: InterpolatorFactory = LinearInterpolation,
        log: logging.Logger | None = None,
    ) -> None:
        self._transform = transform
        self._xscale = unit_scale(samples.x)
        self._yscale = unit_scale(samples.y)
        self._extrapolation_bc = extrapolation_bc
        self._log = log or logger

        x = magnitudes(samples.x, self._xscale)
        y = magnitudes(samples.y, self._yscale)
        self._domain = samples.bounds
        self._interp = backend(
            transform.forward_x(x), transform.forward_y(y), extrapolation_bc
        )
        self._log.debug(
            "built %s interpolant over %d samples, extrapolation_bc=%r",
            transform.name,
            len(samples),
            extrapolation_bc,
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def method(self) -> str:
        return self._transform.name

    @property
    def extrapolation_bc(self) -> ExtrapolationBC:
        return self._extrapolation_bc

    @property
    def domain(self) -> tuple[Any, Any]:
        """First and last sample abscissa, in caller units."""
        return self._domain

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def __call__(self, x):
        xq = magnitudes(x, self._xscale)
        scalar = xq.ndim == 0
        xq = np.atleast_1d(xq)

        out = np.zeros(xq.shape, dtype=float)
        valid = np.ones(xq.shape, dtype=bool)
        if self._transform.positive_x:
            valid = ~(xq <= 0)
            if not valid.all():
                self._log.warning(
                    "%s interpolant queried at non-positive x=%s; returning 0",
                    self.method,
                    x if scalar else xq[~valid].tolist(),
                )

        if valid.any():
            v = self._interp(self._transform.forward_x(xq[valid]))
            out[valid] = self._transform.inverse_y(np.asarray(v, dtype=float))

        if scalar:
            return with_scale(float(out[0]), self._yscale)
        return with_scale(out, self._yscale)

    def __repr__(self) -> str:
        return (
            f"LogInterpolant(method={self.method!r}, domain={self._domain}, "
            f"extrapolation_bc={self._extrapolation_bc!r})"
        )


def loginterpolator(
    x: Sequence[Any],
    y: Sequence[Any],
    method: str = DEFAULT_METHOD,
    extrapolation_bc=None,
    *,
    backend: InterpolatorFactory = LinearInterpolation,
    logger: logging.Logger | None = None,
) -> LogInterpolant:
    """Build a piecewise-linear interpolant of ``(x, y)`` in log coordinates.

    Parameters
    ----------
    x, y : sequence
        Samples of equal length, ``x`` strictly increasing.
    method : str
        ``"loglog"`` (default), ``"xlog"`` or ``"ylog"``.
    extrapolation_bc : float, Extrapolation or str, optional
        Outside the sample range: a constant (in output units, applied in
        the interpolation space of the method), ``Extrapolation.THROW`` /
        ``"throw"`` to raise :class:`~numtools.errors.RangeError`, or
        ``FLAT``/``LINE``. By default ``-inf`` in log space for
        ``loglog``/``ylog`` (evaluates to ``0``) and ``0`` for ``xlog``.
    backend : callable, optional
        Factory ``backend(xp, fp, extrapolation_bc)`` of the linear
        interpolant; :class:`LinearInterpolation` by default.
    logger : logging.Logger, optional
        Sink of the non-positive-query warning; the module logger by default.

    Raises
    ------
    InvalidArgument
        Unknown method, mismatched or too short samples, unsorted ``x``.
    """
    transform = get_transform(method)
    samples = Samples(x, y)

    if extrapolation_bc is None:
        bc: ExtrapolationBC = transform.default_extrapolation
    elif isinstance(extrapolation_bc, (Extrapolation, str)):
        bc = as_extrapolation(extrapolation_bc)
    else:
        bc = float(magnitudes(extrapolation_bc, unit_scale(y)))

    return LogInterpolant(transform, samples, bc, backend=backend, log=logger)
