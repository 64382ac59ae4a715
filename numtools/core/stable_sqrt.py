# numtools/core/stable_sqrt.py
"""Cancellation-free evaluation of ``sqrt(1 + x) - 1`` and ``sqrt(a² + x) - a``.

For small ``|x|`` the naive expression subtracts two nearly equal numbers
and keeps nothing but rounding noise::

    >>> import math
    >>> math.sqrt(1 + 1e-16) - 1
    0.0
    >>> sqrtm1(1e-16)
    5e-17
"""

from __future__ import annotations

import math
import numbers

import numpy as np

from ..constants import SMALL_X_EPS_FACTOR
from ..domain.numeric import Scalar
from ..errors import DomainError


def machine_epsilon(x) -> float:
    """Epsilon of the floating type of *x* (``float64`` for anything else)."""
    dtype = np.asarray(x).dtype
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)
    return float(np.finfo(dtype).eps)


def _sqrtm1_unit(x):
    if np.any(np.less(x, -1)):
        raise DomainError(f"{x} < -1")

    if isinstance(x, numbers.Integral):
        return math.sqrt(1 + x) - 1

    tiny = SMALL_X_EPS_FACTOR * machine_epsilon(x)
    if np.ndim(x) == 0:
        if abs(x) < tiny:
            return x / 2  # first-order Taylor term
        return x / (np.sqrt(1 + x) + 1)

    x = np.asarray(x)
    return np.where(np.abs(x) < tiny, x / 2, x / (np.sqrt(1 + x) + 1))


def _sqrtm1_shifted(x, a):
    if a > 0:
        return a * _sqrtm1_unit(x / a**2)

    # a <= 0: -a adds to the root, nothing cancels
    radicand = a**2 + x
    if np.any(np.less(radicand, 0)):
        raise DomainError(f"{a}^2 + {x} < 0")
    return np.sqrt(radicand) - a


def sqrtm1(x: Scalar | np.ndarray, a: Scalar | None = None):
    """Return ``sqrt(1 + x) - 1``, or ``sqrt(a² + x) - a`` when *a* is given.

    Parameters
    ----------
    x : number or array_like
        Argument, ``x >= -1`` (``x >= -a²`` in the two-argument form).
    a : number, optional
        Shift. For ``a > 0`` the result is ``a * sqrtm1(x / a²)``, which
        keeps full precision when ``x`` is tiny compared to ``a²``.

    Raises
    ------
    DomainError
        If the square root argument is negative.
    """
    if a is None:
        return _sqrtm1_unit(x)
    return _sqrtm1_shifted(x, a)
