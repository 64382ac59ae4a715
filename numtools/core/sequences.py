# numtools/core/sequences.py
"""Evenly spaced sequences on a linear and on a logarithmic scale.

Both generators build the result by a running recurrence,

* ``linspace``:  v[i] = v[i-1] + d,  d = (stop - start) / n
* ``geomspace``: v[i] = v[i-1] * q,  q = (stop / start) ** (1 / n)

with ``n = num - 1`` when ``endpoint`` is true and ``n = num`` otherwise.
The first sample is ``start`` itself, never a rounded copy of it.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from ..constants import DEFAULT_NUM
from ..domain.numeric import Scalar
from ..errors import InvalidArgument


def _check_num(num: Any) -> None:
    if not isinstance(num, numbers.Integral):
        raise InvalidArgument(f"num must be an integer, got {num!r}")
    if num <= 1:
        raise InvalidArgument("num <= 1")


def _common_dtype(*values: Any) -> np.dtype:
    # objects numpy does not know (e.g. quantities) end up as dtype=object
    return np.result_type(*(np.asarray(v).dtype for v in values))


def geomspace(start: Scalar, stop: Scalar, num: int = DEFAULT_NUM, endpoint: bool = True) -> np.ndarray:
    """Return a geometric sequence of ``num`` samples from ``start`` to ``stop``.

    Parameters
    ----------
    start, stop : number
        Nonzero values of the same sign.
    num : int
        Number of samples, must be greater than 1.
    endpoint : bool
        If true, ``stop`` is the last sample. Otherwise it is not included.

    Raises
    ------
    InvalidArgument
        If ``num <= 1``, ``start == 0`` or ``start`` and ``stop`` have
        opposite signs.

    >>> geomspace(1, 1e4, 5)
    array([1.e+00, 1.e+01, 1.e+02, 1.e+03, 1.e+04])
    """
    _check_num(num)
    if start == 0:
        raise InvalidArgument("start == 0")
    ratio = stop / start
    if ratio < 0:
        raise InvalidArgument(f"start={start!r} and stop={stop!r} differ in sign")

    n = num - 1 if endpoint else num
    q = ratio ** (1 / n)

    res = np.empty(num, dtype=_common_dtype(start, stop, q))
    res[0] = start
    for i in range(1, num):
        res[i] = res[i - 1] * q
    return res


def linspace(start: Scalar, stop: Scalar, num: int = DEFAULT_NUM, endpoint: bool = True) -> np.ndarray:
    """Return an arithmetic sequence of ``num`` samples from ``start`` to ``stop``.

    Same arguments as :func:`geomspace`; only ``num <= 1`` is rejected.

    >>> linspace(1.0, 5.0, 5)
    array([1., 2., 3., 4., 5.])
    """
    _check_num(num)

    n = num - 1 if endpoint else num
    d = (stop - start) / n

    res = np.empty(num, dtype=_common_dtype(start, stop, d))
    res[0] = start
    for i in range(1, num):
        res[i] = res[i - 1] + d
    return res
