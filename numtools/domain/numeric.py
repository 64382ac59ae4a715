# numtools/domain/numeric.py
"""Minimal numeric capability set and unit normalization helpers.

The library works on plain real numbers. Values that carry a physical
unit (anything exposing ``.units``, e.g. pint quantities) are accepted by
dividing them by a *unit scale* ``1 * units`` to obtain dimensionless
magnitudes, and multiplying results back. For plain numbers the scale is
the float ``1.0`` and the helpers reduce to ``numpy.asarray``.
"""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np

IDENTITY_SCALE = 1.0


class Scalar(Protocol):
    """What the generic code paths expect from a number-like value."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __pow__(self, other: Any) -> Any: ...
    def __lt__(self, other: Any) -> bool: ...


def unit_scale(values: Any) -> Any:
    """Return ``1 * units`` of *values* (or of their first element), else ``1.0``."""
    units = getattr(values, "units", None)
    if units is None and np.ndim(values) > 0 and len(values) > 0:
        units = getattr(next(iter(values)), "units", None)  # by position, not label
    if units is None:
        return IDENTITY_SCALE
    return 1.0 * units


def _magnitude(value: Any) -> Any:
    return getattr(value, "magnitude", value)


def magnitudes(values: Any, scale: Any = IDENTITY_SCALE) -> np.ndarray:
    """Dimensionless float magnitudes of *values* expressed in *scale*."""
    if scale is IDENTITY_SCALE:
        return np.asarray(values, dtype=float)
    if hasattr(values, "units") or np.ndim(values) == 0:
        # quantity arrays divide as a whole
        return np.asarray(_magnitude(values / scale), dtype=float)
    return np.asarray([_magnitude(v / scale) for v in values], dtype=float)


def with_scale(values: Any, scale: Any = IDENTITY_SCALE) -> Any:
    """Inverse of :func:`magnitudes`: attach *scale* to float results."""
    if scale is IDENTITY_SCALE:
        return values
    if np.ndim(values) == 0:
        return float(values) * scale
    return [float(v) * scale for v in values]
