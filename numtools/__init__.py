# numtools/__init__.py
"""Package **numtools** (numerical tools).

The initialization module re-exports the public entry points so that
client code can write

--- from numtools import linspace, geomspace, sqrtm1, loginterpolator ---

The exported names are listed in ``__all__``, which is the *public API*
of the package.
"""

from __future__ import annotations

from .core.sequences import geomspace, linspace
from .core.stable_sqrt import machine_epsilon, sqrtm1
from .core.interpolation import Extrapolation, LinearInterpolation
from .core.loginterp import LogInterpolant, loginterpolator
from .errors import DomainError, InvalidArgument, NumericalToolsError, RangeError
from .facade.explorer import LogInterpolationExplorer

__all__ = [
    "linspace",   # arithmetic sequence
    "geomspace",  # geometric sequence
    "sqrtm1",     # sqrt(1 + x) - 1 without cancellation
    "machine_epsilon",
    "loginterpolator",  # log-space piecewise-linear interpolant
    "LogInterpolant",
    "LinearInterpolation",  # numpy-backed backend
    "Extrapolation",
    "LogInterpolationExplorer",  # pandas/matplotlib facade
    "NumericalToolsError",
    "InvalidArgument",
    "DomainError",
    "RangeError",
]
