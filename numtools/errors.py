# numtools/errors.py
"""Exception hierarchy of the library.

Every error derives from ``ValueError`` as well, so callers that already
catch the builtin keep working.
"""


class NumericalToolsError(Exception):
    """Base class for all errors raised by ``numtools``."""


class InvalidArgument(NumericalToolsError, ValueError):
    """Malformed call argument (bad ``num``, unknown method, bad samples)."""


class DomainError(NumericalToolsError, ValueError):
    """Argument outside the real domain of the function (``sqrt`` of < 0)."""


class RangeError(NumericalToolsError, ValueError):
    """Interpolant queried outside its sample range under a throw policy."""
