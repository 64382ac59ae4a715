# numtools/domain/samples.py
"""Sample grid ``(x, y)`` that an interpolant is built from.

Both sequences are kept exactly as the caller passed them (lists, numpy
arrays, quantity arrays). Ordering of ``x`` is checked later by the
interpolation backend, on the transformed coordinates it actually uses.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from ..errors import InvalidArgument


@dataclass(slots=True, frozen=True)
class Samples:
    """Container for synchronized ``x`` and ``y`` samples."""

    x: Sequence[Any]  # abscissae, strictly increasing
    y: Sequence[Any]  # ordinates, same length as x

    def __post_init__(self) -> None:
        if len(self.x) != len(self.y):
            raise InvalidArgument(
                f"x and y must have equal length, got {len(self.x)} and {len(self.y)}"
            )
        if len(self.x) < 2:
            raise InvalidArgument("at least two samples are required")

    def __len__(self) -> int:
        return len(self.x)

    @property
    def bounds(self) -> Tuple[Any, Any]:
        """First and last abscissa by position (pandas labels are ignored)."""
        xs = list(self.x)
        return xs[0], xs[-1]
