"""Vanilla (call/put) payoffs.

Both kinds share ``max(phi * (ST - K), 0)`` with ``phi = +1`` for a call and
``phi = -1`` for a put.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import overload

import numpy as np

from ..types import OptionType
from ..typing import FloatArray


def _phi(kind: OptionType) -> float:
    if kind == OptionType.CALL:
        return 1.0
    if kind == OptionType.PUT:
        return -1.0
    raise ValueError(f"Unsupported option kind: {kind}")


def intrinsic_value(
    kind: OptionType, ST: float | FloatArray, strike: float
) -> float | FloatArray:
    """Exercise value of a call/put at terminal spot ``ST``."""
    out = np.maximum(_phi(kind) * (np.asarray(ST, dtype=float) - strike), 0.0)
    return float(out) if np.ndim(out) == 0 else out


@dataclass(frozen=True, slots=True)
class VanillaPayoff:
    """Callable, vectorized call/put payoff."""

    kind: OptionType
    strike: float

    @property
    def phi(self) -> float:
        return _phi(self.kind)

    @overload
    def __call__(self, ST: float) -> float: ...
    @overload
    def __call__(self, ST: FloatArray) -> FloatArray: ...

    def __call__(self, ST: float | FloatArray) -> float | FloatArray:
        return intrinsic_value(self.kind, ST, self.strike)
