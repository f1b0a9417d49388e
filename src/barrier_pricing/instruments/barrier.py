"""Terminal payoff of a European single-barrier option.

The barrier is observed at expiry only. An ``Up`` barrier is triggered when
``ST > level`` and a ``Down`` barrier when ``ST < level``. A knock-in pays the
vanilla payoff when triggered, a knock-out when not triggered; in the other
case the holder receives the rebate.

This is the reference the static replication is checked against. Exactly at
``ST == level`` the replicating digitals follow the cash-or-nothing convention
(both sides pay), so the two only agree away from the barrier point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import overload

import numpy as np

from ..types import BarrierType, OptionType
from ..typing import FloatArray
from .vanilla import intrinsic_value


def barrier_triggered(
    barrier_type: BarrierType, ST: float | FloatArray, level: float
) -> bool | np.ndarray:
    if barrier_type in (BarrierType.UP_IN, BarrierType.UP_OUT):
        return np.asarray(ST) > level
    if barrier_type in (BarrierType.DOWN_IN, BarrierType.DOWN_OUT):
        return np.asarray(ST) < level
    raise ValueError(f"Unsupported barrier type: {barrier_type}")


@dataclass(frozen=True, slots=True)
class EuropeanBarrierPayoff:
    kind: OptionType
    barrier_type: BarrierType
    strike: float
    level: float
    rebate: float = 0.0

    @overload
    def __call__(self, ST: float) -> float: ...
    @overload
    def __call__(self, ST: FloatArray) -> FloatArray: ...

    def __call__(self, ST: float | FloatArray) -> float | FloatArray:
        triggered = barrier_triggered(self.barrier_type, ST, self.level)
        if self.barrier_type in (BarrierType.UP_IN, BarrierType.DOWN_IN):
            alive = triggered
        else:
            alive = np.logical_not(triggered)

        vanilla = intrinsic_value(self.kind, np.asarray(ST, dtype=float), self.strike)
        out = np.where(alive, vanilla, float(self.rebate))
        return float(out) if np.ndim(out) == 0 else out
