from dataclasses import dataclass
from typing import overload

import numpy as np

from ..types import OptionType
from ..typing import FloatArray


@overload
def digital_call_payoff(ST: float, K: float, cash: float = 1.0) -> float: ...
@overload
def digital_call_payoff(ST: FloatArray, K: float, cash: float = 1.0) -> FloatArray: ...
def digital_call_payoff(
    ST: float | FloatArray, K: float, cash: float = 1.0
) -> float | FloatArray:
    if np.isscalar(ST):
        return float(cash) if ST >= K else 0.0
    ST_arr = np.asarray(ST, dtype=float)
    return np.where(ST_arr >= K, float(cash), 0.0)


@overload
def digital_put_payoff(ST: float, K: float, cash: float = 1.0) -> float: ...
@overload
def digital_put_payoff(ST: FloatArray, K: float, cash: float = 1.0) -> FloatArray: ...
def digital_put_payoff(
    ST: float | FloatArray, K: float, cash: float = 1.0
) -> float | FloatArray:
    if np.isscalar(ST):
        return float(cash) if ST <= K else 0.0
    ST_arr = np.asarray(ST, dtype=float)
    return np.where(ST_arr <= K, float(cash), 0.0)


@dataclass(frozen=True, slots=True)
class CashOrNothingPayoff:
    """Cash-or-nothing digital payoff.

    A call pays ``cash`` when ``ST >= strike``; a put pays ``cash`` when
    ``ST <= strike``. In a barrier replication ``strike`` is the barrier level.
    """

    kind: OptionType
    strike: float
    cash: float = 1.0

    @property
    def level(self) -> float:
        return self.strike

    @overload
    def __call__(self, ST: float) -> float: ...
    @overload
    def __call__(self, ST: FloatArray) -> FloatArray: ...

    def __call__(self, ST: float | FloatArray) -> float | FloatArray:
        if self.kind == OptionType.CALL:
            out = digital_call_payoff(ST, K=self.strike, cash=self.cash)
        elif self.kind == OptionType.PUT:
            out = digital_put_payoff(ST, K=self.strike, cash=self.cash)
        else:
            raise ValueError(f"Unsupported option kind: {self.kind}")

        return float(out) if np.ndim(out) == 0 else out
