from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol


class DiscountCurve(Protocol):
    def df(self, T: float) -> float: ...
    def __call__(self, T: float) -> float: ...


class BlackVol(Protocol):
    def black_vol(self, T: float, strike: float) -> float: ...


@dataclass(frozen=True, slots=True)
class FlatDiscountCurve:
    r: float

    def df(self, T: float) -> float:
        T = float(T)
        if T < 0:
            raise ValueError("T must be >= 0")
        return math.exp(-self.r * T)

    def __call__(self, T: float) -> float:
        return self.df(T)


@dataclass(frozen=True, slots=True)
class FlatBlackVol:
    sigma: float

    def __post_init__(self) -> None:
        if self.sigma <= 0.0:
            raise ValueError("sigma must be positive")

    def black_vol(self, T: float, strike: float) -> float:
        return self.sigma


def zero_rate(curve: DiscountCurve, T: float) -> float:
    """Continuously-compounded zero rate implied by ``curve`` at ``T > 0``."""
    T = float(T)
    if T <= 0.0:
        raise ValueError("T must be > 0")
    return -math.log(curve.df(T)) / T
