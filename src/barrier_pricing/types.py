from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from enum import Enum

from .exceptions import MalformedConfigurationError


class OptionType(str, Enum):
    """Option contract type.

    Attributes
    ----------
    CALL : str
        Call option ("call").
    PUT : str
        Put option ("put").
    """

    CALL = "call"
    PUT = "put"


class BarrierType(str, Enum):
    """Single-barrier kinds.

    ``UP_*`` barriers are triggered by the terminal spot finishing above the
    level, ``DOWN_*`` barriers by finishing below it. ``*_IN`` activates the
    vanilla payoff when triggered, ``*_OUT`` deactivates it.
    """

    UP_IN = "UpIn"
    UP_OUT = "UpOut"
    DOWN_IN = "DownIn"
    DOWN_OUT = "DownOut"


class PositionType(str, Enum):
    LONG = "long"
    SHORT = "short"

    @property
    def sign(self) -> float:
        return 1.0 if self is PositionType.LONG else -1.0


@dataclass(frozen=True, slots=True)
class OptionTerms:
    """Terms of the underlying European option.

    Parameters
    ----------
    kind : OptionType
        Call or put.
    strike : float
        Strike :math:`K`, quoted in sold currency per unit of bought currency.
    expiry : datetime.date
        The single exercise date.
    """

    kind: OptionType
    strike: float
    expiry: date

    def __post_init__(self) -> None:
        if not math.isfinite(self.strike) or self.strike <= 0.0:
            raise MalformedConfigurationError(
                f"strike must be positive and finite, got {self.strike!r}"
            )


@dataclass(frozen=True, slots=True)
class BarrierTerms:
    """Terms of the single European barrier.

    Parameters
    ----------
    kind : BarrierType
        One of the four single-barrier kinds.
    level : float
        Barrier level :math:`B`.
    rebate : float, default 0.0
        Cash amount paid when the vanilla payoff is not alive at expiry.

    Notes
    -----
    Whether ``level`` sits on the economically sensible side of spot for the
    given ``kind`` is not checked here.
    """

    kind: BarrierType
    level: float
    rebate: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.level) or self.level <= 0.0:
            raise MalformedConfigurationError(
                f"barrier level must be positive and finite, got {self.level!r}"
            )
        if not math.isfinite(self.rebate) or self.rebate < 0.0:
            raise MalformedConfigurationError(
                f"Rebate must be non-negative, got {self.rebate!r}"
            )
