"""Premium payments attached to an option trade.

Each premium becomes a :class:`~barrier_pricing.instruments.priceable.PriceableLeaf`
whose payoff is a fixed cash amount paid on the premium date, valued by
discounting on the premium currency's curve and converting to the settlement
currency at spot.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Any, overload

import numpy as np

from .config import PricingConfig
from .engines.factory import EngineFactory
from .exceptions import MalformedConfigurationError
from .instruments.base import EuropeanExercise, TerminalPayoff
from .instruments.priceable import PriceableLeaf
from .market.curves import DiscountCurve
from .parsers import parse_currency, parse_date, parse_list, parse_real, require_field
from .typing import FloatArray

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Premium:
    amount: float
    currency: str
    pay_date: date

    def __post_init__(self) -> None:
        if not math.isfinite(self.amount):
            raise MalformedConfigurationError(
                f"premium amount must be finite, got {self.amount!r}"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Premium:
        return cls(
            amount=parse_real(require_field(data, "Amount", "Premium"), "Premium Amount"),
            currency=parse_currency(require_field(data, "Currency", "Premium")),
            pay_date=parse_date(require_field(data, "PayDate", "Premium")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "Amount": self.amount,
            "Currency": self.currency,
            "PayDate": self.pay_date.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class PremiumData:
    premiums: tuple[Premium, ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return bool(self.premiums)

    @classmethod
    def from_list(cls, items: Sequence[Mapping[str, Any]] | None) -> PremiumData:
        if items is None:
            return cls()
        return cls(tuple(Premium.from_dict(p) for p in parse_list(items, "Premiums")))

    def to_list(self) -> list[dict[str, Any]]:
        return [p.to_dict() for p in self.premiums]


@dataclass(frozen=True, slots=True)
class CashPayment:
    """Payoff of a fixed cash amount, independent of the underlying."""

    amount: float
    currency: str

    @overload
    def __call__(self, ST: float) -> float: ...
    @overload
    def __call__(self, ST: FloatArray) -> FloatArray: ...

    def __call__(self, ST: float | FloatArray) -> float | FloatArray:
        out = np.full_like(np.asarray(ST, dtype=float), float(self.amount))
        return float(out) if np.ndim(out) == 0 else out


@dataclass(frozen=True, slots=True)
class DiscountingPaymentEngine:
    """PV of a :class:`CashPayment`, converted by ``fx_rate`` into the settlement currency."""

    discount_curve: DiscountCurve
    fx_rate: float
    config: PricingConfig

    def calculate(self, payoff: TerminalPayoff, exercise: EuropeanExercise) -> float:
        if not isinstance(payoff, CashPayment):
            raise ValueError(
                f"DiscountingPaymentEngine prices CashPayment only, got {type(payoff).__name__}"
            )
        tau = self.config.year_fraction(exercise.date)
        if tau < 0.0:
            return 0.0
        return float(payoff.amount * self.discount_curve.df(tau) * self.fx_rate)


def add_premiums(
    instruments: list[PriceableLeaf],
    multipliers: list[float],
    base_multiplier: float,
    premium_data: PremiumData,
    sign: float,
    settlement_ccy: str,
    factory: EngineFactory,
    config: PricingConfig,
) -> date | None:
    """Append one priced payment leg per premium.

    Parameters
    ----------
    instruments, multipliers
        Accumulators extended in place with the payment legs and ``sign``.
    base_multiplier
        Multiplier of the main instrument (logged only; premiums are absolute
        amounts).
    premium_data
        Premium schedule.
    sign
        +1 to receive, -1 to pay.
    settlement_ccy
        Currency the premium values are reported in.
    factory
        Supplies the market holding discount curves and FX spots.
    config
        Pricing configuration used for discounting.

    Returns
    -------
    datetime.date or None
        Latest premium pay date, or ``None`` without premiums.
    """
    last: date | None = None
    market = factory.market
    for p in premium_data.premiums:
        leaf = PriceableLeaf(
            CashPayment(amount=p.amount, currency=p.currency), EuropeanExercise(p.pay_date)
        )
        leaf.set_pricing_engine(
            DiscountingPaymentEngine(
                discount_curve=market.discount_curve(p.currency),
                fx_rate=market.fx_spot(p.currency, settlement_ccy),
                config=config,
            )
        )
        instruments.append(leaf)
        multipliers.append(float(sign))
        logger.debug(
            "Premium %g %s on %s (sign %+g, base multiplier %g)",
            p.amount,
            p.currency,
            p.pay_date,
            sign,
            base_multiplier,
        )
        if last is None or p.pay_date > last:
            last = p.pay_date
    return last
