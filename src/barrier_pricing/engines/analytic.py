"""Closed-form Garman–Kohlhagen engines for the replication legs.

Values are in the domestic (second) currency of the process, per unit of
foreign notional. A leg whose exercise date is before the valuation date is
worth zero; a leg expiring on the valuation date is worth its intrinsic value
at spot.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import PricingConfig
from ..instruments.base import EuropeanExercise, TerminalPayoff
from ..instruments.digital import CashOrNothingPayoff
from ..instruments.vanilla import VanillaPayoff
from ..market.fx import GarmanKohlhagenProcess
from ..models import bs as bs_model
from ..types import OptionType


def _time_to_expiry(config: PricingConfig, exercise: EuropeanExercise) -> float:
    return config.year_fraction(exercise.date)


@dataclass(frozen=True, slots=True)
class AnalyticEuropeanEngine:
    process: GarmanKohlhagenProcess
    config: PricingConfig

    def calculate(self, payoff: TerminalPayoff, exercise: EuropeanExercise) -> float:
        if not isinstance(payoff, VanillaPayoff):
            raise ValueError(
                f"AnalyticEuropeanEngine prices VanillaPayoff only, got {type(payoff).__name__}"
            )
        tau = _time_to_expiry(self.config, exercise)
        if tau < 0.0:
            return 0.0
        if tau == 0.0:
            return float(payoff(self.process.spot))

        r, q = self.process.rates(tau)
        sigma = self.process.sigma(tau, payoff.strike)
        kwargs = dict(
            spot=self.process.spot, strike=payoff.strike, r=r, q=q, sigma=sigma, tau=tau
        )
        if payoff.kind == OptionType.CALL:
            return bs_model.call_price(**kwargs)
        if payoff.kind == OptionType.PUT:
            return bs_model.put_price(**kwargs)
        raise ValueError(f"Unsupported option kind: {payoff.kind}")


@dataclass(frozen=True, slots=True)
class AnalyticDigitalEngine:
    process: GarmanKohlhagenProcess
    config: PricingConfig

    def calculate(self, payoff: TerminalPayoff, exercise: EuropeanExercise) -> float:
        if not isinstance(payoff, CashOrNothingPayoff):
            raise ValueError(
                f"AnalyticDigitalEngine prices CashOrNothingPayoff only, got {type(payoff).__name__}"
            )
        if payoff.cash == 0.0:
            return 0.0
        tau = _time_to_expiry(self.config, exercise)
        if tau < 0.0:
            return 0.0
        if tau == 0.0:
            return float(payoff(self.process.spot))

        r, q = self.process.rates(tau)
        sigma = self.process.sigma(tau, payoff.strike)
        kwargs = dict(
            spot=self.process.spot,
            strike=payoff.strike,
            r=r,
            q=q,
            sigma=sigma,
            tau=tau,
            cash=payoff.cash,
        )
        if payoff.kind == OptionType.CALL:
            return bs_model.cash_or_nothing_call_price(**kwargs)
        if payoff.kind == OptionType.PUT:
            return bs_model.cash_or_nothing_put_price(**kwargs)
        raise ValueError(f"Unsupported option kind: {payoff.kind}")
