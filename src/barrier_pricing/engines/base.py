from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..instruments.base import EuropeanExercise, TerminalPayoff


@runtime_checkable
class PricingEngine(Protocol):
    """Anything that turns a payoff plus exercise into a present value."""

    def calculate(self, payoff: TerminalPayoff, exercise: EuropeanExercise) -> float:
        ...
