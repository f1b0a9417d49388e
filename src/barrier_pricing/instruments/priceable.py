"""Priceable leaf: a payoff bound to an exercise, plus a write-once engine slot."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from ..exceptions import DuplicateEngineError, EngineNotAttachedError
from ..typing import FloatArray
from .base import EuropeanExercise, TerminalPayoff

if TYPE_CHECKING:  # pragma: no cover
    from ..engines.base import PricingEngine
    from .composite import CompositeInstrument


class PriceableLeaf:
    """Elementary priceable instrument.

    The payoff and exercise are fixed at construction. Attaching a pricing
    engine is the only mutation allowed afterwards and may happen once.
    Scaling and summation never touch the leaf itself; they produce a
    :class:`~barrier_pricing.instruments.composite.CompositeInstrument`
    carrying the multipliers.
    """

    __slots__ = ("_payoff", "_exercise", "_engine")

    def __init__(self, payoff: TerminalPayoff, exercise: EuropeanExercise) -> None:
        self._payoff = payoff
        self._exercise = exercise
        self._engine: PricingEngine | None = None

    @property
    def payoff(self) -> TerminalPayoff:
        return self._payoff

    @property
    def exercise(self) -> EuropeanExercise:
        return self._exercise

    @property
    def engine(self) -> PricingEngine | None:
        return self._engine

    @property
    def has_engine(self) -> bool:
        return self._engine is not None

    def set_pricing_engine(self, engine: PricingEngine) -> None:
        if self._engine is not None:
            raise DuplicateEngineError(
                f"A pricing engine is already attached to {self!r}"
            )
        self._engine = engine

    def value(self) -> float:
        if self._engine is None:
            raise EngineNotAttachedError(f"No pricing engine attached to {self!r}")
        return float(self._engine.calculate(self._payoff, self._exercise))

    def terminal_value(self, ST: float | FloatArray) -> float | FloatArray:
        """Undiscounted payoff at expiry for terminal spot(s) ``ST``."""
        return self._payoff(ST)

    def is_expired(self, valuation_date: date) -> bool:
        return self._exercise.last_date < valuation_date

    def scale(self, multiplier: float) -> CompositeInstrument:
        """One-leg composite holding this leaf (not a copy) with ``multiplier``."""
        from .composite import CompositeInstrument

        out = CompositeInstrument()
        out.add(self, multiplier)
        return out

    def __add__(self, other: PriceableLeaf | CompositeInstrument) -> CompositeInstrument:
        return self.scale(1.0) + other

    def __neg__(self) -> CompositeInstrument:
        return self.scale(-1.0)

    def __repr__(self) -> str:
        return f"PriceableLeaf(payoff={self._payoff!r}, expiry={self._exercise.date})"
