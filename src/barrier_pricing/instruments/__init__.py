"""barrier_pricing.instruments

Instrument definitions ("what is being priced").

This package is model-agnostic. Payoffs are vectorized callables of the
terminal spot; :class:`PriceableLeaf` binds a payoff to an exercise date and
holds the pricing engine attached later; :class:`CompositeInstrument` combines
leaves with signed multipliers.
"""

from .barrier import EuropeanBarrierPayoff, barrier_triggered
from .base import EuropeanExercise, ExerciseStyle, TerminalPayoff
from .composite import CompositeInstrument, Leg
from .digital import CashOrNothingPayoff
from .payoffs import digital_cash_or_nothing, vanilla
from .priceable import PriceableLeaf
from .vanilla import VanillaPayoff, intrinsic_value

__all__ = [
    "ExerciseStyle",
    "EuropeanExercise",
    "TerminalPayoff",
    "VanillaPayoff",
    "intrinsic_value",
    "CashOrNothingPayoff",
    "EuropeanBarrierPayoff",
    "barrier_triggered",
    "vanilla",
    "digital_cash_or_nothing",
    "PriceableLeaf",
    "Leg",
    "CompositeInstrument",
]
