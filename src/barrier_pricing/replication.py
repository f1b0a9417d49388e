"""Static replication of a European single-barrier option.

With strike ``K``, barrier ``B`` and rebate ``R``, the terminal payoff of a
barrier option observed at expiry only is a fixed combination of

- ``vanilla_k``   : vanilla option of the outer type struck at ``K``
- ``vanilla_b``   : vanilla option of the outer type struck at ``B``
- ``digital_gap`` : cash-or-nothing of the outer type at ``B`` paying ``|B - K|``
- a rebate digital at ``B`` paying ``R`` on the side where the vanilla payoff
  is not alive (put side for UpIn/DownOut, call side for UpOut/DownIn)

For example an up-and-in call with ``B > K`` pays
``(ST - K)^+ 1{ST > B} = (ST - B)^+ + (B - K) 1{ST > B}``, i.e.
``vanilla_b + digital_gap``.

The selection is a lookup in :data:`REPLICATION_TABLE`, keyed by option type,
barrier type and the side of the strike the barrier sits on. ``B == K`` is
treated as "at or below".
"""

from __future__ import annotations

import logging
from enum import Enum

from .exceptions import UnknownBarrierTypeError
from .instruments.base import EuropeanExercise
from .instruments.composite import CompositeInstrument
from .instruments.digital import CashOrNothingPayoff
from .instruments.payoffs import digital_cash_or_nothing, vanilla
from .instruments.priceable import PriceableLeaf
from .parsers import parse_option_type
from .types import BarrierTerms, BarrierType, OptionTerms, OptionType

logger = logging.getLogger(__name__)


class LegKind(str, Enum):
    VANILLA_STRIKE = "vanilla_k"
    VANILLA_BARRIER = "vanilla_b"
    DIGITAL_GAP = "digital_gap"


class BarrierSide(str, Enum):
    ABOVE = "above"  # B > K
    AT_OR_BELOW = "at_or_below"  # B <= K

    @classmethod
    def of(cls, strike: float, level: float) -> BarrierSide:
        return cls.ABOVE if level > strike else cls.AT_OR_BELOW


type LegSpec = tuple[tuple[LegKind, float], ...]

_C, _P = OptionType.CALL, OptionType.PUT
_UI, _UO = BarrierType.UP_IN, BarrierType.UP_OUT
_DI, _DO = BarrierType.DOWN_IN, BarrierType.DOWN_OUT
_ABOVE, _BELOW = BarrierSide.ABOVE, BarrierSide.AT_OR_BELOW

_K, _B, _G = LegKind.VANILLA_STRIKE, LegKind.VANILLA_BARRIER, LegKind.DIGITAL_GAP

_LONG_B_AND_GAP: LegSpec = ((_B, 1.0), (_G, 1.0))
_LONG_K: LegSpec = ((_K, 1.0),)
_K_MINUS_B_AND_GAP: LegSpec = ((_K, 1.0), (_B, -1.0), (_G, -1.0))
_NOTHING: LegSpec = ()

REPLICATION_TABLE: dict[tuple[OptionType, BarrierType, BarrierSide], LegSpec] = {
    # Call, vanilla alive above the barrier
    (_C, _UI, _ABOVE): _LONG_B_AND_GAP,
    (_C, _UI, _BELOW): _LONG_K,
    (_C, _DO, _ABOVE): _LONG_B_AND_GAP,
    (_C, _DO, _BELOW): _LONG_K,
    # Call, vanilla alive below the barrier
    (_C, _UO, _ABOVE): _K_MINUS_B_AND_GAP,
    (_C, _UO, _BELOW): _NOTHING,
    (_C, _DI, _ABOVE): _K_MINUS_B_AND_GAP,
    (_C, _DI, _BELOW): _NOTHING,
    # Put, vanilla alive above the barrier
    (_P, _UI, _ABOVE): _NOTHING,
    (_P, _UI, _BELOW): _K_MINUS_B_AND_GAP,
    (_P, _DO, _ABOVE): _NOTHING,
    (_P, _DO, _BELOW): _K_MINUS_B_AND_GAP,
    # Put, vanilla alive below the barrier
    (_P, _UO, _ABOVE): _LONG_K,
    (_P, _UO, _BELOW): _LONG_B_AND_GAP,
    (_P, _DI, _ABOVE): _LONG_K,
    (_P, _DI, _BELOW): _LONG_B_AND_GAP,
}

# The rebate is paid on the side where the vanilla payoff is dead.
REBATE_DIGITAL_TYPE: dict[BarrierType, OptionType] = {
    _UI: _P,
    _DO: _P,
    _UO: _C,
    _DI: _C,
}


def _barrier_type(barrier_type: BarrierType | str) -> BarrierType:
    try:
        return BarrierType(barrier_type)
    except ValueError:
        raise UnknownBarrierTypeError(
            f"Unknown Barrier Type: {barrier_type!r}"
        ) from None


def replication_legs(
    option_type: OptionType | str,
    barrier_type: BarrierType | str,
    strike: float,
    level: float,
) -> LegSpec:
    """Table entry for the given terms as ``(LegKind, multiplier)`` pairs.

    The rebate digital is not part of the entry; it is always present.
    """
    key = (
        parse_option_type(option_type),
        _barrier_type(barrier_type),
        BarrierSide.of(strike, level),
    )
    try:
        return REPLICATION_TABLE[key]
    except KeyError:
        raise UnknownBarrierTypeError(
            f"Unknown Barrier Type: {barrier_type!r}"
        ) from None


def rebate_payoff(
    barrier_type: BarrierType | str, level: float, rebate: float
) -> CashOrNothingPayoff:
    kind = REBATE_DIGITAL_TYPE[_barrier_type(barrier_type)]
    return digital_cash_or_nothing(kind, level, rebate)


def replicate(
    option_type: OptionType | str,
    barrier_type: BarrierType | str,
    strike: float,
    level: float,
    rebate: float,
    exercise: EuropeanExercise,
) -> CompositeInstrument:
    """Build the composite reproducing the barrier option payoff at expiry.

    Parameters
    ----------
    option_type
        Call or put.
    barrier_type
        ``UpIn``, ``UpOut``, ``DownIn`` or ``DownOut``.
    strike, level
        Strike ``K`` and barrier level ``B``.
    rebate
        Cash ``R`` paid when the vanilla payoff is not alive.
    exercise
        Exercise shared by every leg.

    Returns
    -------
    CompositeInstrument
        Rebate digital (weight +1) followed by zero to three table legs. No
        engines are attached.

    Raises
    ------
    UnknownBarrierTypeError
        If ``barrier_type`` is not one of the four supported kinds.
    MalformedConfigurationError
        If ``option_type`` is neither a call nor a put.
    """
    option_type = parse_option_type(option_type)
    barrier_type = _barrier_type(barrier_type)
    legs = replication_legs(option_type, barrier_type, strike, level)

    templates = {
        LegKind.DIGITAL_GAP: digital_cash_or_nothing(
            option_type, level, abs(level - strike)
        ),
        LegKind.VANILLA_STRIKE: vanilla(option_type, strike),
        LegKind.VANILLA_BARRIER: vanilla(option_type, level),
    }

    composite = CompositeInstrument()
    composite.add(PriceableLeaf(rebate_payoff(barrier_type, level, rebate), exercise))
    for kind, multiplier in legs:
        composite.add(PriceableLeaf(templates[kind], exercise), multiplier)

    logger.debug(
        "Replicated %s %s K=%g B=%g R=%g with legs %s",
        option_type.value,
        barrier_type.value,
        strike,
        level,
        rebate,
        [(kind.value, m) for kind, m in legs],
    )
    return composite


def replicate_barrier_option(
    option: OptionTerms, barrier: BarrierTerms, exercise: EuropeanExercise | None = None
) -> CompositeInstrument:
    """Convenience wrapper over :func:`replicate` taking term objects."""
    exercise = EuropeanExercise(option.expiry) if exercise is None else exercise
    return replicate(
        option.kind,
        barrier.kind,
        option.strike,
        barrier.level,
        barrier.rebate,
        exercise,
    )
