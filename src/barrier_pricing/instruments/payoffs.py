"""Payoff constructors used by the replication.

Both helpers return immutable payoff objects; validation is limited to the
numbers being finite (and the digital cash being non-negative).
"""

from __future__ import annotations

import math

from ..exceptions import MalformedConfigurationError
from ..parsers import parse_option_type
from ..types import OptionType
from .digital import CashOrNothingPayoff
from .vanilla import VanillaPayoff


def _require_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise MalformedConfigurationError(f"{name} must be finite, got {value!r}")
    return value


def vanilla(kind: OptionType, strike: float) -> VanillaPayoff:
    """Plain vanilla call/put payoff with strike ``strike``."""
    return VanillaPayoff(
        kind=parse_option_type(kind), strike=_require_finite("strike", strike)
    )


def digital_cash_or_nothing(
    kind: OptionType, level: float, cash: float
) -> CashOrNothingPayoff:
    """Cash-or-nothing digital paying ``cash`` on the ``kind`` side of ``level``.

    ``kind`` is chosen independently of any outer option type: it only decides
    which side of the level pays.
    """
    cash = _require_finite("cash", cash)
    if cash < 0.0:
        raise MalformedConfigurationError(f"cash must be non-negative, got {cash!r}")
    return CashOrNothingPayoff(
        kind=parse_option_type(kind), strike=_require_finite("level", level), cash=cash
    )


__all__ = [
    "CashOrNothingPayoff",
    "VanillaPayoff",
    "digital_cash_or_nothing",
    "vanilla",
]
