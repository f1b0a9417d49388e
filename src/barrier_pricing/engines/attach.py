"""Bind pricing engines to the leaves of a composite."""

from __future__ import annotations

import logging

from ..exceptions import NoEngineFoundError
from ..instruments.composite import CompositeInstrument
from ..instruments.digital import CashOrNothingPayoff
from ..instruments.priceable import PriceableLeaf
from ..instruments.vanilla import VanillaPayoff
from .base import PricingEngine
from .factory import EngineFactory

logger = logging.getLogger(__name__)


def resolve_engine(
    leaf: PriceableLeaf, factory: EngineFactory, ccy1: str, ccy2: str
) -> PricingEngine:
    """Engine for ``leaf`` from the builder matching its payoff class."""
    payoff = leaf.payoff
    if isinstance(payoff, VanillaPayoff):
        return factory.vanilla_option_builder().engine(ccy1, ccy2, leaf.exercise.date)
    if isinstance(payoff, CashOrNothingPayoff):
        return factory.digital_option_builder().engine(ccy1, ccy2)
    raise NoEngineFoundError(f"No builder found for payoff {type(payoff).__name__}")


def attach_engines(
    composite: CompositeInstrument, factory: EngineFactory, ccy1: str, ccy2: str
) -> int:
    """Attach an engine to every leaf of ``composite`` that has none yet.

    Leaves already carrying an engine are left alone, so calling this twice
    on the same composite is harmless.

    Returns
    -------
    int
        Number of leaves that received an engine.
    """
    attached = 0
    for leg in composite:
        if leg.leaf.has_engine:
            continue
        leg.leaf.set_pricing_engine(resolve_engine(leg.leaf, factory, ccy1, ccy2))
        attached += 1
    logger.debug("Attached %d engine(s) for %s%s", attached, ccy1, ccy2)
    return attached
