"""
barrier_pricing

European single-barrier FX options priced by static replication.

The main entry points are re-exported here, so you can write, for example:

    from barrier_pricing import replicate, FxEuropeanBarrierOption
"""

from .config import MarketContext, PricingConfig
from .engines import EngineFactory, attach_engines, create_engine_factory
from .instruments import (
    CashOrNothingPayoff,
    CompositeInstrument,
    EuropeanBarrierPayoff,
    EuropeanExercise,
    PriceableLeaf,
    VanillaPayoff,
    digital_cash_or_nothing,
    vanilla,
)
from .market import FlatBlackVol, FlatDiscountCurve, FxMarket
from .premium import Premium, PremiumData, add_premiums
from .replication import REPLICATION_TABLE, replicate, replicate_barrier_option
from .trade import FxEuropeanBarrierOption
from .trade_data import BarrierData, FxEuropeanBarrierOptionData, OptionData
from .types import BarrierTerms, BarrierType, OptionTerms, OptionType, PositionType

__all__ = [
    # Types
    "OptionType",
    "BarrierType",
    "PositionType",
    "OptionTerms",
    "BarrierTerms",
    # Config / market
    "PricingConfig",
    "MarketContext",
    "FxMarket",
    "FlatDiscountCurve",
    "FlatBlackVol",
    # Instruments
    "VanillaPayoff",
    "CashOrNothingPayoff",
    "EuropeanBarrierPayoff",
    "EuropeanExercise",
    "PriceableLeaf",
    "CompositeInstrument",
    "vanilla",
    "digital_cash_or_nothing",
    # Replication
    "REPLICATION_TABLE",
    "replicate",
    "replicate_barrier_option",
    # Engines
    "EngineFactory",
    "create_engine_factory",
    "attach_engines",
    # Trade
    "Premium",
    "PremiumData",
    "add_premiums",
    "OptionData",
    "BarrierData",
    "FxEuropeanBarrierOptionData",
    "FxEuropeanBarrierOption",
]
