"""Pytest helpers for the barrier_pricing library."""

from __future__ import annotations

import copy
from datetime import date

import numpy as np
import pytest

from barrier_pricing.config import PricingConfig
from barrier_pricing.engines import create_engine_factory
from barrier_pricing.instruments.base import EuropeanExercise
from barrier_pricing.market import FlatBlackVol, FlatDiscountCurve, FxMarket

VALUATION_DATE = date(2026, 10, 17)
EXPIRY = date(2027, 10, 17)


@pytest.fixture
def valuation_date() -> date:
    return VALUATION_DATE


@pytest.fixture
def exercise() -> EuropeanExercise:
    return EuropeanExercise(EXPIRY)


@pytest.fixture
def config() -> PricingConfig:
    return PricingConfig(valuation_date=VALUATION_DATE)


@pytest.fixture
def market() -> FxMarket:
    """EURUSD at 1.10 with flat 2% EUR / 4% USD rates and a flat 10% vol."""
    return FxMarket(
        spots={"EURUSD": 1.10},
        discount_curves={
            "EUR": FlatDiscountCurve(0.02),
            "USD": FlatDiscountCurve(0.04),
        },
        vols={"EURUSD": FlatBlackVol(0.10)},
    )


@pytest.fixture
def factory(market, config):
    return create_engine_factory(market, config)


@pytest.fixture
def spot_grid():
    """Terminal spot scenarios excluding the point ``level`` itself."""

    def _grid(level: float, lo: float = 1.0, hi: float = 250.0, n: int = 499):
        ST = np.linspace(lo, hi, n)
        return ST[~np.isclose(ST, level, rtol=0.0, atol=1e-12)]

    return _grid


_BASE_TRADE = {
    "id": "FXBARRIER_1",
    "TradeType": "FxEuropeanBarrierOption",
    "FxEuropeanBarrierOptionData": {
        "OptionData": {
            "LongShort": "Long",
            "OptionType": "Call",
            "Style": "European",
            "ExerciseDates": [EXPIRY.isoformat()],
        },
        "BarrierData": {
            "Type": "UpOut",
            "Levels": [1.25],
            "Rebate": 0.0,
            "Style": "",
        },
        "BoughtCurrency": "EUR",
        "BoughtAmount": 1_000_000.0,
        "SoldCurrency": "USD",
        "SoldAmount": 1_100_000.0,
    },
}


@pytest.fixture
def trade_dict():
    """Factory fixture returning a fresh trade document, optionally patched."""

    def _make(**option_overrides) -> dict:
        doc = copy.deepcopy(_BASE_TRADE)
        data = doc["FxEuropeanBarrierOptionData"]
        for key, value in option_overrides.items():
            section, _, field = key.partition("__")
            if field:
                data[section][field] = value
            else:
                data[section] = value
        return doc

    return _make
