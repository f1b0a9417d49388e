from __future__ import annotations

import math
from datetime import date

import pytest

from barrier_pricing.config import PricingConfig
from barrier_pricing.exceptions import MalformedConfigurationError, MissingMarketDataError
from barrier_pricing.market import FlatBlackVol, FlatDiscountCurve
from barrier_pricing.market.curves import zero_rate
from barrier_pricing.parsers import parse_barrier_type, parse_currency, parse_date
from barrier_pricing.types import BarrierType


def test_fx_spot_direct_inverse_and_same_currency(market) -> None:
    assert market.fx_spot("EUR", "USD") == 1.10
    assert math.isclose(market.fx_spot("USD", "EUR"), 1.0 / 1.10, rel_tol=0.0, abs_tol=1e-15)
    assert market.fx_spot("JPY", "JPY") == 1.0


def test_missing_market_data(market) -> None:
    with pytest.raises(MissingMarketDataError, match=r"GBPUSD"):
        market.fx_spot("GBP", "USD")
    with pytest.raises(MissingMarketDataError, match=r"GBP"):
        market.discount_curve("GBP")
    # vol surfaces are not inverted
    with pytest.raises(MissingMarketDataError):
        market.fx_vol("USD", "EUR")


def test_garman_kohlhagen_assigns_domestic_to_second_currency(market) -> None:
    process = market.garman_kohlhagen("EUR", "USD")
    r_d, r_f = process.rates(1.5)

    assert process.spot == 1.10
    assert math.isclose(r_d, 0.04, rel_tol=0.0, abs_tol=1e-14)
    assert math.isclose(r_f, 0.02, rel_tol=0.0, abs_tol=1e-14)
    assert process.sigma(1.5, 1.2) == 0.10


def test_flat_curve_and_vol_validation() -> None:
    curve = FlatDiscountCurve(0.03)
    assert curve(2.0) == curve.df(2.0) == math.exp(-0.06)
    with pytest.raises(ValueError):
        curve.df(-1.0)
    with pytest.raises(ValueError):
        zero_rate(curve, 0.0)
    with pytest.raises(ValueError):
        FlatBlackVol(0.0)


def test_year_fraction() -> None:
    cfg = PricingConfig(valuation_date=date(2026, 10, 17))
    assert cfg.year_fraction(date(2027, 10, 17)) == 1.0
    assert cfg.year_fraction(date(2026, 10, 16)) < 0.0
    assert PricingConfig(date(2026, 1, 1), year_basis=360.0).year_fraction(
        date(2026, 1, 31)
    ) == pytest.approx(30.0 / 360.0)
    with pytest.raises(ValueError):
        PricingConfig(date(2026, 1, 1), year_basis=0.0)


def test_parsers() -> None:
    assert parse_date("20271017") == date(2027, 10, 17)
    assert parse_barrier_type("Up_In") is BarrierType.UP_IN
    assert parse_barrier_type("DOWNOUT") is BarrierType.DOWN_OUT
    assert parse_currency(" USD ") == "USD"
    with pytest.raises(MalformedConfigurationError):
        parse_barrier_type("DoubleKnockOut")
