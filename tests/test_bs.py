import math

import numpy as np
import pytest

from barrier_pricing.models.bs import (
    call_price,
    cash_or_nothing_call_price,
    cash_or_nothing_put_price,
    d1_d2_from_spot,
    forward,
    put_price,
)


def test_put_call_parity_with_foreign_rate():
    """C - P = S*exp(-q*tau) - K*exp(-r*tau)."""
    S = 1.10
    K = 1.15
    r = 0.04
    q = 0.02
    sigma = 0.12
    tau = 0.75

    C = call_price(spot=S, strike=K, r=r, q=q, sigma=sigma, tau=tau)
    P = put_price(spot=S, strike=K, r=r, q=q, sigma=sigma, tau=tau)

    assert abs((C - P) - (S * math.exp(-q * tau) - K * math.exp(-r * tau))) < 1e-12


def test_call_bounds():
    """max(S*dfq - K*dfr, 0) <= C <= S*dfq."""
    S = 120.0
    K = 100.0
    r = 0.04
    q = 0.01
    sigma = 0.3
    tau = 0.75

    C = call_price(spot=S, strike=K, r=r, q=q, sigma=sigma, tau=tau)

    lower = max(S * math.exp(-q * tau) - K * math.exp(-r * tau), 0.0)
    upper = S * math.exp(-q * tau)

    assert lower - 1e-12 <= C <= upper + 1e-12


def test_digitals_decreasing_and_increasing_in_strike():
    """Digital call is non-increasing in strike, digital put non-decreasing."""
    S = 100.0
    r = 0.05
    q = 0.0
    sigma = 0.2
    tau = 1.0

    strikes = np.array([60, 80, 100, 120, 140], dtype=float)
    calls = np.array(
        [
            cash_or_nothing_call_price(spot=S, strike=float(K), r=r, q=q, sigma=sigma, tau=tau)
            for K in strikes
        ]
    )
    puts = np.array(
        [
            cash_or_nothing_put_price(spot=S, strike=float(K), r=r, q=q, sigma=sigma, tau=tau)
            for K in strikes
        ]
    )

    assert np.all(np.diff(calls) <= 1e-12)
    assert np.all(np.diff(puts) >= -1e-12)


def test_digital_cash_scales_linearly():
    kw = dict(spot=1.10, strike=1.25, r=0.04, q=0.02, sigma=0.1, tau=1.0)
    one = cash_or_nothing_call_price(**kw)
    assert cash_or_nothing_call_price(**kw, cash=0.15) == pytest.approx(0.15 * one, rel=1e-14)


def test_d1_d2_at_the_forward():
    """At K = F the two are symmetric around zero."""
    S, r, q, sigma, tau = 1.10, 0.04, 0.02, 0.1, 2.0
    K = forward(S, r, q, tau)

    d1, d2 = d1_d2_from_spot(spot=S, strike=K, r=r, q=q, sigma=sigma, tau=tau)

    assert d1 == pytest.approx(0.5 * sigma * math.sqrt(tau), abs=1e-12)
    assert d2 == pytest.approx(-d1, abs=1e-12)


@pytest.mark.parametrize(
    "kw",
    [
        dict(spot=0.0, strike=1.0, sigma=0.1, tau=1.0),
        dict(spot=1.0, strike=-1.0, sigma=0.1, tau=1.0),
        dict(spot=1.0, strike=1.0, sigma=0.0, tau=1.0),
        dict(spot=1.0, strike=1.0, sigma=0.1, tau=0.0),
    ],
)
def test_invalid_inputs_raise(kw):
    with pytest.raises(ValueError):
        d1_d2_from_spot(r=0.0, q=0.0, **kw)
