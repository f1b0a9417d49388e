from __future__ import annotations

import math

from scipy.stats import norm


def _validate_scalar_inputs(
    *, spot: float, strike: float, sigma: float, tau: float
) -> None:
    if spot <= 0.0:
        raise ValueError("spot must be positive")
    if strike <= 0.0:
        raise ValueError("strike must be positive")
    if sigma <= 0.0:
        raise ValueError("sigma must be positive")
    if tau <= 0.0:
        raise ValueError("tau must be positive")


def discount_factor(rate: float, tau: float) -> float:
    return math.exp(-rate * tau)


def forward(spot: float, r: float, q: float, tau: float) -> float:
    # F = S * e^{(r-q) tau}
    return spot * math.exp((r - q) * tau)


def d1_d2_from_spot(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> tuple[float, float]:
    _validate_scalar_inputs(spot=spot, strike=strike, sigma=sigma, tau=tau)
    vol_sqrt_t = sigma * math.sqrt(tau)
    num = math.log(spot / strike) + (r - q + 0.5 * sigma * sigma) * tau
    d1 = num / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return float(d1), float(d2)


def call_price(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> float:
    """
    Black–Scholes European call with continuous dividend yield q.

    For FX (Garman–Kohlhagen) r is the domestic and q the foreign rate.
    """
    d1, d2 = d1_d2_from_spot(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)
    return float(spot * df_q * norm.cdf(d1) - strike * df_r * norm.cdf(d2))


def put_price(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> float:
    """
    Black–Scholes European put with continuous dividend yield q.
    """
    d1, d2 = d1_d2_from_spot(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    df_r = discount_factor(r, tau)
    df_q = discount_factor(q, tau)
    return float(strike * df_r * norm.cdf(-d2) - spot * df_q * norm.cdf(-d1))


def cash_or_nothing_call_price(
    *,
    spot: float,
    strike: float,
    r: float,
    q: float,
    sigma: float,
    tau: float,
    cash: float = 1.0,
) -> float:
    """
    Digital call paying ``cash`` (domestic) if S_T >= strike: cash * e^{-r tau} N(d2).
    """
    _, d2 = d1_d2_from_spot(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    return float(cash * discount_factor(r, tau) * norm.cdf(d2))


def cash_or_nothing_put_price(
    *,
    spot: float,
    strike: float,
    r: float,
    q: float,
    sigma: float,
    tau: float,
    cash: float = 1.0,
) -> float:
    """
    Digital put paying ``cash`` (domestic) if S_T <= strike: cash * e^{-r tau} N(-d2).
    """
    _, d2 = d1_d2_from_spot(spot=spot, strike=strike, r=r, q=q, sigma=sigma, tau=tau)
    return float(cash * discount_factor(r, tau) * norm.cdf(-d2))
