"""FX market snapshot and the Garman–Kohlhagen process built from it.

Pairs are six-letter codes ``CCY1CCY2`` quoting units of ``CCY2`` per unit
of ``CCY1``. ``CCY1`` is the foreign (asset) currency and ``CCY2`` the
domestic (pricing) currency.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from ..exceptions import MissingMarketDataError
from .curves import BlackVol, DiscountCurve, zero_rate


@dataclass(frozen=True, slots=True)
class GarmanKohlhagenProcess:
    """Lognormal FX spot with domestic and foreign discounting.

    Parameters
    ----------
    spot : float
        Units of domestic currency per unit of foreign currency.
    domestic : DiscountCurve
        Discount curve of the pricing currency (rate :math:`r_d`).
    foreign : DiscountCurve
        Discount curve of the asset currency (rate :math:`r_f`).
    vol : BlackVol
        Black volatility structure of the pair.
    """

    spot: float
    domestic: DiscountCurve
    foreign: DiscountCurve
    vol: BlackVol

    def __post_init__(self) -> None:
        if self.spot <= 0.0:
            raise ValueError("spot must be > 0")

    def rates(self, tau: float) -> tuple[float, float]:
        """``(r_d, r_f)`` continuously-compounded up to ``tau``."""
        return zero_rate(self.domestic, tau), zero_rate(self.foreign, tau)

    def sigma(self, tau: float, strike: float) -> float:
        return float(self.vol.black_vol(tau, strike))


@dataclass(frozen=True, slots=True)
class FxMarket:
    spots: Mapping[str, float] = field(default_factory=dict)
    discount_curves: Mapping[str, DiscountCurve] = field(default_factory=dict)
    vols: Mapping[str, BlackVol] = field(default_factory=dict)

    def fx_spot(self, ccy1: str, ccy2: str) -> float:
        """Units of ``ccy2`` per unit of ``ccy1``; inverse quotes are used if needed."""
        if ccy1 == ccy2:
            return 1.0
        if ccy1 + ccy2 in self.spots:
            return float(self.spots[ccy1 + ccy2])
        if ccy2 + ccy1 in self.spots:
            return 1.0 / float(self.spots[ccy2 + ccy1])
        raise MissingMarketDataError(f"No FX spot for {ccy1}{ccy2}")

    def discount_curve(self, ccy: str) -> DiscountCurve:
        try:
            return self.discount_curves[ccy]
        except KeyError:
            raise MissingMarketDataError(f"No discount curve for {ccy}") from None

    def fx_vol(self, ccy1: str, ccy2: str) -> BlackVol:
        try:
            return self.vols[ccy1 + ccy2]
        except KeyError:
            raise MissingMarketDataError(f"No FX volatility for {ccy1}{ccy2}") from None

    def garman_kohlhagen(self, ccy1: str, ccy2: str) -> GarmanKohlhagenProcess:
        return GarmanKohlhagenProcess(
            spot=self.fx_spot(ccy1, ccy2),
            domestic=self.discount_curve(ccy2),
            foreign=self.discount_curve(ccy1),
            vol=self.fx_vol(ccy1, ccy2),
        )
