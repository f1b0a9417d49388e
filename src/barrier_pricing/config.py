from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class MarketContext(str, Enum):
    PRICING = "pricing"
    SIMULATION = "simulation"


@dataclass(frozen=True, slots=True)
class PricingConfig:
    """Immutable pricing configuration threaded through engines and premiums.

    Parameters
    ----------
    valuation_date : datetime.date
        Date at which present values are measured.
    year_basis : float, default 365.0
        Day count denominator (Actual/365 Fixed by default).
    market_context : MarketContext, default ``MarketContext.PRICING``
        Label of the market configuration the engines are built against.
    """

    valuation_date: date
    year_basis: float = 365.0
    market_context: MarketContext = MarketContext.PRICING

    def __post_init__(self) -> None:
        if self.year_basis <= 0:
            raise ValueError("year_basis must be > 0")

    def year_fraction(self, end: date, start: date | None = None) -> float:
        """Actual/``year_basis`` year fraction from ``start`` (default: valuation date)."""
        start = self.valuation_date if start is None else start
        return (end - start).days / self.year_basis
