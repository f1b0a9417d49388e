"""Engine builders: per-instrument-class recipes turning market data into engines.

Each builder is registered with an :class:`~barrier_pricing.engines.factory.EngineFactory`
under a trade-type name and caches the engines it hands out, so all legs of
a trade priced against the same currency pair share one engine.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from datetime import date
from typing import Any

from ..config import MarketContext, PricingConfig
from ..market.fx import FxMarket
from .analytic import AnalyticDigitalEngine, AnalyticEuropeanEngine
from .base import PricingEngine


class EngineBuilder(ABC):
    """Base of the engine builders.

    Engines are created on first request and cached by key, so the cache
    fills while the first trade is being priced. Engines are immutable; two
    threads racing on the same key at worst build the same engine twice and
    keep one of them.
    """

    name: str = ""
    model: str = "GarmanKohlhagen"
    engine_type: str = "AnalyticEuropeanEngine"

    def __init__(self, market: FxMarket, config: PricingConfig) -> None:
        self._market = market
        self._config = config
        self._cache: dict[Hashable, PricingEngine] = {}

    @property
    def market(self) -> FxMarket:
        return self._market

    def configuration(self, context: MarketContext = MarketContext.PRICING) -> PricingConfig:
        """Pricing configuration for ``context``."""
        if context == self._config.market_context:
            return self._config
        return dataclasses.replace(self._config, market_context=context)

    @abstractmethod
    def engine(self, ccy1: str, ccy2: str, *args: Any) -> PricingEngine:
        """Engine for the pair ``ccy1ccy2`` (``ccy2`` domestic)."""

    def _cached(self, key: Hashable, make: Callable[[], PricingEngine]) -> PricingEngine:
        engine = self._cache.get(key)
        if engine is None:
            engine = self._cache.setdefault(key, make())
        return engine

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, model={self.model!r})"


class FxEuropeanOptionEngineBuilder(EngineBuilder):
    """Builds engines for vanilla FX options, keyed by pair and expiry."""

    name = "FxOption"
    engine_type = "AnalyticEuropeanEngine"

    def engine(self, ccy1: str, ccy2: str, expiry: date) -> PricingEngine:
        return self._cached(
            (ccy1, ccy2, expiry),
            lambda: AnalyticEuropeanEngine(
                process=self._market.garman_kohlhagen(ccy1, ccy2), config=self._config
            ),
        )


class FxDigitalOptionEngineBuilder(EngineBuilder):
    """Builds engines for cash-or-nothing FX digitals, keyed by pair."""

    name = "FxDigitalOption"
    engine_type = "AnalyticDigitalEngine"

    def engine(self, ccy1: str, ccy2: str) -> PricingEngine:
        return self._cached(
            (ccy1, ccy2),
            lambda: AnalyticDigitalEngine(
                process=self._market.garman_kohlhagen(ccy1, ccy2), config=self._config
            ),
        )
