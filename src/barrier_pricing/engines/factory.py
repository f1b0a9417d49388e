"""Registry of engine builders.

Builders are looked up by trade-type name. The typed accessors return the
builder for one instrument class and fail loudly when it is missing or is
registered under the right name with the wrong class.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..config import PricingConfig
from ..exceptions import NoEngineFoundError, WrongBuilderKindError
from ..market.fx import FxMarket
from .builders import EngineBuilder, FxDigitalOptionEngineBuilder, FxEuropeanOptionEngineBuilder


class EngineFactory:
    """
    Registry-based engine factory.

    Register all builders before pricing starts; lookups are read-only.
    """

    def __init__(
        self,
        market: FxMarket,
        config: PricingConfig,
        builders: Iterable[EngineBuilder] = (),
    ) -> None:
        self._market = market
        self._config = config
        self._builders: dict[str, EngineBuilder] = {}
        for b in builders:
            self.register(b)

    @property
    def market(self) -> FxMarket:
        return self._market

    @property
    def config(self) -> PricingConfig:
        return self._config

    def register(self, builder: EngineBuilder) -> None:
        if builder.name in self._builders:
            raise ValueError(f"Duplicate builder for trade type {builder.name!r}")
        self._builders[builder.name] = builder

    def builder(self, name: str) -> EngineBuilder | None:
        return self._builders.get(name)

    def _typed_builder[B: EngineBuilder](self, name: str, cls: type[B]) -> B:
        b = self.builder(name)
        if b is None:
            raise NoEngineFoundError(f"No builder found for {name}")
        if not isinstance(b, cls):
            raise WrongBuilderKindError(
                f"Builder registered for {name} is {type(b).__name__}, expected {cls.__name__}"
            )
        return b

    def vanilla_option_builder(self) -> FxEuropeanOptionEngineBuilder:
        return self._typed_builder(
            FxEuropeanOptionEngineBuilder.name, FxEuropeanOptionEngineBuilder
        )

    def digital_option_builder(self) -> FxDigitalOptionEngineBuilder:
        return self._typed_builder(
            FxDigitalOptionEngineBuilder.name, FxDigitalOptionEngineBuilder
        )


def create_engine_factory(market: FxMarket, config: PricingConfig) -> EngineFactory:
    """Factory with the default vanilla and digital builders registered."""
    return EngineFactory(
        market,
        config,
        builders=(
            FxEuropeanOptionEngineBuilder(market, config),
            FxDigitalOptionEngineBuilder(market, config),
        ),
    )
