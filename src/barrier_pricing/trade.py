"""FX European barrier option trade.

``build`` replicates the barrier payoff, attaches engines, applies the
position sign and bought notional, and folds in premiums. After a successful
build the trade reports its NPV (in the sold currency, which is treated as
domestic), notional, maturity and descriptive fields.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any

from .engines.attach import attach_engines
from .engines.factory import EngineFactory
from .exceptions import MalformedConfigurationError, UnsupportedStructureError
from .instruments.base import EuropeanExercise
from .instruments.priceable import PriceableLeaf
from .premium import add_premiums
from .replication import replicate
from .trade_data import FxEuropeanBarrierOptionData
from .wrapper import VanillaInstrument

logger = logging.getLogger(__name__)

TRADE_TYPE = "FxEuropeanBarrierOption"


class FxEuropeanBarrierOption:
    trade_type = TRADE_TYPE

    def __init__(
        self,
        trade_id: str,
        data: FxEuropeanBarrierOptionData,
        trade_actions: Sequence[Mapping[str, Any]] = (),
    ) -> None:
        self.id = trade_id
        self.data = data
        self.trade_actions = tuple(trade_actions)

        self._instrument: VanillaInstrument | None = None
        self.npv_currency: str | None = None
        self.notional: float | None = None
        self.notional_currency: str | None = None
        self.maturity: date | None = None
        self.additional_data: dict[str, Any] = {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FxEuropeanBarrierOption:
        trade_type = data.get("TradeType", TRADE_TYPE)
        if trade_type != TRADE_TYPE:
            raise MalformedConfigurationError(
                f"Expected TradeType {TRADE_TYPE}, got {trade_type!r}"
            )
        node = data.get("FxEuropeanBarrierOptionData")
        if node is None:
            raise MalformedConfigurationError("No FxEuropeanBarrierOptionData Node")
        trade = cls(
            trade_id=str(data.get("id", "")),
            data=FxEuropeanBarrierOptionData.from_dict(node),
            trade_actions=data.get("TradeActions") or (),
        )
        trade._check_trade_actions()
        return trade

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "TradeType": TRADE_TYPE,
            "FxEuropeanBarrierOptionData": self.data.to_dict(),
        }
        if self.trade_actions:
            out["TradeActions"] = [dict(a) for a in self.trade_actions]
        return out

    def _check_trade_actions(self) -> None:
        if self.trade_actions:
            raise UnsupportedStructureError(
                f"TradeActions not supported for {TRADE_TYPE}"
            )

    @property
    def instrument(self) -> VanillaInstrument:
        if self._instrument is None:
            raise RuntimeError(f"Trade {self.id!r} has not been built")
        return self._instrument

    def build(self, engine_factory: EngineFactory) -> None:
        self._check_trade_actions()
        self.data.check_supported()

        d = self.data
        option, barrier = d.option_terms(), d.barrier_terms()
        exercise = EuropeanExercise(option.expiry)

        composite = replicate(
            option.kind, barrier.kind, option.strike, barrier.level, barrier.rebate, exercise
        )
        attach_engines(composite, engine_factory, d.bought_currency, d.sold_currency)

        sign = d.option.long_short.sign
        mult = d.bought_amount * sign

        additional_instruments: list[PriceableLeaf] = []
        additional_multipliers: list[float] = []
        fx_builder = engine_factory.vanilla_option_builder()
        last_premium_date = add_premiums(
            additional_instruments,
            additional_multipliers,
            mult,
            d.option.premium_data,
            -sign,
            d.sold_currency,
            engine_factory,
            fx_builder.configuration(),
        )

        self._instrument = VanillaInstrument(
            composite, mult, additional_instruments, additional_multipliers
        )

        # sold is the domestic
        self.npv_currency = d.sold_currency
        self.notional = d.sold_amount
        self.notional_currency = d.sold_currency
        self.maturity = (
            option.expiry
            if last_premium_date is None
            else max(last_premium_date, option.expiry)
        )
        self.additional_data = {
            "boughtCurrency": d.bought_currency,
            "boughtAmount": d.bought_amount,
            "soldCurrency": d.sold_currency,
            "soldAmount": d.sold_amount,
        }
        logger.debug(
            "Built %s %s: %d leg(s), multiplier %g, %d premium leg(s)",
            TRADE_TYPE,
            self.id,
            len(composite),
            mult,
            len(additional_instruments),
        )

    def npv(self) -> float:
        return self.instrument.npv()
