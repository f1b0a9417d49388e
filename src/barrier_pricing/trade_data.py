"""Trade data for an FX European barrier option.

The document layout mirrors the usual trade representation::

    {
        "OptionData": {
            "LongShort": "Long",
            "OptionType": "Call",
            "Style": "European",
            "ExerciseDates": ["2027-06-15"],
            "Premiums": [{"Amount": 1000.0, "Currency": "USD", "PayDate": "2026-10-21"}],
        },
        "BarrierData": {"Type": "UpOut", "Levels": [1.20], "Rebate": 0.0, "Style": ""},
        "BoughtCurrency": "EUR",
        "BoughtAmount": 1000000,
        "SoldCurrency": "USD",
        "SoldAmount": 1100000,
    }

Unreadable or out-of-range values raise :class:`MalformedConfigurationError`
while building the objects; structures that cannot be replicated statically
raise :class:`UnsupportedStructureError` as soon as the full trade data is
assembled, before any replication work is done.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from .exceptions import MalformedConfigurationError, UnsupportedStructureError
from .instruments.base import ExerciseStyle
from .parsers import (
    parse_barrier_type,
    parse_currency,
    parse_date,
    parse_list,
    parse_option_type,
    parse_position_type,
    parse_positive_real,
    parse_real,
    require_field,
)
from .premium import PremiumData
from .types import BarrierTerms, BarrierType, OptionTerms, OptionType, PositionType


@dataclass(frozen=True, slots=True)
class OptionData:
    long_short: PositionType
    call_put: OptionType
    style: str = ExerciseStyle.EUROPEAN.value
    exercise_dates: tuple[date, ...] = ()
    premium_data: PremiumData = field(default_factory=PremiumData)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OptionData:
        where = "OptionData"
        return cls(
            long_short=parse_position_type(require_field(data, "LongShort", where)),
            call_put=parse_option_type(require_field(data, "OptionType", where)),
            style=str(require_field(data, "Style", where)),
            exercise_dates=tuple(
                parse_date(d)
                for d in parse_list(
                    require_field(data, "ExerciseDates", where), "ExerciseDates"
                )
            ),
            premium_data=PremiumData.from_list(data.get("Premiums")),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "LongShort": self.long_short.value.capitalize(),
            "OptionType": self.call_put.value.capitalize(),
            "Style": self.style,
            "ExerciseDates": [d.isoformat() for d in self.exercise_dates],
        }
        if self.premium_data:
            out["Premiums"] = self.premium_data.to_list()
        return out


@dataclass(frozen=True, slots=True)
class BarrierData:
    type: BarrierType
    levels: tuple[float, ...]
    rebate: float = 0.0
    style: str = ""

    def __post_init__(self) -> None:
        if self.rebate < 0.0:
            raise MalformedConfigurationError(
                f"Rebate must be non-negative, got {self.rebate!r}"
            )
        for level in self.levels:
            if level <= 0.0:
                raise MalformedConfigurationError(
                    f"Barrier levels must be positive, got {level!r}"
                )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BarrierData:
        where = "BarrierData"
        return cls(
            type=parse_barrier_type(require_field(data, "Type", where)),
            levels=tuple(
                parse_real(v, "Barrier level")
                for v in parse_list(require_field(data, "Levels", where), "Levels")
            ),
            rebate=parse_real(data.get("Rebate", 0.0), "Rebate"),
            style=str(data.get("Style") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "Type": self.type.value,
            "Levels": list(self.levels),
            "Rebate": self.rebate,
            "Style": self.style,
        }


@dataclass(frozen=True, slots=True)
class FxEuropeanBarrierOptionData:
    option: OptionData
    barrier: BarrierData
    bought_currency: str
    bought_amount: float
    sold_currency: str
    sold_amount: float

    def __post_init__(self) -> None:
        parse_currency(self.bought_currency)
        parse_currency(self.sold_currency)
        parse_positive_real(self.bought_amount, "BoughtAmount")
        parse_positive_real(self.sold_amount, "SoldAmount")
        self.check_supported()

    def check_supported(self) -> None:
        """Raise :class:`UnsupportedStructureError` unless this is a European single barrier."""
        if self.option.style != ExerciseStyle.EUROPEAN.value:
            raise UnsupportedStructureError(f"Option Style unknown: {self.option.style}")
        if len(self.option.exercise_dates) != 1:
            raise UnsupportedStructureError(
                f"Invalid number of exercise dates: {len(self.option.exercise_dates)}"
            )
        if len(self.barrier.levels) != 1:
            raise UnsupportedStructureError(
                f"Invalid number of barrier levels: {len(self.barrier.levels)}"
            )
        if self.barrier.style not in ("", ExerciseStyle.EUROPEAN.value):
            raise UnsupportedStructureError(
                f"Only european barrier style supported, got {self.barrier.style}"
            )

    @property
    def strike(self) -> float:
        return self.sold_amount / self.bought_amount

    @property
    def expiry(self) -> date:
        return self.option.exercise_dates[0]

    def option_terms(self) -> OptionTerms:
        return OptionTerms(kind=self.option.call_put, strike=self.strike, expiry=self.expiry)

    def barrier_terms(self) -> BarrierTerms:
        return BarrierTerms(
            kind=self.barrier.type, level=self.barrier.levels[0], rebate=self.barrier.rebate
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FxEuropeanBarrierOptionData:
        where = "FxEuropeanBarrierOptionData"
        return cls(
            option=OptionData.from_dict(require_field(data, "OptionData", where)),
            barrier=BarrierData.from_dict(require_field(data, "BarrierData", where)),
            bought_currency=parse_currency(require_field(data, "BoughtCurrency", where)),
            bought_amount=parse_positive_real(
                require_field(data, "BoughtAmount", where), "BoughtAmount"
            ),
            sold_currency=parse_currency(require_field(data, "SoldCurrency", where)),
            sold_amount=parse_positive_real(
                require_field(data, "SoldAmount", where), "SoldAmount"
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "OptionData": self.option.to_dict(),
            "BarrierData": self.barrier.to_dict(),
            "BoughtCurrency": self.bought_currency,
            "BoughtAmount": self.bought_amount,
            "SoldCurrency": self.sold_currency,
            "SoldAmount": self.sold_amount,
        }
