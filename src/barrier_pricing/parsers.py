"""String-to-value parsers for trade data.

Every failure is reported as :class:`MalformedConfigurationError` so callers
see a single error kind for unreadable input.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from .exceptions import MalformedConfigurationError
from .types import BarrierType, OptionType, PositionType

_CCY_RE = re.compile(r"^[A-Z]{3}$")

_BARRIER_ALIASES = {
    "upin": BarrierType.UP_IN,
    "upout": BarrierType.UP_OUT,
    "downin": BarrierType.DOWN_IN,
    "downout": BarrierType.DOWN_OUT,
}


def require_field(data: Any, key: str, where: str) -> Any:
    """Value of ``key`` in the mapping ``data``; ``where`` names the section in errors."""
    if not isinstance(data, Mapping):
        raise MalformedConfigurationError(f"{where} must be a mapping, got {data!r}")
    if key not in data or data[key] is None:
        raise MalformedConfigurationError(f"{where} is missing required field {key}")
    return data[key]


def parse_list(value: Any, name: str) -> list[Any]:
    if isinstance(value, (str, bytes, Mapping)) or not hasattr(value, "__iter__"):
        raise MalformedConfigurationError(f"{name} must be a list, got {value!r}")
    return list(value)


def parse_real(value: Any, name: str = "value") -> float:
    try:
        out = float(value)
    except (TypeError, ValueError):
        raise MalformedConfigurationError(
            f"{name} must be a number, got {value!r}"
        ) from None
    if not math.isfinite(out):
        raise MalformedConfigurationError(f"{name} must be finite, got {value!r}")
    return out


def parse_positive_real(value: Any, name: str = "value") -> float:
    out = parse_real(value, name)
    if out <= 0.0:
        raise MalformedConfigurationError(f"{name} must be positive, got {value!r}")
    return out


def parse_date(value: Any) -> date:
    """ISO ``YYYY-MM-DD`` (or ``YYYYMMDD``) string, or a ``date`` passed through."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        for fmt in ("%Y-%m-%d", "%Y%m%d"):
            try:
                return datetime.strptime(value.strip(), fmt).date()
            except ValueError:
                continue
    raise MalformedConfigurationError(f"Cannot parse date {value!r}")


def parse_currency(value: Any) -> str:
    if not isinstance(value, str) or not _CCY_RE.match(value.strip()):
        raise MalformedConfigurationError(f"Invalid currency code {value!r}")
    return value.strip()


def parse_option_type(value: Any) -> OptionType:
    if isinstance(value, OptionType):
        return value
    if isinstance(value, str):
        try:
            return OptionType(value.strip().lower())
        except ValueError:
            pass
    raise MalformedConfigurationError(f"Option type {value!r} not recognised")


def parse_position_type(value: Any) -> PositionType:
    if isinstance(value, PositionType):
        return value
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ("long", "l"):
            return PositionType.LONG
        if v in ("short", "s"):
            return PositionType.SHORT
    raise MalformedConfigurationError(f"Position type {value!r} not recognised")


def parse_barrier_type(value: Any) -> BarrierType:
    """``UpIn``/``UpOut``/``DownIn``/``DownOut`` (case and ``_`` insensitive)."""
    if isinstance(value, BarrierType):
        return value
    if isinstance(value, str):
        key = value.strip().replace("_", "").replace("&", "").lower()
        if key in _BARRIER_ALIASES:
            return _BARRIER_ALIASES[key]
    raise MalformedConfigurationError(f"Barrier type {value!r} not recognised")
