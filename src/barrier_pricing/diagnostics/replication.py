"""Tables for inspecting a replication.

- :func:`legs_frame` lists the legs of a composite with their values when
  engines are attached.
- :func:`payoff_check_frame` compares the replicated terminal payoff with the
  barrier payoff on a grid of terminal spots.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

import numpy as np
import pandas as pd

from ..instruments.barrier import EuropeanBarrierPayoff
from ..instruments.base import EuropeanExercise
from ..instruments.composite import CompositeInstrument
from ..instruments.digital import CashOrNothingPayoff
from ..parsers import parse_barrier_type, parse_option_type
from ..replication import replicate
from ..types import BarrierType, OptionType

# terminal payoffs do not depend on the exercise date
_UNDATED = date(2000, 1, 1)


def _leg_row(i: int, leaf, multiplier: float) -> dict:
    payoff = leaf.payoff
    row = {
        "leg": i,
        "payoff": type(payoff).__name__,
        "kind": getattr(getattr(payoff, "kind", None), "value", None),
        "strike": float(payoff.strike) if hasattr(payoff, "strike") else np.nan,
        "cash": float(payoff.cash) if isinstance(payoff, CashOrNothingPayoff) else np.nan,
        "multiplier": float(multiplier),
        "expiry": leaf.exercise.date,
        "value": np.nan,
        "weighted_value": np.nan,
    }
    if leaf.has_engine:
        v = leaf.value()
        row["value"] = v
        row["weighted_value"] = multiplier * v
    return row


def legs_frame(composite: CompositeInstrument) -> pd.DataFrame:
    """One row per leg; value columns are NaN for legs without an engine."""
    rows = [_leg_row(i, leg.leaf, leg.multiplier) for i, leg in enumerate(composite)]
    return pd.DataFrame(
        rows,
        columns=[
            "leg",
            "payoff",
            "kind",
            "strike",
            "cash",
            "multiplier",
            "expiry",
            "value",
            "weighted_value",
        ],
    )


def payoff_check_frame(
    option_type: OptionType,
    barrier_type: BarrierType,
    strike: float,
    level: float,
    rebate: float,
    spots: Iterable[float],
    *,
    expiry: date | None = None,
) -> pd.DataFrame:
    """Replicated vs. exact terminal payoff on ``spots``.

    Spots equal to the barrier level are flagged in ``at_barrier``; the two
    payoffs are not expected to agree there.
    """
    ST = np.asarray(list(spots), dtype=float)
    exercise = EuropeanExercise(expiry if expiry is not None else _UNDATED)
    composite = replicate(option_type, barrier_type, strike, level, rebate, exercise)
    exact = EuropeanBarrierPayoff(
        kind=parse_option_type(option_type),
        barrier_type=parse_barrier_type(barrier_type),
        strike=strike,
        level=level,
        rebate=rebate,
    )
    replicated = np.asarray(composite.terminal_value(ST), dtype=float)
    target = np.asarray(exact(ST), dtype=float)
    return pd.DataFrame(
        {
            "spot": ST,
            "replicated": replicated,
            "exact": target,
            "abs_err": np.abs(replicated - target),
            "at_barrier": np.isclose(ST, level, rtol=0.0, atol=1e-12),
        }
    )

