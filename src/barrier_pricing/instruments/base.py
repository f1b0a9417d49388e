"""Interfaces shared by the leaves of a replication.

A leaf pairs a terminal payoff (a vectorized callable of the spot at expiry)
with a single European exercise date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Protocol, overload, runtime_checkable

from ..typing import FloatArray


class ExerciseStyle(str, Enum):
    """Exercise style of an option or monitoring style of a barrier."""

    EUROPEAN = "European"
    AMERICAN = "American"


@runtime_checkable
class TerminalPayoff(Protocol):
    """Payoff as a function of the terminal spot ``ST``.

    Scalars map to a Python ``float``, arrays elementwise to arrays.
    """

    @overload
    def __call__(self, ST: float) -> float: ...  # pragma: no cover
    @overload
    def __call__(self, ST: FloatArray) -> FloatArray: ...  # pragma: no cover
    def __call__(self, ST: float | FloatArray) -> float | FloatArray: ...  # pragma: no cover


@dataclass(frozen=True, slots=True)
class EuropeanExercise:
    """Exercise at a single date, shared by every leg of a replication."""

    date: date

    @property
    def style(self) -> ExerciseStyle:
        return ExerciseStyle.EUROPEAN

    @property
    def last_date(self) -> date:
        return self.date
