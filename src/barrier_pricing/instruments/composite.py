"""Linear combination of priceable leaves with signed weights."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date

import numpy as np

from ..exceptions import EngineNotAttachedError
from ..typing import FloatArray
from .priceable import PriceableLeaf


@dataclass(frozen=True, slots=True)
class Leg:
    """One ``(leaf, multiplier)`` entry; +1 is long, -1 is short."""

    leaf: PriceableLeaf
    multiplier: float = 1.0


class CompositeInstrument:
    """Ordered collection of legs valued as ``sum(m_i * value(leaf_i))``.

    Insertion order has no effect on the value but is kept for diagnostics
    and for reproducible reporting.

    A composite built by :func:`~barrier_pricing.replication.replicate` owns
    its leaves: no other replication holds them. :meth:`scaled`,
    :meth:`negated` and ``+`` return views over the same leaves with new
    multipliers, used for parity checks and short positions. Engines attached
    through a view are attached to the source's leaves.
    """

    def __init__(self, legs: Iterable[tuple[PriceableLeaf, float]] = ()) -> None:
        self._legs: list[Leg] = []
        for leaf, multiplier in legs:
            self.add(leaf, multiplier)

    def add(self, leaf: PriceableLeaf, multiplier: float = 1.0) -> None:
        multiplier = float(multiplier)
        if not math.isfinite(multiplier):
            raise ValueError(f"multiplier must be finite, got {multiplier!r}")
        self._legs.append(Leg(leaf=leaf, multiplier=multiplier))

    @property
    def legs(self) -> tuple[Leg, ...]:
        return tuple(self._legs)

    @property
    def leaves(self) -> tuple[PriceableLeaf, ...]:
        return tuple(leg.leaf for leg in self._legs)

    def __len__(self) -> int:
        return len(self._legs)

    def __iter__(self) -> Iterator[Leg]:
        return iter(self._legs)

    def value(self) -> float:
        total = 0.0
        for i, leg in enumerate(self._legs):
            if not leg.leaf.has_engine:
                raise EngineNotAttachedError(
                    f"Leg {i} ({leg.leaf.payoff!r}) has no pricing engine attached"
                )
            total += leg.multiplier * leg.leaf.value()
        return total

    def terminal_value(self, ST: float | FloatArray) -> float | FloatArray:
        """Undiscounted payoff of the combination at expiry."""
        ST_arr = np.asarray(ST, dtype=float)
        out = np.zeros_like(ST_arr)
        for leg in self._legs:
            out = out + leg.multiplier * np.asarray(leg.leaf.terminal_value(ST_arr))
        return float(out) if np.ndim(out) == 0 else out

    def is_expired(self, valuation_date: date) -> bool:
        return all(leg.leaf.is_expired(valuation_date) for leg in self._legs)

    def scaled(self, factor: float) -> CompositeInstrument:
        """View over the same leaves with every multiplier times ``factor``."""
        return CompositeInstrument(
            (leg.leaf, leg.multiplier * factor) for leg in self._legs
        )

    def negated(self) -> CompositeInstrument:
        return self.scaled(-1.0)

    def __neg__(self) -> CompositeInstrument:
        return self.negated()

    def __add__(self, other: CompositeInstrument | PriceableLeaf) -> CompositeInstrument:
        if isinstance(other, PriceableLeaf):
            other = other.scale(1.0)
        if not isinstance(other, CompositeInstrument):
            return NotImplemented
        out = CompositeInstrument((leg.leaf, leg.multiplier) for leg in self._legs)
        for leg in other:
            out.add(leg.leaf, leg.multiplier)
        return out

    def __repr__(self) -> str:
        body = ", ".join(f"{leg.multiplier:+g}*{leg.leaf.payoff!r}" for leg in self._legs)
        return f"CompositeInstrument([{body}])"
