from __future__ import annotations

from collections.abc import Sequence

from .instruments.composite import CompositeInstrument
from .instruments.priceable import PriceableLeaf


class VanillaInstrument:
    """Scaled main instrument plus additional legs (premiums).

    ``npv = multiplier * instrument.value() + sum(m_j * additional_j.value())``
    """

    def __init__(
        self,
        instrument: CompositeInstrument,
        multiplier: float = 1.0,
        additional_instruments: Sequence[PriceableLeaf] = (),
        additional_multipliers: Sequence[float] = (),
    ) -> None:
        if len(additional_instruments) != len(additional_multipliers):
            raise ValueError(
                "additional_instruments and additional_multipliers must have the same length"
            )
        self._instrument = instrument
        self._multiplier = float(multiplier)
        self._additional = tuple(additional_instruments)
        self._additional_multipliers = tuple(float(m) for m in additional_multipliers)

    @property
    def instrument(self) -> CompositeInstrument:
        return self._instrument

    @property
    def multiplier(self) -> float:
        return self._multiplier

    @property
    def additional_instruments(self) -> tuple[PriceableLeaf, ...]:
        return self._additional

    @property
    def additional_multipliers(self) -> tuple[float, ...]:
        return self._additional_multipliers

    def additional_instruments_npv(self) -> float:
        return sum(
            m * leaf.value()
            for leaf, m in zip(self._additional, self._additional_multipliers, strict=True)
        )

    def npv(self) -> float:
        return self._multiplier * self._instrument.value() + self.additional_instruments_npv()
