from __future__ import annotations

import math
from datetime import date

import numpy as np
import pytest

from barrier_pricing.exceptions import (
    DuplicateEngineError,
    EngineNotAttachedError,
    MalformedConfigurationError,
)
from barrier_pricing.instruments import (
    CashOrNothingPayoff,
    CompositeInstrument,
    EuropeanBarrierPayoff,
    EuropeanExercise,
    PriceableLeaf,
    VanillaPayoff,
    digital_cash_or_nothing,
    vanilla,
)
from barrier_pricing.types import BarrierType, OptionType


class ConstantEngine:
    """Test double returning a fixed value for any payoff."""

    def __init__(self, value: float) -> None:
        self.value = value

    def calculate(self, payoff, exercise) -> float:
        return self.value


def test_vanilla_payoff_scalar_and_vector():
    call = vanilla(OptionType.CALL, 100.0)
    put = vanilla(OptionType.PUT, 100.0)

    assert call(120.0) == 20.0
    assert isinstance(call(120.0), float)
    assert put(120.0) == 0.0
    np.testing.assert_allclose(put(np.array([80.0, 100.0, 130.0])), [20.0, 0.0, 0.0])


def test_digital_pays_on_its_own_side_including_the_level():
    call = digital_cash_or_nothing(OptionType.CALL, 1.2, 0.05)
    put = digital_cash_or_nothing(OptionType.PUT, 1.2, 0.05)

    ST = np.array([1.0, 1.2, 1.4])
    np.testing.assert_allclose(call(ST), [0.0, 0.05, 0.05])
    np.testing.assert_allclose(put(ST), [0.05, 0.05, 0.0])
    assert call.level == 1.2
    assert put(1.0) == pytest.approx(0.05)


def test_payoff_constructors_are_value_objects():
    assert vanilla(OptionType.CALL, 100) == VanillaPayoff(kind=OptionType.CALL, strike=100.0)
    assert digital_cash_or_nothing("put", 90, 10) == CashOrNothingPayoff(
        kind=OptionType.PUT, strike=90.0, cash=10.0
    )


@pytest.mark.parametrize(
    "make",
    [
        lambda: vanilla(OptionType.CALL, math.inf),
        lambda: digital_cash_or_nothing(OptionType.CALL, math.nan, 1.0),
        lambda: digital_cash_or_nothing(OptionType.CALL, 100.0, math.inf),
        lambda: digital_cash_or_nothing(OptionType.CALL, 100.0, -1.0),
    ],
)
def test_payoff_constructors_reject_bad_numbers(make):
    with pytest.raises(MalformedConfigurationError):
        make()


@pytest.mark.parametrize(
    "barrier_type, ST, expected",
    [
        (BarrierType.UP_IN, 130.0, 30.0),
        (BarrierType.UP_IN, 110.0, 2.0),
        (BarrierType.UP_OUT, 130.0, 2.0),
        (BarrierType.UP_OUT, 110.0, 10.0),
        (BarrierType.DOWN_IN, 110.0, 10.0),
        (BarrierType.DOWN_IN, 130.0, 2.0),
        (BarrierType.DOWN_OUT, 130.0, 30.0),
        (BarrierType.DOWN_OUT, 110.0, 2.0),
    ],
)
def test_barrier_payoff_call_with_level_above_strike(barrier_type, ST, expected):
    payoff = EuropeanBarrierPayoff(
        kind=OptionType.CALL, barrier_type=barrier_type, strike=100.0, level=120.0, rebate=2.0
    )
    assert payoff(ST) == pytest.approx(expected)


def test_leaf_requires_engine(exercise):
    leaf = PriceableLeaf(vanilla(OptionType.CALL, 100.0), exercise)

    assert not leaf.has_engine
    with pytest.raises(EngineNotAttachedError):
        leaf.value()

    engine = ConstantEngine(3.0)
    leaf.set_pricing_engine(engine)
    assert leaf.value() == 3.0
    assert leaf.engine is engine


def test_leaf_engine_is_write_once(exercise):
    leaf = PriceableLeaf(vanilla(OptionType.CALL, 100.0), exercise)
    leaf.set_pricing_engine(ConstantEngine(1.0))

    with pytest.raises(DuplicateEngineError):
        leaf.set_pricing_engine(ConstantEngine(2.0))
    assert leaf.value() == 1.0


def test_scaling_does_not_mutate_leaf(exercise):
    payoff = vanilla(OptionType.PUT, 100.0)
    leaf = PriceableLeaf(payoff, exercise)
    leaf.set_pricing_engine(ConstantEngine(4.0))

    scaled = leaf.scale(-2.5)

    assert scaled.legs[0].leaf is leaf
    assert scaled.legs[0].multiplier == -2.5
    assert scaled.value() == pytest.approx(-10.0)
    assert leaf.payoff is payoff
    assert leaf.value() == 4.0


def test_composite_is_linear_combination(exercise):
    a = PriceableLeaf(vanilla(OptionType.CALL, 100.0), exercise)
    b = PriceableLeaf(vanilla(OptionType.CALL, 110.0), exercise)
    a.set_pricing_engine(ConstantEngine(7.0))
    b.set_pricing_engine(ConstantEngine(3.0))

    composite = CompositeInstrument()
    composite.add(a)
    composite.add(b, -1.0)

    assert composite.value() == pytest.approx(4.0)
    assert (a + b).value() == pytest.approx(10.0)
    assert (-composite).value() == pytest.approx(-4.0)
    assert [leg.leaf for leg in composite] == [a, b]


def test_composite_value_order_independent(exercise):
    leaves = []
    for k, v in [(90.0, 1.5), (100.0, 2.0), (110.0, 0.25)]:
        leaf = PriceableLeaf(vanilla(OptionType.CALL, k), exercise)
        leaf.set_pricing_engine(ConstantEngine(v))
        leaves.append(leaf)
    weights = [1.0, -2.0, 4.0]

    fwd = CompositeInstrument(zip(leaves, weights, strict=True))
    rev = CompositeInstrument(zip(reversed(leaves), reversed(weights), strict=True))

    assert fwd.value() == pytest.approx(rev.value())
    assert fwd.leaves == tuple(leaves)


def test_composite_reports_missing_engine(exercise):
    a = PriceableLeaf(vanilla(OptionType.CALL, 100.0), exercise)
    b = PriceableLeaf(digital_cash_or_nothing(OptionType.PUT, 90.0, 1.0), exercise)
    a.set_pricing_engine(ConstantEngine(1.0))

    composite = CompositeInstrument([(a, 1.0), (b, 1.0)])
    with pytest.raises(EngineNotAttachedError, match=r"Leg 1 .*CashOrNothingPayoff"):
        composite.value()


def test_composite_rejects_non_finite_multiplier(exercise):
    leaf = PriceableLeaf(vanilla(OptionType.CALL, 100.0), exercise)
    with pytest.raises(ValueError):
        CompositeInstrument().add(leaf, math.nan)


def test_expiry_checks():
    leaf = PriceableLeaf(vanilla(OptionType.CALL, 1.0), EuropeanExercise(date(2026, 1, 2)))
    assert leaf.is_expired(date(2026, 1, 3))
    assert not leaf.is_expired(date(2026, 1, 2))
    assert CompositeInstrument([(leaf, 1.0)]).is_expired(date(2027, 1, 1))
