import itertools
import math

import pytest

from movecalc.model import (
    CostBreakdown,
    HomeSize,
    MoveType,
    MovingInput,
    MOVE_RATES,
    MOVE_TYPE_LABEL,
    SIZE_LABEL,
    SIZE_MULTIPLIER,
    compare_move_types,
    distance_curve,
    estimate,
    estimate_many,
    round_half_up,
)

DISTANCES = [0, 1, 2, 3, 6, 7, 50, 99, 100, 101, 333, 1000, 2999, 3000]


def _grid():
    for d, hs, mt, pk, sn in itertools.product(
        DISTANCES, HomeSize, MoveType, (False, True), (False, True)
    ):
        yield MovingInput(d, hs, mt, pk, sn)


def test_scenario_local_two_bedroom():
    b = estimate(MovingInput(50, HomeSize.TWO_BEDROOM, MoveType.LOCAL, False, False))
    assert b == CostBreakdown(
        base_cost=760, distance_cost=100, packing_cost=0, storage_cost=0,
        total=860, low=688, high=1118, service_addons=0,
    )


def test_scenario_long_distance_with_addons():
    b = estimate(MovingInput(1000, HomeSize.THREE_PLUS_BEDROOM, MoveType.LONG_DISTANCE, True, True))
    assert b == CostBreakdown(
        base_cost=3120, distance_cost=750, packing_cost=780, storage_cost=250,
        total=4900, low=3920, high=6370, service_addons=1030,
    )


def test_scenario_zero_distance_is_base_only():
    b = estimate(MovingInput(0, HomeSize.STUDIO, MoveType.LOCAL, False, False))
    assert b.distance_cost == 0
    assert b.total == 400


def test_total_and_range_invariants_hold_across_grid():
    for inp in _grid():
        b = estimate(inp)
        assert b.total == b.base_cost + b.distance_cost + b.packing_cost + b.storage_cost
        assert b.low == round_half_up(b.total * 0.8)
        assert b.high == round_half_up(b.total * 1.3)
        assert b.low <= b.total <= b.high
        assert b.service_addons == b.packing_cost + b.storage_cost
        for v in b.as_dict().values():
            assert isinstance(v, int)
            assert v >= 0


def test_distance_is_monotonic():
    for hs, mt in itertools.product(HomeSize, MoveType):
        prev = None
        for d in range(0, 3001, 7):
            b = estimate(MovingInput(d, hs, mt))
            if prev is not None:
                assert b.distance_cost >= prev.distance_cost
                assert b.total >= prev.total
            prev = b


def test_packing_toggle_adds_size_scaled_amount():
    for d, hs, mt, sn in itertools.product(DISTANCES, HomeSize, MoveType, (False, True)):
        off = estimate(MovingInput(d, hs, mt, False, sn))
        on = estimate(MovingInput(d, hs, mt, True, sn))
        assert on.total - off.total == round_half_up(300 * SIZE_MULTIPLIER[hs])


def test_storage_toggle_adds_flat_250():
    for d, hs, mt, pk in itertools.product(DISTANCES, HomeSize, MoveType, (False, True)):
        off = estimate(MovingInput(d, hs, mt, pk, False))
        on = estimate(MovingInput(d, hs, mt, pk, True))
        assert on.total - off.total == 250


@pytest.mark.parametrize("distance, expected", [
    (2, 2),      # 1.5 rounds up
    (6, 5),      # 4.5 rounds up, not to even
    (10, 8),     # 7.5
    (1, 1),      # 0.75
    (3, 2),      # 2.25
])
def test_long_distance_cost_rounds_half_up(distance, expected):
    b = estimate(MovingInput(distance, HomeSize.STUDIO, MoveType.LONG_DISTANCE))
    assert b.distance_cost == expected


def test_components_are_rounded_before_summing():
    # one_bedroom local: base 560, 0.5 mi -> 1, packing 420
    b = estimate(MovingInput(0.5, HomeSize.ONE_BEDROOM, MoveType.LOCAL, True, False))
    assert (b.base_cost, b.distance_cost, b.packing_cost) == (560, 1, 420)
    assert b.total == 981


def test_round_half_up_matches_math_round_semantics():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(-2.6) == -3
    assert round_half_up(1117.9999999) == 1118


def test_negative_distance_is_not_clamped():
    b = estimate(MovingInput(-10, HomeSize.STUDIO, MoveType.LOCAL))
    assert b.distance_cost == -20
    assert b.total == 380


def test_unknown_enum_values_are_rejected():
    with pytest.raises(ValueError):
        MovingInput(50, "2br", MoveType.LOCAL)
    with pytest.raises(ValueError):
        MovingInput(50, HomeSize.STUDIO, "longDistance")


def test_enum_values_are_coerced():
    inp = MovingInput(50, "two_bedroom", "long_distance", 1, 0)
    assert inp.home_size is HomeSize.TWO_BEDROOM
    assert inp.move_type is MoveType.LONG_DISTANCE
    assert inp.packing_services is True
    assert inp.storage_needed is False


def test_records_are_immutable():
    inp = MovingInput(50, HomeSize.STUDIO, MoveType.LOCAL)
    with pytest.raises(Exception):
        inp.distance = 10
    with pytest.raises(TypeError):
        SIZE_MULTIPLIER[HomeSize.STUDIO] = 2.0


def test_tables_cover_every_enum_member():
    assert set(SIZE_MULTIPLIER) == set(HomeSize)
    assert set(SIZE_LABEL) == set(HomeSize)
    assert set(MOVE_RATES) == set(MoveType)
    assert set(MOVE_TYPE_LABEL) == set(MoveType)
    assert all(m > 0 for m in SIZE_MULTIPLIER.values())


def test_estimate_many_preserves_order():
    inputs = [MovingInput(d, HomeSize.STUDIO, MoveType.LOCAL) for d in (0, 10, 20)]
    assert [b.total for b in estimate_many(inputs)] == [400, 420, 440]


def test_compare_move_types_prices_both():
    out = compare_move_types(MovingInput(50, HomeSize.TWO_BEDROOM, MoveType.LOCAL))
    assert set(out) == set(MoveType)
    assert out[MoveType.LOCAL].total == 860
    # 2280 base + round(37.5) = 38
    assert out[MoveType.LONG_DISTANCE].total == 2318


def test_distance_curve_shape_and_values():
    df = distance_curve(MovingInput(50, HomeSize.STUDIO, MoveType.LOCAL), [0, 100, 200])
    assert list(df.columns) == ["distance", "move_type", "total", "low", "high"]
    assert len(df) == 6
    local = df[df["move_type"] == "local"]
    assert list(local["total"]) == [400, 600, 800]
    assert (df["low"] <= df["total"]).all()
    assert (df["total"] <= df["high"]).all()
    assert not math.isnan(df["distance"].sum())
