# movecalc/model.py
import math
from dataclasses import dataclass, asdict
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping

import numpy as np
import pandas as pd


class HomeSize(str, Enum):
    STUDIO = "studio"
    ONE_BEDROOM = "one_bedroom"
    TWO_BEDROOM = "two_bedroom"
    THREE_PLUS_BEDROOM = "three_plus_bedroom"

    def __str__(self):
        return self.value


class MoveType(str, Enum):
    LOCAL = "local"
    LONG_DISTANCE = "long_distance"

    def __str__(self):
        return self.value


# ----------------------------
# Pricing tables
# ----------------------------
SIZE_MULTIPLIER: Mapping[HomeSize, float] = MappingProxyType({
    HomeSize.STUDIO: 1.0,
    HomeSize.ONE_BEDROOM: 1.4,
    HomeSize.TWO_BEDROOM: 1.9,
    HomeSize.THREE_PLUS_BEDROOM: 2.6,
})

SIZE_LABEL: Mapping[HomeSize, str] = MappingProxyType({
    HomeSize.STUDIO: "Studio / Small",
    HomeSize.ONE_BEDROOM: "1 Bedroom",
    HomeSize.TWO_BEDROOM: "2 Bedroom",
    HomeSize.THREE_PLUS_BEDROOM: "3+ Bedroom",
})

MOVE_TYPE_LABEL: Mapping[MoveType, str] = MappingProxyType({
    MoveType.LOCAL: "Local (under 100 mi)",
    MoveType.LONG_DISTANCE: "Long Distance",
})

# (base cost per size unit, cost per mile)
MOVE_RATES: Mapping[MoveType, tuple] = MappingProxyType({
    MoveType.LOCAL: (400.0, 2.0),
    MoveType.LONG_DISTANCE: (1200.0, 0.75),
})

PACKING_RATE = 300.0      # per size unit
STORAGE_FLAT = 250        # one month
RANGE_LOW = 0.8
RANGE_HIGH = 1.3

for _table in (SIZE_MULTIPLIER, SIZE_LABEL):
    _missing = set(HomeSize) - set(_table)
    if _missing:
        raise RuntimeError(f"Pricing table is missing home sizes: {sorted(m.value for m in _missing)}")
for _table in (MOVE_TYPE_LABEL, MOVE_RATES):
    _missing = set(MoveType) - set(_table)
    if _missing:
        raise RuntimeError(f"Pricing table is missing move types: {sorted(m.value for m in _missing)}")


def round_half_up(x: float) -> int:
    """Nearest integer, ties toward +inf (same as JavaScript's Math.round)."""
    return int(math.floor(x + 0.5))


# ----------------------------
# Input / output records
# ----------------------------
@dataclass(frozen=True)
class MovingInput:
    distance: float
    home_size: HomeSize
    move_type: MoveType
    packing_services: bool = False
    storage_needed: bool = False

    def __post_init__(self):
        # HomeSize("2br") raises ValueError; members pass through unchanged
        object.__setattr__(self, "home_size", HomeSize(self.home_size))
        object.__setattr__(self, "move_type", MoveType(self.move_type))
        object.__setattr__(self, "packing_services", bool(self.packing_services))
        object.__setattr__(self, "storage_needed", bool(self.storage_needed))


@dataclass(frozen=True)
class CostBreakdown:
    base_cost: int
    distance_cost: int
    packing_cost: int
    storage_cost: int
    total: int
    low: int
    high: int
    service_addons: int

    def as_dict(self) -> dict:
        return asdict(self)


# ----------------------------
# Estimator
# ----------------------------
def estimate(inp: MovingInput) -> CostBreakdown:
    """Price a move. Every component is rounded before it is summed."""
    m = SIZE_MULTIPLIER[inp.home_size]
    base_rate, per_mile = MOVE_RATES[inp.move_type]

    base_cost = round_half_up(base_rate * m)
    distance_cost = round_half_up(inp.distance * per_mile)
    packing_cost = round_half_up(PACKING_RATE * m) if inp.packing_services else 0
    storage_cost = STORAGE_FLAT if inp.storage_needed else 0

    total = base_cost + distance_cost + packing_cost + storage_cost
    return CostBreakdown(
        base_cost=base_cost,
        distance_cost=distance_cost,
        packing_cost=packing_cost,
        storage_cost=storage_cost,
        total=total,
        low=round_half_up(total * RANGE_LOW),
        high=round_half_up(total * RANGE_HIGH),
        service_addons=packing_cost + storage_cost,
    )


def estimate_many(inputs: Iterable[MovingInput]) -> List[CostBreakdown]:
    return [estimate(inp) for inp in inputs]


def compare_move_types(inp: MovingInput) -> Dict[MoveType, CostBreakdown]:
    """Same home, distance and add-ons priced under every move type."""
    return {
        mt: estimate(MovingInput(
            distance=inp.distance,
            home_size=inp.home_size,
            move_type=mt,
            packing_services=inp.packing_services,
            storage_needed=inp.storage_needed,
        ))
        for mt in MoveType
    }


def distance_curve(inp: MovingInput, distances: Iterable[float]) -> pd.DataFrame:
    """Totals and ranges across a distance sweep, one row per (distance, move type)."""
    dist = np.asarray(list(distances), dtype=float)
    rows = []
    for d in dist:
        for mt, b in compare_move_types(MovingInput(
            distance=float(d),
            home_size=inp.home_size,
            move_type=inp.move_type,
            packing_services=inp.packing_services,
            storage_needed=inp.storage_needed,
        )).items():
            rows.append({
                "distance": float(d),
                "move_type": mt.value,
                "total": b.total,
                "low": b.low,
                "high": b.high,
            })
    return pd.DataFrame(rows, columns=["distance", "move_type", "total", "low", "high"])
