# movecalc/bulk.py
import io
import logging
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from movecalc.model import (
    HomeSize,
    MoveType,
    MovingInput,
    SIZE_LABEL,
    MOVE_TYPE_LABEL,
    estimate,
)

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["distance", "home_size", "move_type"]
OPTIONAL_COLUMNS = ["packing_services", "storage_needed"]
OUTPUT_COLUMNS = [
    "base_cost", "distance_cost", "packing_cost", "storage_cost",
    "total", "low", "high", "service_addons",
]

# header fragments that identify each column (case-insensitive substring match)
COLUMN_GUESSES = {
    "distance": ("distance", "miles"),
    "home_size": ("home size", "home_size", "homesize", "size"),
    "move_type": ("move type", "move_type", "movetype", "type"),
    "packing_services": ("packing",),
    "storage_needed": ("storage",),
}


def _norm(text) -> str:
    return str(text).strip().lower().replace("-", " ").replace("_", " ")


# every spelling we accept: enum values, display labels, short form codes
HOME_SIZE_ALIASES = {}
for _hs in HomeSize:
    HOME_SIZE_ALIASES[_norm(_hs.value)] = _hs
    HOME_SIZE_ALIASES[_norm(SIZE_LABEL[_hs])] = _hs
HOME_SIZE_ALIASES.update({
    "studio": HomeSize.STUDIO,
    "small": HomeSize.STUDIO,
    "1br": HomeSize.ONE_BEDROOM,
    "1 bedroom": HomeSize.ONE_BEDROOM,
    "2br": HomeSize.TWO_BEDROOM,
    "2 bedroom": HomeSize.TWO_BEDROOM,
    "3br": HomeSize.THREE_PLUS_BEDROOM,
    "3+br": HomeSize.THREE_PLUS_BEDROOM,
    "3+ bedroom": HomeSize.THREE_PLUS_BEDROOM,
})

MOVE_TYPE_ALIASES = {}
for _mt in MoveType:
    MOVE_TYPE_ALIASES[_norm(_mt.value)] = _mt
    MOVE_TYPE_ALIASES[_norm(MOVE_TYPE_LABEL[_mt])] = _mt
MOVE_TYPE_ALIASES.update({
    "longdistance": MoveType.LONG_DISTANCE,
    "long": MoveType.LONG_DISTANCE,
})

TRUTHY = {"1", "true", "yes", "y", "x", "on"}


class BulkInputError(ValueError):
    """Raised when an uploaded sheet cannot be mapped to estimator inputs."""


def parse_home_size(value) -> Optional[HomeSize]:
    return HOME_SIZE_ALIASES.get(_norm(value))


def parse_move_type(value) -> Optional[MoveType]:
    return MOVE_TYPE_ALIASES.get(_norm(value))


def parse_flag(value) -> bool:
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return False
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, (int, float, np.integer, np.floating)):
        return bool(value != 0)
    text = _norm(value)
    try:
        num = float(text)
    except ValueError:
        return text in TRUTHY
    return bool(np.isfinite(num) and num != 0)


def _pick_column(cols, field: str) -> Optional[str]:
    for guess in COLUMN_GUESSES[field]:
        m = [c for c in cols if guess in _norm(c)]
        if m:
            return m[0]
    return None


def map_columns(src: pd.DataFrame) -> pd.DataFrame:
    """Rename uploaded headers onto the estimator's field names."""
    cols = list(src.columns)
    # exact matches first so "move_type" is never taken by the "size" guess
    mapping = {c: _norm(c).replace(" ", "_") for c in cols
               if _norm(c).replace(" ", "_") in REQUIRED_COLUMNS + OPTIONAL_COLUMNS}
    taken = set(mapping.values())
    for field in REQUIRED_COLUMNS + OPTIONAL_COLUMNS:
        if field in taken:
            continue
        free = [c for c in cols if c not in mapping]
        picked = _pick_column(free, field)
        if picked is not None:
            mapping[picked] = field
            taken.add(field)

    missing = [f for f in REQUIRED_COLUMNS if f not in taken]
    if missing:
        raise BulkInputError(f"Required column(s) not found in file: {', '.join(missing)}. Available: {cols}")
    return src.rename(columns=mapping).copy()


def read_bulk(f, name: Optional[str] = None) -> pd.DataFrame:
    name = (name or getattr(f, "name", "") or "").lower()
    if name.endswith(".csv"):
        src = pd.read_csv(f)
    else:
        src = pd.read_excel(f)
    return clean_bulk(src)


def clean_bulk(src: pd.DataFrame) -> pd.DataFrame:
    """Map columns, parse values and drop rows that cannot be priced."""
    df = map_columns(src)
    df["distance"] = pd.to_numeric(df["distance"], errors="coerce")
    # inf parses as a number but cannot be priced
    df["distance"] = df["distance"].where(np.isfinite(df["distance"]))
    df["home_size"] = df["home_size"].map(parse_home_size)
    df["move_type"] = df["move_type"].map(parse_move_type)
    for col in OPTIONAL_COLUMNS:
        if col in df.columns:
            df[col] = df[col].map(parse_flag)
        else:
            df[col] = False

    before = len(df)
    df = df.dropna(subset=REQUIRED_COLUMNS).copy()
    dropped = before - len(df)
    if dropped:
        logger.warning("Dropped %d of %d bulk rows with unreadable or non-finite distance, home size or move type", dropped, before)
    df.attrs["dropped_rows"] = dropped
    return df


def estimate_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Append the cost breakdown columns to a cleaned bulk frame."""
    results = [
        estimate(MovingInput(
            distance=float(dist),
            home_size=hs,
            move_type=mt,
            packing_services=bool(pk),
            storage_needed=bool(sn),
        )).as_dict()
        for dist, hs, mt, pk, sn in zip(
            df["distance"].values, df["home_size"].values, df["move_type"].values,
            df["packing_services"].values, df["storage_needed"].values,
        )
    ]
    out = df.copy()
    out["home_size"] = [str(v) for v in out["home_size"]]
    out["move_type"] = [str(v) for v in out["move_type"]]
    costs = pd.DataFrame(results, columns=OUTPUT_COLUMNS, index=out.index)
    for col in OUTPUT_COLUMNS:
        out[col] = costs[col].astype("int64")
    return out


def to_download(df: pd.DataFrame, source_name: str) -> Tuple[bytes, str, str]:
    """Serialize in the uploaded format; returns (payload, mime, file name)."""
    buf = io.BytesIO()
    if source_name.lower().endswith(".csv"):
        df.to_csv(buf, index=False)
        return buf.getvalue(), "text/csv", "moving_estimates.csv"
    with pd.ExcelWriter(buf, engine="xlsxwriter") as writer:
        df.to_excel(writer, index=False, sheet_name="Estimates")
    return (
        buf.getvalue(),
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "moving_estimates.xlsx",
    )
