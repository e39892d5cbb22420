# movecalc/report.py
from typing import List

import pandas as pd

from movecalc.formatting import format_usd
from movecalc.model import CostBreakdown, MovingInput, SIZE_LABEL

BREAKDOWN_LABELS = [
    ("base_cost", "Base Moving Cost"),
    ("distance_cost", "Distance Cost"),
    ("packing_cost", "Packing Services"),
    ("storage_cost", "Storage (1 month)"),
]
TOTAL_LABEL = "Estimated Total"


def breakdown_rows(b: CostBreakdown) -> List[dict]:
    rows = [
        {"label": label, "amount": getattr(b, field), "value": format_usd(getattr(b, field)), "is_total": False}
        for field, label in BREAKDOWN_LABELS
    ]
    rows.append({"label": TOTAL_LABEL, "amount": b.total, "value": format_usd(b.total), "is_total": True})
    return rows


def breakdown_frame(b: CostBreakdown) -> pd.DataFrame:
    return pd.DataFrame(breakdown_rows(b), columns=["label", "amount", "value", "is_total"])


def summary_caption(inp: MovingInput) -> str:
    d = inp.distance
    miles = int(d) if float(d).is_integer() else d
    return f"{SIZE_LABEL[inp.home_size]} • {miles} miles"
