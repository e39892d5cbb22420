# movecalc/state.py
# Form state for the estimator pages. Keys double as Streamlit widget keys,
# so st.session_state is the backing store and each rerun reads a fresh copy.
import math
from dataclasses import dataclass, fields, replace
from typing import Any, MutableMapping

from movecalc.model import HomeSize, MoveType, MovingInput


@dataclass(frozen=True)
class FormState:
    distance: Any = 50
    home_size: str = HomeSize.TWO_BEDROOM.value
    move_type: str = MoveType.LOCAL.value
    packing_services: bool = False
    storage_needed: bool = False

    @classmethod
    def keys(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def seed(cls, session: MutableMapping) -> None:
        """Write defaults for any key the session does not hold yet."""
        defaults = cls()
        for key in cls.keys():
            if key not in session:
                session[key] = getattr(defaults, key)

    @classmethod
    def from_session(cls, session: MutableMapping) -> "FormState":
        defaults = cls()
        return cls(**{k: session.get(k, getattr(defaults, k)) for k in cls.keys()})

    def update(self, field: str, value: Any) -> "FormState":
        if field not in self.keys():
            raise KeyError(f"Unknown form field: {field!r}")
        return replace(self, **{field: value})

    def to_input(self) -> MovingInput:
        return MovingInput(
            distance=coerce_distance(self.distance),
            home_size=HomeSize(self.home_size),
            move_type=MoveType(self.move_type),
            packing_services=bool(self.packing_services),
            storage_needed=bool(self.storage_needed),
        )


def coerce_distance(value: Any) -> int:
    """Whole miles from a form value; anything unparseable is 0."""
    if isinstance(value, bool):
        return 0
    try:
        f = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(f) or math.isinf(f):
        return 0
    return int(f)
