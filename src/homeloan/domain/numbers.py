from __future__ import annotations

import math

INDIAN_GROUPING = "indian"
WESTERN_GROUPING = "western"


def round_half_up(value: float) -> int | float:
    # Matches JavaScript Math.round: halves go towards +infinity, and
    # infinities and NaN come back unchanged.
    if not math.isfinite(value):
        return value
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def json_number(value: float) -> float | None:
    """Non-finite figures serialise as null, the way JSON.stringify does."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def format_number(value: float) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_amount(value: int | float, grouping: str = INDIAN_GROUPING) -> str:
    if grouping not in (INDIAN_GROUPING, WESTERN_GROUPING):
        raise ValueError(f"Unknown amount grouping '{grouping}'")
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "∞" if value > 0 else "-∞"

    sign = "-" if value < 0 else ""
    digits = str(abs(int(value)))

    if grouping == WESTERN_GROUPING:
        return f"{sign}{int(digits):,}"

    if len(digits) <= 3:
        return sign + digits

    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])
