"""
Decimal Utilities
compliance_engine/scoring/utils.py

Precision-safe decimal math shared by the scoring and matching engines.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence, Union

Number = Union[Decimal, float, int]

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_decimal(value: Optional[Number], places: Optional[int] = None) -> Decimal:
    """Convert a number to Decimal via its string form; None becomes 0."""
    if value is None:
        return ZERO
    d = value if isinstance(value, Decimal) else Decimal(str(value))
    if places is None:
        return d
    return d.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def quantize_cents(value: Decimal) -> Decimal:
    """Round to 0.01, half-up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def weighted_sum(values: Sequence[Decimal], weights: Sequence[Decimal]) -> Decimal:
    """
    Calculate weighted sum.

    Formula: Σ(value_i × weight_i)
    Returns Decimal("0") for empty input.
    """
    if len(values) != len(weights):
        raise ValueError(
            f"values length ({len(values)}) must match weights length ({len(weights)})"
        )
    return sum((v * w for v, w in zip(values, weights)), ZERO)


def scale_score(
    score: Decimal,
    from_min: Decimal,
    from_max: Decimal,
    to_min: Decimal,
    to_max: Decimal,
) -> Decimal:
    """
    Linearly map a score from one range onto another.

    The input is clamped to [from_min, from_max] first, so the output always
    lies within [to_min, to_max].
    """
    from_range = from_max - from_min
    if from_range == 0:
        return to_min
    bounded = clamp(score, from_min, from_max)
    return to_min + (bounded - from_min) / from_range * (to_max - to_min)


def score_stats(values: List[Number]) -> Dict[str, Decimal]:
    """
    Summary statistics for a list of scores.

    Returns min, max, mean, median and count; all zero for an empty list.
    """
    if not values:
        return {"min": ZERO, "max": ZERO, "mean": ZERO, "median": ZERO, "count": 0}

    ordered = sorted(to_decimal(v) for v in values)
    count = len(ordered)
    mid = count // 2
    if count % 2 == 0:
        median = (ordered[mid - 1] + ordered[mid]) / 2
    else:
        median = ordered[mid]

    return {
        "min": ordered[0],
        "max": ordered[-1],
        "mean": sum(ordered, ZERO) / count,
        "median": median,
        "count": count,
    }
