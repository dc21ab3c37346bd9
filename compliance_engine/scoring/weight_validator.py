"""
Weight Validation
compliance_engine/scoring/weight_validator.py

Question weights within a section, and section weights within a template,
must each sum to 1.0 within a tolerance (default ±0.01). The check runs on
every scoring call against the weights as currently stored.
"""

from decimal import Decimal
from typing import List, Optional, Sequence

from compliance_engine.config import get_settings
from compliance_engine.core.exceptions import InvalidConfigurationException
from compliance_engine.scoring.utils import Number, ZERO, to_decimal

ONE = Decimal("1")


def _tolerance(tolerance: Optional[Number]) -> Decimal:
    if tolerance is None:
        return to_decimal(get_settings().WEIGHT_TOLERANCE)
    return to_decimal(tolerance)


def sum_weights(weights: Sequence[Number]) -> Decimal:
    """Sum of weights as Decimal; 0 for an empty list."""
    return sum((to_decimal(w) for w in weights), ZERO)


def validate_weights(weights: Sequence[Number], tolerance: Optional[Number] = None) -> bool:
    """True when the weights sum to 1.0 within tolerance. Empty input is invalid."""
    if not weights:
        return False
    return abs(sum_weights(weights) - ONE) <= _tolerance(tolerance)


def require_valid_weights(
    weights: Sequence[Number],
    context: str = "weights",
    tolerance: Optional[Number] = None,
) -> Decimal:
    """
    Raise InvalidConfigurationException unless weights sum to 1.0.

    Returns the weight total so callers can report it.
    """
    tol = _tolerance(tolerance)
    total = sum_weights(weights)
    if abs(total - ONE) > tol:
        raise InvalidConfigurationException(context, total, tol)
    return total


def normalize_weights(weights: Sequence[Number]) -> List[Decimal]:
    """
    Rescale weights to sum to 1.0.

    All-zero weights are split evenly. Intended for template authors
    correcting rounding drift, never applied implicitly during scoring.
    """
    if not weights:
        return []
    total = sum_weights(weights)
    if total == 0:
        share = ONE / len(weights)
        return [share for _ in weights]
    return [to_decimal(w) / total for w in weights]
