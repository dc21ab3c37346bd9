"""
Price Converter
compliance_engine/matching/price_converter.py

Budget and pricing bands as numeric ranges. Range ends are inclusive, so
adjacent bands (e.g. 10K-50K and 50K-100K) touch at their boundary and
count as overlapping.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from compliance_engine.models.enumerations import BudgetRange

INFINITY = Decimal("Infinity")


@dataclass(frozen=True)
class PriceRange:
    min: Decimal
    max: Decimal


_BUDGET_MAP = {
    BudgetRange.UNDER_10K: PriceRange(Decimal("0"), Decimal("10000")),
    BudgetRange.RANGE_10K_50K: PriceRange(Decimal("10000"), Decimal("50000")),
    BudgetRange.RANGE_50K_100K: PriceRange(Decimal("50000"), Decimal("100000")),
    BudgetRange.RANGE_100K_250K: PriceRange(Decimal("100000"), Decimal("250000")),
    BudgetRange.OVER_250K: PriceRange(Decimal("250000"), INFINITY),
}

UNBOUNDED = PriceRange(Decimal("0"), INFINITY)


def convert_budget_range(band: Optional[Union[BudgetRange, str]]) -> PriceRange:
    """Numeric range for a band; missing or unknown bands are unbounded."""
    if band is None:
        return UNBOUNDED
    try:
        return _BUDGET_MAP[BudgetRange(band)]
    except ValueError:
        return UNBOUNDED


def price_ranges_overlap(a: PriceRange, b: PriceRange) -> bool:
    """True when the ranges share at least one point."""
    return not (a.min > b.max or a.max < b.min)


def price_within_tolerance(
    budget: PriceRange,
    vendor_price: PriceRange,
    tolerance: Decimal = Decimal("1.25"),
) -> bool:
    """True when the vendor's entry price is at most budget.max × tolerance."""
    return vendor_price.min <= budget.max * tolerance
