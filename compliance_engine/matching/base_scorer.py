"""
Vendor Base Scorer
compliance_engine/matching/base_scorer.py

Objective fit of a vendor against an assessment, four components (max 100):

    risk_area_coverage  0-40   40 × covered_gaps / total_gaps
    size_fit            0-20   exact size band 20, adjacent band 15, else 0
    geo_coverage        0-20   20 × covered_jurisdictions / required
    price_score         0-20   overlapping price bands 20, within 125% 10, else 0

    total_base = risk_area_coverage + size_fit + geo_coverage + price_score

Components are quantized to 0.01 before summing so the total is exact.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List, Optional

import structlog

from compliance_engine.config import get_settings
from compliance_engine.models.enumerations import CompanySize
from compliance_engine.models.vendor import Gap, Priorities, Vendor
from compliance_engine.matching.price_converter import (
    convert_budget_range,
    price_ranges_overlap,
    price_within_tolerance,
)
from compliance_engine.scoring.utils import ZERO, quantize_cents, to_decimal

logger = structlog.get_logger(__name__)

GLOBAL_COVERAGE = "global"

_SIZE_ORDER: List[CompanySize] = [
    CompanySize.STARTUP,
    CompanySize.SMB,
    CompanySize.MIDMARKET,
    CompanySize.ENTERPRISE,
]


@dataclass
class BaseScore:
    """Output of calculate_base_score()."""
    vendor_id: str
    risk_area_coverage: Decimal   # [0, 40]
    size_fit: Decimal             # [0, 20]
    geo_coverage: Decimal         # [0, 20]
    price_score: Decimal          # [0, 20]
    total_base: Decimal           # exact sum of the four components, [0, 100]


def adjacent_segments(size: CompanySize) -> List[CompanySize]:
    """Size bands one step away from `size`."""
    idx = _SIZE_ORDER.index(size)
    return [_SIZE_ORDER[i] for i in (idx - 1, idx + 1) if 0 <= i < len(_SIZE_ORDER)]


def calculate_risk_area_coverage(vendor: Vendor, gaps: List[Gap]) -> Decimal:
    """
    Share of the assessment's gaps whose category the vendor covers, scaled
    to 40. No gaps means nothing to cover and scores 0.
    """
    max_points = Decimal(get_settings().RISK_AREA_COVERAGE_MAX)
    if not gaps:
        return ZERO

    vendor_categories = set(vendor.categories)
    covered = sum(1 for gap in gaps if gap.category in vendor_categories)
    return quantize_cents(max_points * covered / len(gaps))


def calculate_size_fit(priorities: Priorities, vendor: Vendor) -> Decimal:
    """Exact band 20, one band away 15, otherwise 0."""
    settings = get_settings()
    size = priorities.company_size
    segments = set(vendor.target_segments)

    if size is None or not segments:
        return ZERO
    if size in segments:
        return Decimal(settings.SIZE_FIT_MAX)
    if any(s in segments for s in adjacent_segments(size)):
        return Decimal(settings.SIZE_ADJACENT_SCORE)
    return ZERO


def _covers(coverage: Iterable[str]) -> set:
    return {region.strip().lower() for region in coverage if region and region.strip()}


def calculate_geo_coverage(priorities: Priorities, vendor: Vendor) -> Decimal:
    """
    Share of the organization's jurisdictions the vendor serves, scaled to 20.

    Matching is case-insensitive; a GLOBAL vendor covers every jurisdiction.
    With no jurisdictions required the vendor scores the full 20.
    """
    max_points = Decimal(get_settings().GEO_COVERAGE_MAX)
    required = priorities.jurisdictions
    if not required:
        return max_points

    coverage = _covers(vendor.geographic_coverage)
    if GLOBAL_COVERAGE in coverage:
        return max_points

    matched = sum(1 for j in required if j.lower() in coverage)
    return quantize_cents(max_points * matched / len(required))


def calculate_price_score(priorities: Priorities, vendor: Vendor) -> Decimal:
    """
    Compare the vendor's pricing band against the organization's budget band.

    Overlapping (including boundary-touching) bands score 20; a vendor whose
    entry price is within the tolerance of the budget ceiling scores 10; a
    vendor with no declared pricing scores 0.
    """
    settings = get_settings()
    max_points = Decimal(settings.PRICE_SCORE_MAX)
    if vendor.pricing_range is None:
        return ZERO

    budget = convert_budget_range(priorities.budget_range)
    vendor_price = convert_budget_range(vendor.pricing_range)

    if price_ranges_overlap(budget, vendor_price):
        return max_points
    if price_within_tolerance(budget, vendor_price, to_decimal(settings.PRICE_TOLERANCE)):
        return max_points / 2
    return ZERO


def calculate_base_score(
    vendor: Vendor,
    priorities: Priorities,
    gaps: List[Gap],
    assessment_id: Optional[str] = None,
) -> BaseScore:
    """Score one vendor's objective fit. Never raises for sparse vendor data."""
    risk_area = calculate_risk_area_coverage(vendor, gaps)
    size_fit = calculate_size_fit(priorities, vendor)
    geo = calculate_geo_coverage(priorities, vendor)
    price = calculate_price_score(priorities, vendor)
    total = risk_area + size_fit + geo + price

    logger.debug(
        "base_score_calculated",
        vendor_id=vendor.id,
        assessment_id=assessment_id,
        risk_area_coverage=float(risk_area),
        size_fit=float(size_fit),
        geo_coverage=float(geo),
        price_score=float(price),
        total_base=float(total),
    )

    return BaseScore(
        vendor_id=vendor.id,
        risk_area_coverage=risk_area,
        size_fit=size_fit,
        geo_coverage=geo,
        price_score=price,
        total_base=total,
    )
