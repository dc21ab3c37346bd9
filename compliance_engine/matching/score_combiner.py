"""
Score Combiner & Ranking
compliance_engine/matching/score_combiner.py

    total_score = min(total_base + total_boost, 140)

Ranking helpers sort descending; Python's sort is stable, so vendors with
equal scores keep their source order.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence

from compliance_engine.config import get_settings
from compliance_engine.models.vendor import Gap, Priorities, Vendor
from compliance_engine.matching.base_scorer import BaseScore, calculate_base_score
from compliance_engine.matching.match_reasons import generate_match_reasons, generate_match_summary
from compliance_engine.matching.priority_boost import PriorityBoost, calculate_priority_boost
from compliance_engine.scoring.utils import ZERO, Number, clamp, to_decimal


@dataclass
class VendorMatchScore:
    """One vendor's full match result."""
    vendor_id: str
    vendor: Vendor
    base_score: BaseScore
    priority_boost: PriorityBoost
    total_score: Decimal                   # [0, 140]
    match_reasons: List[str] = field(default_factory=list)
    match_summary: str = ""


def combine_scores(base: BaseScore, boost: PriorityBoost) -> Decimal:
    """Base plus boost, capped at 140."""
    return combine_totals(base.total_base, boost.total_boost)


def combine_totals(total_base: Number, total_boost: Number) -> Decimal:
    """Cap-and-floor addition of two raw totals; symmetric in its arguments."""
    cap = Decimal(get_settings().COMBINED_SCORE_CAP)
    return clamp(to_decimal(total_base) + to_decimal(total_boost), ZERO, cap)


def top_base_scores(
    scores: Sequence[BaseScore],
    limit: Optional[int] = None,
    min_score: Number = 0,
) -> List[BaseScore]:
    """Filter by total_base ≥ min_score, sort descending, keep the first `limit`."""
    if limit is None:
        limit = get_settings().DEFAULT_MATCH_LIMIT
    floor = to_decimal(min_score)
    eligible = [s for s in scores if s.total_base >= floor]
    eligible.sort(key=lambda s: s.total_base, reverse=True)
    return eligible[:max(limit, 0)]


def match_vendor(vendor: Vendor, priorities: Priorities, gaps: List[Gap]) -> VendorMatchScore:
    """Base score, priority boost, combined score and reasons for one vendor."""
    base = calculate_base_score(vendor, priorities, gaps, assessment_id=priorities.assessment_id)
    boost = calculate_priority_boost(vendor, priorities)
    total = combine_scores(base, boost)
    return VendorMatchScore(
        vendor_id=vendor.id,
        vendor=vendor,
        base_score=base,
        priority_boost=boost,
        total_score=total,
        match_reasons=generate_match_reasons(base, boost),
        match_summary=generate_match_summary(total),
    )


def rank_matches(
    vendors: Sequence[Vendor],
    priorities: Priorities,
    gaps: List[Gap],
) -> List[VendorMatchScore]:
    """Match every vendor and sort by total_score descending."""
    matches = [match_vendor(v, priorities, gaps) for v in vendors]
    matches.sort(key=lambda m: m.total_score, reverse=True)
    return matches
