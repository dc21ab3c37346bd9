"""
Match Reasons
compliance_engine/matching/match_reasons.py

Human-readable explanations of a vendor's score, derived from which
components scored above zero.
"""

from decimal import Decimal
from typing import List

from compliance_engine.config import get_settings
from compliance_engine.matching.base_scorer import BaseScore
from compliance_engine.matching.priority_boost import PriorityBoost

GAP_COVERAGE_REASON_FLOOR = Decimal("30")

# (minimum total score, summary), checked top-down
SUMMARY_BANDS = [
    (Decimal("120"), "Excellent match - Highly recommended"),
    (Decimal("100"), "Strong match - Recommended"),
    (Decimal("80"), "Good match - Worth considering"),
]
DEFAULT_SUMMARY = "Partial match - May require evaluation"


def _rank_label(boost: Decimal) -> str:
    settings = get_settings()
    if boost == settings.TOP_PRIORITY_RANK_1:
        return "#1"
    if boost == settings.TOP_PRIORITY_RANK_2:
        return "#2"
    return "#3"


def generate_match_reasons(base: BaseScore, boost: PriorityBoost) -> List[str]:
    """Explain a vendor match, strongest signals first."""
    settings = get_settings()
    reasons: List[str] = []

    if boost.matched_priority:
        reasons.append(
            f"Covers your {_rank_label(boost.top_priority_boost)} priority: {boost.matched_priority}"
        )

    if base.risk_area_coverage >= GAP_COVERAGE_REASON_FLOOR:
        pct = round(base.risk_area_coverage / settings.RISK_AREA_COVERAGE_MAX * 100)
        reasons.append(f"Addresses {pct}% of your identified compliance gaps")

    if boost.feature_boost == settings.FEATURE_BOOST_MAX:
        reasons.append("Has all must-have features you specified")
    elif boost.feature_boost > 0:
        missing = ", ".join(boost.missing_features)
        if len(boost.missing_features) == 1:
            reasons.append(f"Has most features, missing: {missing}")
        else:
            reasons.append(
                f"Has some features, missing {len(boost.missing_features)}: {missing}"
            )

    if base.size_fit == settings.SIZE_FIT_MAX:
        reasons.append("Designed for companies your size")
    elif base.size_fit > 0:
        reasons.append("Well-suited for companies your size")

    if base.geo_coverage == settings.GEO_COVERAGE_MAX:
        reasons.append("Full coverage for all your jurisdictions")
    elif base.geo_coverage >= 15:
        reasons.append("Covers most of your required jurisdictions")
    elif base.geo_coverage >= 10:
        reasons.append("Partial coverage for your jurisdictions")

    if base.price_score == settings.PRICE_SCORE_MAX:
        reasons.append("Within your budget range")
    elif base.price_score > 0:
        reasons.append(
            f"Priced outside your budget band but within {round((settings.PRICE_TOLERANCE - 1) * 100)}% tolerance"
        )

    if boost.deployment_boost > 0:
        reasons.append("Supports your preferred deployment model")

    if boost.speed_boost > 0:
        reasons.append(f"Fast implementation timeline (≤{settings.IMMEDIATE_TIMELINE_DAYS} days)")

    return reasons


def generate_match_summary(total_score: Decimal) -> str:
    """One-line verdict for a combined 0-140 score."""
    for floor, summary in SUMMARY_BANDS:
        if total_score >= floor:
            return summary
    return DEFAULT_SUMMARY
