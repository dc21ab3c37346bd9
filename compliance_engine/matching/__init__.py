"""
matching/ - Vendor Matching & Ranking

Modules:
    price_converter.py  - Budget bands → numeric ranges, overlap/tolerance checks
    base_scorer.py      - BaseScore: gaps, size, geography, price (0-100)
    priority_boost.py   - PriorityBoost: ranked priorities, features, deployment, speed (0-40)
    match_reasons.py    - Human-readable match explanations and summary
    score_combiner.py   - Combined 0-140 score and ranking
"""

from compliance_engine.matching.base_scorer import BaseScore, calculate_base_score
from compliance_engine.matching.match_reasons import generate_match_reasons, generate_match_summary
from compliance_engine.matching.priority_boost import (
    PriorityBoost,
    calculate_priority_boost,
    normalize_priority_format,
)
from compliance_engine.matching.score_combiner import (
    VendorMatchScore,
    combine_scores,
    combine_totals,
    match_vendor,
    rank_matches,
    top_base_scores,
)

__all__ = [
    "BaseScore",
    "PriorityBoost",
    "VendorMatchScore",
    "calculate_base_score",
    "calculate_priority_boost",
    "combine_scores",
    "combine_totals",
    "generate_match_reasons",
    "generate_match_summary",
    "match_vendor",
    "normalize_priority_format",
    "rank_matches",
    "top_base_scores",
]
