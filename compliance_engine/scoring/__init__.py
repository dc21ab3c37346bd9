"""
scoring/ - Evidence-Weighted Compliance Scoring

Modules:
    utils.py                - Decimal utilities (clamp, weighted_sum, scale_score, stats)
    tier_multiplier.py      - Evidence tier → discount factor, best-tier fold
    weight_validator.py     - Weight-sum invariant checks
    question_scorer.py      - Answer → QuestionScore
    section_aggregator.py   - Section → SectionScore (0-5)
    overall_aggregator.py   - Template → OverallScore (0-100) + risk band
    evidence_classifier.py  - Heuristic evidence tier classification
"""

from compliance_engine.scoring.evidence_classifier import ClassificationResult, classify_document
from compliance_engine.scoring.overall_aggregator import OverallScore, determine_risk_band, score_template
from compliance_engine.scoring.question_scorer import QuestionScore, score_answer, unanswered
from compliance_engine.scoring.section_aggregator import SectionScore, score_section
from compliance_engine.scoring.tier_multiplier import best_tier, get_multiplier
from compliance_engine.scoring.weight_validator import (
    normalize_weights,
    require_valid_weights,
    sum_weights,
    validate_weights,
)

__all__ = [
    "ClassificationResult",
    "OverallScore",
    "QuestionScore",
    "SectionScore",
    "best_tier",
    "classify_document",
    "determine_risk_band",
    "get_multiplier",
    "normalize_weights",
    "require_valid_weights",
    "score_answer",
    "score_section",
    "score_template",
    "sum_weights",
    "unanswered",
    "validate_weights",
]
