"""
Overall Aggregator
compliance_engine/scoring/overall_aggregator.py

Formula:
    weighted_sum  = Σ (section_score_i × section_weight_i)      on the 0-5 scale
    overall_score = round(weighted_sum / 5 × 100)               clamped to [0, 100]

Scaling happens after weighting so the evidence-tier discount carries through
the whole hierarchy: perfect answers backed only by self-declared evidence
(multiplier 0.6) cannot exceed 60.

Risk bands:
    [80, 100] → Low
    [40, 80)  → Medium
    [0, 40)   → Critical
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Mapping, Optional

import structlog

from compliance_engine.config import get_settings
from compliance_engine.models.enumerations import RiskBand
from compliance_engine.models.questionnaire import Answer, Template
from compliance_engine.scoring.section_aggregator import SectionScore, score_section
from compliance_engine.scoring.utils import ZERO, clamp, to_decimal, weighted_sum
from compliance_engine.scoring.weight_validator import require_valid_weights

logger = structlog.get_logger(__name__)

LOW_BAND_FLOOR = 80
MEDIUM_BAND_FLOOR = 40


@dataclass
class OverallScore:
    """Output of score_template()."""
    assessment_id: str
    overall_score: int             # [0, 100]
    risk_band: RiskBand
    methodology: str = "complete"
    section_scores: List[SectionScore] = field(default_factory=list)
    weighted_sum: Decimal = ZERO   # 0-5, before scaling
    calculated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def determine_risk_band(score: int) -> RiskBand:
    """Map a 0-100 overall score onto its risk band."""
    if score >= LOW_BAND_FLOOR:
        return RiskBand.LOW
    if score >= MEDIUM_BAND_FLOOR:
        return RiskBand.MEDIUM
    return RiskBand.CRITICAL


def score_template(
    assessment_id: str,
    template: Template,
    answers: Mapping[str, Optional[Answer]],
) -> OverallScore:
    """
    Score every section of a template and combine them.

    Args:
        assessment_id: Assessment being scored (carried into the result).
        template: Template with sections, questions and weights, read fresh
                  for this call.
        answers: question_id → Answer for this assessment.

    Raises:
        InvalidConfigurationException: section weights, or any section's
            question weights, do not sum to 1.0.
    """
    sections = template.sections

    if not sections:
        logger.warning("template_has_no_sections", assessment_id=assessment_id, template_id=template.id)
        return OverallScore(
            assessment_id=assessment_id,
            overall_score=0,
            risk_band=RiskBand.CRITICAL,
        )

    section_weights = [to_decimal(s.weight) for s in sections]
    require_valid_weights(
        section_weights, f'Section weights in template "{template.name or template.id}"'
    )

    section_scores = [score_section(section, answers) for section in sections]
    total = weighted_sum([ss.score for ss in section_scores], section_weights)

    settings = get_settings()
    max_raw = to_decimal(settings.MAX_RAW_QUALITY_SCORE)
    max_overall = Decimal(settings.MAX_OVERALL_SCORE)
    scaled = (total / max_raw * max_overall).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    overall = int(clamp(scaled, ZERO, max_overall))
    band = determine_risk_band(overall)

    logger.info(
        "overall_score_calculated",
        assessment_id=assessment_id,
        template_id=template.id,
        section_count=len(sections),
        weighted_sum=float(total),
        overall_score=overall,
        risk_band=band.value,
    )

    return OverallScore(
        assessment_id=assessment_id,
        overall_score=overall,
        risk_band=band,
        section_scores=section_scores,
        weighted_sum=total,
    )
