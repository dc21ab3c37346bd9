"""
Section Aggregator
compliance_engine/scoring/section_aggregator.py

Formula:
    score        = Σ (final_score_i × question_weight_i)     on the 0-5 scale
    scaled_score = score mapped 0-5 → 0-100                   display only

Question weights must sum to 1.0 (±0.01). An unanswered question scores 0
but keeps its weight, so incomplete sections are penalized rather than
excluded. A section with no questions scores 0 and skips the weight check.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Mapping, Optional

import structlog

from compliance_engine.config import get_settings
from compliance_engine.models.questionnaire import Answer, Section
from compliance_engine.scoring.question_scorer import QuestionScore, score_answer, unanswered
from compliance_engine.scoring.utils import ZERO, clamp, scale_score, to_decimal, weighted_sum
from compliance_engine.scoring.weight_validator import require_valid_weights

logger = structlog.get_logger(__name__)


@dataclass
class SectionScore:
    """Output of score_section()."""
    section_id: str
    section_name: str
    score: Decimal                 # 0-5
    scaled_score: Decimal          # 0-100, quantized to 0.01
    question_scores: List[QuestionScore] = field(default_factory=list)
    total_weight: Decimal = ZERO


def score_section(
    section: Section,
    answers: Mapping[str, Optional[Answer]],
) -> SectionScore:
    """
    Aggregate a section's question scores.

    Args:
        section: Section with its questions and their weights.
        answers: question_id → Answer. Missing keys and None values both mean
                 the question is unanswered.

    Returns:
        SectionScore with score, scaled_score and per-question breakdown.

    Raises:
        InvalidConfigurationException: question weights do not sum to 1.0.
    """
    if not section.questions:
        logger.warning("empty_section", section_id=section.id, section_title=section.title)
        return SectionScore(
            section_id=section.id,
            section_name=section.title,
            score=ZERO,
            scaled_score=ZERO,
        )

    weights = [to_decimal(q.weight) for q in section.questions]
    total_weight = require_valid_weights(
        weights, f'Question weights in section "{section.title or section.id}"'
    )

    question_scores: List[QuestionScore] = []
    for question in section.questions:
        answer = answers.get(question.id)
        if answer is None:
            question_scores.append(unanswered(question.id))
        else:
            question_scores.append(score_answer(answer))

    score = weighted_sum([qs.final_score for qs in question_scores], weights)

    max_raw = to_decimal(get_settings().MAX_RAW_QUALITY_SCORE)
    scaled = scale_score(score, ZERO, max_raw, ZERO, Decimal("100"))
    scaled = clamp(scaled.quantize(Decimal("0.01")), ZERO, Decimal("100"))

    logger.debug(
        "section_scored",
        section_id=section.id,
        question_count=len(section.questions),
        answered_count=sum(1 for qs in question_scores if qs.answer_id is not None),
        score=float(score),
        scaled_score=float(scaled),
    )

    return SectionScore(
        section_id=section.id,
        section_name=section.title,
        score=score,
        scaled_score=scaled,
        question_scores=question_scores,
        total_weight=total_weight,
    )
