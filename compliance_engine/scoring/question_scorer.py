"""
Question Scorer
compliance_engine/scoring/question_scorer.py

Scores a single answer:

    final_score = raw_quality_score × multiplier(best evidence tier)

raw_quality_score is on the 0-5 scale; an unscored answer counts as 0.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

import structlog

from compliance_engine.models.enumerations import EvidenceTier
from compliance_engine.models.questionnaire import Answer
from compliance_engine.scoring.tier_multiplier import best_tier, get_multiplier
from compliance_engine.scoring.utils import ZERO, to_decimal

logger = structlog.get_logger(__name__)


@dataclass
class QuestionScore:
    """Output of score_answer() / unanswered()."""
    answer_id: Optional[str]      # None when the question has no answer
    question_id: str
    raw_quality_score: Decimal    # 0-5
    evidence_tier: EvidenceTier   # best tier among linked documents
    tier_multiplier: Decimal      # 0.6 / 0.8 / 1.0
    final_score: Decimal          # raw_quality_score × tier_multiplier


def score_answer(answer: Answer) -> QuestionScore:
    """
    Compute an answer's final score from its raw quality score and the best
    evidence tier among its linked documents.

    Examples:
        >>> a = Answer(id="a1", assessment_id="x", question_id="q1",
        ...            raw_quality_score=4.0,
        ...            linked_documents=[LinkedDocument(id="d1", evidence_tier="TIER_1")])
        >>> score_answer(a).final_score
        Decimal('3.20')
    """
    tier = best_tier(doc.evidence_tier for doc in answer.linked_documents)
    multiplier = get_multiplier(tier)
    raw = to_decimal(answer.raw_quality_score)
    final = raw * multiplier

    logger.debug(
        "question_scored",
        answer_id=answer.id,
        question_id=answer.question_id,
        raw_quality_score=float(raw),
        evidence_tier=tier.value,
        tier_multiplier=float(multiplier),
        final_score=float(final),
        document_count=len(answer.linked_documents),
    )

    return QuestionScore(
        answer_id=answer.id,
        question_id=answer.question_id,
        raw_quality_score=raw,
        evidence_tier=tier,
        tier_multiplier=multiplier,
        final_score=final,
    )


def unanswered(question_id: str) -> QuestionScore:
    """Placeholder score for a question with no answer: zero, at TIER_0."""
    return QuestionScore(
        answer_id=None,
        question_id=question_id,
        raw_quality_score=ZERO,
        evidence_tier=EvidenceTier.TIER_0,
        tier_multiplier=get_multiplier(EvidenceTier.TIER_0),
        final_score=ZERO,
    )
