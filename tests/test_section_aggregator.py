# tests/test_section_aggregator.py
"""
Test section aggregation: weighted question scores on the 0-5 scale.
"""

from decimal import Decimal

import pytest

from compliance_engine.core.exceptions import InvalidConfigurationException
from compliance_engine.models.enumerations import EvidenceTier
from compliance_engine.models.questionnaire import Answer, LinkedDocument, Question, Section
from compliance_engine.scoring.section_aggregator import score_section


def system_answer(question_id, raw):
    return Answer(
        id=f"ans-{question_id}",
        assessment_id="asmt-1",
        question_id=question_id,
        raw_quality_score=raw,
        linked_documents=[LinkedDocument(id=f"doc-{question_id}", evidence_tier=EvidenceTier.TIER_2)],
    )


class TestScoreSection:

    def test_weighted_sum(self, governance_section):
        """Weights [0.5, 0.3, 0.2] × scores [4, 3, 5] → 3.9."""
        answers = {
            "q1": system_answer("q1", 4.0),
            "q2": system_answer("q2", 3.0),
            "q3": system_answer("q3", 5.0),
        }
        result = score_section(governance_section, answers)
        assert result.score == Decimal("3.9")
        assert result.scaled_score == Decimal("78.00")
        assert result.section_name == "Governance"
        assert result.total_weight == Decimal("1.0")

    def test_unanswered_question_keeps_its_weight(self, governance_section):
        answers = {"q1": system_answer("q1", 4.0), "q2": None}
        result = score_section(governance_section, answers)
        assert result.score == Decimal("2.0")
        assert [qs.answer_id for qs in result.question_scores] == ["ans-q1", None, None]

    def test_question_scores_in_display_order(self):
        section = Section(
            id="s1", template_id="t1", title="Ordered", weight=1.0,
            questions=[
                Question(id="qb", section_id="s1", weight=0.5, order=2),
                Question(id="qa", section_id="s1", weight=0.5, order=1),
            ],
        )
        result = score_section(section, {})
        assert [qs.question_id for qs in result.question_scores] == ["qa", "qb"]

    def test_empty_section_scores_zero(self):
        section = Section(id="s-empty", template_id="t1", title="Empty", weight=0.5)
        result = score_section(section, {})
        assert result.score == Decimal("0")
        assert result.scaled_score == Decimal("0")
        assert result.question_scores == []

    def test_invalid_question_weights(self):
        section = Section(
            id="s-bad", template_id="t1", title="Broken", weight=1.0,
            questions=[
                Question(id="qa", section_id="s-bad", weight=0.5),
                Question(id="qb", section_id="s-bad", weight=0.3),
            ],
        )
        with pytest.raises(InvalidConfigurationException) as exc_info:
            score_section(section, {})
        assert 'section "Broken"' in str(exc_info.value)
        assert "sum to 0.8000" in str(exc_info.value)

    def test_weights_within_tolerance_accepted(self):
        section = Section(
            id="s-thirds", template_id="t1", title="Thirds", weight=1.0,
            questions=[
                Question(id="qa", section_id="s-thirds", weight=0.33),
                Question(id="qb", section_id="s-thirds", weight=0.33),
                Question(id="qc", section_id="s-thirds", weight=0.33),
            ],
        )
        answers = {q: system_answer(q, 5.0) for q in ("qa", "qb", "qc")}
        result = score_section(section, answers)
        assert result.score == Decimal("4.95")
        assert result.scaled_score == Decimal("99.00")
