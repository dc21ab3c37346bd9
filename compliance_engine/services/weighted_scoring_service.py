"""
Weighted Scoring Service
compliance_engine/services/weighted_scoring_service.py

Looks up questionnaire records and runs the evidence-weighted scoring
pipeline: answer → section → overall score and risk band.

Usage:
    svc = WeightedScoringService(assessment_repo)
    result = svc.score_assessment("assessment-1")

    print(result.overall_score)    # e.g. 78
    print(result.risk_band)        # RiskBand.MEDIUM

Template weights are read from the repository on every call, so a weight
edit is visible to the next score without any cache to invalidate.
"""

from typing import Dict, Optional

import structlog

from compliance_engine.core.exceptions import EntityNotFoundException, ScoringEngineException
from compliance_engine.models.questionnaire import Answer, Assessment, Template
from compliance_engine.repositories.assessment_repository import AssessmentRepository
from compliance_engine.scoring.overall_aggregator import OverallScore, score_template
from compliance_engine.scoring.question_scorer import QuestionScore
from compliance_engine.scoring.question_scorer import score_answer as _score_answer
from compliance_engine.scoring.section_aggregator import SectionScore
from compliance_engine.scoring.section_aggregator import score_section as _score_section

logger = structlog.get_logger(__name__)


class WeightedScoringService:
    """Evidence-weighted compliance scoring over an AssessmentRepository."""

    def __init__(self, repository: Optional[AssessmentRepository] = None) -> None:
        self._repo = repository if repository is not None else AssessmentRepository()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def score_answer(self, answer_id: str) -> QuestionScore:
        """
        Score a single answer.

        Raises:
            EntityNotFoundException: no answer with this id.
        """
        answer = self._repo.get_answer(answer_id)
        if answer is None:
            exc = EntityNotFoundException("Answer", answer_id)
            _log_failure("score_answer_failed", exc, answer_id=answer_id)
            raise exc
        return _score_answer(answer)

    def score_section(self, section_id: str, assessment_id: str) -> SectionScore:
        """
        Score one section using the assessment's answers.

        Raises:
            EntityNotFoundException: no section with this id.
            InvalidConfigurationException: question weights do not sum to 1.0.
        """
        section = self._repo.get_section(section_id)
        if section is None:
            exc = EntityNotFoundException("Section", section_id)
            _log_failure("score_section_failed", exc,
                         section_id=section_id, assessment_id=assessment_id)
            raise exc

        try:
            return _score_section(section, self._answers(assessment_id))
        except ScoringEngineException as exc:
            _log_failure("score_section_failed", exc,
                         section_id=section_id, assessment_id=assessment_id)
            raise

    def score_assessment(self, assessment_id: str) -> OverallScore:
        """
        Score a full assessment: every section, then the weighted overall
        score and risk band.

        Raises:
            EntityNotFoundException: assessment or its template is missing.
            InvalidConfigurationException: section or question weights do
                not sum to 1.0.
        """
        assessment = self._get_assessment(assessment_id)
        template = self._get_template(assessment)

        logger.info(
            "score_assessment_started",
            assessment_id=assessment_id,
            template_id=template.id,
            section_count=len(template.sections),
        )
        try:
            return score_template(assessment_id, template, self._answers(assessment_id))
        except ScoringEngineException as exc:
            _log_failure("score_assessment_failed", exc, assessment_id=assessment_id)
            raise

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _answers(self, assessment_id: str) -> Dict[str, Answer]:
        return self._repo.get_answers_by_question(assessment_id)

    def _get_assessment(self, assessment_id: str) -> Assessment:
        assessment = self._repo.get_assessment(assessment_id)
        if assessment is None:
            exc = EntityNotFoundException("Assessment", assessment_id)
            _log_failure("score_assessment_failed", exc, assessment_id=assessment_id)
            raise exc
        return assessment

    def _get_template(self, assessment: Assessment) -> Template:
        template = self._repo.get_template(assessment.template_id)
        if template is None:
            exc = EntityNotFoundException("Template", assessment.template_id)
            _log_failure("score_assessment_failed", exc, assessment_id=assessment.id)
            raise exc
        return template


def _log_failure(event: str, exc: ScoringEngineException, **context) -> None:
    logger.error(event, error=str(exc), error_type=type(exc).__name__, **context)
