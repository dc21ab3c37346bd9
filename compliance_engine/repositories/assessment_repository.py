"""
Assessment Repository - Compliance Scoring Engine
compliance_engine/repositories/assessment_repository.py

Questionnaire records: templates (with their sections and questions),
assessments and answers.
"""

from typing import Dict, Iterable, List, Optional

from compliance_engine.models.questionnaire import Answer, Assessment, Section, Template
from compliance_engine.repositories.base import BaseRepository


class AssessmentRepository:
    """Read access to the questionnaire records the scoring engine consumes."""

    def __init__(
        self,
        templates: Optional[Iterable[Template]] = None,
        assessments: Optional[Iterable[Assessment]] = None,
        answers: Optional[Iterable[Answer]] = None,
    ):
        self.templates: BaseRepository[Template] = BaseRepository(templates)
        self.assessments: BaseRepository[Assessment] = BaseRepository(assessments)
        self.answers: BaseRepository[Answer] = BaseRepository(answers)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_answer(self, answer_id: str) -> Optional[Answer]:
        return self.answers.get_by_id(answer_id)

    def get_assessment(self, assessment_id: str) -> Optional[Assessment]:
        return self.assessments.get_by_id(assessment_id)

    def get_template(self, template_id: str) -> Optional[Template]:
        return self.templates.get_by_id(template_id)

    def get_section(self, section_id: str) -> Optional[Section]:
        """Find a section across all templates."""
        for template in self.templates.get_all():
            for section in template.sections:
                if section.id == section_id:
                    return section
        return None

    def get_answers_by_question(self, assessment_id: str) -> Dict[str, Answer]:
        """question_id → Answer for one assessment. Later answers replace earlier ones."""
        return {
            answer.question_id: answer
            for answer in self.answers.get_all()
            if answer.assessment_id == assessment_id
        }

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save_template(self, template: Template) -> Template:
        """Insert or replace a template; the next scoring call sees the new weights."""
        return self.templates.add(template)

    def save_assessment(self, assessment: Assessment) -> Assessment:
        return self.assessments.add(assessment)

    def save_answer(self, answer: Answer) -> Answer:
        return self.answers.add(answer)

    def list_answers(self, assessment_id: str) -> List[Answer]:
        return [a for a in self.answers.get_all() if a.assessment_id == assessment_id]
