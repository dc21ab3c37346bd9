from pydantic import BaseModel, Field, field_validator
from typing import Optional, List

from compliance_engine.models.enumerations import EvidenceTier


class LinkedDocument(BaseModel):
    """
    Supporting document attached to an answer.

    The evidence tier is assigned upstream by the document classifier and is
    consumed here as given; an unclassified document carries no tier.
    """

    id: str = Field(..., min_length=1, description="Document identifier")

    filename: str = Field(default="", max_length=500, description="Original filename")

    evidence_tier: Optional[EvidenceTier] = Field(
        default=None,
        description="Evidence classification (TIER_0 self-declared .. TIER_2 system-generated)"
    )


class Answer(BaseModel):
    """
    A response to one questionnaire question within an assessment.
    """

    id: str = Field(..., min_length=1, description="Answer identifier")

    assessment_id: str = Field(..., min_length=1, description="Owning assessment")

    question_id: str = Field(..., min_length=1, description="Answered question")

    raw_quality_score: Optional[float] = Field(
        default=None,
        ge=0,
        le=5,
        description="Quality score on the 0-5 scale; absent means not yet scored"
    )

    linked_documents: List[LinkedDocument] = Field(
        default_factory=list,
        description="Supporting evidence documents"
    )


class Question(BaseModel):
    """
    A weighted question belonging to exactly one section.
    """

    id: str = Field(..., min_length=1, description="Question identifier")

    section_id: str = Field(..., min_length=1, description="Owning section")

    text: str = Field(default="", description="Question text")

    weight: float = Field(
        ...,
        ge=0,
        le=1,
        description="Weight within the section; a section's weights sum to 1.0"
    )

    order: int = Field(default=0, ge=0, description="Display order within the section")


class Section(BaseModel):
    """
    A weighted group of questions belonging to exactly one template.
    """

    id: str = Field(..., min_length=1, description="Section identifier")

    template_id: str = Field(..., min_length=1, description="Owning template")

    title: str = Field(default="", max_length=255, description="Section title")

    weight: float = Field(
        ...,
        ge=0,
        le=1,
        description="Weight within the template; a template's weights sum to 1.0"
    )

    order: int = Field(default=0, ge=0, description="Display order within the template")

    questions: List[Question] = Field(default_factory=list)

    @field_validator("questions")
    @classmethod
    def sort_questions(cls, value: List[Question]) -> List[Question]:
        """Keep questions in display order."""
        return sorted(value, key=lambda q: q.order)


class Template(BaseModel):
    """
    A questionnaire definition: sections, questions and their weights.
    """

    id: str = Field(..., min_length=1, description="Template identifier")

    name: str = Field(default="", max_length=255, description="Template name")

    sections: List[Section] = Field(default_factory=list)

    @field_validator("sections")
    @classmethod
    def sort_sections(cls, value: List[Section]) -> List[Section]:
        """Keep sections in display order."""
        return sorted(value, key=lambda s: s.order)


class Assessment(BaseModel):
    """
    One instantiation of a template against one organization.
    """

    id: str = Field(..., min_length=1, description="Assessment identifier")

    organization_id: str = Field(default="", description="Assessed organization")

    template_id: str = Field(..., min_length=1, description="Template being answered")
