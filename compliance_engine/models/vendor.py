from pydantic import BaseModel, Field, field_validator
from typing import Optional, List

from compliance_engine.models.enumerations import (
    BudgetRange,
    CompanySize,
    DeploymentPreference,
    GapPriority,
    ImplementationUrgency,
    Severity,
    VendorStatus,
)


class Gap(BaseModel):
    """
    A compliance shortfall produced by upstream assessment analysis.
    """

    id: str = Field(..., min_length=1, description="Gap identifier")

    assessment_id: str = Field(..., min_length=1, description="Assessment the gap was found in")

    category: str = Field(
        ...,
        min_length=1,
        description="Vendor category taxonomy value (e.g. KYC_AML)"
    )

    severity: Severity = Field(default=Severity.MEDIUM)

    priority: GapPriority = Field(default=GapPriority.MEDIUM_TERM)

    title: str = Field(default="", max_length=500)

    description: str = Field(default="")


class Vendor(BaseModel):
    """
    A marketplace vendor entry. Every attribute except the id may be empty;
    empty attributes score zero rather than failing.
    """

    id: str = Field(..., min_length=1, description="Vendor identifier")

    company_name: str = Field(default="", max_length=255)

    status: VendorStatus = Field(default=VendorStatus.APPROVED)

    categories: List[str] = Field(
        default_factory=list,
        description="Vendor category taxonomy values covered"
    )

    target_segments: List[CompanySize] = Field(
        default_factory=list,
        description="Company-size bands the vendor serves"
    )

    geographic_coverage: List[str] = Field(
        default_factory=list,
        description="Region codes served; GLOBAL matches any jurisdiction"
    )

    pricing_range: Optional[BudgetRange] = Field(default=None)

    features: List[str] = Field(default_factory=list)

    deployment_options: str = Field(
        default="",
        description="Comma-separated deployment models, e.g. 'Cloud, Hybrid'"
    )

    implementation_timeline: Optional[int] = Field(
        default=None,
        ge=0,
        description="Typical implementation time in days"
    )


class Priorities(BaseModel):
    """
    The organization's stated priorities for one assessment.
    """

    id: str = Field(..., min_length=1, description="Priorities identifier")

    assessment_id: str = Field(..., min_length=1)

    company_size: Optional[CompanySize] = Field(
        default=None,
        description="Organization size band, from the business profile"
    )

    jurisdictions: List[str] = Field(default_factory=list)

    budget_range: Optional[BudgetRange] = Field(default=None)

    ranked_priorities: List[str] = Field(
        default_factory=list,
        max_length=3,
        description="Vendor categories ranked #1..#3, e.g. 'transaction-monitoring'"
    )

    must_have_features: List[str] = Field(default_factory=list, max_length=5)

    deployment_preference: DeploymentPreference = Field(default=DeploymentPreference.FLEXIBLE)

    implementation_urgency: ImplementationUrgency = Field(default=ImplementationUrgency.PLANNED)

    @field_validator("jurisdictions", "must_have_features")
    @classmethod
    def strip_blank_entries(cls, value: List[str]) -> List[str]:
        return [v.strip() for v in value if v and v.strip()]
