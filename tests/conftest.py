# tests/conftest.py

"""
Pytest Fixtures - shared records for the scoring and matching tests

SEED DATA REFERENCE:
- Template:   tmpl-aml   sections sec-gov (0.6) and sec-ops (0.4)
- Assessment: asmt-1     answers q1-q4, q5 left unanswered
                         sec-gov = 3.9, sec-ops = 1.6, overall = 60 (Medium)
- Vendors:    v-full (base 100, boost 40), v-partial, v-sparse, v-suspended
- Gaps:       KYC_AML, TRANSACTION_MONITORING, SANCTIONS_SCREENING on asmt-1
- Priorities: prio-1 for asmt-1
"""

import pytest

from compliance_engine.config import Settings
from compliance_engine.core.logging_config import configure_logging
from compliance_engine.models.enumerations import (
    BudgetRange,
    CompanySize,
    DeploymentPreference,
    EvidenceTier,
    ImplementationUrgency,
    Severity,
    VendorStatus,
)
from compliance_engine.models.questionnaire import (
    Answer,
    Assessment,
    LinkedDocument,
    Question,
    Section,
    Template,
)
from compliance_engine.models.vendor import Gap, Priorities, Vendor
from compliance_engine.repositories import AssessmentRepository, VendorRepository
from compliance_engine.services import VendorMatchingService, WeightedScoringService

# Keep per-vendor debug events out of the test output
configure_logging(Settings(LOG_LEVEL="WARNING", LOG_FORMAT="console"))


# =============================================================================
# QUESTIONNAIRE FIXTURES
# =============================================================================

@pytest.fixture
def governance_section():
    """Three questions weighted 0.5 / 0.3 / 0.2."""
    return Section(
        id="sec-gov",
        template_id="tmpl-aml",
        title="Governance",
        weight=0.6,
        order=1,
        questions=[
            Question(id="q1", section_id="sec-gov", text="Is there an AML policy?", weight=0.5, order=1),
            Question(id="q2", section_id="sec-gov", text="Is the policy reviewed?", weight=0.3, order=2),
            Question(id="q3", section_id="sec-gov", text="Is a MLRO appointed?", weight=0.2, order=3),
        ],
    )


@pytest.fixture
def operations_section():
    """Two equally weighted questions."""
    return Section(
        id="sec-ops",
        template_id="tmpl-aml",
        title="Operations",
        weight=0.4,
        order=2,
        questions=[
            Question(id="q4", section_id="sec-ops", text="Are transactions monitored?", weight=0.5, order=1),
            Question(id="q5", section_id="sec-ops", text="Are alerts triaged?", weight=0.5, order=2),
        ],
    )


@pytest.fixture
def template(governance_section, operations_section):
    return Template(id="tmpl-aml", name="AML Readiness", sections=[governance_section, operations_section])


@pytest.fixture
def assessment():
    return Assessment(id="asmt-1", organization_id="org-1", template_id="tmpl-aml")


def _answer(answer_id, question_id, raw, tier=None, assessment_id="asmt-1"):
    documents = []
    if tier is not None:
        documents.append(LinkedDocument(id=f"doc-{answer_id}", filename="evidence.pdf", evidence_tier=tier))
    return Answer(
        id=answer_id,
        assessment_id=assessment_id,
        question_id=question_id,
        raw_quality_score=raw,
        linked_documents=documents,
    )


@pytest.fixture
def answers():
    """Answers for asmt-1; q5 has no answer."""
    return [
        _answer("ans-q1", "q1", 4.0, EvidenceTier.TIER_2),
        _answer("ans-q2", "q2", 3.0, EvidenceTier.TIER_2),
        _answer("ans-q3", "q3", 5.0, EvidenceTier.TIER_2),
        _answer("ans-q4", "q4", 4.0, EvidenceTier.TIER_1),
    ]


@pytest.fixture
def assessment_repository(template, assessment, answers):
    return AssessmentRepository(templates=[template], assessments=[assessment], answers=answers)


# =============================================================================
# VENDOR FIXTURES
# =============================================================================

@pytest.fixture
def full_vendor():
    """Matches every gap and every stated priority."""
    return Vendor(
        id="v-full",
        company_name="ComplyCo",
        categories=["KYC_AML", "TRANSACTION_MONITORING", "SANCTIONS_SCREENING"],
        target_segments=[CompanySize.SMB],
        geographic_coverage=["GLOBAL"],
        pricing_range=BudgetRange.RANGE_10K_50K,
        features=["Real-time alerts", "API access"],
        deployment_options="Cloud, Hybrid",
        implementation_timeline=60,
    )


@pytest.fixture
def partial_vendor():
    """One gap covered, adjacent size band, one jurisdiction, boundary price."""
    return Vendor(
        id="v-partial",
        company_name="KYC Partners",
        categories=["KYC_AML"],
        target_segments=[CompanySize.MIDMARKET],
        geographic_coverage=["US"],
        pricing_range=BudgetRange.RANGE_50K_100K,
        features=["API access"],
        deployment_options="On-Premise",
    )


@pytest.fixture
def sparse_vendor():
    """Directory entry with nothing but an id."""
    return Vendor(id="v-sparse")


@pytest.fixture
def suspended_vendor():
    return Vendor(
        id="v-suspended",
        status=VendorStatus.SUSPENDED,
        categories=["KYC_AML", "TRANSACTION_MONITORING", "SANCTIONS_SCREENING"],
        target_segments=[CompanySize.SMB],
        geographic_coverage=["GLOBAL"],
    )


@pytest.fixture
def gaps():
    return [
        Gap(id="gap-1", assessment_id="asmt-1", category="KYC_AML", severity=Severity.CRITICAL),
        Gap(id="gap-2", assessment_id="asmt-1", category="TRANSACTION_MONITORING", severity=Severity.HIGH),
        Gap(id="gap-3", assessment_id="asmt-1", category="SANCTIONS_SCREENING"),
    ]


@pytest.fixture
def priorities():
    return Priorities(
        id="prio-1",
        assessment_id="asmt-1",
        company_size=CompanySize.SMB,
        jurisdictions=["US", "UK"],
        budget_range=BudgetRange.RANGE_10K_50K,
        ranked_priorities=["transaction-monitoring", "kyc-aml", "sanctions-screening"],
        must_have_features=["real-time alerts", "API access"],
        deployment_preference=DeploymentPreference.CLOUD,
        implementation_urgency=ImplementationUrgency.IMMEDIATE,
    )


@pytest.fixture
def vendor_repository(full_vendor, partial_vendor, sparse_vendor, suspended_vendor, gaps, priorities):
    # Directory order deliberately differs from score order
    return VendorRepository(
        vendors=[sparse_vendor, suspended_vendor, partial_vendor, full_vendor],
        gaps=gaps,
        priorities=[priorities],
    )


# =============================================================================
# SERVICE FIXTURES
# =============================================================================

@pytest.fixture
def scoring_service(assessment_repository):
    return WeightedScoringService(assessment_repository)


@pytest.fixture
def matching_service(assessment_repository, vendor_repository):
    return VendorMatchingService(assessment_repository, vendor_repository)
