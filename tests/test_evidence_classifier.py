# tests/test_evidence_classifier.py
"""
Test the heuristic evidence tier classifier.
"""

from decimal import Decimal

import pytest

from compliance_engine.models.enumerations import EvidenceTier
from compliance_engine.scoring.evidence_classifier import MAX_CONTENT_LENGTH, classify_document


class TestSystemGenerated:

    def test_generated_on_marker(self):
        result = classify_document("Transaction export\nGenerated on: 2024-01-05\n", "export.txt")
        assert result.tier == EvidenceTier.TIER_2
        assert result.confidence == Decimal("0.70")
        assert result.indicators["has_timestamps"] is True

    def test_iso_timestamp(self):
        result = classify_document("alert raised 2024-03-01T10:15:00 by rule 7")
        assert result.tier == EvidenceTier.TIER_2

    def test_csv_rows(self):
        content = '"id","amount","status"\n"1","200","cleared"\n'
        result = classify_document(content)
        assert result.tier == EvidenceTier.TIER_2
        assert result.indicators["is_structured_data"] is True

    @pytest.mark.parametrize("filename", ["alerts.csv", "dump.JSON", "audit.xml", "server.log"])
    def test_structured_filename(self, filename):
        assert classify_document("", filename).tier == EvidenceTier.TIER_2

    def test_system_markers_beat_policy_markers(self):
        result = classify_document("Policy document\nGenerated on: 2024-01-05")
        assert result.tier == EvidenceTier.TIER_2


class TestPolicyDocument:

    def test_policy_markers(self):
        content = "AML Policy Document\nVersion 3\nApproved by: Chief Compliance Officer"
        result = classify_document(content, "aml.docx")
        assert result.tier == EvidenceTier.TIER_1
        assert result.confidence == Decimal("0.60")
        assert result.indicators == {"has_version_control": True, "has_approval_signatures": True}

    def test_policy_filename(self):
        result = classify_document("We check customers.", "Customer_Onboarding_Procedure.pdf")
        assert result.tier == EvidenceTier.TIER_1

    def test_effective_date(self):
        assert classify_document("Effective date: 1 March").tier == EvidenceTier.TIER_1


class TestSelfDeclared:

    def test_plain_statement(self):
        result = classify_document("We screen all customers against sanctions lists.", "notes.txt")
        assert result.tier == EvidenceTier.TIER_0
        assert result.confidence == Decimal("0.50")
        assert result.indicators == {}

    def test_empty_document(self):
        assert classify_document("").tier == EvidenceTier.TIER_0

    def test_only_leading_content_inspected(self):
        content = "x" * MAX_CONTENT_LENGTH + "\nGenerated on: 2024-01-05"
        assert classify_document(content).tier == EvidenceTier.TIER_0
