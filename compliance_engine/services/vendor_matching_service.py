"""
Vendor Matching Service
compliance_engine/services/vendor_matching_service.py

Looks up the assessment's gaps and the approved vendor directory, then runs
the two-phase matcher: objective base score (0-100) plus priority boost
(0-40), combined and capped at 140.

Usage:
    svc = VendorMatchingService(assessment_repo, vendor_repo)
    matches = svc.match_vendors("assessment-1", "priorities-1")

    for m in matches[:3]:
        print(m.vendor.company_name, m.total_score, m.match_summary)
"""

from decimal import Decimal
from typing import List, Optional

import structlog

from compliance_engine.core.exceptions import EntityNotFoundException
from compliance_engine.matching.base_scorer import BaseScore, calculate_base_score
from compliance_engine.matching.priority_boost import PriorityBoost, calculate_priority_boost
from compliance_engine.matching.score_combiner import (
    VendorMatchScore,
    combine_scores,
    rank_matches,
    top_base_scores,
)
from compliance_engine.models.questionnaire import Assessment
from compliance_engine.models.vendor import Gap, Priorities, Vendor
from compliance_engine.repositories.assessment_repository import AssessmentRepository
from compliance_engine.repositories.vendor_repository import VendorRepository
from compliance_engine.scoring.utils import Number, score_stats

logger = structlog.get_logger(__name__)


class VendorMatchingService:
    """Ranks approved vendors against an assessment's gaps and priorities."""

    def __init__(
        self,
        assessment_repository: Optional[AssessmentRepository] = None,
        vendor_repository: Optional[VendorRepository] = None,
    ) -> None:
        self._assessments = (
            assessment_repository if assessment_repository is not None else AssessmentRepository()
        )
        self._vendors = vendor_repository if vendor_repository is not None else VendorRepository()

    # ------------------------------------------------------------------
    # Single-vendor scoring
    # ------------------------------------------------------------------

    def score_vendor_base(
        self,
        vendor: Vendor,
        assessment: Assessment,
        priorities: Priorities,
        gaps: List[Gap],
    ) -> BaseScore:
        """Objective fit of one vendor (0-100)."""
        return calculate_base_score(vendor, priorities, gaps, assessment_id=assessment.id)

    def score_vendor_boost(
        self,
        vendor: Vendor,
        priorities: Priorities,
        gaps: Optional[List[Gap]] = None,
    ) -> PriorityBoost:
        """Priority alignment of one vendor (0-40). Gaps do not affect the boost."""
        return calculate_priority_boost(vendor, priorities)

    def combine_scores(self, base: BaseScore, boost: PriorityBoost) -> Decimal:
        """Base plus boost, capped at 140."""
        return combine_scores(base, boost)

    # ------------------------------------------------------------------
    # Directory-wide scoring
    # ------------------------------------------------------------------

    def score_all_vendors(self, assessment_id: str, priorities: Priorities) -> List[BaseScore]:
        """
        Base-score every approved vendor, in directory order.

        Raises:
            EntityNotFoundException: no assessment with this id.
        """
        self._get_assessment(assessment_id)
        gaps = self._vendors.list_gaps(assessment_id)
        vendors = self._vendors.list_approved_vendors()

        scores = [calculate_base_score(v, priorities, gaps, assessment_id=assessment_id) for v in vendors]

        stats = score_stats([s.total_base for s in scores])
        logger.info(
            "vendors_scored",
            assessment_id=assessment_id,
            vendor_count=len(vendors),
            gap_count=len(gaps),
            max_base=float(stats["max"]),
            mean_base=float(stats["mean"]),
        )
        return scores

    def get_top_vendor_matches(
        self,
        assessment_id: str,
        priorities: Priorities,
        limit: Optional[int] = None,
        min_score: Number = 0,
    ) -> List[BaseScore]:
        """
        Top base scores: filtered by min_score, sorted descending (ties keep
        directory order), at most `limit` (default 15).
        """
        scores = self.score_all_vendors(assessment_id, priorities)
        return top_base_scores(scores, limit=limit, min_score=min_score)

    rank_vendors = get_top_vendor_matches

    def match_vendors_to_assessment(
        self,
        assessment_id: str,
        priorities_id: str,
    ) -> List[VendorMatchScore]:
        """
        Full pipeline: base score, boost, combined score, reasons and summary
        for every approved vendor, sorted by total_score descending.

        Raises:
            EntityNotFoundException: assessment or priorities record missing.
        """
        self._get_assessment(assessment_id)
        priorities = self._vendors.get_priorities(priorities_id)
        if priorities is None:
            exc = EntityNotFoundException("Priorities", priorities_id)
            logger.error(
                "match_vendors_failed",
                error=str(exc),
                assessment_id=assessment_id,
                priorities_id=priorities_id,
            )
            raise exc

        gaps = self._vendors.list_gaps(assessment_id)
        vendors = self._vendors.list_approved_vendors()
        matches = rank_matches(vendors, priorities, gaps)

        logger.info(
            "vendors_matched",
            assessment_id=assessment_id,
            priorities_id=priorities_id,
            vendor_count=len(vendors),
            gap_count=len(gaps),
            top_vendor_id=matches[0].vendor_id if matches else None,
            top_score=float(matches[0].total_score) if matches else None,
        )
        return matches

    match_vendors = match_vendors_to_assessment

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def _get_assessment(self, assessment_id: str) -> Assessment:
        assessment = self._assessments.get_assessment(assessment_id)
        if assessment is None:
            exc = EntityNotFoundException("Assessment", assessment_id)
            logger.error("vendor_matching_failed", error=str(exc), assessment_id=assessment_id)
            raise exc
        return assessment
