"""
Services Package - Compliance Scoring Engine
compliance_engine/services/__init__.py

Record-lookup façades over the scoring and matching engines.
"""

from compliance_engine.services.weighted_scoring_service import WeightedScoringService
from compliance_engine.services.vendor_matching_service import VendorMatchingService

__all__ = [
    "WeightedScoringService",
    "VendorMatchingService",
]
