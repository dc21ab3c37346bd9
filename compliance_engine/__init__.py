"""
Compliance Scoring & Vendor Matching Engine.

    from compliance_engine.services import WeightedScoringService, VendorMatchingService
"""

import structlog

from compliance_engine.core.logging_config import configure_logging

__version__ = "1.0.0"

if not structlog.is_configured():
    configure_logging()
