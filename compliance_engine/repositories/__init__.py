"""
Repositories Package - Compliance Scoring Engine
compliance_engine/repositories/__init__.py

Record stores the services read from.
"""

from compliance_engine.repositories.base import BaseRepository
from compliance_engine.repositories.assessment_repository import AssessmentRepository
from compliance_engine.repositories.vendor_repository import VendorRepository

__all__ = [
    "BaseRepository",
    "AssessmentRepository",
    "VendorRepository",
]
