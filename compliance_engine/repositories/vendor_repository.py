"""
Vendor Repository - Compliance Scoring Engine
compliance_engine/repositories/vendor_repository.py

Vendor directory, assessment gaps and assessment priorities.
"""

from typing import Iterable, List, Optional

from compliance_engine.models.enumerations import VendorStatus
from compliance_engine.models.vendor import Gap, Priorities, Vendor
from compliance_engine.repositories.base import BaseRepository


class VendorRepository:
    """Read access to the matching inputs."""

    def __init__(
        self,
        vendors: Optional[Iterable[Vendor]] = None,
        gaps: Optional[Iterable[Gap]] = None,
        priorities: Optional[Iterable[Priorities]] = None,
    ):
        self.vendors: BaseRepository[Vendor] = BaseRepository(vendors)
        self.gaps: BaseRepository[Gap] = BaseRepository(gaps)
        self.priorities: BaseRepository[Priorities] = BaseRepository(priorities)

    def list_approved_vendors(self) -> List[Vendor]:
        """Approved vendors in directory order."""
        return [v for v in self.vendors.get_all() if v.status == VendorStatus.APPROVED]

    def list_gaps(self, assessment_id: str) -> List[Gap]:
        return [g for g in self.gaps.get_all() if g.assessment_id == assessment_id]

    def get_priorities(self, priorities_id: str) -> Optional[Priorities]:
        return self.priorities.get_by_id(priorities_id)

    def get_priorities_for_assessment(self, assessment_id: str) -> Optional[Priorities]:
        for record in self.priorities.get_all():
            if record.assessment_id == assessment_id:
                return record
        return None

    def save_vendor(self, vendor: Vendor) -> Vendor:
        return self.vendors.add(vendor)

    def save_gap(self, gap: Gap) -> Gap:
        return self.gaps.add(gap)

    def save_priorities(self, priorities: Priorities) -> Priorities:
        return self.priorities.add(priorities)
