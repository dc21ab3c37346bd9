from enum import Enum


class EvidenceTier(str, Enum):
    TIER_0 = "TIER_0"  # Self-declared
    TIER_1 = "TIER_1"  # Policy document
    TIER_2 = "TIER_2"  # System-generated


class RiskBand(str, Enum):
    LOW = "Low"            # [80, 100]
    MEDIUM = "Medium"      # [40, 80)
    CRITICAL = "Critical"  # [0, 40)


class CompanySize(str, Enum):
    STARTUP = "STARTUP"
    SMB = "SMB"
    MIDMARKET = "MIDMARKET"
    ENTERPRISE = "ENTERPRISE"


class BudgetRange(str, Enum):
    UNDER_10K = "UNDER_10K"
    RANGE_10K_50K = "RANGE_10K_50K"
    RANGE_50K_100K = "RANGE_50K_100K"
    RANGE_100K_250K = "RANGE_100K_250K"
    OVER_250K = "OVER_250K"


class DeploymentPreference(str, Enum):
    CLOUD = "CLOUD"
    ON_PREMISE = "ON_PREMISE"
    HYBRID = "HYBRID"
    FLEXIBLE = "FLEXIBLE"  # Any deployment model is acceptable


class ImplementationUrgency(str, Enum):
    IMMEDIATE = "IMMEDIATE"
    PLANNED = "PLANNED"
    STRATEGIC = "STRATEGIC"
    LONG_TERM = "LONG_TERM"


class VendorStatus(str, Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    SUSPENDED = "SUSPENDED"


class Severity(str, Enum):
    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class GapPriority(str, Enum):
    IMMEDIATE = "IMMEDIATE"
    SHORT_TERM = "SHORT_TERM"
    MEDIUM_TERM = "MEDIUM_TERM"
    LONG_TERM = "LONG_TERM"
