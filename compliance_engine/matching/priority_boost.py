"""
Priority Boost Calculator
compliance_engine/matching/priority_boost.py

Bonus for alignment with the user's stated priorities, four components (max 40):

    top_priority_boost  0-20   ranked priority #1 → 20, #2 → 15, #3 → 10
    feature_boost       0-10   10 × must-have features present / required
    deployment_boost    0-5    preferred deployment model supported
    speed_boost         0-5    implementation timeline within the urgency threshold

    total_boost = top_priority_boost + feature_boost + deployment_boost + speed_boost
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Tuple

import structlog

from compliance_engine.config import get_settings
from compliance_engine.models.enumerations import DeploymentPreference
from compliance_engine.models.vendor import Priorities, Vendor
from compliance_engine.scoring.utils import ZERO, quantize_cents

logger = structlog.get_logger(__name__)


@dataclass
class PriorityBoost:
    """Output of calculate_priority_boost()."""
    vendor_id: str
    top_priority_boost: Decimal            # [0, 20]
    feature_boost: Decimal                 # [0, 10]
    deployment_boost: Decimal              # [0, 5]
    speed_boost: Decimal                   # [0, 5]
    total_boost: Decimal                   # exact sum of the four components, [0, 40]
    matched_priority: Optional[str] = None
    missing_features: List[str] = field(default_factory=list)


def normalize_priority_format(priority: Optional[str]) -> Optional[str]:
    """
    Convert a lowercase-hyphenated priority to the vendor category format.

    Examples:
        >>> normalize_priority_format("transaction-monitoring")
        'TRANSACTION_MONITORING'
        >>> normalize_priority_format("  ") is None
        True
    """
    if not priority or not priority.strip():
        return None
    return priority.strip().upper().replace("-", "_")


def calculate_top_priority_boost(
    vendor: Vendor,
    priorities: Priorities,
) -> Tuple[Decimal, Optional[str]]:
    """
    Highest-ranked priority the vendor's categories cover; ranks never stack.

    Returns the boost and the matched priority as the user spelled it.
    """
    settings = get_settings()
    rank_points = [
        settings.TOP_PRIORITY_RANK_1,
        settings.TOP_PRIORITY_RANK_2,
        settings.TOP_PRIORITY_RANK_3,
    ]
    categories = {c.strip().upper() for c in vendor.categories if c}

    for priority, points in zip(priorities.ranked_priorities, rank_points):
        normalized = normalize_priority_format(priority)
        if normalized and normalized in categories:
            return Decimal(points), priority
    return ZERO, None


def calculate_feature_boost(
    vendor: Vendor,
    priorities: Priorities,
) -> Tuple[Decimal, List[str]]:
    """
    Proportional credit for must-have features the vendor lists.

    No must-have features means every vendor qualifies for the full boost.
    Returns the boost and the missing features in the user's order.
    """
    max_points = Decimal(get_settings().FEATURE_BOOST_MAX)
    required = priorities.must_have_features
    if not required:
        return max_points, []

    offered = {f.strip().lower() for f in vendor.features if f}
    missing = [f for f in required if f.strip().lower() not in offered]
    present = len(required) - len(missing)
    return quantize_cents(max_points * present / len(required)), missing


def calculate_deployment_boost(vendor: Vendor, priorities: Priorities) -> Decimal:
    """Full boost when the vendor supports the preferred deployment model."""
    points = Decimal(get_settings().DEPLOYMENT_BOOST)
    preference = priorities.deployment_preference

    if preference == DeploymentPreference.FLEXIBLE:
        return points

    # "On-Premise" and "on premise" both match ON_PREMISE
    options = [
        o.strip().lower().replace("-", "_").replace(" ", "_")
        for o in (vendor.deployment_options or "").split(",")
    ]
    wanted = preference.value.lower()
    if any(wanted in option for option in options if option):
        return points
    return ZERO


def calculate_speed_boost(vendor: Vendor, priorities: Priorities) -> Decimal:
    """
    Full boost when the vendor's implementation timeline fits the urgency.

    Only urgencies with a configured day threshold qualify (IMMEDIATE: 90
    days). A vendor without a declared timeline is assumed to take a year.
    """
    settings = get_settings()
    threshold = settings.speed_thresholds.get(priorities.implementation_urgency.value)
    if threshold is None:
        return ZERO

    timeline = vendor.implementation_timeline
    if timeline is None:
        timeline = settings.DEFAULT_TIMELINE_DAYS
    if timeline <= threshold:
        return Decimal(settings.SPEED_BOOST)
    return ZERO


def calculate_priority_boost(vendor: Vendor, priorities: Priorities) -> PriorityBoost:
    """Score one vendor against the user's stated priorities."""
    top_boost, matched = calculate_top_priority_boost(vendor, priorities)
    feature_boost, missing = calculate_feature_boost(vendor, priorities)
    deployment_boost = calculate_deployment_boost(vendor, priorities)
    speed_boost = calculate_speed_boost(vendor, priorities)
    total = top_boost + feature_boost + deployment_boost + speed_boost

    logger.debug(
        "priority_boost_calculated",
        vendor_id=vendor.id,
        top_priority_boost=float(top_boost),
        feature_boost=float(feature_boost),
        deployment_boost=float(deployment_boost),
        speed_boost=float(speed_boost),
        total_boost=float(total),
        matched_priority=matched,
        missing_feature_count=len(missing),
    )

    return PriorityBoost(
        vendor_id=vendor.id,
        top_priority_boost=top_boost,
        feature_boost=feature_boost,
        deployment_boost=deployment_boost,
        speed_boost=speed_boost,
        total_boost=total,
        matched_priority=matched,
        missing_features=missing,
    )
