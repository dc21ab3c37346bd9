"""
Evidence Tier Multiplier
compliance_engine/scoring/tier_multiplier.py

Maps an evidence classification to its discount factor:

    TIER_2 (system-generated)  1.0
    TIER_1 (policy document)   0.8
    TIER_0 (self-declared)     0.6

Anything unknown or missing is treated as TIER_0.
"""

from decimal import Decimal
from typing import Iterable, Optional, Union

from compliance_engine.config import get_settings
from compliance_engine.models.enumerations import EvidenceTier

TierLike = Union[EvidenceTier, str, None]

# Higher rank = stronger evidence
_TIER_RANK = {
    EvidenceTier.TIER_0: 0,
    EvidenceTier.TIER_1: 1,
    EvidenceTier.TIER_2: 2,
}


def _coerce(tier: TierLike) -> Optional[EvidenceTier]:
    if tier is None:
        return None
    try:
        return EvidenceTier(tier)
    except ValueError:
        return None


def get_multiplier(tier: TierLike) -> Decimal:
    """Return the multiplier for a tier; unknown or missing tiers get the TIER_0 value."""
    multipliers = get_settings().tier_multipliers
    resolved = _coerce(tier) or EvidenceTier.TIER_0
    return multipliers[resolved.value]


def best_tier(tiers: Iterable[TierLike]) -> EvidenceTier:
    """
    Strongest tier among linked documents.

    One strong document outweighs any number of weak ones, so this is a max,
    never an average. Empty input (no evidence) yields TIER_0.
    """
    best = EvidenceTier.TIER_0
    for tier in tiers:
        resolved = _coerce(tier)
        if resolved is not None and _TIER_RANK[resolved] > _TIER_RANK[best]:
            best = resolved
    return best
