# tests/test_utils.py
"""
Test the shared Decimal helpers, weight validation and tier multipliers.
"""

from decimal import Decimal

import pytest

from compliance_engine.core.exceptions import InvalidConfigurationException
from compliance_engine.models.enumerations import EvidenceTier
from compliance_engine.scoring.tier_multiplier import best_tier, get_multiplier
from compliance_engine.scoring.utils import (
    clamp,
    quantize_cents,
    scale_score,
    score_stats,
    to_decimal,
    weighted_sum,
)
from compliance_engine.scoring.weight_validator import (
    normalize_weights,
    require_valid_weights,
    sum_weights,
    validate_weights,
)


class TestDecimalUtils:

    def test_to_decimal_uses_string_form(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(None) == Decimal("0")
        assert to_decimal(2.345, places=2) == Decimal("2.35")

    def test_quantize_cents_half_up(self):
        assert quantize_cents(Decimal("13.335")) == Decimal("13.34")

    def test_clamp(self):
        assert clamp(Decimal("120")) == Decimal("100")
        assert clamp(Decimal("-3")) == Decimal("0")
        assert clamp(Decimal("7"), Decimal("0"), Decimal("5")) == Decimal("5")

    def test_weighted_sum(self):
        values = [Decimal("4"), Decimal("3"), Decimal("5")]
        weights = [Decimal("0.5"), Decimal("0.3"), Decimal("0.2")]
        assert weighted_sum(values, weights) == Decimal("3.9")
        assert weighted_sum([], []) == Decimal("0")

    def test_weighted_sum_length_mismatch(self):
        with pytest.raises(ValueError):
            weighted_sum([Decimal("1")], [])

    def test_scale_score(self):
        assert scale_score(Decimal("3.9"), Decimal("0"), Decimal("5"), Decimal("0"), Decimal("100")) == Decimal("78")
        assert scale_score(Decimal("9"), Decimal("0"), Decimal("5"), Decimal("0"), Decimal("100")) == Decimal("100")
        assert scale_score(Decimal("1"), Decimal("2"), Decimal("2"), Decimal("0"), Decimal("100")) == Decimal("0")

    def test_score_stats(self):
        stats = score_stats([10, 40, 20, 30])
        assert stats["min"] == Decimal("10")
        assert stats["max"] == Decimal("40")
        assert stats["mean"] == Decimal("25")
        assert stats["median"] == Decimal("25")
        assert stats["count"] == 4

    def test_score_stats_odd_and_empty(self):
        assert score_stats([3, 1, 2])["median"] == Decimal("2")
        empty = score_stats([])
        assert empty["count"] == 0
        assert empty["mean"] == Decimal("0")


class TestWeightValidator:

    def test_valid_within_tolerance(self):
        assert validate_weights([0.5, 0.3, 0.2])
        assert validate_weights([0.5, 0.3, 0.205])
        assert validate_weights([0.33, 0.33, 0.33])

    def test_invalid_outside_tolerance(self):
        assert not validate_weights([0.5, 0.3])
        assert not validate_weights([0.5, 0.3, 0.22])
        assert not validate_weights([])

    def test_custom_tolerance(self):
        assert validate_weights([0.5, 0.45], tolerance=0.05)
        assert not validate_weights([0.5, 0.45], tolerance=0.01)

    def test_require_returns_total(self):
        assert require_valid_weights([0.5, 0.5]) == Decimal("1.0")

    def test_require_raises_with_context(self):
        with pytest.raises(InvalidConfigurationException) as exc_info:
            require_valid_weights([0.5, 0.3], 'Question weights in section "Governance"')
        message = str(exc_info.value)
        assert 'Question weights in section "Governance" sum to 0.8000' in message
        assert "must equal 1.0 (±0.01)" in message
        assert exc_info.value.total == Decimal("0.8")

    def test_sum_weights(self):
        assert sum_weights([]) == Decimal("0")
        assert sum_weights([0.1, 0.2]) == Decimal("0.3")

    def test_normalize_weights(self):
        normalized = normalize_weights([2, 1, 1])
        assert normalized == [Decimal("0.5"), Decimal("0.25"), Decimal("0.25")]

    def test_normalize_all_zero_splits_evenly(self):
        normalized = normalize_weights([0, 0])
        assert normalized == [Decimal("0.5"), Decimal("0.5")]
        assert normalize_weights([]) == []


class TestTierMultiplier:

    @pytest.mark.parametrize("tier,expected", [
        (EvidenceTier.TIER_0, Decimal("0.6")),
        (EvidenceTier.TIER_1, Decimal("0.8")),
        (EvidenceTier.TIER_2, Decimal("1.0")),
        ("TIER_2", Decimal("1.0")),
        ("TIER_9", Decimal("0.6")),
        (None, Decimal("0.6")),
    ])
    def test_get_multiplier(self, tier, expected):
        assert get_multiplier(tier) == expected

    def test_best_tier_is_max(self):
        tiers = [EvidenceTier.TIER_0, EvidenceTier.TIER_2, EvidenceTier.TIER_1]
        assert best_tier(tiers) == EvidenceTier.TIER_2

    def test_best_tier_ignores_unclassified(self):
        assert best_tier([None, "bogus", EvidenceTier.TIER_1]) == EvidenceTier.TIER_1

    def test_best_tier_without_evidence(self):
        assert best_tier([]) == EvidenceTier.TIER_0
