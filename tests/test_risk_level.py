"""Tests for the ranked RiskLevel vocabulary.

Covers rank values, compare(), rich comparisons, threshold checks,
the high-risk flag, and the per-level descriptions.
"""

import pytest

from casevocab import RISK_LEVEL_DESCRIPTIONS, Comparison, Gender, RiskLevel
from casevocab.config import HIGH_RISK_THRESHOLD_RANK


class TestRanks:
    """Ranks are explicit, dense and 0-based."""

    def test_rank_values(self):
        """LOW..CRITICAL are ranked 0..3."""
        assert [RiskLevel.rank_of(level) for level in RiskLevel] == [0, 1, 2, 3]

    def test_strictly_increasing(self):
        """rank_of(LOW) < rank_of(MEDIUM) < rank_of(HIGH) < rank_of(CRITICAL)."""
        assert (
            RiskLevel.rank_of(RiskLevel.LOW)
            < RiskLevel.rank_of(RiskLevel.MEDIUM)
            < RiskLevel.rank_of(RiskLevel.HIGH)
            < RiskLevel.rank_of(RiskLevel.CRITICAL)
        )

    def test_rank_attribute_matches_rank_of(self):
        """code.rank and rank_of(code) agree."""
        for level in RiskLevel:
            assert level.rank == RiskLevel.rank_of(level)

    def test_by_rank_matches_declaration(self):
        """With the declared table, rank order equals declaration order."""
        assert RiskLevel.by_rank() == tuple(RiskLevel)

    def test_rank_of_rejects_other_vocabulary(self):
        """rank_of only accepts RiskLevel codes."""
        with pytest.raises(TypeError):
            RiskLevel.rank_of(Gender.MALE)


class TestCompare:
    """compare() and the comparison operators agree with rank."""

    def test_low_less_than_high(self):
        """compare(LOW, HIGH) is LESS."""
        assert RiskLevel.compare(RiskLevel.LOW, RiskLevel.HIGH) is Comparison.LESS

    def test_critical_equal_to_itself(self):
        """compare(CRITICAL, CRITICAL) is EQUAL."""
        assert RiskLevel.compare(RiskLevel.CRITICAL, RiskLevel.CRITICAL) is Comparison.EQUAL

    def test_high_greater_than_medium(self):
        """compare(HIGH, MEDIUM) is GREATER."""
        assert RiskLevel.compare(RiskLevel.HIGH, RiskLevel.MEDIUM) is Comparison.GREATER

    @pytest.mark.parametrize("a", list(RiskLevel), ids=lambda level: level.name)
    @pytest.mark.parametrize("b", list(RiskLevel), ids=lambda level: level.name)
    def test_compare_matches_rank_difference(self, a, b):
        """compare(a, b) has the sign of rank_of(a) - rank_of(b)."""
        diff = RiskLevel.rank_of(a) - RiskLevel.rank_of(b)
        expected = (diff > 0) - (diff < 0)
        assert RiskLevel.compare(a, b) == expected

    def test_operators(self):
        """<, <=, >, >= follow rank."""
        assert RiskLevel.LOW < RiskLevel.MEDIUM
        assert RiskLevel.HIGH <= RiskLevel.HIGH
        assert RiskLevel.CRITICAL > RiskLevel.HIGH
        assert RiskLevel.MEDIUM >= RiskLevel.LOW
        assert not RiskLevel.CRITICAL < RiskLevel.LOW

    def test_sort_by_severity(self):
        """Sorting a shuffled list orders by severity."""
        levels = [RiskLevel.HIGH, RiskLevel.LOW, RiskLevel.CRITICAL, RiskLevel.MEDIUM]
        assert sorted(levels) == [
            RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH, RiskLevel.CRITICAL,
        ]
        assert max(levels) is RiskLevel.CRITICAL


class TestThresholds:
    """is_at_least and is_high_risk."""

    def test_at_least_medium(self):
        """Only MEDIUM and above are at least medium risk."""
        at_least_medium = [level for level in RiskLevel if level.is_at_least(RiskLevel.MEDIUM)]
        assert at_least_medium == [RiskLevel.MEDIUM, RiskLevel.HIGH, RiskLevel.CRITICAL]

    def test_high_risk_levels(self):
        """HIGH and CRITICAL are high risk."""
        assert [level for level in RiskLevel if level.is_high_risk] == [
            RiskLevel.HIGH, RiskLevel.CRITICAL,
        ]

    def test_high_risk_threshold_is_high(self):
        """The configured threshold rank is HIGH's rank."""
        assert RiskLevel.rank_of(RiskLevel.HIGH) == HIGH_RISK_THRESHOLD_RANK


class TestDescriptions:
    """RISK_LEVEL_DESCRIPTIONS covers every level."""

    def test_every_level_described(self):
        """Each level has a non-empty description."""
        assert set(RISK_LEVEL_DESCRIPTIONS) == set(RiskLevel)
        for description in RISK_LEVEL_DESCRIPTIONS.values():
            assert description

    def test_critical_mentions_round_the_clock_monitoring(self):
        """CRITICAL guidance calls for 24-hour monitoring."""
        assert "24小时" in RISK_LEVEL_DESCRIPTIONS[RiskLevel.CRITICAL]
