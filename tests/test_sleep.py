"""Unit tests for the sleep score calculator."""
import pytest
from health_risk.domain.sleep import calculate_sleep_score, QUALITY_BONUS


class TestCalculateSleepScore:
    """Test sleep score calculation."""

    def test_documented_examples(self):
        """Test the reference combinations."""
        assert calculate_sleep_score(8, "excellent") == 100
        assert calculate_sleep_score(4, "poor") == 25
        assert calculate_sleep_score(9.5, "good") == 80

    @pytest.mark.parametrize("hours,expected", [
        (7, 70), (9, 70),
        (6, 55), (6.99, 55),
        (9.01, 60), (10, 60),
        (5, 40), (5.5, 40),
        (10.5, 45), (14, 45),
        (4.99, 25), (0, 25), (-3, 25),
    ])
    def test_hour_buckets(self, hours, expected):
        """Test base score boundaries with no quality bonus."""
        assert calculate_sleep_score(hours, "poor") == expected

    def test_quality_bonuses(self):
        for quality, bonus in QUALITY_BONUS.items():
            assert calculate_sleep_score(6, quality) == 55 + bonus

    def test_unknown_quality_adds_nothing(self):
        assert calculate_sleep_score(6, "restless") == 55
        assert calculate_sleep_score(6, "Excellent") == 55

    def test_capped_at_100(self):
        assert calculate_sleep_score(7.5, "excellent") == 100
        assert calculate_sleep_score(10, "excellent") == 90
