"""
Unit tests for purge job safety thresholds.
"""
import pytest

from purge_scheduler.core.config import settings
from purge_scheduler.services.thresholds import clamp, clamp_days, clamp_limit


class TestClamp:
    """Tests for clamp."""

    @pytest.mark.unit
    def test_value_below_minimum_is_raised(self):
        assert clamp(10, 60) == 60

    @pytest.mark.unit
    def test_value_at_or_above_minimum_is_kept(self):
        assert clamp(60, 60) == 60
        assert clamp(61, 60) == 61

    @pytest.mark.unit
    def test_negative_value_is_raised(self):
        assert clamp(-5, 100) == 100

    @pytest.mark.unit
    def test_missing_value_yields_minimum(self):
        assert clamp(None, 100) == 100

    @pytest.mark.unit
    def test_clamp_is_monotonic(self):
        """clamp(v, m) >= m always, and equals v whenever v >= m."""
        minimum = 60
        for value in range(-200, 200, 7):
            result = clamp(value, minimum)
            assert result >= minimum
            if value >= minimum:
                assert result == value


class TestConfiguredDefaults:
    """Defaults come from settings, not from the request."""

    @pytest.mark.unit
    def test_default_thresholds(self):
        assert settings.DEFAULT_RETENTION_DAYS == 60
        assert settings.DEFAULT_BATCH_LIMIT == 100

    @pytest.mark.unit
    def test_clamp_days_uses_retention_default(self):
        assert clamp_days(10) == 60
        assert clamp_days(95) == 95

    @pytest.mark.unit
    def test_clamp_limit_uses_batch_default(self):
        assert clamp_limit(5) == 100
        assert clamp_limit(110) == 110

    @pytest.mark.unit
    def test_thresholds_follow_settings_overrides(self, monkeypatch):
        monkeypatch.setattr(settings, "DEFAULT_RETENTION_DAYS", 30)
        monkeypatch.setattr(settings, "DEFAULT_BATCH_LIMIT", 500)

        assert clamp_days(10) == 30
        assert clamp_limit(110) == 500
