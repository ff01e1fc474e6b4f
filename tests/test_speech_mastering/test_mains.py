"""Tests for mains frequency detection."""

import pytest

from speech_mastering import mains
from speech_mastering.mains import detect_mains_frequency, frequency_for_timezone


@pytest.mark.unit
class TestFrequencyForTimezone:
    """Test cases for the timezone to mains frequency lookup."""

    @pytest.mark.parametrize(
        "zone_name",
        ["Europe/London", "Europe/Paris", "Europe/Berlin", "Australia/Sydney", "Asia/Shanghai"],
    )
    def test_50hz_zones(self, zone_name: str) -> None:
        """Test European, Australian and Chinese zones report 50 Hz."""
        assert frequency_for_timezone(zone_name) == 50.0

    @pytest.mark.parametrize(
        "zone_name",
        [
            "America/New_York",
            "America/Los_Angeles",
            "America/Chicago",
            "America/Toronto",
            "America/Mexico_City",
            "America/Bogota",
            "America/Sao_Paulo",
            "Asia/Seoul",
            "Asia/Taipei",
            "Asia/Manila",
        ],
    )
    def test_60hz_zones(self, zone_name: str) -> None:
        """Test the Americas, Korea, Taiwan and the Philippines report 60 Hz."""
        assert frequency_for_timezone(zone_name) == 60.0

    def test_japan_defaults_to_50hz(self) -> None:
        """Test the split Japanese grid reports the Tokyo frequency."""
        assert frequency_for_timezone("Asia/Tokyo") == 50.0

    @pytest.mark.parametrize("zone_name", ["UTC", "GMT", "Etc/UTC", "Mars/Olympus_Mons"])
    def test_countryless_zones_default_to_50hz(self, zone_name: str) -> None:
        """Test zones without a country fall back to 50 Hz."""
        assert frequency_for_timezone(zone_name) == 50.0


@pytest.mark.unit
class TestDetectMainsFrequency:
    """Test cases for local mains frequency detection."""

    def test_uses_local_zone(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the local timezone drives the result."""
        monkeypatch.setattr(mains, "get_localzone_name", lambda: "America/Chicago")
        assert detect_mains_frequency() == 60.0

    def test_missing_zone_defaults_to_50hz(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an unconfigured timezone falls back to 50 Hz."""
        monkeypatch.setattr(mains, "get_localzone_name", lambda: None)
        assert detect_mains_frequency() == 50.0

    def test_lookup_failure_defaults_to_50hz(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test a broken timezone setup is logged and falls back to 50 Hz."""

        def broken() -> str:
            raise LookupError("conflicting timezone configuration")

        monkeypatch.setattr(mains, "get_localzone_name", broken)

        assert detect_mains_frequency() == 50.0
        assert "assuming 50 Hz" in caplog.text

    def test_real_lookup_returns_a_grid_frequency(self) -> None:
        """Test the unpatched lookup returns one of the two grid frequencies."""
        assert detect_mains_frequency() in (50.0, 60.0)
