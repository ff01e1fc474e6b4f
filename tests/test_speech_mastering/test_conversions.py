"""Tests for level conversions and clamping."""

import pytest

from speech_mastering.filter_chain.conversions import clamp, db_to_linear, linear_to_db


@pytest.mark.unit
class TestDbConversions:
    """Test cases for dB and linear amplitude conversion."""

    def test_known_values(self) -> None:
        """Test well-known reference points."""
        assert db_to_linear(0.0) == pytest.approx(1.0)
        assert db_to_linear(-20.0) == pytest.approx(0.1)
        assert db_to_linear(-6.0) == pytest.approx(0.501187, rel=1e-5)
        assert linear_to_db(1.0) == pytest.approx(0.0)
        assert linear_to_db(0.01) == pytest.approx(-40.0)

    @pytest.mark.parametrize("db", [-96.0, -70.0, -38.0, -16.0, -1.0, 0.0, 6.0])
    def test_round_trip(self, db: float) -> None:
        """Test linear_to_db inverts db_to_linear across typical levels."""
        assert linear_to_db(db_to_linear(db)) == pytest.approx(db, abs=1e-9)

    def test_non_positive_amplitude_maps_to_silence(self) -> None:
        """Test zero and negative amplitudes do not produce -inf."""
        assert linear_to_db(0.0) == -120.0
        assert linear_to_db(-0.5) == -120.0


@pytest.mark.unit
class TestClamp:
    """Test cases for clamp."""

    def test_inside_and_outside_range(self) -> None:
        """Test values are limited to the closed interval."""
        assert clamp(5.0, 0.0, 10.0) == 5.0
        assert clamp(-1.0, 0.0, 10.0) == 0.0
        assert clamp(11.0, 0.0, 10.0) == 10.0
        assert clamp(10.0, 0.0, 10.0) == 10.0

    @pytest.mark.parametrize("value", [-1e9, -3.0, 0.0, 7.5, 1e9])
    def test_degenerate_range(self, value: float) -> None:
        """Test a single-point range always returns that point."""
        assert clamp(value, 4.0, 4.0) == 4.0
