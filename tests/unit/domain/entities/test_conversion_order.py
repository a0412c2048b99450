"""Unit tests for conversion order entities."""

import pytest

from migration_planner.domain.entities.conversion_order import (
    ConversionOrderResult,
    ConversionWave,
    WaveEffort,
)


def _wave(number: int, components: list[str], hours: float) -> ConversionWave:
    return ConversionWave(
        wave=number,
        components=components,
        blocked_by=[],
        effort=WaveEffort(estimated_hours=hours, components=len(components)),
    )


class TestConversionWave:
    """Test ConversionWave entity."""

    def test_create_wave(self):
        wave = _wave(1, ["c:A"], 2.0)

        assert wave.requires_coordination is False
        assert wave.effort.components == 1

    def test_wave_number_must_be_positive(self):
        with pytest.raises(ValueError, match="wave number must be >= 1"):
            _wave(0, ["c:A"], 2.0)

    def test_wave_cannot_be_empty(self):
        with pytest.raises(ValueError, match="at least one component"):
            _wave(1, [], 0.0)


class TestConversionOrderResult:
    """Test ConversionOrderResult aggregate."""

    def test_ordered_components_and_hours(self):
        result = ConversionOrderResult(
            waves=[_wave(1, ["c:A", "c:B"], 4.0), _wave(2, ["vf:P"], 2.0)],
            total_components=3,
            estimated_waves=2,
        )

        assert result.ordered_components == ["c:A", "c:B", "vf:P"]
        assert result.estimated_hours == 6.0

    def test_empty_result(self):
        result = ConversionOrderResult()

        assert result.ordered_components == []
        assert result.estimated_hours == 0
