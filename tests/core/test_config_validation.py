"""Unit tests for configuration validation."""

from safezone.core.config import Config, validate_config, validate_coordinates
from safezone.core.evacuation import EvacuationCenter
from safezone.core.geo import HazardZone


class TestValidateCoordinates:
    """Tests for validate_coordinates()."""

    def test_valid(self):
        assert validate_coordinates(13.257, 123.685, "zone") == []

    def test_latitude_out_of_range(self):
        errors = validate_coordinates(91, 0, "zone")

        assert len(errors) == 1
        assert "Latitude" in errors[0].message

    def test_longitude_out_of_range(self):
        errors = validate_coordinates(0, -181, "zone")

        assert len(errors) == 1
        assert "Longitude" in errors[0].message


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_defaults_are_valid(self):
        result = validate_config(Config())

        assert result.valid is True
        assert result.errors == []

    def test_negative_cache_duration(self):
        result = validate_config(Config(cache_duration_seconds=-1))

        assert result.valid is False
        assert result.critical_errors[0].field == "cache_duration_seconds"

    def test_zero_cache_duration_is_warning(self):
        result = validate_config(Config(cache_duration_seconds=0))

        assert result.valid is True
        assert result.warnings[0].field == "cache_duration_seconds"

    def test_non_positive_timeouts(self):
        result = validate_config(Config(primary_timeout_seconds=0, secondary_timeout_seconds=-2))

        fields = {e.field for e in result.critical_errors}
        assert fields == {"primary_timeout_seconds", "secondary_timeout_seconds"}

    def test_fallback_level_out_of_range(self):
        result = validate_config(Config(fallback_alert_level=6))

        assert result.valid is False
        assert result.critical_errors[0].field == "fallback_alert_level"

    def test_bad_hazard_zone(self):
        result = validate_config(Config(hazard_zone=HazardZone(95.0, 123.0, 0.0)))

        fields = {e.field for e in result.critical_errors}
        assert fields == {"hazard_zone", "hazard_zone.radius_km"}

    def test_bad_center_coordinates(self):
        centers = [EvacuationCenter(id="x", name="X", latitude=13.0, longitude=200.0)]

        result = validate_config(Config(evacuation_centers=centers))

        assert result.critical_errors[0].field == "evacuation_centers[0]"

    def test_no_centers_is_warning(self):
        result = validate_config(Config(evacuation_centers=[]))

        assert result.valid is True
        assert result.warnings[0].field == "evacuation_centers"

    def test_blank_keyword(self):
        result = validate_config(Config(volcano_keyword="  "))

        assert result.valid is False
