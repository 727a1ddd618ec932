"""Unit tests for evacuation center ranking."""

from safezone.core.evacuation import (
    DEFAULT_EVACUATION_CENTERS,
    EvacuationCenter,
    center_to_dict,
    nearest_center,
    rank_centers,
    ranked_center_to_dict,
)


class TestRankCenters:
    """Tests for rank_centers()."""

    def test_sorted_nearest_first(self):
        # Tabaco City, north of the volcano
        ranked = rank_centers(13.36, 123.73)

        distances = [r.distance_km for r in ranked]
        assert distances == sorted(distances)
        assert ranked[0].center.id == "tabaco-evac"

    def test_only_first_is_nearest(self):
        ranked = rank_centers(13.14, 123.74)

        assert [r.is_nearest for r in ranked] == [True, False, False, False]

    def test_distances_rounded(self):
        ranked = rank_centers(13.2, 123.6)

        for r in ranked:
            assert r.distance_km == round(r.distance_km, 2)

    def test_empty_list(self):
        assert rank_centers(13.2, 123.6, []) == []

    def test_custom_centers(self):
        centers = [
            EvacuationCenter(id="far", name="Far", latitude=1.0, longitude=1.0),
            EvacuationCenter(id="near", name="Near", latitude=0.1, longitude=0.1),
        ]

        ranked = rank_centers(0.0, 0.0, centers)

        assert [r.center.id for r in ranked] == ["near", "far"]


class TestNearestCenter:
    """Tests for nearest_center()."""

    def test_legazpi_position(self):
        """A position in Legazpi is nearest the sports complex."""
        nearest = nearest_center(13.1385, 123.7441)

        assert nearest.center.id == "legazpi-sports"
        assert nearest.distance_km < 0.1

    def test_no_centers(self):
        assert nearest_center(13.2, 123.6, []) is None


class TestSerialization:
    """Tests for dict conversion."""

    def test_center_to_dict(self):
        data = center_to_dict(DEFAULT_EVACUATION_CENTERS[0])

        assert data == {
            "id": "legazpi-sports",
            "name": "Legazpi City Sports Complex",
            "lat": 13.1381,
            "lng": 123.744,
            "address": "Legazpi City, Albay",
            "capacity": None,
        }

    def test_ranked_center_to_dict(self):
        ranked = rank_centers(13.37, 123.727)[0]

        data = ranked_center_to_dict(ranked)

        assert data["id"] == "tabaco-evac"
        assert data["distance_km"] == 0.0
        assert data["is_nearest"] is True
