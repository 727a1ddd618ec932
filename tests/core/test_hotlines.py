"""Unit tests for the hotline directory."""

from safezone.core.hotlines import DEFAULT_HOTLINES, hotline_to_dict


class TestHotlines:
    """Tests for DEFAULT_HOTLINES and hotline_to_dict()."""

    def test_ids_are_unique(self):
        ids = [h.id for h in DEFAULT_HOTLINES]

        assert len(ids) == len(set(ids))

    def test_includes_volcano_agency(self):
        phivolcs = next(h for h in DEFAULT_HOTLINES if h.id == "phivolcs")

        assert phivolcs.website == "https://www.phivolcs.dost.gov.ph/"

    def test_to_dict(self):
        data = hotline_to_dict(DEFAULT_HOTLINES[0])

        assert data == {
            "id": "emergency",
            "name": "Emergency (National)",
            "phone": "911",
            "website": None,
            "note": "24/7 national emergency number (police/fire/medical)",
        }
