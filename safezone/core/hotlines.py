"""Emergency hotline directory."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Hotline:
    """An emergency contact.

    Attributes:
        id: Stable identifier
        name: Agency name
        phone: Dialable number as published
        website: Agency website, if any
        note: Short description of what the line handles
    """
    id: str
    name: str
    phone: str
    website: str | None
    note: str


DEFAULT_HOTLINES: tuple[Hotline, ...] = (
    Hotline(
        id="emergency",
        name="Emergency (National)",
        phone="911",
        website=None,
        note="24/7 national emergency number (police/fire/medical)",
    ),
    Hotline(
        id="pnppatrol",
        name="Philippine National Police (PNP)",
        phone="117",
        website="https://pnp.gov.ph/",
        note="Police emergency hotline, also responds to general emergency calls",
    ),
    Hotline(
        id="phivolcs",
        name="PHIVOLCS (Volcano & Seismic)",
        phone="(02) 8426-1468",
        website="https://www.phivolcs.dost.gov.ph/",
        note="Volcano and earthquake monitoring (trunkline range: 02 8426-1468 to 79)",
    ),
    Hotline(
        id="redcross",
        name="Philippine Red Cross",
        phone="143",
        website="https://www.redcross.org.ph/",
        note="Disaster response, first aid, blood services (also (02) 8790-2300)",
    ),
    Hotline(
        id="fire",
        name="Bureau of Fire Protection (BFP)",
        phone="(02) 8426-0219",
        website="https://www.bfp.gov.ph/",
        note="Fire emergency reporting (also (02) 8426-0246)",
    ),
)


def hotline_to_dict(hotline: Hotline) -> dict[str, Any]:
    """Convert Hotline to JSON-serializable dict."""
    return {
        "id": hotline.id,
        "name": hotline.name,
        "phone": hotline.phone,
        "website": hotline.website,
        "note": hotline.note,
    }
