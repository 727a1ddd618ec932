"""Alert data models and bulletin parsing - Pure functions.

This module turns upstream bulletin payloads into a normalized AlertRecord.
All functions are pure with no side effects (apart from logging).
"""

import logging
import re
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any


logger = logging.getLogger(__name__)


VOLCANO_NAME = "Mayon Volcano"

# Source tags, one per resolution tier
SOURCE_PRIMARY = "PHIVOLCS (WOVOdat)"
SOURCE_SECONDARY = "PHIVOLCS (Website)"
SOURCE_STATIC_FALLBACK = "static-fallback"
SOURCE_ERROR_FALLBACK = "error-fallback"

# PHIVOLCS volcano alert levels
ALERT_LEVEL_DESCRIPTIONS: dict[int, str] = {
    0: "Normal",
    1: "Low-Level Unrest",
    2: "Moderate Unrest",
    3: "High Unrest",
    4: "Hazardous Eruption Imminent",
    5: "Hazardous Eruption",
}

UNKNOWN_LEVEL_DESCRIPTION = "Unknown Alert Level"

ALERT_LEVEL_PATTERN = re.compile(r"alert\s+level\D{0,3}?(\d)", re.IGNORECASE)

# Non-ISO date layouts seen in bulletin feeds
_DATE_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class AlertRecord:
    """Normalized alert returned to the display layer.

    Attributes:
        volcano: Label of the monitored volcano
        alert_level: PHIVOLCS alert level (0-5 observed)
        description: Human-readable text for the level
        updated_at: Bulletin date, or retrieval time when unavailable
        source: Tag of the tier that produced the record
        cached: True if served from the in-memory cache
    """
    volcano: str
    alert_level: int
    description: str
    updated_at: str
    source: str
    cached: bool = False

    def with_cached(self, cached: bool) -> "AlertRecord":
        """Return a copy with the cached flag replaced."""
        return replace(self, cached=cached)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON response shape."""
        return {
            "volcano": self.volcano,
            "alertLevel": self.alert_level,
            "description": self.description,
            "updatedAt": self.updated_at,
            "source": self.source,
            "cached": self.cached,
        }


@dataclass(frozen=True)
class Bulletin:
    """One bulletin item as published by the upstream feed.

    Attributes:
        volcano_name: Name of the volcano the bulletin is about
        alert_level: Numeric alert level, if the feed provides one
        bulletin_title: Free-text title
        date_published: Publish date as an unparsed string
    """
    volcano_name: str
    alert_level: int | None = None
    bulletin_title: str | None = None
    date_published: str | None = None


def describe_alert_level(level: int) -> str:
    """Get the description for an alert level.

    Pure function. Levels outside the table are passed through with a
    generic description.
    """
    description = ALERT_LEVEL_DESCRIPTIONS.get(level)
    if description is None:
        logger.warning("Alert level %d is outside the known range 0-5", level)
        return UNKNOWN_LEVEL_DESCRIPTION
    return description


def _coerce_level(value: Any) -> int | None:
    """Convert a feed value to an integer alert level, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return int(text)
    return None


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_bulletin(item: Any) -> Bulletin | None:
    """Parse a single feed item into a Bulletin.

    Pure function: takes raw dict, returns Bulletin or None if invalid.

    Args:
        item: One element of the feed's bulletin list

    Returns:
        Bulletin object or None if the item is not usable
    """
    if not isinstance(item, dict):
        return None

    return Bulletin(
        volcano_name=_optional_str(item.get("volcano_name")) or "",
        alert_level=_coerce_level(item.get("alert_level")),
        bulletin_title=_optional_str(item.get("bulletin_title")),
        date_published=_optional_str(item.get("date_published")),
    )


def parse_bulletins(payload: Any) -> list[Bulletin]:
    """Parse the feed response into a list of Bulletins.

    Pure function. The feed is either a bare list or a mapping that wraps
    the list under "data"; anything else yields no bulletins.

    Args:
        payload: Decoded JSON body

    Returns:
        Bulletins in feed order
    """
    if isinstance(payload, dict):
        payload = payload.get("data")
    if not isinstance(payload, list):
        return []

    bulletins = []
    for item in payload:
        bulletin = parse_bulletin(item)
        if bulletin is not None:
            bulletins.append(bulletin)
    return bulletins


def filter_bulletins(
    bulletins: list[Bulletin],
    volcano_keyword: str,
) -> list[Bulletin]:
    """Keep bulletins whose volcano name contains the keyword.

    Pure function. Matching is a case-insensitive substring test.
    """
    keyword = volcano_keyword.lower()
    return [b for b in bulletins if keyword in b.volcano_name.lower()]


def parse_bulletin_date(text: str | None) -> datetime | None:
    """Parse a bulletin publish date.

    Pure function. Naive results are taken as UTC.

    Args:
        text: Date string from the feed

    Returns:
        Timezone-aware datetime, or None if unparseable
    """
    if not text:
        return None

    value = text.strip()
    parsed: datetime | None = None

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def select_latest_bulletin(bulletins: list[Bulletin]) -> Bulletin | None:
    """Pick the most recently published bulletin.

    Pure function. Bulletins without a parseable date sort as oldest.

    Args:
        bulletins: Candidate bulletins

    Returns:
        The newest bulletin, or None if the list is empty
    """
    if not bulletins:
        return None

    ordered = sorted(
        bulletins,
        key=lambda b: parse_bulletin_date(b.date_published) or _OLDEST,
        reverse=True,
    )
    return ordered[0]


def extract_alert_level_from_text(text: str | None) -> int | None:
    """Find the digit following "alert level" in free text.

    Pure function.

    Examples:
        "Mayon Volcano Bulletin - Alert Level 3" -> 3
        "ALERT LEVEL: 2 maintained" -> 2
    """
    if not text:
        return None
    match = ALERT_LEVEL_PATTERN.search(text)
    if match is None:
        return None
    return int(match.group(1))


def bulletin_alert_level(bulletin: Bulletin) -> int | None:
    """Get the alert level of a bulletin.

    Pure function. The numeric field wins; the title is the fallback.
    """
    if bulletin.alert_level is not None:
        return bulletin.alert_level
    return extract_alert_level_from_text(bulletin.bulletin_title)


def build_alert_record(
    level: int,
    updated_at: str,
    source: str,
    volcano: str = VOLCANO_NAME,
) -> AlertRecord:
    """Build a fresh (uncached) AlertRecord for a level.

    Pure function.
    """
    return AlertRecord(
        volcano=volcano,
        alert_level=level,
        description=describe_alert_level(level),
        updated_at=updated_at,
        source=source,
        cached=False,
    )


def alert_from_bulletins(
    payload: Any,
    volcano_keyword: str,
    retrieved_at: str,
    volcano: str = VOLCANO_NAME,
) -> AlertRecord | None:
    """Resolve the feed payload into an AlertRecord.

    Pure function combining parse, filter, select and level extraction.

    Args:
        payload: Decoded JSON body from the bulletin feed
        volcano_keyword: Substring identifying the monitored volcano
        retrieved_at: Timestamp used when the bulletin has no date
        volcano: Label for the record

    Returns:
        AlertRecord tagged with the primary source, or None
    """
    bulletins = filter_bulletins(parse_bulletins(payload), volcano_keyword)
    latest = select_latest_bulletin(bulletins)
    if latest is None:
        return None

    level = bulletin_alert_level(latest)
    if level is None:
        return None

    return build_alert_record(
        level=level,
        updated_at=latest.date_published or retrieved_at,
        source=SOURCE_PRIMARY,
        volcano=volcano,
    )


def build_fallback_record(
    level: int,
    updated_at: str,
    source: str = SOURCE_STATIC_FALLBACK,
    volcano: str = VOLCANO_NAME,
) -> AlertRecord:
    """Build the static record used when no live data is available.

    Pure function.
    """
    return build_alert_record(level, updated_at, source, volcano)
