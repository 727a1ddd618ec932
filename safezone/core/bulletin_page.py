"""Alert extraction from the PHIVOLCS web page - Pure functions.

The page has no documented schema. Extraction is heuristic: find the
heading that names the volcano, then read the alert level and the
"Since <Month> <Day>, <Year>" phrase from that heading's section: what
follows it inside its parent element, up to the next heading of the same
or higher rank.
Nothing here performs I/O; the shell passes in already-fetched markup.
"""

import re
from dataclasses import dataclass
from datetime import datetime

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from safezone.core.alert import extract_alert_level_from_text


HEADING_TAGS = re.compile(r"^h[1-6]$")

SINCE_DATE_PATTERN = re.compile(
    r"since\s+([A-Za-z]+)\.?\s+(\d{1,2}),?\s+(\d{4})",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class PageAlert:
    """Alert data recovered from the web page.

    Attributes:
        level: Alert level digit
        date: Effective date (YYYY-MM-DD when parseable), or None
    """
    level: int
    date: str | None = None


def find_volcano_heading(soup: BeautifulSoup | Tag, volcano_name: str) -> Tag | None:
    """Find the first heading element that mentions the volcano.

    Pure function. Matching is case-insensitive.
    """
    needle = volcano_name.lower()
    for heading in soup.find_all(HEADING_TAGS):
        if needle in heading.get_text(" ", strip=True).lower():
            return heading
    return None


def extract_since_date(text: str) -> str | None:
    """Extract the "Since <Month> <Day>, <Year>" date from text.

    Pure function.

    Returns:
        ISO date (YYYY-MM-DD) when the month name parses, otherwise the
        matched phrase as written; None if there is no such phrase.
    """
    match = SINCE_DATE_PATTERN.search(text)
    if match is None:
        return None

    month, day, year = match.groups()
    for fmt in ("%B %d %Y", "%b %d %Y"):
        try:
            return datetime.strptime(f"{month} {day} {year}", fmt).date().isoformat()
        except ValueError:
            continue
    return f"{month} {day}, {year}"


def _heading_rank(tag: Tag) -> int:
    return int(tag.name[1])


def _inside(element, container: Tag) -> bool:
    return any(parent is container for parent in element.parents)


def heading_section(heading: Tag) -> tuple[list[Tag], str]:
    """Collect the sub-headings and text belonging to a heading.

    Pure function. The section starts at the heading and ends at the next
    heading of the same or higher rank, or at the end of the heading's
    parent element, whichever comes first.

    Returns:
        Tuple of (sub-headings in document order, section text)
    """
    container = heading.parent
    rank = _heading_rank(heading)
    sub_headings: list[Tag] = []
    strings: list[str] = []

    for element in heading.next_elements:
        if container is not None and not _inside(element, container):
            break
        if isinstance(element, Tag):
            if HEADING_TAGS.match(element.name):
                if _heading_rank(element) <= rank:
                    break
                sub_headings.append(element)
        elif isinstance(element, NavigableString) and not isinstance(element, Comment):
            text = element.strip()
            if text:
                strings.append(text)

    return sub_headings, " ".join(strings)


def _level_from_section(sub_headings: list[Tag], text: str) -> int | None:
    for sub_heading in sub_headings:
        level = extract_alert_level_from_text(sub_heading.get_text(" ", strip=True))
        if level is not None:
            return level
    # Some layouts put the level in a paragraph rather than a sub-heading
    return extract_alert_level_from_text(text)


def extract_alert_from_document(
    soup: BeautifulSoup | Tag,
    volcano_name: str,
) -> PageAlert | None:
    """Extract the alert level and date for a volcano from a parsed page.

    Pure function.

    Args:
        soup: Parsed document
        volcano_name: Name to look for in headings (e.g. "Mayon")

    Returns:
        PageAlert, or None if no heading or no alert level was found
    """
    heading = find_volcano_heading(soup, volcano_name)
    if heading is None:
        return None

    sub_headings, text = heading_section(heading)
    level = _level_from_section(sub_headings, text)
    if level is None:
        return None

    return PageAlert(level=level, date=extract_since_date(text))


def extract_alert_from_html(html: str, volcano_name: str) -> PageAlert | None:
    """Parse markup and extract the volcano's alert.

    Pure function.
    """
    soup = BeautifulSoup(html, "html.parser")
    return extract_alert_from_document(soup, volcano_name)
