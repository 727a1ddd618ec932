"""PHIVOLCS Page Client - Imperative Shell.

This module fetches the PHIVOLCS monitoring page. The page is HTML with
no documented schema; extraction lives in core.bulletin_page so it can
be swapped or stubbed without touching this client.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

import requests

from safezone.core.alert import (
    SOURCE_SECONDARY,
    VOLCANO_NAME,
    AlertRecord,
    build_alert_record,
)
from safezone.core.bulletin_page import PageAlert, extract_alert_from_html
from safezone.core.config import PHIVOLCS_PAGE_URL


logger = logging.getLogger(__name__)


# Default timeout for page requests (seconds)
DEFAULT_TIMEOUT = 6

# The page rejects non-browser clients
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PhivolcsPageClient:
    """Secondary alert source: the PHIVOLCS web page.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    name = "phivolcs-page"

    def __init__(
        self,
        url: str = PHIVOLCS_PAGE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        volcano_keyword: str = "mayon",
        volcano_name: str = VOLCANO_NAME,
        extractor: Callable[[str, str], PageAlert | None] = extract_alert_from_html,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize PHIVOLCS page client.

        Args:
            url: Page URL
            timeout: Request timeout in seconds
            volcano_keyword: Name searched for in page headings
            volcano_name: Label for produced records
            extractor: Function (html, keyword) -> PageAlert | None
            now: Wall-clock source for the retrieval timestamp
        """
        self.url = url
        self.timeout = timeout
        self.volcano_keyword = volcano_keyword
        self.volcano_name = volcano_name
        self.extractor = extractor
        self.now = now
        self.last_error: str | None = None

    def fetch_page(self) -> str:
        """Fetch the page markup.

        This method performs HTTP I/O.

        Returns:
            Response body as text

        Raises:
            requests.RequestException: If the request fails or the
                response status is not a success
        """
        logger.info("Fetching PHIVOLCS page")

        response = requests.get(
            self.url,
            timeout=self.timeout,
            headers={
                "Accept": "text/html,application/xhtml+xml",
                "User-Agent": BROWSER_USER_AGENT,
            },
        )
        response.raise_for_status()

        return response.text

    def fetch_alert(self) -> AlertRecord | None:
        """Fetch and extract the alert for the monitored volcano.

        Any failure in fetching or parsing returns None and sets
        `last_error`; a page without the volcano's level leaves it None.

        Returns:
            AlertRecord tagged with the page source, or None
        """
        self.last_error = None
        try:
            html = self.fetch_page()
            page_alert = self.extractor(html, self.volcano_keyword)
        except requests.Timeout:
            logger.warning("PHIVOLCS page request timed out after %ss", self.timeout)
            self.last_error = "timeout"
            return None
        except Exception as e:
            logger.warning("PHIVOLCS page fetch/parse failed: %s", str(e))
            self.last_error = str(e) or type(e).__name__
            return None

        if page_alert is None:
            logger.warning("No alert level found for %s on PHIVOLCS page", self.volcano_keyword)
            return None

        logger.info(
            "PHIVOLCS page reports alert level %d (since %s)",
            page_alert.level,
            page_alert.date,
        )

        return build_alert_record(
            level=page_alert.level,
            updated_at=page_alert.date or self.now().isoformat(),
            source=SOURCE_SECONDARY,
            volcano=self.volcano_name,
        )
