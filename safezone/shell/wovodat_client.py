"""WOVOdat Bulletin Client - Imperative Shell.

This module handles HTTP communication with the PHIVOLCS WOVOdat
bulletin feed. All I/O is contained here; bulletin parsing is in the
core module.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable

import requests

from safezone.core.alert import VOLCANO_NAME, AlertRecord, alert_from_bulletins
from safezone.core.config import WOVODAT_BULLETIN_URL


logger = logging.getLogger(__name__)


# Default timeout for feed requests (seconds)
DEFAULT_TIMEOUT = 8

USER_AGENT = "MayonSafeZoneApp/1.0"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class WovodatClient:
    """Primary alert source: the structured bulletin feed.

    This is part of the imperative shell - it handles HTTP I/O.
    """

    name = "wovodat"

    def __init__(
        self,
        url: str = WOVODAT_BULLETIN_URL,
        timeout: float = DEFAULT_TIMEOUT,
        volcano_keyword: str = "mayon",
        volcano_name: str = VOLCANO_NAME,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize WOVOdat client.

        Args:
            url: Bulletin feed URL
            timeout: Request timeout in seconds
            volcano_keyword: Substring identifying the monitored volcano
            volcano_name: Label for produced records
            now: Wall-clock source for the retrieval timestamp
        """
        self.url = url
        self.timeout = timeout
        self.volcano_keyword = volcano_keyword
        self.volcano_name = volcano_name
        self.now = now
        self.last_error: str | None = None

    def fetch_bulletins(self) -> Any:
        """Fetch the raw bulletin payload.

        This method performs HTTP I/O.

        Returns:
            Decoded JSON body

        Raises:
            requests.RequestException: If the request fails or the
                response status is not a success
            ValueError: If the body is not valid JSON
        """
        logger.info("Fetching bulletins from WOVOdat")

        response = requests.get(
            self.url,
            timeout=self.timeout,
            headers={
                "Accept": "application/json",
                "User-Agent": USER_AGENT,
            },
        )
        response.raise_for_status()

        return response.json()

    def fetch_alert(self) -> AlertRecord | None:
        """Fetch the latest alert for the monitored volcano.

        Failures never propagate past this method. A failed fetch sets
        `last_error`; a feed with no usable bulletin leaves it None.

        Returns:
            AlertRecord tagged with the WOVOdat source, or None
        """
        self.last_error = None
        try:
            payload = self.fetch_bulletins()
        except requests.Timeout:
            logger.warning("WOVOdat request timed out after %ss", self.timeout)
            self.last_error = "timeout"
            return None
        except requests.RequestException as e:
            logger.warning("WOVOdat request failed: %s", str(e))
            self.last_error = str(e) or type(e).__name__
            return None
        except ValueError as e:
            logger.warning("WOVOdat returned invalid JSON: %s", str(e))
            self.last_error = f"invalid JSON: {e}"
            return None

        record = alert_from_bulletins(
            payload,
            volcano_keyword=self.volcano_keyword,
            retrieved_at=self.now().isoformat(),
            volcano=self.volcano_name,
        )

        if record is None:
            logger.warning(
                "No usable %s bulletin in WOVOdat feed",
                self.volcano_keyword,
            )
        else:
            logger.info(
                "WOVOdat reports alert level %d (%s)",
                record.alert_level,
                record.updated_at,
            )

        return record
