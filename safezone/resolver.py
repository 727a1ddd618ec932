"""Alert Resolver - Wires Functional Core and Imperative Shell.

This module coordinates the ordered chain of alert sources, the
single-slot cache and the static fallback. It's the "glue" behind the
alert endpoint.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Protocol, Sequence

from safezone.core.alert import (
    SOURCE_ERROR_FALLBACK,
    SOURCE_STATIC_FALLBACK,
    AlertRecord,
    build_fallback_record,
)
from safezone.core.cache import AlertCache
from safezone.core.config import Config
from safezone.shell.phivolcs_page_client import PhivolcsPageClient
from safezone.shell.wovodat_client import WovodatClient


logger = logging.getLogger(__name__)


class AlertSource(Protocol):
    """One tier in the fallback chain."""

    name: str
    last_error: str | None

    def fetch_alert(self) -> AlertRecord | None:
        """Return a fresh record, or None if this tier has no data.

        A None caused by a fault (timeout, HTTP error, bad body) sets
        `last_error`; a None meaning "no data upstream" leaves it None.
        """
        ...


class ResolutionStep(Enum):
    """Terminal state reached by a resolution."""
    CACHE_HIT = "cache_hit"
    SOURCE_SUCCESS = "source_success"
    STATIC_FALLBACK = "static_fallback"
    ERROR_FALLBACK = "error_fallback"


@dataclass(frozen=True)
class Resolution:
    """Result of one resolution, with how it was reached.

    Attributes:
        record: The record returned to the caller
        step: Terminal state of the resolution
        source_name: Name of the tier that produced a live record, if any
    """
    record: AlertRecord
    step: ResolutionStep
    source_name: str | None = None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AlertResolver:
    """Resolves the current alert through cache, sources and fallback.

    Sources are tried in order; the first that yields a record wins and
    is cached. When every source fails with a fault the error fallback is
    returned; when at least one merely had no data, the static fallback.
    Neither is cached, so the next call retries upstream.
    """

    def __init__(
        self,
        sources: Sequence[AlertSource],
        cache: AlertCache,
        config: Config | None = None,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize resolver.

        Args:
            sources: Alert sources in priority order
            cache: Cache shared by every resolution in the process
            config: Application configuration (defaults if not provided)
            now: Wall-clock source for fallback timestamps
        """
        self.sources = list(sources)
        self.cache = cache
        self.config = config or Config()
        self.now = now

    def _fallback(self, source: str) -> AlertRecord:
        return build_fallback_record(
            level=self.config.fallback_alert_level,
            updated_at=self.now().isoformat(),
            source=source,
            volcano=self.config.volcano_name,
        )

    def _resolve_uncached(self) -> Resolution:
        faults = []
        for source in self.sources:
            record = source.fetch_alert()
            if record is None:
                if source.last_error is not None:
                    faults.append(f"{source.name}: {source.last_error}")
                logger.info("Source %s returned no alert, trying next", source.name)
                continue

            fresh = record.with_cached(False)
            self.cache.put(fresh)
            logger.info(
                "Resolved alert level %d from %s",
                fresh.alert_level,
                source.name,
            )
            return Resolution(fresh, ResolutionStep.SOURCE_SUCCESS, source.name)

        if self.sources and len(faults) == len(self.sources):
            logger.error(
                "Every alert source failed (%s), serving error fallback",
                "; ".join(faults),
            )
            return Resolution(
                self._fallback(SOURCE_ERROR_FALLBACK),
                ResolutionStep.ERROR_FALLBACK,
            )

        logger.warning(
            "No alert source had data (%d tried), serving static fallback",
            len(self.sources),
        )
        return Resolution(
            self._fallback(SOURCE_STATIC_FALLBACK),
            ResolutionStep.STATIC_FALLBACK,
        )

    def resolve_with_trace(self) -> Resolution:
        """Resolve the alert and report which step produced it.

        Never raises.
        """
        try:
            cached = self.cache.get()
        except Exception:
            logger.exception("Alert cache lookup failed")
            cached = None

        if cached is not None:
            logger.debug("Serving alert from cache")
            return Resolution(cached.with_cached(True), ResolutionStep.CACHE_HIT)

        try:
            return self._resolve_uncached()
        except Exception:
            logger.exception("Unexpected error resolving alert, serving error fallback")
            return Resolution(
                self._fallback(SOURCE_ERROR_FALLBACK),
                ResolutionStep.ERROR_FALLBACK,
            )

    def resolve(self) -> AlertRecord:
        """Resolve the current alert record.

        Always returns a record; faults are absorbed into the fallback.
        """
        return self.resolve_with_trace().record


def create_sources(config: Config) -> list[AlertSource]:
    """Build the default source chain: bulletin feed, then web page."""
    return [
        WovodatClient(
            url=config.primary_url,
            timeout=config.primary_timeout_seconds,
            volcano_keyword=config.volcano_keyword,
            volcano_name=config.volcano_name,
        ),
        PhivolcsPageClient(
            url=config.secondary_url,
            timeout=config.secondary_timeout_seconds,
            volcano_keyword=config.volcano_keyword,
            volcano_name=config.volcano_name,
        ),
    ]


def create_resolver(
    config: Config,
    cache: AlertCache | None = None,
) -> AlertResolver:
    """Build a resolver with the default sources for a config."""
    return AlertResolver(
        sources=create_sources(config),
        cache=cache or AlertCache(duration_seconds=config.cache_duration_seconds),
        config=config,
    )
