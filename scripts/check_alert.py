#!/usr/bin/env python3
"""Resolve the current Mayon alert level once and print it.

Hits the live upstream sources, so use it to check whether the
bulletin feed and the PHIVOLCS page are still parseable.

Usage:
    # Full chain (feed, then page, then static fallback)
    python scripts/check_alert.py

    # Query a single source
    python scripts/check_alert.py --source wovodat
    python scripts/check_alert.py --source phivolcs-page

Environment:
    CONFIG_PATH: Path to config file (optional)
"""

import argparse
import json
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from safezone.core.cache import AlertCache
from safezone.resolver import AlertResolver, create_sources
from safezone.shell.config_loader import load_runtime_config

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Resolve the current volcano alert level")
    parser.add_argument(
        "--source",
        choices=["wovodat", "phivolcs-page"],
        help="Query only this source instead of the full chain",
    )
    args = parser.parse_args()

    config = load_runtime_config()
    sources = create_sources(config)

    if args.source:
        source = next(s for s in sources if s.name == args.source)
        record = source.fetch_alert()
        if record is None:
            logger.error("Source %s returned no alert", source.name)
            return 1
        print(json.dumps(record.to_dict(), indent=2))
        return 0

    resolver = AlertResolver(
        sources=sources,
        cache=AlertCache(duration_seconds=config.cache_duration_seconds),
        config=config,
    )
    resolution = resolver.resolve_with_trace()

    print(json.dumps(resolution.record.to_dict(), indent=2))
    logger.info("Resolution step: %s", resolution.step.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
