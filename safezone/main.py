"""Cloud Function Entry Point.

This module provides the entry point for Google Cloud Functions.
It's a thin wrapper that loads configuration and invokes the resolver.
"""

import json
import logging
import os
from typing import Any

import functions_framework
from flask import Request

from safezone.resolver import AlertResolver, create_resolver
from safezone.shell.config_loader import load_runtime_config


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# One resolver (and therefore one cache) per function instance
_resolver: AlertResolver | None = None


def _get_resolver() -> AlertResolver:
    """Get or create the process-wide resolver."""
    global _resolver
    if _resolver is None:
        _resolver = create_resolver(load_runtime_config())
        logger.info("Alert resolver initialized")
    return _resolver


@functions_framework.http
def volcano_alert(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP Cloud Function entry point.

    Returns the current alert record. Upstream failures are absorbed
    into a fallback record, so the status is always 200.

    Args:
        request: Flask request object (not used, but required by framework)

    Returns:
        Tuple of (alert record dict, HTTP status code)
    """
    resolution = _get_resolver().resolve_with_trace()

    logger.info(
        "Served alert level %d from %s (%s)",
        resolution.record.alert_level,
        resolution.record.source,
        resolution.step.value,
    )

    return resolution.record.to_dict(), 200


# For local testing
if __name__ == "__main__":
    class MockRequest:
        pass

    response, status = volcano_alert(MockRequest())
    print(f"\nResponse ({status}):")
    print(json.dumps(response, indent=2))
