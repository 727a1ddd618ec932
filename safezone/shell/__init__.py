"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- WOVOdat bulletin feed client (HTTP, JSON)
- PHIVOLCS page client (HTTP, HTML)
- Configuration loading (environment/files)

Keep this layer thin and simple. All business logic should be in core.
"""

from safezone.shell.wovodat_client import WovodatClient
from safezone.shell.phivolcs_page_client import PhivolcsPageClient
from safezone.shell.config_loader import load_config, load_config_from_env

__all__ = [
    "WovodatClient",
    "PhivolcsPageClient",
    "load_config",
    "load_config_from_env",
]
