"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the safezone package.
"""

from safezone.main import volcano_alert

__all__ = [
    "volcano_alert",
]
