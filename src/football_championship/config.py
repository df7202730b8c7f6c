"""
Application configuration.

Loads settings from environment variables with sensible defaults.
"""

import logging
import os
import sys
from typing import Optional


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.lower() in ('true', '1', 'yes')


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


# =============================================================================
# CHAMPIONSHIP SETTINGS
# =============================================================================
# Reject duplicate team/player names and ambiguous player lookups
STRICT_NAMES = _get_bool('CHAMPIONSHIP_STRICT_NAMES', False)

# Start the tool server with the two demo teams registered
SEED_SAMPLE_DATA = _get_bool('CHAMPIONSHIP_SEED_SAMPLE_DATA', True)

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = _get_str('LOG_LEVEL', 'INFO')


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )
