"""Centralized constants for the roaming plan checks.

This module provides frozen dataclass-based configuration groups for the
timeouts, limits and defaults used throughout the suite. Values here are
the fallbacks; config/suite.yaml and environment variables override the
ones exposed through settings.

Usage:
    from plan_checks.shared.constants import GRID, HTTP

    timeout = HTTP.TIMEOUT
    limit = GRID.MAX_DATA_ELEMENTS
"""

from dataclasses import dataclass

__all__ = [
    'BROWSER',
    'BrowserDefaults',
    'GRID',
    'GridDefaults',
    'HTTP',
    'HttpDefaults',
    'LOGGING',
    'LoggingDefaults',
]


@dataclass(frozen=True)
class HttpDefaults:
    """Products API request defaults."""

    TIMEOUT: int = 30
    """Request timeout in seconds."""

    MAX_RETRIES: int = 3
    """Attempts made when the connection itself fails (never on HTTP errors)."""

    RETRY_WAIT: float = 2.0
    """Seconds to wait between connection retries."""

    PRODUCTS_ENDPOINT: str = '/v1/products/default/'
    """Path of the products listing endpoint, relative to the API base URL."""


@dataclass(frozen=True)
class GridDefaults:
    """Plan grid reconciliation defaults.

    Timeouts are in milliseconds, matching the browser driver's units.
    """

    MAX_DATA_ELEMENTS: int = 10
    """Upper bound on "Data" toggles clicked before reconciliation."""

    CLICK_TIMEOUT_MS: int = 5000
    """Timeout for a single "Data" toggle click."""

    CLICK_DELAY_MS: int = 200
    """Pause after each successful toggle click."""

    FIELD_TIMEOUT_MS: int = 5000
    """Bounded wait for an expected field to become visible in a grid item."""

    LOAD_STATE: str = 'networkidle'
    """Page load state awaited before the grid is read."""

    PLAN_TYPE: str = 'Data only'
    """Plan type label every product in the grid is expected to show."""

    MATCH_STRATEGY: str = 'substring'
    """Default policy used to pair grid text with a product."""


@dataclass(frozen=True)
class BrowserDefaults:
    """Browser session defaults for the CLI and e2e fixtures."""

    HEADLESS: bool = True
    """Run the browser without a window."""

    DEFAULT_TIMEOUT_MS: int = 30000
    """Default timeout for page actions."""

    NAVIGATION_TIMEOUT_MS: int = 60000
    """Default timeout for navigations."""

    SETTLE_MS: int = 10000
    """Pause after the destination is chosen so the plan grid can render."""

    VIEWPORT_WIDTH: int = 1280
    VIEWPORT_HEIGHT: int = 720


@dataclass(frozen=True)
class LoggingDefaults:
    """Logging configuration.

    Controls log file rotation settings.
    """

    MAX_BYTES: int = 10 * 1024 * 1024
    """Maximum log file size before rotation (10MB)."""

    BACKUP_COUNT: int = 5
    """Number of backup log files to keep."""


# Singleton instances for easy import
HTTP = HttpDefaults()
GRID = GridDefaults()
BROWSER = BrowserDefaults()
LOGGING = LoggingDefaults()
