"""HTTP helpers for the products API.

Session creation, default headers, and a JSON GET that retries only when
the connection itself fails. Any non-2xx response is raised straight to
the caller.
"""

import logging
import time
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests

from plan_checks.shared.constants import HTTP

__all__ = [
    'DEFAULT_USER_AGENT',
    'ProductsApiError',
    'create_session',
    'get_headers',
    'get_json',
]

logger = logging.getLogger(__name__)


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class ProductsApiError(RuntimeError):
    """Raised when the products API answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, url: str = ''):
        self.status_code = status_code
        self.reason = reason
        self.url = url
        super().__init__(f"Failed to fetch products: {status_code} {reason}")


def _sanitize_url(url: str) -> str:
    """Redact query parameters from URL for safe logging.

    Args:
        url: URL to sanitize

    Returns:
        Sanitized URL with query parameters redacted
    """
    try:
        parsed = urlparse(url)
        safe_url = f"{parsed.scheme}://{parsed.netloc}{parsed.path}"
        if parsed.query:
            safe_url += "?[REDACTED]"
        return safe_url
    except ValueError:
        return "[INVALID_URL]"


def get_headers(user_agent: str = None) -> Dict[str, str]:
    """Get headers dict for JSON API requests.

    Args:
        user_agent: User agent string (default browser UA if not provided)

    Returns:
        Dictionary of HTTP headers
    """
    return {
        "User-Agent": user_agent or DEFAULT_USER_AGENT,
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.5",
        "Connection": "keep-alive",
    }


def create_session(user_agent: str = None) -> requests.Session:
    """Create a requests session preloaded with the default headers."""
    session = requests.Session()
    session.headers.update(get_headers(user_agent))
    return session


def get_json(
    session: requests.Session,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    timeout: int = None,
    max_retries: int = None,
    retry_wait: float = None,
) -> Any:
    """GET a URL and decode its JSON body.

    Connection-level failures (DNS, refused, timeouts) are retried up to
    ``max_retries`` times. An HTTP response that is not 2xx is never
    retried.

    Args:
        session: requests.Session to use
        url: URL to fetch
        params: Optional query parameters
        timeout: Request timeout in seconds
        max_retries: Maximum number of attempts
        retry_wait: Seconds between attempts

    Returns:
        Decoded JSON payload

    Raises:
        ProductsApiError: If the response status is not 2xx
        requests.exceptions.RequestException: If every attempt failed to connect
    """
    timeout = timeout if timeout is not None else HTTP.TIMEOUT
    max_retries = max(1, max_retries if max_retries is not None else HTTP.MAX_RETRIES)
    retry_wait = retry_wait if retry_wait is not None else HTTP.RETRY_WAIT
    safe_url = _sanitize_url(url)

    last_error = None
    for attempt in range(max_retries):
        try:
            response = session.get(url, params=params, timeout=timeout)
        except requests.exceptions.RequestException as e:
            last_error = e
            logger.warning(
                f"Request error for {safe_url}: {e}. "
                f"Attempt {attempt + 1}/{max_retries}"
            )
            if attempt + 1 < max_retries:
                time.sleep(retry_wait)
            continue

        if not response.ok:
            logger.error(f"HTTP {response.status_code} {response.reason} for {safe_url}")
            raise ProductsApiError(response.status_code, response.reason, safe_url)

        logger.debug(f"Successfully fetched {safe_url}")
        return response.json()

    logger.error(f"Failed to fetch {safe_url} after {max_retries} attempts")
    raise last_error
