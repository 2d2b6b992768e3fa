"""
Base Page Object

Provides common functionality for all page objects.
"""
from typing import Optional

from playwright.async_api import Locator, Page

from .driver import PlaywrightPageDriver


class BasePage:
    """Base class for all page objects."""

    def __init__(self, page: Page, base_url: str = ""):
        self.page = page
        self.base_url = base_url

    @property
    def driver(self) -> PlaywrightPageDriver:
        """Capability adapter over this page, for the grid validators."""
        return PlaywrightPageDriver(self.page)

    # =========================================================================
    # Navigation
    # =========================================================================

    async def goto(self, url: Optional[str] = None) -> None:
        """Navigate to ``url``, or to the base URL when omitted."""
        await self.page.goto(url or self.base_url)

    def current_url(self) -> str:
        return self.page.url

    # =========================================================================
    # Locators
    # =========================================================================

    def get_by_text(self, text: str, exact: bool = False) -> Locator:
        return self.page.get_by_text(text, exact=exact)

    def get_by_placeholder(self, text: str) -> Locator:
        return self.page.get_by_placeholder(text)

    def get_by_role(self, role: str, **kwargs) -> Locator:
        return self.page.get_by_role(role, **kwargs)

    # =========================================================================
    # Waiting
    # =========================================================================

    async def wait_for_selector(self, selector: str, state: str = "visible", timeout: int = None):
        """Wait for element to reach state."""
        return await self.page.wait_for_selector(selector, state=state, timeout=timeout)

    async def wait(self, milliseconds: int) -> None:
        """Wait for specified time (use sparingly)."""
        await self.page.wait_for_timeout(milliseconds)
