"""Browser capability interfaces and their Playwright implementation.

The grid validators only talk to ``PageDriver`` and ``ElementHandle``.
``PlaywrightPageDriver`` adapts a ``playwright.async_api.Page``; tests use
in-memory implementations of the same interfaces.

Timeouts are in milliseconds throughout.
"""

import re
from abc import ABC, abstractmethod
from typing import List, Optional

from playwright.async_api import Locator, Page, expect

__all__ = [
    'ElementHandle',
    'PageDriver',
    'PlaywrightElement',
    'PlaywrightPageDriver',
]


class ElementHandle(ABC):
    """One rendered element (a grid card, a toggle)."""

    @abstractmethod
    async def text_content(self) -> Optional[str]:
        """Full text content of the element, or None if it has none."""

    @abstractmethod
    async def is_text_visible(self, text: str, timeout_ms: int) -> bool:
        """Wait up to ``timeout_ms`` for ``text`` to be visible inside the element.

        Matching is partial and case-sensitive. Returns False on timeout.
        """

    @abstractmethod
    async def click(self, timeout_ms: int) -> None:
        """Click the element, raising if it cannot be clicked in time."""


class PageDriver(ABC):
    """Page-level operations the validators need."""

    @abstractmethod
    async def count(self, selector: str) -> int:
        """Number of elements matching ``selector``."""

    @abstractmethod
    async def elements(self, selector: str, limit: Optional[int] = None) -> List[ElementHandle]:
        """Elements matching ``selector`` in document order, at most ``limit``."""

    @abstractmethod
    async def wait_for_load_state(self, state: str) -> None:
        """Wait for a page load state such as 'networkidle'."""

    @abstractmethod
    async def wait_for_timeout(self, timeout_ms: int) -> None:
        """Pause for ``timeout_ms``."""


class PlaywrightElement(ElementHandle):

    def __init__(self, locator: Locator):
        self.locator = locator

    async def text_content(self) -> Optional[str]:
        return await self.locator.text_content()

    async def is_text_visible(self, text: str, timeout_ms: int) -> bool:
        # A pattern keeps the match partial but case-sensitive
        target = self.locator.get_by_text(re.compile(re.escape(text))).first
        try:
            await expect(target).to_be_visible(timeout=timeout_ms)
        except AssertionError:
            return False
        return True

    async def click(self, timeout_ms: int) -> None:
        await self.locator.click(timeout=timeout_ms)


class PlaywrightPageDriver(PageDriver):

    def __init__(self, page: Page):
        self.page = page

    async def count(self, selector: str) -> int:
        return await self.page.locator(selector).count()

    async def elements(self, selector: str, limit: Optional[int] = None) -> List[ElementHandle]:
        locator = self.page.locator(selector)
        total = await locator.count()
        if limit is not None:
            total = min(total, limit)
        return [PlaywrightElement(locator.nth(index)) for index in range(total)]

    async def wait_for_load_state(self, state: str) -> None:
        await self.page.wait_for_load_state(state)

    async def wait_for_timeout(self, timeout_ms: int) -> None:
        await self.page.wait_for_timeout(timeout_ms)
