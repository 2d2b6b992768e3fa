"""Expand the "Data" toggles of the plan grid before its cards are read."""

import logging
from typing import List

from plan_checks.pages.driver import ElementHandle, PageDriver
from plan_checks.shared.constants import GRID

from .types import GridSelectors

__all__ = [
    'DataInteractor',
]

logger = logging.getLogger(__name__)


class DataInteractor:
    """Clicks a bounded number of "Data" toggles in the plan grid.

    Args:
        driver: Page the grid lives on
        selectors: Grid and toggle selectors
        max_elements: Upper bound on toggles clicked
        click_timeout_ms: Timeout for each click
        click_delay_ms: Pause after each successful click
        load_state: Load state awaited before clicking
    """

    def __init__(
        self,
        driver: PageDriver,
        selectors: GridSelectors,
        max_elements: int = GRID.MAX_DATA_ELEMENTS,
        click_timeout_ms: int = GRID.CLICK_TIMEOUT_MS,
        click_delay_ms: int = GRID.CLICK_DELAY_MS,
        load_state: str = GRID.LOAD_STATE,
    ):
        self.driver = driver
        self.selectors = selectors
        self.max_elements = max_elements
        self.click_timeout_ms = click_timeout_ms
        self.click_delay_ms = click_delay_ms
        self.load_state = load_state

    async def interact_with_data_elements(self) -> int:
        """Check the grid exists, wait for the page to settle, click the toggles.

        Returns:
            Number of toggles clicked successfully

        Raises:
            RuntimeError: If the grid is not on the page
        """
        logger.info('🔍 Validating and clicking "Data" elements in grid...')

        await self.ensure_grid_exists()
        await self.driver.wait_for_load_state(self.load_state)
        logger.info('✅ Page fully loaded')

        elements = await self._get_data_elements()
        return await self._click_data_elements(elements)

    async def ensure_grid_exists(self) -> None:
        if await self.driver.count(self.selectors.container) == 0:
            raise RuntimeError('Grid element not found on the page')
        logger.info('✅ Grid element found')

    async def _get_data_elements(self) -> List[ElementHandle]:
        element_count = await self.driver.count(self.selectors.data_toggle)
        logger.info(f'Found {element_count} "Data" elements in the grid')

        if element_count == 0:
            logger.warning('⚠️ No "Data" elements found in grid')
            return []

        if element_count > self.max_elements:
            logger.warning(
                f'⚠️ Found {element_count} elements, limiting to first {self.max_elements} to avoid timeout'
            )

        return await self.driver.elements(self.selectors.data_toggle, limit=self.max_elements)

    async def _click_data_elements(self, elements: List[ElementHandle]) -> int:
        clicked = 0
        total = len(elements)
        for index, element in enumerate(elements, start=1):
            logger.debug(f'Clicking "Data" element {index} of {total}')
            try:
                await element.click(self.click_timeout_ms)
            except Exception as e:
                logger.error(f'❌ Failed to click "Data" element {index}: {e}')
                continue
            clicked += 1
            logger.debug(f'✅ Successfully clicked "Data" element {index}')
            await self.driver.wait_for_timeout(self.click_delay_ms)

        if total:
            logger.info(f'🎉 Processed {total} "Data" elements ({clicked} clicked)')
        return clicked
