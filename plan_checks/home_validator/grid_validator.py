"""Reconcile the rendered plan grid with products from the API.

Each grid card is paired with the first product whose price and data
plan appear in its text, then checked for every expected field. Data
mismatches end up in the returned ValidationResult; only a missing grid
raises.

Usage:
    validator = GridValidator(PlaywrightPageDriver(page), GridSelectors.from_config(home_config))
    result = await validator.validate_grid_items(products)
    assert result.all_passed, result.errors
"""

import logging
from typing import List, Optional, Sequence

from plan_checks.pages.driver import ElementHandle, PageDriver
from plan_checks.shared.constants import GRID
from plan_checks.shared.product_schema import Product

from .data_interactor import DataInteractor
from .field_validator import validate_all_product_fields
from .formatter import format_product_values
from .match_strategies import MatchStrategy
from .product_matcher import find_matching_product
from .types import GridItemResult, GridSelectors, ValidationResult

__all__ = [
    'GridValidator',
    'NO_GRID_ITEMS_ERROR',
]

logger = logging.getLogger(__name__)

NO_GRID_ITEMS_ERROR = '❌ No grid items found on the page'


def _no_match_message(grid_index: int) -> str:
    return f'❌ No matching product found for grid item {grid_index}'


class GridValidator:
    """Validates every plan card in the grid against a product list.

    Args:
        driver: Page the grid lives on
        selectors: Grid and "Data" toggle selectors
        interactor: Pre-step expanding the cards (default: DataInteractor on the same page)
        strategy: Policy pairing card text with products (default: substring)
        field_timeout_ms: Bounded wait for each expected field
    """

    def __init__(
        self,
        driver: PageDriver,
        selectors: GridSelectors,
        interactor: Optional[DataInteractor] = None,
        strategy: Optional[MatchStrategy] = None,
        field_timeout_ms: int = GRID.FIELD_TIMEOUT_MS,
    ):
        self.driver = driver
        self.selectors = selectors
        self.interactor = interactor or DataInteractor(driver, selectors)
        self.strategy = strategy
        self.field_timeout_ms = field_timeout_ms

    async def validate_grid_items(self, products: Sequence[Product]) -> ValidationResult:
        """Run preparation, matching and per-card validation.

        Raises:
            RuntimeError: If the grid container is not on the page
        """
        logger.info('🔍 Validating grid items against product data...')

        await self.interactor.interact_with_data_elements()
        grid_items = await self.driver.elements(self.selectors.grid)
        logger.info(f'Found {len(grid_items)} grid items to validate')

        if not grid_items:
            logger.error(NO_GRID_ITEMS_ERROR)
            return ValidationResult(False, [NO_GRID_ITEMS_ERROR])

        errors: List[str] = []
        items: List[GridItemResult] = []
        for index, grid_item in enumerate(grid_items, start=1):
            item, item_errors = await self._validate_grid_item(grid_item, index, products)
            items.append(item)
            errors.extend(item_errors)

        result = ValidationResult(all(item.passed for item in items), errors, items)
        self._log_summary(result)
        return result

    async def _validate_grid_item(self, grid_item: ElementHandle, grid_index: int, products: Sequence[Product]):
        grid_text = await grid_item.text_content()
        product = find_matching_product(grid_text, products, self.strategy)

        if product is None:
            message = _no_match_message(grid_index)
            logger.error(message)
            return GridItemResult(grid_index, None), [message]

        expected = format_product_values(product)
        logger.info(f'📋 Grid {grid_index}: {product.name}')
        logger.info(
            f'   Expected: {expected.price} {product.price_currency} | {expected.data_plan} | {expected.duration}'
        )

        fields = await validate_all_product_fields(grid_item, expected, grid_index, self.field_timeout_ms)
        if fields.passed:
            logger.info(f'   🎉 Grid {grid_index} validation passed')
        else:
            logger.error(f'   ❌ Grid {grid_index} validation failed')

        return GridItemResult(grid_index, product, fields.results), fields.errors

    def _log_summary(self, result: ValidationResult) -> None:
        if result.all_passed:
            logger.info('🎉 All grid validations passed successfully!')
            return
        logger.error(f'❌ Grid validation failed: {result.passed_count}/{result.total} passed')
        for error in result.errors:
            logger.error(error)
