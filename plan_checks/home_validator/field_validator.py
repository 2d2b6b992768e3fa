"""Check that each expected field is visible inside one grid card."""

import asyncio
import logging

from plan_checks.pages.driver import ElementHandle
from plan_checks.shared.constants import GRID

from .types import ExpectedProductValues, FieldValidationResult

__all__ = [
    'validate_all_product_fields',
    'validate_field',
]

logger = logging.getLogger(__name__)


def _not_found_message(field_name: str, expected_value: str, grid_index: int) -> str:
    return f'❌ {field_name} "{expected_value}" not found in grid {grid_index}'


async def validate_field(
    grid_item: ElementHandle,
    expected_value: str,
    field_name: str,
    grid_index: int,
    timeout_ms: int = GRID.FIELD_TIMEOUT_MS,
) -> FieldValidationResult:
    """Check one field. Never raises; driver errors count as a failed field."""
    try:
        visible = await grid_item.is_text_visible(expected_value, timeout_ms)
    except Exception as e:
        logger.warning(f"{field_name} check raised in grid {grid_index}: {e}")
        visible = False

    if visible:
        logger.info(f'   ✅ {field_name} "{expected_value}" validation passed')
        return FieldValidationResult([True])

    message = _not_found_message(field_name, expected_value, grid_index)
    logger.error(f"   {message}")
    return FieldValidationResult([False], [message])


async def validate_all_product_fields(
    grid_item: ElementHandle,
    expected_values: ExpectedProductValues,
    grid_index: int,
    timeout_ms: int = GRID.FIELD_TIMEOUT_MS,
) -> FieldValidationResult:
    """Check price, data plan, duration and plan type together.

    The checks are independent and run concurrently; one failure does not
    stop the others.

    Args:
        grid_item: Card to look inside
        expected_values: Strings the card must show
        grid_index: 1-based card position, used in error messages
        timeout_ms: Bounded wait per field

    Returns:
        FieldValidationResult with one bool per field in fixed order and
        an error for each failure
    """
    outcomes = await asyncio.gather(*(
        validate_field(grid_item, value, name, grid_index, timeout_ms)
        for name, value in expected_values.fields()
    ))

    results = []
    errors = []
    for outcome in outcomes:
        results.extend(outcome.results)
        errors.extend(outcome.errors)
    return FieldValidationResult(results, errors)
