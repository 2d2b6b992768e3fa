"""Pair a grid card's text with the product it displays."""

from typing import Optional, Sequence

from plan_checks.shared.product_schema import Product

from .formatter import format_data_plan, format_price
from .match_strategies import MatchStrategy, SubstringMatchStrategy

__all__ = [
    'find_matching_product',
    'is_product_matching_grid',
]

_DEFAULT_STRATEGY = SubstringMatchStrategy()


def is_product_matching_grid(product: Product, grid_text: str, strategy: Optional[MatchStrategy] = None) -> bool:
    """True when both the price and the raw data plan of ``product`` occur in ``grid_text``.

    Ineligible products (zero or missing price or data) never match.
    """
    if not product.is_eligible:
        return False

    strategy = strategy or _DEFAULT_STRATEGY
    expected_price = format_price(product.price)
    expected_data_plan = format_data_plan(product.data, product.data_unit)

    return strategy.matches(expected_price, grid_text) and strategy.matches(expected_data_plan, grid_text)


def find_matching_product(
    grid_text: Optional[str],
    products: Sequence[Product],
    strategy: Optional[MatchStrategy] = None,
) -> Optional[Product]:
    """Return the first product, in list order, whose price and data plan occur in ``grid_text``.

    Products sharing a price and data plan are ambiguous; the earlier one
    in ``products`` wins.

    Args:
        grid_text: Full text content of a grid card (None/empty never matches)
        products: Candidate products
        strategy: Match policy (default: literal substring)

    Returns:
        The matching product, or None
    """
    if not grid_text:
        return None

    for product in products:
        if is_product_matching_grid(product, grid_text, strategy):
            return product
    return None
