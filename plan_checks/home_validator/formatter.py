"""Turn product numbers into the strings the plan grid displays."""

from typing import Union

from plan_checks.shared.constants import GRID
from plan_checks.shared.product_schema import Product

from .types import ExpectedProductValues

__all__ = [
    'UNIT_MAPPING',
    'format_data_plan',
    'format_duration',
    'format_number',
    'format_price',
    'format_product_values',
]

Number = Union[int, float]

# Plural duration unit -> singular form shown for a quantity of one
UNIT_MAPPING = {
    'DAYS': 'DAY',
    'HOURS': 'HOUR',
    'MINUTES': 'MINUTE',
}


def format_number(value) -> str:
    """Render a number the way the storefront prints API values.

    Integral floats drop their fractional part (10.0 -> "10"); other
    floats use the shortest round-trip form (9.99 -> "9.99"). Anything
    that is not a number is passed through ``str``.
    """
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_price(amount: Number) -> str:
    return format_number(amount)


def format_data_plan(amount: Number, unit: str) -> str:
    """Data allowance such as 5 GB. No rounding, no unit validation."""
    return f"{format_number(amount)} {unit}"


def format_duration(amount: Number, unit: str) -> str:
    """Duration such as 7 DAYS or 1 DAY.

    Recognized plural units become singular when ``amount`` is 1; other
    units are used verbatim.
    """
    formatted_unit = UNIT_MAPPING.get(unit, unit) if amount == 1 else unit
    return f"{format_number(amount)} {formatted_unit}"


def format_product_values(product: Product) -> ExpectedProductValues:
    """Expected display strings for ``product``.

    Every plan currently sold is a data-only plan, so the plan type is constant.
    """
    return ExpectedProductValues(
        price=format_price(product.price),
        data_plan=format_data_plan(product.data, product.data_unit),
        duration=format_duration(product.duration, product.duration_unit),
        plan_type=GRID.PLAN_TYPE,
    )
