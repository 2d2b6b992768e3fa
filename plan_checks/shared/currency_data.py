"""Scenario data: which products each country/currency pair should show.

The data file is a nested mapping::

    {"countries": {"THA": {"EUR": {"products": [{"id": "...", "name": "..."}]}}}}

Expected entries are resolved against the products API so the grid is
checked against live prices rather than the names recorded here.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from plan_checks.shared.product_schema import Product

__all__ = [
    'CurrencyData',
    'load_currency_data',
    'resolve_products',
]

logger = logging.getLogger(__name__)


class CurrencyData:
    """Read-only view over the scenario data file."""

    def __init__(self, data: Dict[str, Any]):
        self._countries = data.get('countries') or {}

    @property
    def countries(self) -> List[str]:
        return list(self._countries)

    def currencies(self, country_code: str) -> List[str]:
        return list(self._countries.get(country_code) or {})

    def expected_products(self, country_code: str, currency: str) -> List[Dict[str, str]]:
        """Return the ``{id, name}`` entries for a scenario.

        Raises:
            ValueError: If the country or the currency is not in the data file
        """
        country = self._countries.get(country_code)
        if country is None:
            raise ValueError(f"Unknown country code: {country_code}. Available: {self.countries}")
        scenario = country.get(currency)
        if scenario is None:
            raise ValueError(
                f"No {currency} scenario for {country_code}. Available: {self.currencies(country_code)}"
            )
        return list(scenario.get('products') or [])


def load_currency_data(path: Union[str, Path]) -> CurrencyData:
    """Load the scenario data file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    return CurrencyData(data)


def resolve_products(expected: List[Dict[str, str]], api_products: List[Product]) -> List[Product]:
    """Pair expected scenario entries with API products by id.

    Entries whose id is absent from the API are logged and dropped. A name
    mismatch is logged but the API product is still used, since the
    price grid is what the run checks.

    Args:
        expected: ``{id, name}`` entries from the data file
        api_products: Products returned by the API

    Returns:
        API products in the order of ``expected``
    """
    by_id = {product.id: product for product in api_products}
    resolved = []
    for entry in expected:
        product = by_id.get(entry.get('id'))
        if product is None:
            logger.warning(f"Product {entry.get('id')} ({entry.get('name')}) not returned by the API")
            continue
        if entry.get('name') and product.name != entry['name']:
            logger.warning(
                f"Product {product.id} name mismatch: expected '{entry['name']}', API has '{product.name}'"
            )
        resolved.append(product)
    logger.info(f"Resolved {len(resolved)}/{len(expected)} scenario products")
    return resolved
