"""Products API client.

Fetches the product catalogue for a currency from
``<api_url>/v1/products/default/?currency=<code>``. The response has the
shape ``{"products": [...], "availableCountries": [...]}``.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from plan_checks.shared.constants import HTTP
from plan_checks.shared.http import create_session, get_json
from plan_checks.shared.product_schema import Product

__all__ = [
    'ProductsApi',
    'ProductsResponse',
]

logger = logging.getLogger(__name__)


class ProductsResponse:
    """Decoded products listing.

    Attributes:
        products: Product records in API order
        available_countries: Country codes the catalogue covers
    """

    def __init__(self, products: List[Product], available_countries: List[str]):
        self.products = products
        self.available_countries = available_countries

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> 'ProductsResponse':
        products = []
        for entry in payload.get('products') or []:
            try:
                products.append(Product.from_api(entry))
            except ValueError as e:
                logger.warning(f"Skipping malformed product: {e}")
        return cls(products, list(payload.get('availableCountries') or []))

    def __repr__(self) -> str:
        return f"ProductsResponse(products={len(self.products)}, available_countries={len(self.available_countries)})"


class ProductsApi:
    """Client for the products endpoint.

    Args:
        base_url: API base URL, without the endpoint path
        session: Optional requests.Session (one with default headers is created otherwise)
        timeout: Request timeout in seconds
    """

    def __init__(self, base_url: str, session: Optional[requests.Session] = None, timeout: int = HTTP.TIMEOUT):
        if not base_url:
            raise ValueError("API base URL is required")
        self.base_url = base_url.rstrip('/')
        self.session = session or create_session()
        self.timeout = timeout

    @property
    def products_url(self) -> str:
        return f"{self.base_url}{HTTP.PRODUCTS_ENDPOINT}"

    def get_products(self, currency: str) -> ProductsResponse:
        """Fetch every product priced in ``currency``.

        Raises:
            ProductsApiError: If the API answers with a non-2xx status
        """
        payload = get_json(
            self.session,
            self.products_url,
            params={'currency': currency},
            timeout=self.timeout,
        )
        response = ProductsResponse.from_payload(payload or {})
        logger.info(f"Fetched {len(response.products)} products for currency {currency}")
        return response

    def get_product_by_id(self, currency: str, product_id: str) -> Optional[Product]:
        """Return the product with ``product_id`` priced in ``currency``, or None."""
        for product in self.get_products(currency).products:
            if product.id == product_id:
                return product
        return None

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> 'ProductsApi':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
