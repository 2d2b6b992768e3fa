"""Shared utilities for the plan checks"""

from .constants import (
    BROWSER,
    GRID,
    HTTP,
    LOGGING,
)

from .logging_config import (
    setup_logging,
)

from .http import (
    ProductsApiError,
    create_session,
    get_headers,
    get_json,
)

from .product_schema import (
    Product,
)

from .products_api import (
    ProductsApi,
    ProductsResponse,
)

from .currency_data import (
    CurrencyData,
    load_currency_data,
    resolve_products,
)

from .settings import (
    Settings,
    load_settings,
    validate_config_on_startup,
)

__all__ = [
    # Constants
    'BROWSER',
    'GRID',
    'HTTP',
    'LOGGING',
    # Logging
    'setup_logging',
    # HTTP
    'ProductsApiError',
    'create_session',
    'get_headers',
    'get_json',
    # Products
    'Product',
    'ProductsApi',
    'ProductsResponse',
    # Scenario data
    'CurrencyData',
    'load_currency_data',
    'resolve_products',
    # Settings
    'Settings',
    'load_settings',
    'validate_config_on_startup',
]
