"""Scenario orchestration shared by the CLI and the e2e tests.

A scenario is one (country, currency, destination) combination. Running
it means resolving the scenario's products against the API, walking the
home page flow, and reconciling the plan grid.
"""

import logging
from typing import List, Optional

from playwright.async_api import Page

from plan_checks.home_validator import GridValidator, ValidationResult, get_match_strategy
from plan_checks.home_validator.data_interactor import DataInteractor
from plan_checks.pages import HomePage
from plan_checks.shared.currency_data import load_currency_data, resolve_products
from plan_checks.shared.product_schema import Product
from plan_checks.shared.products_api import ProductsApi
from plan_checks.shared.settings import Settings

__all__ = [
    'fetch_scenario_products',
    'run_plan_check',
]

logger = logging.getLogger(__name__)


def fetch_scenario_products(settings: Settings, api: Optional[ProductsApi] = None) -> List[Product]:
    """Products the scenario expects on the grid, with live API prices.

    Raises:
        ValueError: If settings are incomplete or the scenario is unknown
        ProductsApiError: If the API answers with a non-2xx status
    """
    settings.require_api()
    missing = [name for name in settings.missing_scenario_values() if name != 'PAGE_URL']
    if missing:
        raise ValueError(f"{', '.join(missing)} must be set")
    expected = load_currency_data(settings.data_file).expected_products(settings.country_code, settings.currency)

    owns_api = api is None
    api = api or ProductsApi(settings.api_url, timeout=settings.request_timeout)
    try:
        response = api.get_products(settings.currency)
    finally:
        if owns_api:
            api.close()

    return resolve_products(expected, response.products)


async def run_plan_check(page: Page, settings: Settings, products: List[Product]) -> ValidationResult:
    """Drive the home page to the scenario's plan grid and validate it.

    Raises:
        ValueError: If scenario settings are missing
        RuntimeError: If the plan grid never renders
    """
    settings.require_scenario()

    home = HomePage(page, settings.page_url)
    await home.open()
    await home.select_currency(settings.currency)
    await home.search_destination(settings.destination)
    await home.wait(settings.settle_ms)

    driver = home.driver
    selectors = home.grid_selectors
    validator = GridValidator(
        driver,
        selectors,
        interactor=DataInteractor(
            driver,
            selectors,
            max_elements=settings.max_data_elements,
            click_timeout_ms=settings.click_timeout_ms,
        ),
        strategy=get_match_strategy(settings.match_strategy),
        field_timeout_ms=settings.field_timeout_ms,
    )
    result = await validator.validate_grid_items(products)
    logger.info(
        f"{settings.country_code}/{settings.currency}/{settings.destination}: "
        f"{'passed' if result.all_passed else 'failed'} ({result.passed_count}/{result.total} plans)"
    )
    return result
