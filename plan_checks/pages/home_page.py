"""
Home Page Object

Encapsulates the storefront home page: cookie banner, currency menu,
destination search and the plan grid.
"""
import logging

from playwright.async_api import Page

from config import home_config
from plan_checks.home_validator.types import GridSelectors

from .base_page import BasePage

logger = logging.getLogger(__name__)


class HomePage(BasePage):
    """Page object for the storefront home page."""

    ACCEPT_ALL_BUTTON = home_config.ACCEPT_ALL_BUTTON
    CURRENCY_SELECTOR = home_config.CURRENCY_SELECTOR
    DESTINATION_SELECTOR = home_config.DESTINATION_SELECTOR
    PLANS_SECTION_TEXT = home_config.PLANS_SECTION_TEXT

    def __init__(self, page: Page, base_url: str = home_config.BASE_URL):
        super().__init__(page, base_url)

    @property
    def grid_selectors(self) -> GridSelectors:
        return GridSelectors.from_config(home_config)

    async def open(self, url: str = None) -> "HomePage":
        """Open the home page and accept the cookie banner."""
        await self.goto(url)
        await self.wait_for_selector(self.ACCEPT_ALL_BUTTON, state="visible")
        await self.page.click(self.ACCEPT_ALL_BUTTON)
        logger.info(f"Opened home page {self.current_url()}")
        return self

    async def select_currency(self, currency: str) -> None:
        """Switch the storefront currency.

        Raises:
            ValueError: If the currency has no label in the config
        """
        label = home_config.CURRENCY_MAP.get(currency)
        if label is None:
            raise ValueError(f"Unknown currency: {currency}. Available: {list(home_config.CURRENCY_MAP)}")
        await self.get_by_text(self.CURRENCY_SELECTOR).click()
        await self.get_by_text(label).click()
        logger.info(f"Selected currency {currency}")

    async def search_destination(self, destination: str) -> None:
        """Search a destination, pick it from the suggestions and scroll to the plans.

        Raises:
            ValueError: If the destination has no option name in the config
        """
        option_name = home_config.DESTINATION_MAP.get(destination)
        if option_name is None:
            raise ValueError(
                f"Unknown destination: {destination}. Available: {list(home_config.DESTINATION_MAP)}"
            )
        await self.get_by_placeholder(self.DESTINATION_SELECTOR).fill(destination)
        await self.get_by_role("option", name=option_name).click()
        await self.get_by_text(self.PLANS_SECTION_TEXT).scroll_into_view_if_needed()
        logger.info(f"Selected destination {destination} ({option_name})")
