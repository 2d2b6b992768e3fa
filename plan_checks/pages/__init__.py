"""
Page Object Models for the storefront

This package provides page objects that encapsulate UI interactions,
plus the driver interfaces the grid validators depend on.
"""

from .driver import ElementHandle, PageDriver, PlaywrightElement, PlaywrightPageDriver
from .base_page import BasePage
from .home_page import HomePage

__all__ = [
    "BasePage",
    "ElementHandle",
    "HomePage",
    "PageDriver",
    "PlaywrightElement",
    "PlaywrightPageDriver",
]
