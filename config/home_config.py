"""Selectors and labels for the storefront home page"""

BASE_URL = "https://www.betterroaming.com/"

# Cookie banner
ACCEPT_ALL_BUTTON = "button:has-text('Accept all')"

# Currency menu: the trigger shows the active currency, options are labelled
CURRENCY_SELECTOR = "Currency"
CURRENCY_MAP = {
    'EUR': "EUR - Euro",
    'USD': "USD - US Dollar",
    'GBP': "GBP - British Pound",
    'THB': "THB - Thai Baht",
    'BRL': "BRL - Brazilian Real",
    'CHF': "CHF - Swiss Franc",
}

# Destination search: input placeholder and autocomplete option names
DESTINATION_SELECTOR = "Where are you travelling to?"
DESTINATION_MAP = {
    'BR': "Brazil",
    'TH': "Thailand",
    'US': "United States",
    'PT': "Portugal",
    'FR': "France",
    'GB': "United Kingdom",
}

# Text of the section below the plan grid, scrolled to after a destination is chosen
PLANS_SECTION_TEXT = "Why a BetterRoaming eSIM for"

# Plan grid: the wrapper around the cards, one element per plan card, and the
# "Data" tab inside each card
GRID_CONTAINER_SELECTOR = "[data-testid='plan-grid']"
GRID_SELECTOR = "[data-testid='plan-card']"
GRID_DATA_SELECTOR = "[data-testid='plan-card'] div:text-is('Data')"
