"""End-to-end plan grid checks for the roaming eSIM storefront"""

__version__ = "0.1.0"
