"""Configuration module for the storefront pages under test"""

from typing import Dict
import importlib

# Mapping of page names to their config modules
CONFIG_MODULES: Dict[str, str] = {
    'home': 'config.home_config',
}


def get_config(page: str):
    """Get configuration module for a page"""
    if page not in CONFIG_MODULES:
        raise ValueError(f"Unknown page: {page}")
    return importlib.import_module(CONFIG_MODULES[page])


__all__ = ['get_config', 'CONFIG_MODULES']
