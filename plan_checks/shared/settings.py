"""Run settings for the plan checks.

Defaults come from config/suite.yaml; environment variables (optionally
loaded from a .env file by the entry points) override them:

    API_URL         products API base URL
    PAGE_URL        home page URL (BASE_URL is accepted as a fallback)
    COUNTRY_CODE    scenario country in data/currency.data.json (e.g. THA)
    CURRENCY        currency code (e.g. EUR)
    DESTINATION     destination searched on the home page (e.g. BR)
    MATCH_STRATEGY  substring | exact | numeric
    HEADLESS        true | false
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from plan_checks.shared.constants import BROWSER, GRID, HTTP

__all__ = [
    'DEFAULT_CONFIG_PATH',
    'PROJECT_ROOT',
    'Settings',
    'load_settings',
    'validate_config_on_startup',
]

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "suite.yaml"

VALID_MATCH_STRATEGIES = ('substring', 'exact', 'numeric')
_TRUE_VALUES = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one run."""
    api_url: str = ''
    page_url: str = ''
    country_code: str = ''
    currency: str = ''
    destination: str = 'BR'
    data_file: str = str(PROJECT_ROOT / "data" / "currency.data.json")

    request_timeout: int = HTTP.TIMEOUT
    match_strategy: str = GRID.MATCH_STRATEGY
    field_timeout_ms: int = GRID.FIELD_TIMEOUT_MS
    click_timeout_ms: int = GRID.CLICK_TIMEOUT_MS
    max_data_elements: int = GRID.MAX_DATA_ELEMENTS

    headless: bool = BROWSER.HEADLESS
    settle_ms: int = BROWSER.SETTLE_MS

    def missing_scenario_values(self) -> List[str]:
        """Names of the scenario values a browser run cannot start without."""
        missing = []
        if not self.country_code:
            missing.append('COUNTRY_CODE')
        if not self.currency:
            missing.append('CURRENCY')
        if not self.page_url:
            missing.append('PAGE_URL')
        return missing

    def require_scenario(self) -> 'Settings':
        """Return self, or raise if scenario values are missing.

        Each of the three values is required on its own; a run is refused
        as soon as any one of them is unset, not only when all are.

        Raises:
            ValueError: If COUNTRY_CODE, CURRENCY or PAGE_URL is unset
        """
        missing = self.missing_scenario_values()
        if missing:
            raise ValueError(f"{', '.join(missing)} must be set")
        return self

    def require_api(self) -> 'Settings':
        """Raises ValueError when API_URL is unset."""
        if not self.api_url:
            raise ValueError("API_URL must be set")
        return self


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _from_yaml(config: Dict[str, Any]) -> Dict[str, Any]:
    api = config.get('api') or {}
    site = config.get('site') or {}
    grid = config.get('grid') or {}
    browser = config.get('browser') or {}
    scenario = config.get('scenario') or {}

    values = {
        'api_url': api.get('base_url'),
        'request_timeout': api.get('timeout'),
        'page_url': site.get('page_url'),
        'match_strategy': grid.get('match_strategy'),
        'field_timeout_ms': grid.get('field_timeout_ms'),
        'click_timeout_ms': grid.get('click_timeout_ms'),
        'max_data_elements': grid.get('max_data_elements'),
        'headless': browser.get('headless'),
        'settle_ms': browser.get('settle_ms'),
        'country_code': scenario.get('country_code'),
        'currency': scenario.get('currency'),
        'destination': scenario.get('destination'),
    }
    data_file = scenario.get('data_file')
    if data_file:
        path = Path(data_file)
        values['data_file'] = str(path if path.is_absolute() else PROJECT_ROOT / path)
    return {k: v for k, v in values.items() if v is not None and v != ''}


def _from_env(env: Mapping[str, str]) -> Dict[str, Any]:
    values = {
        'api_url': env.get('API_URL'),
        'page_url': env.get('PAGE_URL') or env.get('BASE_URL'),
        'country_code': env.get('COUNTRY_CODE'),
        'currency': env.get('CURRENCY'),
        'destination': env.get('DESTINATION'),
        'match_strategy': env.get('MATCH_STRATEGY'),
    }
    values = {k: v.strip() for k, v in values.items() if v and v.strip()}
    if env.get('HEADLESS'):
        values['headless'] = env['HEADLESS'].strip().lower() in _TRUE_VALUES
    return values


def load_settings(config_path: Optional[Path] = None, env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from config/suite.yaml and the environment.

    A missing config file is not an error; the built-in defaults apply.

    Args:
        config_path: YAML file with defaults (default: config/suite.yaml)
        env: Environment mapping (default: os.environ)

    Returns:
        Settings instance
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    env = os.environ if env is None else env

    settings = Settings()
    try:
        settings = replace(settings, **_from_yaml(_read_yaml(config_path)))
    except FileNotFoundError:
        logger.debug(f"Config file not found, using defaults: {config_path}")

    settings = replace(settings, **_from_env(env))
    if settings.currency:
        settings = replace(settings, currency=settings.currency.upper())
    if settings.country_code:
        settings = replace(settings, country_code=settings.country_code.upper())
    return settings


def validate_config_on_startup(config_path: Optional[Path] = None) -> List[str]:
    """Validate the suite configuration file.

    Args:
        config_path: Path to suite.yaml (default: config/suite.yaml)

    Returns:
        List of validation errors (empty if config is valid)
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    errors = []

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        return [f"Configuration file not found: {config_path}"]
    except yaml.YAMLError as e:
        return [f"Invalid YAML syntax in config file: {e}"]

    if not config:
        return ["Configuration file is empty"]

    if not isinstance(config, dict):
        return ["Configuration must be a dictionary"]

    for section in ('api', 'site', 'grid', 'browser', 'scenario'):
        if section in config and not isinstance(config[section], dict):
            errors.append(f"'{section}' section must be a dictionary")
    if errors:
        return errors

    for section, key in (('api', 'base_url'), ('site', 'page_url')):
        url = (config.get(section) or {}).get(key)
        if url and (not isinstance(url, str) or not url.startswith(('http://', 'https://'))):
            errors.append(f"'{section}.{key}' must be a valid HTTP/HTTPS URL")

    timeouts = [('api', 'timeout')] + [
        ('grid', key) for key in ('field_timeout_ms', 'click_timeout_ms', 'max_data_elements')
    ] + [('browser', 'settle_ms')]
    for section, key in timeouts:
        section_config = config.get(section) or {}
        if key in section_config:
            value = section_config[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                errors.append(f"'{section}.{key}' must be a non-negative number")

    strategy = (config.get('grid') or {}).get('match_strategy')
    if strategy is not None and strategy not in VALID_MATCH_STRATEGIES:
        errors.append(
            f"Invalid match strategy '{strategy}'. Must be one of: {', '.join(VALID_MATCH_STRATEGIES)}"
        )

    headless = (config.get('browser') or {}).get('headless')
    if headless is not None and not isinstance(headless, bool):
        errors.append("'browser.headless' must be true or false")

    return errors
