#!/usr/bin/env python3
"""
CLI for the storefront plan checks

Usage:
    python run.py --country THA --currency EUR --destination BR   # Validate one scenario
    python run.py --list-products --country THA --currency EUR    # Show resolved API products
    python run.py --validate-config                               # Check config/suite.yaml and env
    python run.py --headed --screenshot failure.png               # Watch the run, keep a screenshot on failure
"""

import argparse
import asyncio
import dataclasses
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from playwright.async_api import async_playwright

from plan_checks.home_validator import ValidationResult
from plan_checks.home_validator.match_strategies import MATCH_STRATEGIES
from plan_checks.plan_runner import fetch_scenario_products, run_plan_check
from plan_checks.shared.constants import BROWSER
from plan_checks.shared.http import ProductsApiError
from plan_checks.shared.logging_config import setup_logging
from plan_checks.shared.product_schema import Product
from plan_checks.shared.settings import Settings, load_settings, validate_config_on_startup


def setup_parser() -> argparse.ArgumentParser:
    """Setup command line argument parser"""
    parser = argparse.ArgumentParser(
        description="Storefront plan grid checks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    scenario_group = parser.add_argument_group('scenario', 'Overrides for COUNTRY_CODE, CURRENCY, DESTINATION')
    scenario_group.add_argument('--country', '-c', type=str, help='Country code in data/currency.data.json')
    scenario_group.add_argument('--currency', '-u', type=str, help='Currency code (e.g. EUR)')
    scenario_group.add_argument('--destination', '-d', type=str, help='Destination searched on the home page')

    target_group = parser.add_argument_group('targets', 'Overrides for PAGE_URL and API_URL')
    target_group.add_argument('--page-url', type=str, help='Home page URL')
    target_group.add_argument('--api-url', type=str, help='Products API base URL')

    parser.add_argument(
        '--strategy',
        type=str,
        choices=list(MATCH_STRATEGIES),
        help='Policy pairing grid cards with products'
    )
    parser.add_argument(
        '--headed',
        action='store_true',
        help='Show the browser window'
    )
    parser.add_argument(
        '--screenshot',
        type=str,
        help='Save a full-page screenshot here when validation fails'
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        '--list-products',
        action='store_true',
        help='Print the scenario products resolved from the API and exit'
    )
    mode_group.add_argument(
        '--validate-config',
        action='store_true',
        help='Check config/suite.yaml and required settings and exit'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default='logs/plan_checks.log',
        help='Log file path'
    )

    return parser


def apply_cli_overrides(settings: Settings, args) -> Settings:
    """Layer command line values over the loaded settings."""
    overrides = {
        'country_code': args.country.upper() if args.country else None,
        'currency': args.currency.upper() if args.currency else None,
        'destination': args.destination,
        'page_url': args.page_url,
        'api_url': args.api_url,
        'match_strategy': args.strategy,
    }
    overrides = {k: v for k, v in overrides.items() if v}
    if args.headed:
        overrides['headless'] = False
    return dataclasses.replace(settings, **overrides)


def print_products(products: List[Product]) -> None:
    if not products:
        print("No scenario products resolved")
        return
    for product in products:
        print(
            f"  {product.id}: {product.name} | {product.price} {product.price_currency} | "
            f"{product.data} {product.data_unit} | {product.duration} {product.duration_unit}"
        )


def print_result(settings: Settings, result: ValidationResult) -> None:
    print("\n" + "=" * 40)
    print(f"PLAN CHECK {settings.country_code}/{settings.currency}/{settings.destination}")
    print("=" * 40)
    print(f"  Result: {'PASSED' if result.all_passed else 'FAILED'} ({result.passed_count}/{result.total} plans)")
    for error in result.errors:
        print(f"    {error}")


async def run_scenario_async(settings: Settings, products: List[Product],
                             screenshot: Optional[str] = None) -> ValidationResult:
    """Launch a browser, run the scenario, close everything."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=settings.headless)
        context = await browser.new_context(
            viewport={"width": BROWSER.VIEWPORT_WIDTH, "height": BROWSER.VIEWPORT_HEIGHT}
        )
        context.set_default_timeout(BROWSER.DEFAULT_TIMEOUT_MS)
        context.set_default_navigation_timeout(BROWSER.NAVIGATION_TIMEOUT_MS)
        page = await context.new_page()
        try:
            result = await run_plan_check(page, settings, products)
            if not result.all_passed and screenshot:
                await page.screenshot(path=screenshot, full_page=True)
                logging.info(f"Screenshot saved: {screenshot}")
            return result
        finally:
            await context.close()
            await browser.close()


def main():
    """Main entry point"""
    parser = setup_parser()
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_file, level=log_level)

    config_errors = validate_config_on_startup()
    if config_errors:
        print("Configuration errors found:")
        for error in config_errors:
            print(f"  - {error}")
        return 1

    settings = apply_cli_overrides(load_settings(), args)

    if args.validate_config:
        missing = settings.missing_scenario_values()
        if not settings.api_url:
            missing.append('API_URL')
        if missing:
            print(f"Missing settings: {', '.join(missing)}")
            return 1
        print("Configuration OK")
        return 0

    try:
        products = fetch_scenario_products(settings)
        if args.list_products:
            print_products(products)
            return 0

        settings.require_scenario()
        result = asyncio.run(run_scenario_async(settings, products, args.screenshot))
        print_result(settings, result)
        return 0 if result.all_passed else 1

    except KeyboardInterrupt:
        logging.info("Plan check interrupted by user")
        return 130
    except (ValueError, ProductsApiError) as e:
        logging.error(str(e))
        return 1
    except Exception as e:
        logging.error(f"Plan check failed: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
