"""
Playwright E2E Fixtures

Browser, context and page fixtures for the live storefront checks. The
whole directory is skipped unless API_URL and PAGE_URL are configured
(environment or .env).
"""
from datetime import datetime
from pathlib import Path

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from playwright.async_api import async_playwright

from plan_checks.plan_runner import fetch_scenario_products
from plan_checks.shared.constants import BROWSER
from plan_checks.shared.settings import load_settings

load_dotenv()

ARTIFACTS_DIR = Path(__file__).parent / "artifacts"


def pytest_collection_modifyitems(config, items):
    """Mark everything here as e2e and skip it when the targets are not configured."""
    settings = load_settings()
    missing = settings.missing_scenario_values()
    if not settings.api_url:
        missing.append('API_URL')
    skip = pytest.mark.skip(reason=f"{', '.join(missing)} not set") if missing else None

    for item in items:
        if "tests/e2e" not in item.nodeid.replace("\\", "/"):
            continue
        item.add_marker(pytest.mark.e2e)
        if skip:
            item.add_marker(skip)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store test results for use in fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


@pytest.fixture(scope="session")
def settings():
    return load_settings()


@pytest.fixture(scope="session")
def scenario_products(settings):
    """Scenario products resolved against the live API, fetched once per session."""
    return fetch_scenario_products(settings)


@pytest_asyncio.fixture
async def page(request, settings):
    """Fresh browser, context and page for each test; screenshot on failure."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=settings.headless)
        context = await browser.new_context(
            viewport={"width": BROWSER.VIEWPORT_WIDTH, "height": BROWSER.VIEWPORT_HEIGHT}
        )
        context.set_default_timeout(BROWSER.DEFAULT_TIMEOUT_MS)
        context.set_default_navigation_timeout(BROWSER.NAVIGATION_TIMEOUT_MS)
        page = await context.new_page()

        yield page

        rep_call = getattr(request.node, "rep_call", None)
        if rep_call is not None and rep_call.failed:
            ARTIFACTS_DIR.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            path = ARTIFACTS_DIR / f"failure_{request.node.name}_{timestamp}.png"
            await page.screenshot(path=str(path), full_page=True)
            print(f"\n[E2E] Screenshot saved: {path}")

        await context.close()
        await browser.close()
