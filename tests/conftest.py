"""Pytest configuration and fixtures for plan check tests"""

import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from unittest.mock import Mock

from plan_checks.home_validator.types import GridSelectors
from tests.fakes import CONTAINER, DATA_TOGGLE, GRID, FakeElement, FakePageDriver, make_product


@pytest.fixture
def selectors():
    return GridSelectors(grid=GRID, data_toggle=DATA_TOGGLE, container=CONTAINER)


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def fake_driver_factory():
    """Build a FakePageDriver from grid cards and optional "Data" toggles.

    The grid container is present unless ``container=False``.

    Usage:
        driver = fake_driver_factory([FakeElement("9.99 EUR 5 GB")])
        driver = fake_driver_factory(cards, toggles=[FakeElement() for _ in range(3)])
        driver = fake_driver_factory([], container=False)
    """
    def _create(cards: List, toggles: Optional[List] = None, container: bool = True) -> FakePageDriver:
        return FakePageDriver({
            CONTAINER: [FakeElement()] if container else [],
            GRID: list(cards),
            DATA_TOGGLE: list(toggles or []),
        })

    return _create


@pytest.fixture
def api_payload():
    """Products API payload with three products."""
    return {
        'products': [
            {
                'id': 'tha-1gb-7d', 'name': 'Thailand 1 GB', 'type': 'DATA',
                'footprint_code': 'THA', 'duration': 7, 'duration_unit': 'DAYS',
                'price': 4.5, 'price_currency': 'EUR', 'data': 1, 'data_raw': 1073741824,
                'data_unit': 'GB', 'footprint': ['TH'], 'source_price': 4.9,
                'source_currency': 'USD', 'fx_rate': 0.92,
            },
            {
                'id': 'tha-5gb-30d', 'name': 'Thailand 5 GB', 'type': 'DATA',
                'duration': 30, 'duration_unit': 'DAYS',
                'price': 12.0, 'price_currency': 'EUR', 'data': 5, 'data_unit': 'GB',
            },
            {
                'id': 'tha-10gb-30d', 'name': 'Thailand 10 GB',
                'duration': 30, 'duration_unit': 'DAYS',
                'price': 19.99, 'price_currency': 'EUR', 'data': 10, 'data_unit': 'GB',
                'promo': 'spring',
            },
        ],
        'availableCountries': ['TH'],
    }


@pytest.fixture
def mock_response_factory():
    """Factory for creating mock HTTP responses.

    Usage:
        response = mock_response_factory(status_code=200, json_data={"products": []})
        response = mock_response_factory(status_code=503, reason="Service Unavailable")
    """
    def _create_response(status_code: int = 200, json_data: Optional[dict] = None, reason: str = "OK"):
        response = Mock()
        response.status_code = status_code
        response.reason = reason
        response.ok = 200 <= status_code < 300
        response.json.return_value = json_data if json_data is not None else {}
        return response

    return _create_response
