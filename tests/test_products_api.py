"""Tests for the products API client and its HTTP helper."""

import logging
from unittest.mock import Mock, patch

import pytest
import requests

from plan_checks.shared.http import ProductsApiError, get_headers, get_json
from plan_checks.shared.products_api import ProductsApi, ProductsResponse


class TestGetJson:
    """Tests for get_json retry behaviour."""

    def test_returns_decoded_payload(self, mock_response_factory):
        session = Mock(spec=requests.Session)
        session.get.return_value = mock_response_factory(json_data={"products": []})

        assert get_json(session, "https://api.example.com/v1/products/default/") == {"products": []}
        assert session.get.call_count == 1

    def test_non_2xx_raises_without_retry(self, mock_response_factory):
        session = Mock(spec=requests.Session)
        session.get.return_value = mock_response_factory(status_code=503, reason="Service Unavailable")

        with patch('plan_checks.shared.http.time.sleep') as mock_sleep:
            with pytest.raises(ProductsApiError) as exc_info:
                get_json(session, "https://api.example.com/v1/products/default/", max_retries=3)

        assert exc_info.value.status_code == 503
        assert str(exc_info.value) == "Failed to fetch products: 503 Service Unavailable"
        assert session.get.call_count == 1
        mock_sleep.assert_not_called()

    def test_connection_error_is_retried(self, mock_response_factory):
        session = Mock(spec=requests.Session)
        session.get.side_effect = [
            requests.exceptions.ConnectionError("refused"),
            mock_response_factory(json_data={"ok": True}),
        ]

        with patch('plan_checks.shared.http.time.sleep') as mock_sleep:
            result = get_json(session, "https://api.example.com/", max_retries=3, retry_wait=0.5)

        assert result == {"ok": True}
        assert session.get.call_count == 2
        mock_sleep.assert_called_once_with(0.5)

    def test_last_connection_error_is_raised(self, caplog):
        session = Mock(spec=requests.Session)
        session.get.side_effect = requests.exceptions.Timeout("timed out")

        with patch('plan_checks.shared.http.time.sleep') as mock_sleep, caplog.at_level(logging.ERROR):
            with pytest.raises(requests.exceptions.Timeout):
                get_json(session, "https://api.example.com/?token=secret", max_retries=2)

        assert session.get.call_count == 2
        assert mock_sleep.call_count == 1
        assert "after 2 attempts" in caplog.text
        assert "secret" not in caplog.text

    def test_json_headers(self):
        headers = get_headers()
        assert headers["Accept"] == "application/json"
        assert get_headers("custom-agent")["User-Agent"] == "custom-agent"


class TestProductsApi:
    """Tests for ProductsApi."""

    def test_requires_base_url(self):
        with pytest.raises(ValueError):
            ProductsApi("")

    def test_get_products_calls_endpoint_with_currency(self, mock_response_factory, api_payload):
        session = Mock(spec=requests.Session)
        session.get.return_value = mock_response_factory(json_data=api_payload)
        api = ProductsApi("https://api.example.com/", session=session, timeout=5)

        response = api.get_products("EUR")

        session.get.assert_called_once_with(
            "https://api.example.com/v1/products/default/",
            params={"currency": "EUR"},
            timeout=5,
        )
        assert [p.id for p in response.products] == ["tha-1gb-7d", "tha-5gb-30d", "tha-10gb-30d"]
        assert response.available_countries == ["TH"]

    def test_error_status_propagates(self, mock_response_factory):
        session = Mock(spec=requests.Session)
        session.get.return_value = mock_response_factory(status_code=404, reason="Not Found")

        with pytest.raises(ProductsApiError, match="404 Not Found"):
            ProductsApi("https://api.example.com", session=session).get_products("EUR")

    def test_get_product_by_id(self, mock_response_factory, api_payload):
        session = Mock(spec=requests.Session)
        session.get.return_value = mock_response_factory(json_data=api_payload)
        api = ProductsApi("https://api.example.com", session=session)

        product = api.get_product_by_id("EUR", "tha-5gb-30d")

        assert product.name == "Thailand 5 GB"
        assert product.price == 12.0
        assert api.get_product_by_id("EUR", "missing") is None

    def test_context_manager_closes_session(self):
        session = Mock(spec=requests.Session)

        with ProductsApi("https://api.example.com", session=session):
            pass

        session.close.assert_called_once()


class TestProductsResponse:
    """Tests for payload decoding."""

    def test_malformed_products_are_skipped(self, api_payload, caplog):
        api_payload['products'].append({'id': 'broken', 'name': 'No price'})

        with caplog.at_level(logging.WARNING):
            response = ProductsResponse.from_payload(api_payload)

        assert len(response.products) == 3
        assert "broken" in caplog.text

    def test_empty_payload(self):
        response = ProductsResponse.from_payload({})
        assert response.products == []
        assert response.available_countries == []
