"""Tests for settings loading and suite config validation."""

from pathlib import Path

import pytest
import yaml

from plan_checks.shared.settings import (
    DEFAULT_CONFIG_PATH,
    PROJECT_ROOT,
    Settings,
    load_settings,
    validate_config_on_startup,
)


def _write_config(tmp_path: Path, config) -> Path:
    path = tmp_path / "suite.yaml"
    with open(path, 'w', encoding='utf-8') as f:
        yaml.dump(config, f)
    return path


class TestLoadSettings:
    """Tests for load_settings."""

    def test_yaml_values(self, tmp_path):
        path = _write_config(tmp_path, {
            'api': {'base_url': 'https://api.example.com', 'timeout': 10},
            'site': {'page_url': 'https://shop.example.com/'},
            'grid': {'match_strategy': 'exact', 'max_data_elements': 4},
            'browser': {'headless': False},
            'scenario': {'data_file': 'data/other.json', 'destination': 'TH'},
        })

        settings = load_settings(path, env={})

        assert settings.api_url == 'https://api.example.com'
        assert settings.request_timeout == 10
        assert settings.page_url == 'https://shop.example.com/'
        assert settings.match_strategy == 'exact'
        assert settings.max_data_elements == 4
        assert settings.headless is False
        assert settings.destination == 'TH'
        assert settings.data_file == str(PROJECT_ROOT / 'data' / 'other.json')

    def test_env_overrides_yaml(self, tmp_path):
        path = _write_config(tmp_path, {'site': {'page_url': 'https://yaml.example.com/'}})
        env = {
            'API_URL': 'https://api.example.com',
            'PAGE_URL': 'https://env.example.com/',
            'COUNTRY_CODE': 'tha',
            'CURRENCY': 'eur',
            'DESTINATION': 'PT',
            'MATCH_STRATEGY': 'numeric',
            'HEADLESS': 'false',
        }

        settings = load_settings(path, env=env)

        assert settings.page_url == 'https://env.example.com/'
        assert settings.country_code == 'THA'
        assert settings.currency == 'EUR'
        assert settings.destination == 'PT'
        assert settings.match_strategy == 'numeric'
        assert settings.headless is False

    def test_base_url_fallback(self, tmp_path):
        settings = load_settings(tmp_path / "absent.yaml", env={'BASE_URL': 'https://legacy.example.com/'})
        assert settings.page_url == 'https://legacy.example.com/'

    def test_missing_file_uses_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.yaml", env={})
        assert settings == Settings()
        assert settings.destination == 'BR'

    def test_blank_env_values_ignored(self, tmp_path):
        path = _write_config(tmp_path, {'scenario': {'currency': 'THB'}})
        settings = load_settings(path, env={'CURRENCY': '  '})
        assert settings.currency == 'THB'


class TestRequiredValues:

    def test_all_scenario_values_missing(self):
        with pytest.raises(ValueError, match="COUNTRY_CODE, CURRENCY, PAGE_URL must be set"):
            Settings().require_scenario()

    def test_single_missing_value_is_reported(self):
        settings = Settings(country_code='THA', currency='EUR')
        assert settings.missing_scenario_values() == ['PAGE_URL']
        with pytest.raises(ValueError, match="PAGE_URL"):
            settings.require_scenario()

    def test_complete_scenario(self):
        settings = Settings(country_code='THA', currency='EUR', page_url='https://shop.example.com/')
        assert settings.require_scenario() is settings

    def test_api_url_required(self):
        with pytest.raises(ValueError, match="API_URL must be set"):
            Settings().require_api()


class TestConfigValidation:
    """Tests for validate_config_on_startup."""

    def test_bundled_config_is_valid(self):
        assert validate_config_on_startup(DEFAULT_CONFIG_PATH) == []

    def test_missing_file(self, tmp_path):
        errors = validate_config_on_startup(tmp_path / "absent.yaml")
        assert len(errors) == 1
        assert "not found" in errors[0]

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "suite.yaml"
        path.write_text("grid: [unclosed", encoding='utf-8')

        errors = validate_config_on_startup(path)
        assert "Invalid YAML syntax" in errors[0]

    def test_empty_file(self, tmp_path):
        path = tmp_path / "suite.yaml"
        path.write_text("", encoding='utf-8')
        assert validate_config_on_startup(path) == ["Configuration file is empty"]

    def test_section_must_be_mapping(self, tmp_path):
        path = _write_config(tmp_path, {'grid': ['substring']})
        assert validate_config_on_startup(path) == ["'grid' section must be a dictionary"]

    def test_bad_url(self, tmp_path):
        path = _write_config(tmp_path, {'site': {'page_url': 'shop.example.com'}})
        errors = validate_config_on_startup(path)
        assert any('site.page_url' in e for e in errors)

    def test_non_numeric_timeouts_dont_crash_validation(self, tmp_path):
        path = _write_config(tmp_path, {
            'grid': {'field_timeout_ms': 'soon', 'click_timeout_ms': -1, 'max_data_elements': True},
        })

        errors = validate_config_on_startup(path)

        assert len(errors) == 3
        assert all('non-negative number' in e for e in errors)

    def test_unknown_match_strategy(self, tmp_path):
        path = _write_config(tmp_path, {'grid': {'match_strategy': 'fuzzy'}})
        errors = validate_config_on_startup(path)
        assert any("Invalid match strategy 'fuzzy'" in e for e in errors)

    def test_headless_must_be_bool(self, tmp_path):
        path = _write_config(tmp_path, {'browser': {'headless': 'yes'}})
        assert validate_config_on_startup(path) == ["'browser.headless' must be true or false"]
