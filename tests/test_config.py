"""Tests for transport configuration."""

import pytest
import yaml

from scryfall_types.config import ClientConfig, _parse_config, _validate_config, load_config


def test_default_config():
    config = ClientConfig()
    assert config.base_url == "https://api.scryfall.com"
    assert config.rate_limit_ms == 100
    assert config.max_retries == 3


def test_parse_top_level_config():
    config = _parse_config({"rate_limit_ms": 250, "user_agent": "deckbox/1.0"})
    assert config.rate_limit_ms == 250
    assert config.user_agent == "deckbox/1.0"
    assert config.base_url == "https://api.scryfall.com"


def test_parse_client_section():
    config = _parse_config({"client": {"base_url": "http://localhost:8080", "timeout": 5}})
    assert config.base_url == "http://localhost:8080"
    assert config.timeout == 5


def test_validate_config_bad_base_url():
    with pytest.raises(ValueError, match="base_url"):
        _validate_config(ClientConfig(base_url="api.scryfall.com"))


def test_validate_config_negative_rate_limit():
    with pytest.raises(ValueError, match="rate_limit_ms"):
        _validate_config(ClientConfig(rate_limit_ms=-5))


def test_validate_config_zero_timeout():
    with pytest.raises(ValueError, match="timeout"):
        _validate_config(ClientConfig(timeout=0))


def test_validate_config_no_retries():
    with pytest.raises(ValueError, match="max_retries"):
        _validate_config(ClientConfig(max_retries=0))


def test_load_config_missing_file(tmp_path):
    """Loading from a missing file should return defaults."""
    config = load_config(tmp_path / "nonexistent.yaml")
    assert config == ClientConfig()


def test_load_config_empty_file(tmp_path):
    config_path = tmp_path / "scryfall.yaml"
    config_path.write_text("")
    assert load_config(config_path) == ClientConfig()


def test_load_config_from_file(tmp_path):
    config_path = tmp_path / "scryfall.yaml"
    config_path.write_text(yaml.dump({
        "client": {"rate_limit_ms": 0, "max_retries": 5},
    }))
    config = load_config(config_path)
    assert config.rate_limit_ms == 0
    assert config.max_retries == 5


def test_load_config_invalid_file(tmp_path):
    config_path = tmp_path / "scryfall.yaml"
    config_path.write_text(yaml.dump({"rate_limit_ms": "fast"}))
    with pytest.raises(ValueError, match="Config error"):
        load_config(config_path)
