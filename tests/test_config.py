import pytest
from pydantic import ValidationError

from storefront.config import StorefrontConfig, load_storefront_config

_ENV_NAMES = (
    "STOREFRONT_API_URL",
    "STOREFRONT_USE_BACKEND",
    "STOREFRONT_ENV",
    "STOREFRONT_PROBE_TIMEOUT",
    "STOREFRONT_API_TOKEN",
    "STOREFRONT_CART_DIR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_yaml_values_and_env_overrides(tmp_path, monkeypatch):
    config_file = tmp_path / "storefront.yml"
    config_file.write_text(
        "api_base_url: http://api.example.com\nprobe_timeout_seconds: 3\ndefault_currency: EUR\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("STOREFRONT_USE_BACKEND", "false")
    monkeypatch.setenv("STOREFRONT_PROBE_TIMEOUT", "2.5")

    config = load_storefront_config(config_file)

    assert config.api_base_url == "http://api.example.com"
    assert config.default_currency == "EUR"
    assert config.backend_enabled is False
    assert config.probe_timeout_seconds == 2.5


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_storefront_config(tmp_path / "missing.yml")


def test_invalid_timeout_is_rejected(tmp_path, monkeypatch):
    config_file = tmp_path / "storefront.yml"
    config_file.write_text("environment: development\n", encoding="utf-8")
    monkeypatch.setenv("STOREFRONT_PROBE_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        load_storefront_config(config_file)


@pytest.mark.parametrize("value,expected", [("1", True), ("YES", True), ("on", True), ("0", False), ("nope", False)])
def test_backend_flag_parsing(tmp_path, monkeypatch, value, expected):
    config_file = tmp_path / "storefront.yml"
    config_file.write_text("{}\n", encoding="utf-8")
    monkeypatch.setenv("STOREFRONT_USE_BACKEND", value)

    assert load_storefront_config(config_file).backend_enabled is expected


def test_production_flag():
    assert StorefrontConfig(environment="Production").is_production is True
    assert StorefrontConfig().is_production is False
