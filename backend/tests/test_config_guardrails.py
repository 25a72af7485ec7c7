import pytest

from core import config as config_module


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    config_module.get_settings.cache_clear()
    yield
    config_module.get_settings.cache_clear()


def test_non_local_debug_mode_is_blocked(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("DEBUG", "true")

    with pytest.raises(ValueError, match="debug=true"):
        config_module.get_settings()


def test_negative_simulated_delay_is_blocked(monkeypatch):
    monkeypatch.setenv("APP_ENV", "local")
    monkeypatch.setenv("REPORT_GENERATION_DELAY_SECONDS", "-1")

    with pytest.raises(ValueError, match="must not be negative"):
        config_module.get_settings()


def test_local_allows_debug(monkeypatch):
    monkeypatch.setenv("APP_ENV", "local")
    monkeypatch.setenv("DEBUG", "true")

    settings = config_module.get_settings()
    assert settings.debug is True
    assert settings.product_low_stock_threshold == 15
    assert settings.allow_negative_stock is False


def test_low_stock_threshold_comes_from_settings():
    from dashboard.workspace import Workspace

    workspace = Workspace.from_fixtures(config_module.Settings(product_low_stock_threshold=50))
    statuses = {p.sku: workspace.products.status_of(p) for p in workspace.products.store}
    assert statuses["NK-AM270-BK-10"] == "Low Stock"
    assert statuses["LEV-501-BL-32"] == "Active"
