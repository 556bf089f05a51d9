import pytest

from homeloan.core.metrics import clear_metrics
from homeloan.core.settings import clear_settings_cache


@pytest.fixture(autouse=True)
def default_safe_test_env(monkeypatch):
    clear_settings_cache()
    clear_metrics()
    monkeypatch.setenv("APP_ENV", "local")
    monkeypatch.delenv("CURRENCY_SYMBOL", raising=False)
    monkeypatch.delenv("AMOUNT_GROUPING", raising=False)
    monkeypatch.delenv("METRICS_ENABLED", raising=False)

    yield

    clear_settings_cache()
    clear_metrics()
