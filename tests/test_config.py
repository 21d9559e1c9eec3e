from tripshare.config import get_settings
from tripshare.services.summary import format_currency


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TRIPSHARE_CURRENCY", "usd")
    monkeypatch.setenv("TRIPSHARE_TRIP_CODE_PREFIX", "TS")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.currency_symbol == "$"
        assert settings.trip_code_prefix == "TS"
        assert format_currency(3) == "3,00 $"
    finally:
        get_settings.cache_clear()


def test_unknown_currency_uses_code(monkeypatch):
    monkeypatch.setenv("TRIPSHARE_CURRENCY", "chf")
    get_settings.cache_clear()
    try:
        assert get_settings().currency_symbol == "CHF"
    finally:
        get_settings.cache_clear()
