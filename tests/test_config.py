import pytest
from pydantic import ValidationError

from payment_escrow import registry
from payment_escrow.config import Settings, get_settings
from payment_escrow.services.transfers import NoopTransferHook


def test_log_level_is_normalised():
    assert Settings(LOG_LEVEL=" warning ").LOG_LEVEL == "WARNING"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="chatty")


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PROMETHEUS_ENABLED", "false")
    monkeypatch.setenv("TRANSFER_HOOK_ENABLED", "0")

    settings = Settings()

    assert settings.PROMETHEUS_ENABLED is False
    assert settings.TRANSFER_HOOK_ENABLED is False


@pytest.fixture
def fresh_registry():
    registry.close_ledger()
    get_settings.cache_clear()
    yield
    registry.close_ledger()
    get_settings.cache_clear()


def test_registry_shares_one_ledger(fresh_registry):
    first = registry.get_ledger()

    assert registry.get_ledger() is first
    assert isinstance(first.transfer_hook, NoopTransferHook)


def test_registry_honours_disabled_hook(fresh_registry, monkeypatch):
    monkeypatch.setenv("TRANSFER_HOOK_ENABLED", "false")
    get_settings.cache_clear()

    assert registry.init_ledger().transfer_hook is None
