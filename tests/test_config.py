from config import get_settings_module, load_settings


def test_settings_module_by_env(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"
    assert get_settings_module("production") == "config.production"
    assert get_settings_module("TEST") == "config.testing"
    assert get_settings_module("staging") == "config.development"


def test_testing_settings_do_not_seed():
    settings = load_settings("testing")

    assert settings.TESTING is True
    assert settings.SEED_DEMO_DATA is False
