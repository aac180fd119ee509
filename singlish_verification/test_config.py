import pytest
from singlish_verification.config import DEFAULT_TRANSLATOR_URL, SettleBudget, Settings


def test_defaults(monkeypatch):
    for name in ("SINGLISH_TRANSLATOR_URL", "SINGLISH_SETTLE_MS", "SINGLISH_GRACE_MS",
                 "SINGLISH_NORMALIZE_WHITESPACE", "SINGLISH_LIVE"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings.translator_url == DEFAULT_TRANSLATOR_URL
    assert settings.budget == SettleBudget(settle_ms=2000, grace_ms=500)
    assert settings.normalize_whitespace is False
    assert settings.live is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SINGLISH_TRANSLATOR_URL", "http://localhost:8080/")
    monkeypatch.setenv("SINGLISH_SETTLE_MS", "3500")
    monkeypatch.setenv("SINGLISH_GRACE_MS", "0")
    monkeypatch.setenv("SINGLISH_NORMALIZE_WHITESPACE", "yes")
    monkeypatch.setenv("SINGLISH_LIVE", "1")

    settings = Settings.from_env()

    assert settings.translator_url == "http://localhost:8080/"
    assert settings.budget == SettleBudget(settle_ms=3500, grace_ms=0)
    assert settings.normalize_whitespace is True
    assert settings.live is True


@pytest.mark.parametrize("value", ["soon", "-1"])
def test_bad_wait_is_rejected(monkeypatch, value):
    monkeypatch.setenv("SINGLISH_SETTLE_MS", value)

    with pytest.raises(ValueError, match="SINGLISH_SETTLE_MS") as excinfo:
        Settings.from_env()
    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__ or excinfo.value.__context__ is None


def test_negative_budget_is_rejected():
    with pytest.raises(ValueError):
        SettleBudget(settle_ms=-5)


def test_launch_args_disable_the_translate_bar(browser_type_launch_args):
    assert "--disable-features=Translate" in browser_type_launch_args["args"]
