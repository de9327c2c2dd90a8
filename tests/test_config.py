from __future__ import annotations

import pytest

from argcheck.config import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ARGCHECK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ARGCHECK_EXPOSE_DETAILS", raising=False)
    settings = Settings.from_env()
    assert settings.log_level == "INFO"
    assert settings.expose_details is True


@pytest.mark.parametrize("raw", ["0", "false", "No", " off "])
def test_expose_details_can_be_disabled(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("ARGCHECK_EXPOSE_DETAILS", raw)
    assert Settings.from_env().expose_details is False


def test_log_level_is_normalised(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARGCHECK_LOG_LEVEL", " debug ")
    assert Settings.from_env().log_level == "DEBUG"
    monkeypatch.setenv("ARGCHECK_LOG_LEVEL", "   ")
    assert Settings.from_env().log_level == "INFO"
