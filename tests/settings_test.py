from __future__ import annotations

import importlib.util
from types import ModuleType

import pytest
from django.core.exceptions import ImproperlyConfigured

import backend.settings


def load_settings() -> ModuleType:
    spec = importlib.util.spec_from_file_location("settings_under_test", backend.settings.__file__)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_settings_read_weather_api_key(monkeypatch) -> None:
    monkeypatch.setenv("WEATHER_API_KEY", " abc123 ")

    assert load_settings().WEATHER_API_KEY == "abc123"


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_weather_api_key_is_rejected(monkeypatch, value: str) -> None:
    monkeypatch.setenv("WEATHER_API_KEY", value)

    with pytest.raises(ImproperlyConfigured, match="WEATHER_API_KEY"):
        load_settings()


def test_missing_weather_api_key_is_rejected(monkeypatch) -> None:
    monkeypatch.delenv("WEATHER_API_KEY", raising=False)

    with pytest.raises(ImproperlyConfigured, match="WEATHER_API_KEY"):
        load_settings()
