from __future__ import annotations

import pytest

from pet_store.config import PetStoreSettings
from pet_store.errors import PetStoreConfigError, PetStoreError


def test_settings_defaults(monkeypatch):
    for name in ("PETSTORE_HOST", "PETSTORE_PORT", "PETSTORE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = PetStoreSettings.from_env()

    assert settings == PetStoreSettings()
    assert settings.port == 8080
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("PETSTORE_HOST", "127.0.0.1")
    monkeypatch.setenv("PETSTORE_PORT", "9000")
    monkeypatch.setenv("PETSTORE_LOG_LEVEL", "debug")

    settings = PetStoreSettings.from_env()

    assert settings.host == "127.0.0.1"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["not-a-port", "0", "-1"])
def test_settings_invalid_port_falls_back(monkeypatch, raw):
    monkeypatch.setenv("PETSTORE_PORT", raw)

    assert PetStoreSettings.from_env().port == 8080


def test_settings_unknown_log_level(monkeypatch):
    monkeypatch.setenv("PETSTORE_LOG_LEVEL", "chatty")

    with pytest.raises(PetStoreConfigError) as excinfo:
        PetStoreSettings.from_env()

    assert isinstance(excinfo.value, PetStoreError)
    assert "PETSTORE_LOG_LEVEL" in str(excinfo.value)
