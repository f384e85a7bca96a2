"""Testes do composition root (app.bootstrap)."""

from __future__ import annotations

import logging

import pytest

from api.connectors.steadfast import SteadfastClient
from api.connectors.steadfast.errors import SteadfastError
from app.bootstrap import (
    create_steadfast_client,
    create_webhook_handler,
    initialize_app,
    validate_runtime_settings,
)
from config.logging import SecretRedactionFilter
from config.settings import SteadfastSettings, get_base_settings, get_steadfast_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "ENVIRONMENT",
        "LOG_LEVEL",
        "SERVICE_NAME",
        "STEADFAST_API_KEY",
        "STEADFAST_SECRET_KEY",
        "STEADFAST_WEBHOOK_TOKEN",
        "STEADFAST_WEBHOOK_SKIP_AUTH",
    ):
        monkeypatch.delenv(name, raising=False)
    get_base_settings.cache_clear()
    get_steadfast_settings.cache_clear()
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    get_base_settings.cache_clear()
    get_steadfast_settings.cache_clear()


def test_create_webhook_handler_from_explicit_settings() -> None:
    handler = create_webhook_handler(SteadfastSettings(api_key="k", secret_key="s"))
    assert handler.skip_auth is False


def test_create_webhook_handler_without_credential_fails() -> None:
    with pytest.raises(SteadfastError):
        create_webhook_handler()


def test_create_webhook_handler_skip_auth_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STEADFAST_WEBHOOK_SKIP_AUTH", "1")
    assert create_webhook_handler().skip_auth is True


def test_create_steadfast_client_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STEADFAST_API_KEY", "k")
    monkeypatch.setenv("STEADFAST_SECRET_KEY", "s")
    assert isinstance(create_steadfast_client(), SteadfastClient)


def test_initialize_app_registers_credentials_for_redaction(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("STEADFAST_API_KEY", "k-123")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    initialize_app()

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    redaction = next(
        f for f in root.handlers[0].filters if isinstance(f, SecretRedactionFilter)
    )
    record = logging.LogRecord("t", logging.INFO, "", 0, "key=k-123", (), None)
    redaction.filter(record)
    assert record.getMessage() == "key=[REDACTED]"


def test_validate_runtime_settings_warns_in_development(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING):
        validate_runtime_settings()
    assert "settings_validation_failed" in caplog.messages


def test_validate_runtime_settings_strict_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    with pytest.raises(RuntimeError, match="STEADFAST_API_KEY"):
        validate_runtime_settings()


def test_validate_runtime_settings_ok(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("STEADFAST_API_KEY", "k")
    monkeypatch.setenv("STEADFAST_SECRET_KEY", "s")
    with caplog.at_level(logging.INFO):
        validate_runtime_settings()
    assert "settings_validated" in caplog.messages
