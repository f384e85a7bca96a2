"""Testes para config.logging.

Cobre: configure_logging, CorrelationIdFilter, SecretRedactionFilter,
create_json_formatter.
"""

from __future__ import annotations

import json
import logging

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    LOG_FIELDS,
    REDACTED,
    CorrelationIdFilter,
    SecretRedactionFilter,
    configure_logging,
    create_json_formatter,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", args: tuple = (), **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level_is_info(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_level_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_existing_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_installs_correlation_and_redaction_filters(self) -> None:
        configure_logging(correlation_id_getter=lambda: "c-1", secrets=("k",))
        filters = logging.getLogger().handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, SecretRedactionFilter) for f in filters)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "steadfast"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_and_service(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_preserves_explicit_correlation_id(self) -> None:
        """correlation_id passado via extra não é sobrescrito."""
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record(correlation_id="explicit-id")
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_string_without_getter(self) -> None:
        filter_ = CorrelationIdFilter("svc")
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""


class TestSecretRedactionFilter:
    """Testes para SecretRedactionFilter."""

    def test_redacts_secret_in_message(self) -> None:
        filter_ = SecretRedactionFilter(["super-secret"])
        record = _record("token=super-secret")
        assert filter_.filter(record) is True
        assert record.getMessage() == f"token={REDACTED}"

    def test_redacts_secret_in_formatted_args(self) -> None:
        filter_ = SecretRedactionFilter(["abc123"])
        record = _record("header %s", ("Bearer abc123",))
        filter_.filter(record)
        assert record.getMessage() == f"header Bearer {REDACTED}"

    def test_redacts_nested_extra_values(self) -> None:
        filter_ = SecretRedactionFilter(["k1"])
        record = _record(headers={"Api-Key": "k1"}, values=["x", "k1"], count=3)
        filter_.filter(record)
        assert record.headers == {"Api-Key": REDACTED}
        assert record.values == ["x", REDACTED]
        assert record.count == 3

    def test_ignores_empty_secrets(self) -> None:
        filter_ = SecretRedactionFilter(["", ""])
        record = _record("nothing to hide")
        filter_.filter(record)
        assert record.getMessage() == "nothing to hide"

    def test_longest_secret_wins(self) -> None:
        """Segredo que contém outro é mascarado inteiro."""
        filter_ = SecretRedactionFilter(["abc", "abcdef"])
        record = _record("value=abcdef")
        filter_.filter(record)
        assert record.getMessage() == f"value={REDACTED}"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter."""

    def test_field_constants(self) -> None:
        assert set(LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json_with_renamed_fields(self) -> None:
        formatter = create_json_formatter()
        record = _record("webhook_processed", correlation_id="abc-123", service="svc")
        record.name = "api.connectors.steadfast"
        output = json.loads(formatter.format(record))
        assert output["message"] == "webhook_processed"
        assert output["level"] == "INFO"
        assert output["logger"] == "api.connectors.steadfast"
        assert output["correlation_id"] == "abc-123"
        assert output["service"] == "svc"


class TestLoggingIntegration:
    """Fluxo completo: configure_logging + logger de módulo."""

    def test_secret_never_reaches_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(
            level="INFO",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
            secrets=("sk-live-xyz",),
        )
        logger = logging.getLogger("integration.test")
        logger.info("calling with sk-live-xyz", extra={"api_key": "sk-live-xyz"})

        err = capsys.readouterr().err
        assert "sk-live-xyz" not in err
        line = json.loads(err.strip().splitlines()[-1])
        assert line["message"] == f"calling with {REDACTED}"
        assert line["api_key"] == REDACTED
        assert line["correlation_id"] == "int-test-001"
        assert line["service"] == "integration_test"
