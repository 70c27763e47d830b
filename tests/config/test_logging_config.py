"""Testes para wacloud.config.logging.

Cobre: configure_logging, get_logger, RequestNameFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from wacloud.config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    RequestNameFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)
from wacloud.config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from wacloud.observability import get_request_name, reset_request_name, set_request_name


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _record(msg: str = "msg", name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        """Aceita níveis válidos, sem diferenciar maiúsculas."""
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        """configure_logging substitui handlers existentes."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_adds_request_name_filter(self) -> None:
        configure_logging(request_name_getter=get_request_name)
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, RequestNameFilter) for f in handler.filters)

    def test_valid_log_levels_constant(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS

    def test_default_service_name_constant(self) -> None:
        assert DEFAULT_SERVICE_NAME == "wacloud"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_logger(self) -> None:
        logger = get_logger("test.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_name_returns_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestRequestNameFilter:
    """Testes para RequestNameFilter."""

    def test_filter_adds_request_name_from_getter(self) -> None:
        filter_ = RequestNameFilter("my_service", lambda: "send text")
        record = _record()

        assert filter_.filter(record) is True
        assert record.request_name == "send text"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_request_name(self) -> None:
        """request_name passado via extra tem precedência sobre o getter."""
        filter_ = RequestNameFilter("svc", lambda: "from-getter")
        record = _record()
        record.request_name = "explicit"

        filter_.filter(record)

        assert record.request_name == "explicit"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = RequestNameFilter("service_name")
        record = _record()

        filter_.filter(record)

        assert record.request_name == ""
        assert record.service == "service_name"

    def test_filter_reads_context_var(self) -> None:
        filter_ = RequestNameFilter("svc", get_request_name)
        token = set_request_name("verify code")
        try:
            record = _record()
            filter_.filter(record)
        finally:
            reset_request_name(token)

        assert record.request_name == "verify code"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields(self) -> None:
        assert isinstance(REQUIRED_LOG_FIELDS, frozenset)
        assert {"asctime", "levelname", "name", "message", "request_name", "service"} == (
            REQUIRED_LOG_FIELDS
        )

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        """Saída é JSON com campos renomeados e extras."""
        formatter = create_json_formatter()
        record = _record("graph_api_exchange", name="wacloud.http.hooks")
        record.request_name = "send text"
        record.service = "test_service"
        record.status_code = 200

        output = json.loads(formatter.format(record))

        assert output["message"] == "graph_api_exchange"
        assert output["logger"] == "wacloud.http.hooks"
        assert output["level"] == "INFO"
        assert output["request_name"] == "send text"
        assert output["service"] == "test_service"
        assert output["status_code"] == 200


class TestLoggingIntegration:
    """Fluxo completo: configure, get_logger, log."""

    def test_full_logging_flow(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            request_name_getter=get_request_name,
        )
        token = set_request_name("send text")
        try:
            get_logger("integration.test").info("Info message", extra={"latency_ms": 42})
        finally:
            reset_request_name(token)

        line = capsys.readouterr().err.strip().splitlines()[-1]
        output = json.loads(line)
        assert output["message"] == "Info message"
        assert output["request_name"] == "send text"
        assert output["service"] == "integration_test"
        assert output["latency_ms"] == 42
