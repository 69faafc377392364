import json
import logging
import sys
from unittest.mock import MagicMock, patch

import pytest
import structlog

from sharpapi_travel_review_sentiment import tracing
from sharpapi_travel_review_sentiment.config import SharpApiSettings
from sharpapi_travel_review_sentiment.logging_config import (
    add_opentelemetry_ids,
    add_service_info,
    setup_observability,
    setup_structlog,
)


@pytest.fixture
def restore_logging(monkeypatch: pytest.MonkeyPatch):
    """Undoes the global changes setup_structlog makes."""
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def test_add_service_info_reads_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SERVICE_NAME", "reviews-ingest")
    monkeypatch.setenv("ENVIRONMENT", "production")

    event_dict = add_service_info(None, None, {"event": "hello"})

    assert event_dict["service"] == "reviews-ingest"
    assert event_dict["env"] == "production"


def test_add_opentelemetry_ids_skips_without_active_span():
    assert add_opentelemetry_ids(None, None, {"event": "hello"}) == {"event": "hello"}


def test_setup_structlog_renders_json(restore_logging, capsys):
    setup_structlog(json_logs=True, log_level="debug")

    structlog.get_logger("tests").info("Review submitted", job_id="job-1")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "Review submitted"
    assert record["job_id"] == "job-1"
    assert record["level"] == "info"
    assert record["logger"] == "tests"
    assert "timestamp" in record


def test_setup_tracing_installs_provider_once(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(tracing, "_provider", None)

    with patch.object(tracing, "OTLPSpanExporter") as exporter, patch.object(
        tracing, "BatchSpanProcessor", return_value=MagicMock()
    ), patch.object(tracing.trace, "set_tracer_provider") as set_provider:
        first = tracing.setup_tracing("sharpapi-tests", "http://collector:4317")
        second = tracing.setup_tracing("other-service")

    assert first is second
    exporter.assert_called_once_with(endpoint="http://collector:4317")
    set_provider.assert_called_once_with(first)
    assert first.resource.attributes["service.name"] == "sharpapi-tests"


def test_setup_observability_skips_tracing_by_default(restore_logging):
    settings = SharpApiSettings(SHARP_API_KEY="key", JSON_LOGS=True)

    with patch(
        "sharpapi_travel_review_sentiment.logging_config.setup_tracing"
    ) as setup_tracing:
        setup_observability(settings)

    setup_tracing.assert_not_called()


def test_setup_observability_enables_tracing(restore_logging):
    settings = SharpApiSettings(
        SHARP_API_KEY="key",
        SERVICE_NAME="reviews-ingest",
        TRACING_ENABLED=True,
        OTLP_ENDPOINT="http://collector:4317",
    )

    with patch(
        "sharpapi_travel_review_sentiment.logging_config.setup_tracing"
    ) as setup_tracing:
        setup_observability(settings)

    setup_tracing.assert_called_once_with("reviews-ingest", "http://collector:4317")
