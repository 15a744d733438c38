"""OpenTelemetry tracing setup, driven by the TELEMETRY_* settings.

setup_telemetry() runs once in the lifespan when TELEMETRY_ENABLED is true:
it installs a tracer provider with the configured exporter, instruments the
FastAPI app (health checks excluded) and injects trace ids into log records.
shutdown_telemetry() flushes pending spans on exit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

EXCLUDED_URLS = "/api/health"

_provider: TracerProvider | None = None


def _build_exporter(settings: "Settings") -> SpanExporter | None:
    """Exporter for TELEMETRY_EXPORTER: console, otlp (needs an endpoint) or none."""
    kind = settings.telemetry_exporter
    if kind == "none":
        return None
    if kind == "otlp":
        endpoint = settings.telemetry_otlp_endpoint
        if not endpoint:
            raise ValueError("TELEMETRY_OTLP_ENDPOINT is required for the otlp exporter")
        return OTLPSpanExporter(endpoint=endpoint, insecure=endpoint.startswith("http://"))
    if kind != "console":
        logger.warning("Unknown telemetry exporter %r, using console", kind)
    return ConsoleSpanExporter()


def setup_telemetry(app: FastAPI, settings: "Settings") -> TracerProvider:
    """Install the global tracer provider and instrument app and logging."""
    global _provider
    provider = TracerProvider(
        resource=Resource(
            attributes={
                SERVICE_NAME: settings.app_name,
                SERVICE_VERSION: settings.app_version,
                "deployment.environment": settings.telemetry_environment,
            }
        ),
        sampler=TraceIdRatioBased(settings.telemetry_sample_rate),
    )
    exporter = _build_exporter(settings)
    if exporter is not None:
        provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(
        app, tracer_provider=provider, excluded_urls=EXCLUDED_URLS
    )
    LoggingInstrumentor().instrument(tracer_provider=provider, set_logging_format=False)

    _provider = provider
    logger.info(
        "OpenTelemetry initialized: service=%s exporter=%s sample_rate=%s",
        settings.app_name,
        settings.telemetry_exporter,
        settings.telemetry_sample_rate,
    )
    return provider


def shutdown_telemetry() -> None:
    """Flush and close the provider installed by setup_telemetry (no-op otherwise)."""
    global _provider
    if _provider is None:
        return
    _provider.shutdown()
    _provider = None
    logger.info("Telemetry shutdown complete")
