"""Logging setup, OpenTelemetry tracing and span helpers."""

from app.shared.telemetry.logging import RequestContextFilter, setup_logging
from app.shared.telemetry.telemetry import setup_telemetry, shutdown_telemetry
from app.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "RequestContextFilter",
    "add_span_attributes",
    "setup_logging",
    "setup_telemetry",
    "shutdown_telemetry",
    "traced",
]
