"""
OpenTelemetry tracing for the platform services.

Each service process installs one tracer provider at startup. Spans leave the
process only when an exporter is configured:
- OTEL_EXPORTER_OTLP_ENDPOINT set -> OTLP/gRPC exporter (Jaeger, Tempo, ...)
- OTEL_CONSOLE_EXPORT=true -> spans printed to stdout

Service-to-service HTTP calls carry the W3C `traceparent` header so a booking
and the seat reduction it triggers end up in the same trace.
"""

import os
from typing import Any, Optional

from opentelemetry import propagate, trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ALWAYS_ON


EXCLUDED_URLS = 'health,metrics'


class TracingConfig:
    """
    Usage:
        tracing = TracingConfig(service_name='showtime-service')
        tracing.setup()
        ...
        tracing.shutdown()
    """

    def __init__(self, *, service_name: str, otlp_endpoint: Optional[str] = None) -> None:
        self.service_name = service_name
        self.otlp_endpoint = otlp_endpoint or os.getenv('OTEL_EXPORTER_OTLP_ENDPOINT')
        self.console_export = os.getenv('OTEL_CONSOLE_EXPORT', 'false').lower() == 'true'
        self._provider: Optional[TracerProvider] = None

    def setup(self) -> None:
        provider = TracerProvider(
            resource=Resource(attributes={SERVICE_NAME: self.service_name}),
            sampler=ALWAYS_ON,
        )
        for exporter in self._exporters():
            provider.add_span_processor(BatchSpanProcessor(exporter))

        trace.set_tracer_provider(provider)
        self._provider = provider

    def _exporters(self) -> list[SpanExporter]:
        exporters: list[SpanExporter] = []
        if self.otlp_endpoint:
            exporters.append(OTLPSpanExporter(endpoint=self.otlp_endpoint))
        if self.console_export:
            exporters.append(ConsoleSpanExporter())
        return exporters

    @staticmethod
    def instrument_fastapi(*, app: Any) -> None:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)

    @staticmethod
    def instrument_sqlalchemy(*, engine: Any) -> None:
        # AsyncEngine wraps a sync engine; the instrumentor hooks the latter
        SQLAlchemyInstrumentor().instrument(engine=getattr(engine, 'sync_engine', engine))

    def shutdown(self) -> None:
        if self._provider is not None:
            self._provider.shutdown()
            self._provider = None


def inject_trace_headers(headers: Optional[dict[str, str]] = None) -> dict[str, str]:
    """Add the current trace context to outgoing HTTP headers."""
    headers = dict(headers or {})
    propagate.inject(headers)
    return headers
