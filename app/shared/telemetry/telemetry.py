"""OpenTelemetry tracing for the task service.

Off by default (TELEMETRY_ENABLED). When on, spans cover inbound requests,
the use-case steps wrapped in TracedOperation (application lookup, insert,
notification), Redis publishes when that backend is selected, and log
records gain trace_id/span_id.
"""

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from app.core.config import Settings

logger = logging.getLogger(__name__)

# Probes are polled constantly; their spans are noise.
EXCLUDED_URLS = "/api/v1/health,/api/v1/health/ready"


def _build_exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
    """Return the span exporter for TELEMETRY_EXPORTER, or None for "none"."""
    if exporter_type == "none":
        return None
    if exporter_type == "otlp":
        if otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
            )
        logger.warning("TELEMETRY_EXPORTER=otlp without TELEMETRY_OTLP_ENDPOINT, using console")
    elif exporter_type != "console":
        logger.warning("Unknown exporter type '%s', using console", exporter_type)
    return ConsoleSpanExporter()


class TelemetryConfig:
    """Owns the tracer provider and the instrumentors attached to it."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        return cls(settings.app_name, settings.app_version, settings.telemetry_environment)

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create and install the global tracer provider.

        Setup failures are logged and leave tracing off; the service still starts.

        Returns:
            The provider, or None if setup failed.
        """
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=TraceIdRatioBased(sample_rate),
            )
            exporter = _build_exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception:
            logger.exception("Failed to initialize telemetry")
            return None
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s, exporter=%s, sample_rate=%s",
            self.service_name,
            exporter_type,
            sample_rate,
        )
        return provider

    def instrument_fastapi(self, app: FastAPI) -> None:
        """Trace inbound requests (probes excluded)."""
        if self.tracer_provider is None:
            return
        FastAPIInstrumentor.instrument_app(
            app, tracer_provider=self.tracer_provider, excluded_urls=EXCLUDED_URLS
        )
        logger.info("FastAPI instrumentation enabled")

    def instrument_redis(self) -> None:
        """Trace Redis commands (notification publishes)."""
        if self.tracer_provider is None:
            return
        RedisInstrumentor().instrument(tracer_provider=self.tracer_provider)
        logger.info("Redis instrumentation enabled")

    def instrument_logging(self) -> None:
        """Inject trace_id and span_id into log records."""
        if self.tracer_provider is None:
            return
        LoggingInstrumentor().instrument(tracer_provider=self.tracer_provider)
        logger.info("Logging instrumentation enabled")

    def shutdown(self) -> None:
        """Flush pending spans and release the exporter."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception:
            logger.exception("Error during telemetry shutdown")
        else:
            logger.info("Telemetry shutdown complete")


_telemetry: TelemetryConfig | None = None


def get_telemetry() -> TelemetryConfig | None:
    """Return the process telemetry instance (set at startup)."""
    return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    global _telemetry
    _telemetry = telemetry


def configure_telemetry(app: FastAPI, settings: Settings) -> TelemetryConfig:
    """Install tracing and instrument the app. Call from create_app, before serving."""
    telemetry = TelemetryConfig.from_settings(settings)
    telemetry.setup_telemetry(
        exporter_type=settings.telemetry_exporter,
        otlp_endpoint=settings.telemetry_otlp_endpoint,
        sample_rate=settings.telemetry_sample_rate,
    )
    telemetry.instrument_fastapi(app)
    telemetry.instrument_logging()
    if settings.notification_backend == "redis":
        telemetry.instrument_redis()
    set_telemetry(telemetry)
    return telemetry
