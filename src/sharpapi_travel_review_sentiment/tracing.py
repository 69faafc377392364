from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

_provider: TracerProvider | None = None


def setup_tracing(service_name: str, otlp_endpoint: str | None = None) -> TracerProvider:
    """
    Registers a global tracer provider that ships SharpAPI request spans over
    OTLP/gRPC. Only the first call has an effect; later calls return the
    provider installed by it.

    When ``otlp_endpoint`` is None the exporter falls back to the standard
    ``OTEL_EXPORTER_OTLP_*`` environment variables.
    """
    global _provider
    if _provider is not None:
        return _provider

    provider = TracerProvider(resource=Resource(attributes={SERVICE_NAME: service_name}))
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))

    trace.set_tracer_provider(provider)
    _provider = provider
    return provider


def get_tracer(module_name: str):
    """Gets a tracer instance for a specific module."""
    return trace.get_tracer(module_name)
