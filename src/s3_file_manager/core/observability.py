"""Observability setup for s3-file-manager.

Logging goes through structlog on top of stdlib logging. Tracing uses
OpenTelemetry; when it is disabled, spans come from the no-op global
provider and cost nothing.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from .config import settings


def setup_tracing() -> None:
    """Set up OpenTelemetry tracing."""
    if not settings.otel_enabled:
        return

    resource = Resource.create({"service.name": settings.otel_service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)


def setup_logging() -> None:
    """Set up structured logging with structlog.

    ``S3FM_LOG_FORMAT=console`` switches from JSON lines to coloured
    key=value output for interactive use.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level.upper()),
    )

    if settings.log_format == "console":
        renderer: Any = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Get a logger instance."""
    return structlog.get_logger(name)


def get_tracer(name: str) -> trace.Tracer:
    """Get a tracer from the global provider."""
    return trace.get_tracer(name)


@contextmanager
def s3_span(
    tracer: trace.Tracer, operation: str, bucket: str, **attributes: str
) -> Iterator[Any]:
    """Wrap one S3 request in a span named ``s3.<operation>``.

    Extra keyword arguments become ``s3.<name>`` span attributes. Exceptions
    are recorded on the span and re-raised unchanged.
    """
    span_attributes = {"s3.bucket": bucket}
    span_attributes.update({f"s3.{k}": v for k, v in attributes.items()})
    with tracer.start_as_current_span(
        f"s3.{operation}", attributes=span_attributes
    ) as span:
        yield span


# Initialize on import
setup_logging()
setup_tracing()
