from fibtrace.infrastructure.tracing.provider import (
    build_resource,
    build_span_exporter,
    build_tracer_provider,
)

__all__ = [
    "build_resource",
    "build_span_exporter",
    "build_tracer_provider",
]
