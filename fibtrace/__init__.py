"""
fibtrace: Fibonacci calculator instrumented with OpenTelemetry.

Application package root. Laid out with hexagonal architecture
(ports & adapters), the same way as a larger service would be.

Layers:
    - domain: Pure Fibonacci logic, errors, ports (ABCs).
    - application: The traced request loop.
    - infrastructure: Adapters (stdin reader, OpenTelemetry provider).
    - core: Configuration.
    - shared: Cross-cutting concerns (logging).
"""

__version__ = "0.1.0"
