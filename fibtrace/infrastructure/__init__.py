"""
Infrastructure layer package.

Adapters implementing domain ports and wiring external collaborators
(standard input, the OpenTelemetry SDK).
"""
