"""Fibonacci bounded context: domain model."""
