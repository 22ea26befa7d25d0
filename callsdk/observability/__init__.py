"""Observability: structured logging and metrics.

Provides logging primitives using structlog and request metrics using
Prometheus.
"""
