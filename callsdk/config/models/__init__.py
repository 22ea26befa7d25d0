"""Configuration model exports.

    from callsdk.config.models import ClientConfig, ObservabilityConfig
"""

from callsdk.config.models.client import ClientConfig
from callsdk.config.models.observability import LoggingConfig, ObservabilityConfig

__all__ = [
    "ClientConfig",
    "LoggingConfig",
    "ObservabilityConfig",
]
