"""SDK configuration.

Usage:
    from callsdk.config import get_settings

    settings = get_settings()
    account_sid = settings.client.account_sid
"""

from functools import lru_cache

from callsdk.config.settings import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings shared by the process, built on first use.

    Call `reload_settings()` after changing config files or CALLSDK_*
    variables.
    """
    return Settings()


def reload_settings() -> Settings:
    """Drop the cached settings and build them again."""
    get_settings.cache_clear()
    return get_settings()


__all__ = ["get_settings", "reload_settings", "Settings"]
