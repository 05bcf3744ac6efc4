"""
Factory functions for application-scoped singletons.
"""

from functools import lru_cache

from bits_translator.configuration import Settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that change the environment should call ``get_settings.cache_clear()``.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
