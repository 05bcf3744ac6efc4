"""Application services: settings provider and plugin manager."""

from bits_translator.services.plugins import get_host_plugin_manager, hookimpl
from bits_translator.services.providers import get_settings

__all__ = [
    "get_settings",
    "get_host_plugin_manager",
    "hookimpl",
]
