"""Host plugin manager."""

from functools import lru_cache

import pluggy
import structlog

from bits_translator import hookspecs

# Singleton hookimpl marker for the host application
hookimpl = pluggy.HookimplMarker("bits")

logger = structlog.get_logger()


@lru_cache(maxsize=1)
def get_host_plugin_manager() -> pluggy.PluginManager:
    """Get the host lifecycle plugin manager singleton.

    Returns:
        PluginManager configured with the host lifecycle hook specs.
    """
    pm = pluggy.PluginManager("bits")
    pm.add_hookspecs(hookspecs.host)

    logger.info("host_plugin_manager_created")
    return pm
