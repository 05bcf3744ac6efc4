"""Hook specifications for the host application lifecycle."""

from typing import Any, Callable

import pluggy

hookspec = pluggy.HookspecMarker("bits")


@hookspec
def app_initialized(app: Any) -> None:
    """Called once the host application is ready to accept registrations.

    Args:
        app: Host application exposing a ``di`` container with
            ``set_factory(name, factory)`` and, optionally, a ``document``.
    """


@hookspec
def extend_components(inject: Callable[[str, Any], None]) -> None:
    """Add members to every component created by the host.

    Args:
        inject: Callable taking a member name and either a plain callable
            or a ``ComponentExtension``.
    """
