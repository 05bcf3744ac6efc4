"""Host application plugin for the translator.

Registers the translator services on the host's dependency container and
extends every component with a ``translator`` getter and a ``t`` shortcut.

Usage:
    pm = get_host_plugin_manager()
    pm.register(TranslatorPlugin({"lang": "en", "phrases": {...}}))
    pm.hook.app_initialized(app=app)
    pm.hook.extend_components(inject=app.inject)
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from bits_translator.configuration import Settings
from bits_translator.i18n.factory import TranslatorFactory
from bits_translator.i18n.models import TranslateArgs, TranslateOptions
from bits_translator.i18n.options import TranslatorOptions
from bits_translator.i18n.translator import Translator
from bits_translator.logging import configure_logging, get_module_logger
from bits_translator.services.plugins import hookimpl

# Attribute holding the per-component translator
COMPONENT_TRANSLATOR_ATTR = "_translator"


@dataclass(frozen=True)
class ComponentExtension:
    """A member injected into host components.

    Attributes:
        callback: Called with the component to produce the member value.
        destructor: Called with the component when it is destroyed.
        getter: Whether the member is exposed as a property.
    """

    callback: Callable[[Any], Any]
    destructor: Optional[Callable[[Any], None]] = None
    getter: bool = False


def component_translator(component: Any) -> Translator:
    """Return the component's translator, creating it on first access.

    The translator is bound to the ``lang`` attribute of the component's
    mount element, or of the document root when it has no mount, falling
    back to the global language.
    """
    translator = getattr(component, COMPONENT_TRANSLATOR_ATTR, None)
    if translator is None:
        factory: TranslatorFactory = component.di.get("translator_factory")
        translator = factory.require_translator(getattr(component, "mount", None))
        setattr(component, COMPONENT_TRANSLATOR_ATTR, translator)
    return translator


def release_component_translator(component: Any) -> None:
    """Drop the translator cached on a destroyed component."""
    if hasattr(component, COMPONENT_TRANSLATOR_ATTR):
        delattr(component, COMPONENT_TRANSLATOR_ATTR)


def translate(
    component: Any,
    key: str,
    args: Optional[TranslateArgs] = None,
    options: Union[TranslateOptions, Mapping[str, Any], None] = None,
) -> str:
    """Translate through the component's translator."""
    return component_translator(component).translate(key, args, options)


class TranslatorPlugin:
    """Wires the translator into the host application lifecycle.

    Creating the plugin configures logging for the host process.
    """

    def __init__(
        self,
        options: Union[TranslatorOptions, Mapping[str, Any], None] = None,
        settings: Optional[Settings] = None,
    ):
        configure_logging(settings)
        self._options = options or {}
        self._settings = settings

    @hookimpl
    def app_initialized(self, app: Any) -> None:
        document = getattr(app, "document", None)
        app.di.set_factory(
            "translator_factory",
            lambda di: TranslatorFactory(
                self._options, document=document, settings=self._settings
            ),
        )
        app.di.set_factory(
            "translator",
            lambda di: di.get("translator_factory").require_global_translator(),
        )
        get_module_logger().info("translator_services_registered")

    @hookimpl
    def extend_components(self, inject: Callable[[str, Any], None]) -> None:
        inject("t", translate)
        inject(
            "translator",
            ComponentExtension(
                callback=component_translator,
                destructor=release_component_translator,
                getter=True,
            ),
        )
