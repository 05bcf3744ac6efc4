"""Factory for translator instances.

Collects the startup options, builds the shared TranslatorContext once and
hands out Translator views bound to the global language or to the language
of a single mount element.
"""

from typing import Any, Dict, Mapping, Optional, Protocol, Union

from bits_translator.configuration import Settings
from bits_translator.i18n.context import TranslatorContext
from bits_translator.i18n.loader import TranslationDocument, find_document_options
from bits_translator.i18n.options import (
    TranslatorOptions,
    canonical_options,
    prepare_phrases,
)
from bits_translator.i18n.translator import Translator
from bits_translator.logging import get_module_logger
from bits_translator.services.providers import get_settings

DEFAULT_LANG = "en"


class MountElement(Protocol):
    """Element a component is mounted on, e.g. a BeautifulSoup tag."""

    def get(self, key: str, default: Any = None) -> Any: ...


class TranslatorFactory:
    """Creates translators sharing one lazily built context.

    Option precedence for the language: explicit options, then the
    ``TRANSLATOR_LANG`` setting, then the document's root ``lang``
    attribute, then "en". The fallback language defaults to the
    ``TRANSLATOR_FALLBACK_LANG`` setting, then to the language.

    Usage:
        factory = TranslatorFactory({"lang": "de", "phrases": {"hello": "Hallo"}})
        factory.require_global_translator().translate("hello")
    """

    def __init__(
        self,
        options: Union[TranslatorOptions, Mapping[str, Any], None] = None,
        document: Optional[TranslationDocument] = None,
        settings: Optional[Settings] = None,
    ):
        """Initialize TranslatorFactory.

        Args:
            options: Startup options, snake_case or camelCase keys.
            document: Document to read the root language and embedded
                fragments from.
            settings: Settings used for defaults (default: get_settings()).
        """
        self._options: Optional[Dict[str, Any]] = self._raw_options(options)
        self._document = document
        self._settings = settings
        self._context: Optional[TranslatorContext] = None

    @property
    def context(self) -> TranslatorContext:
        """The context shared by all translators of this factory."""
        if self._context is None:
            self._context = self._initialize_context()
        return self._context

    def require_global_translator(self) -> Translator:
        """Return a translator bound to the global language."""
        ctx = self.context
        return Translator(ctx.lang, ctx)

    def require_translator(self, mount: Optional[MountElement] = None) -> Translator:
        """Return a translator bound to the language of a mount element.

        Args:
            mount: Element with a ``lang`` attribute. None means the
                document root. The global language is used when the element
                has no ``lang``.
        """
        ctx = self.context
        if mount is not None:
            lang = mount.get("lang")
        elif self._document is not None:
            lang = self._document.lang
        else:
            lang = None
        return Translator(lang or ctx.lang, ctx)

    @staticmethod
    def _raw_options(
        options: Union[TranslatorOptions, Mapping[str, Any], None],
    ) -> Dict[str, Any]:
        if isinstance(options, TranslatorOptions):
            return {name: getattr(options, name) for name in options.model_fields_set}
        return canonical_options(options)

    def _initialize_context(self) -> TranslatorContext:
        log = get_module_logger()
        settings = self._settings or get_settings()
        defaults = settings.translator

        options = self._options or {}
        self._options = None

        document_lang = self._document.lang if self._document is not None else None
        lang = (
            options.get("lang")
            or defaults.TRANSLATOR_LANG
            or document_lang
            or DEFAULT_LANG
        )

        options = prepare_phrases(options, lang, options.get("phrases_by_language"))

        disable_js_options = options.get(
            "disable_js_options", defaults.TRANSLATOR_DISABLE_JS_OPTIONS
        )
        if not disable_js_options and self._document is not None:
            options = find_document_options(options, self._document, lang)

        if not options.get("lang"):
            options["lang"] = lang

        validated = TranslatorOptions.model_validate(options)
        fallback_lang = (
            validated.fallback_lang
            or defaults.TRANSLATOR_FALLBACK_LANG
            or validated.lang
        )

        ctx = TranslatorContext(validated.lang, fallback_lang)

        for _lang, phrases in validated.phrases.items():
            if not isinstance(phrases, Mapping):
                log.warning("invalid_phrase_tree", lang=_lang, expected="dict")
                continue
            ctx.add_phrases(_lang, phrases)

        for _lang, rule in validated.plural_rules.items():
            ctx.add_plural_rule(_lang, rule)

        log.info(
            "translator_context_created",
            lang=ctx.lang,
            fallback_lang=ctx.fallback_lang,
            languages=ctx.languages,
        )
        return ctx
