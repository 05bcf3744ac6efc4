"""i18n system - phrase storage, language resolution and message formatting.

Main components:
- models: PluralRule, TranslateOptions, LookupKind, TranslationNode
- resolvers: LanguageResolver for exact / two letter language matching
- context: TranslatorContext holding phrases and plural rules
- translator: Translator view with pluralization and placeholder substitution
- options: TranslatorOptions and phrase shape normalization
- loader: embedded ``script[data-bit-translation]`` fragments
- factory: TranslatorFactory for global and per-mount translators
- plugin: TranslatorPlugin host integration
"""

from bits_translator.i18n.context import TranslatorContext
from bits_translator.i18n.factory import TranslatorFactory
from bits_translator.i18n.loader import (
    HTMLDocument,
    TranslationDocument,
    find_document_options,
    parse_fragment,
)
from bits_translator.i18n.models import (
    LookupKind,
    PluralRule,
    TranslateOptions,
    TranslationNode,
    default_plural_rule,
)
from bits_translator.i18n.options import TranslatorOptions, prepare_phrases
from bits_translator.i18n.plugin import ComponentExtension, TranslatorPlugin
from bits_translator.i18n.resolvers import LanguageResolver
from bits_translator.i18n.translator import Translator

__all__ = [
    "LookupKind",
    "PluralRule",
    "TranslateOptions",
    "TranslationNode",
    "default_plural_rule",
    "LanguageResolver",
    "TranslatorContext",
    "Translator",
    "TranslatorOptions",
    "prepare_phrases",
    "HTMLDocument",
    "TranslationDocument",
    "parse_fragment",
    "find_document_options",
    "TranslatorFactory",
    "TranslatorPlugin",
    "ComponentExtension",
]
