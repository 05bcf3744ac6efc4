"""Shared phrase and plural rule storage.

One TranslatorContext is created per application and shared by every
Translator view. Mutations are visible to all views immediately.
"""

from typing import Any, Dict, List, Mapping, Optional

import structlog

from bits_translator.i18n.models import (
    LookupKind,
    PhraseValue,
    PluralRule,
    default_plural_rule,
)
from bits_translator.i18n.resolvers import LanguageResolver

logger = structlog.get_logger()


class TranslatorContext:
    """Holds the flattened phrase buckets and plural rules per language.

    Attributes:
        resolver: LanguageResolver caching language lookups for this context.
    """

    def __init__(self, lang: str, fallback_lang: str):
        """Initialize TranslatorContext.

        Args:
            lang: The globally configured language code.
            fallback_lang: Language consulted when a key is missing.
        """
        self._lang = lang
        self._fallback_lang = fallback_lang
        self._phrases: Dict[str, Dict[str, PhraseValue]] = {}
        self._plural_rules: Dict[str, PluralRule] = {}
        self.resolver = LanguageResolver()

    @property
    def lang(self) -> str:
        """The globally configured language code."""
        return self._lang

    @property
    def fallback_lang(self) -> str:
        """The configured fallback language code."""
        return self._fallback_lang

    @property
    def languages(self) -> List[str]:
        """Language codes that currently hold a phrase bucket."""
        return list(self._phrases.keys())

    def add_phrases(self, lang: str, phrases: Mapping[str, Any]) -> None:
        """Merge a (nested) phrase tree into the bucket of a language.

        Nested mappings are flattened into dot separated keys, so
        ``{"a": {"b": "x"}}`` is stored as ``{"a.b": "x"}``. Existing keys
        are overwritten.

        Args:
            lang: The language code to add the phrases to.
            phrases: The phrases to add.
        """
        bucket = self._phrases.setdefault(lang, {})
        added = self._flatten(phrases, "", bucket)
        self.resolver.clear()
        logger.debug("phrases_added", lang=lang, phrase_count=added)

    def add_plural_rule(self, lang: str, rule: PluralRule) -> None:
        """Set the pluralization rule of a language.

        Args:
            lang: The language code to set the rule for.
            rule: Callable returning the plural index for a count.

        Raises:
            TypeError: If rule is not callable.
        """
        if not callable(rule):
            raise TypeError(f"Plural rule for {lang} must be callable")
        self._plural_rules[lang] = rule
        self.resolver.clear()
        logger.debug("plural_rule_added", lang=lang)

    def get_phrases_for(self, lang: str) -> Mapping[str, PhraseValue]:
        """Return the phrase bucket matching a language code.

        "en-US" gets "en" if "en-US" was not registered.

        Args:
            lang: The language code to find the phrases for.

        Returns:
            The matching bucket, or an empty mapping.
        """
        key = self.resolver.resolve(self._phrases, lang, LookupKind.PHRASE)
        return self._phrases[key] if key is not None else {}

    def get_plural_index(self, lang: str, count: Optional[int]) -> int:
        """Return the plural form index for a count in a language.

        Falls back to ``0 if count == 1 else 1`` when no rule matches.

        Args:
            lang: The language code to retrieve the index for.
            count: The count to calculate the index for.
        """
        key = self.resolver.resolve(self._plural_rules, lang, LookupKind.PLURAL)
        if key is None:
            return default_plural_rule(count)
        return self._plural_rules[key](count)

    def _flatten(
        self,
        tree: Mapping[str, Any],
        path: str,
        bucket: Dict[str, PhraseValue],
    ) -> int:
        count = 0
        for key, value in tree.items():
            child = f"{path}.{key}" if path else str(key)
            if isinstance(value, Mapping):
                count += self._flatten(value, child, bucket)
                continue
            bucket[child] = value
            count += 1
        return count
