"""Language code resolution for phrase buckets and plural rules.

A requested code matches a registered one either exactly or by its
lower-cased two letter prefix, so "en-US" finds "en" when no "en-US" bucket
exists.
"""

from typing import Dict, Mapping, Optional, Union

import structlog

from bits_translator.i18n.models import LookupKind

logger = structlog.get_logger()


class _Miss:
    """Marker stored in the cache for codes without a match."""

    def __repr__(self) -> str:
        return "<miss>"


MISS = _Miss()


class LanguageResolver:
    """Memoizing lookup of language codes in language keyed mappings.

    Results are cached per lookup kind and requested code, misses included.
    The owner must call ``clear()`` whenever the looked up mappings change.
    """

    def __init__(self):
        self._cache: Dict[LookupKind, Dict[str, Union[str, _Miss]]] = {}

    def resolve(
        self,
        entries: Mapping[str, object],
        lang: str,
        kind: LookupKind,
    ) -> Optional[str]:
        """Find the key of ``entries`` that best matches ``lang``.

        Args:
            entries: Mapping keyed by language code.
            lang: Requested language code.
            kind: Cache namespace of this lookup.

        Returns:
            The matching key, or None if neither the exact code nor its two
            letter prefix is registered.
        """
        kind = LookupKind(kind)
        cache = self._cache.setdefault(kind, {})

        if lang in cache:
            cached = cache[lang]
            logger.debug("language_cache_hit", kind=kind.value, lang=lang)
            return None if cached is MISS else cached

        resolved: Union[str, _Miss] = MISS
        if lang in entries:
            resolved = lang
        else:
            short = lang[:2].lower()
            if short in entries:
                resolved = short

        cache[lang] = resolved
        return None if resolved is MISS else resolved

    def clear(self) -> None:
        """Forget every cached resolution in all namespaces."""
        self._cache = {}

    def cached(self, kind: LookupKind) -> Dict[str, Optional[str]]:
        """Snapshot of the cache for one namespace, misses as None."""
        return {
            lang: (None if value is MISS else value)
            for lang, value in self._cache.get(kind, {}).items()
        }
