"""Translation models for the i18n system.

Defines the value types shared by the context, the translator and the
configuration loader.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, Union

PluralRule = Callable[[int], int]
"""Maps a count to the index of the plural form to use."""

PhraseValue = Union[str, Sequence[str]]
"""A single phrase, or its plural forms ordered by plural index."""

TranslateArgs = Union[Sequence[Any], Mapping[str, Any]]
"""Positional (``%s``/``%d``) or named (``{{ name }}``) arguments."""


def default_plural_rule(count: int) -> int:
    """Two-form rule used when a language has no registered rule."""
    return 0 if count == 1 else 1


class LookupKind(str, Enum):
    """Namespaces of the language resolution cache.

    Phrases and plural rules are registered independently, so a language
    may resolve differently in each of them.
    """

    PHRASE = "phrase"
    PLURAL = "plural"


@dataclass(frozen=True)
class TranslateOptions:
    """Per-call overrides for ``Translator.translate``.

    Attributes:
        lang: Language code to translate into instead of the bound one.
        count: Count used to select the plural form.
    """

    lang: Optional[str] = None
    count: Optional[int] = None

    @classmethod
    def coerce(
        cls, options: Union["TranslateOptions", Mapping[str, Any], None]
    ) -> "TranslateOptions":
        """Accept an instance, a plain mapping or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls(lang=options.get("lang"), count=options.get("count"))


@dataclass(frozen=True)
class TranslationNode:
    """One embedded translation configuration carrier.

    Attributes:
        content: Raw text content, expected to be JSON.
        lang: The carrier's own ``lang`` attribute, if any.
    """

    content: str
    lang: Optional[str] = None
