"""Translation view for retrieving and formatting translated messages.

A Translator is bound to one language code and a shared TranslatorContext.
Translating never raises: missing keys and plural forms degrade to the key
itself or to the first plural form and are reported as warnings.
"""

import re
from typing import Any, Mapping, Optional, Sequence, Union

import structlog

from bits_translator.i18n.context import TranslatorContext
from bits_translator.i18n.models import (
    PluralRule,
    TranslateArgs,
    TranslateOptions,
)

logger = structlog.get_logger()

_POSITIONAL = re.compile(r"%([ds])")
_MARKER = re.compile(r"{{\s*(\w+)\s*}}")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _parse_int(value: Any) -> str:
    """Read the leading integer of a value, "NaN" if there is none."""
    match = _LEADING_INT.match(str(value))
    return str(int(match.group(1))) if match else "NaN"


class Translator:
    """Language bound view on a TranslatorContext.

    Attributes:
        context: The shared context holding phrases and plural rules.
    """

    def __init__(self, lang: str, context: TranslatorContext):
        self._lang = lang
        self.context = context

    @property
    def lang(self) -> str:
        """The language code this translator is bound to."""
        return self._lang

    @property
    def lang_short(self) -> str:
        """The two letter, lower-cased form of the bound language code."""
        return self._lang[:2].lower()

    @property
    def fallback_lang(self) -> str:
        """The configured fallback language code."""
        return self.context.fallback_lang

    def translate(
        self,
        key: str,
        args: Optional[TranslateArgs] = None,
        options: Union[TranslateOptions, Mapping[str, Any], None] = None,
    ) -> str:
        """Translate a key and apply pluralization and arguments.

        Args:
            key: The phrase key to translate.
            args: A sequence of values for ``%s``/``%d`` placeholders, or a
                mapping of values for ``{{ name }}`` placeholders.
            options: Optional language and count overrides.

        Returns:
            The translated string, or the key itself if no phrase exists in
            the requested or the fallback language.
        """
        opts = TranslateOptions.coerce(options)
        lang = opts.lang or self._lang

        phrases = self.context.get_phrases_for(lang)
        if phrases.get(key) is None:
            phrases = self.context.get_phrases_for(self.fallback_lang)

        label = phrases.get(key)
        if label is None:
            logger.warning("missing_translation", key=key, lang=lang)
            return key

        named = isinstance(args, Mapping)

        if _is_sequence(label):
            count = opts.count
            if count is None:
                count = args.get("count") if named else 1
            label = str(self._select_plural(key, label, lang, count))
            if not named:
                label = self._replace_markers(label, {"count": count})
        else:
            label = str(label)

        if named:
            return self._replace_markers(label, args)
        if _is_sequence(args):
            return self._sprintf(label, args)
        return label

    def add_phrases(self, lang: str, phrases: Mapping[str, Any]) -> "Translator":
        """Add phrases for a language.

        Note: This affects ALL translators sharing this context.
        """
        self.context.add_phrases(lang, phrases)
        return self

    def add_plural_rule(self, lang: str, rule: PluralRule) -> "Translator":
        """Set the plural rule of a language.

        Note: This affects ALL translators sharing this context.
        """
        self.context.add_plural_rule(lang, rule)
        return self

    def _select_plural(
        self, key: str, forms: Sequence[str], lang: str, count: Any
    ) -> str:
        index = self.context.get_plural_index(lang, count)
        if 0 <= index < len(forms) and forms[index] is not None:
            return forms[index]

        logger.warning(
            "missing_plural_index",
            key=key,
            lang=lang,
            index=index,
            form_count=len(forms),
        )
        if forms and forms[0] is not None:
            return forms[0]
        return key

    def _sprintf(self, value: str, args: Sequence[Any]) -> str:
        """Replace ``%s`` and ``%d`` placeholders in order.

        Placeholders beyond the number of arguments are left untouched.
        """
        position = 0

        def replace(match: "re.Match[str]") -> str:
            nonlocal position
            if position >= len(args):
                return match.group(0)
            arg = args[position]
            position += 1
            return _parse_int(arg) if match.group(1) == "d" else str(arg)

        return _POSITIONAL.sub(replace, value)

    def _replace_markers(self, value: str, args: Mapping[str, Any]) -> str:
        """Replace ``{{ name }}`` markers, keeping unknown ones as they are."""

        def replace(match: "re.Match[str]") -> str:
            arg = args.get(match.group(1))
            return match.group(0) if arg is None else str(arg)

        return _MARKER.sub(replace, value)
