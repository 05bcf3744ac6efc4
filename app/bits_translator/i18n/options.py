"""Translator startup options and phrase shape normalization.

Phrases can be supplied either keyed by language (``{"en": {...}, "de":
{...}}``) or as a single tree meant for one language. ``prepare_phrases``
brings both shapes into the keyed-by-language form. Callers can state the
shape with ``phrases_by_language``; without it the shape is guessed: a tree
whose top-level keys are all exactly two characters long is taken to be
keyed by language. The guess is best-effort, a single-language tree with
only two character keys is misread.
"""

from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class TranslatorOptions(BaseModel):
    """Validated translator configuration.

    Field names are snake_case; the camelCase names used in embedded JSON
    fragments are accepted as aliases.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    lang: Optional[str] = None
    fallback_lang: Optional[str] = Field(default=None, alias="fallbackLang")
    phrases: Dict[str, Any] = Field(default_factory=dict)
    plural_rules: Dict[str, Callable[[int], int]] = Field(
        default_factory=dict, alias="pluralRules"
    )
    disable_js_options: bool = Field(default=False, alias="disableJsOptions")
    phrases_by_language: Optional[bool] = Field(
        default=None, alias="phrasesByLanguage"
    )


_ALIASES = {
    field.alias: name
    for name, field in TranslatorOptions.model_fields.items()
    if field.alias
}


def canonical_options(raw: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Copy an options mapping, renaming camelCase keys to field names."""
    return {_ALIASES.get(key, key): value for key, value in (raw or {}).items()}


def is_keyed_by_language(phrases: Mapping[str, Any]) -> bool:
    """Guess whether a phrase tree is keyed by two letter language codes."""
    return all(len(key) == 2 for key in phrases)


def prepare_phrases(
    data: Mapping[str, Any],
    lang: str,
    by_language: Optional[bool] = None,
) -> Dict[str, Any]:
    """Return a copy of ``data`` with ``phrases`` keyed by language.

    Args:
        data: Options mapping holding a ``phrases`` entry.
        lang: Language the phrases belong to if they are a single tree.
        by_language: Whether the phrases are keyed by language. Guessed
            from the keys when None.

    Returns:
        The options with ``phrases`` in ``{lang: tree}`` form; an empty
        mapping when ``phrases`` is missing or not a mapping.
    """
    prepared = dict(data)
    phrases = prepared.get("phrases")

    if not isinstance(phrases, Mapping):
        prepared["phrases"] = {}
        return prepared

    if by_language is None:
        by_language = is_keyed_by_language(phrases)

    prepared["phrases"] = dict(phrases) if by_language else {lang: phrases}
    return prepared


def merge_options(
    base: Mapping[str, Any], extra: Mapping[str, Any]
) -> Dict[str, Any]:
    """Recursively merge two option mappings, values of ``extra`` win."""
    merged = dict(base)
    for key, value in extra.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_options(current, value)
        else:
            merged[key] = value
    return merged
