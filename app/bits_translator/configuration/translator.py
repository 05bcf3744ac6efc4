"""Translator feature settings."""

from typing import Optional

from pydantic import Field

from bits_translator.configuration.base import FeatureSettings


class TranslatorSettings(FeatureSettings):
    """Default translator behavior when no explicit options are given.

    Environment Variables:
        TRANSLATOR_LANG: Language code used when neither the options nor
            the document provide one
        TRANSLATOR_FALLBACK_LANG: Language consulted for missing keys
        TRANSLATOR_DISABLE_JS_OPTIONS: Skip scanning the document for
            embedded translation fragments

    Example:
        ```python
        from bits_translator.services import get_settings

        lang = get_settings().translator.TRANSLATOR_LANG
        ```
    """

    TRANSLATOR_LANG: Optional[str] = Field(default=None, alias="TRANSLATOR_LANG")
    TRANSLATOR_FALLBACK_LANG: Optional[str] = Field(
        default=None, alias="TRANSLATOR_FALLBACK_LANG"
    )
    TRANSLATOR_DISABLE_JS_OPTIONS: bool = Field(
        default=False, alias="TRANSLATOR_DISABLE_JS_OPTIONS"
    )
