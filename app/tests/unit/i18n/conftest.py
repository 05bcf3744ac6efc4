"""Feature-level fixtures for i18n system tests."""

import pytest

from bits_translator.i18n import Translator, TranslatorContext
from tests.factories.i18n import make_context, make_phrases


@pytest.fixture
def context() -> TranslatorContext:
    """Context with the sample English phrases and "en" as fallback."""
    return make_context(lang="en")


@pytest.fixture
def translator(context) -> Translator:
    """Translator bound to "en"."""
    return Translator("en", context)


@pytest.fixture
def bilingual_context() -> TranslatorContext:
    """Context with English and German phrases, English as fallback."""
    ctx = make_context(
        lang="de",
        fallback_lang="en",
        phrases={"greeting": "Hallo", "welcome": "Hallo {{name}}"},
    )
    ctx.add_phrases("en", make_phrases())
    return ctx
