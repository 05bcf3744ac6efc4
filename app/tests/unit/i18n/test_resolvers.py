"""Tests for bits_translator.i18n.resolvers module."""

# pylint: disable=protected-access

from bits_translator.i18n import LanguageResolver, LookupKind


class TestLanguageResolver:
    """Tests for LanguageResolver."""

    def test_exact_match(self):
        """resolve() prefers the exact language code."""
        resolver = LanguageResolver()
        entries = {"en": {}, "en-US": {}}
        assert resolver.resolve(entries, "en-US", LookupKind.PHRASE) == "en-US"

    def test_two_letter_prefix_match(self):
        """resolve() folds "en-US" to "en" when only "en" exists."""
        resolver = LanguageResolver()
        assert resolver.resolve({"en": {}}, "en-US", LookupKind.PHRASE) == "en"

    def test_prefix_is_lower_cased(self):
        """resolve() lower-cases the two letter prefix."""
        resolver = LanguageResolver()
        assert resolver.resolve({"de": {}}, "DE-AT", LookupKind.PHRASE) == "de"

    def test_exact_match_is_case_sensitive(self):
        """resolve() does not fold case for full codes."""
        resolver = LanguageResolver()
        assert resolver.resolve({"en-us": {}}, "en-US", LookupKind.PHRASE) is None

    def test_no_match(self):
        """resolve() returns None when nothing matches."""
        resolver = LanguageResolver()
        assert resolver.resolve({"en": {}}, "fr-CA", LookupKind.PHRASE) is None

    def test_hit_is_cached(self):
        """resolve() memoizes matches per requested code."""
        resolver = LanguageResolver()
        resolver.resolve({"en": {}}, "en-GB", LookupKind.PHRASE)
        assert resolver.cached(LookupKind.PHRASE) == {"en-GB": "en"}

    def test_miss_is_cached(self):
        """resolve() records misses so they are not rescanned."""
        resolver = LanguageResolver()
        resolver.resolve({"en": {}}, "fr", LookupKind.PHRASE)
        assert resolver.cached(LookupKind.PHRASE) == {"fr": None}
        # A cached miss holds until the cache is cleared
        assert resolver.resolve({"fr": {}}, "fr", LookupKind.PHRASE) is None

    def test_kinds_are_independent(self):
        """Phrase and plural lookups use separate cache namespaces."""
        resolver = LanguageResolver()
        assert resolver.resolve({"en": {}}, "en", LookupKind.PHRASE) == "en"
        assert resolver.resolve({}, "en", LookupKind.PLURAL) is None
        assert resolver.cached(LookupKind.PHRASE) == {"en": "en"}
        assert resolver.cached(LookupKind.PLURAL) == {"en": None}

    def test_accepts_kind_value(self):
        """resolve() accepts the plain string value of a LookupKind."""
        resolver = LanguageResolver()
        assert resolver.resolve({"en": {}}, "en", "plural") == "en"
        assert resolver.cached(LookupKind.PLURAL) == {"en": "en"}

    def test_clear(self):
        """clear() drops every namespace."""
        resolver = LanguageResolver()
        resolver.resolve({"en": {}}, "en", LookupKind.PHRASE)
        resolver.resolve({"en": {}}, "en", LookupKind.PLURAL)
        resolver.clear()
        assert resolver.cached(LookupKind.PHRASE) == {}
        assert resolver.cached(LookupKind.PLURAL) == {}
