"""Tests for infrastructure.i18n.resolvers module."""

import pytest

from infrastructure.i18n import Locale, LocaleResolver
from infrastructure.i18n.resolvers import parse_accept_language


class TestParseAcceptLanguage:
    """Tests for parse_accept_language()."""

    def test_orders_by_quality(self):
        assert parse_accept_language("en;q=0.5,nl-BE,fr;q=0.8") == [
            ("nl-BE", 1.0),
            ("fr", 0.8),
            ("en", 0.5),
        ]

    def test_invalid_quality_defaults_to_one(self):
        assert parse_accept_language("en;q=invalid,fr") == [("en", 1.0), ("fr", 1.0)]

    def test_skips_empty_parts(self):
        assert parse_accept_language("en,, ,fr") == [("en", 1.0), ("fr", 1.0)]

    def test_drops_zero_quality(self):
        """q=0 marks a range as not acceptable."""
        assert parse_accept_language("en;q=0,fr,de;q=-1") == [("fr", 1.0)]
        assert parse_accept_language("en;q=0.0") == []


class TestLocaleResolver:
    """Tests for LocaleResolver service."""

    def test_resolver_initialization(self):
        """LocaleResolver defaults to nl and every Locale."""
        resolver = LocaleResolver()
        assert resolver.default_locale == Locale.NL
        assert resolver.supported_locales == list(Locale)

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/en", Locale.EN),
            ("/en/about", Locale.EN),
            ("de/contact", Locale.DE),
            ("/nl/", Locale.NL),
            ("/", Locale.NL),
            ("", Locale.NL),
            (None, Locale.NL),
            ("/pt/page", Locale.NL),
            ("/EN/about", Locale.NL),
            ("/english", Locale.NL),
        ],
    )
    def test_resolve_from_path(self, path, expected):
        """resolve_from_path() uses the first path segment."""
        assert LocaleResolver().resolve_from_path(path) == expected

    def test_resolve_from_path_respects_supported(self):
        """Locales outside supported_locales are not picked from the path."""
        resolver = LocaleResolver(
            default_locale=Locale.EN, supported_locales=[Locale.EN, Locale.NL]
        )
        assert resolver.resolve_from_path("/fr/page") == Locale.EN

    def test_resolve_from_header_simple(self):
        assert LocaleResolver().resolve_from_header("en") == Locale.EN

    def test_resolve_from_header_region_matches_language(self):
        """A regional tag matches its language."""
        assert LocaleResolver().resolve_from_header("fr-BE") == Locale.FR

    def test_resolve_from_header_case_insensitive(self):
        assert LocaleResolver().resolve_from_header("DE-de") == Locale.DE

    def test_resolve_from_header_quality_ordering(self):
        """resolve_from_header() uses quality for ordering."""
        resolver = LocaleResolver()
        assert resolver.resolve_from_header("en;q=0.8,it;q=0.9") == Locale.IT

    def test_resolve_from_header_skips_unsupported(self):
        resolver = LocaleResolver()
        assert resolver.resolve_from_header("pt-BR,pt;q=0.9,es;q=0.5") == Locale.ES

    def test_resolve_from_header_wildcard_ignored(self):
        resolver = LocaleResolver(default_locale=Locale.EN)
        assert resolver.resolve_from_header("*") == Locale.EN

    def test_resolve_from_header_no_match_default(self):
        resolver = LocaleResolver(default_locale=Locale.EN)
        assert resolver.resolve_from_header("xx") == Locale.EN

    def test_resolve_from_header_zero_quality_not_acceptable(self):
        resolver = LocaleResolver(default_locale=Locale.NL)
        assert resolver.resolve_from_header("en;q=0") == Locale.NL
        assert resolver.resolve_from_header("en;q=0,fr;q=0.5") == Locale.FR

    def test_resolve_from_header_empty(self):
        assert LocaleResolver().resolve_from_header(None) == Locale.NL
        assert LocaleResolver().resolve_from_header("") == Locale.NL

    def test_resolve_from_string(self):
        assert LocaleResolver().resolve_from_string("es") == Locale.ES

    def test_resolve_from_string_invalid(self):
        with pytest.raises(ValueError):
            LocaleResolver().resolve_from_string("klingon")

    def test_resolve_from_string_unsupported_by_resolver(self):
        resolver = LocaleResolver(supported_locales=[Locale.NL])
        with pytest.raises(ValueError):
            resolver.resolve_from_string("en")

    def test_resolve_prefers_path(self):
        resolver = LocaleResolver()
        assert resolver.resolve(path="/en/x", accept_language="fr") == Locale.EN

    def test_resolve_falls_back_to_header(self):
        resolver = LocaleResolver()
        assert resolver.resolve(path="/about", accept_language="fr") == Locale.FR

    def test_resolve_default(self):
        assert LocaleResolver().resolve() == Locale.NL
