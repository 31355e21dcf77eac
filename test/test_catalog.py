"""
Tests for PhraseCatalog
"""

from __future__ import annotations

import pytest

from multilingual.i18n.catalog import PhraseCatalog, interpolate, lookup


@pytest.fixture
def catalog():
    return PhraseCatalog(
        {
            "greeting": {"hi": "Hi", "welcome": "Welcome, %{name}!"},
            404: {"not_found": "Page not found"},
            "other": "Not nested",
            "deep": {"a": {"b": {"c": "Deep value"}}},
        },
        locale="en",
    )


class TestLookup:
    def test_flat_key(self, catalog):
        assert catalog.lookup("other") == "Not nested"

    def test_dotted_key(self, catalog):
        assert catalog.lookup("greeting.hi") == "Hi"

    def test_numeric_key(self, catalog):
        assert catalog.lookup("404.not_found") == "Page not found"

    def test_arbitrary_depth(self, catalog):
        assert catalog.lookup("deep.a.b.c") == "Deep value"

    @pytest.mark.parametrize("key", ["missing", "greeting.missing", "other.more", "deep.a.b.c.d", ""])
    def test_missing_key_returns_key(self, catalog, key):
        assert catalog.lookup(key) == key

    def test_subtree_returns_key(self, catalog):
        assert catalog.lookup("greeting") == "greeting"
        assert catalog.lookup("deep.a") == "deep.a"

    def test_lookup_is_idempotent(self, catalog):
        assert catalog.lookup("greeting.hi") == catalog.lookup("greeting.hi")
        assert catalog.lookup("nope") == catalog.lookup("nope")

    def test_module_level_lookup(self, catalog):
        assert lookup(catalog, "greeting.hi") == "Hi"
        assert lookup(catalog, "unknown.key") == "unknown.key"

    def test_has(self, catalog):
        assert catalog.has("greeting.hi") is True
        assert catalog.has("greeting") is False
        assert catalog.has("missing") is False


class TestTranslate:
    def test_interpolation(self, catalog):
        assert catalog.t("greeting.welcome", name="Ada") == "Welcome, Ada!"

    def test_missing_param_left_as_is(self, catalog):
        assert catalog.t("greeting.welcome") == "Welcome, %{name}!"

    def test_missing_key_returned_verbatim(self, catalog):
        assert catalog.t("missing.%{name}", name="Ada") == "missing.%{name}"

    def test_default_phrase_for_missing_key(self, catalog):
        assert catalog.t("missing", _="Hello %{name}", name="Ada") == "Hello Ada"

    def test_default_phrase_ignored_when_key_exists(self, catalog):
        assert catalog.t("greeting.hi", _="Ignored") == "Hi"

    def test_interpolate_helper(self):
        assert interpolate("%{a} and %{b}", {"a": 1, "b": "two"}) == "1 and two"
        assert interpolate("no placeholders", {"a": 1}) == "no placeholders"


class TestConstruction:
    def test_source_is_copied(self):
        source = {"greeting": {"hi": "Hi"}}
        catalog = PhraseCatalog(source, locale="en")
        source["greeting"]["hi"] = "Changed"
        assert catalog.lookup("greeting.hi") == "Hi"

    def test_phrases_property_is_a_copy(self, catalog):
        catalog.phrases["other"] = "Changed"
        assert catalog.lookup("other") == "Not nested"

    def test_numeric_keys_stored_as_strings(self, catalog):
        assert "404" in catalog.phrases

    def test_len_counts_leaves(self, catalog):
        assert len(catalog) == 5

    def test_locale(self, catalog):
        assert catalog.locale == "en"


class TestFallbackCatalog:
    def test_is_empty_and_truthy(self):
        fallback = PhraseCatalog.fallback()
        assert len(fallback) == 0
        assert bool(fallback) is True
        assert fallback.locale is None

    @pytest.mark.parametrize("key", ["hi", "greeting.hi", "404.not_found", "a.b.c"])
    def test_pass_through(self, key):
        assert PhraseCatalog.fallback().lookup(key) == key
        assert PhraseCatalog.fallback().t(key) == key
