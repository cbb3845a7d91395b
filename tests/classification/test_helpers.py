"""Tests for classification query helpers."""

import pytest

from seo_search_box import extract_domain, get_suggested_type, is_valid_domain, is_valid_url
from seo_search_box.classification import ClassifierConfig


def test_extract_domain_from_full_url():
    assert extract_domain("https://www.Example.com/blog/post") == "example.com"


def test_extract_domain_without_scheme():
    assert extract_domain("shop.example.co.uk/cart") == "shop.example.co.uk"


def test_extract_domain_keeps_www_when_it_is_the_only_label():
    assert extract_domain("https://www.com/x") == "www.com"


@pytest.mark.parametrize("value", ["", "not a url", "https://"])
def test_extract_domain_returns_none_when_unparsable(value):
    assert extract_domain(value) is None


@pytest.mark.parametrize("value", ["example.com", "sub-domain.example.io", "WWW.EXAMPLE.ORG"])
def test_is_valid_domain(value):
    assert is_valid_domain(value) is True


@pytest.mark.parametrize("value", ["example", "-example.com", "example.c0m", "exa mple.com", "example.com/path"])
def test_is_valid_domain_rejects(value):
    assert is_valid_domain(value) is False


@pytest.mark.parametrize(
    "value",
    ["https://example.com", "http://example.com/path/to-page", "example.com/", "www.example.com"],
)
def test_is_valid_url(value):
    assert is_valid_url(value) is True


@pytest.mark.parametrize("value", ["ftp://example.com", "example", "https://example.com?q=1", "joe's pizza"])
def test_is_valid_url_rejects(value):
    assert is_valid_url(value) is False


@pytest.mark.parametrize("value", ["", "a", "ex"])
def test_suggested_type_needs_three_characters(value):
    assert get_suggested_type(value) is None


def test_suggested_type_for_confident_input():
    assert get_suggested_type("example.com") == "url"
    assert get_suggested_type("(555) 123-4567") == "phone"


def test_suggested_type_none_for_low_confidence():
    # Default keyword fallback is 0.6, title-case business is 0.55.
    assert get_suggested_type("running shoes") is None
    assert get_suggested_type("Blue Bottle Coffee") is None


def test_suggested_type_respects_config_threshold():
    config = ClassifierConfig(suggestion_min_confidence=0.5)

    assert get_suggested_type("running shoes", config=config) == "keyword"


def test_suggested_type_basic_profile_trusts_keyword_default():
    config = ClassifierConfig.for_profile("basic")

    assert get_suggested_type("running shoes", config=config) == "keyword"
