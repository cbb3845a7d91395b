"""Tests for report routing and cache policy."""

import pytest

from seo_search_box import classify, route_search
from seo_search_box.routing import CACHE_TTL, DAY, HOUR, generate_cache_key


def test_generate_cache_key_lowercases_and_joins():
    assert generate_cache_key("seo:keyword:", "Running  Shoes") == "seo:keyword:running_shoes"
    assert generate_cache_key("seo:search:", "url", "example.com") == "seo:search:url:example.com"


def test_cache_ttls():
    assert CACHE_TTL["keyword"] == DAY
    assert CACHE_TTL["domain"] == 12 * HOUR
    assert CACHE_TTL["backlinks"] == 6 * HOUR
    assert CACHE_TTL["lighthouse"] == 7 * DAY
    assert CACHE_TTL["whois"] == 30 * DAY
    assert CACHE_TTL["serp"] == 4 * HOUR


def test_cache_policy_is_read_only():
    with pytest.raises(TypeError):
        CACHE_TTL["keyword"] = 1


def test_url_routes_to_domain_report():
    route = route_search(classify("https://www.example.com/pricing"))

    assert route.report == "domain"
    assert route.query == "example.com"
    assert route.cache_key == "seo:domain:example.com"
    assert route.ttl_seconds == 12 * HOUR


def test_phone_routes_through_business_cache():
    route = route_search(classify("(555) 123-4567"))

    assert route.report == "phone"
    assert route.cache_key == "seo:business:phone:5551234567"
    assert route.ttl_seconds == DAY


def test_address_routes_to_keyword_report():
    route = route_search(classify("Seattle, WA 98101"))

    assert route.input_type == "address"
    assert route.report == "keyword"
    assert route.cache_key.startswith("seo:keyword:")


def test_business_route_and_query_params():
    route = route_search(classify("Joe's Pizza"))

    assert route.report == "business"
    assert route.search_cache_key == "seo:search:business:joe's_pizza"
    assert route.query_params() == {"q": "Joe's Pizza", "type": "business"}


def test_empty_input_uses_raw_value():
    route = route_search(classify(""))

    assert route.report == "keyword"
    assert route.cache_key == "seo:keyword:"
