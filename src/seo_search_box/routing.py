"""Report routing and cache policy for classified input.

Downstream report fetchers are keyed on ``ParsedInput.type`` and
``ParsedInput.normalized``. This module maps a classification to the report
that should serve it, together with the cache key and TTL the caching layer
applies to that report.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel

from seo_search_box.classification.types import InputType, ParsedInput

Report = Literal["keyword", "domain", "business", "phone"]

HOUR = 60 * 60
DAY = 24 * HOUR

CACHE_TTL: Mapping[str, int] = MappingProxyType(
    {
        "keyword": DAY,
        "domain": 12 * HOUR,
        "backlinks": 6 * HOUR,
        "lighthouse": 7 * DAY,
        "whois": 30 * DAY,
        "business": DAY,
        "serp": 4 * HOUR,
    }
)

CACHE_PREFIX: Mapping[str, str] = MappingProxyType(
    {
        "keyword": "seo:keyword:",
        "domain": "seo:domain:",
        "backlinks": "seo:backlinks:",
        "lighthouse": "seo:lighthouse:",
        "whois": "seo:whois:",
        "business": "seo:business:",
        "serp": "seo:serp:",
        "search": "seo:search:",
    }
)

# Addresses have no report of their own; the results page shows keyword data.
REPORT_BY_TYPE: Mapping[InputType, Report] = MappingProxyType(
    {
        "keyword": "keyword",
        "url": "domain",
        "phone": "phone",
        "address": "keyword",
        "business": "business",
    }
)

_WHITESPACE = re.compile(r"\s+")


class SearchRoute(BaseModel):
    """Where and how a classified search is served."""

    input_type: InputType
    report: Report
    query: str
    cache_key: str
    search_cache_key: str
    ttl_seconds: int

    def query_params(self) -> dict[str, str]:
        """Query string for the results page (``q`` and ``type``)."""
        return {"q": self.query, "type": self.input_type}


def generate_cache_key(prefix: str, *parts: str) -> str:
    return prefix + ":".join(_WHITESPACE.sub("_", part.lower()) for part in parts)


def route_search(parsed: ParsedInput) -> SearchRoute:
    report = REPORT_BY_TYPE[parsed.type]
    query = parsed.normalized or parsed.value

    # Phone lookups are business data lookups keyed by the number.
    if report == "phone":
        cache_key = generate_cache_key(CACHE_PREFIX["business"], "phone", query)
        ttl_seconds = CACHE_TTL["business"]
    else:
        cache_key = generate_cache_key(CACHE_PREFIX[report], query)
        ttl_seconds = CACHE_TTL[report]

    return SearchRoute(
        input_type=parsed.type,
        report=report,
        query=query,
        cache_key=cache_key,
        search_cache_key=generate_cache_key(CACHE_PREFIX["search"], parsed.type, query),
        ttl_seconds=ttl_seconds,
    )
