"""Query helpers used by callers deciding UI affordances."""

from __future__ import annotations

from seo_search_box.classification.engine import ClassifierConfig, InputClassifier
from seo_search_box.classification.types import InputType
from seo_search_box.classification.urls import matches_domain_shape, matches_url_shape, parse_url


def extract_domain(url: str) -> str | None:
    """Return the lowercase hostname without ``www.``, or None if unparsable."""
    parsed = parse_url(url.strip())
    return parsed.domain if parsed else None


def is_valid_domain(value: str) -> bool:
    return matches_domain_shape(value)


def is_valid_url(value: str) -> bool:
    return matches_url_shape(value)


def get_suggested_type(partial: str, *, config: ClassifierConfig | None = None) -> InputType | None:
    """Return a type hint for live typing, or None when unsure.

    Inputs shorter than ``suggestion_min_length`` characters never get a hint,
    nor do classifications below ``suggestion_min_confidence``.
    """
    resolved = config or ClassifierConfig()
    if not partial or len(partial) < resolved.suggestion_min_length:
        return None

    parsed = InputClassifier(config=resolved).classify(partial)
    if parsed.confidence >= resolved.suggestion_min_confidence:
        return parsed.type
    return None
