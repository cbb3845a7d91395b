"""seo-search-box: Classify free-form search box input for SEO lookups."""

from seo_search_box.classification import (
    ClassifierConfig,
    InputClassifier,
    ParsedInput,
    classify,
    extract_domain,
    get_suggested_type,
    is_valid_domain,
    is_valid_url,
)
from seo_search_box.routing import SearchRoute, route_search

__version__ = "0.1.0"

__all__ = [
    "classify",
    "extract_domain",
    "get_suggested_type",
    "is_valid_domain",
    "is_valid_url",
    "route_search",
    "ClassifierConfig",
    "InputClassifier",
    "ParsedInput",
    "SearchRoute",
    "__version__",
]
