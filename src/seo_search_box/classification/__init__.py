"""Input classification for seo-search-box."""

from seo_search_box.classification.engine import ClassifierConfig, InputClassifier, classify
from seo_search_box.classification.helpers import (
    extract_domain,
    get_suggested_type,
    is_valid_domain,
    is_valid_url,
)
from seo_search_box.classification.types import INPUT_TYPES, InputMetadata, InputType, ParsedInput

__all__ = [
    "ClassifierConfig",
    "INPUT_TYPES",
    "InputClassifier",
    "InputMetadata",
    "InputType",
    "ParsedInput",
    "classify",
    "extract_domain",
    "get_suggested_type",
    "is_valid_domain",
    "is_valid_url",
]
