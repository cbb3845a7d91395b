"""Input classification engine for the search box."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from typing import Any

from seo_search_box.classification import patterns
from seo_search_box.classification.types import Detector, InputMetadata, InputType, ParsedInput
from seo_search_box.classification.urls import matches_domain_shape, matches_url_shape, parse_url, strip_www
from seo_search_box.exceptions import UnknownProfileError

logger = logging.getLogger(__name__)

PROFILES = ("full", "basic")


@dataclass(frozen=True)
class Match:
    type: InputType
    normalized: str
    confidence: float
    detector: Detector
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ClassifierConfig:
    detect_addresses: bool = True
    detect_keyword_phrases: bool = True
    loose_title_case: bool = False
    default_keyword_confidence: float = 0.6
    phone_fallback_confidence: float = 0.75
    suggestion_min_confidence: float = 0.7
    suggestion_min_length: int = 3

    def __post_init__(self) -> None:
        for item in fields(self):
            if item.name.endswith("_confidence"):
                value = getattr(self, item.name)
                if not 0.0 <= value <= 1.0:
                    raise ValueError(f"{item.name} must be within [0, 1], got {value}")

    @classmethod
    def for_profile(cls, name: str | None) -> "ClassifierConfig":
        """Return the config for a named profile (``full`` or ``basic``)."""
        profile = (name or "full").strip().lower()
        if profile == "full":
            return cls()
        if profile == "basic":
            return cls(
                detect_addresses=False,
                detect_keyword_phrases=False,
                loose_title_case=True,
                default_keyword_confidence=0.8,
                phone_fallback_confidence=0.7,
            )
        raise UnknownProfileError(f"Unsupported classifier profile: {name}")


class InputClassifier:
    """Ordered-cascade classifier. The first detector that matches wins."""

    def __init__(self, config: ClassifierConfig | None = None):
        self.config = config or ClassifierConfig()

    def classify(self, raw: str) -> ParsedInput:
        value = raw.strip()

        match = (
            self._match_url(value)
            or self._match_lat_lng(value)
            or self._match_phone(value)
            or self._match_address(value)
            or self._match_keyword_phrase(value)
            or self._match_business(value)
            or self._match_default(value)
        )

        logger.debug(
            "classified input as %s via %s (confidence=%.2f)",
            match.type,
            match.detector,
            match.confidence,
        )
        return ParsedInput(
            type=match.type,
            value=value,
            normalized=match.normalized,
            confidence=match.confidence,
            metadata=InputMetadata(**match.metadata),
            detector=match.detector,
        )

    def _match_url(self, value: str) -> Match | None:
        if matches_url_shape(value):
            parsed = parse_url(value)
            # Empty labels, leading hyphens and trailing dots fall through.
            if parsed and (parsed.has_scheme or parsed.has_path) and matches_domain_shape(parsed.domain):
                return Match(
                    type="url",
                    normalized=parsed.domain,
                    confidence=0.95,
                    detector="url",
                    metadata={"domain": parsed.domain, "protocol": parsed.protocol, "path": parsed.path},
                )

        if " " not in value and matches_domain_shape(value):
            domain = strip_www(value)
            return Match(
                type="url",
                normalized=domain,
                confidence=0.9,
                detector="url",
                metadata={"domain": domain, "protocol": "https", "path": "/"},
            )
        return None

    def _match_lat_lng(self, value: str) -> Match | None:
        if not self.config.detect_addresses or not patterns.LAT_LNG_PATTERN.match(value):
            return None

        lat_raw, lng_raw = value.split(",")
        lat, lng = float(lat_raw), float(lng_raw)
        if not (-90 <= lat <= 90 and -180 <= lng <= 180):
            return None

        return Match(
            type="address",
            normalized=f"{lat:.6f},{lng:.6f}",
            confidence=0.95,
            detector="lat_lng",
            metadata={"is_lat_lng": True},
        )

    def _match_phone(self, value: str) -> Match | None:
        stripped = patterns.PHONE_SEPARATORS.sub("", value)
        digits = patterns.NON_DIGIT.sub("", stripped)
        significant = stripped.removeprefix("+")
        if not 10 <= len(digits) <= 15 or len(digits) / len(significant) <= 0.9:
            return None

        metadata = {
            "phone_formatted": format_phone_number(value),
            "country_code": _country_code(value),
        }
        if any(pattern.match(value) for pattern in patterns.PHONE_PATTERNS):
            return Match(
                type="phone",
                normalized=normalize_phone(digits),
                confidence=0.95,
                detector="phone",
                metadata=metadata,
            )

        return Match(
            type="phone",
            normalized=digits,
            confidence=self.config.phone_fallback_confidence,
            detector="phone",
            metadata=metadata,
        )

    def _match_address(self, value: str) -> Match | None:
        if not self.config.detect_addresses:
            return None

        if any(pattern.search(value) for pattern in patterns.ADDRESS_PATTERNS):
            return Match(
                type="address",
                normalized=normalize_address(value),
                confidence=0.85,
                detector="address",
            )

        score = sum(
            (
                patterns.STREET_NUMBER_PATTERN.match(value) is not None,
                patterns.STREET_TYPE_PATTERN.search(value) is not None,
                "," in value,
                _has_state(value),
            )
        )
        if score >= 2:
            return Match(
                type="address",
                normalized=normalize_address(value),
                confidence=round(0.7 + 0.05 * score, 2),
                detector="address",
            )
        return None

    def _match_keyword_phrase(self, value: str) -> Match | None:
        if not self.config.detect_keyword_phrases:
            return None
        if any(pattern.search(value) for pattern in patterns.KEYWORD_PHRASE_PATTERNS):
            return Match(
                type="keyword",
                normalized=normalize_keyword(value),
                confidence=0.9,
                detector="keyword_phrase",
            )
        return None

    def _match_business(self, value: str) -> Match | None:
        if any(pattern.search(value) for pattern in patterns.BUSINESS_INDICATORS):
            return Match(
                type="business",
                normalized=normalize_business_name(value),
                confidence=0.85,
                detector="business",
            )

        words = value.split()
        if self.config.loose_title_case:
            if 2 <= len(words) <= 6:
                title_ratio = sum(_is_title_word(word) for word in words) / len(words)
                if title_ratio >= 0.6:
                    return self._title_case_match(value, confidence=0.6)
            return None

        if (
            2 <= len(words) <= 4
            and all(_is_title_word(word) for word in words)
            and not patterns.DIGIT_PATTERN.search(value)
            and "," not in value
        ):
            return self._title_case_match(value, confidence=0.55)
        return None

    def _title_case_match(self, value: str, *, confidence: float) -> Match:
        return Match(
            type="business",
            normalized=normalize_business_name(value),
            confidence=confidence,
            detector="business",
        )

    def _match_default(self, value: str) -> Match:
        return Match(
            type="keyword",
            normalized=normalize_keyword(value),
            confidence=self.config.default_keyword_confidence,
            detector="default",
        )


def classify(raw: str, *, config: ClassifierConfig | None = None) -> ParsedInput:
    """Classify free-form search box input.

    Never raises for string input. Empty or unrecognized input falls back to
    a ``keyword`` result with the profile's default confidence.

    Args:
        raw: Text as typed by the user. Leading/trailing whitespace is ignored.
        config: Cascade configuration. Defaults to the ``full`` profile.

    Returns:
        ParsedInput with the detected type, normalized value and confidence.
    """
    return InputClassifier(config=config).classify(raw)


def normalize_keyword(value: str) -> str:
    text = patterns.KEYWORD_STRIP.sub(" ", value.lower())
    return patterns.WHITESPACE_RUN.sub(" ", text).strip()


def normalize_business_name(value: str) -> str:
    text = patterns.BUSINESS_STRIP.sub("", value)
    return patterns.WHITESPACE_RUN.sub(" ", text).strip()


def normalize_address(value: str) -> str:
    return patterns.WHITESPACE_RUN.sub(" ", value).strip()


def normalize_phone(digits: str) -> str:
    """Drop the US country code from an 11-digit number."""
    if len(digits) == 11 and digits.startswith("1"):
        return digits[1:]
    return digits


def format_phone_number(value: str) -> str:
    digits = patterns.NON_DIGIT.sub("", value)
    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+1 ({digits[1:4]}) {digits[4:7]}-{digits[7:]}"
    return value


def _country_code(value: str) -> str | None:
    if not value.startswith("+"):
        return "1"
    match = patterns.COUNTRY_CODE_PATTERN.match(value)
    return match.group(1) if match else None


def _has_state(value: str) -> bool:
    if any(token in patterns.STATE_CODES for token in patterns.STATE_CODE_TOKEN.findall(value)):
        return True
    return patterns.STATE_NAME_PATTERN.search(value) is not None


def _is_title_word(word: str) -> bool:
    return word[:1].isupper()
