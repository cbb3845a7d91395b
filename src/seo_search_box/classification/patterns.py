"""Pattern and vocabulary tables used by the input classifier.

Everything here is built once at import time and never mutated: tuples of
compiled patterns and frozensets of vocabulary. The classifier reads these
tables through the module attribute so tests can swap a table with
``monkeypatch`` without touching the engine.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType

US_STATES: Mapping[str, str] = MappingProxyType({
    "AL": "alabama",
    "AK": "alaska",
    "AZ": "arizona",
    "AR": "arkansas",
    "CA": "california",
    "CO": "colorado",
    "CT": "connecticut",
    "DE": "delaware",
    "DC": "district of columbia",
    "FL": "florida",
    "GA": "georgia",
    "HI": "hawaii",
    "ID": "idaho",
    "IL": "illinois",
    "IN": "indiana",
    "IA": "iowa",
    "KS": "kansas",
    "KY": "kentucky",
    "LA": "louisiana",
    "ME": "maine",
    "MD": "maryland",
    "MA": "massachusetts",
    "MI": "michigan",
    "MN": "minnesota",
    "MS": "mississippi",
    "MO": "missouri",
    "MT": "montana",
    "NE": "nebraska",
    "NV": "nevada",
    "NH": "new hampshire",
    "NJ": "new jersey",
    "NM": "new mexico",
    "NY": "new york",
    "NC": "north carolina",
    "ND": "north dakota",
    "OH": "ohio",
    "OK": "oklahoma",
    "OR": "oregon",
    "PA": "pennsylvania",
    "RI": "rhode island",
    "SC": "south carolina",
    "SD": "south dakota",
    "TN": "tennessee",
    "TX": "texas",
    "UT": "utah",
    "VT": "vermont",
    "VA": "virginia",
    "WA": "washington",
    "WV": "west virginia",
    "WI": "wisconsin",
    "WY": "wyoming",
})

STATE_CODES: frozenset[str] = frozenset(US_STATES)
STATE_NAMES: frozenset[str] = frozenset(US_STATES.values())

STREET_TYPES: tuple[str, ...] = (
    "st",
    "street",
    "ave",
    "avenue",
    "rd",
    "road",
    "blvd",
    "boulevard",
    "dr",
    "drive",
    "ln",
    "lane",
    "way",
    "ct",
    "court",
    "pl",
    "place",
    "cir",
    "circle",
    "hwy",
    "highway",
)


def _alternation(words) -> str:
    # Longest first so "new york" wins over a two-letter prefix.
    ordered = sorted(words, key=lambda word: (-len(word), word))
    return "|".join(re.escape(word).replace(r"\ ", r"\s+") for word in ordered)


_STREET = _alternation(STREET_TYPES)
_STATE_NAME = _alternation(STATE_NAMES)
_STATE = rf"(?:{_STATE_NAME}|[a-z]{{2}})"

# URL / domain

SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
URL_PATTERN = re.compile(
    r"^(?:https?://)?[\da-z.-]+\.[a-z.]{2,6}[/\w .-]*/?$",
    re.IGNORECASE | re.ASCII,
)
# Every character after the scheme must come from this alphabet for
# URL_PATTERN to match at all.
URL_ALPHABET = re.compile(r"[/\w .-]*", re.ASCII)
DOMAIN_PATTERN = re.compile(r"^(?:[\da-z][\da-z-]*\.)+[a-z]{2,}$", re.IGNORECASE | re.ASCII)
HOSTNAME_PATTERN = re.compile(r"^[\da-z.-]+$", re.ASCII)

# Coordinates

LAT_LNG_PATTERN = re.compile(r"^[-+]?\d+(?:\.\d*)?\s*,\s*[-+]?\d+(?:\.\d*)?$", re.ASCII)

# Phone

PHONE_SEPARATORS = re.compile(r"[\s\-.()]")
NON_DIGIT = re.compile(r"[^0-9]")
COUNTRY_CODE_PATTERN = re.compile(r"^\+(\d{1,3})", re.ASCII)
PHONE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # (555) 123-4567, 555-123-4567, +1 555.123.4567
    re.compile(r"^\+?1?\s*\(?(\d{3})\)?[\s.-]*(\d{3})[\s.-]*(\d{4})$", re.ASCII),
    # +44 20 7946 0958
    re.compile(r"^\+?(\d{1,3})[\s.-]?\(?(\d{2,4})\)?[\s.-]?(\d{3,4})[\s.-]?(\d{3,4})$", re.ASCII),
    re.compile(r"^(\d{10,11})$", re.ASCII),
)

# Address

# Words are \w+ runs joined by \s+ runs, so a whitespace run can only be
# consumed one way and backtracking stays linear in the input length.
_WORDS = r"\w+(?:\s+\w+)*"

ADDRESS_PATTERNS: tuple[re.Pattern[str], ...] = (
    # 123 Main St
    re.compile(rf"^\d+\s+(?:\w+\s+)+(?:{_STREET})\b", re.IGNORECASE),
    # 123 Main, Seattle, WA
    re.compile(rf"^\d+\s+{_WORDS}\s*,\s*(?:{_WORDS}(?:\s*,\s*|\s+))?{_STATE}\b", re.IGNORECASE),
    # Seattle, WA 98101
    re.compile(rf"^[\w\s]+,\s*{_STATE}\s*\d{{0,5}}$", re.IGNORECASE),
    # ZIP or ZIP+4 anywhere
    re.compile(r"\b\d{5}(?:-\d{4})?\b"),
)

STREET_NUMBER_PATTERN = re.compile(r"^\d+\s")
STREET_TYPE_PATTERN = re.compile(rf"\b(?:{_STREET})\b", re.IGNORECASE)
STATE_CODE_TOKEN = re.compile(r"\b[A-Z]{2}\b")
STATE_NAME_PATTERN = re.compile(rf"\b(?:{_STATE_NAME})\b", re.IGNORECASE)

# Keyword phrases that are never business names

KEYWORD_PHRASE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(?:best|top|cheap|affordable|local|near\s*me|how\s+to|what\s+is)\b", re.IGNORECASE),
    re.compile(r"\b(?:near\s*me|in\s+my\s+area|nearby)\b", re.IGNORECASE),
    re.compile(r"\b(?:services|help|tips|guide|reviews)\s*$", re.IGNORECASE),
)

# Business

BUSINESS_INDICATORS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\b(?:inc|llc|ltd|corp|co|company|group|services|solutions|consulting)\b", re.IGNORECASE),
    re.compile(r"\b(?:restaurant|cafe|hotel|store|shop|market|salon|clinic|hospital)\b", re.IGNORECASE),
    re.compile(r"\b(?:law\s*firm|dental|medical|auto|car\s*dealer|real\s*estate)\b", re.IGNORECASE),
    re.compile(r"\b(?:plumbing|electric|hvac|roofing|landscaping|cleaning)\b", re.IGNORECASE),
    # Joe's Pizza, Mike's Auto
    re.compile(r"'s\s+", re.IGNORECASE),
)

DIGIT_PATTERN = re.compile(r"\d")
WHITESPACE_RUN = re.compile(r"\s+")
KEYWORD_STRIP = re.compile(r"[^\w\s-]")
BUSINESS_STRIP = re.compile(r"[^\w\s&'-]")
