"""Custom exceptions for seo-search-box."""


class SeoSearchBoxError(Exception):
    """Base exception for seo-search-box."""

    pass


class UnknownProfileError(SeoSearchBoxError, ValueError):
    """Raised when a classifier profile name is not recognized."""

    pass
