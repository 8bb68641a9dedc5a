"""Errors raised while talking to the remote catalog.

Not-found is not an error: lookups return ``None`` or an empty index.
Truncation at the pagination ceiling is not an error either.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalog failures."""


class CatalogFetchError(CatalogError):
    """A catalog request failed in transport, returned an error status, or
    returned a payload that could not be parsed.

    The underlying exception is always chained as ``__cause__``.
    """

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Catalog request failed for {url}: {reason}")
        self.url = url
        self.reason = reason


class MissingApiKeyError(CatalogError):
    """Raised when an RIDB client is built without an API key."""

    def __init__(self) -> None:
        super().__init__("RIDB_API_KEY is not set")
