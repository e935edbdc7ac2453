"""Exception types shared across the catalog client and CLI."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for every failure surfaced to the command line."""

    pass


class TransportError(CatalogError):
    """Raised when a request cannot complete or the body is not JSON."""

    pass


class DecodeError(CatalogError):
    """Raised when a JSON value does not fit the expected record shape."""

    pass


class MalformedInputError(CatalogError):
    """Raised when a user-supplied request body is not valid JSON."""

    pass


class PaginationLimitError(CatalogError):
    """Raised when a listing still has pages left after the configured ceiling."""

    pass
