"""Exception types for the quote engine."""

from __future__ import annotations


class QuotifyError(Exception):
    """Base class for every error raised by quotify."""


class NetworkError(QuotifyError):
    """A page fetch from the quote API failed (transport, status or body)."""


class StorageError(QuotifyError):
    """The persistent cache could not be read or written."""


class EmptyStoreError(QuotifyError):
    """Navigation was attempted before any batch was loaded."""


class LoadInProgressError(QuotifyError):
    """A batch load was requested while another one is still running."""
