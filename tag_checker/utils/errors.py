"""
Exception types and error message helpers.

Two failure classes are kept apart: ``InvalidUrlError`` is the caller's
problem (bad input) and propagates, ``FetchError`` is the remote site's
problem and is turned into an error result by the detector.
"""

from __future__ import annotations


class TagCheckerError(Exception):
    """Base class for tag checker errors."""


class InvalidUrlError(TagCheckerError, ValueError):
    """The supplied string cannot be interpreted as an http(s) URL."""

    def __init__(self, url: str, reason: str = "Invalid URL format") -> None:
        super().__init__(f"{reason}: {url!r}")
        self.url = url
        self.reason = reason


class FetchError(TagCheckerError):
    """The remote page could not be fetched or decoded."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(reason)
        self.url = url
        self.reason = reason


def get_error_message(error: BaseException | object) -> str:
    """
    Safely extract an error message from an unknown error type.

    Falls back to the exception class name when the message is empty,
    e.g. a bare ``asyncio.TimeoutError()``.
    """
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    return "Unknown error"
