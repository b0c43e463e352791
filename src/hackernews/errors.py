"""Error types raised by the Hacker News client.

Every public operation either returns a complete result or raises one of
the exceptions below. Nothing is retried, logged-and-dropped or partially
returned; the caller owns the recovery policy.

Key Components:
- HackerNewsError: common base carrying free-form context
- TransportError: the request never produced a response
- APIError: the server answered with a non-2xx status
- DecodeError: the body was not JSON or did not match the schema
- ConversionError: a search hit carried a non-numeric objectID
"""

import time
from typing import Any, Optional


class HackerNewsError(Exception):
    """Base exception for Hacker News client errors."""

    def __init__(self, message: str, **context: Any):
        """Initialize the error with context.

        Args:
            message: Error message
            **context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context
        self.timestamp = time.time()


class TransportError(HackerNewsError):
    """Network level failure (connection refused, DNS, TLS, timeout)."""

    def __init__(self, message: str, url: Optional[str] = None, **context: Any):
        """Initialize transport error.

        Args:
            message: Error message
            url: URL that was being requested
            **context: Additional context
        """
        super().__init__(message, **context)
        self.url = url


class APIError(HackerNewsError):
    """The API answered with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        body: str,
        url: Optional[str] = None,
        **context: Any,
    ):
        """Initialize API error.

        Args:
            status_code: HTTP status code returned by the server
            body: Raw response body text
            url: URL that was requested
            **context: Additional context
        """
        super().__init__(f"unexpected status {status_code}: {body}", **context)
        self.status_code = status_code
        self.body = body
        self.url = url


class DecodeError(HackerNewsError):
    """Response body is not valid JSON or does not fit the expected schema."""

    def __init__(self, message: str, body: Optional[str] = None, **context: Any):
        """Initialize decode error.

        Args:
            message: Error message
            body: Raw response body text
            **context: Additional context
        """
        super().__init__(message, **context)
        self.body = body


class ConversionError(HackerNewsError):
    """A search hit identifier could not be parsed as an integer."""

    def __init__(self, value: Any, index: Optional[int] = None, **context: Any):
        """Initialize conversion error.

        Args:
            value: The offending objectID value
            index: Position of the hit in the result list
            **context: Additional context
        """
        super().__init__(
            f"failed to convert hits to stories: invalid objectID {value!r}",
            **context,
        )
        self.value = value
        self.index = index


__all__ = [
    "HackerNewsError",
    "TransportError",
    "APIError",
    "DecodeError",
    "ConversionError",
]
