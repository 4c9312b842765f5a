"""Exception hierarchy for thinhttp.

Every failure surfaced by :class:`~thinhttp.client.Client` inherits from
:class:`ThinHTTPError`. Each subclass corresponds to exactly one phase of a
call, so callers can tell the phases apart with a plain ``except`` clause.

Subclass hierarchy::

    ThinHTTPError
    +-- EncodeError      (request body could not be serialised)
    +-- TransportError   (network exchange failed)
    +-- StatusError      (response status outside 200-299)
    +-- DecodeError      (response body could not be parsed)
"""

from __future__ import annotations

from typing import Optional


class ThinHTTPError(Exception):
    """Base exception for all thinhttp errors.

    Args:
        message: Human-readable error description.
        cause: The underlying exception, when this error wraps one.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class EncodeError(ThinHTTPError):
    """Raised when the request encoder fails. No network call was made."""


class TransportError(ThinHTTPError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused)."""


class DecodeError(ThinHTTPError):
    """Raised when a successful response body cannot be decoded into the destination."""


class StatusError(ThinHTTPError):
    """Raised by the default error handler for a non-2xx response.

    Args:
        status_code: The numeric HTTP status code of the response.
        body: The raw response body.
    """

    def __init__(self, status_code: int, body: bytes = b""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"unexpected status code {status_code}: {self.text}")

    @property
    def text(self) -> str:
        """The response body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")
