"""Exceptions raised by the Open-Meteo transport.

Every failure that happens between building a request and holding a
validated raw model surfaces as an ``UpstreamError``: connection
problems, API rejections (``{"error": true, "reason": ...}``) and bodies
that are not the JSON we expect.
"""

from __future__ import annotations

from typing import Any, Final

JsonBody = dict[str, Any]

# Fallback text when an error body carries no "reason"
DEFAULT_REASONS: Final[dict[int, str]] = {
    404: "Resource not found",
    429: "Rate limit exceeded",
}


class UpstreamError(Exception):
    """An Open-Meteo request failed.

    ``code`` is the HTTP status, or 0 when no usable response arrived.
    ``response`` keeps the decoded error body, if there was one.
    """

    def __init__(self, code: int, message: str, response: JsonBody | None = None) -> None:
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.response: JsonBody | None = response

    @property
    def is_client_error(self) -> bool:
        """True for 4xx statuses."""
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """True for 5xx (and anything above)."""
        return self.code >= 500

    @classmethod
    def from_response(cls, response: JsonBody, status_code: int = 0) -> UpstreamError:
        """Pick the error subclass for a status and an API error body.

        Args:
            response: Decoded error body, possibly empty
            status_code: HTTP status of the response

        Returns:
            ``NotFoundError``, ``RateLimitError``, ``ClientError`` or
            ``ServerError`` by status; the base class otherwise
        """
        reason = response.get("reason") or DEFAULT_REASONS.get(status_code)
        error_cls: type[UpstreamError]
        if status_code == 404:
            error_cls = NotFoundError
        elif status_code == 429:
            error_cls = RateLimitError
        elif 400 <= status_code < 500:
            error_cls = ClientError
        elif status_code >= 500:
            error_cls = ServerError
        else:
            return cls(status_code, reason or "Unknown error", response)

        if reason is None:
            reason = "Server error" if status_code >= 500 else "Client error"
        return error_cls(status_code, reason, response)


class WrappedError(UpstreamError):
    """An upstream failure caused by a local exception (no HTTP status)."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(0, message)
        self.original_error = original_error


class NetworkError(WrappedError):
    """The request never got a response (DNS, refused, timeout...)."""


class ParseError(WrappedError):
    """A 200 response whose body is not valid JSON or has the wrong shape."""


class NotFoundError(UpstreamError):
    """HTTP 404."""


class RateLimitError(UpstreamError):
    """HTTP 429."""


class ClientError(UpstreamError):
    """Any other 4xx; Open-Meteo uses 400 for invalid parameters."""


class ServerError(UpstreamError):
    """HTTP 5xx."""


class LocationNotFoundError(UpstreamError):
    """A geocoding search returned no results."""

    def __init__(self, name: str) -> None:
        super().__init__(0, f"No location found for {name!r}")
        self.name = name
