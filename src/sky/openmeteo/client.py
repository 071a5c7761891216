"""Shared HTTP plumbing for the Open-Meteo endpoints."""

from __future__ import annotations

import logging
from typing import Any, Dict, Final, Mapping

import requests

from .errors import NetworkError, ParseError, UpstreamError

logger: Final = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final = 3.0

# Human-readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check coordinates or parameters",
    404: "Endpoint not found",
    429: "Rate limit exceeded",
    500: "Open-Meteo internal error",
    502: "Bad gateway at Open-Meteo",
    503: "Service unavailable (maintenance)",
    504: "Gateway timeout",
}


class BaseClient:
    """GET-and-decode helper shared by every Open-Meteo client.

    Owns the single request timeout; no retries, no caching.
    """

    base_url: str = ""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, base_url: str | None = None) -> None:
        """Initialize the client.

        Args:
            timeout: Timeout for API requests in seconds
            base_url: Override for the endpoint root (tests, self-hosting)
        """
        self.timeout = timeout
        if base_url is not None:
            self.base_url = base_url

    def _get(self, path: str, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Issue a GET request and return the decoded JSON body.

        Raises:
            NetworkError: When the request could not be sent or answered
            UpstreamError: When the API answered with a non-200 status
            ParseError: When the body is not a JSON object
        """
        url = self.base_url + path
        try:
            resp = requests.get(url, params=dict(params), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Open-Meteo network error for %s: %s", url, exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc

        if resp.status_code != 200:
            try:
                body = resp.json()
            except ValueError:
                body = None
            if not isinstance(body, dict) or not body.get("error"):
                body = {"reason": HTTP_ERROR_MAP.get(resp.status_code, resp.text)}
            err = UpstreamError.from_response(body, resp.status_code)
            logger.error("Open-Meteo API error: %s - %s", resp.status_code, err.message)
            raise err

        try:
            data = resp.json()
        except ValueError as exc:
            logger.warning("Open-Meteo returned invalid JSON from %s: %s", url, exc)
            raise ParseError(f"Invalid JSON in response: {exc}", exc) from exc

        if not isinstance(data, dict):
            raise ParseError(f"Expected a JSON object, got {type(data).__name__}")
        return data
