"""Geocoding search client."""

from __future__ import annotations

import logging
from typing import Final

from pydantic import ValidationError

from .client import BaseClient
from .errors import LocationNotFoundError, ParseError
from .models import Location, SearchResults

logger: Final = logging.getLogger(__name__)

GEOCODING_BASE_URL: Final = "https://geocoding-api.open-meteo.com/v1/"


class GeocodingClient(BaseClient):
    """Resolves place names to coordinates via the Open-Meteo geocoding API."""

    base_url = GEOCODING_BASE_URL

    def search(self, name: str) -> Location:
        """Return the best match for a place name.

        Args:
            name: Free-text place name (e.g. "Berlin")

        Returns:
            The first search hit

        Raises:
            LocationNotFoundError: When the search returns no results
            UpstreamError: For any transport or API failure
        """
        data = self._get("search", {"name": name, "count": 1})
        try:
            results = SearchResults.model_validate(data)
        except ValidationError as exc:
            raise ParseError(f"Failed to parse search response for {name}: {exc}", exc) from exc

        if not results.locations:
            logger.info("No geocoding results for %r", name)
            raise LocationNotFoundError(name)
        return results.locations[0]
