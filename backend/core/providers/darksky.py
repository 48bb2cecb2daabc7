"""Dark Sky current conditions provider."""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from backend.core.abstractions import Coordinates
from backend.core.providers.base import HTTPProvider, WeatherLookupError


class DarkSkyProvider(HTTPProvider):
    """Integration with the Dark Sky forecast endpoint.

    The response schema is documented at https://darksky.net/dev/docs/response.
    The API key is part of the URL path, so URLs are never logged.
    """

    name = "darksky"
    error_class = WeatherLookupError
    base_url = "https://api.darksky.net/forecast"

    def __init__(self, *, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        if not api_key:
            raise ValueError("api_key must be provided")
        super().__init__(**kwargs)
        self._api_key = api_key
        self.base_url = (base_url or self.base_url).rstrip("/")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"

    def current(self, coordinates: Coordinates) -> Dict[str, Any]:
        """Return the full weather payload for the coordinates."""
        url = f"{self.base_url}/{self._api_key}/{_decimal(coordinates.latitude)},{_decimal(coordinates.longitude)}"
        response = self._get(url)
        data = self._json(response)
        if not isinstance(data, dict):
            self._log.error("%s returned a non-object body", self.name)
            raise WeatherLookupError(f"{self.name} returned a non-object body")
        return data


def _decimal(value: float) -> str:
    # shortest round-tripping digits, never in exponent form
    return format(Decimal(repr(value)), "f")


__all__ = ["DarkSkyProvider"]
