"""ip-api.com geolocation provider."""
from __future__ import annotations

import math
from typing import Any, Mapping, Optional

from backend.core.abstractions import Coordinates
from backend.core.providers.base import HTTPProvider, LocationUnavailable


class IPApiGeolocationProvider(HTTPProvider):
    """Resolve network addresses through the ip-api.com JSON endpoint.

    The free tier is served over plain HTTP only.
    """

    name = "ip-api"
    error_class = LocationUnavailable
    base_url = "http://ip-api.com/json"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")

    def locate(self, address: str) -> Coordinates:
        response = self._get(f"{self.base_url}/{address}")
        data = self._json(response)
        if not isinstance(data, Mapping):
            raise LocationUnavailable("geolocation response is not an object")
        if data.get("status") == "fail":
            self._log.warning("Lookup for %s failed: %s", address, data.get("message"))
            raise LocationUnavailable(f"Unable to find your location: {data.get('message', 'unknown error')}")

        latitude = _coordinate(data.get("lat"))
        longitude = _coordinate(data.get("lon"))
        if latitude is None or longitude is None:
            self._log.warning("Lookup for %s returned no usable coordinates", address)
            raise LocationUnavailable("Unable to find your location")
        return Coordinates(latitude=latitude, longitude=longitude)


def _coordinate(value: Any) -> Optional[float]:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


__all__ = ["IPApiGeolocationProvider"]
