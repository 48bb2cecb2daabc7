"""Weather icon pipeline: client address -> location -> weather -> SVG."""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from backend.core.abstractions import Coordinates, GeolocationProvider, WeatherProvider
from backend.core.client_address import FALLBACK_ADDRESS, TrustPolicy, client_address
from backend.core.icons import condition_code, render_icon


logger = logging.getLogger(__name__)


class WeatherIconService:
    """Run the three pipeline stages strictly in sequence.

    Every stage is single-attempt.  Provider errors propagate to the caller
    untouched, so a failed stage never reaches the next one and no partial
    icon is produced.
    """

    def __init__(
        self,
        *,
        geolocation: GeolocationProvider,
        weather: WeatherProvider,
        trust_policy: TrustPolicy,
        fallback_address: str = FALLBACK_ADDRESS,
    ) -> None:
        self._geolocation = geolocation
        self._weather = weather
        self._trust_policy = trust_policy
        self._fallback_address = fallback_address

    @property
    def fallback_address(self) -> str:
        return self._fallback_address

    # Public API ---------------------------------------------------------
    def resolve_address(self, meta: Mapping[str, str]) -> str:
        address = client_address(meta, self._trust_policy)
        if address is None:
            logger.warning("Unable to determine remote IP address, using %s", self._fallback_address)
            return self._fallback_address
        return address

    def locate(self, meta: Mapping[str, str]) -> Coordinates:
        return self._geolocation.locate(self.resolve_address(meta))

    def current_weather(self, coordinates: Coordinates) -> Dict[str, Any]:
        return self._weather.current(coordinates)

    def render_for_address(self, address: str) -> str:
        coordinates = self._geolocation.locate(address)
        payload = self.current_weather(coordinates)
        code = condition_code(payload)
        logger.info("Rendering %s icon for %.2f,%.2f", code, coordinates.latitude, coordinates.longitude)
        return render_icon(code)

    def render(self, meta: Mapping[str, str]) -> str:
        return self.render_for_address(self.resolve_address(meta))


__all__ = ["WeatherIconService"]
