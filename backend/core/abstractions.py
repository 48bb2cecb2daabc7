"""Core abstractions for the weather icon domain."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Protocol


@dataclass(frozen=True, slots=True)
class Coordinates:
    """Approximate location of a network address."""

    latitude: float
    longitude: float


class GeolocationProvider(Protocol):
    """A data source mapping a network address to coordinates."""

    name: str

    def locate(self, address: str) -> Coordinates:
        """Return the approximate location of ``address``."""
        ...


class WeatherProvider(Protocol):
    """A data source capable of returning current weather conditions."""

    name: str

    def current(self, coordinates: Coordinates) -> Dict[str, Any]:
        """Fetch the full current-conditions payload for the coordinates."""
        ...
