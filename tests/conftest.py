from __future__ import annotations

import pytest

from backend.core.client_address import TrustPolicy
from backend.core.services.icon_service import WeatherIconService
from tests.stubs import GeolocationStub, WeatherStub


@pytest.fixture()
def geolocation() -> GeolocationStub:
    return GeolocationStub()


@pytest.fixture()
def weather() -> WeatherStub:
    return WeatherStub()


@pytest.fixture()
def icon_service(geolocation: GeolocationStub, weather: WeatherStub) -> WeatherIconService:
    return WeatherIconService(
        geolocation=geolocation,
        weather=weather,
        trust_policy=TrustPolicy.unique_local(),
    )
