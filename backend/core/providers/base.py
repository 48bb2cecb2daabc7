from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Type

import requests
from requests import Response


class ProviderError(RuntimeError):
    """Base provider error."""


class LocationUnavailable(ProviderError):
    """Raised when a network address cannot be mapped to coordinates."""


class WeatherLookupError(ProviderError):
    """Raised when current weather conditions cannot be fetched."""


@dataclass
class RequestConfig:
    timeout: float = 5.0


class HTTPProvider:
    """Base class issuing single-attempt JSON GET requests with a timeout.

    Failures are reported as ``error_class``. Subclasses embedding secrets in
    the URL must not let ``requests`` exception text reach logs or errors, so
    only the exception type is ever recorded.
    """

    name = "http"
    error_class: Type[ProviderError] = ProviderError

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.error("%s returned HTTP %s", self.name, response.status_code)
            raise self.error_class(f"{self.name} returned HTTP {response.status_code}")
        return response

    def _get(self, url: str, **kwargs) -> Response:
        try:
            response = self.session.get(url, timeout=self.request_config.timeout, **kwargs)
        except requests.Timeout as exc:
            self._log.error("%s request timed out", self.name)
            raise self.error_class(f"{self.name} request timed out") from exc
        except requests.RequestException as exc:
            self._log.error("%s request failed: %s", self.name, exc.__class__.__name__)
            raise self.error_class(f"{self.name} request failed") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            self._log.error("%s returned invalid JSON", self.name)
            raise self.error_class(f"{self.name} returned invalid JSON") from exc


__all__ = [
    "HTTPProvider",
    "LocationUnavailable",
    "ProviderError",
    "RequestConfig",
    "WeatherLookupError",
]
