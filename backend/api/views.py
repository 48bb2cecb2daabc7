"""HTTP view serving the current weather as an SVG icon."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings
from django.http import HttpResponse
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.views import APIView

from backend.core.client_address import TrustPolicy
from backend.core.providers.base import ProviderError, RequestConfig
from backend.core.providers.darksky import DarkSkyProvider
from backend.core.providers.ipapi import IPApiGeolocationProvider
from backend.core.services.icon_service import WeatherIconService

SVG_CONTENT_TYPE = "image/svg+xml"


@lru_cache(maxsize=1)
def get_icon_service() -> WeatherIconService:
    request_config = RequestConfig(timeout=settings.UPSTREAM_TIMEOUT)
    return WeatherIconService(
        geolocation=IPApiGeolocationProvider(
            base_url=settings.GEOLOCATION_BASE_URL,
            request_config=request_config,
        ),
        weather=DarkSkyProvider(
            api_key=settings.WEATHER_API_KEY,
            base_url=settings.WEATHER_BASE_URL,
            request_config=request_config,
        ),
        trust_policy=TrustPolicy(settings.TRUSTED_PROXY_NETWORKS),
        fallback_address=settings.FALLBACK_CLIENT_ADDRESS,
    )


class UpstreamServiceError(APIException):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_detail = "Upstream weather service failed."
    default_code = "upstream_error"


class IgnoreClientContentNegotiation(BaseContentNegotiation):
    """Always answer with the first renderer; the icon is the only success body."""

    def select_parser(self, request, parsers):
        return parsers[0]

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class WeatherIconView(APIView):
    """Render the weather at the requester's approximate location."""

    permission_classes = [AllowAny]
    renderer_classes = [JSONRenderer]
    content_negotiation_class = IgnoreClientContentNegotiation

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the SVG icon, or let the exception handler render the failure."""
        try:
            svg = get_icon_service().render(request.META)
        except ProviderError as exc:
            raise UpstreamServiceError(detail=str(exc)) from exc
        return HttpResponse(svg, content_type=SVG_CONTENT_TYPE)
