"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from backend.api.views import WeatherIconView

urlpatterns = [
    path("", WeatherIconView.as_view(), name="weather-icon"),
]
