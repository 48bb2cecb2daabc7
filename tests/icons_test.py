from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from backend.core.icons import (
    PARTLY_CLOUDY_TRANSFORM,
    SVG_CLOUD,
    SVG_CREDIT,
    SVG_MOON,
    SVG_RAIN,
    SVG_SNOW,
    SVG_SUN,
    SVG_WIND,
    condition_code,
    render_icon,
)
from backend.core.providers.base import WeatherLookupError


BASE_LAYERS = (SVG_SUN, SVG_MOON, SVG_RAIN, SVG_SNOW, SVG_WIND)
PARTLY_CLOUDY_OPEN = f"<g {PARTLY_CLOUDY_TRANSFORM}>"

EXPECTED = {
    "clear-day": ((SVG_SUN,), False),
    "clear-night": ((SVG_MOON,), False),
    "partly-cloudy-day": ((SVG_SUN,), True),
    "partly-cloudy-night": ((SVG_MOON,), True),
    "rain": ((SVG_RAIN,), True),
    "snow": ((SVG_SNOW,), True),
    "hail": ((SVG_SNOW,), True),
    "sleet": ((SVG_RAIN, SVG_SNOW), True),
    "wind": ((SVG_WIND,), False),
    "tornado": ((), True),
}


@pytest.mark.parametrize("code", sorted(EXPECTED))
def test_render_icon_layers(code: str) -> None:
    svg = render_icon(code)
    base, has_cloud = EXPECTED[code]

    ET.fromstring(svg)
    assert svg.count(SVG_CREDIT) == 1
    assert (SVG_CLOUD in svg) is has_cloud
    for fragment in BASE_LAYERS:
        assert (fragment in svg) is (fragment in base), fragment


def test_document_geometry() -> None:
    root = ET.fromstring(render_icon("rain"))

    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    assert root.attrib["viewBox"] == "0 0 200 230"
    assert render_icon("rain").endswith("</svg>")


@pytest.mark.parametrize("code", ["partly-cloudy-day", "partly-cloudy-night"])
def test_partly_cloudy_wraps_cloud_in_translation(code: str) -> None:
    svg = render_icon(code)

    assert f"{PARTLY_CLOUDY_OPEN}{SVG_CLOUD}</g>" in svg
    assert svg.count(PARTLY_CLOUDY_OPEN) == 1


def test_clear_day_has_no_cloud() -> None:
    svg = render_icon("clear-day")

    assert SVG_CLOUD not in svg
    assert PARTLY_CLOUDY_OPEN not in svg


def test_sleet_draws_rain_before_snow_with_plain_cloud() -> None:
    svg = render_icon("sleet")

    assert svg.index(SVG_RAIN) < svg.index(SVG_SNOW) < svg.index(SVG_CLOUD)
    assert PARTLY_CLOUDY_OPEN not in svg


def test_unknown_code_keeps_cloud_and_credit_only() -> None:
    svg = render_icon("fog")

    assert SVG_CLOUD in svg
    assert SVG_CREDIT in svg
    assert PARTLY_CLOUDY_OPEN not in svg
    assert not any(fragment in svg for fragment in BASE_LAYERS)


def test_credit_is_drawn_last() -> None:
    svg = render_icon("partly-cloudy-day")

    assert svg.endswith(SVG_CREDIT + "</svg>")


def test_condition_code_reads_currently_icon() -> None:
    assert condition_code({"currently": {"icon": "snow", "temperature": -2}, "daily": {}}) == "snow"


@pytest.mark.parametrize("payload", [{}, {"currently": None}, {"currently": {}}, {"currently": {"icon": 3}}])
def test_condition_code_rejects_malformed_payload(payload: dict) -> None:
    with pytest.raises(WeatherLookupError):
        condition_code(payload)
