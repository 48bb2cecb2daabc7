"""SVG weather icons composed from static fragments.

An icon is a base layer selected by the condition code, an optional cloud
overlay and the Dark Sky attribution that the API terms require.  Unknown
codes draw no base layer but still get the cloud and the credit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from backend.core.providers.base import WeatherLookupError

SVG_HEADER = (
    '<?xml version="1.0" encoding="UTF-8" ?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" viewBox="0 0 200 230">'
)
SVG_FOOTER = "</svg>"

SVG_SUN = """
<g fill="#FFE000" stroke="#FEE000">
	<circle r="30" cx="100" cy="100" />
	<g transform="translate(100 100)">
		<line x1="0" x2="0" y1="35" y2="70" stroke-width="4" transform="rotate(0)" />
		<line x1="0" x2="0" y1="35" y2="60" stroke-width="4" transform="rotate(45)" />
		<line x1="0" x2="0" y1="35" y2="70" stroke-width="4" transform="rotate(90)" />
		<line x1="0" x2="0" y1="35" y2="60" stroke-width="4" transform="rotate(135)" />
		<line x1="0" x2="0" y1="35" y2="70" stroke-width="4" transform="rotate(180)" />
		<line x1="0" x2="0" y1="35" y2="60" stroke-width="4" transform="rotate(225)" />
		<line x1="0" x2="0" y1="35" y2="70" stroke-width="4" transform="rotate(270)" />
		<line x1="0" x2="0" y1="35" y2="60" stroke-width="4" transform="rotate(315)" />
	</g>
</g>
"""

SVG_MOON = """
<g fill="#E0E0E0">
	<circle r="50" cx="100" cy="100" />
	<g fill="#CCCCCC">
		<circle r="10" cx="80" cy="90" />
		<circle r="7" cx="115" cy="110" />
		<circle r="8" cx="90" cy="120" />
	</g>
</g>
"""

SVG_CLOUD = """
<g fill="#ACACAC">
	<circle r="40" cx="120" cy="70" />
	<circle r="35" cx="70" cy="90" />
	<circle r="40" cx="140" cy="90" />
	<circle r="35" cx="100" cy="105" />
</g>
"""

PARTLY_CLOUDY_TRANSFORM = 'transform="translate(20 50)"'

SVG_RAIN = """
<g stroke="#1F90CC" stroke-width="2" transform="translate(100 100) rotate(25)">
	<line x1="0" x2="0" y1="35" y2="60" transform="translate(10 20)" />
	<line x1="0" x2="0" y1="35" y2="60" transform="translate(-20 10)" />
	<line x1="0" x2="0" y1="35" y2="60" transform="translate(0 0)" />
	<line x1="0" x2="0" y1="35" y2="60" transform="translate(30 30)" />
	<line x1="0" x2="0" y1="35" y2="60" transform="translate(20 -10)" />
	<line x1="0" x2="0" y1="35" y2="60" transform="translate(40 -5)" />
	<line x1="0" x2="0" y1="35" y2="60" transform="translate(50 -30)" />
	<line x1="0" x2="0" y1="35" y2="60" transform="translate(-40 -10)" />
	<line x1="0" x2="0" y1="35" y2="60" transform="translate(-30 40)" />
</g>
"""

SVG_SNOW = """
<g fill="#FFFFFF" transform="translate(100 130)">
	<circle r="7" cx="25" cy="15" />
	<circle r="7" cx="35" cy="50" />
	<circle r="7" cx="50" cy="20" />
	<circle r="7" cx="10" cy="60" />
	<circle r="7" cx="-50" cy="20" />
	<circle r="7" cx="0" cy="35" />
	<circle r="7" cx="-20" cy="10" />
	<circle r="7" cx="-35" cy="45" />
</g>"""

SVG_WIND = """
<g fill="none" stroke="#FFFFFF" stroke-width="3" transform="translate(0, 40)">
	<g>
		<path d="M 10,30 Q 70,50 110,23 L 110,59" fill="#D9F4FF" />
		<circle r="20" cx="120" cy="40" fill="#D0EFFF" opacity="0.9" />
	</g>
	<g transform="translate(20, 25)">
		<path d="M 30,30 Q 70,50 110,23 L 110,59" fill="#D9F4FF" />
		<circle r="20" cx="120" cy="40" fill="#D0EFFF" opacity="0.9" />
	</g>
	<g transform="translate(50, 50)">
		<path d="M 40,30 Q 70,50 110,23 L 110,59" fill="#D9F4FF" />
		<circle r="20" cx="120" cy="40" fill="#D0EFFF" opacity="0.9" />
	</g>
</g>
"""

SVG_CREDIT = (
    '<text fill="#606060" x="0" y="220" font-size="10" font-family="Helvetica">'
    "Powered By Dark Sky</text>"
)


@dataclass(frozen=True)
class IconLayout:
    """Fragments making up the icon for one condition code."""

    base: Tuple[str, ...] = ()
    cloud: bool = True
    partly_cloudy: bool = False


# TODO: hail reuses the snow layer until it gets a dedicated fragment.
ICON_LAYOUTS: Mapping[str, IconLayout] = {
    "clear-day": IconLayout(base=(SVG_SUN,), cloud=False),
    "clear-night": IconLayout(base=(SVG_MOON,), cloud=False),
    "partly-cloudy-day": IconLayout(base=(SVG_SUN,), partly_cloudy=True),
    "partly-cloudy-night": IconLayout(base=(SVG_MOON,), partly_cloudy=True),
    "rain": IconLayout(base=(SVG_RAIN,)),
    "snow": IconLayout(base=(SVG_SNOW,)),
    "hail": IconLayout(base=(SVG_SNOW,)),
    "sleet": IconLayout(base=(SVG_RAIN, SVG_SNOW)),
    "wind": IconLayout(base=(SVG_WIND,), cloud=False),
}

DEFAULT_LAYOUT = IconLayout()


def layout_for(code: str) -> IconLayout:
    return ICON_LAYOUTS.get(code, DEFAULT_LAYOUT)


def render_icon(code: str) -> str:
    """Return a complete SVG document for the condition code."""
    layout = layout_for(code)
    parts = [SVG_HEADER, *layout.base]
    if layout.cloud:
        if layout.partly_cloudy:
            parts.append(f"<g {PARTLY_CLOUDY_TRANSFORM}>{SVG_CLOUD}</g>")
        else:
            parts.append(SVG_CLOUD)
    parts.append(SVG_CREDIT)
    parts.append(SVG_FOOTER)
    return "".join(parts)


def condition_code(payload: Mapping[str, Any]) -> str:
    """Extract ``currently.icon`` from a Dark Sky payload."""
    currently = payload.get("currently")
    icon = currently.get("icon") if isinstance(currently, Mapping) else None
    if not isinstance(icon, str):
        raise WeatherLookupError("weather response is missing currently.icon")
    return icon


__all__ = [
    "DEFAULT_LAYOUT",
    "ICON_LAYOUTS",
    "IconLayout",
    "condition_code",
    "layout_for",
    "render_icon",
]
