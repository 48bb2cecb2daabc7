"""Management command rendering a weather icon with the same stack as the API."""
from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_icon_service
from backend.core.client_address import parse_address
from backend.core.icons import render_icon
from backend.core.providers.base import ProviderError


class Command(BaseCommand):
    help = "Write the SVG weather icon for an address (or a fixed condition code) to stdout"

    def add_arguments(self, parser) -> None:  # noqa: D401
        group = parser.add_mutually_exclusive_group()
        group.add_argument("--icon", type=str, help="Render this condition code without any lookup")
        group.add_argument("--ip", type=str, help="Client address to locate (defaults to the fallback address)")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        icon = options.get("icon")
        if icon is not None:
            self.stdout.write(render_icon(icon))
            return

        service = get_icon_service()
        address = options.get("ip") or service.fallback_address
        if parse_address(address) is None:
            raise CommandError(f"{address!r} is not a valid IP address")
        try:
            svg = service.render_for_address(address)
        except ProviderError as exc:
            raise CommandError(str(exc)) from exc
        self.stdout.write(svg)
