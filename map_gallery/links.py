"""Outbound deep links (string construction only, nothing is requested)."""

from __future__ import annotations

import urllib.parse
from typing import Final

from map_gallery.models import Location
from map_gallery.projection import wgs84_to_swiss_grid

SWISSTOPO_VIEWER: Final[str] = "https://map.geo.admin.ch/"
SWISSTOPO_BG_LAYER: Final[str] = "ch.swisstopo.pixelkarte-farbe"
SWISSTOPO_ZOOM: Final[int] = 7
DIRECTIONS_BASE: Final[str] = "https://www.google.com/maps/dir/"


def swisstopo_url(
    lat: float,
    lng: float,
    language: str = "en",
    zoom: int = SWISSTOPO_ZOOM,
    bg_layer: str = SWISSTOPO_BG_LAYER,
) -> str:
    """Link to map.geo.admin.ch centered on the point (Swiss grid coordinates)."""

    point = wgs84_to_swiss_grid(lat, lng)
    params = {"E": point.E, "N": point.N, "zoom": zoom, "bgLayer": bg_layer, "lang": language}
    return f"{SWISSTOPO_VIEWER}?{urllib.parse.urlencode(params)}"


def _plain_number(value: float) -> str:
    # 46.0 -> "46", 46.5 -> "46.5"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def directions_url(lat: float, lng: float) -> str:
    """Google Maps driving directions to the raw WGS84 point."""

    return f"{DIRECTIONS_BASE}?api=1&destination={_plain_number(lat)},{_plain_number(lng)}"


def coordinates_text(location: Location) -> str:
    """Text copied to the clipboard: "lat, lng" with 4 decimals."""

    return f"{location.lat:.4f}, {location.lng:.4f}"
