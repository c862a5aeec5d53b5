"""Base map tile sources per map style and theme."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> Theme:
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class MapStyle(str, Enum):
    SIMPLE = "simple"
    SATELLITE = "satellite"
    TERRAIN = "terrain"
    STREET = "street"
    SWISSTOPO = "swisstopo"


DEFAULT_THEME: Final[Theme] = Theme.DARK
DEFAULT_STYLE: Final[MapStyle] = MapStyle.SIMPLE


@dataclass(frozen=True, slots=True)
class TileSource:
    """Leaflet tile URL template and its attribution HTML."""

    url: str
    attribution: str


_OSM_ATTRIBUTION = '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a>'

_SIMPLE_BY_THEME: Final[dict[Theme, TileSource]] = {
    Theme.LIGHT: TileSource(
        url="https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png",
        attribution=_OSM_ATTRIBUTION,
    ),
    Theme.DARK: TileSource(
        url="https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png",
        attribution=_OSM_ATTRIBUTION,
    ),
}

TILE_SOURCES: Final[dict[MapStyle, TileSource]] = {
    MapStyle.SATELLITE: TileSource(
        url="https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/MapServer/tile/{z}/{y}/{x}",
        attribution='&copy; <a href="https://www.esri.com/">Esri</a>',
    ),
    MapStyle.TERRAIN: TileSource(
        url="https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png",
        attribution='&copy; <a href="https://opentopomap.org/">OpenTopoMap</a>',
    ),
    MapStyle.STREET: TileSource(
        url="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
        attribution=_OSM_ATTRIBUTION,
    ),
    MapStyle.SWISSTOPO: TileSource(
        url="https://wmts.geo.admin.ch/1.0.0/ch.swisstopo.pixelkarte-farbe/default/current/3857/{z}/{x}/{y}.jpeg",
        attribution='&copy; <a href="https://www.swisstopo.admin.ch/">swisstopo</a>',
    ),
}

# Entries of the mobile style picker. The two "simple" entries also set the theme.
STYLE_CHOICES: Final[tuple[str, ...]] = (
    "light-simple",
    "dark-simple",
    MapStyle.SATELLITE.value,
    MapStyle.TERRAIN.value,
    MapStyle.STREET.value,
    MapStyle.SWISSTOPO.value,
)


def parse_style(value: str | MapStyle | None) -> MapStyle:
    """Parse a style id; unknown ids fall back to the simple style."""

    if isinstance(value, MapStyle):
        return value
    try:
        return MapStyle(str(value))
    except ValueError:
        return DEFAULT_STYLE


def tile_source(style: str | MapStyle, theme: Theme = DEFAULT_THEME) -> TileSource:
    """Tile source for a style. Only the simple style depends on the theme."""

    resolved = parse_style(style)
    if resolved is MapStyle.SIMPLE:
        return _SIMPLE_BY_THEME[theme]
    return TILE_SOURCES[resolved]


def resolve_style_choice(choice: str, theme: Theme) -> tuple[MapStyle, Theme]:
    """Map a picker entry to (style, theme).

    "light-simple" / "dark-simple" select the simple style and switch the theme;
    every other entry keeps the current theme.
    """

    if choice == "light-simple":
        return MapStyle.SIMPLE, Theme.LIGHT
    if choice == "dark-simple":
        return MapStyle.SIMPLE, Theme.DARK
    return parse_style(choice), theme


def style_choice_for(style: MapStyle, theme: Theme) -> str:
    """Inverse of resolve_style_choice, used to preselect the picker."""

    if style is MapStyle.SIMPLE:
        return f"{theme.value}-simple"
    return style.value
