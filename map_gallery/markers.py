"""Folium map construction: tile layer plus one thumbnail marker per location."""

from __future__ import annotations

import html
import math
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

import folium

from map_gallery.i18n import Language, translate
from map_gallery.map_styles import DEFAULT_THEME, MapStyle, Theme, parse_style, tile_source
from map_gallery.models import DEFAULT_CENTER, DEFAULT_ZOOM, Location

MARKER_SIZE_PX = 48
MARKER_LARGE_SIZE_PX = 80
# degrees; a marker click reports the marker position, so this only absorbs float noise
CLICK_TOLERANCE_DEG = 1e-6


def should_be_large(
    location: Location,
    selected: Location | None,
    hovered: Location | None,
    panel_open: bool,
) -> bool:
    """Enlarge the marker when it is the open location or hovered from the grid."""

    is_active = selected is not None and selected.filename == location.filename
    is_hovered = hovered is not None and hovered.filename == location.filename
    return (is_active and panel_open) or is_hovered


def marker_html(location: Location, *, large: bool = False, theme: Theme = DEFAULT_THEME) -> str:
    """Round thumbnail with a label underneath."""

    size = MARKER_LARGE_SIZE_PX if large else MARKER_SIZE_PX
    border = "#ffffff" if theme is Theme.DARK else "#000000"
    image = html.escape(location.image_map or location.filename, quote=True)
    label = html.escape(location.short or location.location)
    tooltip_style = "opacity:1;visibility:visible;" if large else ""
    return (
        f'<div class="marker-wrapper{" marker-active" if large else ""}">'
        f'<div class="marker-image" style="width:{size}px;height:{size}px;border:2px solid {border};'
        "border-radius:50%;overflow:hidden;background:#1f2937;position:absolute;top:50%;left:50%;"
        'transform:translate(-50%,-50%);box-shadow:0 4px 12px rgba(0,0,0,.35);">'
        f'<img src="{image}" style="width:100%;height:100%;object-fit:cover;display:block;" '
        "onerror=\"this.style.display='none';this.nextElementSibling.style.display='flex';\"/>"
        '<div style="display:none;align-items:center;justify-content:center;height:100%;color:#fff;">📷</div>'
        "</div>"
        f'<div class="marker-tooltip" style="{tooltip_style}">{label}</div>'
        "</div>"
    )


def marker_tooltip(location: Location, language: str | Language) -> str:
    """Hover text: label, date and time."""

    return (
        f"{location.label} · {translate('marker.date', language)}: {location.date} · "
        f"{translate('marker.time', language)}: {location.time}"
    )


def build_map(
    locations: Iterable[Location],
    *,
    center: Sequence[float] = DEFAULT_CENTER,
    zoom: int = DEFAULT_ZOOM,
    style: str | MapStyle = MapStyle.SIMPLE,
    theme: Theme = DEFAULT_THEME,
    language: str | Language = Language.EN,
    selected: Location | None = None,
    hovered: Location | None = None,
    panel_open: bool = False,
) -> folium.Map:
    """Build the gallery map.

    Args:
        locations: Filtered locations; every one gets a marker.
        center: Initial (lat, lng).
        zoom: Initial zoom level.
        style: Base map style.
        theme: Light/dark; affects the simple style and marker borders.
        language: Tooltip language.
        selected: Location shown in the detail panel.
        hovered: Location hovered in the gallery grid.
        panel_open: Whether the detail panel is open.

    Returns:
        folium.Map ready to render or save.
    """

    source = tile_source(style, theme)
    fmap = folium.Map(location=list(center), zoom_start=zoom, tiles=None, control_scale=True)
    folium.TileLayer(tiles=source.url, attr=source.attribution, name=parse_style(style).value).add_to(fmap)

    for loc in locations:
        large = should_be_large(loc, selected, hovered, panel_open)
        folium.Marker(
            location=[loc.lat, loc.lng],
            icon=folium.DivIcon(
                html=marker_html(loc, large=large, theme=theme),
                icon_size=(MARKER_SIZE_PX, MARKER_SIZE_PX),
                icon_anchor=(MARKER_SIZE_PX // 2, MARKER_SIZE_PX // 2),
                class_name="custom-marker-icon",
            ),
            tooltip=marker_tooltip(loc, language),
        ).add_to(fmap)
    return fmap


def find_clicked(locations: Iterable[Location], clicked: Mapping[str, Any] | None) -> Location | None:
    """Resolve a clicked marker position ({"lat", "lng"}) back to its location."""

    if not clicked:
        return None
    try:
        lat = float(clicked["lat"])
        lng = float(clicked["lng"])
    except (KeyError, TypeError, ValueError):
        return None
    for loc in locations:
        if math.isclose(loc.lat, lat, abs_tol=CLICK_TOLERANCE_DEG) and math.isclose(
            loc.lng, lng, abs_tol=CLICK_TOLERANCE_DEG
        ):
            return loc
    return None


def save_map(fmap: folium.Map, out_path: str | Path) -> Path:
    """Write the map as a standalone HTML page."""

    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)
    fmap.save(str(p))
    return p
