"""
Tests for map_gallery.markers — marker HTML and folium map construction.
"""
from __future__ import annotations

import folium

from map_gallery.map_styles import MapStyle, Theme
from map_gallery.markers import (
    MARKER_LARGE_SIZE_PX,
    MARKER_SIZE_PX,
    build_map,
    find_clicked,
    marker_html,
    marker_tooltip,
    save_map,
    should_be_large,
)
from tests.conftest import make_location


class TestShouldBeLarge:

    def test_selected_with_panel_open(self):
        loc = make_location(filename="a")
        assert should_be_large(loc, selected=loc, hovered=None, panel_open=True)

    def test_selected_with_panel_closed(self):
        loc = make_location(filename="a")
        assert not should_be_large(loc, selected=loc, hovered=None, panel_open=False)

    def test_hovered(self):
        loc = make_location(filename="a")
        assert should_be_large(loc, selected=None, hovered=loc, panel_open=False)

    def test_other_location(self):
        loc = make_location(filename="a")
        other = make_location(filename="b")
        assert not should_be_large(loc, selected=other, hovered=other, panel_open=True)


class TestMarkerHtml:

    def test_small_marker(self):
        out = marker_html(make_location(short="Bianco"))
        assert f"width:{MARKER_SIZE_PX}px" in out
        assert "marker-active" not in out
        assert ">Bianco<" in out

    def test_large_marker(self):
        out = marker_html(make_location(), large=True)
        assert f"width:{MARKER_LARGE_SIZE_PX}px" in out
        assert "marker-active" in out

    def test_prefers_map_thumbnail(self):
        out = marker_html(make_location(filename="/images/full.webp", image_map="/images/map/thumb.webp"))
        assert 'src="/images/map/thumb.webp"' in out

    def test_escapes_values(self):
        out = marker_html(make_location(location='<b>"x"</b>', filename='a"onload="alert(1)'))
        assert "<b>" not in out
        assert 'a"onload' not in out

    def test_tooltip(self):
        loc = make_location(short="Bianco", date="05-03-2024", time="10:30")
        assert marker_tooltip(loc, "de") == "Bianco · Datum: 05-03-2024 · Zeit: 10:30"


class TestBuildMap:

    def test_returns_map_with_markers(self, abc_locations):
        fmap = build_map(abc_locations, style=MapStyle.SATELLITE, theme=Theme.LIGHT)
        assert isinstance(fmap, folium.Map)
        markers = [child for child in fmap._children.values() if isinstance(child, folium.Marker)]
        assert len(markers) == 3

    def test_empty(self):
        fmap = build_map([])
        markers = [child for child in fmap._children.values() if isinstance(child, folium.Marker)]
        assert markers == []

    def test_save(self, abc_locations, tmp_path):
        out = save_map(build_map(abc_locations, style="swisstopo"), tmp_path / "out" / "map.html")
        assert out.exists()
        assert "wmts.geo.admin.ch" in out.read_text(encoding="utf-8")


class TestFindClicked:

    def test_match(self, abc_locations):
        assert find_clicked(abc_locations, {"lat": 46.3, "lng": 10.1}).location == "B"

    def test_no_match(self, abc_locations):
        assert find_clicked(abc_locations, {"lat": 0.0, "lng": 0.0}) is None

    def test_missing_or_malformed(self, abc_locations):
        assert find_clicked(abc_locations, None) is None
        assert find_clicked(abc_locations, {"lat": 46.3}) is None
        assert find_clicked(abc_locations, {"lat": "x", "lng": 10.1}) is None
