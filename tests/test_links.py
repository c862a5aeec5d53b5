"""
Tests for map_gallery.links — swisstopo and directions deep links.
"""
from __future__ import annotations

import pytest

from map_gallery.links import coordinates_text, directions_url, swisstopo_url
from tests.conftest import make_location


class TestSwisstopoUrl:

    def test_default_center_in_german(self):
        assert swisstopo_url(46.6, 9.8, "de") == (
            "https://map.geo.admin.ch/?E=2780909&N=1163693&zoom=7"
            "&bgLayer=ch.swisstopo.pixelkarte-farbe&lang=de"
        )

    def test_defaults_to_english(self):
        assert swisstopo_url(46.6, 9.8).endswith("&lang=en")

    def test_custom_zoom_and_layer(self):
        url = swisstopo_url(46.6, 9.8, "fr", zoom=10, bg_layer="ch.swisstopo.swissimage")
        assert "zoom=10" in url
        assert "bgLayer=ch.swisstopo.swissimage" in url
        assert url.endswith("&lang=fr")


class TestDirectionsUrl:

    @pytest.mark.parametrize("lat,lng,destination", [
        (46.41, 10.02, "46.41,10.02"),
        (46.0, 9.0, "46,9"),
        (46.382179, 9.908431, "46.382179,9.908431"),
    ])
    def test_destination(self, lat, lng, destination):
        assert directions_url(lat, lng) == f"https://www.google.com/maps/dir/?api=1&destination={destination}"


class TestCoordinatesText:

    def test_four_decimals(self):
        loc = make_location(coordinates=(46.410812, 10.02131))
        assert coordinates_text(loc) == "46.4108, 10.0213"

    def test_pads_short_values(self):
        loc = make_location(coordinates=(46.5, 9.0))
        assert coordinates_text(loc) == "46.5000, 9.0000"
