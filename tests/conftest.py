"""
Shared fixtures for the map_gallery test suite.

This conftest provides:
- A Location factory with sensible defaults
- The three-location dataset used across filter scenarios
- A JSON dataset written to a temporary file
"""
from __future__ import annotations

import json

import pytest

from map_gallery.models import Location


# ---------------------------------------------------------------------------
# Sample data factories
# ---------------------------------------------------------------------------
def make_location(
    *,
    filename: str = "/images/test.webp",
    location: str = "Test location",
    province: str = "Graubünden",
    country: str = "Switzerland",
    date: str = "05-03-2024",
    time: str = "10:30",
    coordinates: tuple[float, float] = (46.6, 9.8),
    short: str | None = None,
    height: float | None = None,
    difficulty: str | None = None,
    recommended: bool | None = None,
    hike_distance_km: float | None = None,
    elevation_gain_m: float | None = None,
    nearest_city: str | None = None,
    image_map: str | None = None,
) -> Location:
    return Location(
        filename=filename,
        location=location,
        province=province,
        country=country,
        date=date,
        time=time,
        coordinates=coordinates,
        short=short,
        height=height,
        difficulty=difficulty,
        recommended=recommended,
        hike_distance_km=hike_distance_km,
        elevation_gain_m=elevation_gain_m,
        nearest_city=nearest_city,
        image_map=image_map,
    )


def location_json(**overrides: object) -> dict[str, object]:
    """Return a raw JSON record as found in locations.json."""
    record: dict[str, object] = {
        "filename": "/images/a.webp",
        "location": "Lago Bianco",
        "province": "Graubünden",
        "country": "Switzerland",
        "date": "12-06-2024",
        "time": "09:41",
        "coordinates": [46.41, 10.02],
    }
    record.update(overrides)
    return record


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def abc_locations() -> list[Location]:
    """A: recommended CH 500 m hiking; B: IT 2000 m alpine; C: recommended CH 4500 m."""
    a = make_location(
        filename="a.webp", location="A", country="Switzerland", province="Graubünden",
        coordinates=(46.5, 9.8), height=500, difficulty="hiking", recommended=True,
    )
    b = make_location(
        filename="b.webp", location="B", country="Italy", province="Lombardy",
        coordinates=(46.3, 10.1), height=2000, difficulty="alpine_hiking", recommended=False,
    )
    c = make_location(
        filename="c.webp", location="C", country="Switzerland", province="Graubünden",
        coordinates=(46.4, 9.9), height=4500, difficulty="difficult_alpine_hiking", recommended=True,
    )
    return [a, b, c]


@pytest.fixture
def dataset_file(tmp_path):
    """Write a small locations.json and return its path."""
    records = [
        location_json(filename="/images/a.webp", recommended=True, height=2234, difficulty="hiking"),
        location_json(filename="/images/b.webp", location="Livigno", country="Italy", province="Lombardy",
                      coordinates=[46.58, 10.14], extra_field="ignored"),
        {"filename": "/images/broken.webp"},
    ]
    p = tmp_path / "locations.json"
    p.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    return p
