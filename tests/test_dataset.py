"""
Tests for map_gallery.dataset — JSON parsing and degraded loading.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from map_gallery.dataset import (
    DatasetError,
    DatasetSummary,
    load_locations,
    load_locations_with_summary,
    parse_location,
    parse_locations,
)
from map_gallery.filters import filter_locations
from map_gallery.models import FilterCriteria
from tests.conftest import location_json

BUNDLED_DATA = Path(__file__).resolve().parent.parent / "data" / "locations.json"


# ═══════════════════════════════════════════════════════════════════
# parse_location
# ═══════════════════════════════════════════════════════════════════
class TestParseLocation:

    def test_required_fields(self):
        loc = parse_location(location_json())
        assert loc.filename == "/images/a.webp"
        assert loc.location == "Lago Bianco"
        assert loc.coordinates == (46.41, 10.02)
        assert loc.height is None
        assert loc.difficulty is None
        assert loc.recommended is None
        assert loc.image_map is None

    def test_optional_fields(self):
        loc = parse_location(location_json(
            short="Bianco",
            height=2234,
            difficulty="hiking",
            recommended=True,
            hike_distance_km=4.2,
            elevation_gain_m="120",
            nearest_city="Pontresina",
            imageMap="/images/map/a.webp",
        ))
        assert loc.short == "Bianco"
        assert loc.height == 2234.0
        assert loc.difficulty == "hiking"
        assert loc.recommended is True
        assert loc.hike_distance_km == 4.2
        assert loc.elevation_gain_m == 120.0
        assert loc.nearest_city == "Pontresina"
        assert loc.image_map == "/images/map/a.webp"

    def test_unknown_fields_ignored(self):
        loc = parse_location(location_json(camera="X100V"))
        assert loc.filename == "/images/a.webp"

    def test_unknown_difficulty_is_kept(self):
        assert parse_location(location_json(difficulty="scrambling")).difficulty == "scrambling"

    def test_missing_display_fields_default_to_empty(self):
        record = location_json()
        del record["province"], record["date"]
        loc = parse_location(record)
        assert loc.province == ""
        assert loc.date == ""

    @pytest.mark.parametrize("missing", ["filename", "location", "coordinates"])
    def test_missing_required_field(self, missing):
        record = location_json()
        del record[missing]
        with pytest.raises(DatasetError, match=missing):
            parse_location(record)

    @pytest.mark.parametrize("coords", [[46.4], [46.4, 10.0, 5.0], ["north", 10.0], None, 46.4])
    def test_malformed_coordinates(self, coords):
        with pytest.raises(DatasetError):
            parse_location(location_json(coordinates=coords))

    def test_malformed_height(self):
        with pytest.raises(DatasetError):
            parse_location(location_json(height="high"))

    @pytest.mark.parametrize("raw,expected", [
        (True, True),
        (False, False),
        (None, None),
        ("false", None),
        ("true", None),
        ("yes", None),
        (1, None),
        (0, None),
    ])
    def test_recommended_only_accepts_booleans(self, raw, expected):
        assert parse_location(location_json(recommended=raw)).recommended is expected

    @pytest.mark.parametrize("raw,expected", [
        (2234, 2234.0),
        (1791.5, 1791.5),
        ("2456", 2456.0),
        ("", None),
        (None, None),
        (0, 0.0),
    ])
    def test_height_coercion(self, raw, expected):
        assert parse_location(location_json(height=raw)).height == expected

    @pytest.mark.parametrize("raw,expected", [
        ("alpine_hiking", "alpine_hiking"),
        (3, "3"),
        (None, None),
    ])
    def test_difficulty_coercion(self, raw, expected):
        assert parse_location(location_json(difficulty=raw)).difficulty == expected

    def test_numeric_difficulty_is_unknown(self):
        assert parse_location(location_json(difficulty=3)).difficulty_index is None

    @pytest.mark.parametrize("field", ["hike_distance_km", "elevation_gain_m"])
    def test_hike_stats_coercion(self, field):
        assert getattr(parse_location(location_json(**{field: "7.5"})), field) == 7.5
        assert getattr(parse_location(location_json(**{field: ""})), field) is None


# ═══════════════════════════════════════════════════════════════════
# parse_locations / load_locations
# ═══════════════════════════════════════════════════════════════════
class TestParseLocations:

    def test_skips_non_objects(self):
        locations, summary = parse_locations([location_json(), "nope", 3])
        assert len(locations) == 1
        assert summary == DatasetSummary(records_total=3, records_parsed=1, records_skipped=2)

    def test_rejects_non_array(self):
        with pytest.raises(DatasetError):
            parse_locations({"locations": []})

    def test_empty_array(self):
        assert parse_locations([]) == ([], DatasetSummary(0, 0, 0))

    def test_editors_choice_requires_json_true(self):
        locations, _ = parse_locations([
            location_json(filename="/a", recommended="false"),
            location_json(filename="/b", recommended=1),
            location_json(filename="/c", recommended=True),
        ])
        kept = filter_locations(locations, FilterCriteria(editors_choice_only=True))
        assert [loc.filename for loc in kept] == ["/c"]
        assert [loc.recommended for loc in locations] == [None, None, True]


class TestLoadLocations:

    def test_load_file(self, dataset_file):
        locations, summary = load_locations_with_summary(dataset_file)
        assert [loc.filename for loc in locations] == ["/images/a.webp", "/images/b.webp"]
        assert summary == DatasetSummary(records_total=3, records_parsed=2, records_skipped=1)

    def test_skipped_records_logged_once(self, dataset_file, caplog):
        with caplog.at_level(logging.WARNING, logger="map_gallery.dataset"):
            load_locations(dataset_file)
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Skipped 1 malformed" in warnings[0].getMessage()

    def test_missing_file_is_empty(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="map_gallery.dataset"):
            assert load_locations(tmp_path / "nope.json") == []
        assert "Error loading locations" in caplog.text

    def test_bad_json_is_empty(self, tmp_path):
        p = tmp_path / "locations.json"
        p.write_text("[{not json", encoding="utf-8")
        assert load_locations_with_summary(p) == ([], DatasetSummary(0, 0, 0))

    def test_non_array_is_empty(self, tmp_path):
        p = tmp_path / "locations.json"
        p.write_text(json.dumps({"filename": "x"}), encoding="utf-8")
        assert load_locations(p) == []

    def test_bundled_dataset(self):
        locations, summary = load_locations_with_summary(BUNDLED_DATA)
        assert summary.records_skipped == 0
        assert len(locations) == 12
        assert len({loc.filename for loc in locations}) == 12
