"""Loading the location dataset (JSON array) from a file or a static URL."""

from __future__ import annotations

import json
import logging
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from map_gallery.models import Location

logger = logging.getLogger(__name__)

HTTP_TIMEOUT_SECONDS = 20.0
USER_AGENT = "map-gallery/0.1.0"


class DatasetError(ValueError):
    """A location record is missing required fields or has malformed values."""


@dataclass(frozen=True, slots=True)
class DatasetSummary:
    """Quick summary of dataset parsing."""

    records_total: int
    records_parsed: int
    records_skipped: int


def _opt_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _opt_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def _opt_bool(value: Any) -> bool | None:
    # Only JSON true/false are flags; "false", 1 or "yes" are not.
    return value if isinstance(value, bool) else None


def parse_location(obj: Mapping[str, Any]) -> Location:
    """Map one JSON object to a Location.

    Unknown keys are ignored; missing optional keys become None.

    Raises:
        DatasetError: If a required key is missing or coordinates are malformed.
    """

    try:
        raw_coords = obj["coordinates"]
        if len(raw_coords) != 2:
            raise DatasetError(f"coordinates must be [lat, lng], got {raw_coords!r}")
        coordinates = (float(raw_coords[0]), float(raw_coords[1]))
        return Location(
            filename=str(obj["filename"]),
            location=str(obj["location"]),
            province=str(obj.get("province", "") or ""),
            country=str(obj.get("country", "") or ""),
            date=str(obj.get("date", "") or ""),
            time=str(obj.get("time", "") or ""),
            coordinates=coordinates,
            short=_opt_str(obj.get("short")),
            height=_opt_float(obj.get("height")),
            difficulty=_opt_str(obj.get("difficulty")),
            recommended=_opt_bool(obj.get("recommended")),
            hike_distance_km=_opt_float(obj.get("hike_distance_km")),
            elevation_gain_m=_opt_float(obj.get("elevation_gain_m")),
            nearest_city=_opt_str(obj.get("nearest_city")),
            image_map=_opt_str(obj.get("imageMap")),
        )
    except DatasetError:
        raise
    except KeyError as exc:
        raise DatasetError(f"Location record is missing field {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise DatasetError(f"Malformed location record: {exc}") from exc


def _read_source(source: str | Path) -> str:
    s = str(source)
    if s.startswith(("http://", "https://")):
        req = urllib.request.Request(
            s,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            method="GET",
        )
        with urllib.request.urlopen(req, timeout=HTTP_TIMEOUT_SECONDS) as resp:  # noqa: S310
            return resp.read().decode("utf-8", errors="replace")
    return Path(s).read_text(encoding="utf-8")


def parse_locations(payload: Any) -> tuple[list[Location], DatasetSummary]:
    """Parse an already-decoded JSON payload.

    Malformed records are skipped and counted.

    Raises:
        DatasetError: If the payload is not a JSON array.
    """

    if not isinstance(payload, list):
        raise DatasetError(f"Expected a JSON array of locations, got {type(payload).__name__}")

    parsed: list[Location] = []
    for item in payload:
        if not isinstance(item, Mapping):
            continue
        try:
            parsed.append(parse_location(item))
        except DatasetError as exc:
            logger.debug("Skipping location record: %s", exc)
            continue

    summary = DatasetSummary(
        records_total=len(payload),
        records_parsed=len(parsed),
        records_skipped=len(payload) - len(parsed),
    )
    if summary.records_skipped > 0:
        logger.warning("Skipped %s malformed location records", summary.records_skipped)
    return parsed, summary


def load_locations_with_summary(source: str | Path) -> tuple[list[Location], DatasetSummary]:
    """Load the dataset once.

    Any failure (missing file, network error, bad JSON, wrong shape) degrades to
    an empty dataset. No retry.

    Args:
        source: Local path or http(s) URL of the JSON array.

    Returns:
        (locations, summary)
    """

    try:
        payload = json.loads(_read_source(source))
        return parse_locations(payload)
    except (OSError, ValueError) as exc:
        # urllib errors are OSError; JSONDecodeError and DatasetError are ValueError
        logger.warning("Error loading locations from %s: %s", source, exc)
        return [], DatasetSummary(records_total=0, records_parsed=0, records_skipped=0)


def load_locations(source: str | Path) -> list[Location]:
    """Load the dataset, returning an empty list on failure."""

    locations, _ = load_locations_with_summary(source)
    return locations
