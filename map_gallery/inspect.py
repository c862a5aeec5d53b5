"""Inspect the location dataset."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

from map_gallery.models import Location

UNKNOWN = "(none)"


@dataclass(frozen=True, slots=True)
class InspectResult:
    """High-level dataset inspection result."""

    locations: int
    editors_choice: int
    by_country: dict[str, int] = field(default_factory=dict)
    by_province: dict[str, int] = field(default_factory=dict)
    by_difficulty: dict[str, int] = field(default_factory=dict)
    min_height: float | None = None
    max_height: float | None = None
    without_height: int = 0
    min_lat: float | None = None
    max_lat: float | None = None
    min_lng: float | None = None
    max_lng: float | None = None
    duplicate_filenames: int = 0


def _counts(values: Sequence[str]) -> dict[str, int]:
    return dict(Counter(values).most_common())


def inspect_locations(locations: Sequence[Location]) -> InspectResult:
    """Inspect already-loaded locations."""

    if not locations:
        return InspectResult(locations=0, editors_choice=0)

    heights = [loc.height for loc in locations if loc.height]
    lats = [loc.lat for loc in locations]
    lngs = [loc.lng for loc in locations]
    filenames = [loc.filename for loc in locations]
    return InspectResult(
        locations=len(locations),
        editors_choice=sum(1 for loc in locations if loc.is_editors_choice),
        by_country=_counts([loc.country or UNKNOWN for loc in locations]),
        by_province=_counts([loc.province or UNKNOWN for loc in locations]),
        by_difficulty=_counts([loc.difficulty or UNKNOWN for loc in locations]),
        min_height=min(heights) if heights else None,
        max_height=max(heights) if heights else None,
        without_height=len(locations) - len(heights),
        min_lat=min(lats),
        max_lat=max(lats),
        min_lng=min(lngs),
        max_lng=max(lngs),
        duplicate_filenames=len(filenames) - len(set(filenames)),
    )
