"""Location filtering, viewport visibility and display ordering."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from map_gallery.models import (
    GRAUBUNDEN,
    HEIGHT_MIN_GAP_M,
    SWITZERLAND,
    FilterCriteria,
    GeoBounds,
    Location,
)

logger = logging.getLogger(__name__)


def passes_difficulty(location: Location, difficulty_range: tuple[int, int]) -> bool:
    """Difficulty predicate. Absent or unrecognized levels always pass."""

    idx = location.difficulty_index
    if idx is None:
        return True
    lo, hi = difficulty_range
    return lo <= idx <= hi


def passes_height(location: Location, height_range: tuple[int, int]) -> bool:
    """Height predicate. Locations without a height always pass."""

    if not location.height:
        return True
    lo, hi = height_range
    return lo <= location.height <= hi


def matches(location: Location, criteria: FilterCriteria) -> bool:
    """Check a single location against all criteria.

    The five checks are independent, so their order does not matter.
    """

    if criteria.editors_choice_only and location.recommended is not True:
        return False
    if criteria.switzerland_only and location.country != SWITZERLAND:
        return False
    if criteria.graubunden_only and location.province != GRAUBUNDEN:
        return False
    if not passes_difficulty(location, criteria.difficulty_range):
        return False
    return passes_height(location, criteria.height_range)


def filter_locations(locations: Iterable[Location], criteria: FilterCriteria) -> list[Location]:
    """Return locations matching the criteria, preserving input order.

    Args:
        locations: Full dataset (may be empty while loading or after a failed load).
        criteria: User-selected filters.

    Returns:
        New list with the matching locations.
    """

    return [loc for loc in locations if matches(loc, criteria)]


def visible_within_bounds(filtered: Sequence[Location], bounds: GeoBounds) -> list[Location]:
    """Return the locations whose coordinates fall inside the viewport (inclusive).

    A full re-scan on every call; datasets are small.
    """

    visible = [loc for loc in filtered if bounds.contains(loc.lat, loc.lng)]
    logger.debug("Visible locations updated: %s out of %s", len(visible), len(filtered))
    return visible


def sort_for_display(locations: Iterable[Location]) -> list[Location]:
    """Editor's choice first; otherwise keep dataset order (stable sort)."""

    return sorted(locations, key=lambda loc: not loc.is_editors_choice)


def clamp_height_range(
    new: tuple[int, int],
    previous: tuple[int, int],
    min_gap: int = HEIGHT_MIN_GAP_M,
) -> tuple[int, int]:
    """Accept a new height slider value only if its span is at least ``min_gap``.

    Returns:
        ``new`` if accepted, otherwise ``previous``.
    """

    lo, hi = new
    if hi - lo >= min_gap:
        return (lo, hi)
    return previous
