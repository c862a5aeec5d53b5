"""Data models for gallery locations, filter criteria and viewport bounds."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Final, Mapping

DIFFICULTY_LEVELS: Final[tuple[str, ...]] = (
    "hiking",
    "mountain_hiking",
    "demanding_mountain_hiking",
    "alpine_hiking",
    "difficult_alpine_hiking",
)

DEFAULT_DIFFICULTY_RANGE: Final[tuple[int, int]] = (0, len(DIFFICULTY_LEVELS) - 1)
DEFAULT_HEIGHT_RANGE: Final[tuple[int, int]] = (100, 4000)
HEIGHT_STEP_M: Final[int] = 50
HEIGHT_MIN_GAP_M: Final[int] = 200

DEFAULT_CENTER: Final[tuple[float, float]] = (46.6, 9.8)
DEFAULT_ZOOM: Final[int] = 9
DEFAULT_DATA_PATH: Final[str] = "data/locations.json"

SWITZERLAND: Final[str] = "Switzerland"
GRAUBUNDEN: Final[str] = "Graubünden"


@dataclass(frozen=True, slots=True)
class Location:
    """A single photo location.

    Attributes:
        filename: Path/URL of the representative image. Unique within a session.
        location: Display name of the place.
        province: Province/canton, e.g. "Graubünden".
        country: Country name in English, e.g. "Switzerland".
        date: Capture date as "DD-MM-YYYY".
        time: Capture time as shown to the user.
        coordinates: (latitude, longitude) in WGS84 decimal degrees.
        short: Optional short label used in the grid and marker tooltip.
        height: Meters above sea level.
        difficulty: One of DIFFICULTY_LEVELS. Other values are kept as-is and
            treated as unknown by the filters.
        recommended: Editor's choice flag.
        hike_distance_km: Hike length from the nearest city.
        elevation_gain_m: Total elevation gain of that hike.
        nearest_city: Starting point of the hike.
        image_map: Marker thumbnail URL.
    """

    filename: str
    location: str
    province: str
    country: str
    date: str
    time: str
    coordinates: tuple[float, float]
    short: str | None = None
    height: float | None = None
    difficulty: str | None = None
    recommended: bool | None = None
    hike_distance_km: float | None = None
    elevation_gain_m: float | None = None
    nearest_city: str | None = None
    image_map: str | None = None

    @property
    def lat(self) -> float:
        return self.coordinates[0]

    @property
    def lng(self) -> float:
        return self.coordinates[1]

    @property
    def label(self) -> str:
        """Short label if present, otherwise the full location name."""

        return self.short or self.location

    @property
    def is_editors_choice(self) -> bool:
        return self.recommended is True

    @property
    def difficulty_index(self) -> int | None:
        """Position in DIFFICULTY_LEVELS, or None for absent/unknown levels."""

        if not self.difficulty:
            return None
        try:
            return DIFFICULTY_LEVELS.index(self.difficulty)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """User-selected filters applied to the dataset.

    Ranges are inclusive on both ends. ``difficulty_range`` indexes into
    DIFFICULTY_LEVELS, ``height_range`` is in meters.
    """

    editors_choice_only: bool = False
    switzerland_only: bool = False
    graubunden_only: bool = False
    difficulty_range: tuple[int, int] = DEFAULT_DIFFICULTY_RANGE
    height_range: tuple[int, int] = DEFAULT_HEIGHT_RANGE

    def is_default(self) -> bool:
        """True when no filter differs from its default (the reset button is hidden)."""

        return self == FilterCriteria()

    def with_changes(self, **changes: Any) -> FilterCriteria:
        return replace(self, **changes)

    @staticmethod
    def reset() -> FilterCriteria:
        return FilterCriteria()


@dataclass(frozen=True, slots=True)
class GeoBounds:
    """Rectangular viewport bounds in WGS84 degrees.

    When ``west > east`` the box crosses the antimeridian.
    """

    south: float
    west: float
    north: float
    east: float

    @property
    def wraps_antimeridian(self) -> bool:
        return self.west > self.east

    def contains(self, lat: float, lng: float) -> bool:
        """Check whether a point is inside or on the boundary of the box."""

        if not (self.south <= lat <= self.north):
            return False
        if self.wraps_antimeridian:
            return lng >= self.west or lng <= self.east
        return self.west <= lng <= self.east

    @classmethod
    def from_leaflet(cls, raw: Mapping[str, Any]) -> GeoBounds:
        """Build bounds from a Leaflet ``LatLngBounds`` JSON dict.

        Expected shape: ``{"_southWest": {"lat", "lng"}, "_northEast": {"lat", "lng"}}``.

        Raises:
            ValueError: If the dict does not have that shape.
        """

        try:
            sw = raw["_southWest"]
            ne = raw["_northEast"]
            return cls(
                south=float(sw["lat"]),
                west=float(sw["lng"]),
                north=float(ne["lat"]),
                east=float(ne["lng"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Invalid Leaflet bounds: {raw!r}") from exc
