"""WGS84 -> Swiss grid (CH1903 / LV03) approximate projection.

Uses the published swisstopo approximation polynomial. The result is only
accurate to about a meter inside Switzerland; outside of it the numbers are
well defined but meaningless.
"""

from __future__ import annotations

import math
from typing import NamedTuple


class SwissGridPoint(NamedTuple):
    """Easting/northing in meters (LV03 with the LV95 2/1 million prefixes)."""

    E: int
    N: int


def _round_half_up(value: float) -> int:
    # Matches JavaScript Math.round, which the map viewer links were built with.
    return math.floor(value + 0.5)


def wgs84_to_swiss_grid(lat: float, lng: float) -> SwissGridPoint:
    """Convert WGS84 latitude/longitude to Swiss grid coordinates.

    Args:
        lat: Latitude in decimal degrees.
        lng: Longitude in decimal degrees.

    Returns:
        SwissGridPoint with E and N rounded to whole meters.
    """

    # arc-seconds, shifted to Bern and scaled
    phi_aux = (lat * 3600 - 169028.66) / 10000
    lam_aux = (lng * 3600 - 26782.5) / 10000

    e = (
        2600072.37
        + 211455.93 * lam_aux
        - 10938.51 * lam_aux * phi_aux
        - 0.36 * lam_aux * phi_aux * phi_aux
        - 44.54 * lam_aux * lam_aux * lam_aux
    )
    n = (
        1200147.07
        + 308807.95 * phi_aux
        + 3745.25 * lam_aux * lam_aux
        + 76.63 * phi_aux * phi_aux
        - 194.56 * lam_aux * lam_aux * phi_aux
        + 119.79 * phi_aux * phi_aux * phi_aux
    )
    return SwissGridPoint(E=_round_half_up(e), N=_round_half_up(n))
