from __future__ import annotations

import argparse
import json
import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Final

DIFFICULTIES: Final[tuple[str, ...]] = (
    "hiking",
    "mountain_hiking",
    "demanding_mountain_hiking",
    "alpine_hiking",
    "difficult_alpine_hiking",
)


@dataclass(frozen=True, slots=True)
class Place:
    name: str
    short: str
    province: str
    country: str
    lat: float
    lon: float
    height: float
    nearest_city: str


PLACES: Final[list[Place]] = [
    Place("Lago Bianco, Bernina Pass", "Lago Bianco", "Graubünden", "Switzerland", 46.4106, 10.0215, 2234, "Pontresina"),
    Place("Piz Languard summit", "Piz Languard", "Graubünden", "Switzerland", 46.4942, 9.9563, 3262, "Pontresina"),
    Place("Lej da Silvaplauna", "Silvaplana", "Graubünden", "Switzerland", 46.4475, 9.7963, 1791, "Silvaplana"),
    Place("Muottas Muragl", "Muottas Muragl", "Graubünden", "Switzerland", 46.5238, 9.9020, 2456, "Samedan"),
    Place("Jakobshorn, Davos", "Jakobshorn", "Graubünden", "Switzerland", 46.7727, 9.8543, 2590, "Davos"),
    Place("Lago di Livigno", "Livigno", "Lombardy", "Italy", 46.5836, 10.1402, 1805, "Livigno"),
    Place("Malbun valley", "Malbun", "Malbun", "Liechtenstein", 47.1019, 9.6094, 1600, "Vaduz"),
    Place("Reschensee church tower", "Reschensee", "South Tyrol", "Italy", 46.8334, 10.5120, 1498, "Graun"),
    Place("Piz Bernina viewpoint", "Piz Bernina", "Graubünden", "Switzerland", 46.3824, 9.9080, 4049, "Pontresina"),
    Place("Rheinschlucht Ruinaulta", "Ruinaulta", "Graubünden", "Switzerland", 46.8195, 9.3060, 700, "Flims"),
    Place("Arlberg pass", "Arlberg", "Tyrol", "Austria", 47.1296, 10.2110, 1793, "St. Anton"),
    Place("Lago di Como, Gravedona", "Gravedona", "Lombardy", "Italy", 46.1433, 9.3040, 201, "Gravedona"),
]


def generate_locations(*, seed: int, start: datetime, places: list[Place]) -> list[dict[str, object]]:
    """Generate fake locations.json entries (one per place) with random metadata."""

    rng = random.Random(seed)
    out: list[dict[str, object]] = []
    taken = start
    for i, place in enumerate(places):
        taken = taken + timedelta(days=rng.randint(3, 40), minutes=rng.randint(0, 600))
        item: dict[str, object] = {
            "filename": f"/images/location-{i + 1:03d}.webp",
            "imageMap": f"/images/map/location-{i + 1:03d}.webp",
            "location": place.name,
            "short": place.short,
            "province": place.province,
            "country": place.country,
            "date": taken.strftime("%d-%m-%Y"),
            "time": taken.strftime("%H:%M"),
            "coordinates": [round(place.lat + rng.uniform(-0.002, 0.002), 6), round(place.lon + rng.uniform(-0.002, 0.002), 6)],
            "height": place.height,
            "recommended": rng.random() < 0.35,
        }
        # Leave some fields out so consumers see absent optional data
        if rng.random() < 0.85:
            item["difficulty"] = rng.choice(DIFFICULTIES)
        if rng.random() < 0.7:
            item["hike_distance_km"] = round(rng.uniform(1.5, 18.0), 1)
            item["elevation_gain_m"] = rng.randrange(50, 1600, 10)
            item["nearest_city"] = place.nearest_city
        out.append(item)
    return out


def main() -> int:
    p = argparse.ArgumentParser(description="Generate a fake locations.json for demo/testing.")
    p.add_argument("--out", type=str, default="sample_data/locations.json", help="Output JSON path")
    p.add_argument("--seed", type=int, default=42, help="Random seed (reproducible)")
    p.add_argument("--start", type=str, default="2024-06-01 08:00:00", help="First capture time")
    args = p.parse_args()

    rows = generate_locations(seed=args.seed, start=datetime.fromisoformat(args.start), places=PLACES)
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(rows, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")

    print(f"Generated: {out_path} (locations={len(rows)}, seed={args.seed})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
