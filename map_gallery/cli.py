"""Command-line interface for map_gallery.

Run:
    python -m map_gallery inspect --data data/locations.json
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from typing import Sequence

from map_gallery.dataset import load_locations, load_locations_with_summary
from map_gallery.filters import filter_locations, sort_for_display, visible_within_bounds
from map_gallery.i18n import Language, difficulty_label, format_date_time, hike_summary
from map_gallery.inspect import inspect_locations
from map_gallery.links import coordinates_text, directions_url, swisstopo_url
from map_gallery.map_styles import DEFAULT_THEME, STYLE_CHOICES, Theme, resolve_style_choice
from map_gallery.markers import build_map, save_map
from map_gallery.models import (
    DEFAULT_DATA_PATH,
    DEFAULT_DIFFICULTY_RANGE,
    DEFAULT_HEIGHT_RANGE,
    DIFFICULTY_LEVELS,
    FilterCriteria,
    GeoBounds,
    Location,
)
from map_gallery.projection import wgs84_to_swiss_grid

logger = logging.getLogger(__name__)


def _criteria_from_args(args: argparse.Namespace) -> FilterCriteria:
    return FilterCriteria(
        editors_choice_only=args.editors_choice,
        switzerland_only=args.switzerland,
        graubunden_only=args.graubunden,
        difficulty_range=(args.difficulty_min, args.difficulty_max),
        height_range=(args.height_min, args.height_max),
    )


def _location_row(loc: Location) -> dict[str, object]:
    return {
        "filename": loc.filename,
        "label": loc.label,
        "country": loc.country,
        "province": loc.province,
        "lat": loc.lat,
        "lng": loc.lng,
        "height": loc.height,
        "difficulty": loc.difficulty,
        "recommended": loc.is_editors_choice,
    }


def _print_locations(title: str, locations: Sequence[Location]) -> None:
    print(f"### {title} ({len(locations)})")
    for loc in locations:
        star = "*" if loc.is_editors_choice else " "
        height = f"{round(loc.height)} m" if loc.height else "-"
        print(f"{star} {loc.label} [{loc.province}, {loc.country}] {height} {loc.difficulty or '-'}")
    print()


def _cmd_inspect(args: argparse.Namespace) -> int:
    locations, summary = load_locations_with_summary(args.data)
    res = inspect_locations(locations)

    print("### Records")
    print(f"total={summary.records_total}, parsed={summary.records_parsed}, skipped={summary.records_skipped}")
    print(f"editors_choice={res.editors_choice}, duplicate_filenames={res.duplicate_filenames}")
    print()

    print("### Countries")
    for name, n in res.by_country.items():
        print(f"{name}: {n}")
    print()

    print("### Provinces")
    for name, n in res.by_province.items():
        print(f"{name}: {n}")
    print()

    print("### Difficulty")
    for name, n in res.by_difficulty.items():
        print(f"{name}: {n}")
    print()

    print("### Height (m)")
    print(f"min={res.min_height}, max={res.max_height}, without_height={res.without_height}")
    print()

    print("### Coordinate range")
    print(f"lat=[{res.min_lat}, {res.max_lat}], lng=[{res.min_lng}, {res.max_lng}]")
    print()

    if args.json:
        payload = asdict(res) | asdict(summary)
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


def _cmd_filter(args: argparse.Namespace) -> int:
    locations = load_locations(args.data)
    criteria = _criteria_from_args(args)
    filtered = filter_locations(locations, criteria)

    visible: list[Location] | None = None
    if args.bounds is not None:
        south, west, north, east = args.bounds
        visible = visible_within_bounds(filtered, GeoBounds(south=south, west=west, north=north, east=east))
    shown = sort_for_display(visible if visible is not None else filtered)

    if args.json:
        payload = {
            "criteria": asdict(criteria),
            "total": len(locations),
            "filtered": len(filtered),
            "visible": None if visible is None else len(visible),
            "locations": [_location_row(loc) for loc in shown],
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return 0

    print(f"total={len(locations)}, filtered={len(filtered)}", end="")
    print("" if visible is None else f", visible={len(visible)}")
    print()
    _print_locations("Locations (editor's choice first)", shown)
    return 0


def _cmd_swissgrid(args: argparse.Namespace) -> int:
    point = wgs84_to_swiss_grid(args.lat, args.lng)
    print(f"E={point.E}, N={point.N}")
    print(swisstopo_url(args.lat, args.lng, args.lang))
    return 0


def _cmd_links(args: argparse.Namespace) -> int:
    locations = load_locations(args.data)
    match = next((loc for loc in locations if loc.filename == args.filename), None)
    if match is None:
        logger.error("No location with filename %r in %s", args.filename, args.data)
        return 1

    lang = Language.parse(args.lang)
    print(f"### {match.location}")
    print(f"{match.province}, {match.country}")
    print(format_date_time(match.date, match.time, lang))
    if match.difficulty:
        print(difficulty_label(match.difficulty, lang))
    summary = hike_summary(match, lang)
    if summary:
        print(summary)
    print()
    print(f"coordinates={coordinates_text(match)}")
    print(f"swisstopo={swisstopo_url(match.lat, match.lng, lang.value)}")
    print(f"directions={directions_url(match.lat, match.lng)}")
    return 0


def _cmd_export_map(args: argparse.Namespace) -> int:
    locations = load_locations(args.data)
    filtered = filter_locations(locations, _criteria_from_args(args))
    style, theme = resolve_style_choice(args.style, Theme(args.theme))
    fmap = build_map(filtered, style=style, theme=theme, language=args.lang)
    out = save_map(fmap, args.out)
    print(f"Exported: {out} (markers={len(filtered)})")
    return 0


def _add_data_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument("--data", type=str, default=DEFAULT_DATA_PATH, help="Locations JSON path or URL")


def _add_filter_args(p: argparse.ArgumentParser) -> None:
    last = len(DIFFICULTY_LEVELS) - 1
    p.add_argument("--editors-choice", action="store_true", help="Only editor's choice locations")
    p.add_argument("--switzerland", action="store_true", help="Only locations in Switzerland")
    p.add_argument("--graubunden", action="store_true", help="Only locations in Graubünden")
    p.add_argument(
        "--difficulty-min",
        type=int,
        choices=range(0, last + 1),
        default=DEFAULT_DIFFICULTY_RANGE[0],
        help=f"Lowest difficulty index (0={DIFFICULTY_LEVELS[0]})",
    )
    p.add_argument(
        "--difficulty-max",
        type=int,
        choices=range(0, last + 1),
        default=DEFAULT_DIFFICULTY_RANGE[1],
        help=f"Highest difficulty index ({last}={DIFFICULTY_LEVELS[last]})",
    )
    p.add_argument("--height-min", type=int, default=DEFAULT_HEIGHT_RANGE[0], help="Minimum height (m)")
    p.add_argument("--height-max", type=int, default=DEFAULT_HEIGHT_RANGE[1], help="Maximum height (m)")


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""

    p = argparse.ArgumentParser(prog="map_gallery")
    p.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_ins = sub.add_parser("inspect", help="Summarize the locations dataset")
    _add_data_arg(p_ins)
    p_ins.add_argument("--json", action="store_true", help="Also print JSON")
    p_ins.set_defaults(func=_cmd_inspect)

    p_flt = sub.add_parser("filter", help="Apply filters (and optionally viewport bounds)")
    _add_data_arg(p_flt)
    _add_filter_args(p_flt)
    p_flt.add_argument(
        "--bounds",
        type=float,
        nargs=4,
        metavar=("SOUTH", "WEST", "NORTH", "EAST"),
        default=None,
        help="Viewport bounds in degrees",
    )
    p_flt.add_argument("--json", action="store_true", help="Print JSON instead of text")
    p_flt.set_defaults(func=_cmd_filter)

    p_sg = sub.add_parser("swissgrid", help="Convert WGS84 lat/lng to Swiss grid E/N")
    p_sg.add_argument("lat", type=float, help="Latitude")
    p_sg.add_argument("lng", type=float, help="Longitude")
    p_sg.add_argument("--lang", type=str, default="en", choices=[lang.value for lang in Language])
    p_sg.set_defaults(func=_cmd_swissgrid)

    p_ln = sub.add_parser("links", help="Deep links and details for one location")
    _add_data_arg(p_ln)
    p_ln.add_argument("--filename", type=str, required=True, help="Location filename (id)")
    p_ln.add_argument("--lang", type=str, default="en", choices=[lang.value for lang in Language])
    p_ln.set_defaults(func=_cmd_links)

    p_map = sub.add_parser("export-map", help="Save the filtered locations as an HTML map")
    _add_data_arg(p_map)
    _add_filter_args(p_map)
    p_map.add_argument("--out", type=str, default="map.html", help="Output HTML path")
    p_map.add_argument("--style", type=str, default="dark-simple", choices=list(STYLE_CHOICES))
    p_map.add_argument(
        "--theme",
        type=str,
        default=DEFAULT_THEME.value,
        choices=[theme.value for theme in Theme],
        help="Theme for styles that do not set one",
    )
    p_map.add_argument("--lang", type=str, default="en", choices=[lang.value for lang in Language])
    p_map.set_defaults(func=_cmd_export_map)

    return p


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
