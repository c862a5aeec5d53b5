"""Module entry point: python -m map_gallery ..."""

from __future__ import annotations

from map_gallery.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
