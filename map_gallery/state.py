"""Application state owned by the UI and the derived gallery view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from map_gallery.filters import filter_locations, sort_for_display, visible_within_bounds
from map_gallery.i18n import FALLBACK_LANGUAGE, Language
from map_gallery.map_styles import DEFAULT_STYLE, DEFAULT_THEME, MapStyle, Theme, resolve_style_choice
from map_gallery.models import DEFAULT_CENTER, DEFAULT_ZOOM, FilterCriteria, GeoBounds, Location


@dataclass(slots=True)
class MapView:
    """Map center and zoom, kept so a re-render can restore the view."""

    center: tuple[float, float] = DEFAULT_CENTER
    zoom: int = DEFAULT_ZOOM


@dataclass(slots=True)
class AppState:
    """Everything the user can change. Passed explicitly into the engine."""

    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    theme: Theme = DEFAULT_THEME
    language: Language = FALLBACK_LANGUAGE
    map_style: MapStyle = DEFAULT_STYLE
    selected: Location | None = None
    hovered: Location | None = None
    panel_open: bool = False
    bounds: GeoBounds | None = None
    view: MapView = field(default_factory=MapView)

    def select_location(self, location: Location) -> None:
        self.selected = location
        self.panel_open = True
        self.hovered = None

    def hover_location(self, location: Location | None) -> None:
        """Highlight a grid item's marker; highlighting the same item again clears it."""

        if location is not None and self.hovered is not None and self.hovered.filename == location.filename:
            location = None
        self.hovered = location

    def close_panel(self) -> None:
        # The selection stays so the panel can slide back with the same content.
        self.panel_open = False

    def toggle_theme(self) -> None:
        self.theme = self.theme.toggled()

    def set_language(self, language: str | Language) -> None:
        self.language = Language.parse(language)

    def choose_map_style(self, choice: str) -> None:
        self.map_style, self.theme = resolve_style_choice(choice, self.theme)

    def update_criteria(self, **changes: Any) -> None:
        self.criteria = self.criteria.with_changes(**changes)

    def reset_filters(self) -> None:
        self.criteria = FilterCriteria.reset()

    def update_viewport(self, bounds: GeoBounds | None, center: tuple[float, float] | None, zoom: int | None) -> None:
        if bounds is not None:
            self.bounds = bounds
        if center is not None:
            self.view.center = center
        if zoom is not None:
            self.view.zoom = zoom


@dataclass(frozen=True, slots=True)
class GalleryView:
    """Derived sets for one render.

    Attributes:
        filtered: Locations matching the criteria (all of them get a marker).
        visible: Filtered locations inside the current viewport.
        grid: ``visible`` in display order (editor's choice first).
    """

    filtered: list[Location]
    visible: list[Location]
    grid: list[Location]


def compute_view(state: AppState, locations: Sequence[Location]) -> GalleryView:
    """Recompute filtered/visible/grid from scratch.

    Until the map has reported its bounds nothing counts as visible.
    """

    filtered = filter_locations(locations, state.criteria)
    visible = visible_within_bounds(filtered, state.bounds) if state.bounds is not None else []
    return GalleryView(filtered=filtered, visible=visible, grid=sort_for_display(visible))
