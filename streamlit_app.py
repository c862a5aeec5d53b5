from __future__ import annotations

import html
from pathlib import Path

import streamlit as st
from streamlit_folium import st_folium

from map_gallery.dataset import load_locations
from map_gallery.filters import clamp_height_range
from map_gallery.i18n import (
    LANGUAGE_FLAGS,
    LANGUAGE_NAMES,
    Language,
    country_label,
    difficulty_label,
    difficulty_label_at,
    format_date_time,
    hike_summary,
    translate,
)
from map_gallery.links import coordinates_text, directions_url, swisstopo_url
from map_gallery.map_styles import STYLE_CHOICES, MapStyle, style_choice_for
from map_gallery.markers import build_map, find_clicked
from map_gallery.models import (
    DEFAULT_DATA_PATH,
    DEFAULT_HEIGHT_RANGE,
    DIFFICULTY_LEVELS,
    HEIGHT_STEP_M,
    GeoBounds,
    Location,
)
from map_gallery.state import AppState, GalleryView, compute_view

GRID_COLUMNS = 2
MAP_HEIGHT_PX = 720


@st.cache_data(show_spinner=False)
def _load_locations(source: str, mtime: float) -> list[Location]:
    _ = mtime  # part of cache key so updated files reload automatically
    return load_locations(source)


def _source_mtime(source: str) -> float:
    p = Path(source)
    return p.stat().st_mtime if p.exists() else 0.0


def _state() -> AppState:
    if "app_state" not in st.session_state:
        st.session_state["app_state"] = AppState()
    return st.session_state["app_state"]


def _image(src: str, caption: str | None = None) -> None:
    # Dataset image paths are site URLs; the browser resolves them against the image base.
    base = st.session_state.get("image_base", "").rstrip("/")
    url = f"{base}{src}" if base and src.startswith("/") else src
    alt = html.escape(caption or "", quote=True)
    img = f'<img src="{html.escape(url, quote=True)}" alt="{alt}" style="width:100%;border-radius:8px;"/>'
    if caption:
        img += f'<div style="font-size:0.85rem;opacity:0.8;">{html.escape(caption)}</div>'
    st.markdown(img, unsafe_allow_html=True)


def _sidebar_settings(state: AppState) -> str:
    lang = state.language
    with st.sidebar:
        source = st.text_input("locations.json", value=DEFAULT_DATA_PATH)
        st.text_input("Image base URL", key="image_base", placeholder="https://example.org")

        languages = list(Language)
        chosen = st.selectbox(
            translate("settings.language", lang),
            options=languages,
            index=languages.index(state.language),
            format_func=lambda code: LANGUAGE_NAMES[code],
        )
        state.set_language(chosen)
        lang = state.language
        st.image(LANGUAGE_FLAGS[lang], width=28)

        current = style_choice_for(state.map_style, state.theme)
        choice = st.radio(
            translate("settings.map_style", lang),
            options=list(STYLE_CHOICES),
            index=list(STYLE_CHOICES).index(current),
            format_func=lambda c: translate(f"style.{c}", lang),
            horizontal=True,
        )
        if choice != current:
            state.choose_map_style(choice)

        if st.button(translate("settings.theme", lang), use_container_width=True):
            state.toggle_theme()
    return source


def _sidebar_filters(state: AppState) -> None:
    lang = state.language
    criteria = state.criteria
    with st.sidebar:
        head, reset = st.columns([3, 1])
        head.subheader(translate("filters.title", lang))
        if not criteria.is_default() and reset.button(translate("filters.reset", lang)):
            state.reset_filters()
            st.rerun()

        height = st.slider(
            translate("filters.height", lang),
            min_value=DEFAULT_HEIGHT_RANGE[0],
            max_value=DEFAULT_HEIGHT_RANGE[1],
            value=criteria.height_range,
            step=HEIGHT_STEP_M,
            format="%d m",
        )
        difficulty = st.select_slider(
            translate("filters.difficulty", lang),
            options=list(range(len(DIFFICULTY_LEVELS))),
            value=criteria.difficulty_range,
            format_func=lambda i: difficulty_label_at(i, lang),
        )
        editors = st.toggle(translate("filters.editors_choice", lang), value=criteria.editors_choice_only)
        switzerland = st.toggle(translate("filters.switzerland", lang), value=criteria.switzerland_only)
        graubunden = st.toggle(translate("filters.graubunden", lang), value=criteria.graubunden_only)

    state.update_criteria(
        height_range=clamp_height_range(tuple(height), criteria.height_range),
        difficulty_range=tuple(difficulty),
        editors_choice_only=editors,
        switzerland_only=switzerland,
        graubunden_only=graubunden,
    )


def _render_map(state: AppState, view: GalleryView) -> None:
    fmap = build_map(
        view.filtered,
        center=state.view.center,
        zoom=state.view.zoom,
        style=state.map_style,
        theme=state.theme,
        language=state.language,
        selected=state.selected,
        hovered=state.hovered,
        panel_open=state.panel_open,
    )
    out = st_folium(
        fmap,
        key="gallery_map",
        height=MAP_HEIGHT_PX,
        use_container_width=True,
        returned_objects=["bounds", "center", "zoom", "last_object_clicked"],
    )
    if state.map_style is MapStyle.SWISSTOPO:
        st.caption(translate("map.swisstopo_notice", state.language))
    if not out:
        return

    bounds = None
    if out.get("bounds"):
        try:
            bounds = GeoBounds.from_leaflet(out["bounds"])
        except ValueError:
            bounds = None
    center = out.get("center")
    state.update_viewport(
        bounds,
        (float(center["lat"]), float(center["lng"])) if center else None,
        out.get("zoom"),
    )

    click = out.get("last_object_clicked")
    if click and click != st.session_state.get("last_click"):
        st.session_state["last_click"] = click
        clicked = find_clicked(view.filtered, click)
        if clicked is not None:
            state.select_location(clicked)
            st.rerun()


def _render_grid(state: AppState, view: GalleryView) -> None:
    lang = state.language
    st.markdown(f"**🌄 {len(view.visible)} {translate('sidebar.visible_count', lang)}**")
    if not view.grid:
        st.info(translate("sidebar.no_locations", lang))
        return

    cols = st.columns(GRID_COLUMNS)
    for i, loc in enumerate(view.grid):
        with cols[i % GRID_COLUMNS]:
            _image(loc.filename, loc.label)
            open_col, pin_col = st.columns([4, 1])
            if open_col.button(loc.label, key=f"open-{i}-{loc.filename}", use_container_width=True):
                state.select_location(loc)
                st.rerun()
            highlighted = state.hovered is not None and state.hovered.filename == loc.filename
            if pin_col.button(
                "📍",
                key=f"pin-{i}-{loc.filename}",
                help=translate("sidebar.show_on_map", lang),
                type="primary" if highlighted else "secondary",
            ):
                state.hover_location(loc)
                st.rerun()


@st.dialog("Graubünden Gallery", width="large")
def _fullscreen(loc: Location, lang: Language) -> None:
    _image(loc.filename, loc.location)
    if st.button(translate("panel.close", lang)):
        st.rerun()


def _render_panel(state: AppState) -> None:
    loc = state.selected
    if loc is None or not state.panel_open:
        return
    lang = state.language

    head, close = st.columns([5, 1])
    head.subheader(loc.location)
    if close.button("✕", key="close-panel"):
        state.close_panel()
        st.rerun()

    _image(loc.filename)
    if st.button(translate("panel.fullscreen", lang), key="fullscreen"):
        _fullscreen(loc, lang)

    st.write(f"{loc.province}, {country_label(loc.country, lang)}")
    st.write(format_date_time(loc.date, loc.time, lang))

    facts: list[str] = []
    if loc.height:
        facts.append(f"⛰ {round(loc.height)} {translate('panel.height_unit', lang)}")
    if loc.difficulty:
        facts.append(f"🥾 {difficulty_label(loc.difficulty, lang)}")
    if loc.is_editors_choice:
        facts.append(f"⭐ {translate('panel.editors_choice', lang)}")
    if facts:
        st.write(" · ".join(facts))

    summary = hike_summary(loc, lang)
    if summary:
        st.caption(summary)

    c1, c2 = st.columns(2)
    c1.link_button(
        translate("panel.open_swisstopo", lang),
        swisstopo_url(loc.lat, loc.lng, lang.value),
        use_container_width=True,
    )
    c2.link_button(
        translate("panel.directions", lang),
        directions_url(loc.lat, loc.lng),
        use_container_width=True,
    )
    st.caption(translate("panel.coordinates", lang))
    st.code(coordinates_text(loc), language=None)


def main() -> None:
    state = _state()
    st.set_page_config(page_title=translate("app.title", state.language), layout="wide")

    source = _sidebar_settings(state)
    _sidebar_filters(state)
    st.title(translate("app.title", state.language))
    st.caption(translate("app.description", state.language))

    with st.spinner(translate("map.loading", state.language)):
        locations = _load_locations(source, _source_mtime(source))

    view = compute_view(state, locations)

    map_col, side_col = st.columns([3, 2])
    with map_col:
        _render_map(state, view)
    with side_col:
        if state.panel_open and state.selected is not None:
            _render_panel(state)
        else:
            # bounds were just updated by the map, so visibility is recomputed
            _render_grid(state, compute_view(state, locations))


if __name__ == "__main__":
    main()
