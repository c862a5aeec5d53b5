"""Static UI translations (en/de/it/fr) and locale-aware formatting.

Labels are presentation only. The filters work on the raw difficulty key and
never look at a translated label.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Final

from map_gallery.models import DIFFICULTY_LEVELS, Location


class Language(str, Enum):
    EN = "en"
    DE = "de"
    IT = "it"
    FR = "fr"

    @classmethod
    def parse(cls, value: str | Language | None) -> Language:
        """Parse a language code, falling back to English."""

        if isinstance(value, Language):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return FALLBACK_LANGUAGE


FALLBACK_LANGUAGE: Final[Language] = Language.EN

LANGUAGE_NAMES: Final[dict[Language, str]] = {
    Language.EN: "English",
    Language.DE: "Deutsch",
    Language.IT: "Italiano",
    Language.FR: "Français",
}

LANGUAGE_FLAGS: Final[dict[Language, str]] = {
    lang: f"https://webexposed.org/flag/{lang.value}.webp" for lang in Language
}

Texts = dict[str, dict[Language, str]]


def _t(en: str, de: str, it: str, fr: str) -> dict[Language, str]:
    return {Language.EN: en, Language.DE: de, Language.IT: it, Language.FR: fr}


TEXTS: Final[Texts] = {
    "app.title": _t(
        "Graubünden Gallery - Beautiful Locations Interactive Map",
        "Graubünden Gallery - Interaktive Karte schöner Orte",
        "Graubünden Gallery - Mappa interattiva di luoghi meravigliosi",
        "Graubünden Gallery - Carte interactive de beaux lieux",
    ),
    "app.description": _t(
        "Discover stunning locations in and around Graubünden, Switzerland through our interactive photo gallery map.",
        "Entdecke atemberaubende Orte in und um Graubünden, Schweiz, auf unserer interaktiven Fotogalerie-Karte.",
        "Scopri luoghi mozzafiato nei Grigioni e dintorni, Svizzera, con la nostra mappa fotografica interattiva.",
        "Découvrez des lieux magnifiques dans et autour des Grisons, en Suisse, grâce à notre carte photo interactive.",
    ),
    "map.loading": _t(
        "Loading map...",
        "Karte wird geladen...",
        "Caricamento mappa...",
        "Chargement de la carte...",
    ),
    "map.swisstopo_notice": _t(
        "© Federal Office of Topography swisstopo",
        "© Bundesamt für Landestopografie swisstopo",
        "© Ufficio federale di topografia swisstopo",
        "© Office fédéral de topographie swisstopo",
    ),
    "sidebar.visible_count": _t(
        "beautiful locations in this area",
        "schöne Standorte in diesem Gebiet",
        "belle località in questa zona",
        "beaux emplacements dans cette zone",
    ),
    "sidebar.no_locations": _t(
        "No locations visible in current map view",
        "Keine Standorte in der aktuellen Kartenansicht sichtbar",
        "Nessuna località visibile nella vista mappa corrente",
        "Aucun emplacement visible dans la vue carte actuelle",
    ),
    "sidebar.show_on_map": _t(
        "Highlight on map",
        "Auf der Karte hervorheben",
        "Evidenzia sulla mappa",
        "Mettre en évidence sur la carte",
    ),
    "filters.title": _t("Location Filters", "Standortfilter", "Filtri località", "Filtres de localisation"),
    "filters.reset": _t("Reset", "Zurücksetzen", "Ripristina", "Réinitialiser"),
    "filters.height": _t("Height", "Höhe", "Altezza", "Hauteur"),
    "filters.difficulty": _t("Difficulty", "Grad", "Difficoltà", "Difficulté"),
    "filters.editors_choice": _t(
        "Show only Editor's Choice locations",
        "Nur Editor's Choice Standorte anzeigen",
        "Mostra solo le località scelte dall'editore",
        "Afficher seulement les choix de l'éditeur",
    ),
    "filters.switzerland": _t(
        "Show locations only within Switzerland",
        "Nur Standorte innerhalb der Schweiz anzeigen",
        "Mostra solo località in Svizzera",
        "Afficher uniquement les lieux en Suisse",
    ),
    "filters.graubunden": _t(
        "Show locations only within Graubünden",
        "Nur Standorte innerhalb Graubündens anzeigen",
        "Mostra solo località nei Grigioni",
        "Afficher uniquement les lieux dans les Grisons",
    ),
    "settings.map_style": _t("Map style", "Kartenstil", "Stile mappa", "Style de carte"),
    "settings.theme": _t("Toggle theme", "Thema wechseln", "Cambia tema", "Changer de thème"),
    "settings.language": _t("Language", "Sprache", "Lingua", "Langue"),
    "panel.height_unit": _t("m a.s.l.", "m ü. M.", "m s.l.m.", "m d'alt."),
    "panel.editors_choice": _t(
        "Editor's Choice",
        "Editor's Choice",
        "Scelta dell'editore",
        "Choix de la rédaction",
    ),
    "panel.open_swisstopo": _t("Open SwissTopo", "SwissTopo öffnen", "Apri SwissTopo", "Ouvrir SwissTopo"),
    "panel.directions": _t("Get Directions", "Route berechnen", "Indicazioni", "Itinéraire"),
    "panel.coordinates": _t("Coordinates:", "Koordinaten:", "Coordinate:", "Coordonnées:"),
    "panel.close": _t("Close", "Schließen", "Chiudi", "Fermer"),
    "panel.fullscreen": _t("Fullscreen", "Vollbild", "Schermo intero", "Plein écran"),
    "style.light-simple": _t("Light Simple", "Hell Einfach", "Semplice Chiaro", "Simple Clair"),
    "style.dark-simple": _t("Dark Simple", "Dunkel Einfach", "Semplice Scuro", "Simple Sombre"),
    "style.satellite": _t("Satellite", "Satellit", "Satellite", "Satellite"),
    "style.terrain": _t("Terrain", "Gelände", "Terreno", "Terrain"),
    "style.street": _t("Street", "Straße", "Strada", "Rue"),
    "style.swisstopo": _t("SwissTopo", "SwissTopo", "SwissTopo", "SwissTopo"),
    "marker.date": _t("Date", "Datum", "Data", "Date"),
    "marker.time": _t("Time", "Zeit", "Ora", "Heure"),
}

DIFFICULTY_LABELS: Final[Texts] = {
    "hiking": _t("Hiking", "Wandern", "Escursionismo", "Randonnée"),
    "mountain_hiking": _t(
        "Mountain hiking",
        "Bergwandern",
        "Escursionismo in montagna",
        "Randonnée en montagne",
    ),
    "demanding_mountain_hiking": _t(
        "Demanding mountain hiking",
        "Anspruchsvolles Bergwandern",
        "Escursionismo in montagna impegnativo",
        "Randonnée en montagne exigeante",
    ),
    "alpine_hiking": _t("Alpine hiking", "Alpine Wanderung", "Escursionismo alpino", "Randonnée alpine"),
    "difficult_alpine_hiking": _t(
        "Difficult alpine hiking",
        "Schwierige alpine Wanderung",
        "Escursionismo alpino difficile",
        "Randonnée alpine difficile",
    ),
}

COUNTRY_LABELS: Final[Texts] = {
    "Switzerland": _t("Switzerland", "Schweiz", "Svizzera", "Suisse"),
    "Italy": _t("Italy", "Italien", "Italia", "Italie"),
    "Liechtenstein": _t("Liechtenstein", "Liechtenstein", "Liechtenstein", "Liechtenstein"),
    "Austria": _t("Austria", "Österreich", "Austria", "Autriche"),
}

MONTH_NAMES: Final[dict[Language, tuple[str, ...]]] = {
    Language.EN: (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    Language.DE: (
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    Language.IT: (
        "gennaio", "febbraio", "marzo", "aprile", "maggio", "giugno",
        "luglio", "agosto", "settembre", "ottobre", "novembre", "dicembre",
    ),
    Language.FR: (
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
}


def _lookup(table: Texts, key: str, language: str | Language) -> str | None:
    entry = table.get(key)
    if entry is None:
        return None
    lang = Language.parse(language)
    return entry.get(lang) or entry.get(FALLBACK_LANGUAGE)


def translate(key: str, language: str | Language) -> str:
    """Translated UI string; English fallback, then the key itself."""

    return _lookup(TEXTS, key, language) or key


def difficulty_label(key: str, language: str | Language) -> str:
    """Translated difficulty label. Unknown keys are shown raw."""

    return _lookup(DIFFICULTY_LABELS, key, language) or key


def difficulty_label_at(index: int, language: str | Language) -> str:
    """Label for a difficulty slider position."""

    return difficulty_label(DIFFICULTY_LEVELS[index], language)


def country_label(country: str, language: str | Language) -> str:
    return _lookup(COUNTRY_LABELS, country, language) or country


def parse_day_month_year(text: str) -> date | None:
    """Parse "DD-MM-YYYY". Returns None if the text does not have that shape."""

    try:
        day_s, month_s, year_s = text.strip().split("-")
        return date(int(year_s), int(month_s), int(day_s))
    except ValueError:
        return None


def format_date(date_str: str, language: str | Language) -> str:
    """Long localized date, e.g. "March 5, 2024" / "5. März 2024".

    Unparseable input is returned unchanged.
    """

    d = parse_day_month_year(date_str)
    if d is None:
        return date_str
    lang = Language.parse(language)
    month = MONTH_NAMES[lang][d.month - 1]
    if lang is Language.EN:
        return f"{month} {d.day}, {d.year}"
    if lang is Language.DE:
        return f"{d.day}. {month} {d.year}"
    return f"{d.day} {month} {d.year}"


def format_date_time(date_str: str, time_str: str, language: str | Language) -> str:
    formatted = format_date(date_str, language)
    templates = {
        Language.EN: "Picture taken {date} at {time}",
        Language.DE: "Bild aufgenommen {date} um {time}",
        Language.IT: "Foto scattata {date} alle {time}",
        Language.FR: "Photo prise {date} à {time}",
    }
    return templates[Language.parse(language)].format(date=formatted, time=time_str)


def _or_unknown(value: object | None) -> str:
    if value is None:
        return "?"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def hike_summary(location: Location, language: str | Language) -> str | None:
    """Sentence describing how to reach the location, or None without hike data."""

    if (
        location.hike_distance_km is None
        and location.elevation_gain_m is None
        and not location.nearest_city
    ):
        return None

    values = {
        "short": location.short or location.location,
        "km": _or_unknown(location.hike_distance_km),
        "gain": _or_unknown(location.elevation_gain_m),
        "city": location.nearest_city or "?",
    }
    templates = {
        Language.EN: (
            "This specific location near/in the area of {short} is reachable via a {km} km hike "
            "with {gain} m total elevation gain from {city}."
        ),
        Language.DE: (
            "Dieser spezifische Ort in der Nähe von {short} ist über eine {km} km lange Wanderung "
            "mit insgesamt {gain} m Höhenunterschied von {city} erreichbar."
        ),
        Language.IT: (
            "Questa località specifica nell'area di {short} è raggiungibile tramite un'escursione "
            "di {km} km con un dislivello totale di {gain} m da {city}."
        ),
        Language.FR: (
            "Cet emplacement spécifique près de {short} est accessible via une randonnée de {km} km "
            "avec un gain d'altitude total de {gain} m depuis {city}."
        ),
    }
    return templates[Language.parse(language)].format(**values)
