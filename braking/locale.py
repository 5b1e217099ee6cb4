"""
Label tables for the supported locales
"""

from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_LOCALE = "en"

UNIT_KEYS = ("unit_ms", "unit_kmh", "unit_m", "unit_kg")

LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "Braking Distance Simulation",
        "start": "Start Simulation",
        "brake": "Brake Now!",
        "restart": "Restart Simulation",
        "speed": "Speed: {speed:.2f} {unit_ms} ({speed_kmh:.1f} {unit_kmh})",
        "position": "Position: {position:.2f} {unit_m}",
        "friction": "μ (friction): {friction}",
        "mass": "Mass: {mass:g} {unit_kg}",
        "braking_distance": "Braking Dist: {distance:.2f} {unit_m}",
        "brake_start": "Brake Start",
        "car_stopped": "Car Stopped",
        "unit_ms": "m/s",
        "unit_kmh": "km/h",
        "unit_m": "m",
        "unit_kg": "kg",
        "surfaces_title": "Braking distance from {speed_kmh:g} {unit_kmh} by road surface",
        "surfaces_x": "Road surface",
        "surfaces_y": "Braking distance ({unit_m})",
        "surface_dry_asphalt": "Dry asphalt",
        "surface_wet_asphalt": "Wet asphalt",
        "surface_gravel": "Gravel",
        "surface_snow": "Snow",
        "other_locale": "Deutsch",
    },
    "de": {
        "title": "Bremsweg-Simulation",
        "start": "Simulation starten",
        "brake": "Jetzt bremsen!",
        "restart": "Simulation neu starten",
        "speed": "Geschwindigkeit: {speed:.2f} {unit_ms} ({speed_kmh:.1f} {unit_kmh})",
        "position": "Position: {position:.2f} {unit_m}",
        "friction": "μ (Reibung): {friction}",
        "mass": "Masse: {mass:g} {unit_kg}",
        "braking_distance": "Bremsweg: {distance:.2f} {unit_m}",
        "brake_start": "Bremsbeginn",
        "car_stopped": "Auto gestoppt",
        "unit_ms": "m/s",
        "unit_kmh": "km/h",
        "unit_m": "m",
        "unit_kg": "kg",
        "surfaces_title": "Bremsweg aus {speed_kmh:g} {unit_kmh} nach Fahrbahnbelag",
        "surfaces_x": "Fahrbahnbelag",
        "surfaces_y": "Bremsweg ({unit_m})",
        "surface_dry_asphalt": "Asphalt, trocken",
        "surface_wet_asphalt": "Asphalt, nass",
        "surface_gravel": "Schotter",
        "surface_snow": "Schnee",
        "other_locale": "English",
    },
}

# Route prefix per locale; English lives at the root
LOCALE_PATHS: Dict[str, str] = {"en": "/", "de": "/de"}


@dataclass(frozen=True)
class Labels:
    """Label strings of one locale"""

    locale: str
    strings: Dict[str, str]

    def __getitem__(self, key: str) -> str:
        return self.strings[key]

    def format(self, key: str, **values: Any) -> str:
        """Resolve a label template, filling in the locale's unit strings"""
        units = {unit: self.strings[unit] for unit in UNIT_KEYS}
        return self.strings[key].format(**units, **values)


def get_labels(locale: str = DEFAULT_LOCALE) -> Labels:
    """
    Look up the label table for a locale tag

    Raises:
        KeyError: If the locale is not supported
    """
    if locale not in LABELS:
        raise KeyError(f"Unsupported locale '{locale}', expected one of {sorted(LABELS)}")
    return Labels(locale, LABELS[locale])


def locale_from_path(pathname: str | None) -> str:
    """Map a page route to its locale tag: "/de" and below is German"""
    if not pathname:
        return DEFAULT_LOCALE
    first = pathname.strip("/").split("/", 1)[0]
    return first if first in LABELS and first != DEFAULT_LOCALE else DEFAULT_LOCALE
