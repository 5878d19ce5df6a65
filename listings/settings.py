from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict
import yaml

SETTINGS_PATH = Path("config/settings.yaml")

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "data": {
        "dubai_south": "data/dubai_south_projects.json",
        "october": "data/october_projects.json",
    },
    "locales": {
        "ar-AE": {"digits": "latn", "group": ",", "decimal": "."},
        "ar-EG": {"digits": "arab", "group": "٬", "decimal": "٫"},
    },
    "currency": {"aed": "درهم", "egp": "جنيه"},
    "units": {"sqft": "قدم²", "sqm": "م²", "minutes": "دقيقة", "years": "سنوات"},
    "labels": {"annual_yield": "عائد سنوي متوقع"},
}

ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"


def load_settings(path: Path = SETTINGS_PATH) -> dict:
    if path.exists():
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return {}


@lru_cache(maxsize=1)
def get_settings() -> dict:
    """Settings file merged over the in-code defaults, one level deep. Read once per process."""
    loaded = load_settings()
    merged = {}
    for section, defaults in DEFAULTS.items():
        merged[section] = {**defaults, **(loaded.get(section) or {})}
    return merged


def setting(section: str, key: str) -> Any:
    return get_settings()[section].get(key, DEFAULTS[section].get(key))


@dataclass(frozen=True)
class NumberLocale:
    """Digit set and separators used when rendering numbers for one display locale."""
    name: str
    digits: str = "latn"
    group: str = ","
    decimal: str = "."

    def localize(self, text: str) -> str:
        """Map text produced with Python's ',' / '.' / 0-9 onto this locale."""
        table = {",": self.group, ".": self.decimal}
        if self.digits == "arab":
            table.update({str(i): d for i, d in enumerate(ARABIC_INDIC_DIGITS)})
        return text.translate(str.maketrans(table))


@lru_cache(maxsize=None)
def get_locale(name: str) -> NumberLocale:
    conf = get_settings()["locales"].get(name) or {}
    return NumberLocale(
        name=name,
        digits=conf.get("digits", "latn"),
        group=conf.get("group", ","),
        decimal=conf.get("decimal", "."),
    )
