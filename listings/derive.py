from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple
import math

DUBAI_SOUTH = "Dubai South"
DUBAILAND = "Dubailand"

# Evaluated in order; the first zone with a keyword in the text wins.
ZONE_RULES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    (DUBAI_SOUTH, ("dubai south", "دبي الجنوب", "دوبي ثوس")),
    (DUBAILAND, ("dubailand", "dlrc", "مجان", "أرجان", "دبي لاند")),
)

ZONE_SUBTITLES = {
    DUBAI_SOUTH: "مشروع دبي الجنوب",
    DUBAILAND: "مشروع دبي لاند",
}


def round_half_up(value: float, places: int = 2) -> float:
    """Scale, round halves towards +inf, scale back: 12.5 -> 13, -12.5 -> -12 with places=0."""
    scale = 10 ** places
    return math.floor(value * scale + 0.5) / scale


def _amount(value) -> Optional[float]:
    """Numeric source field, or None when it is missing, zero, NaN or not a number."""
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not number or not math.isfinite(number):
        return None
    return number


def _number(value) -> float:
    """Summable source field; anything that is not a real number contributes 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return value


def price_per_area(price, area, override=None):
    """Price per unit of area. An explicit value from the source always wins, even 0."""
    if override is not None:
        return override
    price, area = _amount(price), _amount(area)
    if price is None or area is None:
        return None
    return round_half_up(price / area)


def roi_from_rent(price, monthly_rent, override=None):
    """Gross annual yield in percent from a monthly rent. An explicit value always wins."""
    if override is not None:
        return override
    price, monthly_rent = _amount(price), _amount(monthly_rent)
    if price is None or monthly_rent is None:
        return None
    annual_rent = monthly_rent * 12
    return round_half_up((annual_rent / price) * 100)


def infer_zone(project: Dict[str, Any]) -> Optional[str]:
    text = " ".join(
        str(project.get(key) or "") for key in ("location_details", "stadium", "title")
    ).lower()
    for zone, keywords in ZONE_RULES:
        if any(k in text for k in keywords):
            return zone
    return None


def zone_subtitle(zone: Optional[str]) -> str:
    return ZONE_SUBTITLES.get(zone, "مشروع")


@dataclass(frozen=True)
class ProjectMetrics:
    total_area: float = 0
    total_units: int = 0
    average_price: int = 0


def project_metrics(projects: Iterable[Dict[str, Any]]) -> ProjectMetrics:
    safe = [p for p in projects if isinstance(p, dict) and isinstance(p.get("units"), list)]
    total_area = sum(_number(p.get("total_area")) for p in safe)
    total_units = sum(
        _number(u.get("count")) for p in safe for u in p["units"] if isinstance(u, dict)
    )
    average_price = 0
    if safe:
        mean = sum(_number(p.get("price_dirham")) for p in safe) / len(safe)
        average_price = int(round_half_up(mean, 0))
    return ProjectMetrics(total_area=total_area, total_units=total_units, average_price=average_price)
