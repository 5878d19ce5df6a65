"""
Display accessors for raw project records.

Source records are loosely typed and the same value often lives in one of
several fields. Each accessor here documents the fallback order for one
display field so pages never pick fields ad hoc.
"""
from dataclasses import dataclass
import re
from typing import Any, Dict, Iterable, List, Optional, Tuple

from listings.derive import DUBAI_SOUTH, price_per_area, roi_from_rent
from listings.formatting import (
    OCTOBER_LOCALE, PLACEHOLDER, fmt_area, fmt_number, fmt_price, fmt_roi, plain_number,
)
from listings.settings import setting

UNSPECIFIED = "غير محدد"
NO_LOCATION = "الموقع غير متوفر"

BEDROOM_LABELS = {
    "1br": "غرفة واحدة",
    "2br": "غرفتين",
    "3br": "3 غرف",
    "4br": "4 غرف",
}
BEDROOM_GROUPS = ("1br", "2br", "3br", "4br", "other")
OTHER_UNITS = "وحدات أخرى"

# status (lower-cased) -> (label, streamlit colour)
STATUS_BADGES = {
    "dubai_south": {
        "off plan": ("Off Plan", "orange"),
        "ready": ("Ready", "green"),
        "sold out": ("Sold Out", "red"),
    },
    "october": {
        "off plan": ("Off Plan", "orange"),
        "under construction": ("تحت الإنشاء", "blue"),
        "ready": ("جاهز للاستلام", "green"),
    },
}
UNKNOWN_STATUS = {"dubai_south": "Status", "october": UNSPECIFIED}


@dataclass(frozen=True)
class Badge:
    label: str
    color: str = "gray"

    def markdown(self) -> str:
        return f":{self.color}[**{self.label}**]"


def status_badge(status: Optional[str], dataset: str = "dubai_south") -> Badge:
    entry = STATUS_BADGES[dataset].get((status or "").lower())
    if entry:
        return Badge(*entry)
    return Badge(status or UNKNOWN_STATUS[dataset])


def zone_badge(zone: Optional[str]) -> Optional[Badge]:
    if not zone:
        return None
    return Badge(zone, "blue" if zone == DUBAI_SOUTH else "orange")


# Dubai South records

def project_name(project: Dict[str, Any]) -> str:
    return project.get("name") or project.get("title") or ""


def location_label(project: Dict[str, Any]) -> str:
    return project.get("location_details") or project.get("stadium") or NO_LOCATION


def developer_label(project: Dict[str, Any]) -> str:
    return project.get("developer") or UNSPECIFIED


def project_monthly_rent(project: Dict[str, Any]):
    """Project-level rent, else the rent of the first unit."""
    if project.get("monthly_rent_dirham"):
        return project["monthly_rent_dirham"]
    units = project.get("units")
    if isinstance(units, list) and units and isinstance(units[0], dict):
        return units[0].get("monthly_rent_dirham")
    return None


def project_roi(project: Dict[str, Any]):
    return roi_from_rent(
        project.get("price_dirham"),
        project_monthly_rent(project),
        project.get("roi_estimated_annual_pct"),
    )


def service_charge_label(project: Dict[str, Any]) -> str:
    charge = project.get("service_charge_aed_per_sqft")
    if not charge:
        return UNSPECIFIED
    return f"{plain_number(charge)} {setting('currency', 'aed')} / {setting('units', 'sqft')}"


@dataclass(frozen=True)
class UnitSummary:
    type: str
    area_text: str
    price_per_area: Optional[float]
    roi_text: Optional[str]
    location: Optional[str]
    count: Any
    price_text: str

    @property
    def price_per_area_text(self) -> Optional[str]:
        if not self.price_per_area:
            return None
        return f"{plain_number(self.price_per_area)} {setting('currency', 'aed')}/{setting('units', 'sqft')}"

    def as_row(self) -> Dict[str, Any]:
        return {
            "النوع": self.type,
            "المساحة": self.area_text,
            "سعر القدم": self.price_per_area_text or PLACEHOLDER,
            "العائد": self.roi_text or PLACEHOLDER,
            "العدد": self.count,
            "السعر": self.price_text,
        }


def unit_summary(unit: Dict[str, Any]) -> UnitSummary:
    roi = roi_from_rent(unit.get("price_dirham"), unit.get("monthly_rent_dirham"), unit.get("roi_estimated_annual_pct"))
    return UnitSummary(
        type=unit.get("type") or "",
        area_text=fmt_area(unit["area"]) if unit.get("area") else PLACEHOLDER,
        price_per_area=price_per_area(unit.get("price_dirham"), unit.get("area"), unit.get("price_per_sqft")),
        # a zero yield is hidden like a missing one
        roi_text=fmt_roi(roi) if roi else None,
        location=unit.get("location") or None,
        count=unit.get("count"),
        price_text=fmt_price(unit.get("price_dirham")),
    )


# 6th of October records

def handover_label(project: Dict[str, Any]) -> str:
    handover = project.get("handover") or {}
    return handover.get("date") or handover.get("status") or PLACEHOLDER


def october_location(project: Dict[str, Any]) -> Dict[str, Any]:
    location = project.get("location")
    return location if isinstance(location, dict) else {}


def october_location_label(project: Dict[str, Any]) -> str:
    location = october_location(project)
    parts = [location.get("district"), location.get("description")]
    return " - ".join(p for p in parts if p) or UNSPECIFIED


def landmarks(project: Dict[str, Any]) -> List[str]:
    return list(october_location(project).get("nearby_landmarks") or [])


def travel_minutes(project: Dict[str, Any]) -> List[Tuple[str, Any]]:
    distances = october_location(project).get("distance_to_landmarks_minutes") or {}
    return list(distances.items()) if isinstance(distances, dict) else []


def unit_types_label(project: Dict[str, Any]) -> str:
    types = project.get("unit_types") or []
    return " • ".join(types) if types else UNSPECIFIED


def unit_type_label(value: Optional[str]) -> str:
    return BEDROOM_LABELS.get((value or "").lower()) or value or ""


def bedroom_key(value: Optional[str]) -> str:
    key = re.sub(r"\s+", "", (value or "").lower())
    for n in ("1", "2", "3", "4"):
        if f"{n}br" in key or f"{n}bed" in key:
            return f"{n}br"
    return "other"


def price_breakdown(project: Dict[str, Any]) -> List[Dict[str, Any]]:
    items = project.get("unit_price_breakdown")
    return [i for i in items if isinstance(i, dict)] if isinstance(items, list) else []


def breakdown_label(item: Dict[str, Any], with_type: bool = True) -> str:
    """'2 غرف • Garden • 120 م²'; the type is left out when the item sits under a bedroom heading."""
    area = ""
    if item.get("area_sqm"):
        try:
            area = f"{fmt_number(item['area_sqm'], OCTOBER_LOCALE)} {setting('units', 'sqm')}"
        except (TypeError, ValueError):
            area = str(item["area_sqm"])
    parts = [unit_type_label(item.get("unit_type")) if with_type else "", item.get("variant"), area]
    label = " • ".join(str(p) for p in parts if p)
    if not label and not with_type:
        label = unit_type_label(item.get("unit_type"))
    return label or "وحدة"


def group_units_by_bedroom(items: Iterable[Dict[str, Any]]) -> List[Tuple[str, str, List[Dict[str, Any]]]]:
    """(key, heading, items) per bedroom group, in a fixed order, skipping empty groups."""
    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for item in items:
        grouped.setdefault(bedroom_key(item.get("unit_type")), []).append(item)
    return [
        (key, BEDROOM_LABELS.get(key, OTHER_UNITS), grouped[key])
        for key in BEDROOM_GROUPS
        if grouped.get(key)
    ]
