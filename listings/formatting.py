from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
import math
import pandas as pd
from listings.settings import get_locale, setting

PLACEHOLDER = "—"
DUBAI_LOCALE = "ar-AE"
OCTOBER_LOCALE = "ar-EG"

ARABIC_MONTHS = (
    "يناير", "فبراير", "مارس", "أبريل", "مايو", "يونيو",
    "يوليو", "أغسطس", "سبتمبر", "أكتوبر", "نوفمبر", "ديسمبر",
)


def plain_number(value) -> str:
    """Text of a raw value as the source data shows it: 5.0 -> '5', 5.25 -> '5.25'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def fmt_number(value, locale: str = DUBAI_LOCALE) -> str:
    """Grouped number with at most three fraction digits. Raises on non-numeric input."""
    if isinstance(value, bool):
        raise TypeError("booleans are not amounts")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"cannot format {value!r}")
    try:
        # halves round away from zero: 0.0625 -> 0.063
        number = Decimal(str(number)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        pass  # too many digits to quantize; nothing left to round at this scale
    text = f"{number:,.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return get_locale(locale).localize(text)


def _with_suffix(value, suffix: str, locale: str) -> str:
    try:
        return f"{fmt_number(value, locale)} {suffix}"
    except (TypeError, ValueError):
        return PLACEHOLDER


def fmt_price(x):
    return _with_suffix(x, setting("currency", "aed"), DUBAI_LOCALE)


def fmt_area(x):
    return _with_suffix(x, setting("units", "sqft"), DUBAI_LOCALE)


def fmt_egp(x):
    if x is None or x == "":
        return PLACEHOLDER
    return _with_suffix(x, setting("currency", "egp"), OCTOBER_LOCALE)


def fmt_sqm(x):
    return _with_suffix(x, setting("units", "sqm"), OCTOBER_LOCALE)


def fmt_area_range(min_value, max_value, notes=None):
    if not min_value and not max_value:
        return notes or PLACEHOLDER
    unit = setting("units", "sqm")
    try:
        if min_value and max_value:
            return f"{fmt_number(min_value, OCTOBER_LOCALE)} - {fmt_number(max_value, OCTOBER_LOCALE)} {unit}"
        return f"{fmt_number(min_value or max_value, OCTOBER_LOCALE)} {unit}"
    except (TypeError, ValueError):
        return notes or PLACEHOLDER


def fmt_percent(x):
    if x is None or x == "":
        return PLACEHOLDER
    return f"{plain_number(x)}%"


def fmt_minutes(x):
    if not x:
        return PLACEHOLDER
    return f"{plain_number(x)} {setting('units', 'minutes')}"


def fmt_roi(x):
    """Annual yield text, or None so the caller can leave the line out."""
    if x is None:
        return None
    return f"{plain_number(x)}% {setting('labels', 'annual_yield')}"


def fmt_month(value, locale: str = DUBAI_LOCALE) -> str:
    """'2025-03' or '2025-03-15' -> 'مارس 2025'. Text that does not parse as a date is shown as-is."""
    if not value:
        return PLACEHOLDER
    text = str(value).strip()
    normalized = f"{text}-01" if len(text) == 7 else text
    parsed = pd.to_datetime(normalized, errors="coerce")
    if pd.isna(parsed):
        return text
    year = get_locale(locale).localize(str(parsed.year))
    return f"{ARABIC_MONTHS[parsed.month - 1]} {year}"
