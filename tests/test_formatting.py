from listings.formatting import (
    fmt_area, fmt_area_range, fmt_egp, fmt_minutes, fmt_month, fmt_number, fmt_percent,
    fmt_price, fmt_roi, fmt_sqm, plain_number,
)

def test_price_and_area():
    assert fmt_price(1234567) == "1,234,567 درهم"
    assert fmt_price(0) == "0 درهم"
    assert fmt_area(1200000) == "1,200,000 قدم²"

def test_missing_amounts_use_placeholder():
    assert fmt_price(None) == "—"
    assert fmt_area("n/a") == "—"
    assert fmt_egp(None) == "—"
    assert fmt_egp("") == "—"

def test_fraction_digits():
    assert fmt_number(1234.5678) == "1,234.568"
    assert fmt_number(1000.0) == "1,000"
    assert fmt_number("1500") == "1,500"

def test_halves_round_up():
    assert fmt_number(0.0625) == "0.063"
    assert fmt_number(2.0005) == "2.001"
    assert fmt_number(-1.0005) == "-1.001"
    assert fmt_number(1234.5675) == "1,234.568"
    assert fmt_number(-0.0001) == "0"
    assert fmt_number(1e30) == "1,000,000,000,000,000,019,884,624,838,656"

def test_egyptian_digits():
    assert fmt_egp(1234567) == "١٬٢٣٤٬٥٦٧ جنيه"
    assert fmt_egp(0) == "٠ جنيه"
    assert fmt_number(12.5, "ar-EG") == "١٢٫٥"
    assert fmt_sqm(120) == "١٢٠ م²"

def test_month():
    assert fmt_month("2025-03") == "مارس 2025"
    assert fmt_month("2024-06-15") == "يونيو 2024"
    assert fmt_month("2025-03", "ar-EG") == "مارس ٢٠٢٥"

def test_month_never_fails():
    assert fmt_month("") == "—"
    assert fmt_month(None) == "—"
    assert fmt_month("قريباً") == "قريباً"

def test_roi():
    assert fmt_roi(None) is None
    assert fmt_roi(5.0) == "5% عائد سنوي متوقع"
    assert fmt_roi(7.25) == "7.25% عائد سنوي متوقع"

def test_percent_and_minutes():
    assert fmt_percent(None) == "—"
    assert fmt_percent(0) == "0%"
    assert fmt_percent(5) == "5%"
    assert fmt_minutes(15) == "15 دقيقة"
    assert fmt_minutes(None) == "—"

def test_area_range():
    assert fmt_area_range(95, 340) == "٩٥ - ٣٤٠ م²"
    assert fmt_area_range(None, 120) == "١٢٠ م²"
    assert fmt_area_range(None, None, "حسب الطلب") == "حسب الطلب"
    assert fmt_area_range(None, None) == "—"

def test_plain_number():
    assert plain_number(5.0) == "5"
    assert plain_number(6.35) == "6.35"
    assert plain_number("10") == "10"
