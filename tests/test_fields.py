from listings.fields import (
    Badge, bedroom_key, breakdown_label, group_units_by_bedroom, handover_label, location_label,
    october_location_label, project_monthly_rent, project_name, project_roi, service_charge_label,
    status_badge, travel_minutes, unit_summary, unit_type_label, zone_badge,
)

def test_project_fallbacks():
    assert project_name({"name": "N", "title": "T"}) == "N"
    assert project_name({"title": "T"}) == "T"
    assert location_label({"stadium": "Expo"}) == "Expo"
    assert location_label({}) == "الموقع غير متوفر"

def test_project_rent_and_roi():
    project = {"price_dirham": 1_200_000, "units": [{"monthly_rent_dirham": 5000}]}
    assert project_monthly_rent(project) == 5000
    assert project_roi(project) == 5
    assert project_monthly_rent({"monthly_rent_dirham": 7000, "units": [{"monthly_rent_dirham": 1}]}) == 7000
    assert project_roi({"price_dirham": 1_200_000, "units": []}) is None
    assert project_roi({"roi_estimated_annual_pct": 6.5}) == 6.5

def test_service_charge():
    assert service_charge_label({"service_charge_aed_per_sqft": 14}) == "14 درهم / قدم²"
    assert service_charge_label({}) == "غير محدد"

def test_status_badges():
    assert status_badge("off plan") == Badge("Off Plan", "orange")
    assert status_badge("READY", "october").label == "جاهز للاستلام"
    assert status_badge(None).label == "Status"
    assert status_badge(None, "october").label == "غير محدد"
    assert status_badge("Launching").label == "Launching"
    assert status_badge("Sold Out").markdown() == ":red[**Sold Out**]"

def test_zone_badge():
    assert zone_badge(None) is None
    assert zone_badge("Dubai South").color == "blue"
    assert zone_badge("Dubailand").color == "orange"

def test_unit_summary_computes_missing_values():
    u = unit_summary({"type": "استوديو", "area": 420, "count": 120, "price_dirham": 850000, "monthly_rent_dirham": 4500})
    assert u.area_text == "420 قدم²"
    assert u.price_per_area == 2023.81
    assert u.price_per_area_text == "2023.81 درهم/قدم²"
    assert u.roi_text == "6.35% عائد سنوي متوقع"
    assert u.price_text == "850,000 درهم"
    assert u.as_row()["العدد"] == 120

def test_unit_summary_explicit_values():
    u = unit_summary({"type": "غرفتان", "price_dirham": 2_100_000, "price_per_sqft": 1800, "roi_estimated_annual_pct": 0})
    assert u.area_text == "—"
    assert u.price_per_area == 1800
    assert u.roi_text is None

def test_october_location_and_handover():
    assert october_location_label({"location": {"district": "الحي الثامن"}}) == "الحي الثامن"
    assert october_location_label({"location": {"district": "غرب أكتوبر", "description": "طريق الواحات"}}) == "غرب أكتوبر - طريق الواحات"
    assert october_location_label({}) == "غير محدد"
    assert handover_label({"handover": {"status": "استلام فوري"}}) == "استلام فوري"
    assert handover_label({"handover": {"date": "2027", "status": "x"}}) == "2027"
    assert handover_label({}) == "—"

def test_travel_minutes():
    project = {"location": {"distance_to_landmarks_minutes": {"مول مصر": 15, "جهينة": None}}}
    assert travel_minutes(project) == [("مول مصر", 15), ("جهينة", None)]
    assert travel_minutes({"location": "text"}) == []

def test_bedroom_keys():
    assert bedroom_key("2 BR") == "2br"
    assert bedroom_key("3bed") == "3br"
    assert bedroom_key("Townhouse") == "other"
    assert bedroom_key(None) == "other"
    assert unit_type_label("1BR") == "غرفة واحدة"
    assert unit_type_label("Villa") == "Villa"

def test_group_units_order():
    items = [{"unit_type": "3br"}, {"unit_type": "Villa"}, {"unit_type": "1 bed"}, {"unit_type": "3 BR"}]
    groups = group_units_by_bedroom(items)
    assert [g[0] for g in groups] == ["1br", "3br", "other"]
    assert groups[1][1] == "3 غرف"
    assert len(groups[1][2]) == 2
    assert groups[2][1] == "وحدات أخرى"

def test_breakdown_label():
    item = {"unit_type": "2br", "variant": "حديقة", "area_sqm": 120}
    assert breakdown_label(item) == "غرفتين • حديقة • ١٢٠ م²"
    assert breakdown_label(item, with_type=False) == "حديقة • ١٢٠ م²"
    assert breakdown_label({"unit_type": "Townhouse"}, with_type=False) == "Townhouse"
    assert breakdown_label({}) == "وحدة"
