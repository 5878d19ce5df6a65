import pandas as pd
import streamlit as st
from listings.fields import (
    UNSPECIFIED, breakdown_label, group_units_by_bedroom, handover_label, landmarks,
    october_location, october_location_label, price_breakdown, status_badge, travel_minutes,
    unit_types_label,
)
from listings.formatting import fmt_area_range, fmt_egp, fmt_minutes, fmt_percent
from listings.loaders import load_october
from listings.payment_plan import installment_years_label
from listings.slugs import find_by_slug_or_index, project_route_key

st.set_page_config(page_title="6 October • Real Estate Dashboard", layout="wide")

DEFAULT_TYPE = "مشروع سكني"

@st.cache_resource
def get_data():
    return load_october()

data = get_data()


def open_project(key):
    st.query_params["slug"] = key

def close_project():
    st.query_params.clear()


def facts(project):
    """(label, value, note) rows shared by the card and the detail view."""
    prices = project.get("prices_egp") or {}
    areas = project.get("areas_sqm") or {}
    plan = project.get("payment_plan") or {}
    return [
        ("نوع الوحدات", unit_types_label(project), None),
        ("المساحات المتاحة", fmt_area_range(areas.get("min"), areas.get("max"), areas.get("notes")), None),
        ("السعر الإجمالي", fmt_egp(prices.get("unit_total_from")), prices.get("notes")),
        ("سعر المتر", fmt_egp(prices.get("price_per_sqm_from")), None),
        ("مقدم الحجز", fmt_percent(plan.get("down_payment_pct")), None),
        ("مدة التقسيط", installment_years_label(plan), plan.get("notes")),
        ("موعد الاستلام", handover_label(project), None),
    ]


def render_facts(project):
    cols = st.columns(2)
    for i, (label, value, note) in enumerate(facts(project)):
        with cols[i % 2]:
            st.write(f"**{label}**")
            st.write(value)
            if note:
                st.caption(note)


def location_markdown(project):
    label = october_location_label(project)
    map_url = october_location(project).get("map_url")
    if map_url:
        return f"{label} — [افتح الخريطة ↗]({map_url})"
    return label


def render_card(project, index):
    with st.container(border=True):
        st.caption(f"{index + 1} • المطور: {project.get('developer') or UNSPECIFIED}")
        st.subheader(project.get("name") or "مشروع بدون اسم")
        st.caption(project.get("project_type") or DEFAULT_TYPE)
        st.markdown(status_badge(project.get("status"), "october").markdown())

        st.write("**الموقع**")
        st.markdown(location_markdown(project))
        nearby = landmarks(project)
        if nearby:
            st.caption("المعالم القريبة: " + "، ".join(nearby))
        render_facts(project)

        items = price_breakdown(project)
        if items:
            st.write("**أسعار الوحدات المتاحة**")
            for item in items:
                st.write(f"- {breakdown_label(item)}: **{fmt_egp(item.get('price_egp'))}**")
                if item.get("notes"):
                    st.caption(item["notes"])
        features = project.get("features") or []
        if features:
            st.write("**مميزات المشروع**")
            st.markdown(" · ".join(f"`{f}`" for f in features))

        key = project_route_key(project, index)
        st.button("عرض التفاصيل", key=f"october-{index}-{key}", on_click=open_project, args=(key,))


def render_details(project):
    st.button("← رجوع لقائمة المشاريع", on_click=close_project)
    if project.get("image_url"):
        st.image(project["image_url"], width="stretch")
    st.caption(project.get("project_type") or DEFAULT_TYPE)
    st.title(project.get("name") or "مشروع بدون اسم")
    st.caption(f"المطور: {project.get('developer') or UNSPECIFIED}")
    st.markdown(status_badge(project.get("status"), "october").markdown())

    location = october_location(project)
    left, right = st.columns([2, 1])
    with left:
        st.write("**الموقع**")
        st.write(location.get("district") or UNSPECIFIED)
        if location.get("description"):
            st.caption(location["description"])
        if location.get("map_url"):
            st.link_button("افتح الخريطة ↗", location["map_url"])
        render_facts(project)

        nearby = landmarks(project)
        if nearby:
            st.write("**المعالم القريبة**")
            st.markdown(" · ".join(f"`{n}`" for n in nearby))
        minutes = travel_minutes(project)
        if minutes:
            st.write("**مدة الوصول التقريبية**")
            for name, value in minutes:
                st.write(f"- {name}: {fmt_minutes(value)}")
        features = project.get("features") or []
        if features:
            st.write("**مميزات المشروع**")
            st.markdown(" · ".join(f"`{f}`" for f in features))

        groups = group_units_by_bedroom(price_breakdown(project))
        if groups:
            st.write("**تفاصيل أسعار الوحدات**")
            for key, heading, items in groups:
                st.caption(heading)
                rows = [
                    {"الوحدة": breakdown_label(i, with_type=False), "السعر": fmt_egp(i.get("price_egp")), "ملاحظات": i.get("notes") or ""}
                    for i in items
                ]
                st.dataframe(pd.DataFrame(rows), width="stretch", hide_index=True)

    with right:
        with st.container(border=True):
            st.write("**ملخص سريع**")
            st.write(f"- المطور: {project.get('developer') or UNSPECIFIED}")
            st.write(f"- النوع: {project.get('project_type') or DEFAULT_TYPE}")
            st.write(f"- الحالة: {project.get('status') or UNSPECIFIED}")
            st.write(f"- الموقع: {location.get('district') or UNSPECIFIED}")


slug = st.query_params.get("slug")
if slug is not None:
    project = find_by_slug_or_index(data.projects, slug)
    if project is None:
        st.write("المشروع غير موجود.")
        st.button("العودة لمشاريع أكتوبر", on_click=close_project)
    else:
        render_details(project)
    st.stop()

st.page_link("streamlit_app.py", label="← العودة لصفحة دبي الجنوب")
st.caption("6 OCTOBER")
st.title("مشاريع مدينة 6 أكتوبر")
st.caption("قاعدة بيانات منفصلة يمكن تعديلها من ملف JSON بسهولة.")

c1, c2, c3 = st.columns(3)
with c1:
    st.metric("عدد المشاريع", len(data.projects))
with c2:
    st.metric("آخر تحديث", data.last_updated)
with c3:
    st.metric("العملة", data.currency)

if data.projects:
    cols = st.columns(2)
    for index, project in enumerate(data.projects):
        with cols[index % 2]:
            render_card(project, index)
else:
    st.subheader("لا توجد مشاريع بعد")
    st.caption("أضف البيانات داخل ملف `data/october_projects.json` ثم حدّث الصفحة.")
