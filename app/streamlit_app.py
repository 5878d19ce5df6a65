import logging
import pathlib, time
import pandas as pd
import streamlit as st
from listings.derive import infer_zone, zone_subtitle
from listings.developers import developer_highlight
from listings.fields import (
    developer_label, location_label, project_name, project_roi, service_charge_label,
    status_badge, unit_summary, zone_badge,
)
from listings.formatting import PLACEHOLDER, fmt_area, fmt_month, fmt_price, fmt_roi
from listings.loaders import load_dubai_south
from listings.payment_plan import PaymentPlan
from listings.settings import setting
from listings.slugs import find_by_slug_or_index, project_route_key

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Dubai South Projects", layout="wide")

# Data freshness
data_path = pathlib.Path(setting("data", "dubai_south"))
if data_path.exists():
    age_hours = (time.time() - data_path.stat().st_mtime)/3600
    st.caption(f"Data: {data_path.name} • updated ~{age_hours:.1f}h ago")
else:
    st.caption(f"Data: (no file yet) — place the dataset at `{data_path}`")

@st.cache_resource
def get_data():
    return load_dubai_south()

data = get_data()


def open_project(key):
    st.query_params["slug"] = key

def close_project():
    st.query_params.clear()


def badges_line(project, zone):
    parts = [status_badge(project.get("status")).markdown()]
    zb = zone_badge(zone)
    if zb:
        parts.append(zb.markdown())
    parts.append(f"`{fmt_month(project.get('date'))}`")
    return " ".join(parts)


def location_markdown(project):
    label = location_label(project)
    if project.get("map_url"):
        return f"{label} — [افتح الخريطة ↗]({project['map_url']})"
    return label


def render_plan(project):
    plan = PaymentPlan.from_raw(project.get("payment_plan"))
    if plan:
        st.write("**خطة الدفع**")
        st.markdown(" · ".join(f"`{b}`" for b in plan.badges()))


def render_unit(unit):
    u = unit_summary(unit)
    with st.container(border=True):
        c1, c2 = st.columns([3, 2])
        with c1:
            st.write(f"**{u.type}**")
            line = u.area_text
            if u.price_per_area_text:
                line += f" • {u.price_per_area_text}"
            st.caption(line)
            if u.location:
                st.caption(f"الموقع: {u.location}")
            if u.roi_text:
                st.markdown(f":green[{u.roi_text}]")
        with c2:
            st.caption(f"عدد: {u.count}")
            st.write(f"**{u.price_text}**")


def render_project_card(project, index):
    zone = infer_zone(project)
    name = project_name(project)
    roi_text = fmt_roi(project_roi(project))
    with st.container(border=True):
        st.caption(f"{index + 1} • {zone_subtitle(zone)}")
        st.subheader(name)
        if project.get("name_en"):
            st.caption(project["name_en"])
        if project.get("title") and project["title"] != name:
            st.caption(project["title"])
        st.markdown(badges_line(project, zone))
        if roi_text:
            st.markdown(f":green[{roi_text}]")

        st.write("**الموقع**")
        st.markdown(location_markdown(project))
        c1, c2, c3 = st.columns(3)
        with c1:
            st.metric("السعر", fmt_price(project.get("price_dirham")))
        with c2:
            st.metric("المساحة الأساسية", fmt_area(project.get("area")))
        with c3:
            st.metric("المساحة الكلية", fmt_area(project.get("total_area")))
        render_plan(project)

        st.write("**الوحدات المتاحة**")
        for unit in project["units"]:
            render_unit(unit)
        key = project_route_key(project, index)
        st.button("عرض التفاصيل", key=f"open-{index}-{key}", on_click=open_project, args=(key,))


def render_project_details(project):
    zone = infer_zone(project)
    roi = project_roi(project)
    st.button("← رجوع لكل المشاريع", on_click=close_project)

    if project.get("image_url"):
        st.image(project["image_url"], width="stretch")
    st.caption(zone_subtitle(zone))
    st.title(project_name(project))
    if project.get("name_en"):
        st.caption(project["name_en"])
    st.markdown(badges_line(project, zone))

    left, right = st.columns([2, 1])
    with left:
        if project.get("title"):
            st.write(project["title"])
        if project.get("description"):
            st.write(project["description"])

        c1, c2 = st.columns(2)
        with c1:
            st.write("**المطور**")
            st.write(developer_label(project))
            others = project.get("other_projects_by_developer") or []
            if others:
                st.caption("مشاريع أخرى لنفس المطور: " + " • ".join(others))

            st.write("**السعر الابتدائي**")
            st.write(fmt_price(project.get("price_dirham")))
            st.write("**المساحة الكلية**")
            st.write(fmt_area(project.get("total_area")))
            st.write("**تاريخ الإطلاق**")
            st.write(fmt_month(project.get("launch_date")))
        with c2:
            st.write("**الموقع**")
            st.markdown(location_markdown(project))
            st.write("**تاريخ التسليم**")
            st.write(fmt_month(project.get("handover_date")))
            st.write("**العائد السنوي المتوقع**")
            st.write(fmt_roi(roi) if roi else PLACEHOLDER)
            if project.get("roi_notes"):
                st.caption(project["roi_notes"])
            st.write("**رسوم الخدمات**")
            st.write(service_charge_label(project))
            if project.get("service_charge_notes"):
                st.caption(project["service_charge_notes"])
        render_plan(project)

        services = project.get("services_included") or []
        if services:
            st.write("**الخدمات والمرافق**")
            st.markdown(" · ".join(f"`{s}`" for s in services))
        if project.get("developer_story"):
            st.info(f"**قصة المطور**\n\n{project['developer_story']}")

    with right:
        st.write("**الوحدات المتاحة**")
        for unit in project["units"]:
            render_unit(unit)
        rows = [unit_summary(u).as_row() for u in project["units"]]
        if rows:
            st.dataframe(pd.DataFrame(rows), width="stretch", hide_index=True)


def render_developers():
    st.subheader("أبرز المطورين")
    st.caption("ملخص سريع لأبرز ما يميز كل مطور ومشاريعه.")
    cols = st.columns(2)
    for i, dev in enumerate(data.developers):
        with cols[i % 2], st.container(border=True):
            st.caption("المطور")
            st.write(f"**{dev.name}**")
            if dev.name_en:
                st.caption(dev.name_en)
            if dev.founded_year:
                st.caption(f"سنة التأسيس: {dev.founded_year}")
            if dev.website:
                st.link_button("الموقع ↗", dev.website)
            if dev.chairman:
                st.write(f"Chairman: {dev.chairman}")
            if dev.ceo:
                st.write(f"CEO: {dev.ceo}")
            if dev.story:
                st.info(dev.story)
            if dev.key_strengths:
                st.caption("ما يميز المطور")
                st.markdown(" · ".join(f"`{s}`" for s in dev.key_strengths))
            if dev.projects_locations:
                st.caption("مشاريع ومواقعها")
                for p in dev.projects_locations:
                    st.write(f"- {p.get('name')} — {p.get('location')}")
            elif dev.projects:
                st.caption("مشاريع مميزة")
                st.markdown(" · ".join(f"`{p}`" for p in dev.projects))
            st.markdown(f":green[{developer_highlight(dev)}]")


def render_terms():
    st.subheader("مصطلحات عقارية")
    st.caption("تعريفات مختصرة لرسوم وخطوات التملك والتسجيل.")
    cols = st.columns(2)
    for i, term in enumerate(data.terms):
        with cols[i % 2], st.container(border=True):
            title = f"**{term.get('term')}**"
            if term.get("id"):
                title += f"  `#{term['id']}`"
            st.markdown(title)
            if term.get("abbreviation"):
                st.markdown(f":orange[{term['abbreviation']}]")
            if term.get("description"):
                st.caption(term["description"])


def render_uae_info():
    st.subheader("الطرق والإمارات السبع")
    st.caption("أهم شوارع دبي والطرق الاتحادية، مع حكام الإمارات السبع.")
    c1, c2 = st.columns(2)
    with c1:
        if data.dubai_roads:
            st.write("**أهم شوارع دبي**")
            for road in data.dubai_roads:
                st.write(f"- {road}")
    with c2:
        if data.emirates:
            st.write("**الإمارات السبع وحكامها**")
            for em in data.emirates:
                st.write(f"**{em.get('name')}**")
                st.caption(f"الحاكم: {em.get('ruler')}")
                if em.get("capital"):
                    st.caption(f"العاصمة: {em['capital']}")
    if data.highways:
        st.write("**طرق اتحادية رئيسية**")
        st.markdown(" · ".join(f"`{h}`" for h in data.highways))


slug = st.query_params.get("slug")
if slug is not None:
    project = find_by_slug_or_index(data.projects, slug)
    if project is None:
        st.write("المشروع غير موجود.")
        st.button("العودة للصفحة الرئيسية", on_click=close_project)
    else:
        render_project_details(project)
    st.stop()

st.caption("DUBAI SOUTH")
st.title("Dubai South Projects")
st.page_link("pages/october.py", label="مشاريع 6 أكتوبر ←")

col1, col2, col3 = st.columns(3)
with col1:
    st.link_button("DXB Interact ↗", "https://dxbinteract.com/")
with col2:
    st.link_button("DXB Offplan ↗", "https://dxboffplan.com/")
with col3:
    st.link_button("Property Finder ↗", "https://www.propertyfinder.ae/")

m1, m2 = st.columns(2)
with m1:
    st.metric("متوسط السعر الابتدائي", fmt_price(data.metrics.average_price))
with m2:
    st.metric("إجمالي المساحات", fmt_area(data.metrics.total_area), help="مجموع المساحات الكلية للمشاريع")

tabs = st.tabs(["المشاريع", "المطورون", "مصطلحات", "الإمارات"])

with tabs[0]:
    if not data.projects:
        st.warning("لا توجد مشاريع بعد.")
    cols = st.columns(2)
    for index, project in enumerate(data.projects):
        with cols[index % 2]:
            render_project_card(project, index)

with tabs[1]:
    if data.developers:
        render_developers()

with tabs[2]:
    if data.terms:
        render_terms()

with tabs[3]:
    if data.emirates or data.dubai_roads:
        render_uae_info()

st.write("")
st.caption("Figures come from the project datasets and developer material. Always verify with the developer before acting.")
