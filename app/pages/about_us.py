import streamlit as st

st.set_page_config(page_title="About • Real Estate Dashboard", layout="wide")

st.title("📄 About This Project")
st.caption("Version 1.0 — Arabic-first browser for off-plan projects in Dubai South and 6th of October City")

st.markdown("""
## Project Scope
This app presents two curated project datasets side by side:
- **Dubai South / Dubailand** projects with their units, payment plans and developers
- **6th of October City** projects with price ranges, payment terms and unit price breakdowns
- A short **real-estate glossary** and reference info on UAE roads and emirates

---

## How Figures Are Derived
1. **Price per sq ft**: the developer's figure when given, otherwise price ÷ area rounded to two decimals.
2. **Expected annual yield**: the developer's figure when given, otherwise (monthly rent × 12) ÷ price, as a percentage.
3. **Zone**: read from the location, stadium and title text (Dubai South first, then Dubailand).
4. **Headline metrics**: average starting price and total project area across all listed projects.

Values missing from the data are shown as **—** rather than guessed.

---

## Data Sources
- `data/dubai_south_projects.json`: projects, developer profiles, glossary terms and UAE reference info.
- `data/october_projects.json`: 6th of October projects plus `meta.last_updated` and `meta.currency`.

> Edit the JSON files and reload the page; `python data/check_data.py` prints a quick summary of both files.

---

## What This App Is Not
- It’s **not** financial or legal advice.
- It does **not** fetch live prices or availability.
- It does **not** store anything you do in the app.
""")
