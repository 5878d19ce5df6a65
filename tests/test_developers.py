from listings.developers import Developer, developer_highlight, developer_names, resolve_developers
from listings.loaders import build_dubai_south

PROFILES = (
    Developer.from_raw({"slug": "azizi", "name": "عزيزي", "name_en": "Azizi Developments", "key_strengths": ["خطط سداد مرنة"]}),
    Developer.from_raw({"name": "دانوب العقارية", "contact_info": {"website": "https://example.com"}}),
)

def test_names_in_first_appearance_order():
    projects = [
        {"developer": "B", "location_details": "Dubai South"},
        {"developer": "A", "title": "DLRC"},
        {"developer": "B", "location_details": "دبي الجنوب"},
        {"developer": "C", "location_details": "Business Bay"},
        {"developer": "", "location_details": "Dubai South"},
    ]
    assert developer_names(projects) == ["B", "A"]

def test_match_is_case_insensitive_on_both_names():
    projects = [
        {"developer": "AZIZI developments", "location_details": "Dubai South"},
        {"developer": "دانوب العقارية", "location_details": "أرجان"},
    ]
    devs = resolve_developers(projects, PROFILES)
    assert devs[0] is PROFILES[0]
    assert devs[1].website == "https://example.com"

def test_unknown_developer_gets_placeholder():
    devs = resolve_developers([{"developer": "New Dev Co", "location_details": "Dubai South"}], PROFILES)
    assert len(devs) == 1
    assert devs[0].slug == "auto-new-dev-co"
    assert devs[0].name == "New Dev Co"
    assert devs[0].name_en is None
    assert devs[0].key_strengths == ()

def test_profile_without_slug():
    assert PROFILES[1].slug == "دانوب-العقارية"

def test_highlight():
    assert developer_highlight(PROFILES[0]) == "يتميز Azizi Developments بـخطط سداد مرنة"
    assert developer_highlight(Developer.placeholder("X")) == "مطور نشط في دبي."

def test_non_text_developer_name():
    devs = resolve_developers([{"developer": 7, "location_details": "Dubai South"}], PROFILES)
    assert len(devs) == 1
    assert devs[0].slug == "auto-7"
    assert devs[0].name == "7"
    assert not PROFILES[0].matches(7)
    assert Developer.placeholder(2024).slug == "auto-2024"

def test_non_text_developer_in_dataset():
    data = build_dubai_south([{"developer": 123, "location_details": "Dubai South", "units": []}])
    assert [d.slug for d in data.developers] == ["auto-123"]
