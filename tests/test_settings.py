from listings.settings import NumberLocale, get_locale, load_settings, setting

def test_missing_settings_file(tmp_path):
    assert load_settings(tmp_path / "missing.yaml") == {}

def test_settings_file_is_read(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("currency:\n  aed: AED\n", encoding="utf-8")
    assert load_settings(path) == {"currency": {"aed": "AED"}}

def test_defaults_available():
    assert setting("currency", "egp") == "جنيه"
    assert setting("data", "october").endswith("october_projects.json")

def test_locale_mapping():
    loc = NumberLocale("test", digits="arab", group="٬", decimal="٫")
    assert loc.localize("1,234.5") == "١٬٢٣٤٫٥"
    assert get_locale("ar-AE").localize("1,234.5") == "1,234.5"

def test_unknown_locale_uses_latin_digits():
    assert get_locale("xx-XX").localize("1,000") == "1,000"
