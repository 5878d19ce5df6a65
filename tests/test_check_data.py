import json
import runpy
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "data" / "check_data.py"
main = runpy.run_path(str(SCRIPT))["main"]


def _write(path, payload):
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_warns_about_developers_without_profile(tmp_path, monkeypatch, capsys):
    dubai = _write(tmp_path / "dubai.json", [
        {"name": "Sky", "developer": "Azizi", "location_details": "Dubai South", "units": []},
        {"name": "Park", "developer": "New Dev Co", "location_details": "Dubai South", "units": []},
        {"developers": [{"slug": "azizi", "name": "Azizi"}]},
    ])
    october = _write(tmp_path / "october.json", {"meta": {"last_updated": "2025-01"}, "projects": [{"name": "O"}]})
    monkeypatch.setattr(sys, "argv", ["check_data.py", str(dubai), str(october)])
    main()
    out = capsys.readouterr().out
    assert f"[OK] {dubai}: 2 projects, 2 developers" in out
    assert "[WARN] No developer profile for: New Dev Co" in out
    assert "Azizi" not in out.split("[WARN]", 1)[1]
    assert f"[OK] {october}: 1 projects" in out
    assert "has no projects" not in out


def test_warns_about_empty_october_dataset(tmp_path, monkeypatch, capsys):
    dubai = _write(tmp_path / "dubai.json", [])
    october = _write(tmp_path / "october.json", {"projects": []})
    monkeypatch.setattr(sys, "argv", ["check_data.py", str(dubai), str(october)])
    main()
    out = capsys.readouterr().out
    assert "No developer profile" not in out
    assert f"[WARN] {october} has no projects" in out


def test_missing_file_exits(tmp_path, monkeypatch):
    october = _write(tmp_path / "october.json", {"projects": []})
    missing = tmp_path / "missing.json"
    monkeypatch.setattr(sys, "argv", ["check_data.py", str(missing), str(october)])
    with pytest.raises(SystemExit, match="Data file not found"):
        main()
