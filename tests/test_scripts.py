import importlib.util
import sys
from pathlib import Path

import pytest

from cofounder_match.data_models import Profile
from cofounder_match.ingest import profiles_to_df

SCRIPTS_DIR = Path(__file__).resolve().parents[1] / "scripts"


def _load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def profiles_csv(tmp_path) -> Path:
    path = tmp_path / "profiles.csv"
    profiles = [
        Profile(id="u1", full_name="Ngozi Adeyemi", interests=["FinTech"], role="Looking for a co-founder", is_onboarded=True),
        Profile(id="u2", full_name="Jomo Kariuki", interests=["FinTech"], role="Ready to join as co-founder", is_onboarded=True),
    ]
    profiles_to_df(profiles).to_csv(path, index=False)
    return path


def test_match_report_unknown_viewer_exits(monkeypatch, capsys, tmp_path, profiles_csv):
    report = _load_script("match_report")
    out = tmp_path / "report.md"
    monkeypatch.setattr(
        sys, "argv", ["match_report.py", "--viewer", "ghost", "--profiles", str(profiles_csv), "--out", str(out)]
    )
    with pytest.raises(SystemExit) as exc:
        report.main()
    assert exc.value.code == 1
    assert "ghost" in capsys.readouterr().out
    assert not out.exists()


def test_match_report_writes_markdown(monkeypatch, tmp_path, profiles_csv):
    report = _load_script("match_report")
    out = tmp_path / "report.md"
    monkeypatch.setattr(
        sys, "argv", ["match_report.py", "--viewer", "u1", "--profiles", str(profiles_csv), "--out", str(out)]
    )
    report.main()
    text = out.read_text(encoding="utf-8")
    assert "# Co-founder Matches for Ngozi Adeyemi" in text
    assert "Jomo Kariuki" in text
