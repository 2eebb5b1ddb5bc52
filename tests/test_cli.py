import pandas as pd
import pytest
from typer.testing import CliRunner

from cofounder_match.ingest import profiles_to_df
from cofounder_match.main import app


runner = CliRunner()


@pytest.fixture
def profiles_csv(tmp_path, viewer, full_candidate):
    path = tmp_path / "profiles.csv"
    profiles_to_df([viewer, full_candidate]).to_csv(path, index=False)
    return path


def test_recommend_writes_matches(profiles_csv, tmp_path):
    out = tmp_path / "matches.csv"
    result = runner.invoke(app, ["recommend", "viewer", "--path", str(profiles_csv), "--out-path", str(out)])
    assert result.exit_code == 0, result.output
    df = pd.read_csv(out)
    assert df["id"].tolist() == ["cand-full"]
    assert df["match_score"].tolist() == [100]


def test_completeness_command(profiles_csv):
    result = runner.invoke(app, ["completeness", "cand-full", "--path", str(profiles_csv)])
    assert result.exit_code == 0, result.output
    assert "100%" in result.output


def test_score_command(profiles_csv):
    result = runner.invoke(app, ["score", "viewer", "cand-full", "--path", str(profiles_csv)])
    assert result.exit_code == 0, result.output
    assert "100" in result.output


def test_unknown_profile_exits_non_zero(profiles_csv):
    result = runner.invoke(app, ["score", "viewer", "nobody", "--path", str(profiles_csv)])
    assert result.exit_code == 1


def test_missing_file_exits_non_zero(tmp_path):
    result = runner.invoke(app, ["stats", "viewer", "--path", str(tmp_path / "missing.csv")])
    assert result.exit_code == 1
