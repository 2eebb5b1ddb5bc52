from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pandas as pd
import typer
from rich import print
from rich.table import Table

from .config import Settings
from .data_models import Profile
from .ingest import clean_profiles_df, load_profiles
from .logger import setup_logger
from .recommender import filter_matches, matches_frame
from .scoring import profile_completeness, score_breakdown, calculate_match_score
from .service import InMemoryProfileStore, MatchService, fixed_viewer


app = typer.Typer(help="Co-founder Match CLI")


def _settings() -> Settings:
	settings = Settings.from_env()
	setup_logger(settings)
	return settings


def _load(path: Optional[Path], settings: Settings) -> List[Profile]:
	path = path or settings.profiles_path
	try:
		return load_profiles(path)
	except (FileNotFoundError, ValueError, KeyError) as e:
		print(f"[red]Could not load profiles:[/red] {e}")
		raise typer.Exit(code=1)


def _find(profiles: List[Profile], profile_id: str) -> Profile:
	for p in profiles:
		if p.id == profile_id:
			return p
	print(f"[red]No profile with id[/red] {profile_id}")
	raise typer.Exit(code=1)


@app.command()
def clean(
	path: Path = typer.Argument(..., help="Raw profiles CSV export"),
	out_path: Optional[Path] = typer.Option(None, help="Where to write cleaned CSV"),
):
	"""Trim whitespace and blank-looking cells in a profiles export."""
	df = clean_profiles_df(pd.read_csv(path))
	out = out_path or path.with_name(f"{path.stem}_cleaned.csv")
	df.to_csv(out, index=False)
	print(f"[green]Wrote cleaned data to[/green] {out}")


@app.command()
def completeness(
	profile_id: str = typer.Argument(..., help="Profile id"),
	path: Optional[Path] = typer.Option(None, help="Profiles CSV/JSON (defaults to PROFILES_PATH)"),
):
	"""Show how complete a profile is."""
	settings = _settings()
	profile = _find(_load(path, settings), profile_id)
	print(f"{profile.full_name or profile.id}: [bold]{profile_completeness(profile)}%[/bold] complete")


@app.command()
def score(
	viewer_id: str = typer.Argument(..., help="Viewer profile id"),
	candidate_id: str = typer.Argument(..., help="Candidate profile id"),
	path: Optional[Path] = typer.Option(None, help="Profiles CSV/JSON (defaults to PROFILES_PATH)"),
):
	"""Score one candidate for one viewer, with the per-criterion breakdown."""
	settings = _settings()
	profiles = _load(path, settings)
	viewer = _find(profiles, viewer_id)
	candidate = _find(profiles, candidate_id)
	parts = score_breakdown(viewer, candidate)
	table = Table("criterion", "points")
	for name in ["skills", "interests", "university", "role", "completeness"]:
		table.add_row(name, str(getattr(parts, name)))
	table.add_row("[bold]match score[/bold]", f"[bold]{calculate_match_score(viewer, candidate)}[/bold]")
	print(table)


@app.command()
def recommend(
	viewer_id: str = typer.Argument(..., help="Viewer profile id"),
	path: Optional[Path] = typer.Option(None, help="Profiles CSV/JSON (defaults to PROFILES_PATH)"),
	top_k: Optional[int] = typer.Option(None, help="Number of matches to show (defaults to MATCH_LIMIT)"),
	search: Optional[str] = typer.Option(None, help="Filter by name, university or bio"),
	role: Optional[str] = typer.Option(None, help="Only show candidates with this role"),
	out_path: Optional[Path] = typer.Option(None, help="Also write the matches to this CSV"),
):
	"""Rank onboarded candidates for a viewer."""
	settings = _settings()
	store = InMemoryProfileStore(_load(path, settings))
	if store.get_profile(viewer_id) is None:
		print(f"[red]No profile with id[/red] {viewer_id}")
		raise typer.Exit(code=1)
	service = MatchService(store, fixed_viewer(store, viewer_id), settings)
	matches = filter_matches(service.cofounder_matches(limit=top_k), search=search, role=role)
	df = matches_frame(matches)
	cols = ["rank", "full_name", "university", "role", "match_score", "tier", "shared_interests"]
	table = Table(*cols)
	for _, r in df.iterrows():
		table.add_row(*(str(r.get(c, "")) for c in cols))
	print(table)
	if out_path:
		df.to_csv(out_path, index=False)
		print(f"[green]Saved matches to[/green] {out_path}")


@app.command()
def stats(
	viewer_id: str = typer.Argument(..., help="Viewer profile id"),
	path: Optional[Path] = typer.Option(None, help="Profiles CSV/JSON (defaults to PROFILES_PATH)"),
):
	"""Dashboard numbers for a viewer."""
	settings = _settings()
	store = InMemoryProfileStore(_load(path, settings))
	service = MatchService(store, fixed_viewer(store, viewer_id), settings)
	result = service.dashboard_stats()
	if result is None:
		print(f"[red]No profile with id[/red] {viewer_id}")
		raise typer.Exit(code=1)
	table = Table("metric", "value")
	for k, v in result.model_dump().items():
		table.add_row(k, str(v))
	print(table)


if __name__ == "__main__":
	app()
