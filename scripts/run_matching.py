"""Rank co-founder matches for every onboarded profile in a CSV file.

Pseudocode:
1) Load profiles via cofounder_match.ingest.load_profiles (PROFILES_PATH or --input)
2) Build an in-memory store and, per onboarded viewer, ask MatchService for the top matches
3) Save one row per (viewer, match) to the output CSV and print a brief summary
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

import pandas as pd

# Ensure project root (parent of scripts/) is on sys.path for package imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cofounder_match.config import Settings
from cofounder_match.ingest import load_profiles
from cofounder_match.logger import logger, setup_logger
from cofounder_match.recommender import matches_frame
from cofounder_match.service import InMemoryProfileStore, MatchService, fixed_viewer


def run(input_csv: Path, output_csv: Path, limit: int, settings: Settings) -> pd.DataFrame:
    """Rank matches for all onboarded viewers and write them to `output_csv`.

    Raises:
        FileNotFoundError: If the input file does not exist.
    """
    print(f"[1/3] Loading profiles from {input_csv}...")
    profiles = load_profiles(input_csv)
    viewers = [p for p in profiles if p.is_onboarded]
    print(f"       Loaded {len(profiles)} profiles ({len(viewers)} onboarded).")

    print(f"[2/3] Ranking top {limit} matches per viewer...")
    store = InMemoryProfileStore(profiles)
    frames: List[pd.DataFrame] = []
    for i, viewer in enumerate(viewers, start=1):
        service = MatchService(store, fixed_viewer(store, viewer.id), settings)
        df = matches_frame(service.cofounder_matches(limit=limit))
        df.insert(0, "viewer_id", viewer.id)
        df.insert(1, "viewer_name", viewer.full_name or "")
        frames.append(df)
        if i % 25 == 0 or i == len(viewers):
            logger.info(f"{i}/{len(viewers)} viewers ranked")

    result = pd.concat(frames, ignore_index=True) if frames else pd.DataFrame()

    print(f"[3/3] Saving results to {output_csv}...")
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    result.to_csv(output_csv, index=False)
    print(f"Done. Wrote {len(result)} match rows to {output_csv}")
    return result


def main() -> None:
    settings = Settings.from_env()
    setup_logger(settings)
    parser = argparse.ArgumentParser(description="Rank co-founder matches for every onboarded profile")
    parser.add_argument("--input", type=Path, default=settings.profiles_path, help="Profiles CSV/JSON")
    parser.add_argument("--output", type=Path, default=Path("data/matches.csv"), help="Where to write matches")
    parser.add_argument("--limit", type=int, default=settings.match_limit, help="Matches per viewer")
    args = parser.parse_args()
    run(args.input, args.output, args.limit, settings)


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:
        print(f"Error: {exc}")
        sys.exit(1)
