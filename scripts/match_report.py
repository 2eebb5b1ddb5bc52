"""Render a viewer's co-founder matches as a Markdown report.

Reads the same profiles file the matcher uses, ranks candidates for one viewer
and writes a report suitable for a quick human review: score, tier, identity
line, why they fit (shared interests / complementary skills) and a short bio.
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, List, Sequence

# Ensure project root (parent of scripts/) is on sys.path for package imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cofounder_match.config import Settings
from cofounder_match.data_models import MatchResult, Profile
from cofounder_match.ingest import load_profiles
from cofounder_match.recommender import top_k_for_viewer
from cofounder_match.scoring import profile_completeness, score_tier


def trunc(v: Any, n: int = 400) -> str:
    s = str(v or "").strip()
    return (s[: n - 1] + "…") if len(s) > n else s


def render_markdown(viewer: Profile, matches: Sequence[MatchResult]) -> str:
    """Build the report text for `viewer` and its ranked `matches`."""
    lines: List[str] = []
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    lines.append(f"# Co-founder Matches for {viewer.full_name or viewer.id}\n")
    lines.append(f"Generated: {ts}\n")
    lines.append(f"Profile completeness: {profile_completeness(viewer)}%\n")
    lines.append(f"Total matches: {len(matches)}\n\n")

    for i, m in enumerate(matches, start=1):
        lines.append(f"## {i}. {m.full_name or 'Unknown'} — Score: {m.match_score} ({score_tier(m.match_score)})\n")
        identity = " | ".join(part for part in [m.university or "", m.role or ""] if part)
        if identity:
            lines.append(f"{identity}\n")
        if m.shared_interests:
            lines.append(f"Shared interests: {', '.join(m.shared_interests)}\n")
        if m.complementary_skills:
            lines.append(f"Brings skills: {', '.join(m.complementary_skills)}\n")
        bio = trunc(m.bio)
        if bio:
            lines.append("> " + bio.replace("\n", "\n> "))
            lines.append("")
    return "\n".join(lines)


def main() -> None:
    """CLI entrypoint: load profiles, rank for one viewer, write Markdown."""
    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="Render a Markdown report of a viewer's matches")
    parser.add_argument("--viewer", required=True, help="Viewer profile id")
    parser.add_argument("--profiles", type=Path, default=settings.profiles_path, help="Profiles CSV/JSON")
    parser.add_argument("--limit", type=int, default=settings.match_limit, help="Number of matches")
    parser.add_argument("--out", type=Path, default=Path("data_examples/matches_report.md"), help="Report path")
    args = parser.parse_args()

    print(f"[1/3] Loading profiles: {args.profiles}")
    profiles = load_profiles(args.profiles)

    print(f"[2/3] Ranking matches for {args.viewer}…")
    try:
        matches = top_k_for_viewer(profiles, args.viewer, k=args.limit)
    except KeyError:
        print(f"Error: no profile with id {args.viewer!r} in {args.profiles}")
        sys.exit(1)
    viewer = next(p for p in profiles if p.id == args.viewer)

    print(f"[3/3] Rendering Markdown report: {args.out}")
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(render_markdown(viewer, matches), encoding="utf-8")
    print("Done.")


if __name__ == "__main__":
    main()
