from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

import pandas as pd

from .data_models import MatchResult, Profile
from .scoring import (
    ScoreWeights,
    calculate_match_score,
    complementary_skills,
    score_tier,
    shared_interests,
)


DEFAULT_LIMIT = 10

MATCH_COLUMNS = [
    "id",
    "full_name",
    "university",
    "role",
    "match_score",
    "tier",
    "shared_interests",
    "complementary_skills",
]


def build_match(viewer: Profile, candidate: Profile, weights: Optional[ScoreWeights] = None) -> MatchResult:
    """Attach score and explanation lists to a single candidate."""
    return MatchResult(
        **candidate.model_dump(),
        match_score=calculate_match_score(viewer, candidate, weights),
        shared_interests=shared_interests(viewer, candidate),
        complementary_skills=complementary_skills(viewer, candidate),
    )


def rank_matches(
    viewer: Profile,
    candidates: Sequence[Profile],
    limit: int = DEFAULT_LIMIT,
    weights: Optional[ScoreWeights] = None,
) -> List[MatchResult]:
    """Return the best `limit` candidates for `viewer`, highest score first.

    The caller is expected to have removed the viewer and any profile that has
    not finished onboarding. Candidates with equal scores keep the order they
    were supplied in; truncation happens after sorting.
    """
    if limit <= 0 or not candidates:
        return []
    scored = [build_match(viewer, c, weights) for c in candidates]
    # list.sort is stable, so ties stay in input order
    scored.sort(key=lambda m: m.match_score, reverse=True)
    return scored[:limit]


def filter_matches(
    matches: Iterable[MatchResult],
    search: Optional[str] = None,
    role: Optional[str] = None,
) -> List[MatchResult]:
    """Narrow a ranked list by free-text search and exact role."""
    term = (search or "").strip().lower()
    out = []
    for m in matches:
        if term:
            haystack = [m.full_name, m.university, m.bio]
            if not any(term in (h or "").lower() for h in haystack):
                continue
        if role and m.role != role:
            continue
        out.append(m)
    return out


def matches_frame(matches: Sequence[MatchResult]) -> pd.DataFrame:
    """Tabular view of ranked matches, one row per candidate."""
    rows = []
    for rank, m in enumerate(matches, start=1):
        rows.append(
            {
                "rank": rank,
                "id": m.id,
                "full_name": m.full_name or "",
                "university": m.university or "",
                "role": m.role or "",
                "match_score": m.match_score,
                "tier": score_tier(m.match_score),
                "shared_interests": ", ".join(m.shared_interests),
                "complementary_skills": ", ".join(m.complementary_skills),
            }
        )
    return pd.DataFrame(rows, columns=["rank", *MATCH_COLUMNS])


def top_k_for_viewer(
    profiles: Sequence[Profile],
    viewer_id: str,
    k: int = DEFAULT_LIMIT,
    weights: Optional[ScoreWeights] = None,
) -> List[MatchResult]:
    """Rank the onboarded profiles in `profiles` for the profile with `viewer_id`."""
    viewer = next((p for p in profiles if p.id == viewer_id), None)
    if viewer is None:
        raise KeyError(f"No profile with id {viewer_id!r}")
    pool = [p for p in profiles if p.id != viewer_id and p.is_onboarded]
    return rank_matches(viewer, pool, limit=k, weights=weights)
