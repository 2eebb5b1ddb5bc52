"""
Co-founder match scoring.

The score is computed from the viewer's point of view: it answers "how good a
co-founder would this candidate be for me", so `calculate_match_score(a, b)` and
`calculate_match_score(b, a)` usually differ. Five criteria each earn points up to
a ceiling:

- skills: share of the candidate's skills the viewer does not already have
- interests: share of the viewer's interests the candidate also has
- university: same school (case-insensitive) or a flat partial credit
- role: one side searching and the other ready to join, or both searching
- completeness: how filled in the candidate's profile is

All functions here are pure; missing data simply earns no points.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from .data_models import LOOKING_FOR_COFOUNDER, READY_TO_JOIN, Profile, ScoreBreakdown, is_present


COMPLETENESS_CHECKS = 8
MIN_BIO_LENGTH = 20


@dataclass(frozen=True)
class ScoreWeights:
    w_skills: int = 25
    w_interests: int = 30
    w_university: int = 15
    w_role: int = 20
    w_completeness: int = 10
    # partial credits
    different_university: int = 5
    both_searching: int = 12

    def __post_init__(self) -> None:
        for name, value in vars(self).items():
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.different_university > self.w_university:
            raise ValueError("different_university cannot exceed w_university")
        if self.both_searching > self.w_role:
            raise ValueError("both_searching cannot exceed w_role")

    @property
    def max_score(self) -> int:
        return self.w_skills + self.w_interests + self.w_university + self.w_role + self.w_completeness


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves going up (12.5 -> 13, 37.5 -> 38)."""
    return int(math.floor(x + 0.5))


def _has_items(values: Optional[List[str]]) -> bool:
    return bool(values)


def profile_completeness(profile: Profile) -> int:
    """Percentage of the eight profile sections that are filled in."""
    checks = [
        is_present(profile.full_name),
        is_present(profile.university),
        is_present(profile.bio) and len(profile.bio or "") > MIN_BIO_LENGTH,
        _has_items(profile.skills),
        _has_items(profile.interests),
        is_present(profile.role),
        any(is_present(url) for url in (profile.linkedin_url, profile.twitter_url, profile.website_url)),
        is_present(profile.avatar_url),
    ]
    completed = sum(1 for ok in checks if ok)
    return round_half_up(completed / COMPLETENESS_CHECKS * 100)


def shared_interests(viewer: Profile, candidate: Profile) -> List[str]:
    """Candidate interests the viewer also lists, in the candidate's order."""
    if not _has_items(viewer.interests) or not _has_items(candidate.interests):
        return []
    mine = set(viewer.interests or [])
    return [i for i in candidate.interests or [] if i in mine]


def complementary_skills(viewer: Profile, candidate: Profile) -> List[str]:
    """Candidate skills the viewer lacks, in the candidate's order."""
    if not _has_items(viewer.skills) or not _has_items(candidate.skills):
        return []
    mine = set(viewer.skills or [])
    return [s for s in candidate.skills or [] if s not in mine]


def _skill_points(viewer: Profile, candidate: Profile, weights: ScoreWeights) -> int:
    if not _has_items(viewer.skills) or not _has_items(candidate.skills):
        return 0
    different = complementary_skills(viewer, candidate)
    ratio = len(different) / max(len(candidate.skills or []), 1)
    return round_half_up(ratio * weights.w_skills)


def _interest_points(viewer: Profile, candidate: Profile, weights: ScoreWeights) -> int:
    if not _has_items(viewer.interests) or not _has_items(candidate.interests):
        return 0
    shared = shared_interests(viewer, candidate)
    # denominator is the viewer's list: "how much of what I care about do they share"
    ratio = len(shared) / max(len(viewer.interests or []), 1)
    return round_half_up(ratio * weights.w_interests)


def _university_points(viewer: Profile, candidate: Profile, weights: ScoreWeights) -> int:
    if not is_present(viewer.university) or not is_present(candidate.university):
        return 0
    if (viewer.university or "").lower() == (candidate.university or "").lower():
        return weights.w_university
    return weights.different_university


def _role_points(viewer: Profile, candidate: Profile, weights: ScoreWeights) -> int:
    if not is_present(viewer.role) or not is_present(candidate.role):
        return 0
    a, b = viewer.role, candidate.role
    if (a in LOOKING_FOR_COFOUNDER and b in READY_TO_JOIN) or (a in READY_TO_JOIN and b in LOOKING_FOR_COFOUNDER):
        return weights.w_role
    if a in LOOKING_FOR_COFOUNDER and b in LOOKING_FOR_COFOUNDER:
        return weights.both_searching
    return 0


def score_breakdown(viewer: Profile, candidate: Profile, weights: Optional[ScoreWeights] = None) -> ScoreBreakdown:
    """Points earned by the candidate on each criterion.

    Every criterion's ceiling counts towards `max_score` whether or not the data
    needed to evaluate it is present, so sparse profiles are never rewarded for
    missing fields.
    """
    if weights is None:
        weights = ScoreWeights()
    return ScoreBreakdown(
        skills=_skill_points(viewer, candidate, weights),
        interests=_interest_points(viewer, candidate, weights),
        university=_university_points(viewer, candidate, weights),
        role=_role_points(viewer, candidate, weights),
        completeness=round_half_up(profile_completeness(candidate) * weights.w_completeness / 100),
        max_score=weights.max_score,
    )


def calculate_match_score(viewer: Profile, candidate: Profile, weights: Optional[ScoreWeights] = None) -> int:
    """Compatibility of `candidate` for `viewer` as an integer in [0, 100]."""
    parts = score_breakdown(viewer, candidate, weights)
    if parts.max_score <= 0:
        return 0
    return round_half_up(parts.earned / parts.max_score * 100)


def score_tier(score: int) -> str:
    """Badge bucket used when listing matches."""
    if score >= 80:
        return "strong"
    if score >= 60:
        return "good"
    return "fair"
