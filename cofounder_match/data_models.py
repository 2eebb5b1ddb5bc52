import json
import re
from typing import Any, List, Literal, Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator


LOOKING_FOR_COFOUNDER = ("Looking for a co-founder", "Looking for team members")
READY_TO_JOIN = ("Ready to join as co-founder",)

# Full onboarding vocabulary; only the two groups above earn a role bonus.
ROLE_OPTIONS = (
    "Looking for a co-founder",
    "Ready to join as co-founder",
    "Just exploring",
    "Looking for team members",
    "Mentor/Advisor",
)


def is_present(value: Any) -> bool:
    """True when a text field carries something other than blanks."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _blank_to_none(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    return value


def _split_labels(value: Any) -> Optional[List[str]]:
    """Accept a list, a JSON list string or a delimited string of labels."""
    value = _blank_to_none(value)
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if _blank_to_none(v) is not None]
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        if s.startswith("[") and s.endswith("]"):
            try:
                arr = json.loads(s)
            except json.JSONDecodeError:
                arr = None
            if isinstance(arr, list):
                return [str(v) for v in arr if v is not None]
        return [part.strip() for part in re.split(r"[,;|]", s) if part.strip()]
    raise ValueError(f"Unsupported label list value: {value!r}")


class Profile(BaseModel):
    """
    A student profile as stored by the persistence service.

    Only `id` is required; the scorer treats every other field as optional.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    university: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    interests: Optional[List[str]] = None
    role: Optional[str] = None
    avatar_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    twitter_url: Optional[str] = None
    website_url: Optional[str] = None
    is_onboarded: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool) and not pd.isna(v):
            return str(int(v)) if float(v).is_integer() else str(v)
        return v

    @field_validator(
        "email",
        "full_name",
        "university",
        "bio",
        "role",
        "avatar_url",
        "linkedin_url",
        "twitter_url",
        "website_url",
        "created_at",
        "updated_at",
        mode="before",
    )
    @classmethod
    def _nan_to_none(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("skills", "interests", mode="before")
    @classmethod
    def _parse_labels(cls, v: Any) -> Optional[List[str]]:
        return _split_labels(v)

    @field_validator("is_onboarded", mode="before")
    @classmethod
    def _parse_flag(cls, v: Any) -> Any:
        v = _blank_to_none(v)
        if v is None:
            return False
        if isinstance(v, str):
            return v.strip().lower() in {"true", "yes", "y", "1"}
        return bool(v)


class MatchResult(Profile):
    """A candidate profile annotated with its score against the viewer."""

    match_score: int = Field(alias="matchScore", ge=0, le=100)
    shared_interests: List[str] = Field(default_factory=list, alias="sharedInterests")
    complementary_skills: List[str] = Field(default_factory=list, alias="complementarySkills")


class ScoreBreakdown(BaseModel):
    """Points earned per criterion, plus the scale they were earned on."""

    skills: int = 0
    interests: int = 0
    university: int = 0
    role: int = 0
    completeness: int = 0
    max_score: int = 100

    @property
    def earned(self) -> int:
        return self.skills + self.interests + self.university + self.role + self.completeness


ConnectionStatus = Literal["pending", "accepted", "rejected"]
GoalStatus = Literal["pending", "in_progress", "completed"]


class Connection(BaseModel):
    id: str
    requester_id: str
    receiver_id: str
    status: ConnectionStatus = "pending"
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class Goal(BaseModel):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[str] = None
    status: GoalStatus = "pending"


class ConnectionBuckets(BaseModel):
    """Connections of one user split by direction and state."""

    pending: List[Connection] = Field(default_factory=list, description="Incoming requests awaiting a reply")
    sent: List[Connection] = Field(default_factory=list, description="Outgoing requests awaiting a reply")
    accepted: List[Connection] = Field(default_factory=list)


class DashboardStats(BaseModel):
    potential_matches: int = 0
    active_goals: int = 0
    connections: int = 0
    profile_completeness: int = Field(default=0, ge=0, le=100)
