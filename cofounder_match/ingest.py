from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
from pydantic import ValidationError

from .data_models import Profile


FIELD_ALIASES: Dict[str, List[str]] = {
    "id": ["id", "profile_id", "user_id", "Profile ID"],
    "email": ["email", "Email", "Email address"],
    "full_name": ["full_name", "name", "Full name", "Name"],
    "university": ["university", "University", "School"],
    "bio": ["bio", "Bio", "About you"],
    "skills": ["skills", "Skills"],
    "interests": ["interests", "Interests", "Industries of interest"],
    "role": ["role", "Role", "What are you looking for?"],
    "avatar_url": ["avatar_url", "Avatar URL", "avatar"],
    "linkedin_url": ["linkedin_url", "linkedin", "LinkedIn URL"],
    "twitter_url": ["twitter_url", "twitter", "Twitter URL"],
    "website_url": ["website_url", "website", "Website"],
    "is_onboarded": ["is_onboarded", "onboarded", "Onboarded"],
    "created_at": ["created_at"],
    "updated_at": ["updated_at"],
}


def get_alias_column(df: pd.DataFrame, key: str) -> Optional[str]:
    for candidate in FIELD_ALIASES.get(key, []):
        if candidate in df.columns:
            return candidate
    return None


def resolve_aliases(df: pd.DataFrame) -> Dict[str, Optional[str]]:
    return {key: get_alias_column(df, key) for key in FIELD_ALIASES}


_BLANK_TOKENS = {"", "nan", "NaN", "None", "NULL"}


def _clean_cell(value: Any) -> Any:
    if value is pd.NA:
        return None
    if not isinstance(value, str):
        return value
    s = " ".join(value.split())
    return None if s in _BLANK_TOKENS else s


def clean_profiles_df(df: pd.DataFrame) -> pd.DataFrame:
    """Trim text cells and map blank-looking values to None, keeping the original headers."""

    out = df.copy()
    out.columns = [col.strip() if isinstance(col, str) else col for col in out.columns]
    for col in out.columns:
        if pd.api.types.is_object_dtype(out[col]) or pd.api.types.is_string_dtype(out[col]):
            out[col] = pd.Series([_clean_cell(v) for v in out[col]], index=out.index, dtype=object)
    return out


def standardize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Rename aliased headers to the canonical Profile field names.

    Raises:
        KeyError: If no identifier column can be found.
    """
    alias_map = resolve_aliases(df)
    if alias_map.get("id") is None:
        raise KeyError(f"No profile id column found; expected one of {FIELD_ALIASES['id']}")
    renames = {col: key for key, col in alias_map.items() if col is not None and col != key}
    out = df.rename(columns=renames)
    return out[[key for key in FIELD_ALIASES if key in out.columns]]


def profiles_from_df(df: pd.DataFrame) -> List[Profile]:
    """Validate each row into a Profile.

    Raises:
        ValueError: If a row cannot be validated; the message names the row.
    """
    std = standardize_columns(clean_profiles_df(df))
    profiles: List[Profile] = []
    for idx, record in zip(std.index, std.to_dict(orient="records")):
        try:
            profiles.append(Profile.model_validate(record))
        except ValidationError as e:
            raise ValueError(f"Invalid profile at row {idx}: {e}") from e
    return profiles


def profiles_to_df(profiles: List[Profile]) -> pd.DataFrame:
    """Inverse of profiles_from_df; label lists are written as JSON strings."""
    rows = [p.model_dump(mode="json") for p in profiles]
    df = pd.DataFrame(rows, columns=list(Profile.model_fields))
    for col in ["skills", "interests"]:
        df[col] = df[col].map(lambda v: json.dumps(v, ensure_ascii=False) if isinstance(v, list) else None)
    return df


def load_profiles(path: Path) -> List[Profile]:
    """Read profiles from a .csv or .json export."""
    if not path.exists():
        raise FileNotFoundError(f"Profiles file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path, dtype={"id": str})
    elif suffix == ".json":
        df = pd.read_json(path, orient="records", dtype={"id": str})
    else:
        raise ValueError(f"Unsupported profiles file type: {path.suffix}")
    return profiles_from_df(df)
