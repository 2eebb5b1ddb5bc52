from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    match_limit: int = 10
    match_cache_ttl_seconds: int = 300
    log_level: str = "INFO"
    profiles_path: Path = Path("data/profiles.csv")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables (after loading `.env` when reading os.environ)."""
        if env is None:
            load_dotenv()
            env = os.environ
        return cls(
            match_limit=_int_env(env, "MATCH_LIMIT", cls.match_limit),
            match_cache_ttl_seconds=_int_env(env, "MATCH_CACHE_TTL_SECONDS", cls.match_cache_ttl_seconds),
            log_level=(env.get("LOG_LEVEL") or cls.log_level).upper(),
            profiles_path=Path(env.get("PROFILES_PATH") or cls.profiles_path),
        )
