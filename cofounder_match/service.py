"""
Orchestration around the scorer: who is asking, where candidates come from,
and how long a ranked list stays fresh.

The persistence and identity services are external; they are represented here
by the `ProfileStore` protocol and a `ViewerProvider` callable so the same
service can run against the in-memory store in tests and scripts.
"""
from __future__ import annotations

import time
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Tuple

import pandas as pd

from .config import Settings
from .connections import categorize_connections
from .data_models import Connection, DashboardStats, Goal, MatchResult, Profile
from .ingest import profiles_from_df
from .logger import logger
from .recommender import rank_matches
from .scoring import profile_completeness


ViewerProvider = Callable[[], Optional[Profile]]


class ProfileStoreError(RuntimeError):
    """Raised by a ProfileStore when the backing service cannot answer."""


class ProfileStore(Protocol):
    def get_profile(self, profile_id: str) -> Optional[Profile]: ...

    def list_candidates(self, viewer_id: str) -> List[Profile]: ...

    def count_candidates(self, viewer_id: str) -> int: ...

    def count_active_goals(self, user_id: str) -> int: ...

    def list_connections(self, user_id: str) -> List[Connection]: ...


class InMemoryProfileStore:
    """ProfileStore over plain lists; candidate order follows insertion order."""

    def __init__(
        self,
        profiles: Iterable[Profile] = (),
        goals: Iterable[Goal] = (),
        connections: Iterable[Connection] = (),
    ) -> None:
        self.profiles: List[Profile] = list(profiles)
        self.goals: List[Goal] = list(goals)
        self.connections: List[Connection] = list(connections)

    @classmethod
    def from_df(cls, df: pd.DataFrame) -> "InMemoryProfileStore":
        return cls(profiles_from_df(df))

    def get_profile(self, profile_id: str) -> Optional[Profile]:
        return next((p for p in self.profiles if p.id == profile_id), None)

    def list_candidates(self, viewer_id: str) -> List[Profile]:
        return [p for p in self.profiles if p.id != viewer_id and p.is_onboarded]

    def count_candidates(self, viewer_id: str) -> int:
        return len(self.list_candidates(viewer_id))

    def count_active_goals(self, user_id: str) -> int:
        return sum(1 for g in self.goals if g.user_id == user_id and g.status != "completed")

    def list_connections(self, user_id: str) -> List[Connection]:
        return [c for c in self.connections if user_id in (c.requester_id, c.receiver_id)]


def fixed_viewer(store: ProfileStore, viewer_id: Optional[str]) -> ViewerProvider:
    """ViewerProvider that always resolves `viewer_id` through the store."""

    def _provider() -> Optional[Profile]:
        if not viewer_id:
            return None
        return store.get_profile(viewer_id)

    return _provider


class MatchService:
    """Ranked co-founder suggestions and dashboard numbers for the current viewer."""

    def __init__(
        self,
        store: ProfileStore,
        viewer_provider: ViewerProvider,
        settings: Optional[Settings] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store = store
        self.viewer_provider = viewer_provider
        self.settings = settings or Settings()
        self._clock = clock
        self._cache: Dict[Tuple[str, int], Tuple[float, List[MatchResult]]] = {}

    def invalidate(self) -> None:
        self._cache.clear()

    def _evict_stale(self, now: float) -> None:
        ttl = self.settings.match_cache_ttl_seconds
        for key in [k for k, (stamp, _) in self._cache.items() if now - stamp >= ttl]:
            del self._cache[key]

    def cofounder_matches(self, limit: Optional[int] = None) -> List[MatchResult]:
        viewer = self.viewer_provider()
        if viewer is None:
            return []
        limit = self.settings.match_limit if limit is None else limit
        key = (viewer.id, limit)
        now = self._clock()
        cached = self._cache.get(key)
        if cached is not None and now - cached[0] < self.settings.match_cache_ttl_seconds:
            logger.debug(f"Serving cached matches for {viewer.id} (limit={limit})")
            return [m.model_copy(deep=True) for m in cached[1]]

        try:
            candidates = self.store.list_candidates(viewer.id)
        except ProfileStoreError as e:
            logger.error(f"Error fetching candidate profiles: {e}")
            return []

        matches = rank_matches(viewer, candidates, limit=limit)
        logger.info(f"Ranked {len(candidates)} candidates for {viewer.id}; returning {len(matches)}")
        self._evict_stale(now)
        self._cache[key] = (now, matches)
        return [m.model_copy(deep=True) for m in matches]

    def dashboard_stats(self) -> Optional[DashboardStats]:
        viewer = self.viewer_provider()
        if viewer is None:
            return None
        try:
            potential = self.store.count_candidates(viewer.id)
            goals = self.store.count_active_goals(viewer.id)
            accepted = categorize_connections(self.store.list_connections(viewer.id), viewer.id).accepted
        except ProfileStoreError as e:
            logger.error(f"Error fetching dashboard counts: {e}")
            potential, goals, accepted = 0, 0, []
        return DashboardStats(
            potential_matches=potential,
            active_goals=goals,
            connections=len(accepted),
            profile_completeness=profile_completeness(viewer),
        )
