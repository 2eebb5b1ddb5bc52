from typing import List

import pandas as pd

from cofounder_match.config import Settings
from cofounder_match.data_models import Connection, Goal, Profile
from cofounder_match.service import (
    InMemoryProfileStore,
    MatchService,
    ProfileStoreError,
    fixed_viewer,
)


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class FailingStore(InMemoryProfileStore):
    def list_candidates(self, viewer_id: str) -> List[Profile]:
        raise ProfileStoreError("connection refused")

    def count_candidates(self, viewer_id: str) -> int:
        raise ProfileStoreError("connection refused")


def _store(viewer, full_candidate) -> InMemoryProfileStore:
    return InMemoryProfileStore(
        profiles=[
            viewer,
            full_candidate,
            Profile(id="weak", full_name="Weak Match", is_onboarded=True),
            Profile(id="new", full_name="Not Onboarded", skills=["Sales"], is_onboarded=False),
        ],
        goals=[
            Goal(id="g1", user_id="viewer", title="Validate idea"),
            Goal(id="g2", user_id="viewer", title="Find co-founder", status="in_progress"),
            Goal(id="g3", user_id="viewer", title="Register company", status="completed"),
            Goal(id="g4", user_id="someone", title="Other user's goal"),
        ],
        connections=[
            Connection(id="k1", requester_id="viewer", receiver_id="cand-full", status="accepted"),
            Connection(id="k2", requester_id="weak", receiver_id="viewer", status="pending"),
            Connection(id="k3", requester_id="viewer", receiver_id="x", status="rejected"),
        ],
    )


def test_store_excludes_viewer_and_not_onboarded(viewer, full_candidate):
    store = _store(viewer, full_candidate)
    assert [p.id for p in store.list_candidates("viewer")] == ["cand-full", "weak"]
    assert store.count_candidates("viewer") == 2
    assert store.count_active_goals("viewer") == 2


def test_store_from_df():
    df = pd.DataFrame([{"id": "1", "full_name": "Ada", "is_onboarded": True}])
    store = InMemoryProfileStore.from_df(df)
    assert store.get_profile("1").full_name == "Ada"


def test_matches_ranked_for_current_viewer(viewer, full_candidate):
    store = _store(viewer, full_candidate)
    service = MatchService(store, fixed_viewer(store, "viewer"))
    matches = service.cofounder_matches()
    assert [m.id for m in matches] == ["cand-full", "weak"]
    assert matches[0].match_score == 100


def test_no_viewer_means_no_matches(viewer, full_candidate):
    store = _store(viewer, full_candidate)
    service = MatchService(store, lambda: None)
    assert service.cofounder_matches() == []
    assert service.dashboard_stats() is None
    assert MatchService(store, fixed_viewer(store, None)).cofounder_matches() == []


def test_limit_defaults_to_settings(viewer, full_candidate):
    store = _store(viewer, full_candidate)
    service = MatchService(store, fixed_viewer(store, "viewer"), Settings(match_limit=1))
    assert [m.id for m in service.cofounder_matches()] == ["cand-full"]
    assert len(service.cofounder_matches(limit=5)) == 2


def test_results_are_cached_until_ttl_expires(viewer, full_candidate):
    store = _store(viewer, full_candidate)
    clock = FakeClock()
    service = MatchService(store, fixed_viewer(store, "viewer"), Settings(match_cache_ttl_seconds=300), clock=clock)
    first = service.cofounder_matches()
    store.profiles.append(Profile(id="late", full_name="Late Joiner", is_onboarded=True))

    clock.now += 299
    assert [m.id for m in service.cofounder_matches()] == [m.id for m in first]

    clock.now += 1
    assert "late" in [m.id for m in service.cofounder_matches()]


def test_invalidate_drops_cache(viewer, full_candidate):
    store = _store(viewer, full_candidate)
    service = MatchService(store, fixed_viewer(store, "viewer"), clock=FakeClock())
    service.cofounder_matches()
    store.profiles.append(Profile(id="late", is_onboarded=True))
    service.invalidate()
    assert "late" in [m.id for m in service.cofounder_matches()]


def test_cached_list_is_a_copy(viewer, full_candidate):
    store = _store(viewer, full_candidate)
    service = MatchService(store, fixed_viewer(store, "viewer"), clock=FakeClock())
    service.cofounder_matches().clear()
    assert len(service.cofounder_matches()) == 2


def test_store_errors_degrade_to_empty(viewer, full_candidate):
    store = FailingStore(profiles=[viewer, full_candidate])
    service = MatchService(store, fixed_viewer(store, "viewer"))
    assert service.cofounder_matches() == []
    stats = service.dashboard_stats()
    assert stats.potential_matches == 0
    assert stats.profile_completeness == 63


def test_dashboard_stats(viewer, full_candidate):
    store = _store(viewer, full_candidate)
    stats = MatchService(store, fixed_viewer(store, "viewer")).dashboard_stats()
    assert stats.potential_matches == 2
    assert stats.active_goals == 2
    assert stats.connections == 1
    # name, university, skills, interests, role, no bio/link/avatar
    assert stats.profile_completeness == 63


def test_mutating_returned_matches_leaves_cache_intact(viewer, full_candidate):
    store = _store(viewer, full_candidate)
    service = MatchService(store, fixed_viewer(store, "viewer"), clock=FakeClock())
    first = service.cofounder_matches()
    first[0].match_score = 0
    first[0].shared_interests.append("Gaming")

    again = service.cofounder_matches()
    assert again[0].match_score == 100
    assert again[0].shared_interests == ["FinTech"]


def test_stale_entries_are_evicted_on_insert(viewer, full_candidate):
    store = _store(viewer, full_candidate)
    clock = FakeClock()
    service = MatchService(store, fixed_viewer(store, "viewer"), Settings(match_cache_ttl_seconds=300), clock=clock)
    service.cofounder_matches(limit=1)
    service.cofounder_matches(limit=2)
    assert len(service._cache) == 2

    clock.now += 300
    service.cofounder_matches(limit=3)
    assert list(service._cache) == [("viewer", 3)]
