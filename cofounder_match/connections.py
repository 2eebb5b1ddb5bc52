from __future__ import annotations

from typing import Iterable, Literal

from .data_models import Connection, ConnectionBuckets


RelationStatus = Literal["accepted", "pending", "none"]


def categorize_connections(connections: Iterable[Connection], user_id: str) -> ConnectionBuckets:
    """Split a user's connections into incoming, outgoing and accepted.

    Rejected requests are dropped. Connections not involving `user_id` are ignored.
    """
    buckets = ConnectionBuckets()
    for c in connections:
        if user_id not in (c.requester_id, c.receiver_id):
            continue
        if c.status == "accepted":
            buckets.accepted.append(c)
        elif c.status == "pending" and c.receiver_id == user_id:
            buckets.pending.append(c)
        elif c.status == "pending" and c.requester_id == user_id:
            buckets.sent.append(c)
    return buckets


def _other_party(c: Connection, user_id: str) -> str:
    return c.receiver_id if c.requester_id == user_id else c.requester_id


def connection_status(buckets: ConnectionBuckets, user_id: str, target_id: str) -> RelationStatus:
    """How `user_id` currently relates to `target_id`; accepted wins over pending."""
    if any(_other_party(c, user_id) == target_id for c in buckets.accepted):
        return "accepted"
    if any(_other_party(c, user_id) == target_id for c in [*buckets.pending, *buckets.sent]):
        return "pending"
    return "none"
