from cofounder_match.connections import categorize_connections, connection_status
from cofounder_match.data_models import Connection


CONNECTIONS = [
    Connection(id="1", requester_id="me", receiver_id="ada", status="accepted"),
    Connection(id="2", requester_id="kofi", receiver_id="me", status="pending"),
    Connection(id="3", requester_id="me", receiver_id="thabo", status="pending"),
    Connection(id="4", requester_id="me", receiver_id="abena", status="rejected"),
    Connection(id="5", requester_id="kofi", receiver_id="ada", status="accepted"),
]


def test_categorize_splits_by_direction_and_state():
    buckets = categorize_connections(CONNECTIONS, "me")
    assert [c.id for c in buckets.accepted] == ["1"]
    assert [c.id for c in buckets.pending] == ["2"]
    assert [c.id for c in buckets.sent] == ["3"]


def test_connection_status():
    buckets = categorize_connections(CONNECTIONS, "me")
    assert connection_status(buckets, "me", "ada") == "accepted"
    assert connection_status(buckets, "me", "kofi") == "pending"
    assert connection_status(buckets, "me", "thabo") == "pending"
    assert connection_status(buckets, "me", "abena") == "none"
    assert connection_status(buckets, "me", "stranger") == "none"


def test_no_connections():
    buckets = categorize_connections([], "me")
    assert buckets.accepted == buckets.pending == buckets.sent == []
