from models import Label, User
from transforms.deduplication import collect_users, upsert_label


def test_collect_users_skips_undecodable_rows():
    rows = [
        {'Assignees': '["Alice"]'},
        {'Assignees': '[Bob]'},
        {'Assignees': ''},
        {},
        {'Assignees': '["Alice", "Carol"]'},
    ]
    assert collect_users(rows) == {'Alice': User(name='Alice'), 'Carol': User(name='Carol')}


def test_collect_users_is_case_sensitive():
    users = collect_users([{'Assignees': '["alice", "Alice"]'}])
    assert set(users) == {'alice', 'Alice'}


def test_upsert_label_is_idempotent():
    labels = {}
    assert upsert_label(labels, 'bug') is True
    assert upsert_label(labels, 'bug') is False
    assert labels == {'bug': Label(name='bug')}


def test_upsert_label_ignores_empty_names():
    labels = {}
    assert upsert_label(labels, '') is False
    assert labels == {}
