"""
Deduplication of users and labels discovered while importing rows
"""
from typing import Dict, Iterable

from models import Label, User
from transforms.field_extractors import extract_assignees


def collect_users(rows: Iterable[Dict]) -> Dict[str, User]:
    """
    Build one User per distinct assignee name across all rows.

    Every row counts, including rows that are later skipped for having no
    task name. Rows whose Assignees value can't be decoded contribute nothing.
    """
    users: Dict[str, User] = {}
    for row in rows:
        assignees = extract_assignees(row)
        if assignees is None:
            continue
        for name in assignees:
            if name not in users:
                users[name] = User(name=name)
    return users


def upsert_label(labels: Dict[str, Label], name: str) -> bool:
    """
    Insert a label for a tag name unless one exists already.

    Empty names are ignored. Returns True if a new label was added.
    """
    if not name or name in labels:
        return False
    labels[name] = Label(name=name)
    return True
