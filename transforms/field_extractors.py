"""
Field extraction utilities for ClickUp CSV rows

ClickUp exports every column as text. Some columns carry JSON arrays
(Assignees, Tags) and some carry numbers (dates, time estimates). The
helpers here decode those values and return None when a value can't be
used, so callers pick their own default.
"""
import json
import re
from datetime import datetime, timezone
from typing import Dict, List, Optional

_LEADING_INT_RE = re.compile(r'^\s*([+-]?[0-9]+)')


def get_field(row: Dict, column: str) -> str:
    """Return a column value as text, treating missing or None as empty"""
    value = row.get(column)
    if value is None:
        return ''
    return str(value)


def parse_json_string_list(value: Optional[str]) -> Optional[List[str]]:
    """
    Decode a JSON array of strings embedded in a text field.

    Returns None if the value is not valid JSON, is not an array, or
    contains anything other than strings.
    """
    if not value:
        return None
    try:
        decoded = json.loads(value)
    except ValueError:
        return None
    if not isinstance(decoded, list):
        return None
    if not all(isinstance(item, str) for item in decoded):
        return None
    return decoded


def parse_leading_int(value: Optional[str]) -> Optional[int]:
    """
    Parse the integer at the start of a string, ignoring anything after it.

    "225000" -> 225000, "12h" -> 12, " 7" -> 7, "abc" -> None, "" -> None
    """
    if not value:
        return None
    match = _LEADING_INT_RE.match(value)
    if not match:
        return None
    return int(match.group(1))


def parse_millis_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Convert a millisecond Unix timestamp string into a UTC datetime"""
    millis = parse_leading_int(value)
    if millis is None:
        return None
    try:
        return datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        # Outside the range datetime can represent
        return None


def extract_assignees(row: Dict) -> Optional[List[str]]:
    """Assignee names from the Assignees column, or None if it can't be decoded"""
    return parse_json_string_list(get_field(row, 'Assignees'))


def extract_primary_assignee(row: Dict) -> str:
    """First listed assignee, or an empty string"""
    assignees = extract_assignees(row)
    if not assignees:
        return ''
    return assignees[0]


def extract_tags(row: Dict) -> List[str]:
    """Tag names from the Tags column; an undecodable value means no tags"""
    tags = parse_json_string_list(get_field(row, 'Tags'))
    if tags is None:
        return []
    return tags
