"""
Main data transformation logic for converting ClickUp CSV rows into an
ImportResult

Column names follow the ClickUp CSV export:
- Task Name, Task Content, Status, Priority
- Assignees, Tags (JSON arrays stored as text)
- Date Created, Start Date (millisecond Unix timestamps)
- Time Estimated (milliseconds)

Malformed values in a single field never fail the import; they fall back
to an empty or absent value. Rows without a task name are skipped.
"""
from typing import Dict, Iterable

from models import ImportResult, Issue
from utils import logger
from transforms.field_extractors import (
    get_field,
    extract_tags,
    extract_primary_assignee,
    parse_millis_timestamp
)
from transforms.mappers import (
    map_priority,
    map_estimate,
    map_description
)
from transforms.deduplication import (
    collect_users,
    upsert_label
)


def transform_row(row: Dict) -> Issue:
    """Map a single row with a task name to an Issue"""
    created_at = get_field(row, 'Date Created')
    started_at = get_field(row, 'Start Date')

    return Issue(
        title=get_field(row, 'Task Name'),
        description=map_description(row.get('Task Content')),
        priority=map_priority(row.get('Priority')),
        status=get_field(row, 'Status'),
        assignee_id=extract_primary_assignee(row),
        created_at=parse_millis_timestamp(created_at) if created_at else None,
        started_at=parse_millis_timestamp(started_at) if started_at else None,
        estimate=map_estimate(row.get('Time Estimated')),
        labels=extract_tags(row),
    )


def transform_rows(rows: Iterable[Dict]) -> ImportResult:
    """
    Transform ClickUp CSV rows into issues, labels, users and statuses

    Args:
        rows: Rows as produced by csv.DictReader, column name -> text

    Returns:
        ImportResult with issues in row order and name-keyed labels/users.
        statuses is always empty for this importer.
    """
    rows = list(rows)
    logger.info(f"Transforming {len(rows)} ClickUp rows...")

    result = ImportResult()

    # Users come from every row, before any issue is mapped
    result.users = collect_users(rows)
    logger.info(f"  Found {len(result.users)} unique assignees")

    for row in rows:
        if not get_field(row, 'Task Name'):
            continue

        issue = transform_row(row)
        result.issues.append(issue)

        for tag in issue.labels:
            upsert_label(result.labels, tag)

    logger.info(f"✓ Transformation completed: {len(result.issues)} issues, "
                f"{len(result.labels)} labels, {len(result.users)} users")
    return result
