"""
Data transformation modules for converting ClickUp CSV rows to target issues
"""
from .field_extractors import (
    parse_json_string_list,
    parse_leading_int,
    parse_millis_timestamp,
    extract_assignees,
    extract_primary_assignee,
    extract_tags
)
from .mappers import (
    map_priority,
    map_estimate,
    map_description
)
from .deduplication import (
    collect_users,
    upsert_label
)
from .data_transformer import transform_row, transform_rows

__all__ = [
    'parse_json_string_list',
    'parse_leading_int',
    'parse_millis_timestamp',
    'extract_assignees',
    'extract_primary_assignee',
    'extract_tags',
    'map_priority',
    'map_estimate',
    'map_description',
    'collect_users',
    'upsert_label',
    'transform_row',
    'transform_rows'
]
