"""
Mapping functions for transforming ClickUp fields to target issue fields
"""
import math
from typing import Optional

from config import PRIORITY_MAPPING, ESTIMATE_DIVISOR, MAX_ESTIMATE
from models import IssuePriority
from transforms.field_extractors import parse_leading_int


def map_priority(priority: Optional[str]) -> IssuePriority:
    """
    Map a ClickUp priority code to a target priority.

    Only the exact strings "1" to "4" are recognised; anything else,
    including empty values and "01" or " 1", means no priority.
    """
    if not priority or priority not in PRIORITY_MAPPING:
        return IssuePriority.NO_PRIORITY
    return IssuePriority(PRIORITY_MAPPING[priority])


def map_estimate(time_estimated: Optional[str]) -> Optional[int]:
    """
    Convert a ClickUp "Time Estimated" value to the 0-64 estimate scale.

    The leading integer is divided by ESTIMATE_DIVISOR, rounded up and
    capped at MAX_ESTIMATE. Returns None for empty or non-numeric input.
    """
    if not isinstance(time_estimated, str) or time_estimated == '':
        return None
    value = parse_leading_int(time_estimated)
    if value is None:
        return None
    estimate = math.ceil(value / ESTIMATE_DIVISOR)
    return max(0, min(estimate, MAX_ESTIMATE))


def map_description(content: Optional[str]) -> str:
    """ClickUp writes an empty rich-text field as the literal word "null" """
    if content is None or content == 'null':
        return ''
    return content
