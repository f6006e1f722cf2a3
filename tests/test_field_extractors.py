from datetime import datetime, timezone

from transforms.field_extractors import (
    get_field,
    parse_json_string_list,
    parse_leading_int,
    parse_millis_timestamp,
    extract_assignees,
    extract_primary_assignee,
    extract_tags,
)


def test_get_field_treats_missing_and_none_as_empty():
    assert get_field({}, 'Task Name') == ''
    assert get_field({'Task Name': None}, 'Task Name') == ''
    assert get_field({'Task Name': 'Write docs'}, 'Task Name') == 'Write docs'


def test_parse_json_string_list_valid_array():
    assert parse_json_string_list('["Alice", "Bob"]') == ['Alice', 'Bob']
    assert parse_json_string_list('[]') == []


def test_parse_json_string_list_rejects_bad_input():
    assert parse_json_string_list('') is None
    assert parse_json_string_list(None) is None
    assert parse_json_string_list('[Alice, Bob]') is None
    assert parse_json_string_list('"Alice"') is None
    assert parse_json_string_list('{"name": "Alice"}') is None
    assert parse_json_string_list('[1, 2]') is None


def test_parse_leading_int():
    assert parse_leading_int('225000') == 225000
    assert parse_leading_int('12h') == 12
    assert parse_leading_int('  7 days') == 7
    assert parse_leading_int('-30') == -30
    assert parse_leading_int('abc') is None
    assert parse_leading_int('h12') is None
    assert parse_leading_int('') is None
    assert parse_leading_int(None) is None


def test_parse_millis_timestamp():
    assert parse_millis_timestamp('1700000000000') == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    assert parse_millis_timestamp('0') == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_parse_millis_timestamp_unusable_values():
    assert parse_millis_timestamp('') is None
    assert parse_millis_timestamp('not a date') is None
    assert parse_millis_timestamp('9' * 30) is None


def test_extract_assignees_and_primary():
    row = {'Assignees': '["Alice", "Bob"]'}
    assert extract_assignees(row) == ['Alice', 'Bob']
    assert extract_primary_assignee(row) == 'Alice'


def test_extract_primary_assignee_defaults_to_empty():
    assert extract_primary_assignee({'Assignees': '[]'}) == ''
    assert extract_primary_assignee({'Assignees': 'Alice'}) == ''
    assert extract_primary_assignee({'Assignees': '[""]'}) == ''
    assert extract_primary_assignee({}) == ''


def test_extract_tags():
    assert extract_tags({'Tags': '["bug", "ui"]'}) == ['bug', 'ui']
    assert extract_tags({'Tags': '[bug]'}) == []
    assert extract_tags({'Tags': ''}) == []
    assert extract_tags({}) == []


def test_parse_leading_int_only_accepts_ascii_digits():
    assert parse_leading_int('١٢') is None
    assert parse_leading_int('１２') is None
    assert parse_leading_int('12١') == 12
