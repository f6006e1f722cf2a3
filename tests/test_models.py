from datetime import datetime, timezone

from models import ImportResult, ImportSummary, Issue, IssuePriority, Label, User


def test_issue_to_dict_uses_loader_field_names():
    issue = Issue(
        title='Write changelog',
        description='For 2.0',
        priority=IssuePriority.NORMAL,
        status='open',
        assignee_id='Alice',
        created_at=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        estimate=3,
        labels=['docs'],
    )
    data = issue.to_dict()
    assert data == {
        'title': 'Write changelog',
        'description': 'For 2.0',
        'priority': 3,
        'status': 'open',
        'assigneeId': 'Alice',
        'createdAt': '2024-01-02T03:04:05+00:00',
        'startedAt': None,
        'estimate': 3,
        'labels': ['docs'],
    }


def test_import_result_to_dict():
    result = ImportResult(
        issues=[Issue(title='A')],
        labels={'bug': Label(name='bug')},
        users={'Alice': User(name='Alice')},
    )
    data = result.to_dict()
    assert data['issues'][0]['title'] == 'A'
    assert data['issues'][0]['priority'] == 0
    assert data['labels'] == {'bug': {'name': 'bug'}}
    assert data['users'] == {'Alice': {'name': 'Alice'}}
    assert data['statuses'] == {}


def test_import_summary_counts():
    summary = ImportSummary()
    result = ImportResult(issues=[Issue(title='A'), Issue(title='B')], labels={'x': Label(name='x')})
    summary.add_success(3, result)
    summary.add_failure('could not read missing.csv')

    assert summary.total_files == 2
    assert summary.succeeded == 1
    assert summary.failed == 1
    assert summary.issues_created == 2
    assert summary.labels_created == 1
    assert summary.rows_skipped == 1
    assert summary.errors == ['could not read missing.csv']
    summary.print_summary()
