"""
Data models for the normalized import result and import tracking
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Dict, List, Optional
from utils import logger


class IssuePriority(IntEnum):
    """Target priority levels; 0 means no priority set"""
    NO_PRIORITY = 0
    URGENT = 1
    HIGH = 2
    NORMAL = 3
    LOW = 4


def _format_datetime(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


@dataclass
class Issue:
    """A single issue ready to be created in the target tracker"""
    title: str
    description: str = ''
    priority: IssuePriority = IssuePriority.NO_PRIORITY
    status: str = ''
    assignee_id: str = ''
    created_at: Optional[datetime] = None
    started_at: Optional[datetime] = None
    estimate: Optional[int] = None
    labels: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Serialize using the field names the downstream loader expects"""
        return {
            'title': self.title,
            'description': self.description,
            'priority': int(self.priority),
            'status': self.status,
            'assigneeId': self.assignee_id,
            'createdAt': _format_datetime(self.created_at),
            'startedAt': _format_datetime(self.started_at),
            'estimate': self.estimate,
            'labels': list(self.labels),
        }


@dataclass
class Label:
    name: str


@dataclass
class User:
    name: str


@dataclass
class Status:
    name: str


@dataclass
class ImportResult:
    """
    Aggregate output of one import run.

    labels, users and statuses are keyed by name. statuses is part of the
    shared importer contract and stays empty for ClickUp.
    """
    issues: List[Issue] = field(default_factory=list)
    labels: Dict[str, Label] = field(default_factory=dict)
    users: Dict[str, User] = field(default_factory=dict)
    statuses: Dict[str, Status] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            'issues': [issue.to_dict() for issue in self.issues],
            'labels': {name: {'name': label.name} for name, label in self.labels.items()},
            'users': {name: {'name': user.name} for name, user in self.users.items()},
            'statuses': {name: {'name': status.name} for name, status in self.statuses.items()},
        }


@dataclass
class ImportSummary:
    """Track import statistics across one or more export files"""
    total_files: int = 0
    succeeded: int = 0
    failed: int = 0
    rows_read: int = 0
    issues_created: int = 0
    labels_created: int = 0
    users_created: int = 0
    errors: List[str] = None

    def __post_init__(self):
        if self.errors is None:
            self.errors = []

    def add_success(self, rows_read: int, result: ImportResult):
        self.total_files += 1
        self.succeeded += 1
        self.rows_read += rows_read
        self.issues_created += len(result.issues)
        self.labels_created += len(result.labels)
        self.users_created += len(result.users)

    def add_failure(self, error_msg: str):
        self.total_files += 1
        self.failed += 1
        self.errors.append(error_msg)

    @property
    def rows_skipped(self) -> int:
        return self.rows_read - self.issues_created

    def print_summary(self):
        """Print import summary report"""
        logger.info("\n" + "="*60)
        logger.info("IMPORT SUMMARY")
        logger.info("="*60)
        logger.info(f"Files processed: {self.total_files}")
        logger.info(f"  Succeeded: {self.succeeded}")
        logger.info(f"  Failed: {self.failed}")
        logger.info(f"Rows read: {self.rows_read}")
        logger.info(f"Issues created: {self.issues_created}")
        logger.info(f"Rows without a task name: {self.rows_skipped}")
        logger.info(f"Labels: {self.labels_created}")
        logger.info(f"Users: {self.users_created}")
        if self.errors:
            logger.info(f"\nErrors ({len(self.errors)}):")
            for i, error in enumerate(self.errors, 1):
                logger.info(f"  {i}. {error}")
        logger.info("="*60 + "\n")
