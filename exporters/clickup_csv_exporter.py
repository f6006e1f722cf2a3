"""
Read rows from a ClickUp CSV export
"""
import csv
from typing import Dict, List

from utils import logger

# Columns written by ClickUp's "Export tasks to CSV"
CLICKUP_CSV_COLUMNS = (
    'Task ID',
    'Task Name',
    'Task Content',
    'Status',
    'Date Created',
    'Date Created Text',
    'Due Date',
    'Due Date Text',
    'Start Date',
    'Start Date Text',
    'Parent ID',
    'Attachments',
    'Assignees',
    'Tags',
    'Priority',
    'List Name',
    'Folder Name',
    'Space Name',
    'Time Estimated',
    'Time Estimated Text',
    'Checklists',
    'Comments',
    'Assigned Comments',
    'Time Spent',
    'Time Spent Text',
)


def read_clickup_csv(csv_path: str) -> List[Dict[str, str]]:
    """
    Read a ClickUp CSV export into a list of rows

    Args:
        csv_path: Path to the exported CSV file

    Returns:
        One dict per data row, column name -> text. Known ClickUp columns
        missing from the header and cells missing from short rows are ''.

    Raises:
        OSError: the file can't be opened
        csv.Error: the CSV structure itself is broken
    """
    logger.info(f"Reading ClickUp export: {csv_path}")
    rows = []
    with open(csv_path, 'r', encoding='utf-8-sig', newline='') as f:
        reader = csv.DictReader(f, restval='')
        for raw in reader:
            row = {column: '' for column in CLICKUP_CSV_COLUMNS}
            for column, value in raw.items():
                # Extra cells beyond the header land under a None key
                if column is None:
                    continue
                row[column] = value if value is not None else ''
            rows.append(row)

    logger.info(f"✓ Read {len(rows)} rows from {csv_path}")
    return rows
