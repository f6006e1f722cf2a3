"""
Readers for project-management export files
"""
from .clickup_csv_exporter import CLICKUP_CSV_COLUMNS, read_clickup_csv

__all__ = ['CLICKUP_CSV_COLUMNS', 'read_clickup_csv']
