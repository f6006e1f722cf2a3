"""
Import issues from a ClickUp CSV export
"""
from config import IMPORTER_NAME, DEFAULT_TEAM_NAME
from exporters import read_clickup_csv
from importers.base import Importer
from models import ImportResult
from transforms import transform_rows


class ClickUpCsvImporter(Importer):
    """
    Import issues from ClickUp CSV export.

    Args:
        file_path: path to the exported CSV file
    """

    def __init__(self, file_path: str):
        self.file_path = file_path
        self.rows_read = 0

    @property
    def name(self) -> str:
        return IMPORTER_NAME

    @property
    def default_team_name(self) -> str:
        return DEFAULT_TEAM_NAME

    def import_data(self) -> ImportResult:
        """
        Read the export and transform it.

        Errors reading the file propagate to the caller; no partial result
        is returned.
        """
        rows = read_clickup_csv(self.file_path)
        self.rows_read = len(rows)
        return transform_rows(rows)
