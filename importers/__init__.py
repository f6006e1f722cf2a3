"""
Importers that turn a source tool's export into an ImportResult
"""
from .base import Importer
from .clickup_csv_importer import ClickUpCsvImporter

__all__ = ['Importer', 'ClickUpCsvImporter']
