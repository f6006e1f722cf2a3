"""
Common interface shared by every source importer
"""
from abc import ABC, abstractmethod

from models import ImportResult


class Importer(ABC):
    """
    An importer turns one source tool's export into an ImportResult.

    name and default_team_name are display metadata for the surrounding
    tool and carry no behaviour.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def default_team_name(self) -> str:
        ...

    @abstractmethod
    def import_data(self) -> ImportResult:
        ...
