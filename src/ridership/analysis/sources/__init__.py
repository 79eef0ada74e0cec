"""Sources for the raw passenger data JSON."""

from ridership.analysis.sources.base import RecordSource
from ridership.analysis.sources.file import FileSource
from ridership.analysis.sources.open_data import OpenDataSource

__all__ = ["FileSource", "OpenDataSource", "RecordSource"]
