"""CSV report utilities."""

from riskas.csv.exporter import CsvExporter, CSV_COLUMNS

__all__ = [
    "CsvExporter",
    "CSV_COLUMNS",
]
