"""Spreadsheet import and export of business contact records."""

from .exporters import EXPORT_COLUMNS, businesses_to_dataframe, export_businesses
from .loaders import UnsupportedFileTypeError, load_businesses

__all__ = [
    "EXPORT_COLUMNS",
    "UnsupportedFileTypeError",
    "businesses_to_dataframe",
    "export_businesses",
    "load_businesses",
]
