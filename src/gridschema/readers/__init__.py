"""Workbook readers."""

from ..core.exceptions import ReaderError
from .excel_reader import ExcelReader, read_workbook

__all__ = ["ExcelReader", "ReaderError", "read_workbook"]
