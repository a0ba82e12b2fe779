"""Data models for GridSchema."""

from .column import ColumnNode, ColumnTitle, HeaderTree, LiteralTitle, LocalizationRef
from .result import BuildResult, SessionResult, TableSchema
from .sheet_data import CellData, FileData, SheetData
from .table import MergeRegion, TableConfig, TableRange

__all__ = [
    "CellData",
    "SheetData",
    "FileData",
    "TableRange",
    "MergeRegion",
    "TableConfig",
    "ColumnTitle",
    "LiteralTitle",
    "LocalizationRef",
    "ColumnNode",
    "HeaderTree",
    "TableSchema",
    "BuildResult",
    "SessionResult",
]
