"""Extraction tools for turning sheet headers into column trees."""

from .cell_data_extractor import extract_table_rows
from .column_identity import assign_identity, identity_for_path, is_descendant_identity
from .header_parser import build_header, parse_header
from .merge_cell_handler import MergeIndex, ProcessedMerges
from .range_resolver import resolve_range

__all__ = [
    "resolve_range",
    "MergeIndex",
    "ProcessedMerges",
    "assign_identity",
    "identity_for_path",
    "is_descendant_identity",
    "build_header",
    "parse_header",
    "extract_table_rows",
]
