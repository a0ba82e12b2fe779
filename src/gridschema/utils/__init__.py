"""Utility functions for GridSchema."""

from .cell_address import column_to_index, decode_address, encode_address, index_to_column
from .logging_context import get_contextual_logger

__all__ = [
    "column_to_index",
    "index_to_column",
    "decode_address",
    "encode_address",
    "get_contextual_logger",
]
