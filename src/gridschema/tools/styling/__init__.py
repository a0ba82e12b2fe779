"""Styling tools for column style classes."""

from .column_styler import apply_column_style, assign_default_colors

__all__ = ["apply_column_style", "assign_default_colors"]
