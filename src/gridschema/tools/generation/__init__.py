"""Generation tools for emitting column-definition source code."""

from .code_generator import generate_columns_code, render_columns_module

__all__ = ["generate_columns_code", "render_columns_module"]
