"""Centralized constants for GridSchema.

This module contains all constants used throughout the GridSchema codebase,
organized by category for easy access and maintenance.
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class AddressConstants:
    """Constants for A1-style cell addressing."""

    ALPHABET_SIZE: Final[int] = 26
    FIRST_LETTER: Final[str] = "A"
    ADDRESS_PATTERN: Final[str] = r"([A-Z]+)(\d+)"


@dataclass(frozen=True)
class ColumnConstants:
    """Constants for column node construction."""

    DEFAULT_ALIGN: Final[str] = "center"
    ROOT_IDENTITY_PREFIX: Final[str] = "col_"
    CHILD_IDENTITY_SEPARATOR: Final[str] = "_child_"


@dataclass(frozen=True)
class CodeGenerationConstants:
    """Constants for generated column source code."""

    INDENT: Final[str] = "  "
    LOCALIZATION_FUNCTION: Final[str] = "t"
    RENDER_SIGNATURE: Final[str] = "(value, record, index) => value"
    COLUMNS_TYPE: Final[str] = "ColumnsType<any>"
    HOOK_NAME: Final[str] = "useColumns"


# Default style classes, cycled by column position
DEFAULT_COLOR_ORDER: Final[tuple[str, ...]] = (
    "td_green",
    "td_green",
    "td_blue",
    "td_blue2",
    "td_default",
    "td_fiolet",
    "td_green2",
    "td_yellow",
    "td_brown",
    "td_red",
)


# Create singleton instances for easy access
ADDRESSING = AddressConstants()
COLUMNS = ColumnConstants()
CODE_GENERATION = CodeGenerationConstants()
