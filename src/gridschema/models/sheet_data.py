"""Data models for representing sheet content."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..utils.cell_address import decode_address, encode_address
from .table import MergeRegion


class CellData(BaseModel):
    """Represents a single cell value at a fixed grid position."""

    model_config = ConfigDict(strict=True)

    value: str | int | float | bool | datetime | Decimal | None = Field(
        None, description="Cell value"
    )
    data_type: str = Field("string", description="Detected data type")

    # Position information
    row: int = Field(0, ge=0, description="Row index (0-based)")
    column: int = Field(0, ge=0, description="Column index (0-based)")

    @property
    def is_empty(self) -> bool:
        """Check if cell is effectively empty."""
        return self.value is None or (isinstance(self.value, str) and not self.value.strip())

    @property
    def text(self) -> str:
        """Display text of the value, empty for empty cells."""
        if self.is_empty:
            return ""
        return str(self.value).strip()

    @property
    def excel_address(self) -> str:
        """Get Excel-style address (e.g., 'A1')."""
        return encode_address(self.row, self.column)


class SheetData(BaseModel):
    """A sparse grid of cells plus the sheet's merge regions.

    The sheet is read-only input to header building; nothing in the
    extraction or generation tools mutates it.
    """

    model_config = ConfigDict(strict=True)

    name: str = Field(..., description="Sheet name")
    cells: dict[str, CellData] = Field(
        default_factory=dict, description="Cells indexed by Excel address (e.g., 'A1')"
    )
    merged_ranges: list[MergeRegion] = Field(
        default_factory=list, description="Merged cell regions in sheet order"
    )
    max_row: int = Field(0, ge=0, description="Maximum row index with data")
    max_column: int = Field(0, ge=0, description="Maximum column index with data")

    def get_cell(self, row: int, column: int) -> CellData | None:
        """Get cell data by row and column indices."""
        return self.cells.get(encode_address(row, column))

    def set_cell(self, row: int, column: int, cell_data: CellData) -> None:
        """Set cell data at specific position."""
        cell_data.row = row
        cell_data.column = column
        self.cells[encode_address(row, column)] = cell_data

        # Update max dimensions
        self.max_row = max(self.max_row, row)
        self.max_column = max(self.max_column, column)

    def set_value(self, address: str, value: Any) -> None:
        """Convenience setter taking an A1 address and a raw value."""
        row, column = decode_address(address)
        self.set_cell(row, column, CellData(value=value, data_type=_data_type_of(value)))

    def add_merge(self, excel_range: str) -> MergeRegion:
        """Register a merge region given as ``"A1:B1"``."""
        region = MergeRegion.from_excel_range(excel_range)
        self.merged_ranges.append(region)
        return region


class FileData(BaseModel):
    """Represents a loaded workbook with all its sheets."""

    model_config = ConfigDict(strict=True)

    sheets: list[SheetData] = Field(default_factory=list, description="All sheets in file")
    metadata: dict[str, Any] = Field(default_factory=dict, description="File metadata")
    file_format: str = Field("xlsx", description="File format")

    def get_sheet_by_name(self, name: str) -> SheetData | None:
        """Get sheet by name."""
        for sheet in self.sheets:
            if sheet.name == name:
                return sheet
        return None

    def get_sheet_names(self) -> list[str]:
        """Get list of all sheet names."""
        return [sheet.name for sheet in self.sheets]

    @property
    def sheet_count(self) -> int:
        """Number of sheets in file."""
        return len(self.sheets)


def _data_type_of(value: Any) -> str:
    if value is None:
        return "empty"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float | Decimal):
        return "number"
    if isinstance(value, datetime):
        return "date"
    return "string"
