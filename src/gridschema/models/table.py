"""Range-related models: address ranges, merge regions and table requests."""

from pydantic import BaseModel, ConfigDict, Field

from ..utils.cell_address import decode_address, encode_address


class CellBounds(BaseModel):
    """Inclusive rectangular bounds on a sheet, zero-indexed."""

    model_config = ConfigDict(strict=True, frozen=True)

    start_row: int = Field(..., ge=0, description="Starting row (0-indexed)")
    start_col: int = Field(..., ge=0, description="Starting column (0-indexed)")
    end_row: int = Field(..., ge=0, description="Ending row (inclusive)")
    end_col: int = Field(..., ge=0, description="Ending column (inclusive)")

    @property
    def excel_range(self) -> str:
        """Convert to Excel-style range (e.g., 'A1:D10')."""
        start = encode_address(self.start_row, self.start_col)
        end = encode_address(self.end_row, self.end_col)
        return f"{start}:{end}"

    @property
    def row_count(self) -> int:
        """Number of rows in the range."""
        return self.end_row - self.start_row + 1

    @property
    def col_count(self) -> int:
        """Number of columns in the range."""
        return self.end_col - self.start_col + 1

    def contains(self, row: int, col: int) -> bool:
        """Check whether ``(row, col)`` lies inside these bounds."""
        return self.start_row <= row <= self.end_row and self.start_col <= col <= self.end_col


class TableRange(CellBounds):
    """The requested header range, resolved from a start and end address."""


class MergeRegion(CellBounds):
    """A rectangular block of cells merged into one visual cell.

    Bounds are not re-validated here; a region whose end column precedes its
    start column fails a header traversal only when the scan reaches it.
    """

    @classmethod
    def from_excel_range(cls, excel_range: str) -> "MergeRegion":
        """Build a region from an ``"A1:B2"`` style reference."""
        start_cell, _, end_cell = excel_range.partition(":")
        start_row, start_col = decode_address(start_cell)
        end_row, end_col = decode_address(end_cell or start_cell)
        return cls(start_row=start_row, start_col=start_col, end_row=end_row, end_col=end_col)

    @property
    def signature(self) -> str:
        """Canonical key used to de-duplicate regions during a traversal."""
        return f"{self.start_row}-{self.start_col}-{self.end_row}-{self.end_col}"

    @property
    def col_span(self) -> int:
        return self.col_count

    @property
    def row_span(self) -> int:
        return self.row_count

    @property
    def spans_columns(self) -> bool:
        """True when the merge covers more than one column."""
        return self.end_col > self.start_col


class TableConfig(BaseModel):
    """One requested header range: a sheet name and two corner addresses."""

    model_config = ConfigDict(strict=True)

    sheet: str = Field(..., description="Sheet name")
    start_cell: str = Field(..., description="Top-left header address, e.g. 'A3'")
    end_cell: str = Field(..., description="Bottom-right header address, e.g. 'M5'")

    @property
    def label(self) -> str:
        """Human-readable reference such as ``Sheet1!A3:M5``."""
        return f"{self.sheet}!{self.start_cell}:{self.end_cell}"
