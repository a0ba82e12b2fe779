"""Excel workbook reader built on openpyxl."""

import zipfile
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from ..core.exceptions import ReaderError
from ..models.sheet_data import CellData, FileData, SheetData
from ..models.table import MergeRegion
from ..utils.logging_context import FileContext, get_contextual_logger

logger = get_contextual_logger(__name__)

_NATIVE_TYPES = (str, bool, int, float, datetime, Decimal)


class ExcelReader:
    """Reads cell values and merge regions from an ``.xlsx`` workbook."""

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)

    def read(self) -> FileData:
        """
        Load every worksheet into a FileData.

        Formulas are read as their cached values.

        Raises:
            ReaderError: If the file is missing or not a readable workbook
        """
        with FileContext(str(self.file_path)):
            if not self.file_path.exists():
                raise ReaderError(f"File not found: {self.file_path}")

            try:
                workbook = load_workbook(self.file_path, data_only=True)
            except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
                raise ReaderError(f"Could not read workbook {self.file_path}: {e}") from e

            try:
                sheets = [self._read_sheet(ws) for ws in workbook.worksheets]
            finally:
                workbook.close()

            logger.info(f"Read {len(sheets)} sheets")
            return FileData(
                sheets=sheets,
                metadata={"file_name": self.file_path.name},
                file_format=self.file_path.suffix.lstrip(".").lower() or "xlsx",
            )

    def _read_sheet(self, worksheet: Worksheet) -> SheetData:
        sheet = SheetData(name=worksheet.title)

        for row in worksheet.iter_rows():
            for cell in row:
                if cell.value is None:
                    continue
                value = _to_cell_value(cell.value)
                sheet.set_cell(
                    cell.row - 1,
                    cell.column - 1,
                    CellData(value=value, data_type=cell.data_type or "string"),
                )

        for merged in worksheet.merged_cells.ranges:
            sheet.merged_ranges.append(
                MergeRegion(
                    start_row=merged.min_row - 1,
                    start_col=merged.min_col - 1,
                    end_row=merged.max_row - 1,
                    end_col=merged.max_col - 1,
                )
            )

        logger.debug(
            f"Sheet {worksheet.title!r}: {len(sheet.cells)} cells, "
            f"{len(sheet.merged_ranges)} merged ranges"
        )
        return sheet


def _to_cell_value(value: Any) -> Any:
    if isinstance(value, _NATIVE_TYPES):
        return value
    return str(value)


def read_workbook(file_path: str | Path) -> FileData:
    """Read a workbook file into a FileData."""
    return ExcelReader(file_path).read()
