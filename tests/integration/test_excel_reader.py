"""Integration tests for reading workbooks from disk."""

import pytest

from gridschema.core.exceptions import ReaderError
from gridschema.models.table import MergeRegion
from gridschema.readers import ExcelReader, read_workbook


class TestExcelReader:
    """Test ExcelReader against files written by openpyxl."""

    def test_reads_sheets_in_order(self, report_workbook_path):
        file_data = ExcelReader(report_workbook_path).read()

        assert file_data.get_sheet_names() == ["Contacts", "Report"]
        assert file_data.sheet_count == 2
        assert file_data.file_format == "xlsx"
        assert file_data.metadata["file_name"] == "report.xlsx"

    def test_reads_values_at_zero_based_positions(self, report_workbook_path):
        sheet = read_workbook(report_workbook_path).get_sheet_by_name("Contacts")

        assert sheet.get_cell(0, 0).value == "Contact"
        assert sheet.get_cell(1, 1).value == "Email"
        assert sheet.get_cell(2, 2).value == 30
        assert sheet.get_cell(2, 2).excel_address == "C3"
        assert sheet.max_row == 3
        assert sheet.max_column == 2

    def test_merged_interior_cells_not_stored(self, report_workbook_path):
        sheet = read_workbook(report_workbook_path).get_sheet_by_name("Contacts")

        assert sheet.get_cell(0, 1) is None

    def test_reads_merge_regions(self, report_workbook_path):
        sheet = read_workbook(report_workbook_path).get_sheet_by_name("Report")

        assert sorted(region.excel_range for region in sheet.merged_ranges) == [
            "A1:A3",
            "B1:E1",
            "B2:C2",
            "D2:E2",
        ]
        assert MergeRegion(start_row=0, start_col=1, end_row=0, end_col=4) in sheet.merged_ranges

    def test_missing_file(self, tmp_path):
        with pytest.raises(ReaderError, match="File not found"):
            read_workbook(tmp_path / "missing.xlsx")

    def test_not_a_workbook(self, tmp_path):
        path = tmp_path / "notes.xlsx"
        path.write_text("just some text")

        with pytest.raises(ReaderError, match="Could not read workbook"):
            read_workbook(path)
