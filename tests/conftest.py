"""Pytest configuration and shared fixtures."""

import pytest

from gridschema.config import Config
from gridschema.models.sheet_data import CellData, FileData, SheetData
from gridschema.models.table import TableRange


@pytest.fixture
def simple_header_sheet() -> SheetData:
    """Single-row header A1:C1 with two data rows, no merges."""
    sheet = SheetData(name="People")
    sheet.cells["A1"] = CellData(value="Name", data_type="text", row=0, column=0)
    sheet.cells["B1"] = CellData(value="Age", data_type="text", row=0, column=1)
    sheet.cells["C1"] = CellData(value="City", data_type="text", row=0, column=2)
    sheet.cells["A2"] = CellData(value="Alice", data_type="text", row=1, column=0)
    sheet.cells["B2"] = CellData(value=25, data_type="number", row=1, column=1)
    sheet.cells["C2"] = CellData(value="New York", data_type="text", row=1, column=2)
    sheet.cells["A3"] = CellData(value="Bob", data_type="text", row=2, column=0)
    sheet.cells["B3"] = CellData(value=30, data_type="number", row=2, column=1)
    sheet.cells["C3"] = CellData(value="London", data_type="text", row=2, column=2)
    sheet.max_row = 2
    sheet.max_column = 2
    return sheet


@pytest.fixture
def grouped_header_sheet() -> SheetData:
    """Contact merged over A1:B1 with Phone and Email beneath, Age unmerged in C1."""
    sheet = SheetData(name="Contacts")
    sheet.set_value("A1", "Contact")
    sheet.set_value("C1", "Age")
    sheet.set_value("A2", "Phone")
    sheet.set_value("B2", "Email")
    sheet.set_value("A3", "555-0100")
    sheet.set_value("B3", "ann@example.com")
    sheet.set_value("C3", 30)
    sheet.add_merge("A1:B1")
    return sheet


@pytest.fixture
def row_merge_sheet() -> SheetData:
    """ID merged down A1:A2, Score in B1."""
    sheet = SheetData(name="Scores")
    sheet.set_value("A1", "ID")
    sheet.set_value("B1", "Score")
    sheet.add_merge("A1:A2")
    return sheet


@pytest.fixture
def nested_header_sheet() -> SheetData:
    """Three-level header over A1:H3 with one data row."""
    sheet = SheetData(name="Complex Report")

    # Row 1: main categories
    sheet.set_value("A1", "Region")
    sheet.set_value("B1", "Sales Performance")
    sheet.set_value("F1", "Customer Metrics")
    sheet.add_merge("A1:A3")
    sheet.add_merge("B1:E1")
    sheet.add_merge("F1:H1")

    # Row 2: sub-categories
    sheet.set_value("B2", "Products")
    sheet.set_value("D2", "Services")
    sheet.set_value("F2", "Satisfaction")
    sheet.set_value("H2", "Retention")
    sheet.add_merge("B2:C2")
    sheet.add_merge("D2:E2")
    sheet.add_merge("F2:G2")

    # Row 3: detailed headers
    for address, value in [
        ("B3", "Q1"),
        ("C3", "Q2"),
        ("D3", "Q1"),
        ("E3", "Q2"),
        ("F3", "Score"),
        ("G3", "Responses"),
    ]:
        sheet.set_value(address, value)

    # Row 4: data
    for address, value in [
        ("A4", "North"),
        ("B4", 100),
        ("C4", 120),
        ("D4", 80),
        ("E4", 95),
        ("F4", 4.5),
        ("G4", 210),
        ("H4", 0.92),
    ]:
        sheet.set_value(address, value)

    return sheet


@pytest.fixture
def header_range() -> TableRange:
    """A1:C1 header range."""
    return TableRange(start_row=0, start_col=0, end_row=0, end_col=2)


@pytest.fixture
def nested_range() -> TableRange:
    """A1:H1 header range."""
    return TableRange(start_row=0, start_col=0, end_row=0, end_col=7)


@pytest.fixture
def workbook(
    simple_header_sheet: SheetData,
    grouped_header_sheet: SheetData,
    nested_header_sheet: SheetData,
) -> FileData:
    """In-memory workbook holding every fixture sheet."""
    return FileData(sheets=[simple_header_sheet, grouped_header_sheet, nested_header_sheet])


@pytest.fixture
def config() -> Config:
    """Default configuration without touching the environment."""
    return Config()
