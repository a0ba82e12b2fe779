"""Fixtures writing real workbooks to disk."""

import pytest
from openpyxl import Workbook


@pytest.fixture
def report_workbook_path(tmp_path):
    """Workbook with a grouped header sheet and a three-level header sheet."""
    workbook = Workbook()

    contacts = workbook.active
    contacts.title = "Contacts"
    contacts["A1"] = "Contact"
    contacts["C1"] = "Age"
    contacts["A2"] = "Phone"
    contacts["B2"] = "Email"
    contacts.merge_cells("A1:B1")
    contacts.append(["555-0100", "ann@example.com", 30])
    contacts.append(["555-0101", "bob@example.com", 41])

    report = workbook.create_sheet("Report")
    report["A1"] = "Region"
    report["B1"] = "Sales"
    report["B2"] = "Products"
    report["D2"] = "Services"
    report["B3"] = "Q1"
    report["C3"] = "Q2"
    report["D3"] = "Q1"
    report["E3"] = "Q2"
    report.merge_cells("A1:A3")
    report.merge_cells("B1:E1")
    report.merge_cells("B2:C2")
    report.merge_cells("D2:E2")
    report.append(["North", 100, 120, 80, 95])

    path = tmp_path / "report.xlsx"
    workbook.save(path)
    return path
