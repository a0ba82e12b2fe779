"""Basic usage example for GridSchema."""

import sys
from pathlib import Path

from gridschema import Config, GridSchema, TableConfig
from gridschema.models import FileData, SheetData


def build_from_file_example(file_path: Path):
    """Build column code for a header range in an Excel file."""
    schema = GridSchema(Config(auto_color=True))
    schema.load_workbook(file_path)

    print(f"Sheets: {', '.join(schema.sheet_names)}")
    print("-" * 50)

    result = schema.build_tables(
        [TableConfig(sheet=schema.sheet_names[0], start_cell="A1", end_cell="M1")]
    )

    for outcome in result.results:
        if outcome.succeeded:
            print(f"{outcome.config.label}:")
            print(outcome.table.code)
        else:
            print(f"{outcome.config.label}: {outcome.error_type}: {outcome.error}")


def in_memory_example():
    """Build column code from a sheet assembled in memory."""
    sheet = SheetData(name="Contacts")
    sheet.set_value("A1", "Contact")
    sheet.set_value("C1", "Age")
    sheet.set_value("A2", "Phone")
    sheet.set_value("B2", "Email")
    sheet.add_merge("A1:B1")
    sheet.add_merge("C1:C2")

    schema = GridSchema(Config(localize_titles=False, wrap_in_module=True))
    schema.use_workbook(FileData(sheets=[sheet]))
    schema.build_tables([TableConfig(sheet="Contacts", start_cell="A1", end_cell="C1")])

    # Color the "Contact" group and its sub-columns
    table = schema.apply_style("col_0", "td_blue")
    print(table.code)


if __name__ == "__main__":
    if len(sys.argv) > 1:
        build_from_file_example(Path(sys.argv[1]))
    else:
        in_memory_example()
