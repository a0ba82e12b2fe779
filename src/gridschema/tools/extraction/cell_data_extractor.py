"""Tool for extracting data rows beneath a parsed header."""

from typing import Any

from ...models.column import HeaderTree
from ...models.sheet_data import SheetData


def extract_table_rows(
    sheet_data: SheetData,
    tree: HeaderTree,
    start_row: int,
    end_row: int,
) -> list[dict[str, Any]]:
    """
    Extract raw cell values under each leaf column.

    Each row is a dict keyed by the leaf's ``data_index`` and read from the
    leaf's first source column, plus a ``key`` entry holding the sheet row
    index. Rows whose leaf cells are all empty are skipped.

    Args:
        sheet_data: Sheet containing the data
        tree: Parsed header tree
        start_row: First data row (0-indexed)
        end_row: Last data row (inclusive)

    Returns:
        List of row dicts
    """
    leaves = tree.leaves()
    rows = []

    for row_idx in range(start_row, end_row + 1):
        record: dict[str, Any] = {}
        has_data = False

        for leaf in leaves:
            cell = sheet_data.get_cell(row_idx, leaf.start_col)
            value = None if cell is None or cell.is_empty else cell.value
            record[leaf.data_index] = value
            has_data = has_data or value is not None

        if has_data:
            record["key"] = row_idx
            rows.append(record)

    return rows
