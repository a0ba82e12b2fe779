"""Tool for parsing merged multi-row headers into a column tree."""

from ...core.constants import COLUMNS
from ...models.column import ColumnNode, ColumnTitle, HeaderTree, LiteralTitle, LocalizationRef
from ...models.sheet_data import SheetData
from ...models.table import TableRange
from ...utils.logging_context import get_contextual_logger
from .column_identity import assign_identity
from .merge_cell_handler import MergeIndex, ProcessedMerges

logger = get_contextual_logger(__name__)


def parse_header(
    sheet_data: SheetData,
    table_range: TableRange,
    *,
    localize: bool = True,
    align: str | None = COLUMNS.DEFAULT_ALIGN,
) -> HeaderTree:
    """
    Parse the header starting at the range's first row into a column tree.

    Only ``start_row``, ``start_col`` and ``end_col`` of the range drive the
    scan; lower header rows are reached by descending into merges that span
    several columns.

    Args:
        sheet_data: Sheet containing the header
        table_range: Resolved header range
        localize: Emit non-empty titles as localization references
        align: Alignment given to every column

    Returns:
        The complete header tree

    Raises:
        MalformedMergeRegionError: If the scan reaches a region whose end
            column precedes its start column.
    """
    columns = build_header(
        sheet_data,
        table_range.start_row,
        table_range.start_col,
        table_range.end_col,
        localize=localize,
        align=align,
    )
    return HeaderTree(columns=columns)


def build_header(
    sheet_data: SheetData,
    row: int,
    start_col: int,
    end_col: int,
    processed_merges: ProcessedMerges | None = None,
    *,
    localize: bool = True,
    align: str | None = COLUMNS.DEFAULT_ALIGN,
) -> list[ColumnNode]:
    """
    Build the ordered columns found on one header row between two columns.

    A fresh ProcessedMerges is created when none is given; pass one only to
    continue an existing traversal.
    """
    merge_index = MergeIndex(sheet_data.merged_ranges)
    if processed_merges is None:
        processed_merges = ProcessedMerges()

    return _build_row(
        sheet_data,
        merge_index,
        processed_merges,
        row=row,
        start_col=start_col,
        end_col=end_col,
        depth=0,
        parent_identity=None,
        localize=localize,
        align=align,
    )


def _build_row(
    sheet_data: SheetData,
    merge_index: MergeIndex,
    processed_merges: ProcessedMerges,
    *,
    row: int,
    start_col: int,
    end_col: int,
    depth: int,
    parent_identity: str | None,
    localize: bool,
    align: str | None,
) -> list[ColumnNode]:
    columns: list[ColumnNode] = []
    current_col = start_col

    while current_col <= end_col:
        cell = sheet_data.get_cell(row, current_col)
        merge = merge_index.find_covering(row, current_col)

        if merge is not None and processed_merges.is_processed(merge):
            logger.debug(f"Skipping consumed merge {merge.excel_range} at row {row}")
            current_col = merge.end_col + 1
            continue

        has_value = cell is not None and not cell.is_empty
        if not has_value and merge is None:
            current_col += 1
            continue

        identity = assign_identity(parent_identity, len(columns))
        column = ColumnNode(
            title=_make_title(cell.text if cell else "", localize),
            align=align,
            data_index=identity,
            key=identity,
            row=row,
            end_row=merge.end_row if merge else row,
            start_col=merge.start_col if merge else current_col,
            end_col=merge.end_col if merge else current_col,
        )

        if merge is not None:
            processed_merges.mark_processed(merge)

            if merge.spans_columns:
                logger.debug(
                    f"Descending into {merge.excel_range} at depth {depth + 1} for {identity}"
                )
                children = _build_row(
                    sheet_data,
                    merge_index,
                    processed_merges,
                    row=merge.start_row + 1,
                    start_col=merge.start_col,
                    end_col=merge.end_col,
                    depth=depth + 1,
                    parent_identity=identity,
                    localize=localize,
                    align=align,
                )
                if children:
                    column.children = children

            current_col = merge.end_col

        columns.append(column)
        current_col += 1

    return columns


def _make_title(text: str, localize: bool) -> ColumnTitle:
    if text and localize:
        return LocalizationRef(key=text)
    return LiteralTitle(text=text)
